from __future__ import annotations

from collections import namedtuple
from dataclasses import dataclass
from itertools import islice
from types import GeneratorType

import pytest

from dialogkit.tables import (
    convert_to_long,
    InvalidRecordException,
    RecordSet,
    record_properties,
    to_record_set,
)


@dataclass
class Server:
    host: str
    port: int


class SlottedServer:
    __slots__ = ("host", "port")

    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port


class PlainServer:
    def __init__(self, host: str, port: int) -> None:
        self.host = host
        self.port = port


def test_single_record_becomes_ordered_pairs() -> None:
    pairs = list(
        convert_to_long([{"A": 1, "B": "x"}], key_name="Name", value_name="Value")
    )

    assert pairs == [{"Name": "A", "Value": 1}, {"Name": "B", "Value": "x"}]


def test_default_column_names() -> None:
    assert list(convert_to_long([{"A": 1}])) == [{"Name": "A", "Value": 1}]


def test_custom_column_names() -> None:
    pairs = list(convert_to_long([{"A": 1}], key_name="Property", value_name="Setting"))

    assert pairs == [{"Property": "A", "Setting": 1}]


def test_empty_input_gives_empty_output() -> None:
    assert list(convert_to_long([])) == []


def test_empty_record_contributes_nothing() -> None:
    pairs = list(convert_to_long([{"A": 1}, {}, {"B": 2}]))

    assert pairs == [{"Name": "A", "Value": 1}, {"Name": "B", "Value": 2}]


def test_records_and_properties_keep_their_order() -> None:
    Point = namedtuple("Point", ["x", "y"])
    records = [
        Server("db", 5432),
        Point(3, 4),
        PlainServer("web", 80),
        SlottedServer("cache", 6379),
    ]

    assert [(pair["Name"], pair["Value"]) for pair in convert_to_long(records)] == [
        ("host", "db"),
        ("port", 5432),
        ("x", 3),
        ("y", 4),
        ("host", "web"),
        ("port", 80),
        ("host", "cache"),
        ("port", 6379),
    ]


def test_values_are_not_coerced() -> None:
    nested = {"inner": [1, 2]}
    pairs = list(convert_to_long([{"nested": nested, "missing": None}]))

    assert pairs[0]["Value"] is nested
    assert pairs[1]["Value"] is None


def test_single_mapping_or_dataclass_is_one_record() -> None:
    assert list(convert_to_long({"A": 1})) == [{"Name": "A", "Value": 1}]
    assert len(list(convert_to_long(Server("db", 1)))) == 2


def test_output_is_lazy() -> None:
    pairs = convert_to_long([{"A": 1}, 42])

    assert isinstance(pairs, GeneratorType)
    assert list(islice(pairs, 1)) == [{"Name": "A", "Value": 1}]
    with pytest.raises(InvalidRecordException, match="int"):
        next(pairs)


def test_matching_column_names_are_rejected_immediately() -> None:
    with pytest.raises(InvalidRecordException, match="different names"):
        convert_to_long([{"A": 1}], key_name="Key", value_name="Key")


def test_record_properties_of_unenumerable_record() -> None:
    with pytest.raises(InvalidRecordException):
        record_properties(object())


def test_to_record_set_collects_pairs() -> None:
    record_set = to_record_set(convert_to_long([{"A": 1, "B": None}]))

    assert record_set == RecordSet(
        columns=["Name", "Value"], records=[("A", 1), ("B", None)]
    )


class ExtendedServer(SlottedServer):
    def __init__(self, host: str, port: int, region: str) -> None:
        super().__init__(host, port)
        self.region = region


def test_subclass_of_slotted_record_keeps_slot_attributes() -> None:
    assert record_properties(ExtendedServer("db", 5432, "eu")) == [
        ("region", "eu"),
        ("host", "db"),
        ("port", 5432),
    ]
