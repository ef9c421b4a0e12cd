from __future__ import annotations

import pytest

from dialogkit.config import TableBackendType
from dialogkit.tables import RecordSet, TableBackend
from dialogkit.tables.backends import table_backends_by_name
from dialogkit.tables.backends.csv import CsvBackend
from dialogkit.tables.backends.tabulate import TabulateBackend
from dialogkit.tables.backends.terminaltables import TerminalTablesBackend

RECORD_SET = RecordSet(
    columns=["Name", "Value"],
    records=[
        ("host", "db"),
        ("port", 5432),
        ("password", None),
        ("raw", memoryview(b"ab")),
    ],
)


def test_every_backend_type_is_registered() -> None:
    assert set(table_backends_by_name) == set(TableBackendType)


def test_csv_backend_output() -> None:
    assert CsvBackend().construct_table(RECORD_SET) == (
        "Name,Value\nhost,db\nport,5432\npassword,NULL\nraw,b'ab'\n"
    )


@pytest.mark.parametrize("backend_type", [TabulateBackend, TerminalTablesBackend])
def test_box_backends_render_every_cell(backend_type: type[TableBackend]) -> None:
    table = backend_type().construct_table(RECORD_SET)

    for expected in ("Name", "Value", "host", "db", "5432", "NULL", "b'ab'"):
        assert expected in table
    assert len(table.splitlines()) > len(RECORD_SET.records)


def test_field_to_str() -> None:
    assert TableBackend.field_to_str(None) == "NULL"
    assert TableBackend.field_to_str(3.5) == "3.5"
    assert TableBackend.field_to_str(memoryview(b"x")) == "b'x'"
