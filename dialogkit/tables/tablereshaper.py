"""
module dialogkit.tables.tablereshaper

Contains the functions that reshape "wide" records (one record with many
named properties) into a "long" series of key/value pairs so that arbitrary
data can be shown in a two-column dialog table
"""

from dataclasses import fields, is_dataclass
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Tuple

from .. import constants
from .exceptions import InvalidRecordException
from .recordset import RecordSet


def convert_to_long(
    records: Iterable[Any] | Mapping[str, Any],
    key_name: str = constants.DEFAULT_KEY_NAME,
    value_name: str = constants.DEFAULT_VALUE_NAME,
) -> Iterator[Dict[str, Any]]:
    """
    Reshapes each of the provided records into one key/value pair per property.
    Records are processed in input order and properties in the record's natural
    order. Values are carried through without any conversion. A single mapping
    or dataclass instance is treated as a series of one.

    Args:
        records (Iterable[Any] | Mapping[str, Any]): The records to reshape
        key_name (str): The name of the column holding property names
        value_name (str): The name of the column holding property values

    Returns:
        Iterator[Dict[str, Any]]: The key/value pairs, produced lazily

    Raises:
        InvalidRecordException: If key_name and value_name are equal (raised
            immediately) or when a record whose properties can not be
            enumerated is reached
    """

    if key_name == value_name:
        raise InvalidRecordException(
            f"Key and value columns must have different names, both are '{key_name}'"
        )

    if isinstance(records, Mapping) or (
        is_dataclass(records) and not isinstance(records, type)
    ):
        records = (records,)

    return _iter_pairs(records, key_name, value_name)


def record_properties(record: Any) -> List[Tuple[Any, Any]]:
    """
    Returns the (name, value) properties of a single record in its natural order:
    insertion order for mappings, field order for dataclasses and named tuples
    and attribute order for any other object, followed by any slot attributes

    Args:
        record (Any): The record to enumerate

    Returns:
        List[Tuple[Any, Any]]: The properties of the record

    Raises:
        InvalidRecordException: If the record has no enumerable properties
    """

    if isinstance(record, Mapping):
        return list(record.items())

    if is_dataclass(record) and not isinstance(record, type):
        return [(field.name, getattr(record, field.name)) for field in fields(record)]

    # named tuples
    if isinstance(record, tuple) and hasattr(record, "_fields"):
        return list(zip(record._fields, record))

    has_dict: bool = hasattr(record, "__dict__")
    properties: List[Tuple[Any, Any]] = list(vars(record).items()) if has_dict else []

    # slots declared anywhere in the class hierarchy follow the instance dict
    slot_names: List[str] = [
        slot_name
        for record_type in reversed(type(record).__mro__)
        for slot_name in _slots_of(record_type)
    ]
    if has_dict or len(slot_names) > 0:
        return properties + [
            (slot_name, getattr(record, slot_name))
            for slot_name in dict.fromkeys(slot_names)
            if hasattr(record, slot_name)
        ]

    raise InvalidRecordException(
        "Unable to enumerate the properties of a record of type "
        f"{type(record).__name__}"
    )


def to_record_set(
    pairs: Iterable[Dict[str, Any]],
    key_name: str = constants.DEFAULT_KEY_NAME,
    value_name: str = constants.DEFAULT_VALUE_NAME,
) -> RecordSet:
    """
    Collects key/value pairs produced by convert_to_long() into a two column
    RecordSet that a table backend can render

    Args:
        pairs (Iterable[Dict[str, Any]]): The key/value pairs to collect
        key_name (str): The name of the column holding property names
        value_name (str): The name of the column holding property values

    Returns:
        RecordSet: The collected pairs

    Raises:
        KeyError: If a pair is missing either column
    """

    return RecordSet(
        columns=[key_name, value_name],
        records=[(pair[key_name], pair[value_name]) for pair in pairs],
    )


def _iter_pairs(
    records: Iterable[Any], key_name: str, value_name: str
) -> Iterator[Dict[str, Any]]:
    for record in records:
        for property_name, property_value in record_properties(record):
            yield {key_name: property_name, value_name: property_value}


def _slots_of(record_type: type) -> Tuple[str, ...]:
    slots: Any = record_type.__dict__.get("__slots__", ())
    if isinstance(slots, str):
        slots = (slots,)

    return tuple(
        slot_name for slot_name in slots if slot_name not in ("__dict__", "__weakref__")
    )
