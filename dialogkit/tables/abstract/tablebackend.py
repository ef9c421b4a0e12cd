from abc import ABCMeta, abstractmethod
from typing import Any

from ... import constants
from ..recordset import RecordSet


class TableBackend(metaclass=ABCMeta):
    # pylint: disable=too-few-public-methods

    def __init__(self: "TableBackend") -> None: ...

    @abstractmethod
    def construct_table(self: "TableBackend", record_set: RecordSet) -> str:
        """
        Renders the provided record set as a string that a dialog region
        can display as-is

        Args:
            record_set (RecordSet): The columns and rows to render

        Returns:
            str: The rendered table

        Raises:
            Nothing
        """

    @staticmethod
    def field_to_str(field: Any) -> str:
        if field is None:
            return constants.NULL_DISPLAY_VALUE

        if isinstance(field, memoryview):
            return str(field.tobytes())

        return str(field)
