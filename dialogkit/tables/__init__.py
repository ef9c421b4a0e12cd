"""
module dialogkit.tables

Contains the table reshaper that turns wide records into key/value pairs along
with the RecordSet dataclass and the backends that render it as text
"""

from .abstract import TableBackend
from .exceptions import InvalidRecordException, TableException
from .recordset import RecordSet
from .tablereshaper import convert_to_long, record_properties, to_record_set
