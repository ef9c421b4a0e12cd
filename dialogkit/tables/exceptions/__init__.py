"""
module dialogkit.tables.exceptions

Contains all definitions of exceptions specifically thrown while reshaping
or rendering tabular data
"""

from .invalidrecordexception import InvalidRecordException
from .tableexception import TableException
