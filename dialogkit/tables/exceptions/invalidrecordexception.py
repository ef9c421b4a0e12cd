"""
module dialogkit.tables.exceptions.invalidrecordexception

Contains the definition of the InvalidRecordException class, an exception
that is thrown whenever a record's properties can not be enumerated or the
requested key and value column names would collide
"""

from .tableexception import TableException


class InvalidRecordException(TableException):
    """
    class InvalidRecordException

    An exception that is thrown whenever a record's properties can not be
    enumerated or the requested key and value column names would collide
    """
