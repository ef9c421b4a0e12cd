"""
module dialogkit.tables.exceptions.tableexception

Contains the definition of the TableException class, a base class that is
the parent for exception classes thrown while reshaping or rendering tabular
data
"""

from ...dialogkitexception import DialogKitException


class TableException(DialogKitException):
    """
    class TableException

    A base exception class that is the parent for exception classes
    thrown while reshaping or rendering tabular data
    """
