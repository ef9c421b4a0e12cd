"""
module dialogkit.dialogkitexception

Contains the definition of the DialogKitException class, the parent of all
exceptions directly thrown by dialogkit and its components
"""


class DialogKitException(RuntimeError):
    """
    class DialogKitException

    The parent class of all exceptions directly thrown by dialogkit
    """
