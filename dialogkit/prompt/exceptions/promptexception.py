"""
module dialogkit.prompt.exceptions.promptexception

Contains the definition of the PromptException class, a base class that is
the parent for exception classes thrown while building prompt specifications
"""

from ...dialogkitexception import DialogKitException


class PromptException(DialogKitException):
    """
    class PromptException

    A base exception class that is the parent for exception classes
    thrown while building prompt specifications
    """
