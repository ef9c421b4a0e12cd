"""
module dialogkit.prompt.exceptions.promptvalidationexception

Contains the definition of the PromptValidationException class, an exception
that is thrown whenever a prompt option holds a value that can never be valid
(e.g., a line height that is not a positive integer)
"""

from .promptexception import PromptException


class PromptValidationException(PromptException):
    """
    class PromptValidationException

    An exception that is thrown whenever a prompt option holds a value
    that can never be valid
    """
