"""
module dialogkit.prompt.exceptions

Contains all definitions of exceptions and warnings specifically raised while
building prompt specifications
"""

from .policyadjustmentwarning import PolicyAdjustmentWarning
from .promptexception import PromptException
from .promptvalidationexception import PromptValidationException
