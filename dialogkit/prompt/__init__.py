"""
module dialogkit.prompt

Contains the prompt specification builder along with the enums, dataclasses
and exceptions that describe a single dialog input field
"""

from .dataclasses import PromptOptions, PromptSpec
from .enums import InputType, MessagePosition, SetPresentation
from .exceptions import (
    PolicyAdjustmentWarning,
    PromptException,
    PromptValidationException,
)
from .promptspecbuilder import new_prompt_spec, PromptSpecBuilder
