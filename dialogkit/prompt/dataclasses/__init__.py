"""
module dialogkit.prompt.dataclasses

Contains all dataclass definitions related to describing a single dialog
input field, both the options supplied by a caller and the finished,
immutable prompt specification
"""

from .promptoptions import PromptOptions
from .promptspec import PromptSpec
