"""
module dialogkit.prompt.enums

Contains the definitions of all enum classes used to describe a prompt
specification
"""

from .inputtype import InputType
from .messageposition import MessagePosition
from .setpresentation import SetPresentation
