"""
module dialogkit.prompt.dataclasses.promptoptions

Contains the definition of the PromptOptions dataclass, the full set of options
that a caller may supply when requesting a prompt specification. Every option
is present for every input type; which of them matter is decided by the
PromptSpecBuilder.
"""

from dataclasses import dataclass
from typing import Any, Callable, Iterable

from ..enums import InputType, MessagePosition, SetPresentation


@dataclass
class PromptOptions:
    """
    class PromptOptions

    The full set of options that a caller may supply when requesting a
    prompt specification
    """

    # pylint: disable=too-many-instance-attributes

    input_type: InputType = InputType.TEXT
    message: str | None = None
    default_value: str | None = None
    line_height: int | None = None
    read_only: bool = False
    validate_not_empty: bool = False
    validate_set: Iterable[str] | None = None
    validate_script: Callable[[Any], bool] | None = None

    name: str | None = None
    message_position: MessagePosition = MessagePosition.TOP
    group: str | None = None
    tab: str | None = None
    collapsible: bool = False
    collapsed: bool = False
    show_separator: bool = False
    set_presentation: SetPresentation = SetPresentation.DROPDOWN
