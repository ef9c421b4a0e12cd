"""
module dialogkit.prompt.dataclasses.promptspec

Contains the definition of the PromptSpec dataclass, the immutable description
of one dialog input field that is handed to a dialog renderer
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Tuple

from dataclasses_json import config, dataclass_json, Exclude

from ..enums import InputType, MessagePosition, SetPresentation


@dataclass_json
@dataclass(frozen=True)
class PromptSpec:
    """
    class PromptSpec

    The immutable description of one dialog input field. The validation rules
    are only stored here; applying them when the dialog is submitted is up to
    the renderer. validate_script is never serialized.
    """

    # pylint: disable=too-many-instance-attributes

    input_type: InputType
    message: str | None = None
    default_value: str | None = None
    line_height: int | None = None
    read_only: bool = False
    validate_not_empty: bool = False
    validate_set: Tuple[str, ...] | None = None
    validate_script: Callable[[Any], bool] | None = field(
        default=None, compare=False, metadata=config(exclude=Exclude.ALWAYS)
    )

    name: str | None = None
    message_position: MessagePosition = MessagePosition.TOP
    group: str | None = None
    tab: str | None = None
    collapsible: bool = False
    collapsed: bool = False
    show_separator: bool = False
    set_presentation: SetPresentation = SetPresentation.DROPDOWN
