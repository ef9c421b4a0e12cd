"""
module dialogkit.prompt.promptspecbuilder

Contains the definition of the PromptSpecBuilder class, which checks a set of
PromptOptions against the rules of the requested input type and assembles an
immutable PromptSpec. Also contains new_prompt_spec(), a keyword shortcut for
building a single specification with the default configuration.
"""

from dataclasses import replace
from enum import Enum
from typing import Any, Iterable, Iterator, Tuple, Type
import warnings

from ..config import DialogKitConfig
from .dataclasses import PromptOptions, PromptSpec
from .enums import InputType, MessagePosition, SetPresentation
from .exceptions import PolicyAdjustmentWarning, PromptValidationException


class PromptSpecBuilder:
    """
    class PromptSpecBuilder

    Checks a set of PromptOptions against the rules of the requested input
    type and assembles an immutable PromptSpec. Values that are invalid for
    every input type raise a PromptValidationException while values that only
    conflict with the chosen input type are corrected with a
    PolicyAdjustmentWarning.
    """

    __config: DialogKitConfig

    def __init__(
        self: "PromptSpecBuilder", config: DialogKitConfig | None = None
    ) -> None:
        self.__config = config if config is not None else DialogKitConfig.make_default()

    def build(self: "PromptSpecBuilder", options: PromptOptions) -> PromptSpec | None:
        """
        Builds a PromptSpec from the provided options

        Args:
            options (PromptOptions): The options describing the requested input field

        Returns:
            PromptSpec | None: The finished prompt specification or None if the
                options requested no input field (InputType.NONE)

        Raises:
            PromptValidationException: If the line height is not a positive integer
                or an option holds a value of the wrong kind
        """

        input_type: InputType = self._coerce_enum(
            InputType, options.input_type, "input type"
        )

        # no field was requested so none of the remaining options matter
        if input_type == InputType.NONE:
            return None

        self._validate_line_height(options.line_height)
        options = replace(
            options,
            input_type=input_type,
            message_position=self._coerce_enum(
                MessagePosition, options.message_position, "message position"
            ),
            set_presentation=self._coerce_enum(
                SetPresentation, options.set_presentation, "set presentation"
            ),
        )

        if options.line_height is not None and input_type != InputType.TEXT:
            self._warn(
                f"LineHeight is only meaningful for Text input; it is ignored for "
                f"{input_type} input"
            )

        match input_type:
            case InputType.CHECKBOX:
                if not options.message:
                    self._warn(
                        "Checkbox input requires a message; using "
                        f"'{self.config.default_checkbox_message}'"
                    )
                    options = replace(
                        options, message=self.config.default_checkbox_message
                    )
            case InputType.PASSWORD:
                if options.default_value:
                    self._warn(
                        "Password input can not have a default value; it was discarded"
                    )
                options = replace(options, default_value=None)

        if options.collapsed and not options.collapsible:
            self._warn(
                "Collapsed is only meaningful for collapsible input; ignoring it"
            )
            options = replace(options, collapsed=False)

        if options.validate_script is not None and not callable(
            options.validate_script
        ):
            raise PromptValidationException(
                "ValidateScript must be callable, not "
                f"{type(options.validate_script).__name__}"
            )

        return PromptSpec(
            input_type=input_type,
            message=options.message,
            default_value=options.default_value,
            line_height=options.line_height,
            read_only=options.read_only,
            validate_not_empty=options.validate_not_empty,
            validate_set=self._normalize_validate_set(options.validate_set),
            validate_script=options.validate_script,
            name=options.name,
            message_position=options.message_position,
            group=options.group,
            tab=options.tab,
            collapsible=options.collapsible,
            collapsed=options.collapsed,
            show_separator=options.show_separator,
            set_presentation=options.set_presentation,
        )

    def build_many(
        self: "PromptSpecBuilder", options_series: Iterable[PromptOptions]
    ) -> Iterator[PromptSpec]:
        """
        Lazily builds a PromptSpec for each set of options in the provided series.
        Options that request no input field are skipped.

        Args:
            options_series (Iterable[PromptOptions]): The option sets to build

        Returns:
            Iterator[PromptSpec]: The built prompt specifications in input order

        Raises:
            PromptValidationException: When the failing option set is reached
        """

        for options in options_series:
            if (prompt_spec := self.build(options)) is not None:
                yield prompt_spec

    @staticmethod
    def _coerce_enum(enum_type: Type[Enum], value: Any, description: str) -> Any:
        try:
            return enum_type(value.lower() if isinstance(value, str) else value)
        except ValueError as ve:
            raise PromptValidationException(
                f"Unknown {description} {value!r}; expected one of: "
                + ", ".join(member.value for member in enum_type)
            ) from ve

    @property
    def config(self: "PromptSpecBuilder") -> DialogKitConfig:
        return self.__config

    @staticmethod
    def _normalize_validate_set(
        validate_set: Iterable[str] | None,
    ) -> Tuple[str, ...] | None:
        if validate_set is None:
            return None

        if isinstance(validate_set, str):
            validate_set = [validate_set]

        allowed_values: Tuple[str, ...] = tuple(dict.fromkeys(validate_set))
        for allowed_value in allowed_values:
            if not isinstance(allowed_value, str):
                raise PromptValidationException(
                    f"ValidateSet may only contain text values, not {allowed_value!r}"
                )

        return allowed_values

    @staticmethod
    def _validate_line_height(line_height: Any) -> None:
        if line_height is None:
            return

        # bool is an int subclass but True is not a line count
        if (
            isinstance(line_height, bool)
            or not isinstance(line_height, int)
            or line_height <= 0
        ):
            raise PromptValidationException(
                f"LineHeight must be a positive integer, not {line_height!r}"
            )

    @staticmethod
    def _warn(message: str) -> None:
        warnings.warn(message, PolicyAdjustmentWarning, stacklevel=3)


def new_prompt_spec(
    input_type: InputType = InputType.TEXT, **options: Any
) -> PromptSpec | None:
    """
    Builds a single PromptSpec using the default configuration

    Args:
        input_type (InputType): The kind of input field to describe
        **options (Any): Any other field of PromptOptions

    Returns:
        PromptSpec | None: The finished prompt specification or None if
            input_type is InputType.NONE

    Raises:
        TypeError: If an unknown option name is provided
        PromptValidationException: If an option holds an invalid value
    """

    return PromptSpecBuilder().build(PromptOptions(input_type=input_type, **options))
