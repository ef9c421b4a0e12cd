from __future__ import annotations

import dataclasses
import json
import warnings

import pytest

from dialogkit.config import DialogKitConfig
from dialogkit.prompt import (
    InputType,
    MessagePosition,
    new_prompt_spec,
    PolicyAdjustmentWarning,
    PromptOptions,
    PromptSpecBuilder,
    PromptValidationException,
    SetPresentation,
)


@pytest.mark.parametrize("message", [None, ""])
def test_checkbox_without_message_gets_default(message: str | None) -> None:
    with pytest.warns(PolicyAdjustmentWarning, match="Checkbox"):
        spec = new_prompt_spec(InputType.CHECKBOX, message=message)

    assert spec is not None
    assert spec.message == "Message"


def test_checkbox_default_message_comes_from_config() -> None:
    config = DialogKitConfig.make_default()
    config.default_checkbox_message = "I agree"
    builder = PromptSpecBuilder(config)

    with pytest.warns(PolicyAdjustmentWarning):
        spec = builder.build(PromptOptions(input_type=InputType.CHECKBOX))

    assert spec.message == "I agree"


def test_checkbox_with_message_is_untouched() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        spec = new_prompt_spec(InputType.CHECKBOX, message="Remember me")

    assert spec.message == "Remember me"


def test_password_default_value_is_discarded() -> None:
    with pytest.warns(PolicyAdjustmentWarning, match="Password"):
        spec = new_prompt_spec(
            InputType.PASSWORD, message="Password", default_value="hunter2"
        )

    assert spec is not None
    assert spec.default_value is None
    assert spec.message == "Password"


@pytest.mark.parametrize(
    "input_type",
    [InputType.CHECKBOX, InputType.PASSWORD, InputType.DATE, InputType.FILE_OPEN],
)
def test_line_height_on_non_text_warns_but_builds(input_type: InputType) -> None:
    with pytest.warns(PolicyAdjustmentWarning, match="LineHeight"):
        spec = new_prompt_spec(input_type, message="Field", line_height=2)

    assert spec is not None
    assert spec.input_type == input_type
    assert spec.line_height == 2


@pytest.mark.parametrize("line_height", [0, -1, -20, True, 2.5, "3"])
@pytest.mark.parametrize(
    "input_type", [member for member in InputType if member != InputType.NONE]
)
def test_invalid_line_height_is_rejected(
    input_type: InputType, line_height: object
) -> None:
    with pytest.raises(PromptValidationException, match="LineHeight"):
        new_prompt_spec(input_type, message="Field", line_height=line_height)


def test_none_input_type_yields_no_spec_regardless_of_options() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        spec = new_prompt_spec(
            InputType.NONE,
            message=None,
            default_value="secret",
            line_height=-5,
            validate_script="not callable",
        )

    assert spec is None


def test_text_prompt_keeps_line_height_without_diagnostics() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error")
        spec = new_prompt_spec(InputType.TEXT, message="Enter value", line_height=3)

    assert spec.input_type == InputType.TEXT
    assert spec.message == "Enter value"
    assert spec.line_height == 3


def test_input_type_defaults_to_text() -> None:
    spec = new_prompt_spec(message="Name")

    assert spec.input_type == InputType.TEXT
    assert spec.read_only is False
    assert spec.validate_not_empty is False
    assert spec.validate_set is None
    assert spec.message_position == MessagePosition.TOP
    assert spec.set_presentation == SetPresentation.DROPDOWN


def test_input_type_accepts_names() -> None:
    with pytest.warns(PolicyAdjustmentWarning):
        spec = new_prompt_spec("Checkbox")

    assert spec.input_type == InputType.CHECKBOX


def test_unknown_input_type_is_rejected() -> None:
    with pytest.raises(PromptValidationException, match="input type"):
        new_prompt_spec("slider")


def test_prompt_spec_is_immutable() -> None:
    spec = new_prompt_spec(message="Name")

    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.message = "Other"  # type: ignore[misc]


def test_validation_rules_are_stored_not_applied() -> None:
    calls = []

    def validate_script(value: object) -> bool:
        calls.append(value)
        return False

    spec = new_prompt_spec(
        message="Colour",
        validate_not_empty=True,
        validate_set=["red", "green", "red", "blue"],
        validate_script=validate_script,
        read_only=True,
    )

    assert spec.validate_not_empty is True
    assert spec.validate_set == ("red", "green", "blue")
    assert spec.validate_script is validate_script
    assert spec.read_only is True
    assert calls == []


def test_validate_set_requires_text_values() -> None:
    with pytest.raises(PromptValidationException, match="ValidateSet"):
        new_prompt_spec(validate_set=["one", 2])


def test_validate_script_must_be_callable() -> None:
    with pytest.raises(PromptValidationException, match="ValidateScript"):
        new_prompt_spec(validate_script="value -gt 3")


def test_collapsed_requires_collapsible() -> None:
    with pytest.warns(PolicyAdjustmentWarning, match="Collapsed"):
        spec = new_prompt_spec(message="Details", group="Advanced", collapsed=True)

    assert spec.collapsed is False

    spec = new_prompt_spec(
        message="Details", group="Advanced", collapsible=True, collapsed=True
    )
    assert spec.collapsed is True


def test_serialization_skips_validate_script() -> None:
    spec = new_prompt_spec(
        InputType.TEXT,
        message="Pick",
        validate_set=["a", "b"],
        validate_script=lambda value: value == "a",
    )

    assert "validate_script" not in spec.to_dict()

    serialized = json.loads(spec.to_json())
    assert serialized["input_type"] == "text"
    assert serialized["validate_set"] == ["a", "b"]
    assert "validate_script" not in serialized


def test_build_many_skips_none_and_keeps_order() -> None:
    builder = PromptSpecBuilder()
    specs = list(
        builder.build_many(
            [
                PromptOptions(message="First"),
                PromptOptions(input_type=InputType.NONE),
                PromptOptions(input_type=InputType.DATE, message="When"),
            ]
        )
    )

    assert [spec.message for spec in specs] == ["First", "When"]


def test_build_many_fails_only_when_bad_options_are_reached() -> None:
    specs = PromptSpecBuilder().build_many(
        [PromptOptions(message="Fine"), PromptOptions(line_height=0)]
    )

    assert next(specs).message == "Fine"
    with pytest.raises(PromptValidationException):
        next(specs)
