from enum import StrEnum


class SetPresentation(StrEnum):
    DROPDOWN = "dropdown"
    RADIO = "radio"
