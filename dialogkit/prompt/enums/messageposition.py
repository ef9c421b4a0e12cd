from enum import StrEnum


class MessagePosition(StrEnum):
    TOP = "top"
    LEFT = "left"
