from enum import StrEnum


class InputType(StrEnum):
    NONE = "none"
    TEXT = "text"
    CHECKBOX = "checkbox"
    PASSWORD = "password"
    DATE = "date"
    FILE_OPEN = "file_open"
    FILE_SAVE = "file_save"
    FOLDER_OPEN = "folder_open"
    LINK = "link"
