from dialogkit import __version__


APPLICATION_NAME: str = __name__[: __name__.index(".")]
APPLICATION_VERSION: str = __version__

CONFIG_VERSION: str = "0.1"

DEFAULT_CHECKBOX_MESSAGE: str = "Message"

DEFAULT_KEY_NAME: str = "Name"
DEFAULT_VALUE_NAME: str = "Value"

DATA_URI_PREFIX: str = "data:"
DATA_URI_BASE64_MARKER: str = ";base64,"

NULL_DISPLAY_VALUE: str = "NULL"
