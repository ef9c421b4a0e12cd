"""
module dialogkit.config.dialogkitconfig

Contains the definition of the DialogKitConfig class, a dataclass that represents
a set of dialogkit configurations
"""

from dataclasses import dataclass
import os
from typing import Type
import warnings

from dataclasses_json import dataclass_json
import platformdirs

from .. import constants
from ..images.enums import ImageFormat
from .tablebackendtype import TableBackendType


@dataclass_json
@dataclass
class DialogKitConfig:
    """
    class DialogKitConfig

    Dataclass that represents a set of dialogkit configurations
    """

    version: str
    default_checkbox_message: str
    default_image_format: ImageFormat
    key_name: str
    value_name: str
    table_backend: TableBackendType

    def __post_init__(self: "DialogKitConfig") -> None:
        # values read back from json arrive as plain strings
        self.default_image_format = ImageFormat(self.default_image_format)
        self.table_backend = TableBackendType(self.table_backend)

    @staticmethod
    def default_path() -> str:
        """
        Returns the default path of the current user's configuration file

        Args:
            None

        Returns:
            str: The path where the current user's configuration file should be

        Raises:
            Nothing
        """

        return os.path.join(
            platformdirs.user_data_dir(
                appname=constants.APPLICATION_NAME,
                version=constants.APPLICATION_VERSION,
            ),
            "config.json",
        )

    @staticmethod
    def _ensure_directory(dir_path: str) -> None:
        if len(dir_path) > 0 and not os.path.isdir(dir_path):
            os.makedirs(dir_path)

    @staticmethod
    def _ensure_file(file_path: str) -> None:
        # first, ensure the directory exists
        DialogKitConfig._ensure_directory(os.path.dirname(file_path))

        # then, create the file if needed
        if not os.path.isfile(file_path):
            DialogKitConfig.make_default().to_file(file_path)

    @classmethod
    def from_file(cls: Type["DialogKitConfig"], path: str) -> "DialogKitConfig | None":
        """
        Constructs a DialogKitConfig instance from the provided JSON file. The file
        is created with default settings if it does not exist yet.

        Args:
            path (str): The file to read JSON config data from

        Returns:
            DialogKitConfig | None: A DialogKitConfig instance containing the data
                from the provided file or None if the file could not be read

        Raises:
            Nothing
        """

        # check if the config file exists and create it if not
        cls._ensure_file(path)

        # pylint: disable=broad-exception-caught
        try:
            with open(path, "r", encoding="utf-8") as config_file:
                return cls.from_json(config_file.read())
        except Exception as exc:
            warnings.warn(f"Unable to read config from target path '{path}': {exc}")
            return None

    @staticmethod
    def make_default() -> "DialogKitConfig":
        """
        Constructs a DialogKitConfig instance containing the default configuration

        Args:
            None

        Returns:
            DialogKitConfig: Instance containing default settings

        Raises:
            Nothing
        """

        return DialogKitConfig(
            version=constants.CONFIG_VERSION,
            default_checkbox_message=constants.DEFAULT_CHECKBOX_MESSAGE,
            default_image_format=ImageFormat.PNG,
            key_name=constants.DEFAULT_KEY_NAME,
            value_name=constants.DEFAULT_VALUE_NAME,
            table_backend=TableBackendType.TERMINAL_TABLES,
        )

    def to_file(self: "DialogKitConfig", output_path: str) -> None:
        """
        Writes this DialogKitConfig instance to the file with the specified path as
        JSON data.

        Args:
            output_path (str): The path of the file to write the config to

        Returns:
            Nothing

        Raises:
            Exception: If the file was unable to be written to
        """

        with open(output_path, "w", encoding="utf-8") as output_file:
            # pylint: disable=no-member
            print(self.to_json(indent=2), file=output_file)
