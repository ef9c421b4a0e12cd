from typing import Any, Dict, Iterable, Iterator, Mapping

from PIL import Image

from . import images, tables
from .config import DialogKitConfig
from .context import DialogKitContext
from .images import ImageFormat
from .images.imagecodec import ImagePath
from .prompt import InputType, PromptOptions, PromptSpec, PromptSpecBuilder
from .tables.backends import table_backends_by_name
from .tables.backends.terminaltables import TerminalTablesBackend


class DialogKit:
    """
    class DialogKit

    Binds a configuration to the prompt specification builder, the image codec
    and the table reshaper so that the configured defaults (checkbox message,
    image format, key/value column names and table backend) are applied to
    every call
    """

    __context: DialogKitContext

    def __init__(
        self: "DialogKit",
        config_path: str | None = None,
        config: DialogKitConfig | None = None,
    ) -> None:
        # an explicit config wins over the config file. otherwise, fall back to
        # a default config
        if config is None and config_path is not None:
            config = DialogKitConfig.from_file(config_path)
        if config is None:
            config = DialogKitConfig.make_default()

        self.__context = DialogKitContext(
            config=config,
            config_path=config_path,
            prompt_builder=PromptSpecBuilder(config),
            table_backend=(
                table_backends_by_name[config.table_backend]
                if config.table_backend in table_backends_by_name
                else TerminalTablesBackend
            )(),
        )

    def build_prompts(
        self: "DialogKit", options_series: Iterable[PromptOptions]
    ) -> Iterator[PromptSpec]:
        return self.context.prompt_builder.build_many(options_series)

    @property
    def context(self: "DialogKit") -> DialogKitContext:
        return self.__context

    def convert_to_long(
        self: "DialogKit",
        records: Iterable[Any] | Mapping[str, Any],
        key_name: str | None = None,
        value_name: str | None = None,
    ) -> Iterator[Dict[str, Any]]:
        return tables.convert_to_long(
            records,
            key_name=key_name if key_name is not None else self.context.config.key_name,
            value_name=(
                value_name if value_name is not None else self.context.config.value_name
            ),
        )

    def decode_images(
        self: "DialogKit", texts: str | Iterable[str]
    ) -> Iterator[Image.Image]:
        return images.decode_images(texts)

    def encode_images(
        self: "DialogKit",
        paths: ImagePath | Iterable[ImagePath],
        image_format: ImageFormat | None = None,
    ) -> Iterator[str]:
        return images.encode_images(
            paths,
            image_format=(
                image_format
                if image_format is not None
                else self.context.config.default_image_format
            ),
        )

    def new_prompt(
        self: "DialogKit", input_type: InputType = InputType.TEXT, **options: Any
    ) -> PromptSpec | None:
        return self.context.prompt_builder.build(
            PromptOptions(input_type=input_type, **options)
        )

    def render_table(
        self: "DialogKit", records: Iterable[Any] | Mapping[str, Any]
    ) -> str:
        """
        Reshapes the provided records into key/value pairs and renders them with
        the configured table backend

        Args:
            records (Iterable[Any] | Mapping[str, Any]): The records to render

        Returns:
            str: The rendered two column table

        Raises:
            InvalidRecordException: If a record's properties can not be enumerated
        """

        return self.context.table_backend.construct_table(
            tables.to_record_set(
                self.convert_to_long(records),
                key_name=self.context.config.key_name,
                value_name=self.context.config.value_name,
            )
        )
