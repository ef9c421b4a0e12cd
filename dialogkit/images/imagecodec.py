"""
module dialogkit.images.imagecodec

Contains the functions that convert images to and from the portable base64 text
representation embedded in dialogs. Encoding re-encodes an image file into the
requested format. Decoding always re-encodes into the normalized format (PNG)
and detaches the resulting bitmap from every intermediate buffer.
"""

import base64
import binascii
import io
import os
from typing import Any, Dict, Iterable, Iterator, Set, Type

from PIL import Image, UnidentifiedImageError

from .. import constants
from .enums import ImageFormat
from .exceptions import ImageDecodeException, ImageEncodeException, ImageReadException

ImagePath = str | os.PathLike

NORMALIZED_IMAGE_FORMAT: ImageFormat = ImageFormat.PNG

# modes each format can store as-is; anything else is converted before saving
_writable_modes_by_format: Dict[ImageFormat, Set[str]] = {
    ImageFormat.JPEG: {"CMYK", "L", "RGB"},
    ImageFormat.PNG: {"1", "I", "I;16", "I;16B", "L", "LA", "P", "RGB", "RGBA"},
}


def decode_image(text: str) -> Image.Image:
    """
    Decodes a single base64 image representation into a bitmap. The decoded
    image is re-encoded into the normalized image format and the returned
    bitmap owns its pixel data, so no intermediate buffer outlives this call.

    Args:
        text (str): The base64 text, optionally prefixed as a data URI

    Returns:
        Image.Image: The fully loaded, detached bitmap

    Raises:
        ImageDecodeException: If the text is not valid base64 or the decoded
            bytes are not an image
    """

    raw_bytes: bytes = _text_to_bytes(text)

    with io.BytesIO(raw_bytes) as source_buffer:
        try:
            with Image.open(source_buffer) as source_image:
                source_image.load()
                normalized_bytes: bytes = _image_to_bytes(
                    source_image, NORMALIZED_IMAGE_FORMAT
                )
        except (
            Image.DecompressionBombError,
            ImageEncodeException,
            OSError,
            SyntaxError,
            ValueError,
        ) as exc:
            raise ImageDecodeException(
                f"Decoded data is not a valid image: {exc}"
            ) from exc

    with io.BytesIO(normalized_bytes) as normalized_buffer:
        with Image.open(normalized_buffer) as normalized_image:
            normalized_image.load()

            # copy() gives the bitmap its own storage detached from the buffer
            return normalized_image.copy()


def decode_images(texts: str | Iterable[str]) -> Iterator[Image.Image]:
    """
    Lazily decodes each of the provided base64 image representations. A single
    string is treated as a series of one.

    Args:
        texts (str | Iterable[str]): The base64 text(s) to decode

    Returns:
        Iterator[Image.Image]: One detached bitmap per text, in input order

    Raises:
        ImageDecodeException: When a text that can not be decoded is reached
    """

    for text in _as_series(texts, str):
        yield decode_image(text)


def encode_image(path: ImagePath, image_format: ImageFormat = ImageFormat.PNG) -> str:
    """
    Loads the image file at the provided path, re-encodes it into the requested
    image format and returns the base64 text of the result

    Args:
        path (ImagePath): The image file to encode
        image_format (ImageFormat): The raster format to re-encode into

    Returns:
        str: The base64 text of the re-encoded image

    Raises:
        ImageReadException: If the file does not exist or can not be read
        ImageDecodeException: If the file is not an image Pillow can load
        ImageEncodeException: If the image can not be written in image_format
    """

    image_format = _coerce_format(image_format)

    try:
        image_file: Image.Image = Image.open(path)
    except (Image.DecompressionBombError, UnidentifiedImageError) as exc:
        raise ImageDecodeException(
            f"File '{path}' is not a valid image: {exc}"
        ) from exc
    except OSError as ose:
        raise ImageReadException(f"Unable to read image file '{path}': {ose}") from ose

    with image_file as image:
        try:
            image.load()
        except (Image.DecompressionBombError, OSError, SyntaxError) as exc:
            raise ImageDecodeException(
                f"Unable to load image data from '{path}': {exc}"
            ) from exc

        return base64.b64encode(_image_to_bytes(image, image_format)).decode("ascii")


def encode_images(
    paths: ImagePath | Iterable[ImagePath],
    image_format: ImageFormat = ImageFormat.PNG,
) -> Iterator[str]:
    """
    Lazily encodes each of the provided image files. A single path is treated
    as a series of one. Calling this function again with the same inputs
    restarts the sequence.

    Args:
        paths (ImagePath | Iterable[ImagePath]): The image file(s) to encode
        image_format (ImageFormat): The raster format to re-encode into

    Returns:
        Iterator[str]: One base64 string per path, in input order

    Raises:
        ImageCodecException: When a path that can not be encoded is reached
    """

    for path in _as_series(paths, (str, os.PathLike)):
        yield encode_image(path, image_format)


def to_data_uri(text: str, image_format: ImageFormat = ImageFormat.PNG) -> str:
    """
    Wraps base64 image text in a data URI so it can be embedded directly
    in markup

    Args:
        text (str): Base64 text produced by encode_image()
        image_format (ImageFormat): The format the text was encoded with

    Returns:
        str: The data URI
    """

    image_format = _coerce_format(image_format)
    return (
        f"{constants.DATA_URI_PREFIX}image/{image_format.value.lower()}"
        f"{constants.DATA_URI_BASE64_MARKER}{text}"
    )


def _as_series(values: Any, single_types: Type | tuple) -> Iterable:
    if isinstance(values, single_types):
        return (values,)

    return values


def _coerce_format(image_format: ImageFormat | str) -> ImageFormat:
    try:
        return ImageFormat(
            image_format.upper() if isinstance(image_format, str) else image_format
        )
    except ValueError as ve:
        raise ImageEncodeException(
            f"Unsupported image format {image_format!r}; expected one of: "
            + ", ".join(member.value for member in ImageFormat)
        ) from ve


def _conversion_mode(image_format: ImageFormat, mode: str) -> str:
    if image_format == ImageFormat.JPEG:
        return "RGB"

    if mode == "F" or mode.startswith("I;16"):
        return "I"

    if mode == "La":
        return "LA"

    if mode.endswith(("A", "a")):
        return "RGBA"

    return "RGB"


def _image_to_bytes(image: Image.Image, image_format: ImageFormat) -> bytes:
    writable_modes: Set[str] | None = _writable_modes_by_format.get(image_format)
    if writable_modes is not None and image.mode not in writable_modes:
        image = image.convert(_conversion_mode(image_format, image.mode))

    with io.BytesIO() as output_buffer:
        try:
            image.save(output_buffer, format=image_format.value)
        except (OSError, KeyError, ValueError) as exc:
            raise ImageEncodeException(
                f"Unable to write {image.mode} image as {image_format}: {exc}"
            ) from exc

        return output_buffer.getvalue()


def _text_to_bytes(text: str) -> bytes:
    if not isinstance(text, str):
        raise ImageDecodeException(
            f"Expected base64 text, not {type(text).__name__}"
        )

    # accept data URIs as produced by to_data_uri()
    if text.startswith(constants.DATA_URI_PREFIX):
        _, separator, text = text.partition(constants.DATA_URI_BASE64_MARKER)
        if len(separator) == 0:
            raise ImageDecodeException("Data URI does not contain base64 data")

    try:
        return base64.b64decode("".join(text.split()), validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ImageDecodeException(f"Text is not valid base64: {exc}") from exc
