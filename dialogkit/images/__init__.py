"""
module dialogkit.images

Contains the image codec used to embed images in dialogs as portable base64
text and to turn that text back into a displayable bitmap
"""

from .enums import ImageFormat
from .exceptions import (
    ImageCodecException,
    ImageDecodeException,
    ImageEncodeException,
    ImageReadException,
)
from .imagecodec import (
    decode_image,
    decode_images,
    encode_image,
    encode_images,
    to_data_uri,
)
