"""
module dialogkit.images.exceptions.imageencodeexception

Contains the definition of the ImageEncodeException class, an exception
that is thrown whenever a loaded image can not be written in the requested
image format
"""

from .imagecodecexception import ImageCodecException


class ImageEncodeException(ImageCodecException):
    """
    class ImageEncodeException

    An exception that is thrown whenever a loaded image can not be written
    in the requested image format
    """
