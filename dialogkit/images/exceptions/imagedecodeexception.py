"""
module dialogkit.images.exceptions.imagedecodeexception

Contains the definition of the ImageDecodeException class, an exception
that is thrown whenever text or bytes can not be interpreted as an image
"""

from .imagecodecexception import ImageCodecException


class ImageDecodeException(ImageCodecException):
    """
    class ImageDecodeException

    An exception that is thrown whenever text or bytes can not be
    interpreted as an image
    """
