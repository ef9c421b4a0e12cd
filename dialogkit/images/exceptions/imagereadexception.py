"""
module dialogkit.images.exceptions.imagereadexception

Contains the definition of the ImageReadException class, an exception
that is thrown whenever an image file can not be read from storage
"""

from .imagecodecexception import ImageCodecException


class ImageReadException(ImageCodecException):
    """
    class ImageReadException

    An exception that is thrown whenever an image file can not be read
    from storage
    """
