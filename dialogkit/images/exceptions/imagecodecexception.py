"""
module dialogkit.images.exceptions.imagecodecexception

Contains the definition of the ImageCodecException class, a base class
that is the parent for exception classes thrown by the image codec
"""

from ...dialogkitexception import DialogKitException


class ImageCodecException(DialogKitException):
    """
    class ImageCodecException

    A base exception class that is the parent for exception classes
    thrown by the image codec
    """
