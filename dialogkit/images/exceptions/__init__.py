"""
module dialogkit.images.exceptions

Contains all definitions of exceptions specifically thrown by the image codec
"""

from .imagecodecexception import ImageCodecException
from .imagedecodeexception import ImageDecodeException
from .imageencodeexception import ImageEncodeException
from .imagereadexception import ImageReadException
