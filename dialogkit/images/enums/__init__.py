"""
module dialogkit.images.enums

Contains the definitions of all enum classes used by the image codec
"""

from .imageformat import ImageFormat
