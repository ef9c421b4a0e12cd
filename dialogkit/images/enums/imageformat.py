from enum import StrEnum


class ImageFormat(StrEnum):
    # values are the format names understood by Pillow
    BMP = "BMP"
    GIF = "GIF"
    JPEG = "JPEG"
    PNG = "PNG"
    TIFF = "TIFF"
