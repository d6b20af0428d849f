from .cache import PixelCache, pixel_hash
from .decoder import QOIDecoder
from .encoder import QOIEncoder
from .errors import (
    BadMagicError,
    FormatError,
    InvalidDimensionsError,
    InvalidEndMarkerError,
    InvalidRunLengthError,
    QOIError,
    ResourceError,
    TrailingDataError,
    UnexpectedEofError,
    UnsupportedChannelsError,
    UnsupportedColorspaceError,
)
from .header import QOIHeader, parse_header, serialize_header
from .image import Colorspace, QOIImage
from .qoi import QOI
from .utils import ExportOptions, image_from_array, image_to_array, load_image, save_image

decode = QOIDecoder.decode
encode = QOIEncoder.encode

__all__ = [
    "QOI",
    "QOIDecoder",
    "QOIEncoder",
    "QOIHeader",
    "QOIImage",
    "Colorspace",
    "ExportOptions",
    "PixelCache",
    "pixel_hash",
    "parse_header",
    "serialize_header",
    "decode",
    "encode",
    "load_image",
    "image_from_array",
    "image_to_array",
    "save_image",
    "QOIError",
    "FormatError",
    "ResourceError",
    "UnexpectedEofError",
    "BadMagicError",
    "UnsupportedChannelsError",
    "UnsupportedColorspaceError",
    "InvalidDimensionsError",
    "InvalidRunLengthError",
    "InvalidEndMarkerError",
    "TrailingDataError",
]
