import struct
from dataclasses import dataclass

from .errors import (
    BadMagicError,
    InvalidDimensionsError,
    UnexpectedEofError,
    UnsupportedChannelsError,
    UnsupportedColorspaceError,
)
from .qoi import QOI


@dataclass(frozen=True)
class QOIHeader:
    width: int
    height: int
    channels: int
    colorspace: int

    @property
    def has_alpha(self) -> bool:
        return self.channels == QOI.QOI_CHANNELS_RGBA


def parse_header(data) -> QOIHeader:
    """
    Parse and validate the 14 byte header at the start of ``data``.

    :param data: Bytes-like object starting with a QOI header.
    :return: The validated QOIHeader.
    """
    if len(data) < QOI.QOI_HEADER_SIZE:
        raise UnexpectedEofError("QOI.decode: File too short for header")

    # > : Big Endian
    # 4s: 4-byte string (magic)
    # I : unsigned int (4 bytes)
    # B : unsigned char (1 byte)
    magic, width, height, channels, colorspace = struct.unpack(
        QOI.QOI_HEADER_FORMAT, bytes(data[: QOI.QOI_HEADER_SIZE])
    )

    if magic != QOI.QOI_MAGIC:
        raise BadMagicError("QOI.decode: The signature of the QOI file is invalid")

    if channels not in (QOI.QOI_CHANNELS_RGB, QOI.QOI_CHANNELS_RGBA):
        raise UnsupportedChannelsError(
            f"QOI.decode: Unsupported or unknown number of channels: {channels}"
        )

    if colorspace not in (0, 1):
        raise UnsupportedColorspaceError(
            f"QOI.decode: Unsupported or unknown colorspace: {colorspace}"
        )

    if not (0 < width <= QOI.QOI_MAX_IMAGE_SIZE):
        raise InvalidDimensionsError(
            f"QOI.decode: Invalid or unsupported width: {width}"
        )

    if not (0 < height <= QOI.QOI_MAX_IMAGE_SIZE):
        raise InvalidDimensionsError(
            f"QOI.decode: Invalid or unsupported height: {height}"
        )

    return QOIHeader(width, height, channels, colorspace)


def serialize_header(image) -> bytes:
    """Pack the header for ``image`` (anything with width, height, has_alpha and colorspace)."""
    channels = QOI.QOI_CHANNELS_RGBA if image.has_alpha else QOI.QOI_CHANNELS_RGB
    return struct.pack(
        QOI.QOI_HEADER_FORMAT,
        QOI.QOI_MAGIC,
        image.width,
        image.height,
        channels,
        int(image.colorspace),
    )
