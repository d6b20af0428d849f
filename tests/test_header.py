import struct

import pytest

from qoicodec import (
    QOI,
    BadMagicError,
    Colorspace,
    FormatError,
    InvalidDimensionsError,
    QOIHeader,
    QOIImage,
    UnexpectedEofError,
    UnsupportedChannelsError,
    UnsupportedColorspaceError,
    parse_header,
    serialize_header,
)


def make_header(width=2, height=3, channels=4, colorspace=0, magic=b"qoif"):
    return magic + struct.pack(">IIBB", width, height, channels, colorspace)


def test_parse_header():
    header = parse_header(make_header(640, 480, 3, 1) + b"trailing chunks")

    assert header == QOIHeader(640, 480, 3, 1)
    assert not header.has_alpha


def test_width_and_height_are_big_endian():
    header = parse_header(b"qoif\x00\x01\x02\x03\x00\x00\x01\x00\x04\x00")

    assert header.width == 0x010203
    assert header.height == 0x100
    assert header.has_alpha


@pytest.mark.parametrize("length", range(QOI.QOI_HEADER_SIZE))
def test_short_header(length):
    with pytest.raises(UnexpectedEofError):
        parse_header(make_header()[:length])


@pytest.mark.parametrize("magic", [b"qoix", b"QOIF", b"\x00\x00\x00\x00", b"fioq"])
def test_bad_magic(magic):
    with pytest.raises(BadMagicError):
        parse_header(make_header(magic=magic))


@pytest.mark.parametrize("channels", [0, 1, 2, 5, 255])
def test_unsupported_channels(channels):
    with pytest.raises(UnsupportedChannelsError):
        parse_header(make_header(channels=channels))


@pytest.mark.parametrize("colorspace", [2, 3, 255])
def test_unsupported_colorspace(colorspace):
    with pytest.raises(UnsupportedColorspaceError):
        parse_header(make_header(colorspace=colorspace))


@pytest.mark.parametrize(
    "width, height",
    [
        (0, 1),
        (1, 0),
        (QOI.QOI_MAX_IMAGE_SIZE + 1, 1),
        (1, QOI.QOI_MAX_IMAGE_SIZE + 1),
        (0xFFFFFFFF, 0xFFFFFFFF),
    ],
)
def test_invalid_dimensions(width, height):
    with pytest.raises(InvalidDimensionsError):
        parse_header(make_header(width, height))


def test_largest_dimensions_accepted():
    header = parse_header(make_header(QOI.QOI_MAX_IMAGE_SIZE, QOI.QOI_MAX_IMAGE_SIZE))

    assert header.width == header.height == QOI.QOI_MAX_IMAGE_SIZE


def test_magic_checked_before_channels():
    with pytest.raises(BadMagicError):
        parse_header(make_header(channels=9, magic=b"nope"))


def test_format_errors_are_value_errors():
    with pytest.raises(ValueError):
        parse_header(make_header(channels=5))
    assert issubclass(UnsupportedChannelsError, FormatError)


def test_serialize_header():
    image = QOIImage(1, 1, Colorspace.LINEAR, True, [(0, 0, 0, 0)])

    assert serialize_header(image) == b"qoif\x00\x00\x00\x01\x00\x00\x00\x01\x04\x01"


def test_serialize_header_without_alpha():
    image = QOIImage(300, 2, Colorspace.SRGB, False, [(0, 0, 0, 255)] * 600)
    data = serialize_header(image)

    assert len(data) == QOI.QOI_HEADER_SIZE
    assert parse_header(data) == QOIHeader(300, 2, 3, 0)
