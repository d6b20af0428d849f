class QOI:
    # QOI Constants
    QOI_OP_INDEX = 0x00
    QOI_OP_DIFF  = 0x40
    QOI_OP_LUMA  = 0x80
    QOI_OP_RUN   = 0xC0
    QOI_OP_RGB   = 0xFE
    QOI_OP_RGBA  = 0xFF

    QOI_MASK_2   = 0xC0
    QOI_HEADER_SIZE = 14
    QOI_MAGIC = b'qoif'
    QOI_HEADER_FORMAT = ">4sIIBB"  # Big Endian: magic, width, height, channels, colorspace

    QOI_CHANNELS_RGB  = 3
    QOI_CHANNELS_RGBA = 4

    # 7 bytes 0x00, 1 byte 0x01
    QOI_END_MARKER = b'\x00' * 7 + b'\x01'
    QOI_END_MARKER_SIZE = 8

    QOI_MAX_RUN_LENGTH = 62
    QOI_DIFF_LOWER_BOUND = -2
    QOI_DIFF_UPPER_BOUND = 1
    QOI_LUMA_GREEN_LOWER_BOUND = -32
    QOI_LUMA_GREEN_UPPER_BOUND = 31
    QOI_LUMA_RED_BLUE_LOWER_BOUND = -8
    QOI_LUMA_RED_BLUE_UPPER_BOUND = 7

    # Largest width or height accepted (2^19)
    QOI_MAX_IMAGE_SIZE = 524288

    QOI_OPAQUE_BLACK = (0, 0, 0, 255)
    QOI_ZERO_PIXEL = (0, 0, 0, 0)
