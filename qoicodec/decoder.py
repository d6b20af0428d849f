import logging

from .cache import PixelCache
from .errors import (
    InvalidEndMarkerError,
    InvalidRunLengthError,
    ResourceError,
    TrailingDataError,
    UnexpectedEofError,
)
from .header import parse_header
from .image import Colorspace, QOIImage
from .qoi import QOI

logger = logging.getLogger(__name__)


def _allocate_pixels(count: int) -> list:
    return [QOI.QOI_OPAQUE_BLACK] * count


class QOIDecoder:
    """
    A class to decode QOI (Quite OK Image) files into pixel grids.
    """

    @staticmethod
    def decode(
        file_data,
        byte_offset: int = 0,
        byte_length: int = None,
        progress=None,
    ) -> QOIImage:
        """
        Decode a QOI file given as a bytes/bytearray object.

        :param file_data: Bytes containing the QOI file.
        :param byte_offset: Offset to the start of the QOI file in file_data.
        :param byte_length: Length of the QOI file in bytes.
        :param progress: Optional callable receiving the completed fraction (0.0 - 1.0).
                         Called once per RGB/RGBA chunk.
        :return: QOIImage with width, height, colorspace, has_alpha and pixels.
        """

        # --- Handle Slicing ---
        if byte_length is None:
            byte_length = len(file_data) - byte_offset

        data = bytes(file_data[byte_offset : byte_offset + byte_length])

        # --- Header Parsing ---
        header = parse_header(data)
        width, height = header.width, header.height
        logger.debug(
            "Decoding %dx%d image, %d channels, colorspace %d",
            width,
            height,
            header.channels,
            header.colorspace,
        )

        # --- Initialization ---
        total_pixels = width * height
        try:
            pixels = _allocate_pixels(total_pixels)
        except MemoryError as e:
            raise ResourceError(
                "QOI.decode: Failed to acquire storage for pixels"
            ) from e

        index = PixelCache()
        px = QOI.QOI_OPAQUE_BLACK

        data_len = len(data)
        read_pos = QOI.QOI_HEADER_SIZE
        pixel_pos = 0

        # --- Decoding Loop ---
        while pixel_pos < total_pixels:
            # Enough room for the end marker means enough room for any chunk
            if data_len - read_pos < QOI.QOI_END_MARKER_SIZE:
                raise UnexpectedEofError("QOI.decode: The file ends unexpectedly")

            b1 = data[read_pos]

            # QOI_OP_RGB (0xFE/0b11111110)
            if b1 == QOI.QOI_OP_RGB:
                px = (data[read_pos + 1], data[read_pos + 2], data[read_pos + 3], px[3])
                read_pos += 4
                index.store(px)
                pixels[pixel_pos] = px
                pixel_pos += 1
                if progress is not None:
                    progress(pixel_pos / total_pixels)

            # QOI_OP_RGBA (0xFF/0b11111111)
            elif b1 == QOI.QOI_OP_RGBA:
                px = (
                    data[read_pos + 1],
                    data[read_pos + 2],
                    data[read_pos + 3],
                    data[read_pos + 4],
                )
                read_pos += 5
                index.store(px)
                pixels[pixel_pos] = px
                pixel_pos += 1
                if progress is not None:
                    progress(pixel_pos / total_pixels)

            # QOI_OP_INDEX (00xxxxxx)
            elif (b1 & QOI.QOI_MASK_2) == QOI.QOI_OP_INDEX:
                # An index 0 chunk is the first byte of the end marker
                if data[read_pos : read_pos + QOI.QOI_END_MARKER_SIZE] == QOI.QOI_END_MARKER:
                    break

                px = index[b1 & 0x3F]
                read_pos += 1
                pixels[pixel_pos] = px
                pixel_pos += 1

            # QOI_OP_DIFF (01xxxxxx)
            elif (b1 & QOI.QOI_MASK_2) == QOI.QOI_OP_DIFF:
                # Extract 2-bit differences and subtract bias of 2
                # Use % 256 to wrap the result to 8-bit unsigned
                dr = ((b1 >> 4) & 0x03) + QOI.QOI_DIFF_LOWER_BOUND
                dg = ((b1 >> 2) & 0x03) + QOI.QOI_DIFF_LOWER_BOUND
                db = (b1 & 0x03) + QOI.QOI_DIFF_LOWER_BOUND

                r, g, b, a = px
                px = ((r + dr) % 256, (g + dg) % 256, (b + db) % 256, a)
                read_pos += 1
                index.store(px)
                pixels[pixel_pos] = px
                pixel_pos += 1

            # QOI_OP_LUMA (10xxxxxx)
            elif (b1 & QOI.QOI_MASK_2) == QOI.QOI_OP_LUMA:
                b2 = data[read_pos + 1]

                dg = (b1 & 0x3F) + QOI.QOI_LUMA_GREEN_LOWER_BOUND
                dr_dg = ((b2 >> 4) & 0x0F) + QOI.QOI_LUMA_RED_BLUE_LOWER_BOUND
                db_dg = (b2 & 0x0F) + QOI.QOI_LUMA_RED_BLUE_LOWER_BOUND

                r, g, b, a = px
                px = ((r + dg + dr_dg) % 256, (g + dg) % 256, (b + dg + db_dg) % 256, a)
                read_pos += 2
                index.store(px)
                pixels[pixel_pos] = px
                pixel_pos += 1

            # QOI_OP_RUN (11xxxxxx)
            else:
                run = (b1 & 0x3F) + 1
                if pixel_pos + run > total_pixels:
                    raise InvalidRunLengthError(
                        "QOI.decode: Too many encoded pixels"
                    )

                read_pos += 1
                pixels[pixel_pos : pixel_pos + run] = [px] * run
                pixel_pos += run

        if pixel_pos < total_pixels:
            raise UnexpectedEofError(
                f"QOI.decode: End marker reached after {pixel_pos} of {total_pixels} pixels"
            )

        # --- End Marker ---
        if data_len - read_pos < QOI.QOI_END_MARKER_SIZE:
            raise UnexpectedEofError("QOI.decode: The file ends unexpectedly")

        if data[read_pos : read_pos + QOI.QOI_END_MARKER_SIZE] != QOI.QOI_END_MARKER:
            raise InvalidEndMarkerError("QOI.decode: Invalid end marker")
        read_pos += QOI.QOI_END_MARKER_SIZE

        if read_pos != data_len:
            raise TrailingDataError(
                "QOI.decode: File contains data past the end marker"
            )

        logger.debug("Decoded %d bytes into %d pixels", data_len, total_pixels)

        return QOIImage(
            width=width,
            height=height,
            colorspace=Colorspace(header.colorspace),
            has_alpha=header.has_alpha,
            pixels=pixels,
        )
