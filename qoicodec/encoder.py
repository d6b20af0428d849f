import logging

from .cache import PixelCache, pixel_hash
from .header import serialize_header
from .image import QOIImage
from .qoi import QOI

logger = logging.getLogger(__name__)


def _signed_delta(current: int, previous: int) -> int:
    # Wraps like the reference qoi.h encoder, not plain subtraction
    # (x - y) & 0xFF gives the byte-wrapped difference (0-255),
    # then shift range to -128..127
    delta = (current - previous) & 0xFF
    return delta - 256 if delta > 127 else delta


class QOIEncoder:
    @staticmethod
    def encode(image: QOIImage, progress=None) -> bytes:
        """
        Encode a QOI file.

        :param image: QOIImage holding the pixels and the header metadata.
        :param progress: Optional callable receiving the completed fraction (0.0 - 1.0).
                         Called once per RGB/RGBA chunk.
        :return: bytes object containing the QOI file content.
        """
        total_pixels = image.width * image.height
        logger.debug(
            "Encoding %dx%d image, %d channels, colorspace %d",
            image.width,
            image.height,
            image.channels,
            image.colorspace,
        )

        result = bytearray(serialize_header(image))

        # Encoding State
        px_prev = QOI.QOI_OPAQUE_BLACK
        run = 0
        index = PixelCache()

        # --- Pixel Loop ---
        for pixel_pos, px in enumerate(image.pixels):
            # Check for run
            if px == px_prev:
                run += 1
                # If we hit max run length (62) or it's the very last pixel
                if run == QOI.QOI_MAX_RUN_LENGTH or pixel_pos == total_pixels - 1:
                    result.append(QOI.QOI_OP_RUN | (run - 1))
                    run = 0
                continue

            # If we were in a run, end it before processing the new pixel
            if run > 0:
                result.append(QOI.QOI_OP_RUN | (run - 1))
                run = 0

            r, g, b, a = px
            index_pos = pixel_hash(px)

            if index[index_pos] == px:
                result.append(QOI.QOI_OP_INDEX | index_pos)
                px_prev = px
                continue

            index.store(px)

            if a == px_prev[3]:
                vr = _signed_delta(r, px_prev[0])
                vg = _signed_delta(g, px_prev[1])
                vb = _signed_delta(b, px_prev[2])

                vg_r = vr - vg
                vg_b = vb - vg

                # QOI_OP_DIFF
                if (
                    QOI.QOI_DIFF_LOWER_BOUND <= vr <= QOI.QOI_DIFF_UPPER_BOUND
                    and QOI.QOI_DIFF_LOWER_BOUND <= vg <= QOI.QOI_DIFF_UPPER_BOUND
                    and QOI.QOI_DIFF_LOWER_BOUND <= vb <= QOI.QOI_DIFF_UPPER_BOUND
                ):
                    result.append(
                        QOI.QOI_OP_DIFF
                        | ((vr + 2) << 4)
                        | ((vg + 2) << 2)
                        | (vb + 2)
                    )

                # QOI_OP_LUMA
                elif (
                    QOI.QOI_LUMA_GREEN_LOWER_BOUND <= vg <= QOI.QOI_LUMA_GREEN_UPPER_BOUND
                    and QOI.QOI_LUMA_RED_BLUE_LOWER_BOUND <= vg_r <= QOI.QOI_LUMA_RED_BLUE_UPPER_BOUND
                    and QOI.QOI_LUMA_RED_BLUE_LOWER_BOUND <= vg_b <= QOI.QOI_LUMA_RED_BLUE_UPPER_BOUND
                ):
                    result.append(QOI.QOI_OP_LUMA | (vg + 32))
                    result.append(((vg_r + 8) << 4) | (vg_b + 8))

                # QOI_OP_RGB
                else:
                    result.append(QOI.QOI_OP_RGB)
                    result.extend((r, g, b))
                    if progress is not None:
                        progress((pixel_pos + 1) / total_pixels)
            else:
                # QOI_OP_RGBA
                result.append(QOI.QOI_OP_RGBA)
                result.extend((r, g, b, a))
                if progress is not None:
                    progress((pixel_pos + 1) / total_pixels)

            px_prev = px

        # --- End Marker ---
        result.extend(QOI.QOI_END_MARKER)

        logger.debug("Encoded %d pixels into %d bytes", total_pixels, len(result))

        return bytes(result)
