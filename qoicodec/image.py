from dataclasses import dataclass, field
from enum import IntEnum

from .qoi import QOI

Pixel = tuple[int, int, int, int]


class Colorspace(IntEnum):
    SRGB = 0  # sRGB with linear alpha
    LINEAR = 1  # all channels linear


@dataclass
class QOIImage:
    """
    A decoded image: row-major RGBA pixels plus the header metadata.

    Pixels are stored as (r, g, b, a) tuples. Images without alpha are
    opaque: their pixels get alpha 255 on construction.
    """

    width: int
    height: int
    colorspace: Colorspace = Colorspace.SRGB
    has_alpha: bool = True
    pixels: list = field(default_factory=list, repr=False)

    def __post_init__(self):
        if not (0 < self.width <= QOI.QOI_MAX_IMAGE_SIZE):
            raise ValueError(f"QOIImage: Invalid width {self.width}")

        if not (0 < self.height <= QOI.QOI_MAX_IMAGE_SIZE):
            raise ValueError(f"QOIImage: Invalid height {self.height}")

        if len(self.pixels) != self.width * self.height:
            raise ValueError(
                "QOIImage: The number of pixels does not match the dimensions"
            )

        self.colorspace = Colorspace(self.colorspace)

        if self.has_alpha:
            self.pixels = [tuple(px) for px in self.pixels]
        else:
            self.pixels = [(px[0], px[1], px[2], 255) for px in self.pixels]

    @property
    def channels(self) -> int:
        return QOI.QOI_CHANNELS_RGBA if self.has_alpha else QOI.QOI_CHANNELS_RGB

    def row(self, y: int) -> list[Pixel]:
        """Return the pixels of row ``y``."""
        start = y * self.width
        return self.pixels[start : start + self.width]
