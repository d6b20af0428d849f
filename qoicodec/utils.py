from dataclasses import dataclass

import numpy as np
from PIL import Image

from .image import Colorspace, QOIImage

RAW_EXTENSIONS = ("dng", "cr2", "nef", "arw", "raw")


@dataclass
class ExportOptions:
    """The two user-facing choices made when exporting to QOI."""

    export_alpha: bool = True
    colorspace: Colorspace = Colorspace.SRGB


def load_image(filepath: str) -> tuple[np.ndarray, dict]:
    """Load an image and return pixel data as numpy array + description."""

    ext = filepath.lower().split(".")[-1]

    if ext in RAW_EXTENSIONS:
        # RAW formats - requires rawpy
        import rawpy

        with rawpy.imread(filepath) as raw:
            rgb = raw.postprocess()
        img = Image.fromarray(rgb)
    else:
        # Standard formats (PNG, JPEG, etc.)
        img = Image.open(filepath)

    # Convert to RGB or RGBA
    if img.mode in ("RGBA", "LA", "PA") or "transparency" in img.info:
        img = img.convert("RGBA")
        channels = 4
    else:
        img = img.convert("RGB")
        channels = 3

    return np.array(img), {
        "width": img.size[0],
        "height": img.size[1],
        "channels": channels,
        "colorspace": 0,
    }


def image_from_array(
    pixel_data: np.ndarray, options: ExportOptions = None, progress=None
) -> QOIImage:
    """
    Transfer an (height, width, 3|4) uint8 array into a QOIImage, one row at a time.

    Alpha is kept only when the array has four channels and options.export_alpha
    is set; otherwise every pixel becomes opaque.
    """
    if options is None:
        options = ExportOptions()

    if pixel_data.ndim != 3 or pixel_data.shape[2] not in (3, 4):
        raise ValueError(f"Expected an (h, w, 3|4) array, got shape {pixel_data.shape}")

    height, width, channels = pixel_data.shape
    rgba = np.empty((height, width, 4), dtype=np.uint8)
    rgba[..., :3] = pixel_data[..., :3]
    if channels == 4 and options.export_alpha:
        rgba[..., 3] = pixel_data[..., 3]
    else:
        rgba[..., 3] = 255

    pixels = []
    for y in range(height):
        pixels.extend(map(tuple, rgba[y].tolist()))
        if progress is not None:
            progress((y + 1) / height)

    return QOIImage(
        width=width,
        height=height,
        colorspace=options.colorspace,
        has_alpha=options.export_alpha and channels == 4,
        pixels=pixels,
    )


def image_to_array(image: QOIImage, progress=None) -> np.ndarray:
    """Transfer a QOIImage into an (height, width, channels) uint8 array, one row at a time."""
    result = np.empty((image.height, image.width, image.channels), dtype=np.uint8)

    for y in range(image.height):
        row = np.array(image.row(y), dtype=np.uint8)
        result[y] = row[:, : image.channels]
        if progress is not None:
            progress((y + 1) / image.height)

    return result


def save_image(image: QOIImage, filepath: str) -> None:
    """Write a QOIImage to any format Pillow can save (PNG by default)."""
    Image.fromarray(image_to_array(image)).save(filepath)
