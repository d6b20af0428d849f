#! Since our QOI is in Python, and Pillow is in C, the performance difference will be significant, hence the comparison isn't entirely fair.
#! Use python's qoi (https://pypi.org/project/qoi/) package which is a C extension for a fairer comparison.

import io
import sys
import time

from PIL import Image

import qoi as OfficialQOI
from qoicodec import QOIEncoder, image_from_array, load_image

INPUT_IMAGE = "fruits.png"


def time_compare(pixel_data):
    # Encode to QOI in pure Python (our implementation)
    start_time = time.time()
    encoded = QOIEncoder.encode(image_from_array(pixel_data))
    end_time = time.time()
    print(f"Encoded QOI (ours) to {len(encoded)} bytes in {end_time - start_time:.2f} seconds")

    # Encode to QOI in C using the official bindings
    start_time = time.time()
    official = OfficialQOI.encode(pixel_data)
    end_time = time.time()
    print(f"Encoded QOI (official) to {len(official)} bytes in {end_time - start_time:.2f} seconds")
    print(f"Output identical: {encoded == official}")

    # Encode to PNG in C using Pillow
    start_time = time.time()
    buffer = io.BytesIO()
    Image.fromarray(pixel_data).save(buffer, format="PNG")
    end_time = time.time()
    print(f"Encoded PNG to {buffer.tell()} bytes in {end_time - start_time:.2f} seconds")


if __name__ == "__main__":
    input_image = sys.argv[1] if len(sys.argv) > 1 else INPUT_IMAGE
    pixel_data, desc = load_image(input_image)
    print(
        f"Loaded image {input_image}: {desc['width']}x{desc['height']} Channels: {desc['channels']}"
    )
    print(f"Original {input_image} {pixel_data.nbytes} bytes")

    time_compare(pixel_data)
