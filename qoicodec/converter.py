import argparse
import logging
import sys

from .decoder import QOIDecoder
from .encoder import QOIEncoder
from .errors import QOIError
from .image import Colorspace, QOIImage
from .logging_setup import setup_logging
from .utils import ExportOptions, image_from_array, load_image, save_image

logger = logging.getLogger(__name__)

COLORSPACES = {"srgb": Colorspace.SRGB, "linear": Colorspace.LINEAR}


def png_to_qoi(png_path, qoi_path, options: ExportOptions = None) -> int:
    pixel_data, desc = load_image(png_path)
    logger.info(
        "Loaded image %s: %dx%d Channels: %d",
        png_path,
        desc["width"],
        desc["height"],
        desc["channels"],
    )

    image = image_from_array(pixel_data, options)
    encoded = QOIEncoder.encode(image)

    with open(qoi_path, "wb") as f:
        f.write(encoded)
    print(f"Converted {png_path} to {qoi_path} ({len(encoded)} bytes)")
    return len(encoded)


def qoi_to_png(qoi_path, png_path) -> QOIImage:
    with open(qoi_path, "rb") as f:
        content = f.read()

    decoded = QOIDecoder.decode(content)
    save_image(decoded, png_path)
    print(f"Converted {qoi_path} to {png_path}")
    return decoded


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="qoi-convert",
        description="Convert images to and from the QOI format. "
        "The direction is picked from the file extensions.",
    )
    parser.add_argument("input", help="Source image (.qoi, .png, .jpg, RAW, ...)")
    parser.add_argument("output", help="Destination image")
    parser.add_argument(
        "--no-alpha",
        dest="export_alpha",
        action="store_false",
        help="Drop the alpha channel when writing QOI",
    )
    parser.add_argument(
        "--colorspace",
        choices=sorted(COLORSPACES),
        default="srgb",
        help="Colorspace tag written to the QOI header (default: srgb)",
    )
    parser.add_argument(
        "--log-level",
        help="debug, info, warning or error (default: $QOICODEC_LOG_LEVEL or info)",
    )
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        if args.input.lower().endswith(".qoi"):
            qoi_to_png(args.input, args.output)
        else:
            options = ExportOptions(
                export_alpha=args.export_alpha,
                colorspace=COLORSPACES[args.colorspace],
            )
            png_to_qoi(args.input, args.output, options)
    except QOIError as e:
        print(f"'{args.input}' could not be converted: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        print(f"Could not read or write file: {e}", file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
