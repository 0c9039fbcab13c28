"""Command-line interface for purepapa"""
import sys
import argparse
import time
import imageio.v3 as iio

from .config import ThumbnailConfig
from .errors import PapaError
from .image import CanonicalImage, swap_red_blue
from .log import setup_logging
from .papa import PAPA
from .thumbnail import generate_thumbnail


def main(argv=None):
    """Command-line interface for purepapa"""
    parser = argparse.ArgumentParser(
        description='Read papa texture files and render their thumbnails',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  purepapa unit.papa                               # Display papa file info
  purepapa unit.papa -o thumb.png                  # Render a 256px thumbnail
  purepapa unit.papa -o thumb.png -s 96            # Render a 96px thumbnail
  purepapa unit.papa -o texture.png --raw          # Save the decoded texture as-is
  purepapa unit.papa -o thumb.png -c thumb.yaml    # Use settings from a YAML file
        """
    )

    parser.add_argument('input', help='Input papa file path')
    parser.add_argument('-o', '--output', help='Output image file path (e.g., output.png)')
    parser.add_argument('-s', '--size', type=int, default=256,
                        help='Thumbnail edge length in pixels (default: 256)')
    parser.add_argument('-c', '--config', help='YAML file with thumbnail settings')
    parser.add_argument('--raw', action='store_true',
                        help='Write the decoded texture without scaling or badge')
    parser.add_argument('--log-level', default='WARNING',
                        help='Logging level (default: WARNING)')
    parser.add_argument('--log-file', help='Also write log output to this file')

    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    try:
        config = ThumbnailConfig.from_yaml(args.config) if args.config else ThumbnailConfig()

        with open(args.input, 'rb') as f:
            papa = PAPA.from_stream(f, config.max_payload_bytes, config.max_texture_pixels)
            print(papa)

            if not args.output:
                return 0

            start_decode = time.perf_counter()
            if args.raw:
                image = papa.to_image()
            else:
                image = generate_thumbnail(f, args.size, config).image
                # Thumbnails come back in the host's BGRA order
                swap_red_blue(image)
            decode_time = time.perf_counter() - start_decode

        start_save = time.perf_counter()
        write_image(args.output, image)
        save_time = time.perf_counter() - start_save

        print(f"\nSaved to: {args.output}")
        print(f"Image size: {image.width}x{image.height}")
        print(f"Decode time: {decode_time*1000:.2f} ms")
        print(f"Save time: {save_time*1000:.2f} ms")
        return 0

    except FileNotFoundError:
        print(f"Error: File '{args.input}' not found")
        sys.exit(1)
    except PapaError as e:
        print(f"Error reading papa file: {e}")
        sys.exit(1)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)


def write_image(path: str, image: CanonicalImage) -> None:
    """Save an RGBA canonical image top row first"""
    iio.imwrite(path, image.to_rgba_array())


if __name__ == "__main__":
    sys.exit(main())
