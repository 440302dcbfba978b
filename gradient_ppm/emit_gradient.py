#!/usr/bin/env python3
"""CLI runner that writes the gradient image to stdout.

Usage: python -m gradient_ppm [--width N] [--height N] [--preview out.png] [--verbose] > image.ppm

Log output goes to stderr so it never mixes with the image on stdout.
"""
import argparse
import logging
import sys

from gradient_ppm.config import DEFAULT_IMAGE
from gradient_ppm.core import emit_gradient, render_image

logger = logging.getLogger(__name__)


def _dimension(value):
    try:
        n = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {value!r}")
    # the ramp divides by (n - 1)
    if n < 2:
        raise argparse.ArgumentTypeError(f"must be at least 2, got {n}")
    return n


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Write a red/green gradient as a P3 PPM image to stdout")
    p.add_argument('--width', type=_dimension, default=DEFAULT_IMAGE['width'], help=f"Image width in pixels (default {DEFAULT_IMAGE['width']})")
    p.add_argument('--height', type=_dimension, default=DEFAULT_IMAGE['height'], help=f"Image height in pixels (default {DEFAULT_IMAGE['height']})")
    p.add_argument('--preview', help='Also save the gradient to this path (any format Pillow can write, e.g. PNG)')
    p.add_argument('--verbose', action='store_true', help='Enable debug logging (scanline progress)')
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stderr)
        ]
    )
    # basicConfig is a no-op when the host process already configured logging
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)
        logger.info("Debug logging enabled")

    logger.info(f"Writing {args.width}x{args.height} gradient to stdout")
    emit_gradient(sys.stdout, width=args.width, height=args.height)

    if args.preview:
        try:
            render_image(args.width, args.height).save(args.preview)
            logger.info(f"Saved preview to {args.preview}")
        except (OSError, ValueError) as e:
            logger.error(f"Failed to save preview {args.preview}: {e}")
            return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
