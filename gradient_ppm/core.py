"""Core helpers to compute the gradient and write it as a P3 pixel-map.

Red ramps left to right, green ramps top to bottom, blue stays at zero.
`emit_gradient` streams the image row by row and never holds it in memory;
`render_image` builds the same picture with numpy/Pillow for previews.
"""
from typing import Iterator, List, Optional, TextIO, Tuple
import logging
import sys

import numpy as np
from PIL import Image

from .config import IMAGE_WIDTH, IMAGE_HEIGHT, PPM_MAGIC, MAX_CHANNEL, CHANNEL_SCALE

logger = logging.getLogger(__name__)

Pixel = Tuple[int, int, int]


def to_channel(fraction: float) -> int:
    """Map a fraction in [0.0, 1.0] to an integer channel value in [0, 255]."""
    return int(CHANNEL_SCALE * fraction)


def pixel_color(i: int, j: int, width: int = IMAGE_WIDTH, height: int = IMAGE_HEIGHT) -> Pixel:
    """Return the (r, g, b) triple for column `i` of row `j`.

    Both dimensions must be >= 2; this is not checked.
    """
    r = i / (width - 1)
    g = j / (height - 1)
    b = 0.0
    return (to_channel(r), to_channel(g), to_channel(b))


def gradient_rows(width: int = IMAGE_WIDTH, height: int = IMAGE_HEIGHT) -> Iterator[List[Pixel]]:
    """Yield one list of pixel triples per row, top row first."""
    for j in range(height):
        yield [pixel_color(i, j, width, height) for i in range(width)]


def format_row(row: List[Pixel]) -> str:
    # every triple is followed by a space, including the last one
    return "".join(f"{r} {g} {b} " for r, g, b in row) + "\n"


def write_header(out: TextIO, width: int = IMAGE_WIDTH, height: int = IMAGE_HEIGHT) -> None:
    out.write(f"{PPM_MAGIC}\n{width} {height}\n{MAX_CHANNEL}\n")


def emit_gradient(out: Optional[TextIO] = None, width: int = IMAGE_WIDTH, height: int = IMAGE_HEIGHT) -> None:
    """Write the full P3 image to `out` (stdout when None).

    Write errors are not handled and propagate to the caller.
    """
    if out is None:
        out = sys.stdout

    write_header(out, width, height)
    for j, row in enumerate(gradient_rows(width, height)):
        logger.debug(f"Scanlines remaining: {height - j}")
        out.write(format_row(row))
    out.flush()
    logger.debug(f"Done: wrote {width}x{height} pixels")


def render_image(width: int = IMAGE_WIDTH, height: int = IMAGE_HEIGHT) -> Image.Image:
    """Render the gradient as an RGB PIL Image.

    Uses the same fractions and truncation as `pixel_color`, so every pixel of
    the returned image matches the streamed output.
    """
    # float64 division matches the scalar path exactly
    r = (CHANNEL_SCALE * (np.arange(width, dtype=np.float64) / (width - 1))).astype(np.uint8)
    g = (CHANNEL_SCALE * (np.arange(height, dtype=np.float64) / (height - 1))).astype(np.uint8)

    img_array = np.zeros((height, width, 3), dtype=np.uint8)
    img_array[:, :, 0] = r[np.newaxis, :]
    img_array[:, :, 1] = g[:, np.newaxis]

    return Image.fromarray(img_array)
