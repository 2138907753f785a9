"""PNG front end for the logo: pixel grid <-> 48x8 grayscale image."""

import io

import numpy as np
from PIL import Image, UnidentifiedImageError

from .codec import HEIGHT, WIDTH
from .errors import ImageDecodeFailed, ImageEncodeFailed, InvalidDimensions

ON, OFF = 255, 0

# Single-channel grayscale only: 1-bit or 8-bit
GRAY_MODES = ("1", "L")


def _check_shape(pixels):
    if pixels.shape != (HEIGHT, WIDTH):
        raise InvalidDimensions(
            f"Image must be {WIDTH}x{HEIGHT}, got array of shape {pixels.shape}",
            context={"shape": pixels.shape},
        )


def render(grid):
    """Pixel grid -> 8-bit grayscale Pillow image (on=255, off=0)."""
    pixels = np.asarray(grid)
    _check_shape(pixels)
    return Image.fromarray(np.where(pixels != 0, ON, OFF).astype(np.uint8))


def to_png(grid):
    img = render(grid)
    buf = io.BytesIO()
    try:
        img.save(buf, format="PNG")
    except (OSError, ValueError) as e:
        raise ImageEncodeFailed(f"Could not write image: {e}") from e
    return buf.getvalue()


def from_png(data):
    """PNG bytes -> pixel grid. Any nonzero sample is on."""
    try:
        img = Image.open(io.BytesIO(data), formats=["PNG"])
    except Image.DecompressionBombError as e:
        raise InvalidDimensions(f"Image must be {WIDTH}x{HEIGHT}: {e}") from e
    except (UnidentifiedImageError, OSError, SyntaxError, ValueError) as e:
        raise ImageDecodeFailed(f"Could not read image: {e}") from e

    if img.mode not in GRAY_MODES:
        raise InvalidDimensions(
            f"Image must be {WIDTH}x{HEIGHT}, 1-bit or 8-bit grayscale (got mode {img.mode})",
            context={"mode": img.mode, "size": img.size},
        )
    if img.size != (WIDTH, HEIGHT):
        w, h = img.size
        raise InvalidDimensions(
            f"Image must be {WIDTH}x{HEIGHT}, got {w}x{h}",
            context={"mode": img.mode, "size": img.size},
        )

    # Header checked, now decode the pixel data
    try:
        img.load()
    except (OSError, SyntaxError, ValueError) as e:
        raise ImageDecodeFailed(f"Could not read image: {e}") from e
    return np.array(img) != 0


def to_text(grid, on="#", off="."):
    pixels = np.asarray(grid)
    _check_shape(pixels)
    return "\n".join("".join(on if p else off for p in row) for row in pixels)
