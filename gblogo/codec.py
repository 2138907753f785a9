import numpy as np

from .errors import InvalidDimensions, LogoTooSmall

# Logo geometry: 48x8 pixels, one nibble per 4x1 block, 96 nibbles, 48 bytes.
WIDTH, HEIGHT = 48, 8
BLOCK_W = 4
NIBBLES = WIDTH * HEIGHT // BLOCK_W
LOGO_SIZE = NIBBLES // 2

# Bit 3 of a nibble is the leftmost pixel of its block.
_SHIFTS = np.array([3, 2, 1, 0], dtype=np.uint8)


# ---------------------------------------------------------
# Block permutation
# ---------------------------------------------------------
def block_origin(k):
    """
    Map nibble index k (0..95) to the (x, y) origin of the block it draws.

    The top half (rows 0-3) takes nibbles 0-47, the bottom half 48-95.
    Inside a half, each column group of 4 pixels takes 4 consecutive
    nibbles, one per row.
    """
    half, k_in_half = divmod(k, NIBBLES // 2)
    col, row = divmod(k_in_half, 4)
    return col * BLOCK_W, half * 4 + row


def nibble_index(x, y):
    """Inverse of block_origin for a block-aligned x."""
    return (y // 4) * (NIBBLES // 2) + x + y % 4


# ---------------------------------------------------------
# Packed logo -> pixel grid
# ---------------------------------------------------------
def decode(raw):
    raw = bytes(raw)
    if len(raw) < LOGO_SIZE:
        raise LogoTooSmall(
            f"Logo too small: {len(raw)} bytes, need {LOGO_SIZE}",
            context={"size": len(raw)},
        )
    if len(raw) > LOGO_SIZE:
        raise ValueError(f"Packed logo must be exactly {LOGO_SIZE} bytes, got {len(raw)}")

    data = np.frombuffer(raw, dtype=np.uint8)
    # High nibble first
    nibbles = np.stack([data >> 4, data & 0x0F], axis=1).flatten()

    grid = np.zeros((HEIGHT, WIDTH), dtype=bool)
    for k, nibble in enumerate(nibbles):
        x, y = block_origin(k)
        grid[y, x:x + BLOCK_W] = (nibble >> _SHIFTS) & 1
    return grid


# ---------------------------------------------------------
# Pixel grid -> packed logo
# ---------------------------------------------------------
def encode(grid):
    try:
        pixels = np.asarray(grid)
    except ValueError as e:
        # Ragged rows
        raise InvalidDimensions(f"Image must be {WIDTH}x{HEIGHT}: {e}") from e
    if pixels.ndim != 2:
        raise InvalidDimensions(
            f"Image must be {WIDTH}x{HEIGHT} single-channel, got array of shape {pixels.shape}",
            context={"shape": pixels.shape},
        )
    if pixels.shape != (HEIGHT, WIDTH):
        h, w = pixels.shape
        raise InvalidDimensions(
            f"Image must be {WIDTH}x{HEIGHT}, got {w}x{h}",
            context={"shape": pixels.shape},
        )

    bits = (pixels != 0).astype(np.uint8)
    nibbles = np.zeros(NIBBLES, dtype=np.uint8)
    for k in range(NIBBLES):
        x, y = block_origin(k)
        nibbles[k] = np.bitwise_or.reduce(bits[y, x:x + BLOCK_W] << _SHIFTS)

    packed = (nibbles[0::2] << 4) | nibbles[1::2]
    return packed.tobytes()
