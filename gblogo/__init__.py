"""Rip and replace the Game Boy boot logo stored in a cartridge ROM."""

from .codec import decode, encode, block_origin, nibble_index, WIDTH, HEIGHT
from .errors import (
    LogoError, RomTooSmall, LogoTooSmall, InvalidDimensions,
    ImageDecodeFailed, ImageEncodeFailed,
)
from .rom import Rom, LOGO_OFFSET, LOGO_SIZE, ROM_MIN_SIZE

__version__ = "0.2.0"

__all__ = [
    "Rom", "decode", "encode", "block_origin", "nibble_index",
    "LogoError", "RomTooSmall", "LogoTooSmall", "InvalidDimensions",
    "ImageDecodeFailed", "ImageEncodeFailed",
    "WIDTH", "HEIGHT", "LOGO_OFFSET", "LOGO_SIZE", "ROM_MIN_SIZE",
]
