import pathlib

from . import codec, image
from .codec import LOGO_SIZE
from .errors import LogoTooSmall, RomTooSmall

# Cartridge header layout
LOGO_OFFSET = 0x0104
LOGO_END = LOGO_OFFSET + LOGO_SIZE
ROM_MIN_SIZE = 0x014F


class Rom:
    """
    A cartridge image holding the boot logo at 0x0104-0x0133.

    Rom values are immutable: replacing the logo returns a new Rom and
    leaves this one untouched.
    """

    def __init__(self, data):
        data = bytes(data)
        if len(data) < ROM_MIN_SIZE:
            raise RomTooSmall(
                f"ROM too small: {len(data)} bytes, need at least {ROM_MIN_SIZE}",
                context={"size": len(data)},
            )
        self._data = data

    @classmethod
    def from_file(cls, path):
        return cls(pathlib.Path(path).read_bytes())

    def save(self, path):
        pathlib.Path(path).write_bytes(self._data)

    def to_bytes(self):
        return self._data

    def __len__(self):
        return len(self._data)

    def __eq__(self, other):
        if not isinstance(other, Rom):
            return NotImplemented
        return self._data == other._data

    def __hash__(self):
        return hash(self._data)

    def __repr__(self):
        return f"Rom({len(self._data)} bytes)"

    # ---------------------------------------------------------
    # Packed logo window
    # ---------------------------------------------------------
    def get_logo_raw(self):
        return self._data[LOGO_OFFSET:LOGO_END]

    def with_logo_raw(self, logo):
        # Only the first 48 bytes are used; anything past that is ignored.
        logo = bytes(logo)
        if len(logo) < LOGO_SIZE:
            raise LogoTooSmall(
                f"Logo too small: {len(logo)} bytes, need {LOGO_SIZE}",
                context={"size": len(logo)},
            )
        return Rom(self._data[:LOGO_OFFSET] + logo[:LOGO_SIZE] + self._data[LOGO_END:])

    # ---------------------------------------------------------
    # Decoded logo
    # ---------------------------------------------------------
    def get_logo(self):
        return codec.decode(self.get_logo_raw())

    def with_logo(self, grid):
        return self.with_logo_raw(codec.encode(grid))

    def get_logo_png(self):
        return image.to_png(self.get_logo())

    def with_logo_png(self, data):
        return self.with_logo(image.from_png(data))
