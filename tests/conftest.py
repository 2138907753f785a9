import struct
import zlib

import pytest

from gblogo import LOGO_OFFSET, Rom

# The logo every licensed cartridge carries
NINTENDO_LOGO = bytes([
    0xCE, 0xED, 0x66, 0x66, 0xCC, 0x0D, 0x00, 0x0B, 0x03, 0x73, 0x00, 0x83, 0x00, 0x0C,
    0x00, 0x0D, 0x00, 0x08, 0x11, 0x1F, 0x88, 0x89, 0x00, 0x0E, 0xDC, 0xCC, 0x6E, 0xE6,
    0xDD, 0xDD, 0xD9, 0x99, 0xBB, 0xBB, 0x67, 0x63, 0x6E, 0x0E, 0xEC, 0xCC, 0xDD, 0xDC,
    0x99, 0x9F, 0xBB, 0xB9, 0x33, 0x3E,
])

NINTENDO_LOGO_TEXT = "\n".join([
    "##...##.##.............................##.......",
    "###..##.##........##...................##.......",
    "###..##..........####..................##.......",
    "##.#.##.##.##.##..##..####..##.##...#####..####.",
    "##.#.##.##.###.##.##.##..##.###.##.##..##.##..##",
    "##..###.##.##..##.##.######.##..##.##..##.##..##",
    "##..###.##.##..##.##.##.....##..##.##..##.##..##",
    "##...##.##.##..##.##..#####.##..##..#####..####.",
])

# 8-bit grayscale rendering of NINTENDO_LOGO written by another PNG encoder
NINTENDO_LOGO_PNG = bytes([
    0x89, 0x50, 0x4E, 0x47, 0x0D, 0x0A, 0x1A, 0x0A, 0x00, 0x00, 0x00, 0x0D, 0x49, 0x48,
    0x44, 0x52, 0x00, 0x00, 0x00, 0x30, 0x00, 0x00, 0x00, 0x08, 0x08, 0x00, 0x00, 0x00,
    0x00, 0x9A, 0x40, 0x23, 0x9B, 0x00, 0x00, 0x00, 0x66, 0x49, 0x44, 0x41, 0x54, 0x78,
    0x9C, 0x7D, 0xCB, 0x89, 0x0D, 0xC0, 0x30, 0x0C, 0x02, 0xC0, 0x64, 0xFF, 0xA1, 0xD3,
    0x23, 0xBF, 0x5A, 0xA9, 0x08, 0x1B, 0xF0, 0x53, 0x5B, 0xA9, 0xA5, 0x68, 0x58, 0x7E,
    0xB0, 0xD7, 0x0E, 0x59, 0x11, 0xC5, 0xE0, 0xB8, 0x0B, 0x7B, 0xE8, 0x90, 0xDD, 0x11,
    0x0C, 0xAE, 0xB4, 0xB0, 0x2F, 0x3C, 0xD4, 0xD6, 0xDB, 0x62, 0xDF, 0x8D, 0x2F, 0x0E,
    0x73, 0x0D, 0x89, 0x7A, 0x26, 0xE7, 0x21, 0x35, 0x69, 0x4D, 0x52, 0xE1, 0x48, 0x97,
    0x74, 0x45, 0x36, 0x62, 0x00, 0x64, 0x0D, 0x3E, 0xD2, 0x15, 0xD9, 0x08, 0x7A, 0x48,
    0x48, 0xE1, 0x4B, 0xA6, 0xE2, 0x74, 0x04, 0xA6, 0x4B, 0xC1, 0x90, 0xFA, 0x00, 0xA1,
    0x63, 0x4D, 0x06, 0xB4, 0xD9, 0x32, 0xF0, 0x00, 0x00, 0x00, 0x00, 0x49, 0x45, 0x4E,
    0x44, 0xAE, 0x42, 0x60, 0x82,
])

# 1-bit grayscale 48x8 custom logo and its packed form
CUSTOM_LOGO_PNG = bytes([
    0x89, 0x50, 0x4e, 0x47, 0x0d, 0x0a, 0x1a, 0x0a, 0x00, 0x00, 0x00, 0x0d, 0x49, 0x48,
    0x44, 0x52, 0x00, 0x00, 0x00, 0x30, 0x00, 0x00, 0x00, 0x08, 0x01, 0x00, 0x00, 0x00,
    0x00, 0x97, 0x50, 0x41, 0xea, 0x00, 0x00, 0x00, 0x3a, 0x49, 0x44, 0x41, 0x54, 0x78,
    0x01, 0x63, 0xf8, 0x61, 0x79, 0xce, 0xf0, 0xc7, 0x7f, 0x86, 0xcf, 0xfb, 0xcf, 0x1b,
    0xff, 0x01, 0x52, 0x0f, 0x9b, 0x8d, 0x54, 0xe6, 0x33, 0x7c, 0xfe, 0x79, 0x9e, 0x59,
    0xc5, 0x9f, 0xe1, 0x93, 0xe4, 0x79, 0x63, 0x95, 0xf3, 0x0c, 0x9f, 0x2d, 0xa1, 0xd4,
    0x59, 0x63, 0xa0, 0xe0, 0x8f, 0x84, 0x24, 0xc3, 0x86, 0xf9, 0x00, 0x41, 0xd1, 0x1b,
    0x1e, 0xd9, 0xd5, 0xca, 0x4a, 0x00, 0x00, 0x00, 0x00, 0x49, 0x45, 0x4e, 0x44, 0xae,
    0x42, 0x60, 0x82,
])

CUSTOM_LOGO = bytes([
    0xFF, 0xFF, 0x83, 0x33, 0x3B, 0xEF, 0x9F, 0x19, 0xCC, 0x8C, 0xEF, 0x3F, 0x33, 0x30,
    0x13, 0x23, 0xFF, 0x22, 0x8C, 0x44, 0xFF, 0x94, 0xFF, 0xFF, 0xFF, 0xFF, 0x23, 0x38,
    0x13, 0x36, 0x99, 0x90, 0xCC, 0xC6, 0xFF, 0xD2, 0x33, 0x33, 0x33, 0x31, 0x22, 0x28,
    0x44, 0x40, 0xCC, 0x49, 0xFF, 0xFF,
])


@pytest.fixture
def rom_bytes():
    """Minimal 0x150-byte ROM: zeroed header around the Nintendo logo."""
    return bytes(LOGO_OFFSET) + NINTENDO_LOGO + bytes(0x0150 - 0x0134)


@pytest.fixture
def rom(rom_bytes):
    return Rom(rom_bytes)


@pytest.fixture
def rom_file(tmp_path, rom_bytes):
    path = tmp_path / "game.gb"
    path.write_bytes(rom_bytes)
    return path


def png_with_header(width, height, bit_depth=8, color_type=0):
    """PNG whose IHDR claims width x height, with an empty IDAT."""
    def chunk(kind, body):
        return struct.pack(">I", len(body)) + kind + body + struct.pack(">I", zlib.crc32(kind + body))

    ihdr = struct.pack(">IIBBBBB", width, height, bit_depth, color_type, 0, 0, 0)
    return (b"\x89PNG\r\n\x1a\n" + chunk(b"IHDR", ihdr)
            + chunk(b"IDAT", zlib.compress(b"")) + chunk(b"IEND", b""))
