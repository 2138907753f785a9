import argparse
import sys

from . import __version__, image
from .errors import LogoError
from .rom import LOGO_OFFSET, LOGO_SIZE, Rom

# --- ANSI Colors for Console Output ---
C_ON    = "\033[97m" # White
C_OFF   = "\033[90m" # Gray
C_OK    = "\033[92m" # Green
C_ERR   = "\033[91m" # Red
C_RESET = "\033[0m"


class CommandFailed(Exception):
    """Raised by a subcommand to report a failure tied to a file."""

    def __init__(self, path, reason):
        super().__init__(f"{path}: {reason}")
        self.path = path
        self.reason = reason


def _read(path):
    try:
        with open(path, 'rb') as f:
            return f.read()
    except OSError as e:
        raise CommandFailed(path, e.strerror or e) from e


def _write(path, data):
    try:
        with open(path, 'wb') as f:
            f.write(data)
    except OSError as e:
        raise CommandFailed(path, e.strerror or e) from e


def _load_rom(path):
    try:
        return Rom.from_file(path)
    except OSError as e:
        raise CommandFailed(path, e.strerror or e) from e
    except LogoError as e:
        raise CommandFailed(path, e) from e


# ---------------------------------------------------------
# Subcommands
# ---------------------------------------------------------
def cmd_extract(args):
    rom = _load_rom(args.rom)
    if args.raw:
        data = rom.get_logo_raw()
    else:
        try:
            data = rom.get_logo_png()
        except LogoError as e:
            raise CommandFailed(args.output, e) from e
    _write(args.output, data)
    print(f"{C_OK}Logo written to {args.output}{C_RESET} ({len(data)} bytes)")


def cmd_inject(args):
    rom = _load_rom(args.rom)
    data = _read(args.image)
    try:
        if args.raw:
            rom = rom.with_logo_raw(data)
        else:
            rom = rom.with_logo_png(data)
    except LogoError as e:
        raise CommandFailed(args.image, e) from e

    # Rewrite the input ROM unless told otherwise
    output = args.output or args.rom
    try:
        rom.save(output)
    except OSError as e:
        raise CommandFailed(output, e.strerror or e) from e
    print(f"{C_OK}Logo replaced at 0x{LOGO_OFFSET:04X}-0x{LOGO_OFFSET + LOGO_SIZE - 1:04X}, "
          f"ROM written to {output}{C_RESET}")


def cmd_show(args):
    rom = _load_rom(args.rom)
    if args.plain:
        print(image.to_text(rom.get_logo()))
        return
    print(image.to_text(rom.get_logo(),
                        on=f"{C_ON}█{C_RESET}", off=f"{C_OFF}·{C_RESET}"))


def build_parser():
    parser = argparse.ArgumentParser(
        prog='gblogo',
        description="ROM utility for ripping/replacing the Game Boy boot logo",
    )
    parser.add_argument('--version', action='version', version=f"%(prog)s {__version__}")
    sub = parser.add_subparsers(dest='command', required=True)

    p = sub.add_parser('extract', aliases=['get'], help="Write the ROM's logo to a PNG")
    p.add_argument('rom', help='Input ROM')
    p.add_argument('-o', '--output', required=True, help='Output PNG')
    p.add_argument('--raw', action='store_true', help='Write the 48 packed logo bytes instead of a PNG')
    p.set_defaults(func=cmd_extract)

    p = sub.add_parser('inject', aliases=['set'], help="Replace the ROM's logo from a PNG")
    p.add_argument('rom', help='Input ROM')
    p.add_argument('image', help='Input PNG (48x8 grayscale)')
    p.add_argument('-o', '--output', help='Output ROM (default: rewrite the input ROM)')
    p.add_argument('--raw', action='store_true', help='Input is packed logo bytes instead of a PNG')
    p.set_defaults(func=cmd_inject)

    p = sub.add_parser('show', help="Print the ROM's logo to the terminal")
    p.add_argument('rom', help='Input ROM')
    p.add_argument('--plain', action='store_true', help='Use # and . instead of colored blocks')
    p.set_defaults(func=cmd_show)

    return parser


def main(argv=None):
    args = build_parser().parse_args(argv)
    try:
        args.func(args)
    except CommandFailed as e:
        print(f"{C_ERR}{e}{C_RESET}", file=sys.stderr)
        return 1
    return 0

