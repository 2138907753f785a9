"""
Exception hierarchy for gblogo.

Every failure the core can raise is a LogoError carrying a human-readable
message, a machine-readable code and optional context (paths, sizes).
"""


class LogoError(Exception):
    code = "LOGO_ERROR"

    def __init__(self, message, *, code=None, context=None):
        super().__init__(message)
        self.message = message
        if code is not None:
            self.code = code
        self.context = context or {}

    def __str__(self):
        return self.message


class RomTooSmall(LogoError):
    """ROM is shorter than the header area holding the logo."""
    code = "ROM_TOO_SMALL"


class LogoTooSmall(LogoError):
    """Replacement packed logo has fewer than 48 bytes."""
    code = "LOGO_TOO_SMALL"


class InvalidDimensions(LogoError):
    """Image is not a 48x8 single-channel grayscale bitmap."""
    code = "INVALID_DIMENSIONS"


class ImageDecodeFailed(LogoError):
    code = "IMAGE_DECODE_FAILED"


class ImageEncodeFailed(LogoError):
    code = "IMAGE_ENCODE_FAILED"
