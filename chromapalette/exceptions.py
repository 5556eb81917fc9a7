"""
Exceptions and warnings raised throughout chromapalette.

Color math never raises: out-of-range inputs are pushed through the same
formulas. Only enumerated lookups with no sensible numeric default and
missing resources (pixels, a decodable image) fail.
"""


class ChromaPaletteError(Exception):
    """Base exception for all chromapalette errors."""


class UnknownHarmonyTypeError(ChromaPaletteError, ValueError):
    """Raised when a harmony type outside the supported set is requested."""

    def __init__(self, harmony_type):
        super().__init__(f"Unknown harmony type: {harmony_type}")
        self.harmony_type = harmony_type


class UnsupportedColorSpaceError(ChromaPaletteError, ValueError):
    """Raised when a color space key has no conversion."""

    def __init__(self, color_space):
        super().__init__(f"Unsupported color space: {color_space}")
        self.color_space = color_space


class MissingImageDataError(ChromaPaletteError, RuntimeError):
    """Raised when dominant colors are requested without any pixels."""

    def __init__(self, message: str = "No image data available"):
        super().__init__(message)


class ImageDecodeError(ChromaPaletteError, RuntimeError):
    """Raised when an encoded image buffer cannot be decoded into pixels."""


class GamutWarning(UserWarning):
    """Emitted when a source color has channels outside [0, 1]."""
