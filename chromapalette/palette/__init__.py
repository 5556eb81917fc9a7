from .builder import PaletteBuilder, build_palette, CLOSEST_TO_REF_THRESHOLD
from .models import Palette, PaletteTheme, PaletteColor, PaletteShade

__all__ = [
    "PaletteBuilder",
    "build_palette",
    "CLOSEST_TO_REF_THRESHOLD",
    "Palette",
    "PaletteTheme",
    "PaletteColor",
    "PaletteShade",
]
