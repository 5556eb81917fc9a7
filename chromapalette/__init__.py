"""
ChromaPalette - Color Science Engine for UI Palettes
=====================================================

Derives multi-theme, multi-shade color palettes from a few source colors,
plus the color-science utilities a palette tool needs around them.

Key Features
------------
- Shade/tint generation in LCH, OKLCH, LAB, OKLAB, HSL and HSLuv
- Hue and chroma shifting with three chroma damping curves
- Source-color locking and nearest-to-source detection
- Color vision deficiency simulation (8 modes)
- WCAG and APCA contrast scoring, with a lightness solver
- Dominant color extraction (k-means++)
- Hue-rotation harmonies

Quick Start
-----------
>>> from chromapalette import ColorConfiguration, ThemeConfiguration, build_palette
>>>
>>> red = ColorConfiguration(id="red", name="Red", rgb=(1.0, 0.0, 0.0))
>>> theme = ThemeConfiguration(id="light", name="Light", scale={"100": 100, "50": 50})
>>> palette = build_palette([red], [theme], color_space="LCH")
>>> [shade.hex for shade in palette.themes[0].colors[0].shades]

Modules
-------
- colors: ColorTransform, vision simulation, alpha compositing
- conversions: color space conversions
- palette: palette builder and output tree
- contrast: WCAG / APCA contrast
- dominant: dominant color extraction
- harmony: color harmonies
"""

import logging

from .colors import (
    ColorTransform,
    simulate_color_blind_rgb,
    simulate_color_blind_hex,
    mix_colors_rgb,
    mix_colors_hex,
)
from .config import ColorConfiguration, ThemeConfiguration
from .contrast import Contrast, wcag_ratio
from .dominant import DominantColors, DominantColorResult, ImageData
from .harmony import ColorHarmony, ColorHarmonyResult
from .palette import (
    PaletteBuilder, build_palette,
    Palette, PaletteTheme, PaletteColor, PaletteShade,
)
from .types import (
    ColorSpace,
    AlgorithmVersion,
    VisionSimulationMode,
    ThemeType,
    Render,
    HarmonyType,
    WcagScore,
    RecommendedUsage,
)
from .exceptions import (
    ChromaPaletteError,
    UnknownHarmonyTypeError,
    UnsupportedColorSpaceError,
    MissingImageDataError,
    ImageDecodeError,
    GamutWarning,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "1.0.0"

__all__ = [
    # Transform
    "ColorTransform",
    "simulate_color_blind_rgb", "simulate_color_blind_hex",
    "mix_colors_rgb", "mix_colors_hex",

    # Configuration
    "ColorConfiguration", "ThemeConfiguration",

    # Palette
    "PaletteBuilder", "build_palette",
    "Palette", "PaletteTheme", "PaletteColor", "PaletteShade",

    # Utilities
    "Contrast", "wcag_ratio",
    "DominantColors", "DominantColorResult", "ImageData",
    "ColorHarmony", "ColorHarmonyResult",

    # Selectors
    "ColorSpace", "AlgorithmVersion", "VisionSimulationMode", "ThemeType",
    "Render", "HarmonyType", "WcagScore", "RecommendedUsage",

    # Errors
    "ChromaPaletteError", "UnknownHarmonyTypeError", "UnsupportedColorSpaceError",
    "MissingImageDataError", "ImageDecodeError", "GamutWarning",

    # Version
    "__version__",
]
