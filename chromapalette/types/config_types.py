# No dependencies
from __future__ import annotations
from enum import Enum

from ..exceptions import UnsupportedColorSpaceError


class ColorSpace(str, Enum):
    """Color spaces a palette can be generated in."""
    LCH = "LCH"
    OKLCH = "OKLCH"
    LAB = "LAB"
    OKLAB = "OKLAB"
    HSL = "HSL"
    HSLUV = "HSLUV"

    @classmethod
    def coerce(cls, value: "ColorSpace | str") -> "ColorSpace":
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).upper())
        except ValueError:
            raise UnsupportedColorSpaceError(value) from None


class AlgorithmVersion(str, Enum):
    """Chroma damping curve applied while generating shades."""
    V1 = "v1"
    V2 = "v2"
    V3 = "v3"


class VisionSimulationMode(str, Enum):
    NONE = "NONE"
    PROTANOMALY = "PROTANOMALY"
    PROTANOPIA = "PROTANOPIA"
    DEUTERANOMALY = "DEUTERANOMALY"
    DEUTERANOPIA = "DEUTERANOPIA"
    TRITANOMALY = "TRITANOMALY"
    TRITANOPIA = "TRITANOPIA"
    ACHROMATOMALY = "ACHROMATOMALY"
    ACHROMATOPSIA = "ACHROMATOPSIA"

    @classmethod
    def coerce(cls, value: "VisionSimulationMode | str | None") -> "VisionSimulationMode | None":
        """Return the matching mode, or None when ``value`` names no known mode."""
        if isinstance(value, cls):
            return value
        if value is None:
            return None
        try:
            return cls(str(value).upper())
        except ValueError:
            return None


class ThemeType(str, Enum):
    DEFAULT = "default theme"
    CUSTOM = "custom theme"


class Render(str, Enum):
    """Output format of ColorTransform conversion methods."""
    RGB = "RGB"
    HEX = "HEX"


class HarmonyType(str, Enum):
    ANALOGOUS = "ANALOGOUS"
    COMPLEMENTARY = "COMPLEMENTARY"
    TRIADIC = "TRIADIC"
    TETRADIC = "TETRADIC"
    SQUARE = "SQUARE"


class WcagScore(str, Enum):
    A = "A"
    AA = "AA"
    AAA = "AAA"


class RecommendedUsage(str, Enum):
    UNKNOWN = "UNKNOWN"
    AVOID = "AVOID"
    NON_TEXT = "NON_TEXT"
    SPOT_TEXT = "SPOT_TEXT"
    HEADLINES = "HEADLINES"
    BODY_TEXT = "BODY_TEXT"
    CONTENT_TEXT = "CONTENT_TEXT"
    FLUENT_TEXT = "FLUENT_TEXT"
