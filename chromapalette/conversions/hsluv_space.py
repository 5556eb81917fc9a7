"""HSLuv conversions backed by the reference ``hsluv`` implementation."""

import math

import hsluv


def _finite(value: float) -> float:
    return 0.0 if math.isnan(value) else float(value)


def unit_rgb_to_hsluv(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Returns:
        (hue [0, 360), saturation [0, 100], lightness [0, 100])
    """
    h, s, l = hsluv.rgb_to_hsluv((float(r), float(g), float(b)))
    return _finite(h), _finite(s), _finite(l)


def hsluv_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """NaN hue or saturation (degenerate achromatic input) is read as 0."""
    r, g, b = hsluv.hsluv_to_rgb((_finite(h), _finite(s), float(l)))
    return r, g, b

