import numpy as np
from numpy import ndarray as NDArray
from boundednumbers.functions import cyclic_wrap_float

from .lab import _stack
from ..types.color_types import HUE_360


def normalize_hue(h: float) -> float:
    """Normalize hue to [0, 360) range."""
    return cyclic_wrap_float(h, 0, HUE_360)

## HSL to RGB conversions

def hsl_to_unit_rgb(h: float, s: float, l: float) -> tuple[float, float, float]:
    """
    Convert HSL to RGB using the CSS Color 4 algorithm.

    Args:
        h: Hue in degrees, any value (wrapped into [0, 360)); NaN reads as 0
        s: Saturation in [0, 1]
        l: Lightness in [0, 1]

    Returns:
        Tuple[float, float, float]: (r, g, b), unclipped
    """
    r, g, b = np_hsl_to_unit_rgb(h, s, l).tolist()
    return r, g, b

def np_hsl_to_unit_rgb(h: NDArray, s: NDArray, l: NDArray) -> NDArray:
    """
    Vectorized: Convert HSL to RGB using the CSS Color 4 algorithm.

    Uses the ``f(n) = l - a * max(-1, min(k - 3, 9 - k, 1))`` form, which is
    branch-free and equivalent to the six-sector formulation.

    Returns:
        rgb: array of shape (..., 3): (r, g, b)
    """
    hsl = _stack(h, s, l)
    hue = np.nan_to_num(hsl[..., 0], nan=0.0) % HUE_360
    sat = np.nan_to_num(hsl[..., 1], nan=0.0)
    light = hsl[..., 2]

    a = sat * np.minimum(light, 1 - light)
    channels = []
    for n in (0, 8, 4):
        k = (n + hue / 30) % 12
        channels.append(light - a * np.maximum(-1, np.minimum(np.minimum(k - 3, 9 - k), 1)))
    return np.stack(channels, axis=-1)

## RGB to HSL conversions

def unit_rgb_to_hsl(r: float, g: float, b: float) -> tuple[float, float, float]:
    """
    Convert RGB to HSL using the CSS Color 4 algorithm.

    Returns:
        Tuple[float, float, float]: (hue [0,360), saturation [0,1], lightness [0,1]);
        achromatic colors get hue 0
    """
    h, s, l = np_unit_rgb_to_hsl(r, g, b).tolist()
    return h, s, l

def np_unit_rgb_to_hsl(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert RGB to HSL using the CSS Color 4 algorithm.

    Returns:
        hsl: array of shape (..., 3): (hue [0,360), saturation [0,1], lightness [0,1])
    """
    rgb = _stack(r, g, b)
    r, g, b = rgb[..., 0], rgb[..., 1], rgb[..., 2]

    max_c = rgb.max(axis=-1)
    min_c = rgb.min(axis=-1)
    delta = max_c - min_c
    lightness = (max_c + min_c) / 2.0
    chromatic = delta > 0

    with np.errstate(divide="ignore", invalid="ignore"):
        saturation = np.where(chromatic, delta / (1 - np.abs(2 * lightness - 1)), 0.0)
        hue = np.select(
            [max_c == r, max_c == g],
            [((g - b) / delta) % 6, (b - r) / delta + 2],
            default=(r - g) / delta + 4,
        ) * 60
    hue = np.where(chromatic, hue % HUE_360, 0.0)
    saturation = np.nan_to_num(saturation, nan=0.0, posinf=0.0, neginf=0.0)

    return np.stack([hue, saturation, lightness], axis=-1)
