"""
Dispatch between unit RGB and every supported color space.

``to_space`` / ``from_space`` replace string-keyed lookup tables with an
exhaustive ``match`` over :class:`ColorSpace`. Native component ranges:

    LCH    (L [0, 100], C, H [0, 360))
    OKLCH  (L [0, 1],   C, H [0, 360))
    LAB    (L [0, 100], a, b)
    OKLAB  (L [0, 1],   a, b)
    HSL    (H [0, 360), S [0, 1], L [0, 1])
    HSLUV  (H [0, 360), S [0, 100], L [0, 100])
"""

from typing import Any

from .hex import rgb_to_hex
from .hsl import unit_rgb_to_hsl, hsl_to_unit_rgb
from .hsluv_space import unit_rgb_to_hsluv, hsluv_to_unit_rgb
from .lab import unit_rgb_to_lab, lab_to_unit_rgb, unit_rgb_to_lch, lch_to_unit_rgb
from .linear import rgb_to_gl, to_rgb255
from .oklab import unit_rgb_to_oklab, oklab_to_unit_rgb, unit_rgb_to_oklch, oklch_to_unit_rgb
from ..exceptions import UnsupportedColorSpaceError
from ..types.color_types import Channel, ChannelLike, as_channel
from ..types.config_types import ColorSpace


def to_space(color_space: ColorSpace | str, unit_rgb: ChannelLike) -> tuple[float, float, float]:
    """Convert unit RGB into ``color_space`` components."""
    r, g, b = as_channel(unit_rgb)
    match ColorSpace.coerce(color_space):
        case ColorSpace.LCH:
            return unit_rgb_to_lch(r, g, b)
        case ColorSpace.OKLCH:
            return unit_rgb_to_oklch(r, g, b)
        case ColorSpace.LAB:
            return unit_rgb_to_lab(r, g, b)
        case ColorSpace.OKLAB:
            return unit_rgb_to_oklab(r, g, b)
        case ColorSpace.HSL:
            return unit_rgb_to_hsl(r, g, b)
        case ColorSpace.HSLUV:
            return unit_rgb_to_hsluv(r, g, b)
    raise UnsupportedColorSpaceError(color_space)


def from_space(color_space: ColorSpace | str, values: ChannelLike) -> tuple[float, float, float]:
    """Convert ``color_space`` components back to (unclipped) unit RGB."""
    x, y, z = as_channel(values)
    match ColorSpace.coerce(color_space):
        case ColorSpace.LCH:
            return lch_to_unit_rgb(x, y, z)
        case ColorSpace.OKLCH:
            return oklch_to_unit_rgb(x, y, z)
        case ColorSpace.LAB:
            return lab_to_unit_rgb(x, y, z)
        case ColorSpace.OKLAB:
            return oklab_to_unit_rgb(x, y, z)
        case ColorSpace.HSL:
            return hsl_to_unit_rgb(x, y, z)
        case ColorSpace.HSLUV:
            return hsluv_to_unit_rgb(x, y, z)
    raise UnsupportedColorSpaceError(color_space)


def rgb255_from_space(color_space: ColorSpace | str, values: ChannelLike) -> Channel:
    return to_rgb255(from_space(color_space, values))


def describe(rgb: ChannelLike, alpha: float | None = None) -> dict[str, Any]:
    """
    Express a 0-255 RGB color in every representation a palette shade carries.

    The color is quantized to integer channels first so all representations
    describe the color that ``hex`` names.

    Returns:
        dict with keys ``hex``, ``rgb``, ``gl``, ``lch``, ``oklch``, ``lab``,
        ``oklab``, ``hsl`` and ``hsluv``
    """
    rgb255 = to_rgb255([float(v) / 255 for v in list(rgb)[:3]])
    unit = [v / 255 for v in rgb255]
    return {
        "hex": rgb_to_hex(rgb255, alpha),
        "rgb": rgb255,
        "gl": rgb_to_gl(rgb255, 1.0 if alpha is None else alpha),
        "lch": to_space(ColorSpace.LCH, unit),
        "oklch": to_space(ColorSpace.OKLCH, unit),
        "lab": to_space(ColorSpace.LAB, unit),
        "oklab": to_space(ColorSpace.OKLAB, unit),
        "hsl": to_space(ColorSpace.HSL, unit),
        "hsluv": to_space(ColorSpace.HSLUV, unit),
    }
