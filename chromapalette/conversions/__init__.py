from .linear import (
    np_srgb_to_linear, np_linear_to_srgb, relative_luminance,
    np_to_rgb255, to_rgb255, rgb_to_gl,
)
from .lab import (
    np_unit_rgb_to_lab, np_lab_to_unit_rgb, np_lab_to_lch, np_lch_to_lab,
    np_unit_rgb_to_lch, np_lch_to_unit_rgb,
    unit_rgb_to_lab, lab_to_unit_rgb, unit_rgb_to_lch, lch_to_unit_rgb,
)
from .oklab import (
    np_unit_rgb_to_oklab, np_oklab_to_unit_rgb, np_unit_rgb_to_oklch, np_oklch_to_unit_rgb,
    unit_rgb_to_oklab, oklab_to_unit_rgb, unit_rgb_to_oklch, oklch_to_unit_rgb,
)
from .hsl import normalize_hue, hsl_to_unit_rgb, np_hsl_to_unit_rgb, unit_rgb_to_hsl, np_unit_rgb_to_hsl
from .hsluv_space import unit_rgb_to_hsluv, hsluv_to_unit_rgb
from .hex import is_valid_hex, hex_to_rgb, hex_to_rgba, rgb_to_hex
from .distance import rgb_distance
from .wrapper import to_space, from_space, rgb255_from_space, describe

__all__ = [
    "np_srgb_to_linear", "np_linear_to_srgb", "relative_luminance",
    "np_to_rgb255", "to_rgb255", "rgb_to_gl",
    "np_unit_rgb_to_lab", "np_lab_to_unit_rgb", "np_lab_to_lch", "np_lch_to_lab",
    "np_unit_rgb_to_lch", "np_lch_to_unit_rgb",
    "unit_rgb_to_lab", "lab_to_unit_rgb", "unit_rgb_to_lch", "lch_to_unit_rgb",
    "np_unit_rgb_to_oklab", "np_oklab_to_unit_rgb", "np_unit_rgb_to_oklch", "np_oklch_to_unit_rgb",
    "unit_rgb_to_oklab", "oklab_to_unit_rgb", "unit_rgb_to_oklch", "oklch_to_unit_rgb",
    "normalize_hue", "hsl_to_unit_rgb", "np_hsl_to_unit_rgb", "unit_rgb_to_hsl", "np_unit_rgb_to_hsl",
    "unit_rgb_to_hsluv", "hsluv_to_unit_rgb",
    "is_valid_hex", "hex_to_rgb", "hex_to_rgba", "rgb_to_hex",
    "rgb_distance",
    "to_space", "from_space", "rgb255_from_space", "describe",
]
