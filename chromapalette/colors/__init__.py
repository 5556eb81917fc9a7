from .transform import ColorTransform, default_lightness
from .vision import COLOR_BLIND_MATRICES, apply_color_matrix, simulate_color_blind_rgb, simulate_color_blind_hex
from .mixing import mix_colors_rgb, mix_colors_hex

__all__ = [
    "ColorTransform",
    "default_lightness",
    "COLOR_BLIND_MATRICES",
    "apply_color_matrix",
    "simulate_color_blind_rgb",
    "simulate_color_blind_hex",
    "mix_colors_rgb",
    "mix_colors_hex",
]
