from .contrast import Contrast, wcag_ratio, PASS_COLOR, FAIL_COLOR
from .apca import apca_contrast, font_lookup_apca, srgb_to_y

__all__ = [
    "Contrast",
    "wcag_ratio",
    "PASS_COLOR",
    "FAIL_COLOR",
    "apca_contrast",
    "font_lookup_apca",
    "srgb_to_y",
]
