"""
APCA lightness contrast (APCA-W3 0.0.98G-4g constants).

``apca_contrast`` returns the signed Lc value: positive for dark text on a
light background, negative for light text on a dark background.
"""

import math

import numpy as np

from ..types.color_types import ChannelLike, element_to_array

MAIN_TRC = 2.4
S_RCO, S_GCO, S_BCO = 0.2126729, 0.7151522, 0.0721750

NORM_BG, NORM_TXT = 0.56, 0.57
REV_TXT, REV_BG = 0.62, 0.65

BLK_THRS = 0.022
BLK_CLMP = 1.414
SCALE_BOW = SCALE_WOB = 1.14
LO_BOW_OFFSET = LO_WOB_OFFSET = 0.027
LO_CLIP = 0.1
DELTA_Y_MIN = 0.0005

# Lc rows every 5 from 0 to 125; columns are font weights 100..900 (px).
FONT_WEIGHTS = (100, 200, 300, 400, 500, 600, 700, 800, 900)
DO_NOT_USE = 999
NON_TEXT_ONLY = 777
FONT_LC_STEP = 5
FONT_TABLE = np.array([
    [999, 999, 999, 999, 999, 999, 999, 999, 999],  # 0
    [999, 999, 999, 999, 999, 999, 999, 999, 999],  # 5
    [999, 999, 999, 999, 999, 999, 999, 999, 999],  # 10
    [777, 777, 777, 777, 777, 777, 777, 777, 777],  # 15
    [777, 777, 777, 777, 777, 777, 777, 777, 777],  # 20
    [777, 777, 777, 120, 120, 108, 96, 96, 96],  # 25
    [777, 777, 120, 108, 108, 96, 72, 72, 72],  # 30
    [777, 120, 108, 96, 72, 60, 48, 48, 48],  # 35
    [120, 108, 96, 60, 48, 42, 32, 32, 32],  # 40
    [108, 96, 72, 42, 32, 28, 24, 24, 24],  # 45
    [96, 72, 60, 32, 28, 24, 21, 21, 21],  # 50
    [80, 60, 48, 28, 24, 21, 18, 18, 18],  # 55
    [72, 48, 42, 24, 21, 18, 16, 16, 18],  # 60
    [68, 46, 32, 21.75, 19, 17, 15, 16, 18],  # 65
    [64, 44, 28, 19.5, 18, 16, 14.5, 16, 18],  # 70
    [60, 42, 24, 18, 16, 15, 14, 16, 18],  # 75
    [56, 38.25, 23, 17.25, 15.81, 14.81, 14, 16, 18],  # 80
    [52, 34.5, 22, 16.5, 15.625, 14.625, 14, 16, 18],  # 85
    [48, 32, 21, 16, 15.5, 14.5, 14, 16, 18],  # 90
    [45, 28, 19.5, 15.5, 15, 14, 13.5, 16, 18],  # 95
    [42, 26.5, 18.5, 15, 14.5, 13.5, 13, 16, 18],  # 100
    [39, 25, 18, 14.5, 14, 13, 12, 16, 18],  # 105
    [36, 24, 18, 14, 13, 12, 11, 16, 18],  # 110
    [34, 22.5, 17.25, 12.5, 11.875, 11.25, 10.625, 14.5, 16.5],  # 115
    [32, 21, 16.5, 11, 10.75, 10.5, 10.25, 13, 15],  # 120
    [30, 21, 16, 10, 10, 10, 10, 12, 14],  # 125
], dtype=float)


def srgb_to_y(rgb: ChannelLike) -> float:
    """Screen luminance of a 0-255 sRGB color, using a simple 2.4 power curve."""
    c = element_to_array(rgb)[:3] / 255
    lin = np.sign(c) * np.abs(c) ** MAIN_TRC
    return float(S_RCO * lin[0] + S_GCO * lin[1] + S_BCO * lin[2])


def _soft_clamp_black(y: float) -> float:
    return y if y > BLK_THRS else y + (BLK_THRS - y) ** BLK_CLMP


def apca_contrast(text_y: float, background_y: float) -> float:
    """
    Signed Lc contrast of text luminance ``text_y`` over ``background_y``.

    Luminances outside [0, 1.1] or NaN give 0.
    """
    if math.isnan(text_y) or math.isnan(background_y):
        return 0.0
    if min(text_y, background_y) < 0 or max(text_y, background_y) > 1.1:
        return 0.0

    text_y = _soft_clamp_black(text_y)
    background_y = _soft_clamp_black(background_y)
    if abs(background_y - text_y) < DELTA_Y_MIN:
        return 0.0

    if background_y > text_y:
        sapc = (background_y ** NORM_BG - text_y ** NORM_TXT) * SCALE_BOW
        output = 0.0 if sapc < LO_CLIP else sapc - LO_BOW_OFFSET
    else:
        sapc = (background_y ** REV_BG - text_y ** REV_TXT) * SCALE_WOB
        output = 0.0 if sapc > -LO_CLIP else sapc + LO_WOB_OFFSET
    return output * 100


def font_lookup_apca(contrast: float, places: int = 2) -> list[float]:
    """
    Minimum font sizes for an Lc value.

    Returns:
        ``[Lc, size@100, ..., size@900]``. Sizes are linearly interpolated
        between the 5-Lc rows; 999 means "do not use", 777 "non-text only".
    """
    lc = 0.0 if math.isnan(contrast) else abs(contrast)
    position = min(lc / FONT_LC_STEP, len(FONT_TABLE) - 1)
    lower = int(math.floor(position))
    upper = min(lower + 1, len(FONT_TABLE) - 1)
    fraction = position - lower

    low_row, high_row = FONT_TABLE[lower], FONT_TABLE[upper]
    sizes = low_row + (high_row - low_row) * fraction
    sizes = np.where(low_row >= NON_TEXT_ONLY, low_row, sizes)
    return [round(lc, places), *np.round(sizes, places).tolist()]
