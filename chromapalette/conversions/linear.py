"""sRGB companding, relative luminance and 0-255 channel helpers."""

import numpy as np
from numpy import ndarray as NDArray

from ..types.color_types import Channel, GLChannel, ChannelLike, element_to_array


def np_srgb_to_linear(c: NDArray) -> NDArray:
    """Undo sRGB gamma. Accepts unit values, sign is preserved outside [0, 1]."""
    c = np.asarray(c, dtype=float)
    a = np.abs(c)
    return np.where(a <= 0.04045, c / 12.92, np.sign(c) * ((a + 0.055) / 1.055) ** 2.4)


def np_linear_to_srgb(c: NDArray) -> NDArray:
    """Apply sRGB gamma to linear light values."""
    c = np.asarray(c, dtype=float)
    a = np.abs(c)
    return np.where(a <= 0.0031308, 12.92 * c, np.sign(c) * (1.055 * a ** (1 / 2.4) - 0.055))


def relative_luminance(rgb: ChannelLike) -> float:
    """
    WCAG relative luminance of a 0-255 RGB triple.

    Uses the 0.03928 break point of WCAG 2.x rather than the 0.04045 of
    IEC 61966-2-1; the two only differ below 1/255.
    """
    c = np.clip(element_to_array(rgb)[:3], 0, 255) / 255
    lin = np.where(c <= 0.03928, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)
    return float(0.2126 * lin[0] + 0.7152 * lin[1] + 0.0722 * lin[2])


def np_to_rgb255(unit_rgb: NDArray) -> NDArray:
    """Scale unit RGB to integer 0-255 channels: NaN becomes 0, halves round up."""
    scaled = np.nan_to_num(np.asarray(unit_rgb, dtype=float) * 255, nan=0.0)
    return np.floor(np.clip(scaled, 0, 255) + 0.5).astype(int)


def to_rgb255(unit_rgb: ChannelLike) -> Channel:
    r, g, b = np_to_rgb255(element_to_array(unit_rgb)[:3]).tolist()
    return r, g, b


def rgb_to_gl(rgb: ChannelLike, alpha: float = 1.0) -> GLChannel:
    """OpenGL-style normalized channels ``(r, g, b, a)`` in [0, 1]."""
    r, g, b = (float(v) / 255 for v in list(rgb)[:3])
    return r, g, b, float(alpha)
