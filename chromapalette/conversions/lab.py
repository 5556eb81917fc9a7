"""
CIE Lab and LCh(ab) conversions (D65 reference white).

Functions take unit RGB. The ``np_`` variants accept scalars or arrays of any
broadcastable shape and return arrays shaped ``(..., 3)``.
"""

import numpy as np
from numpy import ndarray as NDArray

from .linear import np_srgb_to_linear, np_linear_to_srgb

# D65 reference white
XN, YN, ZN = 0.950470, 1.0, 1.088830

T0 = 4 / 29
T1 = 6 / 29
T2 = 3 * T1 ** 2
T3 = T1 ** 3

RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
])

XYZ_TO_RGB = np.array([
    [3.2404542, -1.5371385, -0.4985314],
    [-0.9692660, 1.8760108, 0.0415560],
    [0.0556434, -0.2040259, 1.0572252],
])


def _stack(x, y, z) -> NDArray:
    x, y, z = np.broadcast_arrays(
        np.asarray(x, dtype=float), np.asarray(y, dtype=float), np.asarray(z, dtype=float)
    )
    return np.stack([x, y, z], axis=-1)


def _xyz_to_lab_f(t: NDArray) -> NDArray:
    return np.where(t > T3, np.cbrt(t), t / T2 + T0)


def _lab_f_to_xyz(t: NDArray) -> NDArray:
    return np.where(t > T1, t ** 3, T2 * (t - T0))


## RGB to Lab

def np_unit_rgb_to_lab(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert unit RGB to CIE Lab.

    Returns:
        lab: array of shape (..., 3): (L [0, 100], a, b)
    """
    xyz = np_srgb_to_linear(_stack(r, g, b)) @ RGB_TO_XYZ.T
    f = _xyz_to_lab_f(xyz / np.array([XN, YN, ZN]))

    lightness = np.maximum(116 * f[..., 1] - 16, 0.0)
    a = 500 * (f[..., 0] - f[..., 1])
    b_ = 200 * (f[..., 1] - f[..., 2])
    return np.stack([lightness, a, b_], axis=-1)


def np_lab_to_unit_rgb(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """Vectorized: Convert CIE Lab to (unclipped) unit RGB."""
    lab = _stack(l, a, b)
    fy = (lab[..., 0] + 16) / 116
    fx = fy + lab[..., 1] / 500
    fz = fy - lab[..., 2] / 200

    xyz = np.stack([
        XN * _lab_f_to_xyz(fx),
        YN * _lab_f_to_xyz(fy),
        ZN * _lab_f_to_xyz(fz),
    ], axis=-1)
    return np_linear_to_srgb(xyz @ XYZ_TO_RGB.T)


## Lab <-> LCh

def np_lab_to_lch(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    """
    Vectorized: Convert any Lab-like triple to its cylindrical form.

    Achromatic points (chroma rounding to 0 at four decimals) get hue 0.
    Also used for OKLab -> OKLCh.
    """
    lab = _stack(l, a, b)
    chroma = np.hypot(lab[..., 1], lab[..., 2])
    hue = np.degrees(np.arctan2(lab[..., 2], lab[..., 1])) % 360
    hue = np.where(np.round(chroma * 10000) == 0, 0.0, hue)
    return np.stack([lab[..., 0], chroma, hue], axis=-1)


def np_lch_to_lab(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    lch = _stack(l, c, np.nan_to_num(np.asarray(h, dtype=float), nan=0.0))
    h_rad = np.radians(lch[..., 2])
    return np.stack([lch[..., 0], np.cos(h_rad) * lch[..., 1], np.sin(h_rad) * lch[..., 1]], axis=-1)


def np_unit_rgb_to_lch(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    lab = np_unit_rgb_to_lab(r, g, b)
    return np_lab_to_lch(lab[..., 0], lab[..., 1], lab[..., 2])


def np_lch_to_unit_rgb(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    lab = np_lch_to_lab(l, c, h)
    return np_lab_to_unit_rgb(lab[..., 0], lab[..., 1], lab[..., 2])


## Scalar wrappers

def unit_rgb_to_lab(r: float, g: float, b: float) -> tuple[float, float, float]:
    l_, a_, b_ = np_unit_rgb_to_lab(r, g, b).tolist()
    return l_, a_, b_


def lab_to_unit_rgb(l: float, a: float, b: float) -> tuple[float, float, float]:
    r_, g_, b_ = np_lab_to_unit_rgb(l, a, b).tolist()
    return r_, g_, b_


def unit_rgb_to_lch(r: float, g: float, b: float) -> tuple[float, float, float]:
    l_, c_, h_ = np_unit_rgb_to_lch(r, g, b).tolist()
    return l_, c_, h_


def lch_to_unit_rgb(l: float, c: float, h: float) -> tuple[float, float, float]:
    r_, g_, b_ = np_lch_to_unit_rgb(l, c, h).tolist()
    return r_, g_, b_
