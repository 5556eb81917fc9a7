"""
OKLab / OKLCh conversions (Björn Ottosson, 2020).

OKLab lightness is in [0, 1]; chroma is unbounded but stays below ~0.4 for sRGB.
"""

import numpy as np
from numpy import ndarray as NDArray

from .lab import _stack, np_lab_to_lch, np_lch_to_lab
from .linear import np_srgb_to_linear, np_linear_to_srgb

LRGB_TO_LMS = np.array([
    [0.4122214708, 0.5363325363, 0.0514459929],
    [0.2119034982, 0.6806995451, 0.1073969566],
    [0.0883024619, 0.2817188376, 0.6299787005],
])

LMS_TO_OKLAB = np.array([
    [0.2104542553, 0.7936177850, -0.0040720468],
    [1.9779984951, -2.4285922050, 0.4505937099],
    [0.0259040371, 0.7827717662, -0.8086757660],
])

OKLAB_TO_LMS = np.array([
    [1.0, 0.3963377774, 0.2158037573],
    [1.0, -0.1055613458, -0.0638541728],
    [1.0, -0.0894841775, -1.2914855480],
])

LMS_TO_LRGB = np.array([
    [4.0767416621, -3.3077115913, 0.2309699292],
    [-1.2684380046, 2.6097574011, -0.3413193965],
    [-0.0041960863, -0.7034186147, 1.7076147010],
])


def np_unit_rgb_to_oklab(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    lms = np_srgb_to_linear(_stack(r, g, b)) @ LRGB_TO_LMS.T
    return np.cbrt(lms) @ LMS_TO_OKLAB.T


def np_oklab_to_unit_rgb(l: NDArray, a: NDArray, b: NDArray) -> NDArray:
    lms = (_stack(l, a, b) @ OKLAB_TO_LMS.T) ** 3
    return np_linear_to_srgb(lms @ LMS_TO_LRGB.T)


def np_unit_rgb_to_oklch(r: NDArray, g: NDArray, b: NDArray) -> NDArray:
    oklab = np_unit_rgb_to_oklab(r, g, b)
    return np_lab_to_lch(oklab[..., 0], oklab[..., 1], oklab[..., 2])


def np_oklch_to_unit_rgb(l: NDArray, c: NDArray, h: NDArray) -> NDArray:
    oklab = np_lch_to_lab(l, c, h)
    return np_oklab_to_unit_rgb(oklab[..., 0], oklab[..., 1], oklab[..., 2])


def unit_rgb_to_oklab(r: float, g: float, b: float) -> tuple[float, float, float]:
    l_, a_, b_ = np_unit_rgb_to_oklab(r, g, b).tolist()
    return l_, a_, b_


def oklab_to_unit_rgb(l: float, a: float, b: float) -> tuple[float, float, float]:
    r_, g_, b_ = np_oklab_to_unit_rgb(l, a, b).tolist()
    return r_, g_, b_


def unit_rgb_to_oklch(r: float, g: float, b: float) -> tuple[float, float, float]:
    l_, c_, h_ = np_unit_rgb_to_oklch(r, g, b).tolist()
    return l_, c_, h_


def oklch_to_unit_rgb(l: float, c: float, h: float) -> tuple[float, float, float]:
    r_, g_, b_ = np_oklch_to_unit_rgb(l, c, h).tolist()
    return r_, g_, b_
