from __future__ import annotations
from typing import Sequence, Tuple, Union
import numpy as np
from numpy import ndarray

Scalar = int | float
Channel = Tuple[Scalar, Scalar, Scalar]
ChannelWithAlpha = Tuple[Scalar, Scalar, Scalar, Scalar]
GLChannel = Tuple[float, float, float, float]
HexModel = str
ColorOutput = Union[Channel, ChannelWithAlpha, HexModel]
ChannelLike = Union[Sequence[Scalar], ndarray]

HUE_360 = 360


def element_to_array(element: ChannelLike) -> np.ndarray:
    """
    Convert a color element to a float numpy array.

    Args:
        element: Tuple, list, or already an ndarray

    Returns:
        numpy array representation
    """
    if isinstance(element, ndarray):
        return element.astype(float, copy=False)
    return np.asarray(element, dtype=float)


def as_channel(element: ChannelLike) -> Channel:
    """Return the first three components of ``element`` as a plain float tuple."""
    r, g, b = (float(v) for v in list(element)[:3])
    return r, g, b
