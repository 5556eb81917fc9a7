"""
Color vision deficiency simulation.

Each deficiency is a fixed 3x3 linear transform applied to 0-255 RGB. The
product is rounded half up but not clamped; hex output clamps on format.
"""

import numpy as np

from ..conversions.hex import rgb_to_hex
from ..types.color_types import Channel, ChannelLike, HexModel, element_to_array
from ..types.config_types import VisionSimulationMode
from ..utils.num_utils import round_half_up

COLOR_BLIND_MATRICES: dict[VisionSimulationMode, np.ndarray] = {
    VisionSimulationMode.PROTANOPIA: np.array([
        [0.567, 0.433, 0.0],
        [0.558, 0.442, 0.0],
        [0.0, 0.242, 0.758],
    ]),
    VisionSimulationMode.PROTANOMALY: np.array([
        [0.817, 0.183, 0.0],
        [0.333, 0.667, 0.0],
        [0.0, 0.125, 0.875],
    ]),
    VisionSimulationMode.DEUTERANOPIA: np.array([
        [0.625, 0.375, 0.0],
        [0.7, 0.3, 0.0],
        [0.0, 0.3, 0.7],
    ]),
    VisionSimulationMode.DEUTERANOMALY: np.array([
        [0.8, 0.2, 0.0],
        [0.258, 0.742, 0.0],
        [0.0, 0.142, 0.858],
    ]),
    VisionSimulationMode.TRITANOPIA: np.array([
        [0.95, 0.05, 0.0],
        [0.0, 0.433, 0.567],
        [0.0, 0.475, 0.525],
    ]),
    VisionSimulationMode.TRITANOMALY: np.array([
        [0.967, 0.033, 0.0],
        [0.0, 0.733, 0.267],
        [0.0, 0.183, 0.817],
    ]),
    VisionSimulationMode.ACHROMATOPSIA: np.array([
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
        [0.299, 0.587, 0.114],
    ]),
    VisionSimulationMode.ACHROMATOMALY: np.array([
        [0.618, 0.32, 0.062],
        [0.163, 0.775, 0.062],
        [0.163, 0.32, 0.516],
    ]),
}


def apply_color_matrix(color: ChannelLike, matrix: np.ndarray) -> Channel:
    r, g, b = (round_half_up(v) for v in (matrix @ element_to_array(color)[:3]).tolist())
    return r, g, b


def simulate_color_blind_rgb(
    color: ChannelLike,
    mode: VisionSimulationMode | str | None = VisionSimulationMode.NONE,
) -> Channel:
    """
    Simulate how ``color`` is perceived under ``mode``.

    NONE rounds and clamps the input; an unrecognized mode yields black.
    """
    match VisionSimulationMode.coerce(mode):
        case None:
            return 0, 0, 0
        case VisionSimulationMode.NONE:
            r, g, b = (min(255, max(0, round_half_up(float(v)))) for v in list(color)[:3])
            return r, g, b
        case known:
            return apply_color_matrix(color, COLOR_BLIND_MATRICES[known])


def simulate_color_blind_hex(
    color: ChannelLike,
    mode: VisionSimulationMode | str | None = VisionSimulationMode.NONE,
) -> HexModel:
    if VisionSimulationMode.coerce(mode) is None:
        return "#000000"
    return rgb_to_hex(simulate_color_blind_rgb(color, mode))
