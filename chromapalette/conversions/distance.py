import math

from ..types.color_types import ChannelLike
from ..utils.num_utils import round_half_up


def rgb_distance(color_a: ChannelLike, color_b: ChannelLike) -> float:
    """
    Euclidean distance between two 0-255 RGB colors.

    Both colors are quantized to integer channels in [0, 255] first, so the
    distance matches what is visible once the colors are written as hex.
    """
    def quantize(color: ChannelLike) -> list[int]:
        return [min(255, max(0, round_half_up(float(v)))) for v in list(color)[:3]]

    return math.dist(quantize(color_a), quantize(color_b))
