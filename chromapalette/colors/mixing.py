from ..conversions.hex import is_valid_hex, hex_to_rgba, rgb_to_hex
from ..types.color_types import Channel, ChannelLike, HexModel
from ..types.config_types import VisionSimulationMode
from ..utils.num_utils import round_half_up
from .vision import simulate_color_blind_rgb


def mix_colors_rgb(
    color_a: ChannelLike,
    color_b: ChannelLike,
    mode: VisionSimulationMode | str | None = VisionSimulationMode.NONE,
) -> Channel:
    """
    Composite ``color_a`` over ``color_b`` (both ``(r, g, b, alpha)``).

    An opaque A is returned as is and a fully transparent A yields B, both
    without simulation. Otherwise the "A over B" blend is clamped to
    [0, 255] and passed through the vision simulation ``mode``.
    """
    r1, g1, b1, a1 = (float(v) for v in color_a)
    r2, g2, b2, a2 = (float(v) for v in color_b)

    if a1 == 1:
        return r1, g1, b1
    if a1 == 0:
        return r2, g2, b2

    alpha = a1 + a2 * (1 - a1)
    if alpha == 0:
        return r2, g2, b2

    def blend(c1: float, c2: float) -> int:
        return min(255, max(0, round_half_up((c1 * a1 + c2 * a2 * (1 - a1)) / alpha)))

    return simulate_color_blind_rgb((blend(r1, r2), blend(g1, g2), blend(b1, b2)), mode)


def mix_colors_hex(
    color_a: HexModel,
    color_b: HexModel,
    mode: VisionSimulationMode | str | None = VisionSimulationMode.NONE,
) -> HexModel:
    """Hex form of :func:`mix_colors_rgb`; an invalid argument is returned unchanged."""
    if not is_valid_hex(color_a):
        return color_a
    if not is_valid_hex(color_b):
        return color_b
    return rgb_to_hex(mix_colors_rgb(hex_to_rgba(color_a), hex_to_rgba(color_b), mode))
