import re

from ..types.color_types import ChannelLike, HexModel
from ..utils.num_utils import round_half_up

HEX_PATTERN = re.compile(r"^#?(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})$")


def is_valid_hex(value: str) -> bool:
    return isinstance(value, str) and HEX_PATTERN.match(value) is not None


def hex_to_rgba(value: HexModel) -> tuple[int, int, int, float]:
    """
    Parse ``#rgb``, ``#rrggbb`` or ``#rrggbbaa`` (leading ``#`` optional).

    Returns:
        (r, g, b, alpha) with channels in [0, 255] and alpha in [0, 1]
    """
    digits = value.strip().lstrip("#")
    if len(digits) == 3:
        digits = "".join(c * 2 for c in digits)
    if len(digits) not in (6, 8) or re.fullmatch(r"[0-9A-Fa-f]+", digits) is None:
        raise ValueError(f"Invalid hex color: {value!r}")

    r, g, b = (int(digits[i:i + 2], 16) for i in (0, 2, 4))
    alpha = int(digits[6:8], 16) / 255 if len(digits) == 8 else 1.0
    return r, g, b, round(alpha, 2)


def hex_to_rgb(value: HexModel) -> tuple[int, int, int]:
    r, g, b, _ = hex_to_rgba(value)
    return r, g, b


def rgb_to_hex(rgb: ChannelLike, alpha: float | None = None) -> HexModel:
    """
    Format a 0-255 RGB triple as lowercase hex.

    Channels are rounded half up and clamped; the alpha byte is only
    appended when ``alpha`` is below 1.
    """
    channels = [min(255, max(0, round_half_up(float(v)))) for v in list(rgb)[:3]]
    out = "#" + "".join(f"{c:02x}" for c in channels)
    if alpha is not None and alpha < 1:
        out += f"{min(255, max(0, round_half_up(alpha * 255))):02x}"
    return out
