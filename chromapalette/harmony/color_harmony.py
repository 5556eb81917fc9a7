"""
Hue-rotation color harmonies.

Every harmony keeps the base color's HSL saturation and lightness and only
rotates its hue by fixed offsets.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

from boundednumbers import clamp

from ..conversions.hex import rgb_to_hex
from ..conversions.hsl import hsl_to_unit_rgb, normalize_hue, unit_rgb_to_hsl
from ..conversions.linear import to_rgb255
from ..exceptions import UnknownHarmonyTypeError
from ..types.color_types import Channel, ChannelLike, HexModel, as_channel
from ..types.config_types import HarmonyType
from ..utils.num_utils import nan_to_zero, round_half_up

ReturnFormat = Literal["rgb", "hex", "both"]

MIN_SPREAD = 1
MAX_SPREAD = 180


@dataclass
class ColorHarmonyResult:
    type: HarmonyType
    base_color: Channel
    base_hex: HexModel
    colors: list[Channel] = field(default_factory=list)
    hex_colors: list[HexModel] = field(default_factory=list)
    return_format: ReturnFormat = "both"

    def to_dict(self) -> dict[str, Any]:
        """Serialize with camelCase keys, keeping only the requested representations."""
        out: dict[str, Any] = {"type": self.type.value}
        if self.return_format in ("rgb", "both"):
            out["baseColor"] = list(self.base_color)
            out["colors"] = [list(c) for c in self.colors]
        if self.return_format in ("hex", "both"):
            out["baseHex"] = self.base_hex
            out["hexColors"] = list(self.hex_colors)
        return out


class ColorHarmony:
    """
    Args:
        base_color: 0-255 RGB triple
        analogous_spread: analogous hue offset in degrees, clamped to [1, 180]
        return_format: which representations ``to_dict`` keeps
    """

    def __init__(
        self,
        base_color: ChannelLike = (255, 0, 0),
        analogous_spread: float = 30,
        return_format: ReturnFormat = "both",
    ) -> None:
        self.base_color: Channel = as_channel(base_color)
        self.analogous_spread = 30.0
        self.set_analogous_spread(analogous_spread)
        self.return_format = return_format

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(base_color={self.base_color}, "
            f"analogous_spread={self.analogous_spread}, return_format={self.return_format!r})"
        )

    def _base_hsl(self) -> tuple[float, float, float]:
        h, s, l = unit_rgb_to_hsl(*(v / 255 for v in self.base_color))
        return nan_to_zero(h), s, l

    def _rotate(self, *offsets: float) -> list[Channel]:
        """The base color followed by one hue rotation per offset."""
        h, s, l = self._base_hsl()
        colors = [self.base_color]
        for offset in offsets:
            colors.append(to_rgb255(hsl_to_unit_rgb(normalize_hue(h + offset), s, l)))
        return colors

    def _format_result(self, harmony_type: HarmonyType, colors: list[ChannelLike]) -> ColorHarmonyResult:
        clean = [tuple(round_half_up(v) for v in color) for color in colors]
        return ColorHarmonyResult(
            type=harmony_type,
            base_color=tuple(round_half_up(v) for v in self.base_color),
            base_hex=rgb_to_hex(self.base_color),
            colors=clean,
            hex_colors=[rgb_to_hex(c) for c in clean],
            return_format=self.return_format,
        )

    def generate_analogous(self) -> ColorHarmonyResult:
        spread = self.analogous_spread
        return self._format_result(HarmonyType.ANALOGOUS, self._rotate(-spread, spread))

    def generate_complementary(self) -> ColorHarmonyResult:
        return self._format_result(HarmonyType.COMPLEMENTARY, self._rotate(180))

    def generate_triadic(self) -> ColorHarmonyResult:
        return self._format_result(HarmonyType.TRIADIC, self._rotate(120, 240))

    def generate_tetradic(self, angle: float = 90) -> ColorHarmonyResult:
        """
        Rectangle harmony: two complementary pairs ``angle`` degrees apart.

        With the default 90 degrees it coincides with :meth:`generate_square`.
        """
        return self._format_result(HarmonyType.TETRADIC, self._rotate(angle, 180, 180 + angle))

    def generate_square(self) -> ColorHarmonyResult:
        return self._format_result(HarmonyType.SQUARE, self._rotate(90, 180, 270))

    def generate_harmony(self, harmony_type: HarmonyType | str) -> ColorHarmonyResult:
        try:
            harmony_type = HarmonyType(str(harmony_type.value if isinstance(harmony_type, HarmonyType) else harmony_type).upper())
        except ValueError:
            raise UnknownHarmonyTypeError(harmony_type) from None

        match harmony_type:
            case HarmonyType.ANALOGOUS:
                return self.generate_analogous()
            case HarmonyType.COMPLEMENTARY:
                return self.generate_complementary()
            case HarmonyType.TRIADIC:
                return self.generate_triadic()
            case HarmonyType.TETRADIC:
                return self.generate_tetradic()
            case HarmonyType.SQUARE:
                return self.generate_square()
        raise UnknownHarmonyTypeError(harmony_type)

    def get_all_harmonies(self) -> list[ColorHarmonyResult]:
        return [self.generate_harmony(t) for t in HarmonyType]

    # ---- options ----

    def set_base_color(self, color: ChannelLike) -> None:
        self.base_color = as_channel(color)

    def set_analogous_spread(self, spread: float) -> None:
        self.analogous_spread = clamp(spread, MIN_SPREAD, MAX_SPREAD)

    def update_options(self, analogous_spread: float | None = None, return_format: ReturnFormat | None = None) -> None:
        if analogous_spread is not None:
            self.set_analogous_spread(analogous_spread)
        if return_format is not None:
            self.return_format = return_format

    def get_options(self) -> dict[str, Any]:
        return {"analogous_spread": self.analogous_spread, "return_format": self.return_format}
