"""
Palette input configuration.

``ColorConfiguration`` is one source color with its adjustment knobs and
``ThemeConfiguration`` one scale + vision simulation mode. Both
accept the camelCase dictionaries the design-tool plugin stores through
``from_dict``.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping

from .types.color_types import Channel
from .types.config_types import ThemeType, VisionSimulationMode
from .utils.default import nested_or_default, value_or_default

DEFAULT_HUE_SHIFT = 0.0
DEFAULT_CHROMA_SHIFT = 100.0
DEFAULT_BACKGROUND_COLOR = "#FFFFFF"
DEFAULT_PALETTE_NAME = "UI Color Palette"


def _rgb_from_dict(rgb: Any) -> Channel:
    if isinstance(rgb, Mapping):
        try:
            return float(rgb["r"]), float(rgb["g"]), float(rgb["b"])
        except KeyError as e:
            raise ValueError(f"rgb mapping is missing channel {e.args[0]!r}") from None
    values = list(rgb)
    if len(values) < 3:
        raise ValueError(f"rgb needs three channels, got {len(values)}")
    return float(values[0]), float(values[1]), float(values[2])


@dataclass(frozen=True)
class ColorConfiguration:
    """
    One source color of the palette.

    Attributes:
        id: stable identifier of the color
        name: display name
        rgb: unit RGB triple as authored (channels are not validated)
        hue_shift: hue rotation in degrees
        chroma_shift: chroma scaling in percent
        alpha_enabled: carry the scale as opacity instead of lightness
        background_color: hex color the transparent shades are composited on
    """
    id: str
    name: str
    rgb: Channel
    description: str = ""
    hue_shift: float = DEFAULT_HUE_SHIFT
    chroma_shift: float = DEFAULT_CHROMA_SHIFT
    alpha_enabled: bool = False
    background_color: str = DEFAULT_BACKGROUND_COLOR

    @property
    def rgb255(self) -> Channel:
        r, g, b = (v * 255 for v in self.rgb)
        return r, g, b

    @property
    def is_out_of_gamut(self) -> bool:
        return any(v < 0 or v > 1 for v in self.rgb)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ColorConfiguration":
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected a mapping, got {type(data).__name__}")
        if "rgb" not in data:
            raise ValueError("Color configuration requires an 'rgb' entry")

        return cls(
            id=str(value_or_default(data.get("id"), "")),
            name=str(value_or_default(data.get("name"), "")),
            description=str(value_or_default(data.get("description"), "")),
            rgb=_rgb_from_dict(data["rgb"]),
            hue_shift=float(nested_or_default(data, "hue.shift", DEFAULT_HUE_SHIFT)),
            chroma_shift=float(nested_or_default(data, "chroma.shift", DEFAULT_CHROMA_SHIFT)),
            alpha_enabled=bool(nested_or_default(data, "alpha.isEnabled", False)),
            background_color=str(nested_or_default(data, "alpha.backgroundColor", DEFAULT_BACKGROUND_COLOR)),
        )


@dataclass(frozen=True)
class ThemeConfiguration:
    """
    A scale applied to every source color, with its own simulation mode.

    ``scale`` maps stop labels to lightness (or opacity) percentages. It is
    stored read-only; insertion order is kept.
    """
    id: str
    name: str
    scale: Mapping[str, float]
    description: str = ""
    vision_simulation_mode: VisionSimulationMode | str = VisionSimulationMode.NONE
    is_enabled: bool = True
    type: ThemeType = ThemeType.DEFAULT

    def __post_init__(self) -> None:
        if not isinstance(self.scale, Mapping):
            raise TypeError(f"scale must be a mapping, got {type(self.scale).__name__}")
        scale = {}
        for label, target in self.scale.items():
            try:
                scale[str(label)] = float(target)
            except (TypeError, ValueError):
                raise ValueError(f"Scale stop {label!r} has a non-numeric target: {target!r}") from None
        object.__setattr__(self, "scale", MappingProxyType(scale))
        object.__setattr__(self, "type", ThemeType(self.type))

    def ordered_stops(self) -> list[tuple[str, float]]:
        """Stops sorted by descending target; equal targets keep insertion order."""
        return sorted(self.scale.items(), key=lambda stop: stop[1], reverse=True)

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ThemeConfiguration":
        if not isinstance(data, Mapping):
            raise TypeError(f"Expected a mapping, got {type(data).__name__}")
        return cls(
            id=str(value_or_default(data.get("id"), "")),
            name=str(value_or_default(data.get("name"), "")),
            description=str(value_or_default(data.get("description"), "")),
            scale=value_or_default(data.get("scale"), {}),
            vision_simulation_mode=value_or_default(data.get("visionSimulationMode"), VisionSimulationMode.NONE),
            is_enabled=bool(value_or_default(data.get("isEnabled"), True)),
            type=value_or_default(data.get("type"), ThemeType.DEFAULT),
        )
