"""Palette output tree: palette -> themes -> colors -> shades."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..types.color_types import Channel, GLChannel, HexModel
from ..types.config_types import ThemeType

SOURCE_SHADE_NAME = "source"
SOURCE_SHADE_TYPE = "source color"
SCALE_SHADE_TYPE = "color shade/tint"
COLOR_TYPE = "color"
PALETTE_TYPE = "palette"

Triple = tuple[float, float, float]


def _listed(value: tuple | None) -> list | None:
    return None if value is None else list(value)


@dataclass
class PaletteShade:
    """
    One stop of one color in one theme, in every representation at once.

    ``alpha``, ``background_color`` and ``mixed_color`` are only set for
    transparent shades.
    """
    name: str
    description: str
    hex: HexModel
    rgb: Channel
    gl: GLChannel
    lch: Triple
    oklch: Triple
    lab: Triple
    oklab: Triple
    hsl: Triple
    hsluv: Triple
    alpha: float | None = None
    background_color: Channel | None = None
    mixed_color: Channel | None = None
    is_closest_to_ref: bool = False
    is_source_color_locked: bool = False
    is_transparent: bool = False
    type: str = SCALE_SHADE_TYPE

    @property
    def is_source(self) -> bool:
        return self.type == SOURCE_SHADE_TYPE

    def to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {
            "name": self.name,
            "description": self.description,
            "hex": self.hex,
            "rgb": list(self.rgb),
            "gl": list(self.gl),
            "lch": list(self.lch),
            "oklch": list(self.oklch),
            "lab": list(self.lab),
            "oklab": list(self.oklab),
            "hsl": list(self.hsl),
            "hsluv": list(self.hsluv),
            "type": self.type,
        }
        if self.is_source:
            return out
        if self.alpha is not None:
            out["alpha"] = self.alpha
        if self.background_color is not None:
            out["backgroundColor"] = _listed(self.background_color)
        if self.mixed_color is not None:
            out["mixedColor"] = _listed(self.mixed_color)
        out["isClosestToRef"] = self.is_closest_to_ref
        out["isSourceColorLocked"] = self.is_source_color_locked
        out["isTransparent"] = self.is_transparent
        return out


@dataclass
class PaletteColor:
    id: str
    name: str
    description: str = ""
    shades: list[PaletteShade] = field(default_factory=list)
    type: str = COLOR_TYPE

    @property
    def source(self) -> PaletteShade | None:
        return next((shade for shade in self.shades if shade.is_source), None)

    @property
    def scale_shades(self) -> list[PaletteShade]:
        return [shade for shade in self.shades if not shade.is_source]

    def shade(self, name: str) -> PaletteShade:
        """Look up a shade by its stop label; raises KeyError if absent."""
        for shade in self.shades:
            if shade.name == name:
                return shade
        raise KeyError(name)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "shades": [shade.to_dict() for shade in self.shades],
            "type": self.type,
        }


@dataclass
class PaletteTheme:
    id: str
    name: str
    description: str = ""
    colors: list[PaletteColor] = field(default_factory=list)
    type: ThemeType = ThemeType.DEFAULT

    def color(self, color_id: str) -> PaletteColor:
        for color in self.colors:
            if color.id == color_id:
                return color
        raise KeyError(color_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "colors": [color.to_dict() for color in self.colors],
            "type": ThemeType(self.type).value,
        }


@dataclass
class Palette:
    name: str
    description: str = ""
    themes: list[PaletteTheme] = field(default_factory=list)
    type: str = PALETTE_TYPE

    def theme(self, theme_id: str) -> PaletteTheme:
        for theme in self.themes:
            if theme.id == theme_id:
                return theme
        raise KeyError(theme_id)

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "description": self.description,
            "themes": [theme.to_dict() for theme in self.themes],
            "type": self.type,
        }
