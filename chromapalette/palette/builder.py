"""
Palette generation.

For every theme and every source color, each scale stop is run through a
:class:`ColorTransform` in the palette's color space. The stop closest to
the source color is then either pinned to the source (when source colors
are locked) or flagged as a hint.
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from typing import Any, Iterable, Mapping

from ..colors.mixing import mix_colors_rgb
from ..colors.transform import ColorTransform
from ..colors.vision import simulate_color_blind_rgb
from ..config import ColorConfiguration, ThemeConfiguration, DEFAULT_PALETTE_NAME
from ..conversions.distance import rgb_distance
from ..conversions.hex import hex_to_rgb
from ..conversions.linear import to_rgb255
from ..conversions.wrapper import describe
from ..exceptions import GamutWarning
from ..types.color_types import Channel
from ..types.config_types import AlgorithmVersion, ColorSpace
from ..utils.num_utils import round_to
from .models import (
    Palette, PaletteColor, PaletteShade, PaletteTheme,
    SOURCE_SHADE_NAME, SOURCE_SHADE_TYPE, SCALE_SHADE_TYPE,
)

logger = logging.getLogger(__name__)

CLOSEST_TO_REF_THRESHOLD = 4.0


@dataclass
class _Candidate:
    """Raw result of one scale stop, before reconciliation with the source."""
    label: str
    target: float
    rgb: Channel
    alpha: float | None = None
    background: Channel | None = None


def _as_colors(colors: Iterable[ColorConfiguration | Mapping[str, Any]]) -> list[ColorConfiguration]:
    return [c if isinstance(c, ColorConfiguration) else ColorConfiguration.from_dict(c) for c in colors]


def _as_themes(themes: Iterable[ThemeConfiguration | Mapping[str, Any]]) -> list[ThemeConfiguration]:
    return [t if isinstance(t, ThemeConfiguration) else ThemeConfiguration.from_dict(t) for t in themes]


class PaletteBuilder:
    """
    Build a :class:`Palette` from source colors and themes.

    Args:
        colors: source colors, as :class:`ColorConfiguration` or plugin dicts
        themes: themes, as :class:`ThemeConfiguration` or plugin dicts
        color_space: space the shades are generated in
        algorithm_version: chroma damping curve
        are_source_colors_locked: pin the closest stop of each color to the source

    Raises:
        UnsupportedColorSpaceError: if ``color_space`` names no known space
    """

    def __init__(
        self,
        colors: Iterable[ColorConfiguration | Mapping[str, Any]] = (),
        themes: Iterable[ThemeConfiguration | Mapping[str, Any]] = (),
        color_space: ColorSpace | str = ColorSpace.LCH,
        algorithm_version: AlgorithmVersion | str = AlgorithmVersion.V3,
        are_source_colors_locked: bool = False,
        name: str = DEFAULT_PALETTE_NAME,
        description: str = "",
    ) -> None:
        self.colors = _as_colors(colors)
        self.themes = _as_themes(themes)
        self.color_space = ColorSpace.coerce(color_space)
        self.algorithm_version = AlgorithmVersion(algorithm_version)
        self.are_source_colors_locked = bool(are_source_colors_locked)
        self.name = name
        self.description = description

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(colors={len(self.colors)}, themes={len(self.themes)}, "
            f"color_space={self.color_space.value}, algorithm_version={self.algorithm_version.value}, "
            f"are_source_colors_locked={self.are_source_colors_locked})"
        )

    @property
    def current_scale(self) -> Mapping[str, float]:
        """Scale of the first enabled theme, or an empty mapping if none is enabled."""
        for theme in self.themes:
            if theme.is_enabled:
                return theme.scale
        return {}

    def make_palette_data(self) -> Palette:
        """Expand every theme x color x stop into a fresh palette tree."""
        self._warn_out_of_gamut()
        palette = Palette(name=self.name, description=self.description)
        for theme in self.themes:
            palette_theme = PaletteTheme(
                id=theme.id,
                name=theme.name,
                description=theme.description,
                type=theme.type,
            )
            for color in self.colors:
                palette_theme.colors.append(self._make_color(theme, color))
            palette.themes.append(palette_theme)

        logger.debug(
            "Built palette %r: %d themes x %d colors in %s (%s, locked=%s)",
            self.name, len(self.themes), len(self.colors),
            self.color_space.value, self.algorithm_version.value, self.are_source_colors_locked,
        )
        return palette

    def _warn_out_of_gamut(self) -> None:
        for color in self.colors:
            if color.is_out_of_gamut:
                warnings.warn(
                    f"Source color {color.name or color.id!r} has channels outside [0, 1]: {color.rgb}",
                    GamutWarning,
                    stacklevel=3,
                )

    # ---- per color ----

    def _make_color(self, theme: ThemeConfiguration, color: ColorConfiguration) -> PaletteColor:
        palette_color = PaletteColor(id=color.id, name=color.name, description=color.description)
        palette_color.shades.append(self._source_shade(color))

        candidates = [self._make_candidate(theme, color, label, target) for label, target in theme.ordered_stops()]
        if not candidates:
            return palette_color

        source = color.rgb255
        distances = [rgb_distance(source, candidate.rgb) for candidate in candidates]
        # min() keeps the first of equal distances
        closest = min(range(len(distances)), key=distances.__getitem__)
        is_locking = self.are_source_colors_locked and not color.alpha_enabled

        if is_locking:
            logger.debug(
                "Locking stop %r of color %r in theme %r to the source (distance %.2f)",
                candidates[closest].label, color.id, theme.id, distances[closest],
            )

        for index, (candidate, distance) in enumerate(zip(candidates, distances)):
            is_closest = index == closest
            if is_closest and is_locking:
                rgb = simulate_color_blind_rgb(to_rgb255([v / 255 for v in source]), theme.vision_simulation_mode)
                shade = self._scale_shade(theme, color, candidate, rgb)
                shade.is_source_color_locked = True
            else:
                shade = self._scale_shade(theme, color, candidate, candidate.rgb)
                shade.is_closest_to_ref = (
                    is_closest
                    and not self.are_source_colors_locked
                    and distance < CLOSEST_TO_REF_THRESHOLD
                )
            palette_color.shades.append(shade)
        return palette_color

    def _make_candidate(
        self,
        theme: ThemeConfiguration,
        color: ColorConfiguration,
        label: str,
        target: float,
    ) -> _Candidate:
        mode = theme.vision_simulation_mode
        if not color.alpha_enabled:
            transform = ColorTransform(
                source_color=color.rgb255,
                lightness=target,
                hue_shift=color.hue_shift,
                chroma_shift=color.chroma_shift,
                algorithm_version=self.algorithm_version,
                vision_simulation_mode=mode,
            )
            return _Candidate(label, target, tuple(transform.convert(self.color_space)))

        alpha = round_to(target / 100, 2)
        foreground = ColorTransform(
            source_color=color.rgb255,
            alpha=alpha,
            hue_shift=color.hue_shift,
            chroma_shift=color.chroma_shift,
            algorithm_version=self.algorithm_version,
            vision_simulation_mode=mode,
        )
        background = ColorTransform(
            source_color=hex_to_rgb(color.background_color),
            algorithm_version=self.algorithm_version,
            vision_simulation_mode=mode,
        )
        if self.are_source_colors_locked:
            fg, bg = foreground.set_color_with_alpha(), background.set_color_with_alpha()
        else:
            fg = foreground.convert(self.color_space, with_alpha=True)
            bg = background.convert(self.color_space, with_alpha=True)
        r, g, b, _ = fg
        bg_r, bg_g, bg_b, _ = bg
        return _Candidate(label, target, (r, g, b), alpha=alpha, background=(bg_r, bg_g, bg_b))

    # ---- shades ----

    @staticmethod
    def _source_shade(color: ColorConfiguration) -> PaletteShade:
        representations = describe(color.rgb255)
        # the authored channels, unclamped and unrounded
        representations["rgb"] = color.rgb255
        return PaletteShade(
            name=SOURCE_SHADE_NAME,
            description="Source color",
            type=SOURCE_SHADE_TYPE,
            **representations,
        )

    @staticmethod
    def _scale_shade(
        theme: ThemeConfiguration,
        color: ColorConfiguration,
        candidate: _Candidate,
        rgb: Channel,
    ) -> PaletteShade:
        axis = "opacity" if color.alpha_enabled else "lightness"
        shade = PaletteShade(
            name=candidate.label,
            description=f"Shade/Tint color with {candidate.target:.1f}% of {axis}",
            type=SCALE_SHADE_TYPE,
            **describe(rgb, candidate.alpha),
        )
        if color.alpha_enabled:
            shade.alpha = candidate.alpha
            shade.is_transparent = True
            shade.background_color = candidate.background
            shade.mixed_color = mix_colors_rgb(
                [*candidate.rgb, candidate.alpha],
                [*candidate.background, 1],
                theme.vision_simulation_mode,
            )
        return shade


def build_palette(
    colors: Iterable[ColorConfiguration | Mapping[str, Any]],
    themes: Iterable[ThemeConfiguration | Mapping[str, Any]],
    color_space: ColorSpace | str = ColorSpace.LCH,
    algorithm_version: AlgorithmVersion | str = AlgorithmVersion.V3,
    are_source_colors_locked: bool = False,
    **kwargs: Any,
) -> Palette:
    """Shortcut for ``PaletteBuilder(...).make_palette_data()``."""
    return PaletteBuilder(
        colors,
        themes,
        color_space=color_space,
        algorithm_version=algorithm_version,
        are_source_colors_locked=are_source_colors_locked,
        **kwargs,
    ).make_palette_data()
