"""
Per-shade color transformation.

A :class:`ColorTransform` holds one source color (0-255 RGB) and the knobs
of one palette stop: target lightness, opacity, hue and chroma shifts, the
chroma damping curve and a vision simulation mode. Each conversion method
rebuilds the source in one color space with those knobs applied and returns
the resulting sRGB color, rendered as an int triple or hex string.

Methods ending in ``a`` keep the source's own lightness and carry
``alpha`` instead.
"""

from __future__ import annotations

import math

from ..conversions.hex import rgb_to_hex
from ..conversions.hsluv_space import unit_rgb_to_hsluv, hsluv_to_unit_rgb
from ..conversions.hsl import unit_rgb_to_hsl, hsl_to_unit_rgb
from ..conversions.lab import unit_rgb_to_lab, lab_to_unit_rgb, unit_rgb_to_lch, lch_to_unit_rgb
from ..conversions.linear import relative_luminance, to_rgb255
from ..conversions.oklab import unit_rgb_to_oklab, oklab_to_unit_rgb, unit_rgb_to_oklch, oklch_to_unit_rgb
from ..exceptions import UnsupportedColorSpaceError
from ..types.color_types import Channel, ChannelLike, ColorOutput, HexModel, HUE_360, as_channel
from ..types.config_types import AlgorithmVersion, ColorSpace, Render, VisionSimulationMode
from ..utils.default import value_or_default
from ..utils.num_utils import nan_to_zero, round_to
from .mixing import mix_colors_hex, mix_colors_rgb
from .vision import simulate_color_blind_hex, simulate_color_blind_rgb


def default_lightness(source_color: ChannelLike) -> float:
    """WCAG relative luminance of ``source_color`` as a percentage, one decimal."""
    return round_to(relative_luminance(source_color) * 100, 1)


class ColorTransform:

    def __init__(
        self,
        source_color: ChannelLike = (0, 0, 0),
        lightness: float | None = None,
        alpha: float = 1.0,
        hue_shift: float = 0.0,
        chroma_shift: float = 100.0,
        algorithm_version: AlgorithmVersion | str = AlgorithmVersion.V3,
        vision_simulation_mode: VisionSimulationMode | str = VisionSimulationMode.NONE,
        render: Render | str = Render.RGB,
    ) -> None:
        self.source_color: Channel = as_channel(source_color)
        self.lightness = float(value_or_default(lightness, default_lightness(self.source_color)))
        self.alpha = float(alpha)
        self.hue_shift = float(hue_shift)
        self.chroma_shift = float(chroma_shift)
        self.algorithm_version = AlgorithmVersion(algorithm_version)
        self.vision_simulation_mode = VisionSimulationMode.coerce(vision_simulation_mode)
        self.render = Render(render)

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(source_color={self.source_color}, lightness={self.lightness}, "
            f"alpha={self.alpha}, hue_shift={self.hue_shift}, chroma_shift={self.chroma_shift}, "
            f"algorithm_version={self.algorithm_version.value}, vision_simulation_mode={self._mode_name}, "
            f"render={self.render.value})"
        )

    @property
    def _mode_name(self) -> str | None:
        mode = self.vision_simulation_mode
        return None if mode is None else mode.value

    @property
    def _unit_source(self) -> tuple[float, float, float]:
        r, g, b = (v / 255 for v in self.source_color)
        return r, g, b

    @property
    def _chroma_factor(self) -> float:
        return self.chroma_shift / 100

    # ---- adjustments ----

    def adjust_hue(self, hue: float) -> float:
        """
        Shift ``hue`` by ``hue_shift`` degrees.

        The result is wrapped once: below 0 gains 360, 360 and above loses 360.
        Shifts that leave [0, 360] by more than a full turn are not folded
        further.
        """
        shifted = hue + self.hue_shift
        if shifted < 0:
            return shifted + HUE_360
        if shifted >= HUE_360:
            return shifted - HUE_360
        return shifted

    def adjust_chroma(self, chroma: float) -> float:
        """Damp ``chroma`` according to the target lightness and the algorithm version."""
        factor = self.lightness / 100
        match self.algorithm_version:
            case AlgorithmVersion.V1:
                return chroma
            case AlgorithmVersion.V2:
                return math.sin(factor * math.pi) * chroma
            case AlgorithmVersion.V3:
                blend = 0.5 * math.sin(factor * math.pi) + 0.5 * math.tanh(factor * math.pi)
                # negative blends (lightness outside [0, 100]) have no real root
                return math.sqrt(blend) * chroma if blend >= 0 else math.nan
        return chroma

    def _rotate_ab(self, a: float, b: float) -> tuple[float, float]:
        """Rotate and scale a Lab-like (a, b) pair by the hue and chroma shifts."""
        chroma = math.hypot(a, b) * self._chroma_factor
        if a != 0:
            angle = math.atan(b / a)
        elif b != 0:
            angle = math.copysign(math.pi / 2, b)
        else:
            angle = 0.0  # achromatic, chroma is 0 anyway
        angle = min(math.pi, max(-math.pi, angle + math.radians(self.hue_shift)))

        new_a, new_b = chroma * math.cos(angle), chroma * math.sin(angle)
        # atan folds the left half-plane onto the right one
        if a < 0:
            new_a, new_b = -new_a, -new_b
        return nan_to_zero(new_a), nan_to_zero(new_b)

    # ---- output ----

    def _output(self, unit_rgb: ChannelLike) -> ColorOutput:
        rgb = to_rgb255(unit_rgb)
        if self.render is Render.HEX:
            return self.simulate_color_blind_hex(rgb)
        return self.simulate_color_blind_rgb(rgb)

    def _output_with_alpha(self, unit_rgb: ChannelLike) -> ColorOutput:
        simulated = self.simulate_color_blind_rgb(to_rgb255(unit_rgb))
        if self.render is Render.HEX:
            return rgb_to_hex(simulated, self.alpha)
        return (*simulated, self.alpha)

    def set_color(self) -> ColorOutput:
        """The source color itself, passed through vision simulation only."""
        if self.render is Render.HEX:
            return self.simulate_color_blind_hex(self.source_color)
        return self.simulate_color_blind_rgb(self.source_color)

    def set_color_with_alpha(self) -> ColorOutput:
        simulated = self.simulate_color_blind_rgb(self.source_color)
        if self.render is Render.HEX:
            return rgb_to_hex(simulated, self.alpha)
        return (*simulated, self.alpha)

    # ---- LCh / OKLCh ----

    def _lch(self, lightness: float | None) -> tuple[float, float, float]:
        l, c, h = unit_rgb_to_lch(*self._unit_source)
        return lch_to_unit_rgb(
            value_or_default(lightness, l),
            self.adjust_chroma(c * self._chroma_factor),
            self.adjust_hue(h),
        )

    def lch(self) -> ColorOutput:
        return self._output(self._lch(self.lightness))

    def lcha(self) -> ColorOutput:
        return self._output_with_alpha(self._lch(None))

    def _oklch(self, lightness: float | None) -> tuple[float, float, float]:
        l, c, h = unit_rgb_to_oklch(*self._unit_source)
        return oklch_to_unit_rgb(
            value_or_default(lightness, l),
            self.adjust_chroma(c * self._chroma_factor),
            self.adjust_hue(h),
        )

    def oklch(self) -> ColorOutput:
        return self._output(self._oklch(self.lightness / 100))

    def oklcha(self) -> ColorOutput:
        return self._output_with_alpha(self._oklch(None))

    # ---- Lab / OKLab ----

    def _lab(self, lightness: float | None) -> tuple[float, float, float]:
        l, a, b = unit_rgb_to_lab(*self._unit_source)
        new_a, new_b = self._rotate_ab(a, b)
        return lab_to_unit_rgb(
            value_or_default(lightness, l),
            self.adjust_chroma(new_a),
            self.adjust_chroma(new_b),
        )

    def lab(self) -> ColorOutput:
        return self._output(self._lab(self.lightness))

    def laba(self) -> ColorOutput:
        return self._output_with_alpha(self._lab(None))

    def _oklab(self, lightness: float | None) -> tuple[float, float, float]:
        l, a, b = unit_rgb_to_oklab(*self._unit_source)
        new_a, new_b = self._rotate_ab(a, b)
        return oklab_to_unit_rgb(
            value_or_default(lightness, l),
            self.adjust_chroma(new_a),
            self.adjust_chroma(new_b),
        )

    def oklab(self) -> ColorOutput:
        return self._output(self._oklab(self.lightness / 100))

    def oklaba(self) -> ColorOutput:
        return self._output_with_alpha(self._oklab(None))

    # ---- HSL / HSLuv ----

    def _hsl(self, lightness: float | None) -> tuple[float, float, float]:
        h, s, l = unit_rgb_to_hsl(*self._unit_source)
        return hsl_to_unit_rgb(
            self.adjust_hue(h),
            self.adjust_chroma(s * self._chroma_factor),
            value_or_default(lightness, l),
        )

    def hsl(self) -> ColorOutput:
        return self._output(self._hsl(self.lightness / 100))

    def hsla(self) -> ColorOutput:
        return self._output_with_alpha(self._hsl(None))

    def _hsluv(self, lightness: float | None) -> tuple[float, float, float]:
        h, s, l = self.get_hsluv()
        return hsluv_to_unit_rgb(
            nan_to_zero(self.adjust_hue(h)),
            nan_to_zero(self.adjust_chroma(s * self._chroma_factor)),
            value_or_default(lightness, l),
        )

    def hsluv(self) -> ColorOutput:
        return self._output(self._hsluv(self.lightness))

    def hsluva(self) -> ColorOutput:
        return self._output_with_alpha(self._hsluv(None))

    def get_hsluv(self) -> tuple[float, float, float]:
        """HSLuv coordinates of the unmodified source color."""
        return unit_rgb_to_hsluv(*self._unit_source)

    # ---- dispatch ----

    def convert(self, color_space: ColorSpace | str, with_alpha: bool = False) -> ColorOutput:
        """Run the conversion method for ``color_space``, alpha-carrying if ``with_alpha``."""
        match ColorSpace.coerce(color_space):
            case ColorSpace.LCH:
                return self.lcha() if with_alpha else self.lch()
            case ColorSpace.OKLCH:
                return self.oklcha() if with_alpha else self.oklch()
            case ColorSpace.LAB:
                return self.laba() if with_alpha else self.lab()
            case ColorSpace.OKLAB:
                return self.oklaba() if with_alpha else self.oklab()
            case ColorSpace.HSL:
                return self.hsla() if with_alpha else self.hsl()
            case ColorSpace.HSLUV:
                return self.hsluva() if with_alpha else self.hsluv()
        raise UnsupportedColorSpaceError(color_space)

    # ---- simulation and compositing ----

    def simulate_color_blind_rgb(self, color: ChannelLike) -> Channel:
        return simulate_color_blind_rgb(color, self.vision_simulation_mode)

    def simulate_color_blind_hex(self, color: ChannelLike) -> HexModel:
        return simulate_color_blind_hex(color, self.vision_simulation_mode)

    def mix_colors_rgb(self, color_a: ChannelLike, color_b: ChannelLike) -> Channel:
        return mix_colors_rgb(color_a, color_b, self.vision_simulation_mode)

    def mix_colors_hex(self, color_a: HexModel, color_b: HexModel) -> HexModel:
        return mix_colors_hex(color_a, color_b, self.vision_simulation_mode)
