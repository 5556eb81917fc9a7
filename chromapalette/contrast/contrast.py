import logging
import math

from ..conversions.hex import hex_to_rgb, rgb_to_hex
from ..conversions.lab import lch_to_unit_rgb
from ..conversions.linear import relative_luminance, to_rgb255
from ..types.color_types import Channel, ChannelLike, HexModel, as_channel
from ..types.config_types import RecommendedUsage, WcagScore
from .apca import apca_contrast, font_lookup_apca, srgb_to_y

logger = logging.getLogger(__name__)

PASS_COLOR = {"r": 0.5294117647, "g": 0.8156862745, "b": 0.6941176471}
FAIL_COLOR = {"r": 0.8274509804, "g": 0.7019607843, "b": 0.7803921569}

MAX_BISECTIONS = 100

# (lower bound, usage), checked top-down
USAGE_BANDS = (
    (90, RecommendedUsage.FLUENT_TEXT),
    (75, RecommendedUsage.CONTENT_TEXT),
    (60, RecommendedUsage.BODY_TEXT),
    (45, RecommendedUsage.HEADLINES),
    (30, RecommendedUsage.SPOT_TEXT),
    (15, RecommendedUsage.NON_TEXT),
)


def wcag_ratio(color_a: ChannelLike, color_b: ChannelLike) -> float:
    """WCAG 2.x contrast ratio of two 0-255 RGB colors, in [1, 21]."""
    l1 = relative_luminance(color_a)
    l2 = relative_luminance(color_b)
    if l2 > l1:
        l1, l2 = l2, l1
    return (l1 + 0.05) / (l2 + 0.05)


class Contrast:
    """
    Contrast of a text color over a background color.

    Args:
        background_color: 0-255 RGB triple
        text_color: hex string
    """

    def __init__(self, background_color: ChannelLike = (0, 0, 0), text_color: HexModel = "#FFFFFF") -> None:
        self.background_color: Channel = as_channel(background_color)
        self.text_color = text_color

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(background_color={self.background_color}, text_color={self.text_color!r})"

    @property
    def _text_rgb(self) -> Channel:
        return hex_to_rgb(self.text_color)

    @property
    def _background_rgb(self) -> Channel:
        # the background is compared as it would be written out
        return hex_to_rgb(rgb_to_hex(self.background_color))

    def wcag_contrast(self) -> float:
        return wcag_ratio(self._background_rgb, self._text_rgb)

    def apca_contrast(self) -> float:
        return abs(apca_contrast(srgb_to_y(self._text_rgb), srgb_to_y(self.background_color)))

    def wcag_score(self) -> WcagScore:
        ratio = self.wcag_contrast()
        if ratio < 4.5:
            return WcagScore.A
        if ratio < 7:
            return WcagScore.AA
        return WcagScore.AAA

    def wcag_score_color(self) -> dict[str, float]:
        return dict(PASS_COLOR if self.wcag_score() is not WcagScore.A else FAIL_COLOR)

    def apca_score_color(self) -> dict[str, float]:
        return dict(PASS_COLOR if self.recommended_usage() is not RecommendedUsage.AVOID else FAIL_COLOR)

    def min_font_sizes(self) -> list[float]:
        return font_lookup_apca(self.apca_contrast())

    def recommended_usage(self) -> RecommendedUsage:
        lc = self.apca_contrast()
        if math.isnan(lc):
            return RecommendedUsage.UNKNOWN
        for lower, usage in USAGE_BANDS:
            if lc >= lower:
                return usage
        return RecommendedUsage.AVOID

    def contrast_ratio_for_lightness(self, lightness: float) -> float:
        """WCAG ratio of the neutral gray ``lch(lightness, 0, 0)`` against the text color."""
        gray = to_rgb255(lch_to_unit_rgb(lightness, 0, 0))
        return wcag_ratio(gray, self._text_rgb)

    def solve_lightness_for_contrast(self, target_ratio: float, precision: float = 0.1) -> float:
        """
        Bisect the LCh lightness of a neutral background reaching ``target_ratio``.

        Light text (luminance above 0.5) needs a darker background, so a
        ratio below target moves the upper bound down; dark text does the
        opposite. Stops once the bracket is narrower than ``precision``.

        Returns:
            The last probed lightness in [0, 100]
        """
        is_light_text = relative_luminance(self._text_rgb) > 0.5
        low, high = 0.0, 100.0
        current = 20.0 if is_light_text else 80.0

        iterations = 0
        while high - low > precision and iterations < MAX_BISECTIONS:
            current = (low + high) / 2
            ratio = self.contrast_ratio_for_lightness(current)
            if is_light_text:
                if ratio < target_ratio:
                    high = current
                else:
                    low = current
            elif ratio < target_ratio:
                low = current
            else:
                high = current
            iterations += 1

        logger.debug(
            "Solved lightness %.3f for ratio %.2f against %s after %d bisections",
            current, target_ratio, self.text_color, iterations,
        )
        return current
