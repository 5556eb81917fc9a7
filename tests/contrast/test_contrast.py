import pytest

from chromapalette.contrast import Contrast, wcag_ratio, PASS_COLOR, FAIL_COLOR
from chromapalette.types import RecommendedUsage, WcagScore


def test_wcag_extremes():
    assert Contrast((0, 0, 0), "#FFFFFF").wcag_contrast() > 20
    assert Contrast((255, 255, 255), "#000000").wcag_contrast() > 20
    assert wcag_ratio((0, 0, 0), (255, 255, 255)) == pytest.approx(21)

def test_wcag_ratio_is_symmetric():
    assert wcag_ratio((18, 52, 86), (204, 102, 51)) == pytest.approx(wcag_ratio((204, 102, 51), (18, 52, 86)))

def test_identical_colors():
    contrast = Contrast((128, 128, 128), "#808080")
    assert contrast.wcag_contrast() == pytest.approx(1)
    assert contrast.wcag_score() is WcagScore.A
    assert contrast.apca_contrast() == 0
    assert contrast.recommended_usage() is RecommendedUsage.AVOID
    assert contrast.wcag_score_color() == FAIL_COLOR
    assert contrast.apca_score_color() == FAIL_COLOR

def test_wcag_tiers():
    assert Contrast((0, 0, 0), "#FFFFFF").wcag_score() is WcagScore.AAA
    # #767676 on white is the classic 4.54:1
    assert Contrast((255, 255, 255), "#767676").wcag_score() is WcagScore.AA
    assert Contrast((255, 255, 255), "#999999").wcag_score() is WcagScore.A

def test_apca_polarity_is_ignored():
    dark_on_light = Contrast((255, 255, 255), "#000000").apca_contrast()
    light_on_dark = Contrast((0, 0, 0), "#FFFFFF").apca_contrast()
    assert dark_on_light > 100
    assert light_on_dark > 100
    assert Contrast((0, 0, 0), "#FFFFFF").recommended_usage() is RecommendedUsage.FLUENT_TEXT
    assert Contrast((0, 0, 0), "#FFFFFF").wcag_score_color() == PASS_COLOR

def test_recommended_usage_bands_decrease_with_contrast():
    order = list(RecommendedUsage)
    previous = None
    for gray in range(0, 256, 15):
        usage = Contrast((gray, gray, gray), "#FFFFFF").recommended_usage()
        if previous is not None:
            assert order.index(usage) <= order.index(previous)
        previous = usage

def test_min_font_sizes_shape():
    sizes = Contrast((0, 0, 0), "#FFFFFF").min_font_sizes()
    assert len(sizes) == 10
    assert sizes[0] == pytest.approx(Contrast((0, 0, 0), "#FFFFFF").apca_contrast(), abs=0.01)

def test_contrast_ratio_for_lightness():
    contrast = Contrast(text_color="#000000")
    assert contrast.contrast_ratio_for_lightness(100) == pytest.approx(21)
    assert contrast.contrast_ratio_for_lightness(0) == pytest.approx(1)

@pytest.mark.parametrize("target", [3, 4.5, 7])
def test_solve_lightness_for_light_text(target):
    contrast = Contrast(text_color="#FFFFFF")
    lightness = contrast.solve_lightness_for_contrast(target)
    assert 0 <= lightness <= 100
    assert contrast.contrast_ratio_for_lightness(lightness) == pytest.approx(target, abs=0.2)

@pytest.mark.parametrize("target", [3, 4.5, 7])
def test_solve_lightness_for_dark_text(target):
    contrast = Contrast(text_color="#000000")
    lightness = contrast.solve_lightness_for_contrast(target)
    assert contrast.contrast_ratio_for_lightness(lightness) == pytest.approx(target, abs=0.2)

def test_solver_direction():
    light_text = Contrast(text_color="#FFFFFF")
    dark_text = Contrast(text_color="#000000")
    assert light_text.solve_lightness_for_contrast(7) < light_text.solve_lightness_for_contrast(4.5)
    assert dark_text.solve_lightness_for_contrast(7) > dark_text.solve_lightness_for_contrast(4.5)

def test_solver_terminates_without_precision():
    lightness = Contrast(text_color="#FFFFFF").solve_lightness_for_contrast(4.5, precision=0)
    assert 0 <= lightness <= 100
