import numpy as np
import pytest

from chromapalette.conversions import (
    unit_rgb_to_hsl, np_unit_rgb_to_hsl, hsl_to_unit_rgb,
    unit_rgb_to_lab, np_unit_rgb_to_lab, unit_rgb_to_lch,
    unit_rgb_to_oklab, unit_rgb_to_oklch,
    unit_rgb_to_hsluv, hsluv_to_unit_rgb,
    to_rgb255, relative_luminance, rgb_to_gl,
)
from ..samples import samples_rgb_hsl, samples_rgb_lab, samples_rgb_oklab


def test_unit_rgb_to_hsl():
    for (r, g, b), (h_exp, s_exp, l_exp) in samples_rgb_hsl.items():
        h_out, s_out, l_out = unit_rgb_to_hsl(r, g, b)

        assert abs(h_out - h_exp) < 1/2
        assert abs(s_out - s_exp) < 1/255
        assert abs(l_out - l_exp) < 1/255

def test_unit_rgb_to_hsl_numpy():
    the_matrix = np.array(list(samples_rgb_hsl.keys()))
    expected = np.array(list(samples_rgb_hsl.values()))
    hsl = np_unit_rgb_to_hsl(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(hsl, expected, atol=1/255)

def test_hsl_to_unit_rgb():
    for rgb, hsl in samples_rgb_hsl.items():
        assert np.allclose(hsl_to_unit_rgb(*hsl), rgb, atol=1e-9)

def test_hsl_hue_wraps_and_nan_reads_as_zero():
    assert np.allclose(hsl_to_unit_rgb(360 + 120, 1, 0.5), (0, 1, 0))
    assert np.allclose(hsl_to_unit_rgb(float("nan"), 0, 0.5), (0.5, 0.5, 0.5))

def test_unit_rgb_to_lab():
    for rgb, lab_expected in samples_rgb_lab.items():
        assert np.allclose(unit_rgb_to_lab(*rgb), lab_expected, atol=0.1)

def test_unit_rgb_to_lab_numpy():
    the_matrix = np.array(list(samples_rgb_lab.keys()))
    expected = np.array(list(samples_rgb_lab.values()))
    lab = np_unit_rgb_to_lab(the_matrix[..., 0], the_matrix[..., 1], the_matrix[..., 2])
    assert np.allclose(lab, expected, atol=0.1)

def test_achromatic_lch_hue_is_zero():
    for gray in (0.0, 0.25, 0.5, 1.0):
        _, c, h = unit_rgb_to_lch(gray, gray, gray)
        assert c == pytest.approx(0, abs=1e-3)
        assert h == 0
        _, c, h = unit_rgb_to_oklch(gray, gray, gray)
        assert h == 0

def test_lch_hue_range():
    for rgb in samples_rgb_lab:
        _, _, h = unit_rgb_to_lch(*rgb)
        assert 0 <= h < 360

def test_unit_rgb_to_oklab():
    for rgb, oklab_expected in samples_rgb_oklab.items():
        assert np.allclose(unit_rgb_to_oklab(*rgb), oklab_expected, atol=1e-3)

def test_hsluv_degenerate_input_is_finite():
    h, s, l = unit_rgb_to_hsluv(0, 0, 0)
    assert not any(np.isnan([h, s, l]))
    assert np.allclose(hsluv_to_unit_rgb(float("nan"), float("nan"), 50), hsluv_to_unit_rgb(0, 0, 50))

def test_to_rgb255_rounds_half_up_and_clamps():
    assert to_rgb255((0.6 / 255, 1.2, -0.3)) == (1, 255, 0)
    assert to_rgb255((float("nan"), 0.5, 1.0)) == (0, 128, 255)

def test_relative_luminance_extremes():
    assert relative_luminance((255, 255, 255)) == pytest.approx(1.0)
    assert relative_luminance((0, 0, 0)) == 0

def test_rgb_to_gl():
    assert rgb_to_gl((255, 0, 51), 0.5) == pytest.approx((1.0, 0.0, 0.2, 0.5))
