import math

import pytest

from chromapalette.contrast import apca_contrast, font_lookup_apca, srgb_to_y


def test_srgb_to_y():
    assert srgb_to_y((255, 255, 255)) == pytest.approx(1.0)
    assert srgb_to_y((0, 0, 0)) == 0

def test_apca_sign():
    black, white = srgb_to_y((0, 0, 0)), srgb_to_y((255, 255, 255))
    assert apca_contrast(black, white) > 0
    assert apca_contrast(white, black) < 0

def test_apca_invalid_luminance_is_zero():
    assert apca_contrast(float("nan"), 0.5) == 0
    assert apca_contrast(-0.1, 0.5) == 0
    assert apca_contrast(0.5, 1.2) == 0

def test_font_lookup_on_row():
    assert font_lookup_apca(60) == [60, 72, 48, 42, 24, 21, 18, 16, 16, 18]

def test_font_lookup_interpolates():
    sizes = font_lookup_apca(62.5)
    assert sizes[0] == 62.5
    assert sizes[1] == pytest.approx(70)
    assert sizes[4] == pytest.approx(22.875)

def test_font_lookup_sentinels():
    assert font_lookup_apca(0)[1:] == [999] * 9
    assert font_lookup_apca(22.5)[1:] == [777] * 9
    assert font_lookup_apca(-60) == font_lookup_apca(60)
    assert font_lookup_apca(math.nan)[0] == 0

def test_font_lookup_caps_at_last_row():
    assert font_lookup_apca(200)[1:] == [30, 21, 16, 10, 10, 10, 10, 12, 14]
