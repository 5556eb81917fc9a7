import pytest

from chromapalette.colors import COLOR_BLIND_MATRICES, simulate_color_blind_rgb, simulate_color_blind_hex
from chromapalette.types import VisionSimulationMode


def test_none_rounds_and_clamps():
    assert simulate_color_blind_rgb((12.4, 300, -5)) == (12, 255, 0)
    assert simulate_color_blind_rgb((10.5, 0, 0), "NONE") == (11, 0, 0)

def test_every_deficiency_has_a_matrix():
    assert set(COLOR_BLIND_MATRICES) == set(VisionSimulationMode) - {VisionSimulationMode.NONE}
    for matrix in COLOR_BLIND_MATRICES.values():
        assert matrix.shape == (3, 3)

@pytest.mark.parametrize("mode", list(VisionSimulationMode))
def test_white_stays_white(mode):
    # every row sums to one
    assert simulate_color_blind_rgb((255, 255, 255), mode) == (255, 255, 255)

def test_achromatopsia():
    assert simulate_color_blind_rgb((255, 0, 0), VisionSimulationMode.ACHROMATOPSIA) == (76, 76, 76)
    assert simulate_color_blind_hex((255, 0, 0), "achromatopsia") == "#4c4c4c"

def test_protanopia_red():
    assert simulate_color_blind_rgb((255, 0, 0), "PROTANOPIA") == (145, 142, 0)

def test_unknown_mode_is_black():
    assert simulate_color_blind_rgb((255, 0, 0), "SEPIA") == (0, 0, 0)
    assert simulate_color_blind_hex((255, 0, 0), "SEPIA") == "#000000"
    assert simulate_color_blind_rgb((255, 0, 0), None) == (0, 0, 0)
