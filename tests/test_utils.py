import math

from chromapalette.utils import value_or_default, nested_or_default, round_half_up, round_to, nan_to_zero


def test_value_or_default():
    assert value_or_default(None, 3) == 3
    assert value_or_default(0, 3) == 0

def test_nested_or_default():
    data = {"alpha": {"isEnabled": True, "backgroundColor": None}, "hue": 5}
    assert nested_or_default(data, "alpha.isEnabled", False) is True
    assert nested_or_default(data, "alpha.backgroundColor", "#FFF") == "#FFF"
    assert nested_or_default(data, "hue.shift", 0) == 0
    assert nested_or_default(data, "chroma.shift", 100) == 100

def test_round_half_up():
    assert round_half_up(0.5) == 1
    assert round_half_up(2.5) == 3
    assert round_half_up(-0.5) == 0
    assert round_to(0.125, 2) == 0.13
    assert round_to(21.26, 1) == 21.3

def test_nan_to_zero():
    assert nan_to_zero(math.nan) == 0
    assert nan_to_zero(1.5) == 1.5
