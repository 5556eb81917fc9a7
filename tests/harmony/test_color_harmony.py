import pytest

from chromapalette.conversions import unit_rgb_to_hsl
from chromapalette.exceptions import UnknownHarmonyTypeError
from chromapalette.harmony import ColorHarmony
from chromapalette.types import HarmonyType

BASE = (230, 60, 20)


def hue_of(rgb):
    return unit_rgb_to_hsl(*(v / 255 for v in rgb))[0]


def offsets(result):
    base_hue = hue_of(result.base_color)
    return [(hue_of(color) - base_hue) % 360 for color in result.colors]


def assert_offsets(result, expected):
    for got, want in zip(offsets(result), expected):
        assert abs((got - want + 180) % 360 - 180) < 1, (got, want)


def test_complementary():
    result = ColorHarmony((255, 0, 0)).generate_complementary()
    assert result.type is HarmonyType.COMPLEMENTARY
    assert len(result.colors) == 2
    assert result.colors[0] == (255, 0, 0)
    assert result.colors[1] == (0, 255, 255)
    assert result.hex_colors == ["#ff0000", "#00ffff"]

def test_triadic_offsets():
    result = ColorHarmony(BASE).generate_triadic()
    assert len(result.colors) == 3
    assert_offsets(result, [0, 120, 240])

def test_square_offsets():
    result = ColorHarmony(BASE).generate_square()
    assert len(result.colors) == 4
    assert_offsets(result, [0, 90, 180, 270])

def test_tetradic_default_matches_square():
    harmony = ColorHarmony(BASE)
    assert harmony.generate_tetradic().colors == harmony.generate_square().colors

def test_tetradic_rectangle():
    assert_offsets(ColorHarmony(BASE).generate_tetradic(angle=60), [0, 60, 180, 240])

def test_analogous():
    result = ColorHarmony(BASE, analogous_spread=45).generate_analogous()
    assert len(result.colors) == 3
    assert_offsets(result, [0, 315, 45])

def test_saturation_and_lightness_are_kept():
    _, s_base, l_base = unit_rgb_to_hsl(*(v / 255 for v in BASE))
    for color in ColorHarmony(BASE).generate_square().colors:
        _, s, l = unit_rgb_to_hsl(*(v / 255 for v in color))
        assert s == pytest.approx(s_base, abs=0.01)
        assert l == pytest.approx(l_base, abs=0.01)

def test_gray_base_stays_gray():
    result = ColorHarmony((128, 128, 128)).generate_triadic()
    assert result.colors == [(128, 128, 128)] * 3

def test_spread_is_clamped():
    assert ColorHarmony(analogous_spread=500).analogous_spread == 180
    harmony = ColorHarmony()
    harmony.set_analogous_spread(0)
    assert harmony.analogous_spread == 1

def test_generate_harmony_by_name():
    harmony = ColorHarmony(BASE)
    assert harmony.generate_harmony("triadic") == harmony.generate_triadic()
    assert harmony.generate_harmony(HarmonyType.SQUARE) == harmony.generate_square()

def test_unknown_harmony_type():
    with pytest.raises(UnknownHarmonyTypeError, match="Unknown harmony type: PENTADIC"):
        ColorHarmony(BASE).generate_harmony("PENTADIC")
    with pytest.raises(ValueError):
        ColorHarmony(BASE).generate_harmony("split")

def test_get_all_harmonies():
    results = ColorHarmony(BASE).get_all_harmonies()
    assert [r.type for r in results] == list(HarmonyType)

def test_to_dict_formats():
    harmony = ColorHarmony((255, 0, 0), return_format="hex")
    assert harmony.generate_complementary().to_dict() == {
        "type": "COMPLEMENTARY",
        "baseHex": "#ff0000",
        "hexColors": ["#ff0000", "#00ffff"],
    }
    harmony.update_options(return_format="rgb")
    assert harmony.generate_complementary().to_dict() == {
        "type": "COMPLEMENTARY",
        "baseColor": [255, 0, 0],
        "colors": [[255, 0, 0], [0, 255, 255]],
    }
    assert set(ColorHarmony().generate_square().to_dict()) == {"type", "baseColor", "colors", "baseHex", "hexColors"}

def test_options():
    harmony = ColorHarmony()
    harmony.set_base_color((0, 0, 255))
    harmony.update_options(analogous_spread=20)
    assert harmony.base_color == (0, 0, 255)
    assert harmony.get_options() == {"analogous_spread": 20, "return_format": "both"}
