import pytest

from chromapalette import ColorConfiguration, ThemeConfiguration, ThemeType, VisionSimulationMode


def test_color_from_dict_defaults():
    color = ColorConfiguration.from_dict({"id": "a", "name": "A", "rgb": {"r": 1, "g": 0.5, "b": 0}})
    assert color.rgb == (1.0, 0.5, 0.0)
    assert color.rgb255 == (255.0, 127.5, 0.0)
    assert color.hue_shift == 0
    assert color.chroma_shift == 100
    assert not color.alpha_enabled
    assert color.background_color == "#FFFFFF"

def test_color_from_dict_knobs():
    color = ColorConfiguration.from_dict({
        "id": "a", "name": "A", "rgb": [0, 0, 1],
        "hue": {"shift": -20}, "chroma": {"shift": 60},
        "alpha": {"isEnabled": True, "backgroundColor": "#101010"},
    })
    assert (color.hue_shift, color.chroma_shift) == (-20, 60)
    assert color.alpha_enabled
    assert color.background_color == "#101010"

def test_color_from_dict_rejects_malformed():
    with pytest.raises(ValueError, match="rgb"):
        ColorConfiguration.from_dict({"id": "a"})
    with pytest.raises(ValueError):
        ColorConfiguration.from_dict({"rgb": {"r": 1, "g": 1}})
    with pytest.raises(TypeError):
        ColorConfiguration.from_dict(["not", "a", "mapping"])

def test_gamut_flag():
    assert ColorConfiguration(id="x", name="x", rgb=(1.1, 0, 0)).is_out_of_gamut
    assert not ColorConfiguration(id="x", name="x", rgb=(1, 0, 0)).is_out_of_gamut

def test_theme_scale_is_read_only():
    scale = {"100": 100, "50": 50}
    theme = ThemeConfiguration(id="t", name="T", scale=scale)
    scale["0"] = 0
    assert "0" not in theme.scale
    with pytest.raises(TypeError):
        theme.scale["10"] = 10

def test_theme_ordered_stops():
    theme = ThemeConfiguration(id="t", name="T", scale={"a": 10, "b": 90, "c": 10, "d": 55})
    assert theme.ordered_stops() == [("b", 90), ("d", 55), ("a", 10), ("c", 10)]

def test_theme_rejects_malformed_scale():
    with pytest.raises(ValueError, match="non-numeric"):
        ThemeConfiguration(id="t", name="T", scale={"a": "bright"})
    with pytest.raises(TypeError):
        ThemeConfiguration(id="t", name="T", scale=[10, 20])

def test_theme_from_dict():
    theme = ThemeConfiguration.from_dict({
        "id": "t", "name": "Dark", "scale": {"1": 10},
        "visionSimulationMode": "PROTANOPIA", "paletteBackground": "#000000",
        "isEnabled": False, "type": "custom theme",
    })
    assert theme.vision_simulation_mode == VisionSimulationMode.PROTANOPIA
    assert theme.type is ThemeType.CUSTOM
    assert not theme.is_enabled
    assert ThemeConfiguration.from_dict({"id": "t"}).scale == {}
