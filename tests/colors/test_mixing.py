from chromapalette.colors import mix_colors_rgb, mix_colors_hex


def test_opaque_foreground_is_returned():
    assert mix_colors_rgb((10, 20, 30, 1), (200, 200, 200, 1)) == (10, 20, 30)

def test_transparent_foreground_yields_background():
    assert mix_colors_rgb((10, 20, 30, 0), (200, 150, 100, 1)) == (200, 150, 100)

def test_half_transparent_over_white():
    assert mix_colors_rgb((255, 0, 0, 0.5), (255, 255, 255, 1)) == (255, 128, 128)

def test_over_transparent_background():
    assert mix_colors_rgb((255, 0, 0, 0.5), (0, 0, 255, 0)) == (255, 0, 0)

def test_mix_is_simulated():
    r, g, b = mix_colors_rgb((255, 0, 0, 0.5), (0, 0, 255, 1), "ACHROMATOPSIA")
    assert r == g == b

def test_mix_hex():
    assert mix_colors_hex("#ff000080", "#ffffff") == "#ff8080"
    assert mix_colors_hex("#ff0000", "#ffffff") == "#ff0000"

def test_mix_hex_invalid_argument_is_returned():
    assert mix_colors_hex("nope", "#ffffff") == "nope"
    assert mix_colors_hex("#ffffff", "nada") == "nada"
