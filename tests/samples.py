"""Reference colors shared by the test suites."""

# 0-255 RGB -> hex
samples_rgb_hex = {
    (255, 0, 0): "#ff0000",
    (0, 255, 0): "#00ff00",
    (0, 0, 255): "#0000ff",
    (255, 255, 255): "#ffffff",
    (0, 0, 0): "#000000",
    (18, 52, 86): "#123456",
    (204, 102, 51): "#cc6633",
}

# unit RGB -> CSS HSL (hue degrees, saturation and lightness in [0, 1])
samples_rgb_hsl = {
    (1.0, 0.0, 0.0): (0.0, 1.0, 0.5),
    (0.0, 1.0, 0.0): (120.0, 1.0, 0.5),
    (0.0, 0.0, 1.0): (240.0, 1.0, 0.5),
    (1.0, 1.0, 0.0): (60.0, 1.0, 0.5),
    (0.5, 0.5, 0.5): (0.0, 0.0, 0.5),
    (1.0, 1.0, 1.0): (0.0, 0.0, 1.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
}

# unit RGB -> CIE Lab (D65)
samples_rgb_lab = {
    (1.0, 1.0, 1.0): (100.0, 0.0, 0.0),
    (0.0, 0.0, 0.0): (0.0, 0.0, 0.0),
    (1.0, 0.0, 0.0): (53.24, 80.09, 67.20),
    (0.0, 1.0, 0.0): (87.73, -86.18, 83.18),
    (0.0, 0.0, 1.0): (32.30, 79.19, -107.86),
}

# unit RGB -> OKLab
samples_rgb_oklab = {
    (1.0, 1.0, 1.0): (1.0, 0.0, 0.0),
    (1.0, 0.0, 0.0): (0.6280, 0.2249, 0.1258),
    (0.0, 1.0, 0.0): (0.8664, -0.2339, 0.1795),
    (0.0, 0.0, 1.0): (0.4520, -0.0325, -0.3115),
}

# 0-255 RGB triples used for round trips and palette runs
sample_colors = [
    (255, 0, 0),
    (0, 128, 255),
    (34, 139, 34),
    (255, 200, 0),
    (128, 0, 128),
    (120, 120, 120),
    (18, 52, 86),
]
