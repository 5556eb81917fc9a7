from .color_harmony import ColorHarmony, ColorHarmonyResult

__all__ = ["ColorHarmony", "ColorHarmonyResult"]
