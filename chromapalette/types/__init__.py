from .color_types import Channel, ChannelWithAlpha, GLChannel, HexModel, ColorOutput
from .config_types import (
    ColorSpace,
    AlgorithmVersion,
    VisionSimulationMode,
    ThemeType,
    Render,
    HarmonyType,
    WcagScore,
    RecommendedUsage,
)

__all__ = [
    "Channel", "ChannelWithAlpha", "GLChannel", "HexModel", "ColorOutput",
    "ColorSpace", "AlgorithmVersion", "VisionSimulationMode", "ThemeType",
    "Render", "HarmonyType", "WcagScore", "RecommendedUsage",
]
