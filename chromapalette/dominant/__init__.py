from .dominant_colors import DominantColors, DominantColorResult
from .image import ImageData, decode_image

__all__ = ["DominantColors", "DominantColorResult", "ImageData", "decode_image"]
