"""Raw RGBA pixel buffers and decoding of encoded images into them."""

from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Sequence, Union

import numpy as np
from PIL import Image, UnidentifiedImageError

from ..exceptions import ImageDecodeError

PixelBuffer = Union[bytes, bytearray, memoryview, Sequence[int], np.ndarray]

DEFAULT_MAX_IMAGE_SIZE = 150


@dataclass
class ImageData:
    """
    A flat RGBA buffer, four 0-255 values per pixel, row-major.

    Mirrors the canvas ``ImageData`` shape: ``len(data) == width * height * 4``.
    """
    data: PixelBuffer
    width: int
    height: int

    def rgba(self) -> np.ndarray:
        """The buffer as an ``(n_pixels, 4)`` float array; a trailing partial pixel is dropped."""
        if isinstance(self.data, (bytes, bytearray, memoryview)):
            flat = np.frombuffer(self.data, dtype=np.uint8)
        else:
            flat = np.asarray(self.data).reshape(-1)
        usable = flat.size - flat.size % 4
        return flat[:usable].reshape(-1, 4).astype(float)


def decode_image(buffer: bytes, max_image_size: int = DEFAULT_MAX_IMAGE_SIZE) -> ImageData:
    """
    Decode an encoded image (PNG, JPEG, ...) into RGBA pixels.

    The image is downscaled so neither side exceeds ``max_image_size``,
    keeping its aspect ratio.

    Raises:
        ImageDecodeError: if the buffer is not a decodable image
    """
    try:
        with Image.open(io.BytesIO(bytes(buffer))) as img:
            rgba = img.convert("RGBA")
    except (UnidentifiedImageError, OSError, ValueError) as e:
        raise ImageDecodeError(f"Could not decode image: {e}") from e

    rgba.thumbnail((max_image_size, max_image_size))
    pixels = np.asarray(rgba, dtype=np.uint8)
    return ImageData(data=pixels.reshape(-1), width=rgba.width, height=rgba.height)
