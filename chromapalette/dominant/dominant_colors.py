"""
Dominant color extraction with k-means++ over RGB pixels.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

import numpy as np
from boundednumbers import clamp

from ..conversions.hex import rgb_to_hex
from ..exceptions import MissingImageDataError
from ..types.color_types import Channel, HexModel
from ..utils.num_utils import round_to
from .image import DEFAULT_MAX_IMAGE_SIZE, ImageData, decode_image

logger = logging.getLogger(__name__)

MIN_COLOR_COUNT = 1
MAX_COLOR_COUNT = 20
OPAQUE_THRESHOLD = 128
PIXEL_CHUNK_SIZE = 16384


@dataclass
class DominantColorResult:
    color: Channel
    hex: HexModel
    count: int
    percentage: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "color": list(self.color),
            "hex": self.hex,
            "count": self.count,
            "percentage": self.percentage,
        }


class DominantColors:
    """
    Extract up to ``color_count`` representative colors from an RGBA buffer.

    Args:
        image_data: pixels to cluster; required by :meth:`extract_dominant_colors`
        color_count: number of clusters, clamped to [1, 20]
        max_iterations: cap on Lloyd iterations
        tolerance: convergence threshold on centroid movement
        skip_transparent: ignore pixels with alpha below 128
        seed: seed for the k-means++ initialization
    """

    def __init__(
        self,
        image_data: ImageData | None = None,
        color_count: int = 5,
        max_iterations: int = 50,
        tolerance: float = 0.01,
        skip_transparent: bool = True,
        seed: int | None = None,
    ) -> None:
        self.image_data = image_data
        self.color_count = 5
        self.set_color_count(color_count)
        self.max_iterations = max_iterations
        self.tolerance = tolerance
        self.skip_transparent = skip_transparent
        self.seed = seed

    @classmethod
    def from_image_bytes(
        cls,
        buffer: bytes,
        color_count: int = 5,
        max_image_size: int = DEFAULT_MAX_IMAGE_SIZE,
        **options: Any,
    ) -> "DominantColors":
        """Decode an encoded image and build an extractor over its pixels."""
        return cls(image_data=decode_image(buffer, max_image_size), color_count=color_count, **options)

    @classmethod
    def extract(cls, buffer: bytes, color_count: int = 5) -> list[DominantColorResult]:
        return cls.from_image_bytes(buffer, color_count=color_count).extract_dominant_colors()

    # ---- options ----

    def set_color_count(self, count: int) -> None:
        self.color_count = int(clamp(count, MIN_COLOR_COUNT, MAX_COLOR_COUNT))

    def update_options(
        self,
        color_count: int | None = None,
        max_iterations: int | None = None,
        tolerance: float | None = None,
        skip_transparent: bool | None = None,
    ) -> None:
        if color_count is not None:
            self.set_color_count(color_count)
        if max_iterations is not None:
            self.max_iterations = max_iterations
        if tolerance is not None:
            self.tolerance = tolerance
        if skip_transparent is not None:
            self.skip_transparent = skip_transparent

    def get_options(self) -> dict[str, Any]:
        return {
            "color_count": self.color_count,
            "max_iterations": self.max_iterations,
            "tolerance": self.tolerance,
            "skip_transparent": self.skip_transparent,
        }

    # ---- extraction ----

    def extract_dominant_colors(self) -> list[DominantColorResult]:
        """
        Cluster the pixels and rank the clusters by share of pixels.

        Raises:
            MissingImageDataError: if the extractor holds no image data
        """
        if self.image_data is None:
            raise MissingImageDataError()

        pixels = self._extract_pixels()
        if len(pixels) == 0:
            return []

        centroids = self._perform_kmeans(pixels)
        results = self._color_frequencies(pixels, centroids)
        return sorted(results, key=lambda r: r.percentage, reverse=True)

    def _extract_pixels(self) -> np.ndarray:
        rgba = self.image_data.rgba()
        if self.skip_transparent:
            rgba = rgba[rgba[:, 3] >= OPAQUE_THRESHOLD]
        return rgba[:, :3]

    @staticmethod
    def _closest_centroid(pixels: np.ndarray, centroids: np.ndarray) -> np.ndarray:
        """Index of the nearest centroid per pixel; ties go to the lowest index."""
        labels = np.empty(len(pixels), dtype=np.intp)
        # chunked so the pixel x centroid x channel block stays bounded
        for start in range(0, len(pixels), PIXEL_CHUNK_SIZE):
            chunk = pixels[start:start + PIXEL_CHUNK_SIZE]
            diff = chunk[:, None, :] - centroids[None, :, :]
            labels[start:start + len(chunk)] = np.einsum("nkc,nkc->nk", diff, diff).argmin(axis=1)
        return labels

    def _initialize_centroids(self, pixels: np.ndarray, k: int, rng: np.random.Generator) -> np.ndarray:
        """k-means++: the first centroid is uniform, the rest are drawn with d^2 weights."""
        centroids = [pixels[rng.integers(len(pixels))]]
        nearest = np.full(len(pixels), np.inf)
        for _ in range(1, k):
            # only the newest centroid can lower a pixel's nearest distance
            diff = pixels - centroids[-1]
            np.minimum(nearest, np.einsum("nc,nc->n", diff, diff), out=nearest)
            cumulative = np.cumsum(nearest)
            threshold = rng.random() * cumulative[-1]
            index = min(int(np.searchsorted(cumulative, threshold, side="left")), len(pixels) - 1)
            centroids.append(pixels[index])
        return np.asarray(centroids, dtype=float)

    def _has_converged(self, centroids: np.ndarray, previous: np.ndarray | None) -> bool:
        if previous is None:
            return False
        return bool(np.all(np.linalg.norm(centroids - previous, axis=1) < self.tolerance))

    def _perform_kmeans(self, pixels: np.ndarray) -> np.ndarray:
        k = min(self.color_count, len(pixels))
        rng = np.random.default_rng(self.seed)
        centroids = self._initialize_centroids(pixels, k, rng)
        previous = None
        iteration = 0

        while iteration < self.max_iterations and not self._has_converged(centroids, previous):
            previous = centroids.copy()
            labels = self._closest_centroid(pixels, centroids)

            sums = np.zeros_like(centroids)
            np.add.at(sums, labels, pixels)
            counts = np.bincount(labels, minlength=k)

            occupied = counts > 0
            means = np.floor(sums[occupied] / counts[occupied, None] + 0.5)
            # empty clusters keep their previous centroid
            centroids = previous.copy()
            centroids[occupied] = means
            iteration += 1

        logger.debug(
            "k-means on %d pixels with k=%d stopped after %d iterations (converged=%s)",
            len(pixels), k, iteration, self._has_converged(centroids, previous),
        )
        return centroids

    def _color_frequencies(self, pixels: np.ndarray, centroids: np.ndarray) -> list[DominantColorResult]:
        counts = np.bincount(self._closest_centroid(pixels, centroids), minlength=len(centroids))
        total = len(pixels)

        results = []
        for centroid, count in zip(centroids.astype(int).tolist(), counts.tolist()):
            if count == 0:
                continue
            r, g, b = centroid
            results.append(DominantColorResult(
                color=(r, g, b),
                hex=rgb_to_hex(centroid),
                count=count,
                percentage=round_to(count / total * 100, 2),
            ))
        return results
