"""Mapping between raster pixels and points of the complex plane."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

import numpy as np


@dataclass(frozen=True)
class Viewport:
    """Rectangle of the complex plane shown on the raster."""

    xmin: float
    xmax: float
    ymin: float
    ymax: float


@dataclass(frozen=True)
class SamplingMetadata:
    """Metadata describing the sampling grid for a rendered frame."""

    x_min: float
    y_min: float
    x_step: float
    y_step: float
    width: int
    height: int


def compute_metadata(width: int, height: int, viewport: Viewport) -> SamplingMetadata:
    width = max(int(width), 0)
    height = max(int(height), 0)

    x_min = np.float64(viewport.xmin)
    y_min = np.float64(viewport.ymin)

    # Samples sit on the top/left edge of each pixel, so the step divides by
    # the pixel count rather than by (count - 1).
    x_step = (np.float64(viewport.xmax) - x_min) / np.float64(width) if width else np.float64(0.0)
    y_step = (np.float64(viewport.ymax) - y_min) / np.float64(height) if height else np.float64(0.0)

    return SamplingMetadata(
        x_min=float(x_min),
        y_min=float(y_min),
        x_step=float(x_step),
        y_step=float(y_step),
        width=width,
        height=height,
    )


def pixel_to_complex(metadata: SamplingMetadata, row: int, col: int) -> tuple[np.float64, np.float64]:
    x = np.float64(metadata.x_min) + np.float64(col) * np.float64(metadata.x_step)
    y = np.float64(metadata.y_min) + np.float64(row) * np.float64(metadata.y_step)
    return np.float64(x), np.float64(y)


def iter_sample_points(width: int, height: int, viewport: Viewport) -> Iterator[tuple[int, int, complex]]:
    """Yield ``(row, col, c)`` for every pixel in row-major order."""

    metadata = compute_metadata(width, height, viewport)
    for row in range(metadata.height):
        for col in range(metadata.width):
            x, y = pixel_to_complex(metadata, row, col)
            yield row, col, complex(float(x), float(y))


def sample_grid(width: int, height: int, viewport: Viewport) -> tuple[np.ndarray, np.ndarray]:
    """Return the real and imaginary parts of every sample as ``(height, width)`` arrays.

    The values are identical to those produced by :func:`pixel_to_complex`.
    """

    metadata = compute_metadata(width, height, viewport)
    x = np.float64(metadata.x_min) + np.arange(metadata.width, dtype=np.float64) * np.float64(metadata.x_step)
    y = np.float64(metadata.y_min) + np.arange(metadata.height, dtype=np.float64) * np.float64(metadata.y_step)
    cx, cy = np.meshgrid(x, y)
    return cx, cy
