"""Rendering pipeline: plane sampling, escape-time iteration and colouring."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from .engine import escape_time, escape_time_grid
from .errors import ConfigurationError
from .palettes import Palette, PaletteLike, get_palette, palette_table
from .plane import Viewport, iter_sample_points, sample_grid
from .surface import Surface


@dataclass(frozen=True)
class RenderParameters:
    """Parameters that describe a single render of the Mandelbrot set."""

    width: int
    height: int
    viewport: Viewport
    max_iterations: int
    palette: PaletteLike = Palette.BASIC


def _validate(params: RenderParameters) -> Palette:
    palette = get_palette(params.palette)
    if params.max_iterations < 1:
        raise ConfigurationError(f"max_iterations must be positive, got {params.max_iterations}.")
    if params.width < 0 or params.height < 0:
        raise ConfigurationError(f"Raster dimensions must be non-negative, got {params.width}x{params.height}.")
    return palette


def compute_iterations(params: RenderParameters, *, vectorized: bool = True) -> np.ndarray:
    """Return the ``(height, width)`` array of escape counts."""

    if vectorized:
        cx, cy = sample_grid(params.width, params.height, params.viewport)
        return escape_time_grid(cx, cy, params.max_iterations)

    iterations = np.empty((max(params.height, 0), max(params.width, 0)), dtype=np.int64)
    for row, col, c in iter_sample_points(params.width, params.height, params.viewport):
        iterations[row, col] = escape_time(c, params.max_iterations)
    return iterations


def colorize(iterations: np.ndarray, palette: PaletteLike, max_iterations: int) -> np.ndarray:
    """Map escape counts to a ``(..., 4)`` uint8 RGBA array.

    Only the counts that occur in ``iterations`` are coloured.
    """

    iterations = np.asarray(iterations, dtype=np.int64)
    counts, inverse = np.unique(iterations, return_inverse=True)
    table = palette_table(palette, max_iterations, counts)
    return table[inverse.reshape(iterations.shape)]


def render_pixels(params: RenderParameters, *, vectorized: bool = True) -> np.ndarray:
    palette = _validate(params)
    iterations = compute_iterations(params, vectorized=vectorized)
    return colorize(iterations, palette, params.max_iterations)


def render_buffer(params: RenderParameters, *, vectorized: bool = True) -> bytes:
    """Render ``params`` to a flat row-major RGBA byte string."""

    return np.ascontiguousarray(render_pixels(params, vectorized=vectorized)).tobytes()


def draw(
    surface: Surface,
    width: int,
    height: int,
    palette: PaletteLike,
    xmin: float,
    xmax: float,
    ymin: float,
    ymax: float,
    iterations: int,
) -> None:
    """Render the Mandelbrot set and hand the image to ``surface`` at ``(0, 0)``.

    Raises :class:`UnknownPaletteError` for an unrecognised palette before
    anything is computed; errors raised by the surface propagate unchanged.
    """

    params = RenderParameters(
        width=width,
        height=height,
        viewport=Viewport(xmin=xmin, xmax=xmax, ymin=ymin, ymax=ymax),
        max_iterations=iterations,
        palette=palette,
    )
    buffer = render_buffer(params)
    surface.put_image_data(buffer, width, height, 0, 0)
