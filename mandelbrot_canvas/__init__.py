"""Public API for Mandelbrot rendering utilities."""

from .engine import escape_time, escape_time_grid
from .errors import (
    ConfigurationError,
    HueSectorError,
    MandelbrotError,
    SurfaceError,
    UnknownPaletteError,
)
from .palettes import (
    PALETTE_NAMES,
    Palette,
    Pixel,
    basic_palette,
    color,
    get_palette,
    hsv_hue,
    hsv_palette,
    lch_palette,
    palette_table,
    rgb_palette,
)
from .plane import SamplingMetadata, Viewport, compute_metadata, iter_sample_points, pixel_to_complex, sample_grid
from .renderer import RenderParameters, colorize, compute_iterations, draw, render_buffer, render_pixels
from .surface import ImageSurface, Surface

__all__ = [
    "ConfigurationError",
    "HueSectorError",
    "ImageSurface",
    "MandelbrotError",
    "PALETTE_NAMES",
    "Palette",
    "Pixel",
    "RenderParameters",
    "SamplingMetadata",
    "Surface",
    "SurfaceError",
    "UnknownPaletteError",
    "Viewport",
    "basic_palette",
    "color",
    "colorize",
    "compute_iterations",
    "compute_metadata",
    "draw",
    "escape_time",
    "escape_time_grid",
    "get_palette",
    "hsv_hue",
    "hsv_palette",
    "iter_sample_points",
    "lch_palette",
    "palette_table",
    "pixel_to_complex",
    "render_buffer",
    "render_pixels",
    "sample_grid",
]
