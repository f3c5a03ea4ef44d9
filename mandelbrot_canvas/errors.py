"""Exceptions raised while rendering Mandelbrot images."""

from __future__ import annotations


class MandelbrotError(Exception):
    """Base class for every error raised by :mod:`mandelbrot_canvas`."""


class ConfigurationError(MandelbrotError, ValueError):
    """The render was requested with parameters that cannot be honoured."""


class UnknownPaletteError(ConfigurationError):
    def __init__(self, name: object) -> None:
        self.name = name
        super().__init__(f"Unknown palette {name!r}")


class HueSectorError(MandelbrotError, ArithmeticError):
    def __init__(self, hue: float) -> None:
        self.hue = hue
        super().__init__(f"Hue {hue!r} falls outside the six HSV sectors")


class SurfaceError(MandelbrotError):
    """The rendering surface refused the pixel buffer."""
