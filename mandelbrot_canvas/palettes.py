"""Colouring strategies that turn an escape count into an RGBA pixel.

Every strategy is a pure function of ``(i, n)`` where ``i`` is the escape
count returned by the engine and ``n`` the iteration cap. They are selected
by name through :class:`Palette`.
"""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, Iterable, NamedTuple, Optional, Union

import numpy as np

from .errors import HueSectorError, UnknownPaletteError

OPAQUE = 255


class Pixel(NamedTuple):
    red: int
    green: int
    blue: int
    alpha: int = OPAQUE


def _int_channel(value: int) -> int:
    # Integer channels keep their low byte, so out-of-range values wrap.
    return value & 0xFF


def _float_channel(value: float) -> int:
    """Convert a float to a channel: truncate toward zero, saturate, NaN is 0."""

    if math.isnan(value) or value <= 0.0:
        return 0
    if value >= 255.0:
        return 255
    return int(value)


def _float_pixel(red: float, green: float, blue: float) -> Pixel:
    return Pixel(_float_channel(red), _float_channel(green), _float_channel(blue))


def basic_palette(i: int, n: int) -> Pixel:
    """Three-band ramp (after the BASIC256 program on Rosetta Code)."""

    if i < 16:
        r = g = 8 * i
        b = 128 + 4 * i
    elif i < 64:
        r = g = 112 + i
        b = 176 + i
    elif i >= 64:
        r = 319 - i
        g = (128 + r) // 2
        b = r
    else:
        # The bands above cover every integer; kept so a count that matches
        # none of them still gets a colour.
        r = g = b = 0
    return Pixel(_int_channel(r), _int_channel(g), _int_channel(b))


def hsv_hue(i: int, n: int) -> float:
    """Hue in ``[0, 6)`` used by :func:`hsv_palette`."""

    ratio = i / n
    return math.fmod(math.pow(ratio, 1.5) * 1000.0, 6.0)


def hsv_palette(i: int, n: int) -> Pixel:
    h = hsv_hue(i, n)
    if not 0.0 <= h < 6.0:
        raise HueSectorError(h)

    c = 255.0
    x = c * (1.0 - abs(math.fmod(h, 2.0) - 1.0))
    sector = int(h)
    if sector == 0:
        r, g, b = c, x, 0.0
    elif sector == 1:
        r, g, b = x, c, 0.0
    elif sector == 2:
        r, g, b = 0.0, c, x
    elif sector == 3:
        r, g, b = 0.0, x, c
    elif sector == 4:
        r, g, b = x, 0.0, c
    else:
        r, g, b = c, 0.0, x
    return _float_pixel(r, g, b)


def rgb_palette(i: int, n: int) -> Pixel:
    """Grey ramp on exponentially mapped, cyclic iteration counts."""

    ratio = i / n
    value = math.fmod(math.pow(ratio * 360.0, 1.5), 360.0)
    return _float_pixel(value, value, value)


def _b1(v: float) -> float:
    # sRGB companding, scaled to 0..255.
    if v > 0.0031308:
        return math.pow(v, 1.0 / 2.4) * 269.025 - 14.025
    return v * 3294.6


def _b2(v: float) -> float:
    # Inverse of the CIELAB f() function.
    if v > 0.2068965:
        return v * v * v
    return (v - 4.0 / 29.0) * (108.0 / 841.0)


def _lch_rgb(i: int, n: int) -> tuple[float, float, float]:
    """Channel values of the LCH strategy before conversion to bytes.

    No gamut clamping happens here; the values can fall outside [0, 255].
    """

    ratio = i / n
    v = 1.0 - math.pow(math.pi * ratio, 2.0)
    lightness = 75.0 - 75.0 * v
    chroma = 28.0 + lightness
    hue = math.fmod(math.pow(360.0 * ratio, 1.25), 360.0)

    angle = hue * math.pi / 180.0
    base = (lightness + 16.0) / 116.0
    y = _b2(base)
    x = _b2(base + (chroma / 500.0) * math.cos(angle))
    z = _b2(base - (chroma / 200.0) * math.sin(angle))

    r = _b1(x * 3.021973625 - y * 1.617392459 - z * 0.404875592)
    g = _b1(x * -0.943766287 + y * 1.916279586 + z * 0.027607165)
    b = _b1(x * 0.069407491 - y * 0.22898585 + z * 1.159737864)
    return r, g, b


def lch_palette(i: int, n: int) -> Pixel:
    return _float_pixel(*_lch_rgb(i, n))


class Palette(Enum):
    BASIC = "basic"
    HSV = "hsv"
    RGB = "rgb"
    LCH = "lch"

    def colorize(self, i: int, n: int) -> Pixel:
        return _STRATEGIES[self](i, n)


_STRATEGIES: dict[Palette, Callable[[int, int], Pixel]] = {
    Palette.BASIC: basic_palette,
    Palette.HSV: hsv_palette,
    Palette.RGB: rgb_palette,
    Palette.LCH: lch_palette,
}

PALETTE_NAMES = tuple(p.value for p in Palette)

PaletteLike = Union[Palette, str]


def get_palette(name: PaletteLike) -> Palette:
    if isinstance(name, Palette):
        return name
    try:
        return Palette(name)
    except ValueError:
        raise UnknownPaletteError(name) from None


def color(name: PaletteLike, i: int, n: int) -> Pixel:
    return get_palette(name).colorize(i, n)


def palette_table(
    palette: PaletteLike,
    max_iterations: int,
    counts: Optional[Iterable[int]] = None,
) -> np.ndarray:
    """Colour a set of escape counts.

    Row ``k`` of the returned ``(len(counts), 4)`` uint8 array is the pixel
    for ``counts[k]``. Without ``counts`` every count ``0..max_iterations`` is
    coloured, so row ``i`` is the pixel for escape count ``i``.
    """

    palette = get_palette(palette)
    if counts is None:
        counts = range(max_iterations + 1)
    counts = [int(i) for i in counts]
    table = np.empty((len(counts), 4), dtype=np.uint8)
    for row, i in enumerate(counts):
        table[row] = palette.colorize(i, max_iterations)
    return table
