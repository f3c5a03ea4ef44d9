"""Drawing targets that accept raw RGBA buffers."""

from __future__ import annotations

from typing import Protocol

import numpy as np
import PIL.Image

from .errors import SurfaceError

CHANNELS = 4


class Surface(Protocol):
    """Anything that can blit a row-major RGBA buffer at an offset."""

    def put_image_data(self, data: bytes, width: int, height: int, dx: int = 0, dy: int = 0) -> None:
        ...


class ImageSurface:
    """In-memory RGBA canvas, initially transparent black."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise SurfaceError(f"Surface dimensions must be non-negative, got {width}x{height}.")
        self.width = int(width)
        self.height = int(height)
        self._pixels = np.zeros((self.height, self.width, CHANNELS), dtype=np.uint8)

    @property
    def pixels(self) -> np.ndarray:
        return self._pixels.copy()

    def put_image_data(self, data: bytes, width: int, height: int, dx: int = 0, dy: int = 0) -> None:
        """Copy ``data`` onto the surface with its top-left corner at ``(dx, dy)``.

        The buffer must hold exactly ``width * height`` RGBA pixels. Parts of
        the image that fall outside the surface are dropped.
        """

        if width < 0 or height < 0:
            raise SurfaceError(f"Image dimensions must be non-negative, got {width}x{height}.")
        expected = width * height * CHANNELS
        if len(data) != expected:
            raise SurfaceError(
                f"Buffer holds {len(data)} bytes but a {width}x{height} RGBA image needs {expected}."
            )
        if expected == 0:
            return

        image = np.frombuffer(bytes(data), dtype=np.uint8).reshape(height, width, CHANNELS)

        row_start = max(dy, 0)
        row_end = min(dy + height, self.height)
        col_start = max(dx, 0)
        col_end = min(dx + width, self.width)
        if row_start >= row_end or col_start >= col_end:
            return
        self._pixels[row_start:row_end, col_start:col_end] = image[
            row_start - dy:row_end - dy,
            col_start - dx:col_end - dx,
        ]

    def to_image(self) -> PIL.Image.Image:
        return PIL.Image.fromarray(self._pixels)
