"""Raster container.

Architecture
------------
::

    +--------------------------------------+
    |               Raster                 |
    |--------------------------------------|
    | data   : ImageRGBA  (H, W, 4) uint8  |
    | height : int (rows)                  |
    | width  : int (columns)               |
    +--------------------------------------+
    | from_pixels(w, h, pixels) -> cls     |
    | from_buffer(w, h, buffer) -> cls     |
    | to_buffer() -> bytes                 |
    | pixels -> tuple[Pixel, ...]          |
    | pixel_at(x, y) -> Pixel              |
    +--------------------------------------+

- Pixels are stored row-major, the pixel at ``(x, y)`` has index ``y * width + x``.
- The backing array is read-only; processing always produces a new raster.
- Compared by pixel data equality.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from pydantic import BaseModel, ConfigDict

from container_models.base import RGBA_CHANNELS, ImageRGBA
from container_models.pixel import Pixel
from exceptions import RasterShapeError


def _validate_dimensions(width: int, height: int) -> None:
    if width < 1 or height < 1:
        raise RasterShapeError(
            f"Raster dimensions must be positive, got {width}x{height}"
        )


class Raster(BaseModel):
    data: ImageRGBA

    model_config = ConfigDict(
        arbitrary_types_allowed=True,
        frozen=True,
        extra="forbid",
    )

    @property
    def height(self) -> int:
        """Return the height (number of rows) of the raster."""
        return self.data.shape[0]

    @property
    def width(self) -> int:
        """Return the width (number of columns) of the raster."""
        return self.data.shape[1]

    @property
    def pixels(self) -> tuple[Pixel, ...]:
        """Row-major sequence of the raster's pixels."""
        return tuple(
            Pixel(*channels)
            for channels in self.data.reshape(-1, RGBA_CHANNELS).tolist()
        )

    def pixel_at(self, x: int, y: int) -> Pixel:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside raster of {self.width}x{self.height}"
            )
        return Pixel(*self.data[y, x].tolist())

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Raster):
            return NotImplemented
        return np.array_equal(self.data, other.data)

    def __hash__(self) -> int:
        return hash((self.data.shape, self.data.tobytes()))

    @classmethod
    def from_pixels(cls, width: int, height: int, pixels: Sequence[Pixel]) -> Raster:
        """
        Build a raster from a row-major sequence of pixels.

        :param width: Number of columns.
        :param height: Number of rows.
        :param pixels: Exactly ``width * height`` pixels, row by row.
        :returns: A new `Raster`.
        :raises RasterShapeError: If the dimensions are not positive or the pixel count does not match.
        """
        _validate_dimensions(width, height)
        if len(pixels) != width * height:
            raise RasterShapeError(
                f"Expected {width * height} pixels for a {width}x{height} raster, got {len(pixels)}"
            )
        data = np.array(
            [pixel.as_tuple() for pixel in pixels], dtype=np.uint8
        ).reshape(height, width, RGBA_CHANNELS)
        return cls(data=data)

    @classmethod
    def from_buffer(cls, width: int, height: int, buffer: bytes | bytearray | memoryview) -> Raster:
        """
        Build a raster from a raw row-major RGBA buffer, four bytes per pixel.

        :raises RasterShapeError: If the buffer size does not match the dimensions.
        """
        _validate_dimensions(width, height)
        expected_size = width * height * RGBA_CHANNELS
        if (size := memoryview(buffer).nbytes) != expected_size:
            raise RasterShapeError(
                f"Expected a buffer of {expected_size} bytes for a {width}x{height} raster, got {size}"
            )
        data = np.frombuffer(buffer, dtype=np.uint8).reshape(
            height, width, RGBA_CHANNELS
        )
        return cls(data=data)

    def to_buffer(self) -> bytes:
        """Return the raster as a raw row-major RGBA byte buffer."""
        return self.data.tobytes()
