from __future__ import annotations

from dataclasses import dataclass, field
from typing import Tuple

from .crc import crc32

COLOR_TYPE_RGB = 2
COLOR_TYPE_RGBA = 6
SUPPORTED_COLOR_TYPES = {COLOR_TYPE_RGB: 3, COLOR_TYPE_RGBA: 4}


@dataclass(frozen=True)
class Raster:
    """Row-major RGBA pixel buffer, 8 bits per channel, no row padding."""

    width: int
    height: int
    pixels: bytearray

    @classmethod
    def blank(cls, width: int, height: int) -> "Raster":
        return cls(width, height, bytearray(width * height * 4))

    def validate(self) -> None:
        """Check the buffer length matches the dimensions."""
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Width and height must be greater than zero")
        if len(self.pixels) != self.width * self.height * 4:
            raise ValueError(
                f"Pixels length {len(self.pixels)} does not match {self.width}x{self.height} RGBA"
            )

    def pixel(self, x: int, y: int) -> Tuple[int, int, int, int]:
        offset = (y * self.width + x) * 4
        return tuple(self.pixels[offset : offset + 4])  # type: ignore[return-value]

    def copy(self) -> "Raster":
        return Raster(self.width, self.height, bytearray(self.pixels))


@dataclass(frozen=True)
class Header:
    """Fields of the IHDR chunk needed to reconstruct pixels."""

    width: int
    height: int
    bit_depth: int
    color_type: int

    @property
    def bytes_per_pixel(self) -> int:
        return SUPPORTED_COLOR_TYPES[self.color_type]


@dataclass(frozen=True)
class Chunk:
    """One length-prefixed, typed unit of the PNG container."""

    type: bytes
    data: bytes
    stored_checksum: int = field(default=0, compare=False)

    @property
    def checksum(self) -> int:
        return crc32(self.type + self.data)

    @property
    def name(self) -> str:
        return self.type.decode("ascii", errors="replace")
