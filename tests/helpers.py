from __future__ import annotations

from typing import Tuple

from iconsmith.png.types import Raster

Color = Tuple[int, int, int, int]


def solid_raster(width: int, height: int, color: Color) -> Raster:
    return Raster(width, height, bytearray(bytes(color) * (width * height)))


def bordered_raster(size: int, border: int, inner: Color, outer: Color) -> Raster:
    raster = solid_raster(size, size, outer)
    for y in range(border, size - border):
        for x in range(border, size - border):
            offset = (y * size + x) * 4
            raster.pixels[offset : offset + 4] = bytes(inner)
    return raster
