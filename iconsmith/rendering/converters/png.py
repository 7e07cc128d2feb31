from __future__ import annotations

from .base import RasterConverter
from ...png.container import parse_png
from ...png.types import Raster


class PngConverter(RasterConverter):
    def __init__(self, verify_checksums: bool = False) -> None:
        self.verify_checksums = verify_checksums

    def load(self, path: str) -> Raster:
        return self.decode(self._read_bytes(path))

    def decode(self, data: bytes) -> Raster:
        return parse_png(data, verify_checksums=self.verify_checksums)
