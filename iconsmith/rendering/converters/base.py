from __future__ import annotations

from pathlib import Path

from ...png.types import Raster


class RasterConverter:
    def load(self, path: str) -> Raster:
        raise NotImplementedError

    @staticmethod
    def _read_bytes(path: str) -> bytes:
        return Path(path).read_bytes()
