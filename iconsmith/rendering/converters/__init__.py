from __future__ import annotations

import os
from typing import Dict, Optional, Set

from .base import RasterConverter
from .image import ImageConverter, image_to_raster, raster_to_image
from .png import PngConverter
from ...png.types import Raster

SUPPORTED_EXTENSIONS: Set[str] = {".png", ".jpg", ".jpeg", ".bmp", ".gif"}


class RasterLoader:
    def __init__(
        self,
        converters: Optional[Dict[str, RasterConverter]] = None,
        verify_checksums: bool = False,
    ) -> None:
        if converters is None:
            converters = {".png": PngConverter(verify_checksums)}
            image_converter = ImageConverter()
            for ext in (".jpg", ".jpeg", ".bmp", ".gif"):
                converters[ext] = image_converter
        self._converters = converters

    @property
    def supported_extensions(self) -> Set[str]:
        return set(self._converters.keys())

    def load(self, path: str) -> Raster:
        ext = os.path.splitext(path)[1].lower()
        converter = self._converters.get(ext)
        if not converter:
            raise ValueError(f"Unsupported file extension: {ext}")
        return converter.load(path)


def load_raster(path: str, verify_checksums: bool = False) -> Raster:
    return RasterLoader(verify_checksums=verify_checksums).load(path)


__all__ = [
    "ImageConverter",
    "PngConverter",
    "RasterConverter",
    "RasterLoader",
    "SUPPORTED_EXTENSIONS",
    "image_to_raster",
    "load_raster",
    "raster_to_image",
]
