from __future__ import annotations

from PIL import Image, ImageOps

from .base import RasterConverter
from ...png.types import Raster


class ImageConverter(RasterConverter):
    """Loads JPEG, BMP and GIF sources through Pillow."""

    def load(self, path: str) -> Raster:
        with Image.open(path) as img:
            img = ImageOps.exif_transpose(img)
            return image_to_raster(img)


def image_to_raster(img: Image.Image) -> Raster:
    if img.mode != "RGBA":
        img = img.convert("RGBA")
    return Raster(img.width, img.height, bytearray(img.tobytes()))


def raster_to_image(raster: Raster) -> Image.Image:
    raster.validate()
    return Image.frombytes("RGBA", (raster.width, raster.height), bytes(raster.pixels))
