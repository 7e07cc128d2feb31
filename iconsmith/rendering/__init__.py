from .converters import SUPPORTED_EXTENSIONS, RasterLoader, load_raster

__all__ = ["RasterLoader", "SUPPORTED_EXTENSIONS", "load_raster"]
