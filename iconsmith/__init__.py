from .errors import FormatError, IconsmithError, StageError, UnsupportedFormatError
from .icon_job import Icon, IconJobBuilder, make_icons, write_icons
from .png import Raster, crc32, parse_png, serialize_png
from .processing import remove_background, resize_area_average
from .settings import DEFAULT_SIZES, IconSettings

__version__ = "0.1.0"

__all__ = [
    "crc32",
    "DEFAULT_SIZES",
    "FormatError",
    "Icon",
    "IconJobBuilder",
    "IconSettings",
    "IconsmithError",
    "make_icons",
    "parse_png",
    "Raster",
    "remove_background",
    "resize_area_average",
    "serialize_png",
    "StageError",
    "UnsupportedFormatError",
    "write_icons",
]
