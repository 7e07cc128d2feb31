from .container import PNG_SIGNATURE, iter_chunks, make_chunk, parse_header, parse_png, serialize_png
from .crc import CRC32_TABLE, crc32
from .scanline import decode_scanlines, expand_to_rgba, filter_scanlines, paeth_predictor, unfilter_scanlines
from .types import Chunk, Header, Raster

__all__ = [
    "Chunk",
    "CRC32_TABLE",
    "crc32",
    "decode_scanlines",
    "expand_to_rgba",
    "filter_scanlines",
    "Header",
    "iter_chunks",
    "make_chunk",
    "paeth_predictor",
    "parse_header",
    "parse_png",
    "PNG_SIGNATURE",
    "Raster",
    "serialize_png",
    "unfilter_scanlines",
]
