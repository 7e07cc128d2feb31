from __future__ import annotations

from .types import Header, Raster
from ..errors import FormatError

FILTER_NONE = 0
FILTER_SUB = 1
FILTER_UP = 2
FILTER_AVERAGE = 3
FILTER_PAETH = 4


def paeth_predictor(a: int, b: int, c: int) -> int:
    """Pick whichever neighbour is closest to a + b - c (ties: a, b, c)."""
    p = a + b - c
    pa = abs(p - a)
    pb = abs(p - b)
    pc = abs(p - c)
    if pa <= pb and pa <= pc:
        return a
    if pb <= pc:
        return b
    return c


def unfilter_scanlines(data: bytes, width: int, height: int, bpp: int) -> bytearray:
    """Reverse PNG row filters and return the raw samples without filter bytes."""
    stride = width * bpp
    expected = height * (stride + 1)
    if len(data) < expected:
        raise FormatError(
            f"Image data too short: got {len(data)} bytes, expected {expected} for {width}x{height}"
        )
    out = bytearray(height * stride)
    prev = bytearray(stride)
    for y in range(height):
        base = y * (stride + 1)
        filter_type = data[base]
        cur = bytearray(data[base + 1 : base + 1 + stride])
        if filter_type == FILTER_NONE:
            pass
        elif filter_type == FILTER_SUB:
            for i in range(bpp, stride):
                cur[i] = (cur[i] + cur[i - bpp]) & 0xFF
        elif filter_type == FILTER_UP:
            for i in range(stride):
                cur[i] = (cur[i] + prev[i]) & 0xFF
        elif filter_type == FILTER_AVERAGE:
            for i in range(stride):
                a = cur[i - bpp] if i >= bpp else 0
                cur[i] = (cur[i] + ((a + prev[i]) >> 1)) & 0xFF
        elif filter_type == FILTER_PAETH:
            for i in range(stride):
                if i >= bpp:
                    a = cur[i - bpp]
                    c = prev[i - bpp]
                else:
                    a = 0
                    c = 0
                cur[i] = (cur[i] + paeth_predictor(a, prev[i], c)) & 0xFF
        else:
            raise FormatError(f"Unknown PNG filter type {filter_type} on row {y}")
        out[y * stride : (y + 1) * stride] = cur
        prev = cur
    return out


def expand_to_rgba(samples: bytes, width: int, height: int, bpp: int) -> bytearray:
    """Widen RGB samples to RGBA with opaque alpha; RGBA passes through."""
    if bpp == 4:
        return bytearray(samples)
    count = width * height
    rgba = bytearray(b"\xff" * (count * 4))
    rgba[0::4] = samples[0::3]
    rgba[1::4] = samples[1::3]
    rgba[2::4] = samples[2::3]
    return rgba


def decode_scanlines(data: bytes, header: Header) -> Raster:
    bpp = header.bytes_per_pixel
    samples = unfilter_scanlines(data, header.width, header.height, bpp)
    return Raster(header.width, header.height, expand_to_rgba(samples, header.width, header.height, bpp))


def filter_scanlines(raster: Raster) -> bytes:
    """Emit rows with filter type 0 (None); no adaptive filter selection."""
    raster.validate()
    stride = raster.width * 4
    out = bytearray()
    for y in range(raster.height):
        out.append(FILTER_NONE)
        out += raster.pixels[y * stride : (y + 1) * stride]
    return bytes(out)
