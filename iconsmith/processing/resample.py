from __future__ import annotations

import math

from ..png.types import Raster


def _round_clamp(value: float) -> int:
    return min(255, int(math.floor(value + 0.5)))


def resize_area_average(src: Raster, dst_width: int, dst_height: int) -> Raster:
    """Resample with exact coverage weights, averaging in premultiplied alpha.

    Each destination pixel covers a real-valued rectangle of the source; every
    source cell it overlaps contributes in proportion to the overlap area and to
    its own alpha, so colour stored under transparent pixels never leaks into
    the result. Works for both up- and downsampling.
    """
    if dst_width <= 0 or dst_height <= 0:
        raise ValueError(f"Invalid target size {dst_width}x{dst_height}")
    src.validate()
    src_w = src.width
    src_h = src.height
    pixels = src.pixels
    dst = Raster.blank(dst_width, dst_height)
    out = dst.pixels

    # Column spans are shared by every output row.
    columns = []
    for dx in range(dst_width):
        sx0 = dx * src_w / dst_width
        sx1 = (dx + 1) * src_w / dst_width
        span = []
        for sx in range(int(math.floor(sx0)), min(int(math.ceil(sx1)), src_w)):
            wx = min(sx + 1, sx1) - max(sx, sx0)
            if wx > 0:
                span.append((sx * 4, wx))
        columns.append(span)

    for dy in range(dst_height):
        sy0 = dy * src_h / dst_height
        sy1 = (dy + 1) * src_h / dst_height
        rows = []
        for sy in range(int(math.floor(sy0)), min(int(math.ceil(sy1)), src_h)):
            wy = min(sy + 1, sy1) - max(sy, sy0)
            if wy > 0:
                rows.append((sy * src_w * 4, wy))

        for dx in range(dst_width):
            acc_r = acc_g = acc_b = acc_a = acc_w = 0.0
            for row_offset, wy in rows:
                for col_offset, wx in columns[dx]:
                    w = wx * wy
                    pi = row_offset + col_offset
                    aw = pixels[pi + 3] * w
                    acc_r += pixels[pi] * aw
                    acc_g += pixels[pi + 1] * aw
                    acc_b += pixels[pi + 2] * aw
                    acc_a += aw
                    acc_w += w
            if acc_a > 0:
                di = (dy * dst_width + dx) * 4
                out[di] = _round_clamp(acc_r / acc_a)
                out[di + 1] = _round_clamp(acc_g / acc_a)
                out[di + 2] = _round_clamp(acc_b / acc_a)
                out[di + 3] = _round_clamp(acc_a / acc_w)
    return dst
