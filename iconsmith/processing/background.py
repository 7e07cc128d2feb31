from __future__ import annotations

from collections import deque

from ..png.types import Raster

DEFAULT_WHITE_RADIUS = 40
DEFAULT_THRESHOLD_SQ = DEFAULT_WHITE_RADIUS * DEFAULT_WHITE_RADIUS


def whiteness_distance_sq(r: int, g: int, b: int) -> int:
    """Squared Euclidean distance from pure white in RGB space."""
    dr = 255 - r
    dg = 255 - g
    db = 255 - b
    return dr * dr + dg * dg + db * db


def remove_background(raster: Raster, threshold_sq: int = DEFAULT_THRESHOLD_SQ) -> int:
    """Make near-white pixels connected to the image border transparent.

    Breadth-first flood fill seeded from every border pixel. A pixel joins the
    background when its distance from white is within ``threshold_sq``; only
    background pixels spread to their 4-connected neighbours, so white areas
    enclosed by the subject are kept. Returns the number of pixels cleared.
    """
    raster.validate()
    width = raster.width
    height = raster.height
    pixels = raster.pixels
    visited = bytearray(width * height)
    queue: deque = deque()

    def push(x: int, y: int) -> None:
        if x < 0 or x >= width or y < 0 or y >= height:
            return
        idx = y * width + x
        if visited[idx]:
            return
        visited[idx] = 1
        queue.append(idx)

    for x in range(width):
        push(x, 0)
        push(x, height - 1)
    for y in range(height):
        push(0, y)
        push(width - 1, y)

    cleared = 0
    while queue:
        idx = queue.popleft()
        px = idx * 4
        if whiteness_distance_sq(pixels[px], pixels[px + 1], pixels[px + 2]) > threshold_sq:
            continue
        pixels[px + 3] = 0
        cleared += 1
        x = idx % width
        y = idx // width
        push(x - 1, y)
        push(x + 1, y)
        push(x, y - 1)
        push(x, y + 1)
    return cleared
