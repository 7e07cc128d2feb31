from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from PIL import Image


@pytest.fixture()
def save_image(tmp_path: Path) -> Callable[..., Path]:
    """Write a Pillow image into the test directory and return its path."""

    def _save(img: Image.Image, name: str = "source.png", **params) -> Path:
        path = tmp_path / name
        img.save(path, **params)
        return path

    return _save


@pytest.fixture()
def red_on_white(save_image) -> Path:
    """400x400 opaque red square inside a 50 pixel opaque white border."""
    img = Image.new("RGB", (400, 400), (255, 255, 255))
    img.paste((255, 0, 0), (50, 50, 350, 350))
    return save_image(img, "red_on_white.png")
