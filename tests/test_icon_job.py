"""End-to-end tests for the icon pipeline."""

from __future__ import annotations

import pickle
from pathlib import Path

import pytest
from PIL import Image

from iconsmith.errors import FormatError, StageError, UnsupportedFormatError
from iconsmith.icon_job import IconJobBuilder, make_icons, write_icons
from iconsmith.png.container import parse_png
from iconsmith.settings import IconSettings

from .helpers import bordered_raster

RED = (255, 0, 0, 255)
WHITE = (255, 255, 255, 255)
CLEAR = (0, 0, 0, 0)


def ring(size: int, x: int, y: int) -> int:
    return min(x, y, size - 1 - x, size - 1 - y)


class TestEndToEnd:
    def test_writes_every_size(self, red_on_white: Path, tmp_path: Path) -> None:
        out_dir = tmp_path / "out" / "icons"
        written = make_icons(str(red_on_white), out_dir)
        assert [p.name for p in written] == ["icon16.png", "icon32.png", "icon48.png", "icon128.png"]
        for path, size in zip(written, (16, 32, 48, 128)):
            with Image.open(path) as img:
                assert img.mode == "RGBA"
                assert img.size == (size, size)

    def test_border_cleared_interior_opaque(self, red_on_white: Path, tmp_path: Path) -> None:
        make_icons(str(red_on_white), tmp_path, IconSettings(sizes=(16,)))
        icon = parse_png((tmp_path / "icon16.png").read_bytes())
        # 400 / 16 = 25 source pixels per icon pixel, so the 50 pixel border
        # maps exactly onto the two outer rings.
        for y in range(16):
            for x in range(16):
                expected = CLEAR if ring(16, x, y) < 2 else RED
                assert icon.pixel(x, y) == expected, (x, y)

    def test_keep_background(self, red_on_white: Path) -> None:
        icons = IconJobBuilder(IconSettings(sizes=(16,), remove_background=False)).build_from_file(
            str(red_on_white)
        )
        assert icons[0].raster.pixel(0, 0) == WHITE

    def test_jpeg_source(self, save_image, tmp_path: Path) -> None:
        img = Image.new("RGB", (64, 64), (255, 255, 255))
        img.paste((20, 20, 20), (16, 16, 48, 48))
        source = save_image(img, "logo.jpg", quality=90)
        icon = IconJobBuilder(IconSettings(sizes=(16,))).build_from_file(str(source))[0].raster
        assert icon.pixel(0, 0) == CLEAR
        r, g, b, a = icon.pixel(8, 8)
        assert a == 255
        assert max(r, g, b) < 60


class TestBuilder:
    def test_worker_processes_match_sequential(self) -> None:
        raster = bordered_raster(40, 5, RED, WHITE)
        sizes = (4, 8, 16, 3)
        sequential = IconJobBuilder(IconSettings(sizes=sizes)).build_from_raster(raster.copy())
        parallel = IconJobBuilder(IconSettings(sizes=sizes, workers=3)).build_from_raster(raster.copy())
        assert [i.size for i in parallel] == list(sizes)
        assert [i.data for i in parallel] == [i.data for i in sequential]

    def test_icon_bytes_decode_to_raster(self) -> None:
        icon = IconJobBuilder(IconSettings(sizes=(5,))).build_from_raster(bordered_raster(10, 2, RED, WHITE))[0]
        assert parse_png(icon.data) == icon.raster

    def test_invalid_settings(self) -> None:
        with pytest.raises(ValueError):
            IconJobBuilder(IconSettings(sizes=(16, 0)))


class TestErrors:
    def test_not_a_png(self, tmp_path: Path) -> None:
        source = tmp_path / "fake.png"
        source.write_bytes(b"hello world, not an image")
        with pytest.raises(StageError) as info:
            make_icons(str(source), tmp_path / "out")
        assert info.value.stage == "load"
        assert isinstance(info.value.__cause__, FormatError)
        assert not (tmp_path / "out").exists()

    def test_unsupported_extension(self, tmp_path: Path) -> None:
        source = tmp_path / "notes.txt"
        source.write_text("hi")
        with pytest.raises(StageError, match="Supported formats") as info:
            make_icons(str(source), tmp_path)
        assert info.value.stage == "read"

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(StageError, match="File not found") as info:
            make_icons(str(tmp_path / "missing.png"), tmp_path)
        assert info.value.stage == "read"

    def test_failed_write_keeps_earlier_files(self, red_on_white: Path, tmp_path: Path) -> None:
        out_dir = tmp_path / "out"
        (out_dir / "icon32.png").mkdir(parents=True)
        icons = IconJobBuilder(IconSettings(sizes=(16, 32, 48))).build_from_file(str(red_on_white))
        with pytest.raises(StageError) as info:
            write_icons(icons, out_dir)
        assert info.value.stage == "write"
        assert (out_dir / "icon16.png").is_file()
        assert not (out_dir / "icon48.png").exists()

    def test_custom_name_template(self, tmp_path: Path) -> None:
        icons = IconJobBuilder(IconSettings(sizes=(8,))).build_from_raster(bordered_raster(8, 1, RED, WHITE))
        written = write_icons(icons, tmp_path, "logo-{size}x{size}.png")
        assert [p.name for p in written] == ["logo-8x8.png"]

    def test_bad_template_is_a_write_error(self, tmp_path: Path) -> None:
        icons = IconJobBuilder(IconSettings(sizes=(8,))).build_from_raster(bordered_raster(8, 1, RED, WHITE))
        with pytest.raises(StageError) as info:
            write_icons(icons, tmp_path, "icon{size}{tag}.png")
        assert info.value.stage == "write"
        assert isinstance(info.value.__cause__, KeyError)

    def test_errors_survive_pickling(self) -> None:
        # Worker processes send failures back to the parent pickled.
        error = pickle.loads(pickle.dumps(StageError("resize", UnsupportedFormatError(8, 6, 1))))
        assert error.stage == "resize"
        assert str(error) == "resize failed: Unsupported PNG: bitDepth=8 colorType=6 interlace=1"
        assert error.cause.interlace == 1
