from __future__ import annotations

import logging
import os
from concurrent.futures import ProcessPoolExecutor
from dataclasses import dataclass
from itertools import repeat
from pathlib import Path
from typing import Iterable, List, Optional

from .errors import IconsmithError, StageError
from .png.container import serialize_png
from .png.types import Raster
from .processing import remove_background, resize_area_average
from .rendering import SUPPORTED_EXTENSIONS, RasterLoader
from .settings import DEFAULT_NAME_TEMPLATE, IconSettings

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Icon:
    size: int
    raster: Raster
    data: bytes


class IconJobBuilder:
    def __init__(self, settings: Optional[IconSettings] = None) -> None:
        self.settings = settings or IconSettings()
        self.settings.validate()

    def build_from_file(self, path: str) -> List[Icon]:
        self._validate_input_path(path)
        loader = RasterLoader(verify_checksums=self.settings.verify_checksums)
        raster = _run_stage("load", loader.load, path)
        logger.info("Decoded %s: %dx%d", path, raster.width, raster.height)
        return self.build_from_raster(raster)

    def build_from_raster(self, raster: Raster) -> List[Icon]:
        """Classify the background in place, then resample and encode every size."""
        if self.settings.remove_background:
            cleared = _run_stage("background", remove_background, raster, self.settings.threshold_sq)
            logger.info(
                "Background removed: %d pixels within distance %d of white",
                cleared,
                self.settings.threshold,
            )
        if self.settings.workers > 1 and len(self.settings.sizes) > 1:
            # Resampling is pure Python, so sizes go to separate processes.
            with ProcessPoolExecutor(max_workers=self.settings.workers) as pool:
                return list(pool.map(_build_icon, repeat(raster), self.settings.sizes))
        return [_build_icon(raster, size) for size in self.settings.sizes]

    @staticmethod
    def _validate_input_path(path: str) -> None:
        ext = os.path.splitext(path)[1].lower()
        if ext not in SUPPORTED_EXTENSIONS:
            raise StageError(
                "read", ValueError("Supported formats: " + ", ".join(sorted(SUPPORTED_EXTENSIONS)))
            )
        if not os.path.isfile(path):
            raise StageError("read", FileNotFoundError(f"File not found: {path}"))


def write_icons(
    icons: Iterable[Icon],
    output_dir: Path,
    name_template: str = DEFAULT_NAME_TEMPLATE,
) -> List[Path]:
    """Write each icon to ``output_dir``; files written before a failure are kept."""
    output_dir = Path(output_dir)
    _run_stage("write", output_dir.mkdir, parents=True, exist_ok=True)
    written: List[Path] = []
    for icon in icons:
        name = _run_stage("write", name_template.format, size=icon.size)
        target = output_dir / name
        _run_stage("write", target.write_bytes, icon.data)
        logger.info("  %s  (%d bytes)", target.name, len(icon.data))
        written.append(target)
    return written


def make_icons(source: str, output_dir: Path, settings: Optional[IconSettings] = None) -> List[Path]:
    builder = IconJobBuilder(settings)
    icons = builder.build_from_file(source)
    return write_icons(icons, output_dir, builder.settings.name_template)


def _run_stage(stage: str, func, *args, **kwargs):
    try:
        return func(*args, **kwargs)
    except StageError:
        raise
    except (IconsmithError, LookupError, OSError, ValueError) as exc:
        raise StageError(stage, exc) from exc


def _build_icon(raster: Raster, size: int) -> Icon:
    resized = _run_stage("resize", resize_area_average, raster, size, size)
    data = _run_stage("encode", serialize_png, resized)
    return Icon(size, resized, data)
