from __future__ import annotations

import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Tuple

from .processing.background import DEFAULT_WHITE_RADIUS

DEFAULT_SIZES: Tuple[int, ...] = (16, 32, 48, 128)
DEFAULT_NAME_TEMPLATE = "icon{size}.png"


@dataclass
class IconSettings:
    sizes: Tuple[int, ...] = DEFAULT_SIZES
    threshold: int = DEFAULT_WHITE_RADIUS
    remove_background: bool = True
    verify_checksums: bool = False
    workers: int = 1
    name_template: str = DEFAULT_NAME_TEMPLATE

    @property
    def threshold_sq(self) -> int:
        return self.threshold * self.threshold

    def validate(self) -> None:
        if not isinstance(self.sizes, tuple) or not self.sizes:
            raise ValueError("At least one output size is required")
        for size in self.sizes:
            if not _is_int(size) or size <= 0:
                raise ValueError(f"Output size must be a positive integer, got {size!r}")
        if not _is_int(self.threshold) or self.threshold < 0:
            raise ValueError(f"Threshold must be a non-negative integer, got {self.threshold!r}")
        if not _is_int(self.workers) or self.workers < 1:
            raise ValueError(f"Workers must be an integer of at least 1, got {self.workers!r}")
        for name in ("remove_background", "verify_checksums"):
            if not isinstance(getattr(self, name), bool):
                raise ValueError(f"{name} must be true or false")
        if not isinstance(self.name_template, str) or "{size}" not in self.name_template:
            raise ValueError("Name template must contain '{size}'")
        try:
            self.name_template.format(size=1)
        except (AttributeError, IndexError, KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Invalid name template {self.name_template!r}: {exc!r}") from exc

    @classmethod
    def from_dict(cls, raw: Dict[str, Any]) -> "IconSettings":
        known = {item.name for item in fields(cls)}
        unknown = sorted(set(raw) - known)
        if unknown:
            raise ValueError("Unknown settings: " + ", ".join(unknown))
        values = dict(raw)
        if "sizes" in values:
            if not isinstance(values["sizes"], list):
                raise ValueError(f"sizes must be a list of integers, got {values['sizes']!r}")
            values["sizes"] = tuple(values["sizes"])
        settings = cls(**values)
        settings.validate()
        return settings

    @classmethod
    def load(cls, path: Path) -> "IconSettings":
        raw = json.loads(Path(path).read_text(encoding="utf-8"))
        if not isinstance(raw, dict):
            raise ValueError(f"Settings file must contain a JSON object: {path}")
        return cls.from_dict(raw)


def parse_sizes(value: str) -> Tuple[int, ...]:
    """Parse a comma separated size list such as ``16,32,48``."""
    try:
        sizes = tuple(int(part) for part in value.split(",") if part.strip())
    except ValueError as exc:
        raise ValueError(f"Invalid size list '{value}'") from exc
    if not sizes:
        raise ValueError("Size list is empty")
    return sizes


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)
