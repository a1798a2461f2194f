"""Component source file discovery."""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Iterator, List, Pattern, Sequence

from .config import DEFAULT_EXCLUDE_MARKERS, DEFAULT_FILE_PATTERN

_DEPENDENCY_DIR = "node_modules"
_INDEX_PREFIX = "index."

DEFAULT_PATTERN = re.compile(DEFAULT_FILE_PATTERN)


def _iter_files(root: Path, pattern: Pattern[str]) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        current_dir = Path(dirpath)
        dirnames[:] = [
            name for name in dirnames if not name.startswith(".") and name != _DEPENDENCY_DIR
        ]
        for filename in filenames:
            if pattern.search(filename):
                yield current_dir / filename


def is_component_file(path: Path | str, markers: Sequence[str] = DEFAULT_EXCLUDE_MARKERS) -> bool:
    """Return False for tests, stories, overrides and index modules."""
    name = Path(path).name
    if name.startswith(_INDEX_PREFIX):
        return False
    return not any(marker in name for marker in markers)


class ComponentLocator:
    """Walks a component tree and returns candidate source files."""

    def __init__(self, pattern: Pattern[str] | str | None = None) -> None:
        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        self.pattern = pattern or DEFAULT_PATTERN

    def locate(self, root: Path | str, pattern: Pattern[str] | str | None = None) -> List[Path]:
        """Return absolute paths of files under ``root`` whose names match ``pattern``."""
        root_path = Path(root).expanduser().resolve()
        if not root_path.exists():
            raise FileNotFoundError(f"Components directory not found: {root}")
        if not root_path.is_dir():
            raise NotADirectoryError(f"Components path is not a directory: {root}")

        if isinstance(pattern, str):
            pattern = re.compile(pattern)
        return list(_iter_files(root_path, pattern or self.pattern))


__all__ = ["ComponentLocator", "DEFAULT_PATTERN", "is_component_file"]
