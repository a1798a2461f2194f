"""Curated overrides stored as declarative YAML or JSON data files."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, List, Mapping

import yaml

from .base import OverrideError, OverrideProvider, override_base

_SUFFIXES = (".yml", ".yaml", ".json")


class DataFileOverrideProvider(OverrideProvider):
    """Reads ``Name.docs.yml`` / ``.yaml`` / ``.json`` without executing code."""

    name = "data"

    def candidate_paths(self, component_path: Path) -> List[Path]:
        base = override_base(component_path)
        return [base.with_name(f"{base.name}{suffix}") for suffix in _SUFFIXES]

    def read(self, override_path: Path) -> Mapping[str, Any]:
        try:
            text = override_path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise OverrideError(f"Cannot read {override_path.name}: {exc}") from exc
        try:
            if override_path.suffix == ".json":
                loaded = json.loads(text)
            else:
                loaded = yaml.safe_load(text)
        except (json.JSONDecodeError, yaml.YAMLError) as exc:
            raise OverrideError(f"Failed to parse {override_path.name}: {exc}") from exc
        return loaded if loaded is not None else {}


__all__ = ["DataFileOverrideProvider"]
