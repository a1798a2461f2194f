"""Curated overrides authored as executable Python modules (``Name.docs.py``)."""

from __future__ import annotations

import hashlib
import importlib.util
from pathlib import Path
from typing import Any, List, Mapping

from .base import OverrideError, OverrideProvider, override_base

_EXPORT_NAMES = ("DOCS", "default")


class PythonModuleOverrideProvider(OverrideProvider):
    """Executes a trusted sibling module and reads its ``DOCS`` mapping."""

    name = "python"

    def candidate_paths(self, component_path: Path) -> List[Path]:
        base = override_base(component_path)
        return [base.with_name(f"{base.name}.py")]

    def read(self, override_path: Path) -> Mapping[str, Any]:
        digest = hashlib.sha1(str(override_path).encode("utf-8")).hexdigest()[:12]
        module_name = f"compdoc_overrides_{digest}"
        spec = importlib.util.spec_from_file_location(module_name, override_path)
        if spec is None or spec.loader is None:
            raise OverrideError(f"Cannot import {override_path}")
        module = importlib.util.module_from_spec(spec)
        try:
            spec.loader.exec_module(module)
        except Exception as exc:
            raise OverrideError(f"Executing {override_path.name} failed: {exc}") from exc

        for export in _EXPORT_NAMES:
            if hasattr(module, export):
                return getattr(module, export)
        raise OverrideError(f"{override_path.name} defines neither DOCS nor default")


__all__ = ["PythonModuleOverrideProvider"]
