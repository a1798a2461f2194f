"""Curated override providers and discovery utilities."""

from __future__ import annotations

from importlib import metadata
from pathlib import Path
from typing import Any, Callable, Dict, Iterable, List, Sequence, Set

from ..logging import DiagnosticCollector
from .base import OverrideError, OverrideProvider, override_base, parse_curated
from .data_file import DataFileOverrideProvider
from .python_module import PythonModuleOverrideProvider

_ENTRY_POINT_GROUP = "compdoc.override_providers"

_BUILTIN_FACTORIES: dict[str, Callable[[], OverrideProvider]] = {
    "python": PythonModuleOverrideProvider,
    "data": DataFileOverrideProvider,
}


def discover_providers(enabled: Sequence[str] | None = None) -> List[OverrideProvider]:
    """Return instantiated providers in the order requested by ``enabled``."""
    factories: Dict[str, Callable[[], OverrideProvider]] = dict(_BUILTIN_FACTORIES)
    for entry in _iter_entry_points():
        name = entry.name.lower()
        if name in factories:
            continue
        try:
            loaded = entry.load()
        except Exception as exc:  # pragma: no cover - defensive guard
            raise RuntimeError(f"Failed to load override provider '{entry.name}': {exc}") from exc

        def _factory(obj: object = loaded) -> OverrideProvider:
            return _coerce_provider(obj)

        factories[name] = _factory

    names = [name.lower() for name in enabled] if enabled is not None else list(_BUILTIN_FACTORIES)
    missing = [name for name in names if name not in factories]
    if missing:
        raise ValueError(f"Unknown override providers requested: {', '.join(sorted(missing))}")

    providers: List[OverrideProvider] = []
    seen: Set[str] = set()
    for name in names:
        if name in seen:
            continue
        providers.append(_coerce_provider(factories[name]()))
        seen.add(name)
    return providers


def load_overrides(
    component_path: Path | str,
    providers: Iterable[OverrideProvider],
    diagnostics: DiagnosticCollector,
) -> Dict[str, Any]:
    """Return the curated partial record for a component, or ``{}``.

    The first provider with an existing override file wins. Failures while
    loading are reported as warnings and treated as an empty override.
    """
    path = Path(component_path)
    for provider in providers:
        override_path = provider.override_path(path)
        if override_path is None:
            continue
        try:
            return provider.load(path, diagnostics)
        except Exception as exc:  # override modules are arbitrary code
            diagnostics.warning(path, "Could not load curated docs from %s: %s", override_path, exc)
        return {}
    return {}


def _coerce_provider(obj: object) -> OverrideProvider:
    if isinstance(obj, OverrideProvider):
        return obj
    if isinstance(obj, type) and issubclass(obj, OverrideProvider):
        return obj()
    if callable(obj):
        instance = obj()
        if isinstance(instance, OverrideProvider):
            return instance
    raise TypeError("Override provider entry point must be an OverrideProvider subclass or factory")


def _iter_entry_points() -> Iterable[metadata.EntryPoint]:
    return metadata.entry_points().select(group=_ENTRY_POINT_GROUP)


__all__ = [
    "DataFileOverrideProvider",
    "OverrideError",
    "OverrideProvider",
    "PythonModuleOverrideProvider",
    "discover_providers",
    "load_overrides",
    "override_base",
    "parse_curated",
]
