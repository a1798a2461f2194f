"""Override provider contract and curated record parsing."""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, List, Mapping, Optional

from ..logging import DiagnosticCollector
from ..models import CATEGORIES, AccessibilityInfo, Example, PropDescriptor, PropOverride

_CAMEL_PATTERN = re.compile(r"(?<!^)(?=[A-Z])")

_KEY_ALIASES = {
    "accessibility_notes": "accessibility",
    "default_value": "default",
}


class OverrideError(RuntimeError):
    """Raised when a curated override file cannot be loaded or understood."""


class OverrideProvider(ABC):
    """Locates and loads the curated override companion of a component file."""

    name: str = "override"

    @abstractmethod
    def candidate_paths(self, component_path: Path) -> List[Path]:
        """Return override paths this provider understands, in lookup order."""

    @abstractmethod
    def read(self, override_path: Path) -> Mapping[str, Any]:
        """Return the raw partial record stored at ``override_path``."""

    def override_path(self, component_path: Path) -> Optional[Path]:
        """Return the first existing override path, if any."""
        for candidate in self.candidate_paths(component_path):
            if candidate.is_file():
                return candidate
        return None

    def load(self, component_path: Path, diagnostics: DiagnosticCollector) -> Dict[str, Any]:
        """Load and normalise the override; raises ``OverrideError`` on failure."""
        override_path = self.override_path(component_path)
        if override_path is None:
            return {}
        raw = self.read(override_path)
        if not isinstance(raw, Mapping):
            raise OverrideError(f"{override_path.name} does not define a mapping")
        return parse_curated(raw, diagnostics=diagnostics, source=override_path)


def override_base(component_path: Path) -> Path:
    """Return ``Dir/Name.docs`` for ``Dir/Name.tsx``."""
    return component_path.with_name(f"{component_path.stem}.docs")


def parse_curated(
    raw: Mapping[str, Any],
    *,
    diagnostics: DiagnosticCollector | None = None,
    source: Path | str = "<override>",
) -> Dict[str, Any]:
    """Normalise a curated partial record into ComponentDocumentation field values."""
    curated: Dict[str, Any] = {}
    for raw_key, value in raw.items():
        key = _normalise_key(str(raw_key))
        if key == "file_path":
            if diagnostics is not None:
                diagnostics.info(source, "Ignoring curated filePath; the analyzed path is kept")
            continue
        parser = _FIELD_PARSERS.get(key)
        if parser is None:
            if diagnostics is not None:
                diagnostics.warning(source, "Ignoring unknown curated field %r", raw_key)
            continue
        if value is None:
            continue
        curated[key] = parser(value)

    category = curated.get("category")
    if category is not None and category not in CATEGORIES:
        if diagnostics is not None:
            diagnostics.warning(source, "Unknown category %r; inferring from path", category)
        curated.pop("category")
    return curated


def _normalise_key(key: str) -> str:
    snake = _CAMEL_PATTERN.sub("_", key).lower()
    return _KEY_ALIASES.get(snake, snake)


def _parse_str(value: Any) -> str:
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        raise OverrideError(f"Expected text, got {type(value).__name__}")
    return str(value)


def _parse_str_list(value: Any) -> List[str]:
    if isinstance(value, str) or not isinstance(value, (list, tuple)):
        raise OverrideError(f"Expected a list of strings, got {type(value).__name__}")
    return [_parse_str(item) for item in value]


def _parse_optional_bool(value: Any) -> Optional[bool]:
    if value is None or isinstance(value, bool):
        return value
    raise OverrideError(f"Expected a boolean, got {type(value).__name__}")


def _parse_optional_str(value: Any) -> Optional[str]:
    return None if value is None else _parse_str(value)


def _parse_default(value: Any) -> Optional[str]:
    if isinstance(value, bool):
        return "true" if value else "false"
    return _parse_optional_str(value)


def _parse_props(value: Any) -> List[PropOverride]:
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise OverrideError("Curated props must be a list")
    return [_parse_prop(item) for item in value]


def _parse_prop(item: Any) -> PropOverride:
    if isinstance(item, PropOverride):
        return item
    if isinstance(item, PropDescriptor):
        return PropOverride(
            name=item.name,
            type=item.type,
            required=item.required,
            description=item.description,
            default=item.default,
        )
    if not isinstance(item, Mapping) or "name" not in item:
        raise OverrideError("Each curated prop must be a mapping with a name")
    data = {_normalise_key(str(key)): value for key, value in item.items()}
    return PropOverride(
        name=_parse_str(data["name"]),
        type=_parse_optional_str(data.get("type")),
        required=_parse_optional_bool(data.get("required")),
        description=_parse_optional_str(data.get("description")),
        default=_parse_default(data.get("default")),
    )


def _parse_examples(value: Any) -> List[Example]:
    if isinstance(value, (str, bytes)) or not isinstance(value, (list, tuple)):
        raise OverrideError("Curated examples must be a list")
    examples: List[Example] = []
    for item in value:
        if isinstance(item, Example):
            examples.append(item)
            continue
        if not isinstance(item, Mapping) or "name" not in item or "code" not in item:
            raise OverrideError("Each example must be a mapping with name and code")
        examples.append(
            Example(
                name=_parse_str(item["name"]),
                code=_parse_str(item["code"]),
                description=_parse_optional_str(item.get("description")),
            )
        )
    return examples


def _parse_accessibility(value: Any) -> AccessibilityInfo:
    if isinstance(value, AccessibilityInfo):
        return value
    if isinstance(value, (list, tuple)):
        return AccessibilityInfo(notes=_parse_str_list(value))
    if not isinstance(value, Mapping):
        raise OverrideError("Accessibility notes must be a mapping or a list")
    data = {_normalise_key(str(key)): item for key, item in value.items()}
    return AccessibilityInfo(
        notes=_parse_str_list(data.get("notes") or []),
        keyboard_navigation=_parse_optional_str(data.get("keyboard_navigation")),
        screen_reader=_parse_optional_str(data.get("screen_reader")),
        color_contrast=_parse_optional_str(data.get("color_contrast")),
        focus_management=_parse_optional_str(data.get("focus_management")),
    )


def _parse_datetime(value: Any) -> datetime:
    if isinstance(value, datetime):
        return value
    if isinstance(value, str):
        try:
            return datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError as exc:
            raise OverrideError(f"Invalid lastModified value {value!r}") from exc
    raise OverrideError(f"Expected a datetime, got {type(value).__name__}")


_FIELD_PARSERS: Dict[str, Callable[[Any], Any]] = {
    "id": _parse_str,
    "name": _parse_str,
    "description": _parse_str,
    "category": _parse_str,
    "props": _parse_props,
    "tokens": _parse_str_list,
    "examples": _parse_examples,
    "accessibility": _parse_accessibility,
    "notes": _parse_str_list,
    "deprecated_props": _parse_str_list,
    "migration_guide": _parse_str,
    "version": _parse_str,
    "last_modified": _parse_datetime,
}


__all__ = ["OverrideError", "OverrideProvider", "override_base", "parse_curated"]
