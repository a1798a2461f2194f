"""Configuration loading for compdoc (.compdoc.yml)."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Pattern, Sequence

import yaml

from .models import ExtractionOptions

CONFIG_FILENAME = ".compdoc.yml"

DEFAULT_FILE_PATTERN = r"\.tsx?$"
DEFAULT_EXCLUDE_MARKERS = [".test.", ".spec.", ".stories.", ".docs."]
DEFAULT_TYPE_NAMESPACES = ["React."]
DEFAULT_PROVIDERS = ["python", "data"]


class ConfigError(RuntimeError):
    """Raised when the configuration file cannot be parsed."""


@dataclass
class CompDocConfig:
    """Represents the settings defined in .compdoc.yml."""

    root: Path
    components_dir: Optional[Path] = None
    tsconfig: Optional[Path] = None
    file_pattern: str = DEFAULT_FILE_PATTERN
    exclude_markers: List[str] = field(default_factory=lambda: list(DEFAULT_EXCLUDE_MARKERS))
    type_namespaces: List[str] = field(default_factory=lambda: list(DEFAULT_TYPE_NAMESPACES))
    override_providers: List[str] = field(default_factory=lambda: list(DEFAULT_PROVIDERS))
    extraction: ExtractionOptions = field(default_factory=ExtractionOptions)

    def compiled_pattern(self) -> Pattern[str]:
        try:
            return re.compile(self.file_pattern)
        except re.error as exc:
            raise ConfigError(f"Invalid file_pattern {self.file_pattern!r}: {exc}") from exc


def load_config(config_path: Path) -> CompDocConfig:
    """Load configuration from disk, returning defaults when the file is absent."""
    config_file = _resolve_config_path(config_path)
    root = config_file.parent.resolve()

    if not config_file.exists():
        return CompDocConfig(root=root)

    data = _read_config(config_file)
    if not isinstance(data, dict):
        raise ConfigError(f"{CONFIG_FILENAME} must contain a mapping at the root")

    config = CompDocConfig(root=root)

    components_dir = _as_str(data.get("components_dir"))
    if components_dir:
        config.components_dir = root / components_dir
    tsconfig = _as_str(data.get("tsconfig"))
    if tsconfig:
        config.tsconfig = root / tsconfig

    file_pattern = _as_str(data.get("file_pattern"))
    if file_pattern:
        config.file_pattern = file_pattern
        config.compiled_pattern()

    if "exclude_markers" in data:
        config.exclude_markers = _as_str_list(data.get("exclude_markers"))
    if "type_namespaces" in data:
        config.type_namespaces = _as_str_list(data.get("type_namespaces"))

    overrides_data = _as_dict(data.get("overrides"))
    if overrides_data and "providers" in overrides_data:
        config.override_providers = _as_str_list(overrides_data.get("providers"))

    extraction_data = _as_dict(data.get("extraction"))
    if extraction_data:
        defaults = ExtractionOptions()
        config.extraction = ExtractionOptions(
            include_private_props=_bool_or(
                extraction_data.get("include_private_props"), defaults.include_private_props
            ),
            include_inherited_props=_bool_or(
                extraction_data.get("include_inherited_props"), defaults.include_inherited_props
            ),
            extract_jsdoc=_bool_or(extraction_data.get("extract_jsdoc"), defaults.extract_jsdoc),
            extract_default_values=_bool_or(
                extraction_data.get("extract_default_values"), defaults.extract_default_values
            ),
        )

    return config


def _resolve_config_path(config_path: Path) -> Path:
    config_path = config_path.expanduser()
    if config_path.is_dir():
        return (config_path / CONFIG_FILENAME).resolve()
    if config_path.name != CONFIG_FILENAME:
        return (config_path.parent / CONFIG_FILENAME).resolve()
    return config_path.resolve()


def _read_config(path: Path) -> Dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    if not text.strip():
        return {}
    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse {path.name}: {exc}") from exc
    return loaded or {}


def _as_dict(value: Any) -> Dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_str(value: Any) -> Optional[str]:
    return str(value) if isinstance(value, (str, int, float, bool)) else None


def _as_bool(value: Any) -> Optional[bool]:
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in {"true", "yes", "1"}:
            return True
        if lowered in {"false", "no", "0"}:
            return False
    return None


def _bool_or(value: Any, default: bool) -> bool:
    parsed = _as_bool(value)
    return default if parsed is None else parsed


def _as_str_list(value: Any) -> List[str]:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if isinstance(value, Sequence):
        return [str(item) for item in value if isinstance(item, (str, int, float, bool))]
    return []


__all__ = ["CONFIG_FILENAME", "CompDocConfig", "ConfigError", "load_config"]
