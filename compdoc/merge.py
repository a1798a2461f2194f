"""Reconciliation of extracted and curated documentation."""

from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Mapping, Sequence

from .analyzers.utils import component_base_name, pascal_case
from .models import DEFAULT_CATEGORY, ComponentDocumentation, PropDescriptor, PropOverride, sort_props

# Checked in order; the first segment present in the path wins.
_CATEGORY_RULES: tuple[tuple[str, str], ...] = (
    ("atoms", "Atoms"),
    ("molecules", "Molecules"),
    ("organisms", "Organisms"),
    ("templates", "Templates"),
    ("layout", "Layout"),
)


def merge_props(
    extracted: Sequence[PropDescriptor], curated: Sequence[PropOverride]
) -> List[PropDescriptor]:
    """Combine extracted and curated props; curated fields take precedence."""
    curated_by_name: Dict[str, PropOverride] = {prop.name: prop for prop in curated}
    merged: List[PropDescriptor] = []

    for prop in extracted:
        override = curated_by_name.pop(prop.name, None)
        if override is None:
            merged.append(prop)
            continue
        merged.append(
            PropDescriptor(
                name=prop.name,
                type=override.type or prop.type,
                required=prop.required if override.required is None else override.required,
                description=prop.description if override.description is None else override.description,
                default=prop.default if override.default is None else override.default,
            )
        )

    for override in curated_by_name.values():
        merged.append(
            PropDescriptor(
                name=override.name,
                type=override.type or "",
                required=bool(override.required),
                description=override.description,
                default=override.default,
            )
        )

    return sort_props(merged)


def merge_documentation(
    base: ComponentDocumentation, curated: Mapping[str, Any]
) -> ComponentDocumentation:
    """Shallow-override ``base`` with curated fields and merge the prop lists."""
    fields = {key: value for key, value in curated.items() if key not in {"props", "file_path"}}
    return replace(
        base,
        **fields,
        props=merge_props(base.props, curated.get("props") or []),
        file_path=base.file_path,
    )


def infer_category(file_path: Path | str) -> str:
    parts = Path(file_path).parts
    for segment, category in _CATEGORY_RULES:
        if segment in parts:
            return category
    return DEFAULT_CATEGORY


def placeholder_description(name: str) -> str:
    return f"{name} component"


def build_base_documentation(
    file_path: Path | str, props: Sequence[PropDescriptor]
) -> ComponentDocumentation:
    """Return the record derivable from the file path and extracted props alone."""
    path = Path(file_path)
    base_name = component_base_name(path)
    name = pascal_case(base_name)
    return ComponentDocumentation(
        id=base_name.lower(),
        name=name,
        description=placeholder_description(name),
        category=infer_category(path),
        file_path=str(path),
        props=sort_props(props),
        tokens=[],
        examples=[],
        last_modified=_modified_at(path),
    )


def _modified_at(path: Path) -> datetime | None:
    try:
        return datetime.fromtimestamp(path.stat().st_mtime, tz=timezone.utc)
    except OSError:
        return None


__all__ = [
    "build_base_documentation",
    "infer_category",
    "merge_documentation",
    "merge_props",
    "placeholder_description",
]
