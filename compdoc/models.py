"""Core data models shared across compdoc components."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Sequence

CATEGORIES = ("Atoms", "Molecules", "Organisms", "Templates", "Layout", "Components")
DEFAULT_CATEGORY = "Components"


@dataclass(frozen=True)
class PropDescriptor:
    """One property of a component's public interface."""

    name: str
    type: str
    required: bool
    description: Optional[str] = None
    default: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {
            "name": self.name,
            "type": self.type,
            "required": self.required,
        }
        if self.description is not None:
            data["description"] = self.description
        if self.default is not None:
            data["default"] = self.default
        return data


@dataclass(frozen=True)
class PropOverride:
    """Curated prop entry; unset fields keep the extracted value."""

    name: str
    type: Optional[str] = None
    required: Optional[bool] = None
    description: Optional[str] = None
    default: Optional[str] = None


@dataclass(frozen=True)
class Example:
    """Usage example attached to a component."""

    name: str
    code: str
    description: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"name": self.name, "code": self.code}
        if self.description is not None:
            data["description"] = self.description
        return data


@dataclass(frozen=True)
class AccessibilityInfo:
    """Accessibility guidance curated for a component."""

    notes: List[str] = field(default_factory=list)
    keyboard_navigation: Optional[str] = None
    screen_reader: Optional[str] = None
    color_contrast: Optional[str] = None
    focus_management: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        data: Dict[str, Any] = {"notes": list(self.notes)}
        optional = {
            "keyboardNavigation": self.keyboard_navigation,
            "screenReader": self.screen_reader,
            "colorContrast": self.color_contrast,
            "focusManagement": self.focus_management,
        }
        data.update({key: value for key, value in optional.items() if value is not None})
        return data


@dataclass
class ComponentMetadata:
    """Facts derived purely from static analysis of one file."""

    file_path: str
    component_name: str
    props_type_name: str
    has_default_export: bool
    has_named_export: bool
    external_dependencies: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ComponentDocumentation:
    """Canonical documentation record for one component."""

    id: str
    name: str
    description: str
    category: str
    file_path: str
    props: List[PropDescriptor] = field(default_factory=list)
    tokens: List[str] = field(default_factory=list)
    examples: List[Example] = field(default_factory=list)
    accessibility: Optional[AccessibilityInfo] = None
    notes: Optional[List[str]] = None
    deprecated_props: Optional[List[str]] = None
    migration_guide: Optional[str] = None
    version: Optional[str] = None
    last_modified: Optional[datetime] = None

    def to_dict(self) -> Dict[str, Any]:
        """Return JSON-ready data using the camelCase keys of the docs site."""
        data: Dict[str, Any] = {
            "id": self.id,
            "name": self.name,
            "description": self.description,
            "category": self.category,
            "props": [prop.to_dict() for prop in self.props],
            "tokens": list(self.tokens),
            "examples": [example.to_dict() for example in self.examples],
            "filePath": self.file_path,
        }
        if self.accessibility is not None:
            data["accessibility"] = self.accessibility.to_dict()
        if self.notes is not None:
            data["notes"] = list(self.notes)
        if self.deprecated_props is not None:
            data["deprecatedProps"] = list(self.deprecated_props)
        if self.migration_guide is not None:
            data["migrationGuide"] = self.migration_guide
        if self.version is not None:
            data["version"] = self.version
        if self.last_modified is not None:
            data["lastModified"] = self.last_modified.isoformat().replace("+00:00", "Z")
        return data


@dataclass(frozen=True)
class ExtractionOptions:
    """Switches controlling what the prop extractor reports."""

    include_private_props: bool = False
    include_inherited_props: bool = False
    extract_jsdoc: bool = True
    extract_default_values: bool = True


@dataclass(frozen=True)
class Diagnostic:
    """Structured warning or error raised while documenting a file."""

    file: str
    severity: str
    message: str


@dataclass
class ValidationResult:
    """Advisory completeness issues for one component."""

    component: str
    issues: List[str]


@dataclass
class DocumentationResult:
    """Components documented under a directory plus collected diagnostics."""

    components: List[ComponentDocumentation]
    diagnostics: List[Diagnostic]


@dataclass
class ComponentResult:
    """Documentation for a single component plus collected diagnostics."""

    component: Optional[ComponentDocumentation]
    diagnostics: List[Diagnostic]


@dataclass
class ValidationReport:
    """Validation results for a documentation set plus collected diagnostics."""

    results: List[ValidationResult]
    diagnostics: List[Diagnostic]


def sort_props(props: Sequence[PropDescriptor]) -> List[PropDescriptor]:
    """Order props with required entries first, then by name."""
    return sorted(props, key=lambda prop: (not prop.required, prop.name))


__all__ = [
    "AccessibilityInfo",
    "CATEGORIES",
    "ComponentDocumentation",
    "ComponentMetadata",
    "ComponentResult",
    "DEFAULT_CATEGORY",
    "Diagnostic",
    "DocumentationResult",
    "Example",
    "ExtractionOptions",
    "PropDescriptor",
    "PropOverride",
    "ValidationReport",
    "ValidationResult",
    "sort_props",
]
