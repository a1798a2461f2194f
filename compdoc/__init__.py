"""Static documentation extraction for UI component libraries."""

from __future__ import annotations

from pathlib import Path

from .config import CompDocConfig, ConfigError, load_config
from .models import (
    ComponentDocumentation,
    ComponentResult,
    DocumentationResult,
    ExtractionOptions,
    PropDescriptor,
    ValidationReport,
    ValidationResult,
)
from .orchestrator import DocumentationOrchestrator
from .validators import validate_documentation

__version__ = "0.1.0"


def get_component_documentation(
    components_dir: Path | str | None = None,
    tsconfig_path: Path | str | None = None,
    *,
    config_path: Path | str | None = None,
) -> DocumentationResult:
    """Document every component under ``components_dir``."""
    config = load_config(Path(config_path) if config_path else Path.cwd())
    with DocumentationOrchestrator(
        components_dir, config=config, tsconfig_path=tsconfig_path
    ) as orchestrator:
        components = orchestrator.document_all()
        return DocumentationResult(components=components, diagnostics=orchestrator.diagnostics)


def get_component_doc(
    component_path: Path | str,
    tsconfig_path: Path | str | None = None,
    *,
    config_path: Path | str | None = None,
) -> ComponentResult:
    """Document a single component file."""
    config = load_config(Path(config_path) if config_path else Path.cwd())
    component_path = Path(component_path)
    with DocumentationOrchestrator(
        component_path.parent, config=config, tsconfig_path=tsconfig_path
    ) as orchestrator:
        component = orchestrator.document_component(component_path)
        return ComponentResult(component=component, diagnostics=orchestrator.diagnostics)


def validate_components(
    components_dir: Path | str | None = None,
    tsconfig_path: Path | str | None = None,
    *,
    config_path: Path | str | None = None,
) -> ValidationReport:
    """Document ``components_dir`` and report completeness issues."""
    result = get_component_documentation(components_dir, tsconfig_path, config_path=config_path)
    return ValidationReport(
        results=validate_documentation(result.components), diagnostics=result.diagnostics
    )


__all__ = [
    "CompDocConfig",
    "ComponentDocumentation",
    "ComponentResult",
    "ConfigError",
    "DocumentationOrchestrator",
    "DocumentationResult",
    "ExtractionOptions",
    "PropDescriptor",
    "ValidationReport",
    "ValidationResult",
    "get_component_doc",
    "get_component_documentation",
    "load_config",
    "validate_components",
    "validate_documentation",
]
