"""Advisory completeness checks for generated documentation."""

from __future__ import annotations

from typing import Iterable, List

from ..merge import placeholder_description
from ..models import ComponentDocumentation, ValidationResult

MISSING_DESCRIPTION = "Missing meaningful description"
NO_EXAMPLES = "No examples provided"
NO_TOKENS = "No design tokens specified"
PROPS_MISSING_DESCRIPTIONS = "Some props missing descriptions"


def component_issues(doc: ComponentDocumentation) -> List[str]:
    issues: List[str] = []
    description = (doc.description or "").strip()
    if not description or description == placeholder_description(doc.name):
        issues.append(MISSING_DESCRIPTION)
    if not doc.examples:
        issues.append(NO_EXAMPLES)
    if not doc.tokens:
        issues.append(NO_TOKENS)
    if any(not prop.description for prop in doc.props):
        issues.append(PROPS_MISSING_DESCRIPTIONS)
    return issues


def validate_documentation(docs: Iterable[ComponentDocumentation]) -> List[ValidationResult]:
    """Flag incomplete records; components without issues are omitted."""
    results: List[ValidationResult] = []
    for doc in docs:
        issues = component_issues(doc)
        if issues:
            results.append(ValidationResult(component=doc.name, issues=issues))
    return results


__all__ = [
    "MISSING_DESCRIPTION",
    "NO_EXAMPLES",
    "NO_TOKENS",
    "PROPS_MISSING_DESCRIPTIONS",
    "component_issues",
    "validate_documentation",
]
