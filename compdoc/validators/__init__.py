"""Documentation validators."""

from .completeness import (
    MISSING_DESCRIPTION,
    NO_EXAMPLES,
    NO_TOKENS,
    PROPS_MISSING_DESCRIPTIONS,
    component_issues,
    validate_documentation,
)

__all__ = [
    "MISSING_DESCRIPTION",
    "NO_EXAMPLES",
    "NO_TOKENS",
    "PROPS_MISSING_DESCRIPTIONS",
    "component_issues",
    "validate_documentation",
]
