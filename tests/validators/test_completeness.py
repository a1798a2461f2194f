"""Tests for the documentation completeness validator."""

from __future__ import annotations

from compdoc.models import ComponentDocumentation, Example, PropDescriptor
from compdoc.validators import (
    MISSING_DESCRIPTION,
    NO_EXAMPLES,
    NO_TOKENS,
    PROPS_MISSING_DESCRIPTIONS,
    validate_documentation,
)


def _doc(**overrides: object) -> ComponentDocumentation:
    fields: dict = {
        "id": "tag",
        "name": "Tag",
        "description": "A static label for categorising content.",
        "category": "Atoms",
        "file_path": "/src/atoms/Tag/Tag.tsx",
        "props": [PropDescriptor(name="children", type="ReactNode", required=True, description="Label")],
        "tokens": ["semantic.color.text.default"],
        "examples": [Example(name="Basic", code="<Tag>Hi</Tag>")],
    }
    fields.update(overrides)
    return ComponentDocumentation(**fields)


def test_fully_authored_record_has_no_issues() -> None:
    assert validate_documentation([_doc()]) == []


def test_placeholder_description_and_missing_examples_are_flagged() -> None:
    (result,) = validate_documentation([_doc(description="Tag component", examples=[])])

    assert result.component == "Tag"
    assert result.issues == [MISSING_DESCRIPTION, NO_EXAMPLES]


def test_every_issue_is_reported() -> None:
    doc = _doc(
        description="  ",
        examples=[],
        tokens=[],
        props=[PropDescriptor(name="size", type="string", required=False)],
    )

    (result,) = validate_documentation([doc])

    assert result.issues == [MISSING_DESCRIPTION, NO_EXAMPLES, NO_TOKENS, PROPS_MISSING_DESCRIPTIONS]


def test_only_records_with_issues_are_returned() -> None:
    docs = [_doc(), _doc(id="chip", name="Chip", tokens=[])]

    results = validate_documentation(docs)

    assert [result.component for result in results] == ["Chip"]
    assert results[0].issues == [NO_TOKENS]
