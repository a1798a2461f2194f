"""Tests for the package-level entry points."""

from __future__ import annotations

from pathlib import Path

import pytest

import compdoc
from compdoc.validators import MISSING_DESCRIPTION, NO_EXAMPLES, NO_TOKENS
from tests._fixtures.component_builder import TAG_SOURCE, ComponentTreeBuilder


def _write_library(component_tree: ComponentTreeBuilder) -> None:
    component_tree.write(
        {
            "atoms/Tag/Tag.tsx": TAG_SOURCE,
            "atoms/Tag/Tag.docs.yml": """
            description: A static label used to categorize content.
            tokens: [semantic.color.background.surface]
            examples:
              - name: Basic
                code: <Tag>Hi</Tag>
            """,
            "molecules/Card/Card.tsx": """
            export interface CardProps {
              /** Card heading */
              title: string
            }

            export const Card = ({ title }: CardProps) => null
            """,
            "molecules/Card/Card.test.tsx": "",
        }
    )


def test_get_component_documentation(tmp_path: Path, component_tree: ComponentTreeBuilder) -> None:
    _write_library(component_tree)

    result = compdoc.get_component_documentation(component_tree.path(), config_path=tmp_path)

    assert [doc.name for doc in result.components] == ["Card", "Tag"]
    card = result.components[0]
    assert card.category == "Molecules"
    assert [prop.to_dict() for prop in card.props] == [
        {"name": "title", "type": "string", "required": True, "description": "Card heading"}
    ]


def test_components_dir_comes_from_config(tmp_path: Path, component_tree: ComponentTreeBuilder) -> None:
    _write_library(component_tree)
    (tmp_path / ".compdoc.yml").write_text("components_dir: components\n", encoding="utf-8")

    result = compdoc.get_component_documentation(config_path=tmp_path)

    assert [doc.name for doc in result.components] == ["Card", "Tag"]


def test_get_component_doc(tmp_path: Path, component_tree: ComponentTreeBuilder) -> None:
    _write_library(component_tree)

    result = compdoc.get_component_doc(component_tree.path("atoms/Tag/Tag.tsx"), config_path=tmp_path)

    assert result.component is not None
    assert result.component.description == "A static label used to categorize content."
    assert result.component.to_dict()["filePath"].endswith("Tag.tsx")


def test_get_component_doc_for_missing_file(tmp_path: Path) -> None:
    result = compdoc.get_component_doc(tmp_path / "Ghost.tsx", config_path=tmp_path)

    assert result.component is not None
    assert result.component.props == []
    assert result.component.last_modified is None
    assert [d.severity for d in result.diagnostics] == ["error"]


def test_validate_components(tmp_path: Path, component_tree: ComponentTreeBuilder) -> None:
    _write_library(component_tree)

    report = compdoc.validate_components(component_tree.path(), config_path=tmp_path)

    assert [(r.component, r.issues) for r in report.results] == [
        ("Card", [MISSING_DESCRIPTION, NO_EXAMPLES, NO_TOKENS])
    ]


def test_missing_components_dir_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        compdoc.get_component_documentation(tmp_path / "nowhere", config_path=tmp_path)
