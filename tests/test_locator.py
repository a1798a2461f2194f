"""Tests for compdoc.locator."""

from __future__ import annotations

from pathlib import Path

import pytest

from compdoc.locator import ComponentLocator, is_component_file
from tests._fixtures.component_builder import ComponentTreeBuilder


def test_locate_walks_tree_and_skips_hidden_and_dependency_dirs(
    component_tree: ComponentTreeBuilder,
) -> None:
    component_tree.write(
        {
            "atoms/Tag/Tag.tsx": "",
            "atoms/Tag/Tag.test.tsx": "",
            "shared/types.ts": "",
            "styles.css": "",
            ".cache/Hidden.tsx": "",
            "node_modules/lib/Dep.tsx": "",
        }
    )

    found = ComponentLocator().locate(component_tree.path())
    relative = sorted(path.relative_to(component_tree.path().resolve()).as_posix() for path in found)

    assert relative == ["atoms/Tag/Tag.test.tsx", "atoms/Tag/Tag.tsx", "shared/types.ts"]
    assert all(path.is_absolute() for path in found)


def test_locate_accepts_custom_pattern(component_tree: ComponentTreeBuilder) -> None:
    component_tree.write({"Button.tsx": "", "button.vue": ""})

    found = ComponentLocator().locate(component_tree.path(), r"\.vue$")

    assert [path.name for path in found] == ["button.vue"]


def test_locate_empty_directory(component_tree: ComponentTreeBuilder) -> None:
    assert ComponentLocator().locate(component_tree.path()) == []


def test_locate_missing_root_raises(tmp_path: Path) -> None:
    with pytest.raises(FileNotFoundError):
        ComponentLocator().locate(tmp_path / "missing")


def test_locate_file_root_raises(tmp_path: Path) -> None:
    target = tmp_path / "Tag.tsx"
    target.write_text("", encoding="utf-8")

    with pytest.raises(NotADirectoryError):
        ComponentLocator().locate(target)


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("Tag.tsx", True),
        ("Tag.test.tsx", False),
        ("Tag.spec.ts", False),
        ("Tag.stories.tsx", False),
        ("Tag.docs.tsx", False),
        ("index.ts", False),
        ("reindex.ts", True),
    ],
)
def test_is_component_file(name: str, expected: bool) -> None:
    assert is_component_file(Path("/src") / name) is expected
