from __future__ import annotations

from pathlib import Path
from typing import Iterator

import pytest

from compdoc.analyzers import PropExtractor, SourceProject
from compdoc.logging import DiagnosticCollector
from tests._fixtures.component_builder import ComponentTreeBuilder


@pytest.fixture
def component_tree(tmp_path: Path) -> ComponentTreeBuilder:
    """Provide a reusable component tree rooted at the pytest tmp_path."""
    return ComponentTreeBuilder(tmp_path)


@pytest.fixture
def diagnostics() -> DiagnosticCollector:
    return DiagnosticCollector()


@pytest.fixture
def extractor(tmp_path: Path, diagnostics: DiagnosticCollector) -> Iterator[PropExtractor]:
    """Prop extractor whose project points at a tsconfig inside tmp_path."""
    project = SourceProject(tmp_path / "tsconfig.json")
    yield PropExtractor(project, diagnostics=diagnostics)
    project.dispose()
