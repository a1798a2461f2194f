"""Pipeline orchestration for documenting component trees."""

from __future__ import annotations

import hashlib
from pathlib import Path
from types import TracebackType
from typing import Iterable, List, Optional, Sequence, Type

from .analyzers import PropExtractor, SourceProject
from .config import CompDocConfig
from .locator import ComponentLocator, is_component_file
from .logging import DiagnosticCollector, get_logger
from .merge import build_base_documentation, merge_documentation
from .models import ComponentDocumentation, Diagnostic, ExtractionOptions, ValidationResult
from .overrides import OverrideProvider, discover_providers, load_overrides
from .stores import DocumentationCache
from .validators import validate_documentation


class DocumentationOrchestrator:
    """Coordinates extraction, override loading, merging and caching."""

    def __init__(
        self,
        components_dir: Path | str | None = None,
        *,
        config: CompDocConfig | None = None,
        tsconfig_path: Path | str | None = None,
        extractor: PropExtractor | None = None,
        providers: Optional[Iterable[OverrideProvider]] = None,
        locator: ComponentLocator | None = None,
        cache: DocumentationCache | None = None,
        options: ExtractionOptions | None = None,
        diagnostics: DiagnosticCollector | None = None,
    ) -> None:
        self.config = config or CompDocConfig(root=Path.cwd())
        self.logger = get_logger("orchestrator")
        self._diagnostics = diagnostics if diagnostics is not None else DiagnosticCollector(self.logger)

        if components_dir is not None:
            self.components_dir = Path(components_dir)
        elif self.config.components_dir is not None:
            self.components_dir = self.config.components_dir
        else:
            self.components_dir = Path.cwd() / "components"

        if extractor is None:
            project = SourceProject(tsconfig_path or self.config.tsconfig)
            extractor = PropExtractor(
                project,
                type_namespaces=self.config.type_namespaces,
                diagnostics=self._diagnostics,
            )
        self.extractor = extractor
        self.providers: List[OverrideProvider] = (
            list(providers) if providers is not None else discover_providers(self.config.override_providers)
        )
        self.locator = locator if locator is not None else ComponentLocator(self.config.compiled_pattern())
        self.options = options or self.config.extraction
        self._cache = cache if cache is not None else DocumentationCache()

    @property
    def diagnostics(self) -> List[Diagnostic]:
        return self._diagnostics.records

    def document_component(self, file_path: Path | str) -> Optional[ComponentDocumentation]:
        """Return documentation for one component, or None if it could not be built."""
        path = Path(file_path).expanduser().resolve()
        key = str(path)
        try:
            cached = self._cache.get(key)
            if cached is not None:
                return cached

            extracted = self.extractor.extract_props(path, self.options)
            curated = load_overrides(path, self.providers, self._diagnostics)
            base = build_base_documentation(path, extracted)
            documentation = merge_documentation(base, curated)

            self._cache.store(key, documentation, fingerprint=self._fingerprint(path))
            return documentation
        except Exception as exc:  # one component must not abort a batch
            self._diagnostics.warning(path, "Error generating documentation: %s", exc)
            self.logger.debug("Traceback for %s", path, exc_info=exc)
            return None

    def document_all(self, root_dir: Path | str | None = None) -> List[ComponentDocumentation]:
        """Document every component under ``root_dir``, sorted by name."""
        root = Path(root_dir) if root_dir is not None else self.components_dir
        files = [
            path
            for path in self.locator.locate(root)
            if is_component_file(path, self.config.exclude_markers)
        ]
        self.logger.debug("Located %d component files under %s", len(files), root)

        docs: List[ComponentDocumentation] = []
        for path in files:
            doc = self.document_component(path)
            if doc is not None:
                docs.append(doc)
        return sorted(docs, key=lambda doc: doc.name)

    def validate(self, docs: Sequence[ComponentDocumentation]) -> List[ValidationResult]:
        return validate_documentation(docs)

    def cached_docs(self) -> List[ComponentDocumentation]:
        return self._cache.values()

    def clear_cache(self) -> None:
        """Drop every cached record; the next request re-reads changed sources."""
        self._cache.clear()
        self.extractor.refresh()

    def is_stale(self, file_path: Path | str) -> bool:
        """Return True if a cached record no longer matches the files it came from."""
        path = Path(file_path).expanduser().resolve()
        return self._cache.is_stale(str(path), self._fingerprint(path))

    def invalidate_stale(self) -> List[Path]:
        """Drop cached records whose source or override changed; return their paths."""
        dropped: List[Path] = []
        for key in self._cache.keys():
            path = Path(key)
            if not path.exists() or self._cache.is_stale(key, self._fingerprint(path)):
                self._cache.discard(key)
                dropped.append(path)
        self.extractor.refresh(dropped)
        return dropped

    def dispose(self) -> None:
        """Release parsed sources, cached documentation and collected diagnostics."""
        self.extractor.dispose()
        self._cache.clear()
        self._diagnostics.clear()

    def __enter__(self) -> "DocumentationOrchestrator":
        return self

    def __exit__(
        self,
        exc_type: Type[BaseException] | None,
        exc: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.dispose()

    def _fingerprint(self, path: Path) -> str:
        digest = hashlib.sha256()
        for candidate in [path, *self._override_paths(path)]:
            digest.update(str(candidate).encode("utf-8"))
            try:
                digest.update(candidate.read_bytes())
            except OSError:
                digest.update(b"\0missing")
        return digest.hexdigest()

    def _override_paths(self, path: Path) -> List[Path]:
        found: List[Path] = []
        for provider in self.providers:
            override_path = provider.override_path(path)
            if override_path is not None:
                found.append(override_path)
        return found


__all__ = ["DocumentationOrchestrator"]
