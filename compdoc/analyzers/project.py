"""Tree-sitter backed project holding parsed TypeScript sources."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Tuple

import tree_sitter_typescript as tstypescript
from tree_sitter import Language, Node, Parser, Tree

from ..logging import get_logger
from .utils import strip_quotes

_LANGUAGE_FACTORIES = {
    "typescript": tstypescript.language_typescript,
    "tsx": tstypescript.language_tsx,
}

_RESOLVE_SUFFIXES = (".ts", ".tsx", ".d.ts")
_INDEX_FILES = ("index.ts", "index.tsx")

logger = get_logger("analyzers.project")


@dataclass
class SourceFile:
    """A parsed source file and lazily computed lookups over its tree."""

    path: Path
    source: bytes
    tree: Tree
    _declarations: Optional[Dict[str, Node]] = field(default=None, repr=False)
    _imports: Optional[Dict[str, Tuple[str, str]]] = field(default=None, repr=False)

    @property
    def root(self) -> Node:
        return self.tree.root_node

    def text(self, node: Node) -> str:
        return self.source[node.start_byte : node.end_byte].decode("utf-8", errors="ignore")

    def top_level_statements(self) -> Iterable[Node]:
        """Yield top-level statements, unwrapping ``export`` wrappers."""
        for child in self.root.named_children:
            if child.type == "export_statement":
                declaration = child.child_by_field_name("declaration")
                if declaration is None:
                    declaration = child.child_by_field_name("value")
                if declaration is not None:
                    yield declaration
                continue
            yield child

    def type_declarations(self) -> Dict[str, Node]:
        """Map interface and type alias names to their nodes in source order."""
        if self._declarations is None:
            declarations: Dict[str, Node] = {}
            for statement in self.top_level_statements():
                if statement.type not in {"interface_declaration", "type_alias_declaration"}:
                    continue
                name_node = statement.child_by_field_name("name")
                if name_node is None:
                    continue
                declarations.setdefault(self.text(name_node), statement)
            self._declarations = declarations
        return self._declarations

    def imports(self) -> Dict[str, Tuple[str, str]]:
        """Map local import names to ``(module specifier, exported name)``."""
        if self._imports is None:
            imports: Dict[str, Tuple[str, str]] = {}
            for statement in self.import_statements():
                source_node = statement.child_by_field_name("source")
                if source_node is None:
                    continue
                specifier = strip_quotes(self.text(source_node))
                for spec in _descendants(statement, "import_specifier"):
                    name_node = spec.child_by_field_name("name")
                    alias_node = spec.child_by_field_name("alias")
                    if name_node is None:
                        continue
                    exported = self.text(name_node)
                    local = self.text(alias_node) if alias_node is not None else exported
                    imports[local] = (specifier, exported)
            self._imports = imports
        return self._imports

    def import_statements(self) -> List[Node]:
        return [child for child in self.root.named_children if child.type == "import_statement"]

    def import_sources(self) -> List[str]:
        sources: List[str] = []
        for statement in self.import_statements():
            source_node = statement.child_by_field_name("source")
            if source_node is not None:
                sources.append(strip_quotes(self.text(source_node)))
        return sources


class SourceProject:
    """Parses and retains source files, resolving imports between them."""

    def __init__(self, tsconfig_path: Path | str | None = None) -> None:
        self._parsers: Dict[str, Parser] = {}
        self._files: Dict[Path, SourceFile] = {}
        config_path = Path(tsconfig_path) if tsconfig_path else Path.cwd() / "tsconfig.json"
        self.tsconfig_path = config_path.expanduser().resolve()
        self._base_url, self._path_aliases = _load_path_aliases(self.tsconfig_path)

    def add_source_file(self, path: Path | str) -> SourceFile:
        """Parse ``path`` into the project, reusing an earlier parse if present."""
        resolved = Path(path).expanduser().resolve()
        existing = self._files.get(resolved)
        if existing is not None:
            return existing
        source = resolved.read_bytes()
        tree = self._get_parser(_language_for_file(resolved)).parse(source)
        parsed = SourceFile(path=resolved, source=source, tree=tree)
        self._files[resolved] = parsed
        return parsed

    def get_source_file(self, path: Path | str) -> Optional[SourceFile]:
        return self._files.get(Path(path).expanduser().resolve())

    def source_files(self) -> List[SourceFile]:
        return list(self._files.values())

    def remove_source_file(self, path: Path | str) -> None:
        self._files.pop(Path(path).expanduser().resolve(), None)

    def discard_changed(self) -> List[Path]:
        """Forget parsed files whose contents on disk differ from what was parsed."""
        changed: List[Path] = []
        for path, parsed in list(self._files.items()):
            try:
                current = path.read_bytes()
            except OSError:
                current = None
            if current != parsed.source:
                self.remove_source_file(path)
                changed.append(path)
        return changed

    def resolve_module(self, importer: SourceFile, specifier: str) -> Optional[Path]:
        """Return the file a module specifier refers to, or None for packages."""
        for base in self._module_bases(importer, specifier):
            candidate = _first_existing(base)
            if candidate is not None:
                return candidate
        return None

    def dispose(self) -> None:
        """Release every parsed file held by the project."""
        self._files.clear()

    def _module_bases(self, importer: SourceFile, specifier: str) -> List[Path]:
        if specifier.startswith("."):
            return [importer.path.parent / specifier]
        bases: List[Path] = []
        for alias, targets in self._path_aliases:
            if alias.endswith("*"):
                prefix = alias[:-1]
                if not specifier.startswith(prefix):
                    continue
                remainder = specifier[len(prefix) :]
                bases.extend(self._base_url / target.replace("*", remainder) for target in targets)
            elif alias == specifier:
                bases.extend(self._base_url / target for target in targets)
        return bases

    def _get_parser(self, language_key: str) -> Parser:
        parser = self._parsers.get(language_key)
        if parser is not None:
            return parser
        language = Language(_LANGUAGE_FACTORIES[language_key]())
        parser = Parser(language)
        self._parsers[language_key] = parser
        return parser


def _language_for_file(path: Path) -> str:
    return "tsx" if path.suffix.lower() in {".tsx", ".jsx"} else "typescript"


def _first_existing(base: Path) -> Optional[Path]:
    candidates = [base]
    candidates.extend(base.with_name(base.name + suffix) for suffix in _RESOLVE_SUFFIXES)
    candidates.extend(base / index for index in _INDEX_FILES)
    for candidate in candidates:
        if candidate.is_file():
            return candidate.resolve()
    return None


def _load_path_aliases(tsconfig_path: Path) -> Tuple[Path, List[Tuple[str, List[str]]]]:
    base_dir = tsconfig_path.parent
    if not tsconfig_path.is_file():
        logger.debug("No tsconfig found at %s; alias imports will not resolve", tsconfig_path)
        return base_dir, []
    try:
        data = json.loads(tsconfig_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning("Could not read %s: %s", tsconfig_path, exc)
        return base_dir, []
    options = data.get("compilerOptions") if isinstance(data, dict) else None
    if not isinstance(options, dict):
        return base_dir, []
    base_url = options.get("baseUrl")
    if isinstance(base_url, str):
        base_dir = (base_dir / base_url).resolve()
    paths = options.get("paths")
    aliases: List[Tuple[str, List[str]]] = []
    if isinstance(paths, dict):
        for alias, targets in paths.items():
            if isinstance(alias, str) and isinstance(targets, list):
                aliases.append((alias, [str(target) for target in targets]))
    return base_dir, aliases


def _descendants(node: Node, node_type: str) -> Iterable[Node]:
    for child in node.named_children:
        if child.type == node_type:
            yield child
        yield from _descendants(child, node_type)


__all__ = ["SourceFile", "SourceProject"]
