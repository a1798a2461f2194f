"""Prop extraction from component source files using tree-sitter."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Set, Tuple

from tree_sitter import Node

from ..logging import DiagnosticCollector
from ..models import ComponentMetadata, ExtractionOptions, PropDescriptor, sort_props
from .project import SourceFile, SourceProject
from .utils import (
    clean_type_text,
    collapse_whitespace,
    component_base_name,
    first_match,
    is_jsdoc,
    parse_jsdoc,
    pascal_case,
    strip_quotes,
)

_PROPS_SUFFIX = "Props"
_FUNCTION_NODES = {"arrow_function", "function_expression", "function", "function_declaration"}
_HERITAGE_NODES = {"type_identifier", "generic_type", "nested_type_identifier"}

# A declaration is identified by its file and name when walking base types.
_DeclarationKey = Tuple[Path, str]


@dataclass
class _Walk:
    """Declarations on the current inheritance path and those already expanded."""

    ancestors: Set[_DeclarationKey] = field(default_factory=set)
    expanded: Set[_DeclarationKey] = field(default_factory=set)


class PropExtractor:
    """Derives prop descriptors from the ``<Component>Props`` declaration of a file."""

    def __init__(
        self,
        project: SourceProject | None = None,
        *,
        type_namespaces: Sequence[str] = ("React.",),
        diagnostics: DiagnosticCollector | None = None,
    ) -> None:
        self.project = project if project is not None else SourceProject()
        self.type_namespaces = tuple(type_namespaces)
        self.diagnostics = diagnostics if diagnostics is not None else DiagnosticCollector()

    def extract_props(
        self, file_path: Path | str, options: ExtractionOptions | None = None
    ) -> List[PropDescriptor]:
        """Return the sorted props declared for the component in ``file_path``."""
        options = options or ExtractionOptions()
        try:
            source_file = self.project.add_source_file(file_path)
            component_name = pascal_case(component_base_name(source_file.path))
            declaration_name = self._props_declaration_name(source_file, component_name)
            if not declaration_name:
                self.diagnostics.warning(file_path, "No Props declaration found")
                return []

            defaults: Dict[str, str] = {}
            if options.extract_default_values:
                defaults = _destructured_defaults(source_file, component_name, declaration_name)

            props = self._props_from_declaration(
                source_file, declaration_name, options, defaults, _Walk()
            )
            return sort_props(props)
        except Exception as exc:
            self.diagnostics.error(file_path, "Error extracting props: %s", exc, exc=exc)
            return []

    def extract_metadata(self, file_path: Path | str) -> ComponentMetadata:
        """Return static facts about the component module in ``file_path``."""
        source_file = self.project.add_source_file(file_path)
        component_name = pascal_case(component_base_name(source_file.path))
        has_default, has_named = _export_flags(source_file)
        return ComponentMetadata(
            file_path=str(source_file.path),
            component_name=component_name,
            props_type_name=self._props_declaration_name(source_file, component_name) or "",
            has_default_export=has_default,
            has_named_export=has_named,
            external_dependencies=[
                source for source in source_file.import_sources() if not source.startswith(".")
            ],
        )

    def refresh(self, paths: Sequence[Path | str] = ()) -> None:
        """Drop parses of ``paths`` and of any file changed on disk since it was parsed."""
        for path in paths:
            self.project.remove_source_file(path)
        self.project.discard_changed()

    def dispose(self) -> None:
        self.project.dispose()

    @staticmethod
    def _props_declaration_name(source_file: SourceFile, component_name: str) -> Optional[str]:
        return first_match(
            source_file.type_declarations(), f"{component_name}{_PROPS_SUFFIX}", _PROPS_SUFFIX
        )

    def _props_from_declaration(
        self,
        source_file: SourceFile,
        name: str,
        options: ExtractionOptions,
        defaults: Dict[str, str],
        walk: _Walk,
    ) -> List[PropDescriptor]:
        key = (source_file.path, name)
        if key in walk.ancestors:
            self.diagnostics.warning(
                source_file.path, "Inheritance cycle through %s; not expanding it again", name
            )
            return []
        if key in walk.expanded:
            return []
        walk.expanded.add(key)

        declaration = source_file.type_declarations()[name]
        members, heritage = _declaration_parts(declaration)

        props: List[PropDescriptor] = []
        seen: Set[str] = set()
        for member in members:
            prop = self._prop_from_member(source_file, member, options, defaults)
            if prop is not None and prop.name not in seen:
                props.append(prop)
                seen.add(prop.name)

        if options.include_inherited_props:
            for base in heritage:
                resolved = self._resolve_heritage(source_file, base)
                if resolved is None:
                    continue
                base_file, base_name = resolved
                walk.ancestors.add(key)
                try:
                    inherited = self._props_from_declaration(
                        base_file, base_name, options, defaults, walk
                    )
                finally:
                    walk.ancestors.discard(key)
                for prop in inherited:
                    if prop.name not in seen:
                        props.append(prop)
                        seen.add(prop.name)

        return props

    def _prop_from_member(
        self,
        source_file: SourceFile,
        member: Node,
        options: ExtractionOptions,
        defaults: Dict[str, str],
    ) -> Optional[PropDescriptor]:
        name_node = member.child_by_field_name("name")
        if name_node is None:
            return None
        name = strip_quotes(source_file.text(name_node))
        if name.startswith("_") and not options.include_private_props:
            return None

        type_text = "any"
        annotation = member.child_by_field_name("type")
        if annotation is not None and annotation.named_children:
            type_text = source_file.text(annotation.named_children[0])
        required = not any(child.type == "?" for child in member.children)

        description: Optional[str] = None
        default: Optional[str] = None
        jsdoc = _attached_jsdoc(source_file, member)
        if jsdoc is not None:
            block = parse_jsdoc(jsdoc)
            if options.extract_jsdoc:
                description = block.description or None
            if options.extract_default_values:
                default = block.default_value()
        if options.extract_default_values and name in defaults:
            default = defaults[name]

        return PropDescriptor(
            name=name,
            type=clean_type_text(type_text, self.type_namespaces),
            required=required,
            description=description,
            default=default,
        )

    def _resolve_heritage(
        self, source_file: SourceFile, base: Node
    ) -> Optional[Tuple[SourceFile, str]]:
        if base.type == "generic_type":
            name_node = base.child_by_field_name("name")
            if name_node is None or name_node.type != "type_identifier":
                return None
            base_name = source_file.text(name_node)
        elif base.type == "type_identifier":
            base_name = source_file.text(base)
        else:
            self.diagnostics.info(
                source_file.path, "Skipping namespaced base type %s", source_file.text(base)
            )
            return None

        if base_name in source_file.type_declarations():
            return source_file, base_name

        imported = source_file.imports().get(base_name)
        if imported is None:
            self.diagnostics.info(source_file.path, "Base type %s is not declared locally", base_name)
            return None
        specifier, exported_name = imported
        target = self.project.resolve_module(source_file, specifier)
        if target is None:
            self.diagnostics.info(
                source_file.path, "Base type %s comes from unresolved module %s", base_name, specifier
            )
            return None
        target_file = self.project.add_source_file(target)
        if exported_name not in target_file.type_declarations():
            self.diagnostics.info(target, "Base type %s not declared in module", exported_name)
            return None
        return target_file, exported_name


def _declaration_parts(declaration: Node) -> Tuple[List[Node], List[Node]]:
    """Return ``(property members, base type nodes)`` of an interface or alias."""
    if declaration.type == "interface_declaration":
        body = declaration.child_by_field_name("body")
        members = _property_members(body) if body is not None else []
        heritage: List[Node] = []
        for child in declaration.named_children:
            if child.type == "extends_type_clause":
                heritage.extend(c for c in child.named_children if c.type in _HERITAGE_NODES)
        return members, heritage

    value = declaration.child_by_field_name("value")
    members = []
    heritage = []
    if value is not None:
        _collect_type_parts(value, members, heritage)
    return members, heritage


def _collect_type_parts(node: Node, members: List[Node], heritage: List[Node]) -> None:
    if node.type == "object_type":
        members.extend(_property_members(node))
    elif node.type in _HERITAGE_NODES:
        heritage.append(node)
    elif node.type in {"intersection_type", "parenthesized_type"}:
        for child in node.named_children:
            _collect_type_parts(child, members, heritage)


def _property_members(body: Node) -> List[Node]:
    return [child for child in body.named_children if child.type == "property_signature"]


def _attached_jsdoc(source_file: SourceFile, member: Node) -> Optional[str]:
    """Return the first JSDoc block in the comment run directly above ``member``."""
    blocks: List[str] = []
    sibling = member.prev_named_sibling
    while sibling is not None and sibling.type == "comment":
        text = source_file.text(sibling)
        if is_jsdoc(text):
            blocks.append(text)
        sibling = sibling.prev_named_sibling
    return blocks[-1] if blocks else None


def _export_flags(source_file: SourceFile) -> Tuple[bool, bool]:
    has_default = False
    has_named = False
    for child in source_file.root.named_children:
        if child.type != "export_statement":
            continue
        if any(token.type == "default" for token in child.children):
            has_default = True
        else:
            has_named = True
    return has_default, has_named


def _destructured_defaults(
    source_file: SourceFile, component_name: str, props_name: str
) -> Dict[str, str]:
    """Collect ``name = value`` defaults from the component's destructured props."""
    pattern = _component_props_pattern(source_file, component_name, props_name)
    if pattern is None:
        return {}

    defaults: Dict[str, str] = {}
    for child in pattern.named_children:
        if child.type == "object_assignment_pattern":
            left = child.child_by_field_name("left")
            right = child.child_by_field_name("right")
            if left is not None and right is not None:
                defaults[source_file.text(left)] = collapse_whitespace(source_file.text(right))
        elif child.type == "pair_pattern":
            key = child.child_by_field_name("key")
            value = child.child_by_field_name("value")
            if key is None or value is None or value.type != "assignment_pattern":
                continue
            right = value.child_by_field_name("right")
            if right is not None:
                defaults[strip_quotes(source_file.text(key))] = collapse_whitespace(
                    source_file.text(right)
                )
    return defaults


def _component_props_pattern(
    source_file: SourceFile, component_name: str, props_name: str
) -> Optional[Node]:
    for statement in source_file.top_level_statements():
        if statement.type in {"function_declaration", "function_expression", "function"}:
            name_node = statement.child_by_field_name("name")
            named = name_node is not None and source_file.text(name_node) == component_name
            pattern = _first_parameter_pattern(source_file, statement, props_name, named)
            if pattern is not None:
                return pattern
        elif statement.type in {"lexical_declaration", "variable_declaration"}:
            for declarator in statement.named_children:
                if declarator.type != "variable_declarator":
                    continue
                name_node = declarator.child_by_field_name("name")
                type_node = declarator.child_by_field_name("type")
                value = declarator.child_by_field_name("value")
                if value is None:
                    continue
                named = name_node is not None and source_file.text(name_node) == component_name
                typed = type_node is not None and props_name in source_file.text(type_node)
                function = _first_function(value)
                if function is None:
                    continue
                pattern = _first_parameter_pattern(source_file, function, props_name, named or typed)
                if pattern is not None:
                    return pattern
    return None


def _first_function(node: Node) -> Optional[Node]:
    if node.type in _FUNCTION_NODES:
        return node
    for child in node.named_children:
        found = _first_function(child)
        if found is not None:
            return found
    return None


def _first_parameter_pattern(
    source_file: SourceFile, function: Node, props_name: str, matched: bool
) -> Optional[Node]:
    parameters = function.child_by_field_name("parameters")
    if parameters is None or not parameters.named_children:
        return None
    first = parameters.named_children[0]
    pattern = first.child_by_field_name("pattern")
    if pattern is None:
        pattern = first
    if pattern.type != "object_pattern":
        return None
    type_node = first.child_by_field_name("type")
    if matched or (type_node is not None and props_name in source_file.text(type_node)):
        return pattern
    return None


__all__ = ["PropExtractor"]
