"""Helpers shared by the source analyzers."""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Iterable, Optional, Sequence

_IMPORT_QUALIFIER = re.compile(r"import\([^)]+\)\.")
_WHITESPACE = re.compile(r"\s+")
_WORD_SPLIT = re.compile(r"[-_\s]+")
_LEADING_STAR = re.compile(r"^\s*\*\s?")
_DEFAULT_TAGS = ("default", "defaultValue")


@dataclass
class JSDocBlock:
    """Description text and tag values parsed from a ``/** ... */`` comment."""

    description: str
    tags: Dict[str, str] = field(default_factory=dict)

    def default_value(self) -> Optional[str]:
        for tag in _DEFAULT_TAGS:
            value = self.tags.get(tag)
            if value:
                return value
        return None


def is_jsdoc(comment: str) -> bool:
    return comment.startswith("/**") and not comment.startswith("/**/")


def parse_jsdoc(comment: str) -> JSDocBlock:
    """Split a JSDoc comment into its free-text description and tags."""
    body = comment[3:]
    if body.endswith("*/"):
        body = body[:-2]

    description_lines = []
    tags: Dict[str, str] = {}
    current_tag: Optional[str] = None
    for raw_line in body.splitlines():
        line = _LEADING_STAR.sub("", raw_line).rstrip()
        stripped = line.strip()
        if stripped.startswith("@"):
            name, _, rest = stripped[1:].partition(" ")
            current_tag = name
            tags[current_tag] = rest.strip()
            continue
        if current_tag is not None:
            if stripped:
                tags[current_tag] = f"{tags[current_tag]} {stripped}".strip()
            continue
        description_lines.append(line)

    return JSDocBlock(description="\n".join(description_lines).strip(), tags=tags)


def clean_type_text(type_text: str, namespaces: Sequence[str] = ("React.",)) -> str:
    """Strip module qualifiers and namespace prefixes, then collapse whitespace."""
    cleaned = _IMPORT_QUALIFIER.sub("", type_text)
    for prefix in namespaces:
        if prefix:
            cleaned = cleaned.replace(prefix, "")
    return _WHITESPACE.sub(" ", cleaned).strip()


def collapse_whitespace(text: str) -> str:
    return _WHITESPACE.sub(" ", text).strip()


def pascal_case(value: str) -> str:
    """Convert ``my-button`` / ``my_button`` / ``myButton`` to ``MyButton``."""
    return "".join(word[:1].upper() + word[1:] for word in _WORD_SPLIT.split(value) if word)


def component_base_name(path: Path | str) -> str:
    """Return the file name without its final suffix."""
    return Path(path).stem


def strip_quotes(text: str) -> str:
    if len(text) >= 2 and text[0] == text[-1] and text[0] in {"'", '"', "`"}:
        return text[1:-1]
    return text


def first_match(names: Iterable[str], expected: str, suffix: str) -> Optional[str]:
    """Return ``expected`` if present, else the first name ending in ``suffix``."""
    ordered = list(names)
    if expected in ordered:
        return expected
    for name in ordered:
        if name.endswith(suffix):
            return name
    return None


__all__ = [
    "JSDocBlock",
    "clean_type_text",
    "collapse_whitespace",
    "component_base_name",
    "first_match",
    "is_jsdoc",
    "parse_jsdoc",
    "pascal_case",
    "strip_quotes",
]
