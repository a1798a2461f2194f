"""In-memory cache of generated component documentation."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from ..models import ComponentDocumentation


@dataclass(frozen=True)
class CacheEntry:
    documentation: ComponentDocumentation
    fingerprint: str


class DocumentationCache:
    """Stores documentation keyed by component path.

    Entries stay valid until ``clear()`` or ``discard()``; nothing is
    invalidated automatically when files change. Each entry keeps the
    content fingerprint it was built from so callers can ask ``is_stale``.
    """

    def __init__(self) -> None:
        self._entries: Dict[str, CacheEntry] = {}

    def get(self, key: str) -> Optional[ComponentDocumentation]:
        entry = self._entries.get(key)
        return entry.documentation if entry is not None else None

    def store(self, key: str, documentation: ComponentDocumentation, *, fingerprint: str) -> None:
        self._entries[key] = CacheEntry(documentation=documentation, fingerprint=fingerprint)

    def is_stale(self, key: str, fingerprint: str) -> bool:
        """Return True when ``key`` is cached under a different fingerprint."""
        entry = self._entries.get(key)
        return entry is not None and entry.fingerprint != fingerprint

    def discard(self, key: str) -> None:
        self._entries.pop(key, None)

    def keys(self) -> List[str]:
        return list(self._entries)

    def values(self) -> List[ComponentDocumentation]:
        return [entry.documentation for entry in self._entries.values()]

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)


__all__ = ["CacheEntry", "DocumentationCache"]
