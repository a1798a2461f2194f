"""Storage helpers for compdoc."""

from .doc_cache import CacheEntry, DocumentationCache

__all__ = ["CacheEntry", "DocumentationCache"]
