"""ParsedDocumentCache: LRU cache of parsed documents keyed by their text.

A session commit parses the full document text every time.  When the text
has not changed since the previous parse (the common case: several edits in
a row from the same session, whose output is exactly what it wrote), the
parsed value is served from memory.

Sharing a parsed document between commits is safe only because ``patch`` is
copy-on-write: a cached document is never mutated, and patched documents
share its untouched subtrees read-only.  Callers must not mutate values
returned by ``loads``.

Example::

    cache = ParsedDocumentCache(max_size=4)
    doc = cache.loads('{"a": 1}')        # parses
    again = cache.loads('{"a": 1}')      # served from memory
    assert doc is again
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from cachetools import LRUCache

from json_node_patch.codec import parse_document

if TYPE_CHECKING:
    from json_node_patch.tree.nodes import JsonValue

__all__ = ["ParsedDocumentCache"]


class ParsedDocumentCache:
    """LRU-backed cache in front of ``json.loads`` for document text.

    Each instance maintains its own ``LRUCache``; no cross-instance sharing.
    Eviction of the least-recently-used document is silent.  Text that fails
    to parse is never cached.

    Args:
        max_size: Maximum number of parsed documents kept.  Defaults to 8.
    """

    def __init__(self, max_size: int = 8) -> None:
        self._cache: LRUCache[str, JsonValue] = LRUCache(maxsize=max_size)
        self.misses = 0

    @property
    def max_size(self) -> int:
        """The maximum number of documents this cache can hold."""
        return int(self._cache.maxsize)

    @property
    def curr_size(self) -> int:
        """The current number of documents stored in the cache."""
        return int(self._cache.currsize)

    def loads(self, text: str) -> JsonValue:
        """Return the parsed value of ``text``, parsing only on a miss.

        Raises:
            HostDocumentCorrupt: If ``text`` is not valid JSON.
        """
        try:
            return self._cache[text]
        except KeyError:
            pass
        self.misses += 1
        value = parse_document(text)
        self._cache[text] = value
        return value

    def clear(self) -> None:
        """Drop every cached document."""
        self._cache.clear()
