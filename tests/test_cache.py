"""Unit tests for ParsedDocumentCache.

Tests cover:
- Cache hits (same text is parsed once and returns the identical object)
- LRU eviction (silent eviction at max_size; evicted text re-parses)
- Corrupt text (raises HostDocumentCorrupt and is never cached)
- Instance isolation
- Cached documents survive patching unchanged (copy-on-write contract)
"""

from __future__ import annotations

import copy

import pytest

from json_node_patch import HostDocumentCorrupt, patch
from json_node_patch.cache import ParsedDocumentCache


class TestCacheHits:
    def test_same_text_parsed_once(self) -> None:
        cache = ParsedDocumentCache()
        first = cache.loads('{"a": [1, 2]}')
        second = cache.loads('{"a": [1, 2]}')
        assert first is second
        assert cache.misses == 1

    def test_different_text_misses(self) -> None:
        cache = ParsedDocumentCache()
        cache.loads("1")
        cache.loads("2")
        assert cache.misses == 2
        assert cache.curr_size == 2


class TestLRUEviction:
    def test_eviction_is_silent(self) -> None:
        cache = ParsedDocumentCache(max_size=2)
        for text in ("1", "2", "3"):
            cache.loads(text)
        assert cache.curr_size == 2

    def test_evicted_text_reparsed(self) -> None:
        cache = ParsedDocumentCache(max_size=2)
        cache.loads("1")
        cache.loads("2")
        cache.loads("3")  # evicts "1"
        cache.loads("1")
        assert cache.misses == 4

    def test_max_size_property(self) -> None:
        assert ParsedDocumentCache(max_size=5).max_size == 5


class TestCorruptText:
    def test_raises_host_document_corrupt(self) -> None:
        cache = ParsedDocumentCache()
        with pytest.raises(HostDocumentCorrupt, match="not valid JSON"):
            cache.loads("{oops")

    def test_corrupt_text_not_cached(self) -> None:
        cache = ParsedDocumentCache()
        with pytest.raises(HostDocumentCorrupt):
            cache.loads("{oops")
        assert cache.curr_size == 0

    def test_cause_is_decode_error(self) -> None:
        import json

        cache = ParsedDocumentCache()
        with pytest.raises(HostDocumentCorrupt) as exc_info:
            cache.loads("[1,")
        assert isinstance(exc_info.value.__cause__, json.JSONDecodeError)


class TestIsolation:
    def test_instances_do_not_share(self) -> None:
        a = ParsedDocumentCache()
        b = ParsedDocumentCache()
        a.loads("[]")
        assert b.curr_size == 0

    def test_clear(self) -> None:
        cache = ParsedDocumentCache()
        cache.loads("[]")
        cache.clear()
        assert cache.curr_size == 0


class TestCopyOnWriteContract:
    def test_patching_leaves_cached_document_intact(self) -> None:
        cache = ParsedDocumentCache()
        text = '{"a": {"b": [1, 2]}, "c": 3}'
        doc = cache.loads(text)
        snapshot = copy.deepcopy(doc)
        patch(doc, ["a", "b", 0], 99)
        assert cache.loads(text) == snapshot
