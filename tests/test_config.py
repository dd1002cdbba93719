"""Tests for EditorConfig defaults, immutability and validation."""

from __future__ import annotations

import dataclasses

import pytest

from json_node_patch import EditorConfig


class TestDefaults:
    def test_defaults(self) -> None:
        cfg = EditorConfig()
        assert cfg.indent == 2
        assert cfg.empty_sentinel == "{}"
        assert cfg.root_marker == "$"
        assert cfg.ensure_ascii is False
        assert cfg.document_cache_size == 8

    def test_frozen(self) -> None:
        cfg = EditorConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.indent = 4  # type: ignore[misc]


class TestValidation:
    def test_negative_indent(self) -> None:
        with pytest.raises(ValueError, match="indent must be >= 0"):
            EditorConfig(indent=-1)

    def test_zero_indent_allowed(self) -> None:
        assert EditorConfig(indent=0).indent == 0

    def test_empty_root_marker(self) -> None:
        with pytest.raises(ValueError, match="root_marker"):
            EditorConfig(root_marker="")

    def test_cache_size_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="document_cache_size"):
            EditorConfig(document_cache_size=0)
