"""Canonical text for a node's rows.

The canonical text is what the node shows in read-only mode and what seeds
the draft when editing starts.  It is recomputed, never cached, whenever the
selection changes or an edit is cancelled.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from typing import Any

from json_node_patch.config import DEFAULT_CONFIG, EditorConfig
from json_node_patch.tree.nodes import Row, as_rows

__all__ = ["canonicalize", "inline_fields", "plain_text"]


def _is_inlined(row: Row) -> bool:
    # Container rows are rendered as their own child nodes.
    return not row.type.is_container and bool(row.key)


def inline_fields(rows: Iterable[Row | Mapping[str, Any]] | None) -> dict[str, Any]:
    """Return the key -> value mapping of the rows inlined into a node.

    Keeps row order; a repeated key keeps its first position and its last
    value, as plain dict assignment does.
    """
    fields: dict[str, Any] = {}
    for row in as_rows(rows):
        if _is_inlined(row):
            fields[row.key] = row.value  # type: ignore[index]
    return fields


def _display_number(value: Any) -> Any:
    # Integral floats print as integers, as a JSON number does in the tree view.
    if isinstance(value, float) and value.is_integer():
        return int(value)
    return value


def plain_text(value: Any) -> str:
    """Render a bare scalar value the way the tree view prints it."""
    # bool before numbers: bool subclasses int.
    if isinstance(value, bool):
        return "true" if value else "false"
    if value is None:
        return "null"
    if isinstance(value, float):
        return str(_display_number(value))
    if isinstance(value, (dict, list)):
        return json.dumps(value, separators=(",", ":"), ensure_ascii=False)
    return str(value)


def canonicalize(
    rows: Iterable[Row | Mapping[str, Any]] | None,
    config: EditorConfig | None = None,
) -> str:
    """Turn a node's rows into its canonical display/edit text.

    - No rows: the empty sentinel (``"{}"`` by default).
    - Exactly one keyless row: the row's value as plain text.
    - Otherwise: the inlined fields serialized as indented JSON.

    Args:
        rows:   The node's rows, as ``Row`` or ``{"key", "value", "type"}``
                mappings.  ``None`` is treated as empty.
        config: Rendering options.  Defaults to ``EditorConfig()``.

    Returns:
        The canonical text.  Deterministic for a given row sequence.
    """
    cfg = config or DEFAULT_CONFIG
    normalized = as_rows(rows)
    if not normalized:
        return cfg.empty_sentinel
    if len(normalized) == 1 and not normalized[0].key:
        return plain_text(normalized[0].value)
    fields = {k: _display_number(v) for k, v in inline_fields(normalized).items()}
    return json.dumps(
        fields,
        indent=cfg.indent,
        ensure_ascii=cfg.ensure_ascii,
    )
