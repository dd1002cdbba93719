"""DocumentPatcher: replace the subtree at a path, copy-on-write.

``patch`` never mutates its input.  Every container on the way from the root
to the parent of the replaced subtree is shallow-copied; all other subtrees
are shared by reference with the original document.  A reader still holding
the previous root therefore never observes the change.

Example::

    doc = {"customer": [{"name": "Ann"}], "total": 3}
    new = patch(doc, ["customer", 0, "name"], "Bob")
    # new["customer"][0]["name"] == "Bob"
    # doc["customer"][0]["name"] == "Ann"
    # new["total"] is doc["total"]
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from json_node_patch.errors import PathStale, StaleReason
from json_node_patch.paths import step
from json_node_patch.tree.nodes import JsonValue, Path, PathSegment, as_path

__all__ = ["patch"]

log = logging.getLogger(__name__)


def _assign(container: JsonValue, path: Path, depth: int, value: JsonValue) -> JsonValue:
    """Return a copy of ``container`` with ``path[depth]`` set to ``value``.

    An object may gain a new key at the last segment; an array index must
    already exist.
    """
    segment = path[depth]
    if isinstance(segment, str):
        if not isinstance(container, dict):
            step(container, path, depth)  # raises WRONG_KIND
        updated = dict(container)  # type: ignore[arg-type]
        updated[segment] = value
        return updated

    if not isinstance(container, list) or isinstance(segment, bool):
        step(container, path, depth)  # raises WRONG_KIND
    if not 0 <= segment < len(container):  # type: ignore[arg-type]
        raise PathStale(path, depth, StaleReason.MISSING)
    updated_list = list(container)  # type: ignore[arg-type]
    updated_list[segment] = value
    return updated_list


def _rebuild(node: JsonValue, path: Path, depth: int, value: JsonValue) -> JsonValue:
    if depth == len(path) - 1:
        return _assign(node, path, depth, value)
    child = step(node, path, depth)
    return _assign(node, path, depth, _rebuild(child, path, depth + 1, value))


def patch(
    root: JsonValue,
    path: Iterable[PathSegment] | None,
    new_value: JsonValue,
) -> JsonValue:
    """Return a new document equal to ``root`` except at ``path``.

    Args:
        root:      The full current document.  Never mutated.
        path:      Address of the subtree to replace.  ``None`` or empty
                   replaces the whole document.
        new_value: The replacement value.

    Returns:
        ``new_value`` itself for the root path; otherwise a new root whose
        untouched subtrees are shared with ``root``.

    Raises:
        PathStale: If an intermediate segment is missing or indexes into the
            wrong kind of value, or a final array index is out of range.
    """
    segments = as_path(path)
    if not segments:
        log.debug("Replacing whole document")
        return new_value
    try:
        return _rebuild(root, segments, 0, new_value)
    except PathStale as exc:
        log.debug("Patch rejected: %s", exc)
        raise
