"""Path formatting and resolution.

``format_path`` renders a path for read-only display in a JSONPath-like form::

    format_path(())                        # "$"
    format_path(["customer", 0, "name"])   # '$["customer"][0]["name"]'

``resolve_path`` follows a path into a document and reports the first
segment that does not resolve as ``PathStale``.
"""

from __future__ import annotations

from collections.abc import Iterable

from json_node_patch.config import DEFAULT_CONFIG, EditorConfig
from json_node_patch.errors import PathStale, StaleReason
from json_node_patch.tree.nodes import JsonValue, Path, PathSegment, as_path

__all__ = ["format_path", "resolve_path", "step"]


def _format_segment(segment: PathSegment) -> str:
    if isinstance(segment, int):
        return str(segment)
    return f'"{segment}"'


def format_path(
    path: Iterable[PathSegment] | None,
    config: EditorConfig | None = None,
) -> str:
    """Return the display string for ``path``.

    An absent or empty path is the document root and renders as the bare
    root marker.  Integer segments render as bare digits, string segments
    are double quoted; every segment is bracketed.
    """
    marker = (config or DEFAULT_CONFIG).root_marker
    segments = as_path(path)
    if not segments:
        return marker
    return marker + "".join(f"[{_format_segment(s)}]" for s in segments)


def _kind(value: JsonValue) -> str:
    if isinstance(value, dict):
        return "an object"
    if isinstance(value, list):
        return "an array"
    return "a scalar"


def step(container: JsonValue, path: Path, depth: int) -> JsonValue:
    """Follow ``path[depth]`` one level down from ``container``.

    Object keys require a dict, array indices require a list and must be in
    range.  ``bool`` is never treated as an index.

    Raises:
        PathStale: If the segment cannot be followed.
    """
    segment = path[depth]
    if isinstance(segment, str):
        if not isinstance(container, dict):
            raise PathStale(path, depth, StaleReason.WRONG_KIND, _kind(container))
        if segment not in container:
            raise PathStale(path, depth, StaleReason.MISSING)
        return container[segment]

    if not isinstance(container, list) or isinstance(segment, bool):
        raise PathStale(path, depth, StaleReason.WRONG_KIND, _kind(container))
    if not 0 <= segment < len(container):
        raise PathStale(path, depth, StaleReason.MISSING)
    return container[segment]


def resolve_path(root: JsonValue, path: Iterable[PathSegment] | None) -> JsonValue:
    """Return the value addressed by ``path`` inside ``root``.

    Raises:
        PathStale: If any segment does not resolve.
    """
    segments = as_path(path)
    current = root
    for depth in range(len(segments)):
        current = step(current, segments, depth)
    return current
