"""Public API functions for json-node-patch.

Stateless entry points for hosts that do not need the full ``EditSession``
state machine.  Each call is pure with respect to its inputs.
"""

from __future__ import annotations

from collections.abc import Iterable

from json_node_patch.canonical import canonicalize
from json_node_patch.codec import dump_document, parse_document, parse_draft
from json_node_patch.config import EditorConfig
from json_node_patch.paths import format_path, resolve_path
from json_node_patch.patcher import patch
from json_node_patch.tree.nodes import PathSegment

__all__ = ["apply_edit", "canonicalize", "format_path", "patch", "resolve_path"]


def apply_edit(
    document_text: str,
    path: Iterable[PathSegment] | None,
    draft_text: str,
    config: EditorConfig | None = None,
) -> str:
    """Replace the subtree at ``path`` in a serialized document.

    Runs the same read-parse-patch-serialize pipeline as a session commit,
    without any session state.

    Args:
        document_text: The full current document as JSON text.
        path:          Address of the subtree to replace; None or empty for
                       the whole document.
        draft_text:    The replacement value as JSON text.
        config:        Serialization options.  Defaults to ``EditorConfig()``.

    Returns:
        The patched document, serialized with the configured indentation.

    Raises:
        HostDocumentCorrupt: If ``document_text`` is not valid JSON.
        DraftInvalid: If ``draft_text`` is not valid JSON.
        PathStale: If ``path`` does not resolve in the document.
    """
    document = parse_document(document_text)
    value = parse_draft(draft_text)
    return dump_document(patch(document, path, value), config)
