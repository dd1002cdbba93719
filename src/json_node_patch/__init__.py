"""json-node-patch - path-addressed editing of single nodes in a JSON document."""

from __future__ import annotations

from json_node_patch.api import (
    apply_edit,
    canonicalize,
    format_path,
    patch,
    resolve_path,
)
from json_node_patch.config import EditorConfig
from json_node_patch.errors import (
    CommitError,
    DraftInvalid,
    HostDocumentCorrupt,
    NodeEditError,
    PathStale,
    SessionStateError,
    StaleReason,
)
from json_node_patch.session import CommitResult, EditSession, RenderState, SessionMode
from json_node_patch.store import FileDocumentStore, InMemoryDocumentStore
from json_node_patch.tree.nodes import NodeData, Row, RowType

__version__: str = "0.1.0"
__all__: list[str] = [
    "CommitError",
    "CommitResult",
    "DraftInvalid",
    "EditSession",
    "EditorConfig",
    "FileDocumentStore",
    "HostDocumentCorrupt",
    "InMemoryDocumentStore",
    "NodeData",
    "NodeEditError",
    "PathStale",
    "RenderState",
    "Row",
    "RowType",
    "SessionMode",
    "SessionStateError",
    "StaleReason",
    "apply_edit",
    "canonicalize",
    "format_path",
    "patch",
    "resolve_path",
]
