"""Error taxonomy for node editing.

All commit outcomes derive from ``CommitError`` so a host shell can report
them uniformly, while ``HostDocumentCorrupt`` stays distinguishable as a
store-side fault rather than a typo in the user's draft.
"""

from __future__ import annotations

from enum import StrEnum, auto

from json_node_patch.tree.nodes import Path, PathSegment

__all__ = [
    "CommitError",
    "DraftInvalid",
    "HostDocumentCorrupt",
    "NodeEditError",
    "PathStale",
    "SessionStateError",
    "StaleReason",
]


class NodeEditError(Exception):
    """Base class for every error raised by json_node_patch."""


class SessionStateError(NodeEditError):
    """A transition was requested that the current session mode does not allow."""


class CommitError(NodeEditError):
    """Base class for the outcomes that reject a commit attempt."""

    #: True when the failure is not something the user can fix in the draft.
    fatal: bool = False


class HostDocumentCorrupt(CommitError):
    """The document store returned unreadable text or text that is not JSON."""

    fatal = True

    def __init__(self, detail: str, unreadable: bool = False) -> None:
        if unreadable:
            super().__init__(f"Stored document could not be read: {detail}")
        else:
            super().__init__(f"Stored document is not valid JSON: {detail}")
        self.detail = detail


class DraftInvalid(CommitError):
    """The user's draft text does not parse as JSON."""

    def __init__(self, detail: str, line: int | None = None, column: int | None = None) -> None:
        super().__init__(f"Invalid JSON: {detail}")
        self.detail = detail
        self.line = line
        self.column = column


class StaleReason(StrEnum):
    """Why a path segment could not be followed.

    - MISSING:    the key or index is absent from the container.
    - WRONG_KIND: the value at that depth is not the container kind the
                  segment expects (object for keys, array for indices).
    """

    MISSING = auto()
    WRONG_KIND = auto()


class PathStale(CommitError):
    """The node's path no longer resolves against the current document.

    Attributes:
        path:    The full path that was being followed.
        depth:   Index of the offending segment within ``path``.
        segment: The offending segment itself.
        reason:  MISSING or WRONG_KIND.
    """

    def __init__(
        self,
        path: Path,
        depth: int,
        reason: StaleReason,
        found: str = "",
    ) -> None:
        segment = path[depth]
        if reason is StaleReason.MISSING:
            detail = f"segment {segment!r} does not exist"
        else:
            detail = f"segment {segment!r} cannot index into {found or 'a scalar'}"
        super().__init__(f"Path is stale at depth {depth}: {detail}")
        self.path = path
        self.depth = depth
        self.segment: PathSegment = segment
        self.reason = reason
