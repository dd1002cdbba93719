"""EditorConfig for canonical rendering and document serialization.

EditorConfig is a frozen (immutable) dataclass shared by the canonicalizer,
the path formatter and the edit session.  Passing ``None`` anywhere a config
is accepted means ``EditorConfig()``.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["DEFAULT_CONFIG", "EditorConfig"]


@dataclass(frozen=True, slots=True)
class EditorConfig:
    """Immutable configuration for rendering and writing back documents.

    Attributes:
        indent: Spaces per indentation level for canonical node text and for
            the document written back to the store (>= 0).  Default 2.
        empty_sentinel: Text shown for a node with no rows.  Default "{}".
        root_marker: Prefix of every formatted path, and the whole text for
            the root path.  Default "$".
        ensure_ascii: Escape non-ASCII characters when serializing.
            Default False so edited text round-trips unchanged.
        document_cache_size: Maximum number of parsed documents the session
            keeps, keyed by document text (>= 1).  Default 8.
    """

    indent: int = 2
    empty_sentinel: str = "{}"
    root_marker: str = "$"
    ensure_ascii: bool = False
    document_cache_size: int = 8

    def __post_init__(self) -> None:
        if self.indent < 0:
            msg = f"indent must be >= 0, got {self.indent}"
            raise ValueError(msg)
        if not self.root_marker:
            msg = "root_marker must be a non-empty string"
            raise ValueError(msg)
        if self.document_cache_size < 1:
            msg = f"document_cache_size must be >= 1, got {self.document_cache_size}"
            raise ValueError(msg)


DEFAULT_CONFIG = EditorConfig()
