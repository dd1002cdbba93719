"""EditSession: view/edit state machine for the selected node.

The session owns the draft text for one selected node at a time and drives
validation and write-back on commit::

    VIEWING --begin_edit()--> EDITING
    EDITING --cancel_edit()--> VIEWING          (draft reset)
    EDITING --commit_edit() ok--> VIEWING       (store written, on_close called)
    EDITING --commit_edit() error--> EDITING    (draft kept, error surfaced)
    any     --select()/open()--> VIEWING        (draft reset)

Commits read, parse, patch and write the *whole* document; the store is
written with a single ``set_document_text`` call or not at all.  Concurrent
sessions on the same store are last-write-wins.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import StrEnum, auto

from json_node_patch.cache import ParsedDocumentCache
from json_node_patch.canonical import canonicalize
from json_node_patch.codec import dump_document, parse_draft
from json_node_patch.config import DEFAULT_CONFIG, EditorConfig
from json_node_patch.errors import CommitError, HostDocumentCorrupt, SessionStateError
from json_node_patch.paths import format_path
from json_node_patch.patcher import patch
from json_node_patch.protocols import DocumentStore, NodeSelection
from json_node_patch.tree.nodes import NodeData

__all__ = ["CommitResult", "EditSession", "RenderState", "SessionMode"]

log = logging.getLogger(__name__)


class SessionMode(StrEnum):
    """The two modes of an edit session.

    - VIEWING: read-only canonical text is shown (initial mode).
    - EDITING: the draft text is shown and may be changed.
    """

    VIEWING = auto()
    EDITING = auto()


@dataclass(frozen=True, slots=True)
class RenderState:
    """Snapshot of what the hosting dialog should display.

    Attributes:
        display_text: Canonical text of the selected node.
        is_editing:   True in EDITING mode.
        draft_text:   Current draft text.
        error:        Message of the last rejected commit, or None.
        path_text:    Formatted path of the selected node.
    """

    display_text: str
    is_editing: bool
    draft_text: str
    error: str | None
    path_text: str


@dataclass(frozen=True, slots=True)
class CommitResult:
    """Outcome of ``EditSession.commit_edit``.

    Attributes:
        error: The rejecting ``CommitError`` (``HostDocumentCorrupt``,
            ``DraftInvalid`` or ``PathStale``), or None on success.
    """

    error: CommitError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


class EditSession:
    """Edit session for the node currently selected in the tree view.

    Args:
        store:     The document store; read once and written at most once per
                   commit.
        selection: Optional selection source consulted by ``open()`` when no
                   node is passed explicitly.
        config:    Rendering and serialization options.
        on_close:  Called after a successful commit so the host can close its
                   dialog.
    """

    def __init__(
        self,
        store: DocumentStore,
        selection: NodeSelection | None = None,
        config: EditorConfig | None = None,
        on_close: Callable[[], None] | None = None,
    ) -> None:
        self._store = store
        self._selection = selection
        self._config = config or DEFAULT_CONFIG
        self._on_close = on_close
        self._documents = ParsedDocumentCache(max_size=self._config.document_cache_size)
        self._node = NodeData()
        self._mode = SessionMode.VIEWING
        self._draft = canonicalize(self._node.rows, self._config)
        self._error: str | None = None

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def mode(self) -> SessionMode:
        return self._mode

    @property
    def node(self) -> NodeData:
        """The node being viewed or edited."""
        return self._node

    @property
    def draft_text(self) -> str:
        return self._draft

    @property
    def error(self) -> str | None:
        return self._error

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select(self, node: NodeData | None) -> None:
        """Switch to ``node`` (None means nothing selected); back to VIEWING."""
        self._node = node if node is not None else NodeData()
        self._reset()
        log.debug("Selected node at %s", self.formatted_path())

    def open(self, node: NodeData | None = None) -> None:
        """Start showing the dialog for ``node`` or the selection's node."""
        if node is None and self._selection is not None:
            node = self._selection.selected_node
        self.select(node)

    # ------------------------------------------------------------------
    # User transitions
    # ------------------------------------------------------------------

    def begin_edit(self) -> None:
        """VIEWING -> EDITING.  The draft keeps the last canonical text."""
        self._mode = SessionMode.EDITING

    def set_draft(self, text: str) -> None:
        """Replace the draft text while editing.

        Raises:
            SessionStateError: If the session is not in EDITING mode.
        """
        if self._mode is not SessionMode.EDITING:
            msg = "Draft can only be changed while editing"
            raise SessionStateError(msg)
        self._draft = text

    def cancel_edit(self) -> None:
        """EDITING -> VIEWING, discarding the draft."""
        self._reset()

    def commit_edit(self) -> CommitResult:
        """Validate the draft and write the patched document to the store.

        On any ``CommitError`` the store is left untouched, the session stays
        in EDITING with the draft unchanged, and the error is returned and
        recorded for ``render()``.

        Raises:
            SessionStateError: If called outside EDITING mode.
        """
        if self._mode is not SessionMode.EDITING:
            msg = "Nothing to commit: session is not editing"
            raise SessionStateError(msg)

        try:
            document = self._documents.loads(self._read_document_text())
            value = parse_draft(self._draft)
            new_root = patch(document, self._node.path, value)
        except CommitError as exc:
            self._error = str(exc)
            if exc.fatal:
                log.warning("Commit at %s failed: %s", self.formatted_path(), exc)
            else:
                log.info("Commit at %s rejected: %s", self.formatted_path(), exc)
            return CommitResult(error=exc)

        self._store.set_document_text(dump_document(new_root, self._config))
        log.debug("Committed edit at %s", self.formatted_path())
        self._reset()
        if self._on_close is not None:
            self._on_close()
        return CommitResult()

    # ------------------------------------------------------------------
    # Presentation
    # ------------------------------------------------------------------

    def formatted_path(self) -> str:
        return format_path(self._node.path, self._config)

    def render(self) -> RenderState:
        return RenderState(
            display_text=canonicalize(self._node.rows, self._config),
            is_editing=self._mode is SessionMode.EDITING,
            draft_text=self._draft,
            error=self._error,
            path_text=self.formatted_path(),
        )

    def _read_document_text(self) -> str:
        """Fetch the document text, reporting I/O and decode failures as corrupt."""
        try:
            return self._store.get_document_text()
        except (OSError, UnicodeDecodeError) as exc:
            raise HostDocumentCorrupt(str(exc), unreadable=True) from exc

    def _reset(self) -> None:
        self._mode = SessionMode.VIEWING
        self._draft = canonicalize(self._node.rows, self._config)
        self._error = None
