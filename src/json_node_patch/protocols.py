"""Protocols for the host collaborators of an edit session.

The session only talks to the document store and the selection source
through these structural interfaces.  Host objects do not inherit from
anything; any object with conformant members passes ``isinstance`` checks.

Example::

    from json_node_patch.protocols import DocumentStore

    class HostStore:
        def __init__(self) -> None:
            self.text = "{}"

        def get_document_text(self) -> str:
            return self.text

        def set_document_text(self, text: str) -> None:
            self.text = text

    assert isinstance(HostStore(), DocumentStore)  # True
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from json_node_patch.tree.nodes import NodeData


@runtime_checkable
class DocumentStore(Protocol):
    """Structural protocol for the store owning the full document.

    ``get_document_text`` returns the current document as JSON text.
    ``set_document_text`` replaces the whole document in one call; the
    session calls it at most once per successful commit.
    """

    def get_document_text(self) -> str: ...

    def set_document_text(self, text: str) -> None: ...


@runtime_checkable
class NodeSelection(Protocol):
    """Structural protocol for the graph store's current selection.

    ``selected_node`` is ``None`` when nothing is selected.
    """

    @property
    def selected_node(self) -> NodeData | None: ...
