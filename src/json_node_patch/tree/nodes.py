"""Row, NodeData and RowType for the flattened node representation.

A selected node in the tree view is not handed over as a nested JSON value.
The view flattens one level of structure per node, so each node arrives as an
ordered sequence of rows (one per field) plus the path that addresses it in
the full document.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass, field
from enum import StrEnum, auto
from typing import Any

# Type alias for valid JSON values
JsonValue = dict[str, Any] | list[Any] | str | int | float | bool | None

PathSegment = str | int
Path = tuple[PathSegment, ...]


class RowType(StrEnum):
    """Declared JSON type of a single row.

    StrEnum values are the lowercased member names, which are also the type
    names the tree view uses:
    - STRING  -> "string"
    - NUMBER  -> "number"
    - BOOLEAN -> "boolean"
    - NULL    -> "null"
    - ARRAY   -> "array"   : rendered as a child node, never inlined
    - OBJECT  -> "object"  : rendered as a child node, never inlined
    """

    STRING = auto()
    NUMBER = auto()
    BOOLEAN = auto()
    NULL = auto()
    ARRAY = auto()
    OBJECT = auto()

    @property
    def is_container(self) -> bool:
        """True for ARRAY and OBJECT rows."""
        return self in (RowType.ARRAY, RowType.OBJECT)


@dataclass(frozen=True, slots=True)
class Row:
    """One flattened key/value/type entry of a displayed node.

    Attributes:
        key:   Object key of the field, or None for a bare scalar node.
        value: The field value as supplied by the tree view.
        type:  Declared JSON type of ``value``.
    """

    key: str | None
    value: Any
    type: RowType

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> Row:
        """Build a Row from a host-side ``{"key", "value", "type"}`` mapping.

        Raises:
            ValueError: If ``raw["type"]`` is missing or not a known row type name.
        """
        if "type" not in raw:
            msg = f"Row has no type: {dict(raw)!r}"
            raise ValueError(msg)
        type_name = raw["type"]
        try:
            row_type = RowType(type_name)
        except ValueError:
            msg = f"Unknown row type: {type_name!r}"
            raise ValueError(msg) from None
        return cls(key=raw.get("key"), value=raw.get("value"), type=row_type)


def as_path(segments: Iterable[PathSegment] | None) -> Path:
    """Normalize a host-supplied path (list, tuple or None) into a tuple."""
    if segments is None:
        return ()
    return tuple(segments)


def as_rows(rows: Iterable[Row | Mapping[str, Any]] | None) -> tuple[Row, ...]:
    """Normalize host-supplied rows, converting plain mappings to Row."""
    if not rows:
        return ()
    return tuple(r if isinstance(r, Row) else Row.from_mapping(r) for r in rows)


@dataclass(frozen=True, slots=True)
class NodeData:
    """The currently selected node as seen by the editor.

    Attributes:
        rows: Flattened rows describing the node, in display order.
        path: Address of the node in the full document; ``()`` is the root.
    """

    rows: tuple[Row, ...] = field(default_factory=tuple)
    path: Path = field(default_factory=tuple)

    @classmethod
    def create(
        cls,
        rows: Sequence[Row | Mapping[str, Any]] | None = None,
        path: Iterable[PathSegment] | None = None,
    ) -> NodeData:
        """Build a NodeData from loosely typed host input."""
        return cls(rows=as_rows(rows), path=as_path(path))
