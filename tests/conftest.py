"""Shared fixtures: a sample order document, its node rows and document stores.

The sample document is fixed and reproducible.  ``customer_node`` mirrors how
the tree view flattens ``$["customer"]``: scalar fields become rows, while the
nested ``address`` object and ``tags`` array appear as container rows that
are not inlined.
"""

from __future__ import annotations

import json
from typing import Any

import pytest

from json_node_patch import InMemoryDocumentStore, NodeData, Row, RowType


def make_order() -> dict[str, Any]:
    """Return a fresh copy of the sample order document."""
    return {
        "id": "ord-1001",
        "customer": {
            "name": "Ann Lee",
            "vip": True,
            "address": {"city": "Oslo", "zip": "0150"},
            "tags": ["new", "promo"],
        },
        "items": [
            {"sku": "A-1", "qty": 2, "price": 9.5},
            {"sku": "B-7", "qty": 1, "price": None},
        ],
        "total": 19.0,
    }


class SpyStore(InMemoryDocumentStore):
    """InMemoryDocumentStore that records every text written to it."""

    def __init__(self, text: str = "{}") -> None:
        super().__init__(text)
        self.written: list[str] = []

    def set_document_text(self, text: str) -> None:
        self.written.append(text)
        super().set_document_text(text)


@pytest.fixture
def order() -> dict[str, Any]:
    """A fresh sample order document for each test."""
    return make_order()


@pytest.fixture
def order_text() -> str:
    """The sample order document serialized with 2-space indentation."""
    return json.dumps(make_order(), indent=2)


@pytest.fixture
def store(order_text: str) -> SpyStore:
    """A spying store preloaded with the sample order."""
    return SpyStore(order_text)


@pytest.fixture
def customer_node() -> NodeData:
    """The node for $["customer"] as the tree view supplies it."""
    return NodeData.create(
        rows=[
            Row("name", "Ann Lee", RowType.STRING),
            Row("vip", True, RowType.BOOLEAN),
            Row("address", {}, RowType.OBJECT),
            Row("tags", [], RowType.ARRAY),
        ],
        path=["customer"],
    )


@pytest.fixture
def qty_node() -> NodeData:
    """A bare scalar node: $["items"][0]["qty"]."""
    return NodeData.create(
        rows=[Row(None, 2, RowType.NUMBER)],
        path=["items", 0, "qty"],
    )
