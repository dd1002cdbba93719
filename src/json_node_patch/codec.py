"""JSON text in and out of the editor.

Document text and draft text are parsed by the same decoder but fail with
different errors: a bad document is the store's fault, a bad draft is the
user's.
"""

from __future__ import annotations

import json
import math

from json_node_patch.config import DEFAULT_CONFIG, EditorConfig
from json_node_patch.errors import DraftInvalid, HostDocumentCorrupt
from json_node_patch.tree.nodes import JsonValue

__all__ = ["dump_document", "parse_document", "parse_draft"]


def _reject_constant(name: str) -> float:
    # NaN and Infinity are Python extensions, not JSON.
    msg = f"{name} is not a valid JSON value"
    raise ValueError(msg)


def _parse_float(token: str) -> float:
    value = float(token)
    if not math.isfinite(value):
        msg = f"Number {token} is out of range"
        raise ValueError(msg)
    return value


def _loads(text: str) -> JsonValue:
    return json.loads(
        text, parse_constant=_reject_constant, parse_float=_parse_float
    )


def parse_document(text: str) -> JsonValue:
    """Parse the store's document text.

    Raises:
        HostDocumentCorrupt: If ``text`` is not valid JSON.
    """
    try:
        return _loads(text)
    except ValueError as exc:
        raise HostDocumentCorrupt(str(exc)) from exc


def parse_draft(text: str) -> JsonValue:
    """Parse the user's draft text.

    Raises:
        DraftInvalid: If ``text`` is not valid JSON.  ``line`` and ``column``
            point at the decoder's failure position.
    """
    try:
        return _loads(text)
    except json.JSONDecodeError as exc:
        raise DraftInvalid(str(exc), line=exc.lineno, column=exc.colno) from exc
    except ValueError as exc:
        raise DraftInvalid(str(exc)) from exc


def dump_document(value: JsonValue, config: EditorConfig | None = None) -> str:
    """Serialize a document for the store (2-space indent by default)."""
    cfg = config or DEFAULT_CONFIG
    return json.dumps(
        value, indent=cfg.indent, ensure_ascii=cfg.ensure_ascii, allow_nan=False
    )
