"""Ready-made DocumentStore implementations.

``InMemoryDocumentStore`` holds the document text in memory and is what a
host without its own store (and the test suite) uses.  ``FileDocumentStore``
keeps the document in a JSON file and replaces it atomically on write, so a
concurrent reader sees either the old or the new file, never a partial one.
"""

from __future__ import annotations

import logging
import os
import stat
import tempfile
from pathlib import Path

__all__ = ["FileDocumentStore", "InMemoryDocumentStore"]

log = logging.getLogger(__name__)


class InMemoryDocumentStore:
    """DocumentStore holding the document text in memory.

    Satisfies the ``DocumentStore`` Protocol structurally.  ``writes`` counts
    ``set_document_text`` calls.
    """

    def __init__(self, text: str = "{}") -> None:
        self._text = text
        self.writes = 0

    def get_document_text(self) -> str:
        return self._text

    def set_document_text(self, text: str) -> None:
        self._text = text
        self.writes += 1


class FileDocumentStore:
    """DocumentStore backed by a JSON file on disk.

    Args:
        path:     File holding the document.  It must exist before the first
                  ``get_document_text`` call.
        encoding: Text encoding of the file.  Defaults to UTF-8.
    """

    def __init__(self, path: str | os.PathLike[str], encoding: str = "utf-8") -> None:
        self.path = Path(path)
        self.encoding = encoding

    def get_document_text(self) -> str:
        return self.path.read_text(encoding=self.encoding)

    def set_document_text(self, text: str) -> None:
        """Write ``text`` to a temp file beside the target, then rename it over."""
        directory = self.path.parent
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self.path.name}.", suffix=".tmp", dir=directory
        )
        try:
            with os.fdopen(fd, "w", encoding=self.encoding, newline="\n") as fh:
                fh.write(text)
                fh.flush()
                os.fsync(fh.fileno())
            if self.path.exists():
                # mkstemp creates 0600; keep the document's own mode.
                os.chmod(tmp_name, stat.S_IMODE(self.path.stat().st_mode))
            os.replace(tmp_name, self.path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
        log.debug("Wrote %d characters to %s", len(text), self.path)
