"""In-memory document store.

Holds the current text and version of every open document.
Outline requests read a snapshot (a Document) and can later
check whether it is still current.
"""

import threading
from dataclasses import dataclass
from pathlib import Path

from loguru import logger

from docsym.errors import DocumentNotFoundError


@dataclass(frozen=True)
class Document:
    """Immutable snapshot of a document."""

    uri: str
    source: str
    version: int


class DocumentStore:
    """
    Thread-safe map of URI to Document.

    Replacing a document creates a new snapshot; snapshots already
    handed out are never mutated.
    """

    def __init__(self) -> None:
        """Initialize empty store."""
        self._documents: dict[str, Document] = {}
        self._lock = threading.Lock()

    def set(self, uri: str, source: str, version: int) -> Document:
        """Store (or replace) a document."""
        document = Document(uri=uri, source=source, version=version)
        with self._lock:
            self._documents[uri] = document
        logger.debug("Stored {} at version {}", uri, version)
        return document

    def get(self, uri: str) -> Document:
        """Return a stored document.

        Raises:
            DocumentNotFoundError: If the URI is not stored.
        """
        with self._lock:
            document = self._documents.get(uri)
        if document is None:
            raise DocumentNotFoundError(uri)
        return document

    def delete(self, uri: str) -> None:
        """Remove a document if present."""
        with self._lock:
            self._documents.pop(uri, None)

    def contains(self, uri: str) -> bool:
        """Check whether a document is stored."""
        with self._lock:
            return uri in self._documents

    def clear(self) -> None:
        """Remove all documents."""
        with self._lock:
            self._documents.clear()

    def __len__(self) -> int:
        with self._lock:
            return len(self._documents)

    def load_file(self, path: Path, max_file_size_kb: int | None = None) -> Document:
        """Read a file from disk into the store.

        The file URI is used as key and the modification time in
        nanoseconds as version, so rereading an unchanged file
        yields the same version.

        Raises:
            FileNotFoundError: If the file doesn't exist.
            ValueError: If the file exceeds max_file_size_kb.
        """
        resolved = path.expanduser().resolve()
        stat = resolved.stat()
        if max_file_size_kb is not None and stat.st_size > max_file_size_kb * 1024:
            raise ValueError(
                f"{resolved} is {stat.st_size // 1024} KB, larger than {max_file_size_kb} KB"
            )
        source = resolved.read_text(encoding="utf-8", errors="replace")
        return self.set(resolved.as_uri(), source, stat.st_mtime_ns)
