"""Port interface for the document store."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from docsym.store import Document


class DocumentStorePort(Protocol):
    """Protocol for document stores.

    The store holds the current text and version of each open
    document, keyed by URI.
    """

    def set(self, uri: str, source: str, version: int) -> "Document":
        """Store (or replace) a document.

        Args:
            uri: Document identifier
            source: Full document text
            version: Client-supplied version number

        Returns:
            The stored document
        """
        ...

    def get(self, uri: str) -> "Document":
        """Return a stored document.

        Raises:
            DocumentNotFoundError: If the URI is not stored
        """
        ...

    def delete(self, uri: str) -> None:
        """Remove a document if present."""
        ...

    def contains(self, uri: str) -> bool:
        """Check whether a document is stored."""
        ...
