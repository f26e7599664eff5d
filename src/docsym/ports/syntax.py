"""Port interface for syntax-tree providers."""

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from docsym.parsing.base import ParsedTree


class SyntaxTreeProviderPort(Protocol):
    """Protocol for syntax-tree providers.

    Providers turn document text into the SyntaxNode tree consumed
    by the outline engine.
    """

    def get_language_name(self) -> str:
        """Language the provider parses (e.g., 'ruby')."""
        ...

    def parse(self, source: str | bytes, uri: str = "<memory>") -> "ParsedTree":
        """Parse document text.

        Args:
            source: Document text.
            uri: Document identifier used in error locations.

        Returns:
            Converted tree. Malformed input yields a partial tree
            with parse_errors set rather than an exception.

        Raises:
            SyntaxTreeError: If the grammar cannot be loaded.
        """
        ...
