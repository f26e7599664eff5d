"""Document symbol request handler.

Glue between the document store, the syntax-tree provider and the
outline engine. The engine's symbols are serialized into LSP-shaped
DocumentSymbolItem records here.
"""

from typing import TYPE_CHECKING

from loguru import logger

from docsym.errors import DocumentNotFoundError, DocumentSupersededError
from docsym.extractors.dsl_table import DEFAULT_DSL_TABLE, DslTable
from docsym.extractors.outline import extract_symbols
from docsym.models.responses import DocumentSymbolItem, DocumentSymbolResponse

if TYPE_CHECKING:
    from docsym.ports import DocumentStorePort, SyntaxTreeProviderPort


class DocumentSymbolHandler:
    """
    Answers outline requests for stored documents.

    Each call parses the current snapshot of the document, runs the
    outline engine and discards the result if the document was
    replaced while the request was running.
    """

    def __init__(
        self,
        store: "DocumentStorePort",
        provider: "SyntaxTreeProviderPort",
        table: DslTable = DEFAULT_DSL_TABLE,
    ) -> None:
        """Initialize handler with its collaborators."""
        self.store = store
        self.provider = provider
        self.table = table

    def handle(self, uri: str) -> DocumentSymbolResponse:
        """
        Compute the outline of a stored document.

        Args:
            uri: Document identifier.

        Returns:
            DocumentSymbolResponse for the snapshot that was outlined.

        Raises:
            DocumentNotFoundError: If the document is not stored.
            DocumentSupersededError: If the document changed (or was
                closed) before the outline was ready.
            SyntaxTreeError: If the grammar cannot be loaded.
        """
        document = self.store.get(uri)
        parsed = self.provider.parse(document.source, uri)
        symbols = extract_symbols(parsed.root, self.table)

        try:
            current_version: int | None = self.store.get(uri).version
        except DocumentNotFoundError:
            current_version = None
        if current_version != document.version:
            logger.warning(
                "Discarding outline for {}: version {} superseded by {}",
                uri,
                document.version,
                current_version,
            )
            raise DocumentSupersededError(uri, document.version, current_version)

        logger.debug(
            "Outlined {} (version {}): {} top-level symbols", uri, document.version, len(symbols)
        )
        return DocumentSymbolResponse(
            uri=uri,
            version=document.version,
            symbols=[DocumentSymbolItem.from_symbol(symbol) for symbol in symbols],
            parse_errors=parsed.parse_errors,
        )
