"""Request handlers."""

from docsym.handlers.document_symbol import DocumentSymbolHandler

__all__ = ["DocumentSymbolHandler"]
