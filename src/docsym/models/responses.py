"""Response models for the document symbol request.

These are Data Transfer Objects shaped after the LSP
``textDocument/documentSymbol`` result. For the engine's own
output, see models.symbols.
"""

from typing import Any, ClassVar

from pydantic import BaseModel, Field

from docsym.models.symbols import SourceRange, Symbol, SymbolKind


class LspRange(BaseModel):
    """LSP range with zero-based positions."""

    start_line: int = Field(description="Zero-based start line")
    start_character: int = Field(description="Zero-based start character")
    end_line: int = Field(description="Zero-based end line")
    end_character: int = Field(description="Zero-based end character")

    @classmethod
    def from_source_range(cls, source_range: SourceRange) -> "LspRange":
        """Convert an engine range."""
        return cls(
            start_line=source_range.start.line,
            start_character=source_range.start.character,
            end_line=source_range.end.line,
            end_character=source_range.end.character,
        )

    def to_lsp(self) -> dict[str, Any]:
        """Return the LSP JSON shape."""
        return {
            "start": {"line": self.start_line, "character": self.start_character},
            "end": {"line": self.end_line, "character": self.end_character},
        }


class DocumentSymbolItem(BaseModel):
    """A single outline entry."""

    # Numeric codes from the LSP SymbolKind enumeration
    LSP_KIND_CODES: ClassVar[dict[SymbolKind, int]] = {
        SymbolKind.NAMESPACE: 3,
        SymbolKind.CLASS: 5,
        SymbolKind.METHOD: 6,
        SymbolKind.FIELD: 8,
        SymbolKind.OTHER: 19,
    }

    name: str = Field(description="Display name of the symbol")
    kind: int = Field(description="LSP SymbolKind numeric code")
    range: LspRange = Field(description="Full extent of the symbol")
    selection_range: LspRange = Field(
        description="Part of the symbol to reveal when selected (its name or macro)"
    )
    children: list["DocumentSymbolItem"] = Field(
        default_factory=list, description="Nested symbols in source order"
    )

    @classmethod
    def from_symbol(cls, symbol: Symbol) -> "DocumentSymbolItem":
        """Convert an engine symbol and its subtree."""
        return cls(
            name=symbol.name,
            kind=cls.LSP_KIND_CODES[SymbolKind(symbol.kind)],
            range=LspRange.from_source_range(symbol.range),
            selection_range=LspRange.from_source_range(symbol.selection_range),
            children=[cls.from_symbol(child) for child in symbol.children],
        )

    def to_lsp(self) -> dict[str, Any]:
        """Return the LSP ``DocumentSymbol`` JSON shape."""
        return {
            "name": self.name,
            "kind": self.kind,
            "range": self.range.to_lsp(),
            "selectionRange": self.selection_range.to_lsp(),
            "children": [child.to_lsp() for child in self.children],
        }


class DocumentSymbolResponse(BaseModel):
    """Response from the document symbol request."""

    uri: str = Field(description="Document the outline belongs to")
    version: int = Field(description="Document version the outline was computed from")
    status: str = Field(default="ok", description="'ok', 'superseded' or 'error'")
    symbols: list[DocumentSymbolItem] = Field(
        default_factory=list, description="Top-level outline symbols"
    )
    parse_errors: list[str] = Field(
        default_factory=list, description="Locations where the parser recovered from errors"
    )
    message: str | None = Field(default=None, description="Explanation when status is not 'ok'")

    def to_lsp(self) -> list[dict[str, Any]]:
        """Return the LSP result payload (a list of DocumentSymbol)."""
        return [symbol.to_lsp() for symbol in self.symbols]
