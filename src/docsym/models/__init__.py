"""Domain models for docsym."""

from docsym.models.responses import DocumentSymbolItem, DocumentSymbolResponse, LspRange
from docsym.models.symbols import Position, SourceRange, Symbol, SymbolKind
from docsym.models.syntax import (
    Block,
    Call,
    ClassDecl,
    ConstantPath,
    ConstantRef,
    KeywordArgument,
    Lambda,
    MethodDecl,
    ModuleDecl,
    Other,
    StringLiteral,
    SymbolLiteral,
    SyntaxNode,
    child_nodes,
)

__all__ = [
    "Block",
    "Call",
    "ClassDecl",
    "ConstantPath",
    "ConstantRef",
    "DocumentSymbolItem",
    "DocumentSymbolResponse",
    "KeywordArgument",
    "Lambda",
    "LspRange",
    "MethodDecl",
    "ModuleDecl",
    "Other",
    "Position",
    "SourceRange",
    "StringLiteral",
    "Symbol",
    "SymbolKind",
    "SymbolLiteral",
    "SyntaxNode",
    "child_nodes",
]
