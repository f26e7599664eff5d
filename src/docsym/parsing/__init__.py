"""Syntax-tree providers."""

from docsym.parsing.base import ParsedTree, PositionEncoding, PositionMapper, TreeSitterProvider
from docsym.parsing.ruby import RubySyntaxTreeProvider, RubyTreeConverter

__all__ = [
    "ParsedTree",
    "PositionEncoding",
    "PositionMapper",
    "RubySyntaxTreeProvider",
    "RubyTreeConverter",
    "TreeSitterProvider",
]
