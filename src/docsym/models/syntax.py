"""Syntax tree consumed by the extraction engine.

A closed set of node variants produced by a syntax-tree provider
(see docsym.parsing). Anything the engine does not need to tell
apart is folded into Other, including parse error nodes.
"""

from dataclasses import dataclass, field
from typing import Union

from docsym.models.symbols import SourceRange


@dataclass(frozen=True)
class ClassDecl:
    """``class Name < Superclass ... end``."""

    range: SourceRange
    name: str
    name_range: SourceRange
    superclass: str | None = None
    body: tuple["SyntaxNode", ...] = ()


@dataclass(frozen=True)
class ModuleDecl:
    """``module Name ... end``."""

    range: SourceRange
    name: str
    name_range: SourceRange
    body: tuple["SyntaxNode", ...] = ()


@dataclass(frozen=True)
class MethodDecl:
    """``def name ... end``, or ``def self.name`` with name ``self.name``."""

    range: SourceRange
    name: str
    name_range: SourceRange
    body: tuple["SyntaxNode", ...] = ()


@dataclass(frozen=True)
class KeywordArgument:
    """A ``key: value`` pair passed to a call."""

    key: str
    value: "SyntaxNode"


@dataclass(frozen=True)
class Block:
    """``do ... end`` or ``{ ... }`` attached to a call."""

    range: SourceRange
    body: tuple["SyntaxNode", ...] = ()


@dataclass(frozen=True)
class Call:
    """Method invocation, with or without a receiver."""

    range: SourceRange
    method: str
    message_range: SourceRange
    receiver: "SyntaxNode | None" = None
    arguments: tuple["SyntaxNode", ...] = ()
    keywords: tuple[KeywordArgument, ...] = ()
    block: Block | None = None


@dataclass(frozen=True)
class StringLiteral:
    """String literal, possibly built from adjacent fragments."""

    range: SourceRange
    fragments: tuple[str, ...] = ()
    interpolated: bool = False

    @property
    def content(self) -> str:
        """Concatenated text of all fragments."""
        return "".join(self.fragments)


@dataclass(frozen=True)
class SymbolLiteral:
    """``:name`` or ``:"name"``."""

    range: SourceRange
    value: str


@dataclass(frozen=True)
class ConstantRef:
    """Bare constant such as ``Foo``."""

    range: SourceRange
    name: str


@dataclass(frozen=True)
class ConstantPath:
    """Qualified constant such as ``Foo::Bar`` or ``::Foo``."""

    range: SourceRange
    segments: tuple[str, ...]
    rooted: bool = False

    @property
    def full_name(self) -> str:
        """Segments joined by ``::``, keeping a leading ``::`` when rooted."""
        joined = "::".join(self.segments)
        return f"::{joined}" if self.rooted else joined


@dataclass(frozen=True)
class Lambda:
    """``-> { ... }`` literal."""

    range: SourceRange
    body: tuple["SyntaxNode", ...] = ()


@dataclass(frozen=True)
class Other:
    """Any node kind the engine only traverses through."""

    range: SourceRange
    type: str
    children: tuple["SyntaxNode", ...] = field(default=())


SyntaxNode = Union[
    ClassDecl,
    ModuleDecl,
    MethodDecl,
    Call,
    StringLiteral,
    SymbolLiteral,
    ConstantRef,
    ConstantPath,
    Lambda,
    Block,
    Other,
]


def child_nodes(node: SyntaxNode) -> tuple[SyntaxNode, ...]:
    """Return the direct children of a node in source order."""
    if isinstance(node, (ClassDecl, ModuleDecl, MethodDecl, Lambda, Block)):
        return node.body
    if isinstance(node, Call):
        children: list[SyntaxNode] = []
        if node.receiver is not None:
            children.append(node.receiver)
        children.extend(node.arguments)
        children.extend(kw.value for kw in node.keywords)
        if node.block is not None:
            children.append(node.block)
        return tuple(children)
    if isinstance(node, Other):
        return node.children
    return ()
