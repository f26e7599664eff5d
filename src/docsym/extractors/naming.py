"""Display names for DSL call arguments.

name_of() returns None when an argument cannot be named
statically; callers drop such arguments instead of inventing
a placeholder.
"""

from docsym.models.syntax import (
    Call,
    ConstantPath,
    ConstantRef,
    Lambda,
    StringLiteral,
    SymbolLiteral,
    SyntaxNode,
)

ANONYMOUS = "<anonymous>"


def constant_name(node: SyntaxNode | None) -> str | None:
    """Name of a constant or constant path, None for anything else."""
    if isinstance(node, ConstantRef):
        return node.name
    if isinstance(node, ConstantPath):
        return node.full_name
    return None


def name_of(node: SyntaxNode | None) -> str | None:
    """
    Map an argument node to a display name.

    Args:
        node: Argument node, or None when the argument is absent.

    Returns:
        The name, or None if the argument is suppressed
        (empty or interpolated strings, dynamic expressions).
    """
    if isinstance(node, StringLiteral):
        if node.interpolated:
            return None
        return node.content or None
    if isinstance(node, SymbolLiteral):
        return node.value or None
    if isinstance(node, (ConstantRef, ConstantPath)):
        return constant_name(node)
    if isinstance(node, Call):
        # Foo::Bar.new(...) is named after its receiver
        return constant_name(node.receiver)
    if isinstance(node, Lambda):
        return ANONYMOUS
    return None
