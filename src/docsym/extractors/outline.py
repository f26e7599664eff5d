"""Document outline extraction.

Walks a syntax tree depth-first and produces the symbol hierarchy
shown in an editor outline: classes and modules open scopes, method
definitions and recognized DSL calls become leaves of the innermost
scope. The walk is pure; it neither logs nor raises. It uses an
explicit work stack, so tree depth is bounded by memory only.
"""

from docsym.extractors.builder import SymbolTreeBuilder
from docsym.extractors.classifier import (
    AttributeMacro,
    LifecycleCallback,
    Recognition,
    TestDeclaration,
    Unrecognized,
    classify,
)
from docsym.extractors.dsl_table import DEFAULT_DSL_TABLE, DslTable
from docsym.extractors.naming import ANONYMOUS, name_of
from docsym.models.symbols import Symbol, SymbolKind
from docsym.models.syntax import (
    Call,
    ClassDecl,
    MethodDecl,
    ModuleDecl,
    StringLiteral,
    SymbolLiteral,
    SyntaxNode,
    child_nodes,
)


def extract_symbols(root: SyntaxNode, table: DslTable = DEFAULT_DSL_TABLE) -> list[Symbol]:
    """
    Build the outline of a syntax tree.

    Args:
        root: Root node from a syntax-tree provider. Trees containing
            parse error placeholders yield a partial outline.
        table: Recognized DSL macros.

    Returns:
        Top-level symbols in source order.
    """
    walker = _OutlineWalker(table)
    walker.run(root)
    return walker.builder.roots


# Work-stack marker: close the innermost scope
_POP_SCOPE = object()


class _OutlineWalker:
    """Single-use traversal state for one extraction."""

    def __init__(self, table: DslTable) -> None:
        self.table = table
        self.builder = SymbolTreeBuilder()
        self._pending: list[object] = []

    def run(self, root: SyntaxNode) -> None:
        self._pending.append(root)
        while self._pending:
            item = self._pending.pop()
            if item is _POP_SCOPE:
                self.builder.pop_scope()
            else:
                self.visit(item)  # type: ignore[arg-type]

    def visit(self, node: SyntaxNode) -> None:
        if isinstance(node, ClassDecl):
            self._visit_container(node, SymbolKind.CLASS, node.superclass)
        elif isinstance(node, ModuleDecl):
            self._visit_container(node, SymbolKind.NAMESPACE, None)
        elif isinstance(node, MethodDecl):
            self.builder.attach_leaf(
                Symbol(
                    name=node.name,
                    kind=SymbolKind.METHOD,
                    range=node.range,
                    selection_range=node.name_range,
                )
            )
        elif isinstance(node, Call):
            self._visit_call(node)
        else:
            self._schedule_children(node)

    def _schedule_children(self, node: SyntaxNode) -> None:
        # Reversed so children are popped in source order
        self._pending.extend(reversed(child_nodes(node)))

    def _visit_container(
        self,
        node: ClassDecl | ModuleDecl,
        kind: SymbolKind,
        superclass: str | None,
    ) -> None:
        symbol = Symbol(
            name=node.name,
            kind=kind,
            range=node.range,
            selection_range=node.name_range,
        )
        self.builder.attach(symbol)
        self.builder.push_scope(symbol, superclass)
        self._pending.append(_POP_SCOPE)
        self._schedule_children(node)

    def _visit_call(self, call: Call) -> None:
        scope = self.builder.current_scope()
        superclass = scope.superclass if scope else None
        recognition = classify(call, superclass, self.table)

        if isinstance(recognition, Unrecognized):
            self._schedule_children(call)
            return

        for symbol in _symbols_for(recognition):
            self.builder.attach_leaf(symbol)


def _symbols_for(recognition: Recognition) -> list[Symbol]:
    """Synthesize the leaf symbols a recognized call contributes."""
    call = recognition.call

    if isinstance(recognition, TestDeclaration):
        name = name_of(recognition.name_arg)
        if name is None:
            return []
        return [
            Symbol(
                name=name,
                kind=SymbolKind.METHOD,
                range=call.range,
                selection_range=call.message_range,
            )
        ]

    if isinstance(recognition, LifecycleCallback):
        if recognition.arguments:
            names = [name_of(arg) for arg in recognition.arguments]
        elif recognition.block is not None:
            names = [ANONYMOUS]
        else:
            names = []
        return [
            Symbol(
                name=f"{recognition.macro}({name})",
                kind=SymbolKind.METHOD,
                range=call.range,
                selection_range=call.message_range,
            )
            for name in names
            if name is not None
        ]

    if isinstance(recognition, AttributeMacro):
        symbols = []
        for arg in recognition.arguments:
            if not isinstance(arg, (SymbolLiteral, StringLiteral)):
                continue
            name = name_of(arg)
            if name is None:
                continue
            symbols.append(
                Symbol(name=name, kind=SymbolKind.FIELD, range=arg.range, selection_range=arg.range)
            )
        return symbols

    return []
