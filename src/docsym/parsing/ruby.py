"""Ruby syntax-tree provider using Tree-sitter.

Converts tree-sitter-ruby trees into docsym SyntaxNode trees:
- class / module / method / singleton_method declarations
- calls, with positional arguments, ``key: value`` pairs and blocks
- string, symbol, constant and scope_resolution literals
- lambdas and blocks
Everything else becomes Other and keeps its named children, so
declarations nested in control flow stay reachable.
"""

from typing import ClassVar

from tree_sitter import Node

from docsym.models.symbols import SourceRange
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
)
from docsym.parsing.base import PositionMapper, TreeSitterProvider


class RubySyntaxTreeProvider(TreeSitterProvider):
    """Ruby provider for the outline engine."""

    def get_language_name(self) -> str:
        """Return tree-sitter language name."""
        return "ruby"

    def _convert(self, root: Node, source: bytes, positions: PositionMapper) -> SyntaxNode:
        """Convert the program node."""
        return RubyTreeConverter(source, positions).convert_tree(root)


class RubyTreeConverter:
    """
    Per-parse conversion of tree-sitter-ruby nodes.

    Holds the source bytes and position mapper for one parse;
    create a new converter for every tree. Nodes are converted
    children first, so a parent only looks up its converted
    children and deeply nested expressions never recurse.
    """

    # Nodes that carry no structure for the outline
    _SKIPPED_TYPES: ClassVar[set[str]] = {"comment", "heredoc_body"}

    # Wrappers whose statements are spliced into the enclosing body
    _BODY_TYPES: ClassVar[set[str]] = {"body_statement", "block_body"}

    _STRING_PART_TYPES: ClassVar[set[str]] = {"string_content", "escape_sequence"}

    def __init__(self, source: bytes, positions: PositionMapper) -> None:
        self.source = source
        self.positions = positions
        self._converted: dict[int, SyntaxNode] = {}

    # =========================================================================
    # Dispatch
    # =========================================================================

    def convert_tree(self, root: Node) -> SyntaxNode:
        """Convert a whole tree, bottom-up."""
        for node in _post_order(root):
            self._converted[node.id] = self._convert_node(node)
        return self._converted[root.id]

    def convert(self, node: Node) -> SyntaxNode:
        """Return the converted form of a node."""
        converted = self._converted.get(node.id)
        if converted is None:
            converted = self._convert_node(node)
        return converted

    def _convert_node(self, node: Node) -> SyntaxNode:  # noqa: PLR0911
        node_type = node.type

        if node_type == "class":
            return self._class(node) or self._other(node)
        if node_type == "module":
            return self._module(node) or self._other(node)
        if node_type in ("method", "singleton_method"):
            return self._method(node) or self._other(node)
        if node_type == "call":
            return self._call(node) or self._other(node)
        if node_type == "string":
            return self._string(node, [node])
        if node_type == "chained_string":
            return self._string(node, [c for c in node.named_children if c.type == "string"])
        if node_type == "simple_symbol":
            return SymbolLiteral(range=self._range(node), value=self._text(node)[1:])
        if node_type == "delimited_symbol":
            return self._delimited_symbol(node)
        if node_type == "constant":
            return ConstantRef(range=self._range(node), name=self._text(node))
        if node_type == "scope_resolution":
            return self._constant_path(node) or self._other(node)
        if node_type == "lambda":
            return Lambda(range=self._range(node), body=self._lambda_body(node))
        if node_type in ("do_block", "block"):
            return self._block(node)
        return self._other(node)

    def _other(self, node: Node) -> Other:
        return Other(range=self._range(node), type=node.type, children=self._statements(node))

    # =========================================================================
    # Declarations
    # =========================================================================

    def _class(self, node: Node) -> ClassDecl | None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None

        superclass = None
        superclass_node = node.child_by_field_name("superclass") or self._find(node, "superclass")
        if superclass_node is not None and superclass_node.named_children:
            superclass = self._text(superclass_node.named_children[0])

        return ClassDecl(
            range=self._range(node),
            name=self._text(name_node),
            name_range=self._range(name_node),
            superclass=superclass,
            body=self._declaration_body(node, skip=(name_node, superclass_node)),
        )

    def _module(self, node: Node) -> ModuleDecl | None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None
        return ModuleDecl(
            range=self._range(node),
            name=self._text(name_node),
            name_range=self._range(name_node),
            body=self._declaration_body(node, skip=(name_node,)),
        )

    def _method(self, node: Node) -> MethodDecl | None:
        name_node = node.child_by_field_name("name")
        if name_node is None:
            return None

        name = self._text(name_node)
        name_range = self._range(name_node)
        object_node = None
        if node.type == "singleton_method":
            # def self.name
            object_node = node.child_by_field_name("object")
            if object_node is not None:
                name = f"{self._text(object_node)}.{name}"
                object_range = self._range(object_node)
                name_range = SourceRange(start=object_range.start, end=name_range.end)

        return MethodDecl(
            range=self._range(node),
            name=name,
            name_range=name_range,
            body=self._declaration_body(
                node,
                skip=(name_node, object_node, node.child_by_field_name("parameters")),
            ),
        )

    def _declaration_body(
        self, node: Node, skip: tuple[Node | None, ...]
    ) -> tuple[SyntaxNode, ...]:
        skipped = {n.id for n in skip if n is not None}
        body: list[SyntaxNode] = []
        for child in node.named_children:
            if child.id in skipped:
                continue
            body.extend(self._statement(child))
        return tuple(body)

    # =========================================================================
    # Calls
    # =========================================================================

    def _call(self, node: Node) -> Call | None:
        method_node = node.child_by_field_name("method")
        if method_node is None:
            return None

        arguments: list[SyntaxNode] = []
        keywords: list[KeywordArgument] = []
        arguments_node = node.child_by_field_name("arguments")
        if arguments_node is not None:
            for arg in arguments_node.named_children:
                if arg.type in self._SKIPPED_TYPES:
                    continue
                if arg.type == "pair":
                    keyword = self._keyword(arg)
                    if keyword is not None:
                        keywords.append(keyword)
                    continue
                arguments.append(self.convert(arg))

        receiver_node = node.child_by_field_name("receiver")
        block_node = node.child_by_field_name("block")

        return Call(
            range=self._range(node),
            method=self._text(method_node),
            message_range=self._range(method_node),
            receiver=self.convert(receiver_node) if receiver_node is not None else None,
            arguments=tuple(arguments),
            keywords=tuple(keywords),
            block=self._block(block_node) if block_node is not None else None,
        )

    def _keyword(self, node: Node) -> KeywordArgument | None:
        key_node = node.child_by_field_name("key")
        value_node = node.child_by_field_name("value")
        if key_node is None or value_node is None:
            return None
        key = self._text(key_node)
        if key_node.type == "simple_symbol":
            key = key[1:]
        return KeywordArgument(key=key.rstrip(":"), value=self.convert(value_node))

    def _block(self, node: Node) -> Block:
        params_node = node.child_by_field_name("parameters") or self._find(
            node, "block_parameters"
        )
        return Block(
            range=self._range(node),
            body=self._declaration_body(node, skip=(params_node,)),
        )

    def _lambda_body(self, node: Node) -> tuple[SyntaxNode, ...]:
        body_node = node.child_by_field_name("body")
        if body_node is None:
            return ()
        return self._block(body_node).body

    # =========================================================================
    # Literals
    # =========================================================================

    def _string(self, node: Node, pieces: list[Node]) -> StringLiteral:
        fragments: list[str] = []
        interpolated = False
        for piece in pieces:
            parts: list[str] = []
            for child in piece.named_children:
                if child.type == "interpolation":
                    interpolated = True
                elif child.type in self._STRING_PART_TYPES:
                    parts.append(self._text(child))
            fragments.append("".join(parts))
        return StringLiteral(
            range=self._range(node),
            fragments=tuple(fragments),
            interpolated=interpolated,
        )

    def _delimited_symbol(self, node: Node) -> SyntaxNode:
        if any(c.type == "interpolation" for c in node.named_children):
            return self._other(node)
        value = "".join(
            self._text(c) for c in node.named_children if c.type in self._STRING_PART_TYPES
        )
        return SymbolLiteral(range=self._range(node), value=value)

    def _constant_path(self, node: Node) -> ConstantPath | None:
        resolved = self._constant_segments(node)
        if resolved is None:
            return None
        segments, rooted = resolved
        return ConstantPath(range=self._range(node), segments=tuple(segments), rooted=rooted)

    def _constant_segments(self, node: Node) -> tuple[list[str], bool] | None:
        """Segments of a constant path and whether it starts with ``::``.

        Returns None when any part is not a constant (e.g. ``foo::Bar``).
        """
        # Collected right to left while following the scope chain
        reversed_segments: list[str] = []
        current = node
        while True:
            name_node = current.child_by_field_name("name")
            if name_node is None or name_node.type != "constant":
                return None
            reversed_segments.append(self._text(name_node))

            scope_node = current.child_by_field_name("scope")
            if scope_node is None:
                return reversed_segments[::-1], True
            if scope_node.type == "constant":
                reversed_segments.append(self._text(scope_node))
                return reversed_segments[::-1], False
            if scope_node.type != "scope_resolution":
                return None
            scope = self._converted.get(scope_node.id)
            if isinstance(scope, ConstantPath):
                return [*scope.segments, *reversed(reversed_segments)], scope.rooted
            if scope is not None:
                return None
            current = scope_node

    # =========================================================================
    # Helpers
    # =========================================================================

    def _statements(self, node: Node) -> tuple[SyntaxNode, ...]:
        converted: list[SyntaxNode] = []
        for child in node.named_children:
            converted.extend(self._statement(child))
        return tuple(converted)

    def _statement(self, node: Node) -> list[SyntaxNode]:
        """Convert a child, splicing body wrappers and dropping comments."""
        if node.type in self._SKIPPED_TYPES:
            return []
        if node.type in self._BODY_TYPES:
            return list(self._statements(node))
        return [self.convert(node)]

    def _find(self, node: Node, type_name: str) -> Node | None:
        """Find first child of type."""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    def _text(self, node: Node) -> str:
        """Get text content of a node."""
        return self.source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    def _range(self, node: Node) -> SourceRange:
        return self.positions.range_of(node)


def _post_order(root: Node) -> list[Node]:
    """Named nodes of a tree, every node after all of its descendants."""
    order: list[Node] = []
    stack = [root]
    while stack:
        node = stack.pop()
        order.append(node)
        stack.extend(node.named_children)
    order.reverse()
    return order
