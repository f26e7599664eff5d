"""Base classes for Tree-sitter backed syntax-tree providers."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Literal

from loguru import logger
from tree_sitter import Language, Node, Parser
from tree_sitter_language_pack import get_language, get_parser

from docsym.errors import SyntaxTreeError
from docsym.models.symbols import Position, SourceRange
from docsym.models.syntax import SyntaxNode

PositionEncoding = Literal["utf-16", "utf-8", "utf-32"]


@dataclass
class ParsedTree:
    """Provider output: the converted tree plus recovered parse errors."""

    root: SyntaxNode
    language: str
    parse_errors: list[str] = field(default_factory=list)

    @property
    def has_errors(self) -> bool:
        """True if the parser had to recover from errors."""
        return bool(self.parse_errors)


def _collect_parse_errors(node: Node, uri: str) -> list[str]:
    """Walk the AST and collect ERROR/MISSING node locations."""
    errors: list[str] = []
    stack = [node]
    while stack:
        current = stack.pop()
        start = current.start_point
        if current.type == "ERROR":
            errors.append(
                f"Parse error in {uri}:{start[0] + 1}:{start[1] + 1}"
                f" (len={current.end_byte - current.start_byte})"
            )
        elif current.is_missing:
            errors.append(f"Missing '{current.type}' in {uri}:{start[0] + 1}:{start[1] + 1}")
        else:
            # Descend only into subtrees that contain an error
            stack.extend(reversed([c for c in current.children if c.has_error or c.is_missing]))
    return errors


class PositionMapper:
    """Converts tree-sitter byte columns into the client's position encoding."""

    def __init__(self, source: bytes, encoding: PositionEncoding = "utf-16") -> None:
        self._lines = source.split(b"\n")
        self._encoding = encoding

    def column(self, row: int, byte_column: int) -> int:
        """Return the column of a byte offset within a line."""
        if self._encoding == "utf-8" or row >= len(self._lines):
            return byte_column
        prefix = self._lines[row][:byte_column]
        if prefix.isascii():
            return byte_column
        text = prefix.decode("utf-8", errors="replace")
        if self._encoding == "utf-32":
            return len(text)
        return len(text.encode("utf-16-le", errors="surrogatepass")) // 2

    def range_of(self, node: Node) -> SourceRange:
        """Return the range covered by a node."""
        start_row, start_col = node.start_point
        end_row, end_col = node.end_point
        return SourceRange(
            start=Position(line=start_row, character=self.column(start_row, start_col)),
            end=Position(line=end_row, character=self.column(end_row, end_col)),
        )


class TreeSitterProvider(ABC):
    """
    Base class for Tree-sitter based syntax-tree providers.

    Provides:
    - Lazy parser initialization
    - Parse error collection
    - Position mapping for converters
    """

    def __init__(self, position_encoding: PositionEncoding = "utf-16") -> None:
        """Initialize provider."""
        self._parser: Parser | None = None
        self._language: Language | None = None
        self.position_encoding: PositionEncoding = position_encoding

    @abstractmethod
    def get_language_name(self) -> str:
        """Return tree-sitter language identifier."""
        ...

    @abstractmethod
    def _convert(self, root: Node, source: bytes, positions: PositionMapper) -> SyntaxNode:
        """Language-specific conversion of the tree-sitter tree."""
        ...

    def parse(self, source: str | bytes, uri: str = "<memory>") -> ParsedTree:
        """Parse source text and convert it into a SyntaxNode tree.

        Malformed input never raises: the converted tree keeps ERROR
        placeholders and their locations are reported in parse_errors.

        Raises:
            SyntaxTreeError: If the grammar cannot be loaded.
        """
        # Lazy initialization
        if self._parser is None:
            self._init_parser()

        # At this point, _parser must be initialized
        if self._parser is None:
            raise SyntaxTreeError("Parser not initialized after _init_parser()", uri)

        data = source.encode("utf-8") if isinstance(source, str) else source
        tree = self._parser.parse(data)
        root = self._convert(tree.root_node, data, PositionMapper(data, self.position_encoding))

        parsed = ParsedTree(root=root, language=self.get_language_name())
        if tree.root_node.has_error:
            parsed.parse_errors.extend(_collect_parse_errors(tree.root_node, uri))
            logger.debug("Recovered from {} parse error(s) in {}", len(parsed.parse_errors), uri)
        return parsed

    def _init_parser(self) -> None:
        """Initialize tree-sitter parser for this language."""
        lang_name = self.get_language_name()
        try:
            self._language = get_language(lang_name)  # type: ignore[arg-type]
            self._parser = get_parser(lang_name)  # type: ignore[arg-type]
        except LookupError as e:
            raise SyntaxTreeError(f"Grammar not available for {lang_name}: {e}") from e

