"""Outline symbol models.

These are the output of the extraction engine. Serialization into
a host protocol's response shape lives in docsym.handlers.
"""

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, Field


class SymbolKind(StrEnum):
    """Kinds of outline symbols."""

    NAMESPACE = "namespace"
    CLASS = "class"
    METHOD = "method"
    FIELD = "field"
    OTHER = "other"


class Position(BaseModel):
    """Zero-based line/character position."""

    model_config = ConfigDict(frozen=True)

    line: int = Field(ge=0)
    character: int = Field(ge=0)

    def __le__(self, other: "Position") -> bool:
        return (self.line, self.character) <= (other.line, other.character)


class SourceRange(BaseModel):
    """Half-open span between two positions."""

    model_config = ConfigDict(frozen=True)

    start: Position
    end: Position

    @classmethod
    def from_points(
        cls,
        start_line: int,
        start_character: int,
        end_line: int,
        end_character: int,
    ) -> "SourceRange":
        """Build a range from four coordinates."""
        return cls(
            start=Position(line=start_line, character=start_character),
            end=Position(line=end_line, character=end_character),
        )

    def contains(self, other: "SourceRange") -> bool:
        """Check whether other lies entirely within this range."""
        return self.start <= other.start and other.end <= self.end


class Symbol(BaseModel):
    """
    A named entry in a document outline.

    Children are kept in source order. A symbol's range always
    encloses the ranges of its children.
    """

    name: str
    kind: SymbolKind
    range: SourceRange
    selection_range: SourceRange
    children: list["Symbol"] = Field(default_factory=list)

    def walk(self) -> list["Symbol"]:
        """Return this symbol and all descendants in pre-order."""
        found = [self]
        for child in self.children:
            found.extend(child.walk())
        return found
