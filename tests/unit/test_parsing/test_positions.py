"""Tests for byte column to client position mapping."""

import pytest

from docsym.parsing.base import PositionMapper
from docsym.parsing.ruby import RubySyntaxTreeProvider


class TestPositionMapper:
    """Tests for PositionMapper.column."""

    def test_ascii_is_unchanged(self) -> None:
        mapper = PositionMapper(b"class Foo\nend\n")
        assert mapper.column(0, 6) == 6

    @pytest.mark.parametrize(
        ("encoding", "expected"),
        [("utf-16", 5), ("utf-8", 6), ("utf-32", 5)],
    )
    def test_accented_character(self, encoding, expected: int) -> None:
        source = "café x".encode()
        mapper = PositionMapper(source, encoding)
        # byte offset of "x"
        assert mapper.column(0, 6) == expected

    @pytest.mark.parametrize(
        ("encoding", "expected"),
        [("utf-16", 2), ("utf-8", 4), ("utf-32", 1)],
    )
    def test_astral_character(self, encoding, expected: int) -> None:
        source = "😀x".encode()
        mapper = PositionMapper(source, encoding)
        assert mapper.column(0, 4) == expected

    def test_only_the_requested_line_counts(self) -> None:
        source = "# ééé\nclass Foo\n".encode()
        mapper = PositionMapper(source)
        assert mapper.column(1, 6) == 6

    def test_row_past_end(self) -> None:
        mapper = PositionMapper(b"x")
        assert mapper.column(5, 3) == 3


class TestProviderEncoding:
    """Ranges produced by the provider use the configured encoding."""

    def test_utf8_vs_utf16(self) -> None:
        source = 'class Foo; X = "é"; end\n'
        utf16 = RubySyntaxTreeProvider("utf-16").parse(source).root.children[0]
        utf8 = RubySyntaxTreeProvider("utf-8").parse(source).root.children[0]

        assert utf16.range.end.character == len(source.rstrip("\n"))
        assert utf8.range.end.character == len(source.rstrip("\n").encode())
        assert utf16.name_range == utf8.name_range
