"""Tests for line splitting and classification."""

import pytest

from pyscope.analysis.line_index import (
    LineKind,
    classify_line,
    index_lines,
    leading_width,
    split_lines,
)


class TestClassifyLine:
    """Test suite for classify_line."""

    @pytest.mark.parametrize(
        "stripped, kind",
        [
            ("", LineKind.BLANK),
            ("# note", LineKind.COMMENT),
            ("def foo(a, b):", LineKind.FUNCTION_DEF),
            ("class Foo:", LineKind.CLASS_DEF),
            ("import os", LineKind.IMPORT),
            ("from typing import List", LineKind.IMPORT),
            ("if x > 0:", LineKind.IF),
            ("elif x < 0:", LineKind.ELIF),
            ("else:", LineKind.ELSE),
            ("while True:", LineKind.WHILE),
            ("for i in items:", LineKind.FOR),
            ("try:", LineKind.TRY),
            ("except ValueError:", LineKind.EXCEPT),
            ("return x", LineKind.RETURN),
            ("return", LineKind.RETURN),
            ("total = 0", LineKind.ASSIGNMENT),
            ("print(total)", LineKind.OTHER),
        ],
    )
    def test_kinds(self, stripped, kind):
        """Test each line shape maps to its kind."""
        assert classify_line(stripped) is kind

    def test_comparison_is_not_assignment(self):
        """Test that `x == 1` is not an assignment."""
        assert classify_line("x == 1") is LineKind.OTHER

    def test_attribute_assignment_is_not_assignment(self):
        """Test that only bare identifiers are assignment targets."""
        assert classify_line("self.x = 1") is LineKind.OTHER

    def test_augmented_assignment_is_other(self):
        """Test that `x += 1` is not an assignment."""
        assert classify_line("x += 1") is LineKind.OTHER

    def test_keyword_prefix_of_identifier(self):
        """Test that `returned = 1` is an assignment, not a return."""
        assert classify_line("returned = 1") is LineKind.ASSIGNMENT


class TestIndexLines:
    """Test suite for index_lines."""

    def test_numbers_are_one_based(self):
        """Test line numbering."""
        lines = index_lines("a = 1\nb = 2")
        assert [line.number for line in lines] == [1, 2]

    def test_trailing_newline_gives_empty_line(self):
        """Test that a trailing newline produces a final blank line."""
        lines = index_lines("a = 1\n")
        assert len(lines) == 2
        assert lines[-1].kind is LineKind.BLANK

    def test_empty_source_is_one_blank_line(self):
        """Test the empty string."""
        lines = index_lines("")
        assert len(lines) == 1
        assert lines[0].kind is LineKind.BLANK

    def test_crlf_is_normalized(self):
        """Test Windows and old Mac line endings."""
        assert split_lines("a\r\nb\rc") == ["a", "b", "c"]

    def test_indent_and_level(self):
        """Test indentation width and level."""
        line = index_lines("if x:\n        y = 1")[1]
        assert line.indent == 8
        assert line.indent_level == 2
        assert line.stripped == "y = 1"

    def test_tab_counts_as_one(self):
        """Test that leading tabs count one column each."""
        assert leading_width("\tx = 1") == 1

    def test_name_and_value(self):
        """Test identifier extraction for assignments and headers."""
        lines = index_lines("count = len(items)\ndef run(x):\nclass Shape:\nimport json")
        assert lines[0].name == "count"
        assert lines[0].value == "len(items)"
        assert lines[1].name == "run"
        assert lines[2].name == "Shape"
        assert lines[3].name == "json"

    def test_name_column(self):
        """Test identifier columns on indented headers."""
        lines = index_lines("def d():\n    def e(x):\n    total = 1")
        assert [line.name_column for line in lines] == [5, 9, 5]

    def test_value_only_for_assignments(self):
        """Test that non-assignment lines have no value."""
        line = index_lines("print(1)")[0]
        assert line.value is None
        assert line.name is None

    def test_is_code(self):
        """Test blank and comment lines are not code."""
        lines = index_lines("# c\n\nx = 1")
        assert [line.is_code for line in lines] == [False, False, True]
