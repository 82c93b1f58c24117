"""Tests for the data flow approximator."""

import pytest

from pyscope.analysis.data_flow import (
    DataFlowApproximator,
    SubstringMentionMatcher,
    TokenMentionMatcher,
    analyze_data_flow,
    get_mention_matcher,
)
from pyscope.analysis.line_index import index_lines


class TestDataFlowApproximator:
    """Test suite for DataFlowApproximator."""

    def test_used_variable(self):
        """Test a variable read on a later line."""
        result = analyze_data_flow(index_lines("x = 1\nprint(x)"))
        assert result.unused_variables == []
        record = result.variables[0]
        assert record.name == "x"
        assert record.declared_line == 1
        assert record.last_used_line == 2
        assert record.scope == "local"

    def test_unused_variable(self):
        """Test a variable that is never read."""
        result = analyze_data_flow(index_lines("x = 1\ny = 2\nprint(y)"))
        assert result.unused_variables == ["x"]

    def test_variables_in_declaration_order(self):
        """Test record ordering."""
        result = analyze_data_flow(index_lines("b = 1\na = 2\nprint(a, b)"))
        assert [record.name for record in result.variables] == ["b", "a"]

    def test_redeclaration_replaces_record(self):
        """Test that rebinding a name starts a fresh lifetime."""
        result = analyze_data_flow(index_lines("x = 1\nprint(x)\nx = 2"))
        assert len(result.variables) == 1
        assert result.variables[0].declared_line == 3
        assert result.unused_variables == ["x"]

    def test_substring_overcounts_usage(self):
        """Test that a longer identifier marks a shorter one as used."""
        source = "count = 0\ncounter = 5\nprint(counter)"
        result = analyze_data_flow(index_lines(source))
        assert result.unused_variables == []

    def test_token_matcher_exact_names(self):
        """Test that the token matcher needs an exact name."""
        source = "count = 0\ncounter = 5\nprint(counter)"
        result = analyze_data_flow(index_lines(source), matcher=TokenMentionMatcher())
        assert result.unused_variables == ["count"]

    def test_token_matcher_ignores_strings(self):
        """Test that a name inside a string literal is not a use."""
        source = 'x = 1\nprint("x")'
        assert analyze_data_flow(index_lines(source)).unused_variables == []
        result = analyze_data_flow(index_lines(source), matcher=TokenMentionMatcher())
        assert result.unused_variables == ["x"]

    def test_uninitialized_always_empty(self):
        """Test that uninitialized detection is not attempted."""
        result = analyze_data_flow(index_lines("print(undefined_name)"))
        assert result.uninitialized_variables == []

    def test_resource_leak(self):
        """Test open() without with or close()."""
        result = analyze_data_flow(index_lines("f = open('a.txt')\ndata = f.read()"))
        assert len(result.resource_leaks) == 1
        leak = result.resource_leaks[0]
        assert leak.line == 1
        assert leak.column == 5
        assert "context manager" in leak.description

    def test_with_statement_prevents_leak(self):
        """Test that a with block anywhere suppresses leak reports."""
        source = "with open('a.txt') as f:\n    data = f.read()"
        assert analyze_data_flow(index_lines(source)).resource_leaks == []

    def test_close_prevents_leak(self):
        """Test that an explicit close() suppresses leak reports."""
        source = "f = open('a.txt')\ndata = f.read()\nf.close()"
        assert analyze_data_flow(index_lines(source)).resource_leaks == []

    def test_default_matcher(self):
        """Test the default matcher is substring containment."""
        approximator = DataFlowApproximator(index_lines("x = 1"))
        assert isinstance(approximator.matcher, SubstringMentionMatcher)


class TestMentionMatchers:
    """Test suite for mention matchers."""

    def test_substring_excludes_assignment_form(self):
        """Test that `name =` is not a use."""
        matcher = SubstringMentionMatcher()
        assert not matcher.mentions("x = 1", "x")
        assert matcher.mentions("y = x + 1", "x")

    def test_token_matcher(self):
        """Test token matching on Name tokens."""
        matcher = TokenMentionMatcher()
        assert matcher.mentions("print(total)", "total")
        assert not matcher.mentions("print(totals)", "total")
        assert not matcher.mentions("# total", "total")

    def test_get_mention_matcher(self):
        """Test strategy lookup."""
        assert isinstance(get_mention_matcher("substring"), SubstringMentionMatcher)
        assert isinstance(get_mention_matcher("token"), TokenMentionMatcher)

    def test_unknown_strategy(self):
        """Test that an unknown strategy is rejected."""
        with pytest.raises(ValueError):
            get_mention_matcher("regex")
