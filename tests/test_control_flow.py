"""Tests for control flow extraction."""

import pytest

from pyscope.analysis.control_flow import (
    ControlFlowExtractor,
    extract_condition,
    extract_control_flow,
    find_edge_cases,
    is_always_false,
    is_always_true,
)
from pyscope.analysis.line_index import index_lines


class TestConditions:
    """Test suite for condition helpers."""

    def test_extract_condition(self):
        """Test text between keyword and colon."""
        assert extract_condition("if x > 0:", "if") == "x > 0"

    def test_extract_condition_inline_body(self):
        """Test a one-line body after the colon."""
        assert extract_condition("if x: return y", "if") == "x"

    def test_extract_condition_without_colon(self):
        """Test a header missing its colon."""
        assert extract_condition("if x", "if") == ""

    @pytest.mark.parametrize("condition", ["True", "1", "42"])
    def test_always_true(self, condition):
        """Test constant-true conditions."""
        assert is_always_true(condition)
        assert not is_always_false(condition)

    @pytest.mark.parametrize("condition", ["False", "None", "[]", "{}", "()", "0"])
    def test_always_false(self, condition):
        """Test constant-false conditions."""
        assert is_always_false(condition)
        assert not is_always_true(condition)

    @pytest.mark.parametrize("condition", ["\u00b2", "\u0663"])
    def test_non_ascii_digits_are_neither(self, condition):
        """Test that Unicode digit characters are not numerals."""
        assert not is_always_true(condition)
        assert not is_always_false(condition)

    def test_very_long_numerals(self):
        """Test numerals longer than the int conversion limit."""
        assert is_always_true("1" * 5000)
        assert is_always_false("0" * 5000)
        assert is_always_true("0" * 4999 + "7")

    def test_variable_condition_is_neither(self):
        """Test a non-constant condition."""
        assert not is_always_true("x")
        assert not is_always_false("x")

    def test_edge_cases(self):
        """Test edge-case tagging order."""
        assert find_edge_cases("x == 1 and len(items) and y in seen") == [
            "equality comparison",
            "complex boolean logic",
            "empty collection check",
            "membership test",
        ]

    def test_no_edge_cases(self):
        """Test a plain comparison."""
        assert find_edge_cases("x > 0") == []


class TestControlFlowExtractor:
    """Test suite for ControlFlowExtractor."""

    def test_always_true_branch(self):
        """Test `if True:`."""
        result = extract_control_flow(index_lines("if True:\n    pass"))
        assert len(result.branches) == 1
        branch = result.branches[0]
        assert branch.line == 1
        assert branch.condition == "True"
        assert branch.always_true is True
        assert branch.always_false is False

    def test_elif_not_reported(self, complex_code):
        """Test that only `if` lines are branches."""
        result = extract_control_flow(index_lines(complex_code))
        assert len(result.branches) == 5
        assert all(branch.kind == "if" for branch in result.branches)

    def test_infinite_while(self):
        """Test `while True:` loops."""
        result = extract_control_flow(index_lines("while True:\n    pass"))
        assert len(result.loops) == 1
        assert result.loops[0].kind == "while"
        assert result.loops[0].issues == ["potential infinite loop"]
        assert len(result.infinite_loops) == 1
        assert result.infinite_loops[0].line == 1

    def test_while_one_is_infinite(self):
        """Test `while 1:` loops."""
        result = extract_control_flow(index_lines("while 1:\n    pass"))
        assert result.infinite_loops[0].description == (
            "Potential infinite loop with always-true condition"
        )

    def test_for_loop(self):
        """Test `for` loops and the range(len()) pattern."""
        result = extract_control_flow(index_lines("for i in range(len(a)):\n    pass"))
        loop = result.loops[0]
        assert loop.kind == "for"
        assert loop.condition == "i in range(len(a))"
        assert loop.issues == ["inefficient iteration pattern"]
        assert result.infinite_loops == []

    def test_unreachable_after_return(self):
        """Test a statement following return at the same depth."""
        result = extract_control_flow(index_lines("def f(x):\n    return x\n    print(x)"))
        assert [loc.line for loc in result.unreachable_code] == [3]
        assert result.unreachable_code[0].description == "Code after return statement is unreachable"

    def test_def_after_return_is_reachable(self):
        """Test that a following def is not flagged."""
        source = "def f(x):\n    return x\n\ndef other():\n    pass"
        assert extract_control_flow(index_lines(source)).unreachable_code == []

    def test_decorator_after_return_is_reachable(self):
        """Test that a following decorator is not flagged."""
        source = "class A:\n    def f(self):\n        return 1\n    @property\n    def g(self):\n        return 2"
        assert extract_control_flow(index_lines(source)).unreachable_code == []

    def test_dedented_line_after_return(self):
        """Test that a shallower statement is not flagged."""
        source = "def f(x):\n    if x:\n        return 1\n    return 0"
        assert extract_control_flow(index_lines(source)).unreachable_code == []

    def test_comments_skipped_in_lookahead(self):
        """Test that blank and comment lines are skipped."""
        source = "def f():\n    return 1\n    # note\n\n    x = 2"
        result = extract_control_flow(index_lines(source))
        assert [loc.line for loc in result.unreachable_code] == [5]

    def test_unusual_numeric_conditions(self):
        """Test that odd digit conditions are recorded instead of failing."""
        source = "if \u00b2:\n    pass\nif " + "1" * 5000 + ":\n    pass"
        branches = extract_control_flow(index_lines(source)).branches
        assert [branch.always_true for branch in branches] == [False, True]

    def test_branch_flags_never_both_true(self, complex_code):
        """Test the branch flag invariant across a real sample."""
        for branch in ControlFlowExtractor(index_lines(complex_code)).extract().branches:
            assert not (branch.always_true and branch.always_false)
