"""Tests for complexity metrics."""

from pyscope.analysis.complexity import compute_complexity, is_decision_point
from pyscope.analysis.line_index import index_lines


class TestComplexity:
    """Test suite for compute_complexity."""

    def test_straight_line_code(self):
        """Test the baseline of one path."""
        metrics = compute_complexity(index_lines("x = 1"))
        assert metrics.cyclomatic_complexity == 1
        assert metrics.cognitive_complexity == 0
        assert metrics.lines_of_code == 1
        assert metrics.max_nesting_depth == 0

    def test_boolean_operator_counted_once(self):
        """Test that an `if` line with `and` is one decision point."""
        metrics = compute_complexity(index_lines("if a and b:\n    pass"))
        assert metrics.cyclomatic_complexity == 2
        assert metrics.cognitive_complexity == 1
        assert metrics.max_nesting_depth == 1
        assert metrics.lines_of_code == 2

    def test_boolean_operator_outside_branch(self):
        """Test an `and` in an assignment."""
        assert compute_complexity(index_lines("y = a and b")).cyclomatic_complexity == 2

    def test_comments_do_not_count(self):
        """Test that commented-out code is ignored."""
        metrics = compute_complexity(index_lines("# if a or b:\nx = 1"))
        assert metrics.cyclomatic_complexity == 1
        assert metrics.lines_of_code == 1

    def test_try_except_counted(self):
        """Test that try and except lines are decision points."""
        source = "try:\n    x = 1\nexcept ValueError:\n    pass"
        assert compute_complexity(index_lines(source)).cyclomatic_complexity == 3

    def test_else_is_not_a_decision(self):
        """Test that else adds no path."""
        assert not is_decision_point(index_lines("else:")[0])

    def test_nested_sample(self, complex_code):
        """Test metrics of a deeply nested function."""
        metrics = compute_complexity(index_lines(complex_code))
        assert metrics.cyclomatic_complexity == 9
        assert metrics.cognitive_complexity == 25
        assert metrics.max_nesting_depth == 4
        assert metrics.lines_of_code == 20

    def test_empty_source(self):
        """Test that empty input still has one path."""
        metrics = compute_complexity(index_lines(""))
        assert metrics.cyclomatic_complexity == 1
        assert metrics.lines_of_code == 0
