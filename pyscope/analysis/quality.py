"""Quality scores built from complexity, issues and penalty scans.

Each score starts at 100 and loses a fixed amount per finding. Penalties
are not deduplicated: a line matching two patterns pays for both. Scores
are clamped to [0, 100].
"""

from __future__ import annotations

from typing import Callable, List, Tuple

import structlog

from pyscope.analysis import patterns
from pyscope.analysis.line_index import LOOP_KINDS, SourceLine
from pyscope.models import ComplexityMetrics, Issue, QualityScores

logger = structlog.get_logger()

LinePenalty = Tuple[str, Callable[[SourceLine], bool], int]

PERFORMANCE_PENALTIES: Tuple[LinePenalty, ...] = (
    ("index_iteration", lambda line: patterns.is_index_iteration(line.stripped), 5),
    ("string_concat_in_loop", lambda line: patterns.is_string_concat_in_loop(line.stripped), 10),
    ("append_in_loop", lambda line: patterns.is_append_in_loop(line.stripped), 8),
    ("list_of_range", lambda line: patterns.is_list_of_range(line.stripped), 3),
    ("nested_loop", lambda line: line.kind in LOOP_KINDS and line.indent_level > 1, 15),
)

SECURITY_PENALTIES: Tuple[LinePenalty, ...] = (
    ("eval", lambda line: patterns.EVAL_RE.search(line.stripped) is not None, 30),
    ("exec", lambda line: patterns.EXEC_RE.search(line.stripped) is not None, 30),
    ("unchecked_input", lambda line: patterns.is_unchecked_input(line.stripped), 10),
    ("unsafe_deserialization", lambda line: patterns.is_unsafe_deserialization(line.stripped), 20),
    ("shell_subprocess", lambda line: patterns.is_shell_subprocess(line.stripped), 25),
    ("os_command", lambda line: patterns.is_os_command(line.stripped), 20),
)


def clamp_score(value: int) -> int:
    return max(0, min(100, value))


def penalty_total(lines: List[SourceLine], penalties: Tuple[LinePenalty, ...]) -> int:
    """Sum every penalty for every line it matches."""
    return sum(
        amount
        for line in lines
        for _name, matches, amount in penalties
        if matches(line)
    )


def score_performance(lines: List[SourceLine]) -> int:
    return clamp_score(100 - penalty_total(lines, PERFORMANCE_PENALTIES))


def score_security(lines: List[SourceLine]) -> int:
    return clamp_score(100 - penalty_total(lines, SECURITY_PENALTIES))


def score_quality(
    lines: List[SourceLine],
    complexity: ComplexityMetrics,
    issues: List[Issue],
) -> QualityScores:
    """
    Combine upstream results into five quality dimensions.

    Args:
        lines: Output of index_lines()
        complexity: Output of compute_complexity()
        issues: Output of the style checker

    Returns:
        QualityScores, each value in [0, 100]
    """
    error_count = sum(1 for issue in issues if issue.severity == "error")
    style_count = sum(1 for issue in issues if issue.category == "style")

    scores = QualityScores(
        maintainability=clamp_score(
            100 - 5 * complexity.cyclomatic_complexity - 10 * error_count
        ),
        readability=clamp_score(100 - 8 * complexity.max_nesting_depth - 3 * style_count),
        testability=clamp_score(100 - 3 * complexity.cognitive_complexity),
        performance=score_performance(lines),
        security=score_security(lines),
    )
    logger.debug("quality_scored", **scores.model_dump())
    return scores
