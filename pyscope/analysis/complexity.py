"""Code complexity metrics from line shape and indentation.

Indentation width is the only nesting signal, so inconsistent indentation
skews cognitive complexity and nesting depth.
"""

from typing import List

import structlog

from pyscope.analysis.line_index import BRANCH_KINDS, EXCEPTION_KINDS, LOOP_KINDS, LineKind, SourceLine
from pyscope.models import ComplexityMetrics

logger = structlog.get_logger()

DECISION_KINDS = BRANCH_KINDS | LOOP_KINDS | EXCEPTION_KINDS


def is_decision_point(line: SourceLine) -> bool:
    """
    Check whether a line adds a path through the code.

    Branch and loop openers, try/except lines and lines using a boolean
    `and`/`or` each count once, however many of these a line contains.
    """
    if line.kind in DECISION_KINDS:
        return True
    if line.kind is LineKind.COMMENT:
        return False
    return " and " in line.stripped or " or " in line.stripped


def compute_complexity(lines: List[SourceLine]) -> ComplexityMetrics:
    """
    Compute line-heuristic complexity metrics.

    Args:
        lines: Output of index_lines()

    Returns:
        ComplexityMetrics with cyclomatic complexity >= 1
    """
    cyclomatic = 1
    cognitive = 0
    max_nesting = 0

    for line in lines:
        max_nesting = max(max_nesting, line.indent_level)
        if is_decision_point(line):
            cyclomatic += 1
            cognitive += 1 + line.indent_level

    lines_of_code = sum(1 for line in lines if line.is_code)

    logger.debug(
        "complexity_computed",
        cyclomatic=cyclomatic,
        cognitive=cognitive,
        max_nesting=max_nesting,
    )
    return ComplexityMetrics(
        cyclomatic_complexity=cyclomatic,
        cognitive_complexity=cognitive,
        lines_of_code=lines_of_code,
        max_nesting_depth=max_nesting,
    )
