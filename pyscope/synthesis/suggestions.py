"""Improvement suggestions from thresholds and line patterns.

This module provides:
- Decompose-function suggestion for high cyclomatic complexity
- Reduce-nesting suggestion for deep indentation
- enumerate() suggestion per range(len()) line
- Security suggestion per eval()/exec() line
"""

from __future__ import annotations

from typing import List

import structlog

from pyscope.analysis import patterns
from pyscope.analysis.line_index import SourceLine
from pyscope.models import ComplexityMetrics, Suggestion

logger = structlog.get_logger()


class SuggestionGenerator:
    """Map metrics and line patterns to suggestions, in discovery order."""

    def __init__(
        self,
        lines: List[SourceLine],
        complexity: ComplexityMetrics,
        complexity_threshold: int = 10,
        nesting_threshold: int = 3,
    ) -> None:
        self.lines = lines
        self.complexity = complexity
        self.complexity_threshold = complexity_threshold
        self.nesting_threshold = nesting_threshold
        self.suggestions: List[Suggestion] = []

    def generate(self) -> List[Suggestion]:
        self._suggest_decomposition()
        self._suggest_flatter_nesting()

        for line in self.lines:
            self._suggest_enumerate(line)
            self._suggest_safe_evaluation(line)

        logger.debug("suggestions_generated", count=len(self.suggestions))
        return self.suggestions

    def _suggest_decomposition(self) -> None:
        if self.complexity.cyclomatic_complexity <= self.complexity_threshold:
            return
        self.suggestions.append(
            Suggestion(
                line=1,
                category="best-practice",
                priority="high",
                title="High Cyclomatic Complexity",
                description="Break down complex functions into smaller, focused functions.",
                example=(
                    "def process_data():\n"
                    "    validate_input()\n"
                    "    transform_data()\n"
                    "    save_results()"
                ),
            )
        )

    def _suggest_flatter_nesting(self) -> None:
        if self.complexity.max_nesting_depth <= self.nesting_threshold:
            return
        self.suggestions.append(
            Suggestion(
                line=1,
                category="readability",
                priority="medium",
                title="Deep Nesting",
                description="Reduce nesting with early returns or guard clauses.",
                example="if not condition:\n    return\n# Continue with main logic",
            )
        )

    def _suggest_enumerate(self, line: SourceLine) -> None:
        if not patterns.is_index_iteration(line.stripped):
            return
        self.suggestions.append(
            Suggestion(
                line=line.number,
                category="optimization",
                priority="medium",
                title="Use enumerate() instead of range(len())",
                description="enumerate() is more Pythonic and efficient.",
                example="for i, item in enumerate(items):",
            )
        )

    def _suggest_safe_evaluation(self, line: SourceLine) -> None:
        if not patterns.has_dangerous_call(line.stripped):
            return
        self.suggestions.append(
            Suggestion(
                line=line.number,
                category="security",
                priority="high",
                title="Avoid eval() and exec()",
                description="These functions can execute arbitrary code and pose security risks.",
                example="Use ast.literal_eval() for safe evaluation of literals",
            )
        )


def generate_suggestions(
    lines: List[SourceLine],
    complexity: ComplexityMetrics,
    complexity_threshold: int = 10,
    nesting_threshold: int = 3,
) -> List[Suggestion]:
    """
    Generate suggestions for code improvement.

    Args:
        lines: Output of index_lines()
        complexity: Output of compute_complexity()
        complexity_threshold: Cyclomatic complexity above which to suggest decomposition
        nesting_threshold: Nesting depth above which to suggest flattening

    Returns:
        List of Suggestion objects; repeated patterns are not merged
    """
    return SuggestionGenerator(
        lines,
        complexity,
        complexity_threshold=complexity_threshold,
        nesting_threshold=nesting_threshold,
    ).generate()
