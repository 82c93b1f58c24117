"""Main pipeline orchestrator for pyscope analysis.

This is the main entry point for analyzing Python source text.
"""

from __future__ import annotations

from typing import Optional

import structlog

from pyscope.analysis.complexity import compute_complexity
from pyscope.analysis.control_flow import extract_control_flow
from pyscope.analysis.data_flow import MentionMatcher, analyze_data_flow, get_mention_matcher
from pyscope.analysis.execution_simulator import simulate_execution
from pyscope.analysis.language_gate import LanguageGate
from pyscope.analysis.line_index import index_lines
from pyscope.analysis.quality import score_quality
from pyscope.analysis.style_checker import check_style
from pyscope.config import Settings, settings as default_settings
from pyscope.models import AnalysisReport, LogicalAnalysis
from pyscope.synthesis import compose_explanation, generate_suggestions

logger = structlog.get_logger()


class CodeAnalyzer:
    """
    Runs every pass over one source string.

    The analyzer holds configuration only. Each analyze() call builds its
    own line index and results, so one instance can serve concurrent callers.
    """

    def __init__(
        self,
        config: Optional[Settings] = None,
        gate: Optional[LanguageGate] = None,
        matcher: Optional[MentionMatcher] = None,
    ) -> None:
        """
        Initialize the analyzer.

        Args:
            config: Thresholds and mention strategy (module settings by default)
            gate: Language acceptance gate
            matcher: Data-flow usage matcher, overrides config.mention_strategy
        """
        self.config = config or default_settings
        self.gate = gate or LanguageGate()
        self.matcher = matcher or get_mention_matcher(self.config.mention_strategy)

    def analyze(self, source_code: str) -> AnalysisReport:
        """
        Run complete analysis on source code.

        Args:
            source_code: Source text to analyze

        Returns:
            Complete AnalysisReport

        Raises:
            NotSupportedLanguage: if the source does not look like Python
        """
        self.gate.require(source_code)

        lines = index_lines(source_code)
        logger.info("analysis_started", line_count=len(lines))

        issues = check_style(lines, max_line_length=self.config.max_line_length)
        control_flow = extract_control_flow(lines)
        data_flow = analyze_data_flow(lines, matcher=self.matcher)
        complexity = compute_complexity(lines)

        quality = score_quality(lines, complexity, issues)
        execution = simulate_execution(lines, issues)
        suggestions = generate_suggestions(
            lines,
            complexity,
            complexity_threshold=self.config.complexity_threshold,
            nesting_threshold=self.config.nesting_threshold,
        )
        explanation = compose_explanation(complexity, issues, quality, suggestions)

        report = AnalysisReport(
            issues=issues,
            logic=LogicalAnalysis(
                control_flow=control_flow,
                data_flow=data_flow,
                complexity=complexity,
            ),
            quality=quality,
            suggestions=suggestions,
            explanation=explanation,
            execution=execution,
        )

        logger.info(
            "analysis_complete",
            total_issues=len(issues),
            suggestions=len(suggestions),
            can_execute=execution.can_execute,
        )
        return report


def analyze(source_code: str, config: Optional[Settings] = None) -> AnalysisReport:
    """
    Analyze Python source with all passes.

    Args:
        source_code: Source text
        config: Optional settings override

    Returns:
        AnalysisReport

    Raises:
        NotSupportedLanguage: if the source does not look like Python
    """
    return CodeAnalyzer(config=config).analyze(source_code)
