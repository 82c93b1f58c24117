"""Line-heuristic analysis passes for pyscope."""

from .language_gate import LanguageGate, NotSupportedLanguage, accepts
from .line_index import LineKind, SourceLine, classify_line, index_lines
from .style_checker import StyleChecker, check_style
from .control_flow import ControlFlowExtractor, extract_control_flow
from .data_flow import (
    DataFlowApproximator,
    MentionMatcher,
    SubstringMentionMatcher,
    TokenMentionMatcher,
    analyze_data_flow,
    get_mention_matcher,
)
from .complexity import compute_complexity
from .quality import score_performance, score_quality, score_security
from .execution_simulator import ExecutionSimulator, simulate_execution

__all__ = [
    # Language gate
    "LanguageGate",
    "NotSupportedLanguage",
    "accepts",
    # Line index
    "LineKind",
    "SourceLine",
    "classify_line",
    "index_lines",
    # Style
    "StyleChecker",
    "check_style",
    # Control flow
    "ControlFlowExtractor",
    "extract_control_flow",
    # Data flow
    "DataFlowApproximator",
    "MentionMatcher",
    "SubstringMentionMatcher",
    "TokenMentionMatcher",
    "analyze_data_flow",
    "get_mention_matcher",
    # Complexity and quality
    "compute_complexity",
    "score_performance",
    "score_quality",
    "score_security",
    # Execution
    "ExecutionSimulator",
    "simulate_execution",
]
