"""Control flow extraction from line prefixes.

Only ``if`` lines are reported as branches (``elif`` is not folded in),
and ``while``/``for`` lines as loops. Unreachable code is a single
lookahead after ``return``, not a reachability analysis.
"""

from __future__ import annotations

import re
from typing import List, Optional

import structlog

from pyscope.analysis import patterns
from pyscope.analysis.line_index import LineKind, SourceLine
from pyscope.models import Branch, CodeLocation, ControlFlowAnalysis, Loop

logger = structlog.get_logger()

ALWAYS_FALSE_CONDITIONS = frozenset({"False", "None", "[]", "{}", "()"})
INFINITE_CONDITIONS = frozenset({"True", "1"})
NUMERAL_RE = re.compile(r"[0-9]+")


def extract_condition(stripped: str, keyword: str) -> str:
    """
    Extract the text between a block keyword and its block-opening colon.

    Args:
        stripped: Stripped line starting with the keyword
        keyword: "if", "while" or "for"

    Returns:
        Condition text, empty string if no colon is found
    """
    trailing = re.match(rf"{keyword}\s+(.+):\s*$", stripped)
    if trailing:
        return trailing.group(1).strip()
    # One-line bodies such as `if x: return y`
    inline = re.match(rf"{keyword}\s+(.+?):", stripped)
    return inline.group(1).strip() if inline else ""


def _is_numeral(condition: str) -> bool:
    return NUMERAL_RE.fullmatch(condition) is not None


def is_always_true(condition: str) -> bool:
    if condition == "True":
        return True
    return _is_numeral(condition) and condition.strip("0") != ""


def is_always_false(condition: str) -> bool:
    if condition in ALWAYS_FALSE_CONDITIONS:
        return True
    return _is_numeral(condition) and condition.strip("0") == ""


def find_edge_cases(condition: str) -> List[str]:
    """Tag the kinds of edge cases a condition should be tested for."""
    edge_cases = []
    if "==" in condition or "!=" in condition:
        edge_cases.append("equality comparison")
    if patterns.BOOLEAN_OPERATOR_RE.search(condition):
        edge_cases.append("complex boolean logic")
    if "len(" in condition:
        edge_cases.append("empty collection check")
    if patterns.MEMBERSHIP_RE.search(condition):
        edge_cases.append("membership test")
    return edge_cases


def find_loop_issues(condition: str, kind: str) -> List[str]:
    issues = []
    if kind == "while" and condition in INFINITE_CONDITIONS:
        issues.append("potential infinite loop")
    if "len(" in condition and "range(" in condition:
        issues.append("inefficient iteration pattern")
    return issues


class ControlFlowExtractor:
    """Single forward pass collecting branches, loops and anomalies."""

    def __init__(self, lines: List[SourceLine]) -> None:
        self.lines = lines
        self.branches: List[Branch] = []
        self.loops: List[Loop] = []
        self.unreachable: List[CodeLocation] = []
        self.infinite_loops: List[CodeLocation] = []

    def extract(self) -> ControlFlowAnalysis:
        for line in self.lines:
            if line.kind is LineKind.IF:
                self._record_branch(line)
            elif line.kind in (LineKind.WHILE, LineKind.FOR):
                self._record_loop(line)
            elif line.kind is LineKind.RETURN:
                self._check_unreachable_after(line)

        logger.debug(
            "control_flow_extracted",
            branches=len(self.branches),
            loops=len(self.loops),
            unreachable=len(self.unreachable),
        )
        return ControlFlowAnalysis(
            branches=self.branches,
            loops=self.loops,
            unreachable_code=self.unreachable,
            infinite_loops=self.infinite_loops,
        )

    def _record_branch(self, line: SourceLine) -> None:
        condition = extract_condition(line.stripped, "if")
        self.branches.append(
            Branch(
                line=line.number,
                kind="if",
                condition=condition,
                always_true=is_always_true(condition),
                always_false=is_always_false(condition),
                edge_cases=find_edge_cases(condition),
            )
        )

    def _record_loop(self, line: SourceLine) -> None:
        kind = "while" if line.kind is LineKind.WHILE else "for"
        condition = extract_condition(line.stripped, kind)
        self.loops.append(
            Loop(
                line=line.number,
                kind=kind,
                condition=condition,
                issues=find_loop_issues(condition, kind),
            )
        )
        if kind == "while" and condition in INFINITE_CONDITIONS:
            self.infinite_loops.append(
                CodeLocation(
                    line=line.number,
                    column=1,
                    description="Potential infinite loop with always-true condition",
                )
            )

    def _check_unreachable_after(self, line: SourceLine) -> None:
        following = self._next_statement(line)
        if following is None:
            return
        if following.kind in (LineKind.FUNCTION_DEF, LineKind.CLASS_DEF):
            return
        if following.stripped.startswith("@"):
            return
        if following.indent >= line.indent:
            self.unreachable.append(
                CodeLocation(
                    line=following.number,
                    column=1,
                    description="Code after return statement is unreachable",
                )
            )

    def _next_statement(self, line: SourceLine) -> Optional[SourceLine]:
        """First non-blank, non-comment line after the given one."""
        for candidate in self.lines[line.number:]:
            if candidate.is_code:
                return candidate
        return None


def extract_control_flow(lines: List[SourceLine]) -> ControlFlowAnalysis:
    """
    Extract branches, loops, unreachable code and infinite-loop suspects.

    Args:
        lines: Output of index_lines()

    Returns:
        ControlFlowAnalysis
    """
    return ControlFlowExtractor(lines).extract()
