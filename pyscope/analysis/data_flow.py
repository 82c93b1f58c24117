"""Approximate data flow over assignment lines.

Variable tracking is textual. A line "uses" a tracked name when the
configured ``MentionMatcher`` says so. The default matcher is a plain
substring test, which means ``count`` is considered used on any line
mentioning ``counter`` and a name rebound inside a nested block replaces
the outer record. Unused-variable results depend on these approximations.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol

import structlog
from pygments.lexers import PythonLexer
from pygments.token import Name

from pyscope.analysis.line_index import LineKind, SourceLine
from pyscope.models import CodeLocation, DataFlowAnalysis, VariableRecord

logger = structlog.get_logger()

SCOPED_ACQUISITION = "with "
EXPLICIT_CLOSE = ".close()"


class MentionMatcher(Protocol):
    """Decides whether a line refers to a variable name."""

    def mentions(self, line: str, name: str) -> bool:
        ...


class SubstringMentionMatcher:
    """Containment test, excluding the `name =` assignment form."""

    def mentions(self, line: str, name: str) -> bool:
        return name in line and f"{name} =" not in line


class TokenMentionMatcher:
    """Exact Name-token match using the pygments Python lexer."""

    def __init__(self) -> None:
        self.lexer = PythonLexer(stripnl=False, ensurenl=False)

    def mentions(self, line: str, name: str) -> bool:
        if f"{name} =" in line:
            return False
        return any(
            token_type in Name and value == name
            for token_type, value in self.lexer.get_tokens(line)
        )


def get_mention_matcher(strategy: str = "substring") -> MentionMatcher:
    """
    Build the matcher for a configured strategy.

    Args:
        strategy: "substring" or "token"

    Returns:
        MentionMatcher instance
    """
    if strategy == "token":
        return TokenMentionMatcher()
    if strategy != "substring":
        raise ValueError(f"Unknown mention strategy: {strategy}")
    return SubstringMentionMatcher()


@dataclass
class _Lifetime:
    declared: int
    last_used: int


class DataFlowApproximator:
    """Single forward pass over assignments, usages and open() calls."""

    def __init__(
        self,
        lines: List[SourceLine],
        matcher: Optional[MentionMatcher] = None,
    ) -> None:
        self.lines = lines
        self.source = "\n".join(line.text for line in lines)
        self.matcher = matcher or SubstringMentionMatcher()

    def analyze(self) -> DataFlowAnalysis:
        variables: Dict[str, _Lifetime] = {}
        leaks: List[CodeLocation] = []
        handles_managed = SCOPED_ACQUISITION in self.source or EXPLICIT_CLOSE in self.source

        for line in self.lines:
            if line.kind is LineKind.ASSIGNMENT and line.name:
                variables[line.name] = _Lifetime(declared=line.number, last_used=line.number)

            for name, lifetime in variables.items():
                if self.matcher.mentions(line.text, name):
                    lifetime.last_used = line.number

            if "open(" in line.stripped and not handles_managed:
                leaks.append(
                    CodeLocation(
                        line=line.number,
                        column=line.indent + line.stripped.find("open(") + 1,
                        description=(
                            "File opened but not properly closed. "
                            "Use context manager (with statement)"
                        ),
                    )
                )

        records = [
            VariableRecord(
                name=name,
                declared_line=lifetime.declared,
                last_used_line=lifetime.last_used,
                scope="local",
            )
            for name, lifetime in variables.items()
        ]
        unused = [record.name for record in records if record.last_used_line == record.declared_line]

        logger.debug(
            "data_flow_analyzed",
            variables=len(records),
            unused=len(unused),
            leaks=len(leaks),
        )
        return DataFlowAnalysis(
            uninitialized_variables=[],
            unused_variables=unused,
            variables=records,
            resource_leaks=leaks,
        )


def analyze_data_flow(
    lines: List[SourceLine],
    matcher: Optional[MentionMatcher] = None,
) -> DataFlowAnalysis:
    """
    Approximate variable lifetimes, unused variables and resource leaks.

    Args:
        lines: Output of index_lines()
        matcher: Usage test, substring containment when omitted

    Returns:
        DataFlowAnalysis
    """
    return DataFlowApproximator(lines, matcher=matcher).analyze()
