"""Line-by-line style, convention, security and bug checks.

This module detects:
- PEP 8 layout problems (tabs, indentation width, line length, trailing whitespace)
- Naming convention violations for variables, functions and classes
- Missing function docstrings
- eval()/exec() and naive SQL formatting in assignments
- Wildcard, unused (textual check) imports
- Bare except clauses, mutable default arguments, == None comparisons
- range(len()) iteration and string concatenation in loops
"""

from __future__ import annotations

import re
from typing import Callable, Dict, List, Optional

import structlog

from pyscope.analysis import patterns
from pyscope.analysis.line_index import LineKind, SourceLine
from pyscope.models import Issue

logger = structlog.get_logger()

SNAKE_CASE_RE = re.compile(r"^[a-z_][a-z0-9_]*$")
CAP_WORDS_RE = re.compile(r"^[A-Z][a-zA-Z0-9]*$")
DOCSTRING_OPENERS = ('"""', "'''")


class StyleChecker:
    """Run the full check battery over indexed lines."""

    def __init__(self, lines: List[SourceLine], max_line_length: int = 79) -> None:
        self.lines = lines
        self.source = "\n".join(line.text for line in lines)
        self.max_line_length = max_line_length
        self.issues: List[Issue] = []
        self.imports: Dict[str, int] = {}

        self._kind_handlers: Dict[LineKind, Callable[[SourceLine], None]] = {
            LineKind.ASSIGNMENT: self._check_assignment,
            LineKind.FUNCTION_DEF: self._check_function_def,
            LineKind.CLASS_DEF: self._check_class_def,
            LineKind.IMPORT: self._check_import,
            LineKind.EXCEPT: self._check_except,
        }
        self._layout_checks: List[Callable[[SourceLine], None]] = [
            self._check_indentation,
            self._check_line_length,
            self._check_trailing_whitespace,
        ]
        self._pattern_checks: List[Callable[[SourceLine], None]] = [
            self._check_mutable_default,
            self._check_none_comparison,
            self._check_index_iteration,
            self._check_string_concat_in_loop,
        ]

    def check(self) -> List[Issue]:
        """
        Check every non-blank, non-comment line.

        Returns:
            Issues ordered by line, discovery order within a line
        """
        for line in self.lines:
            if not line.is_code:
                continue
            for line_check in self._layout_checks:
                line_check(line)
            handler = self._kind_handlers.get(line.kind)
            if handler is not None:
                handler(line)
            for line_check in self._pattern_checks:
                line_check(line)

        self._check_unused_imports()
        self.issues.sort(key=lambda issue: issue.line)

        logger.debug("style_check_complete", issue_count=len(self.issues))
        return self.issues

    def _add(
        self,
        line: int,
        severity: str,
        message: str,
        category: str,
        column: int = 1,
    ) -> None:
        self.issues.append(
            Issue(
                line=line,
                column=column,
                severity=severity,
                message=message,
                category=category,
            )
        )

    def _check_indentation(self, line: SourceLine) -> None:
        if line.text.startswith("\t"):
            self._add(
                line.number,
                "warning",
                "Use 4 spaces for indentation instead of tabs (PEP 8)",
                "style",
            )
        if line.indent > 0 and line.indent % 4 != 0:
            self._add(
                line.number,
                "warning",
                "Indentation should be a multiple of 4 spaces (PEP 8)",
                "style",
            )

    def _check_line_length(self, line: SourceLine) -> None:
        if len(line.text) > self.max_line_length:
            self._add(
                line.number,
                "info",
                f"Line too long (>{self.max_line_length} characters). "
                "Consider breaking it up (PEP 8)",
                "style",
                column=self.max_line_length + 1,
            )

    def _check_trailing_whitespace(self, line: SourceLine) -> None:
        if line.text.endswith((" ", "\t")):
            self._add(
                line.number,
                "info",
                "Trailing whitespace (PEP 8)",
                "style",
                column=len(line.text),
            )

    def _check_assignment(self, line: SourceLine) -> None:
        name = line.name
        value = line.value or ""

        if name and not SNAKE_CASE_RE.match(name):
            self._add(
                line.number,
                "warning",
                f"Variable '{name}' should use snake_case naming (PEP 8)",
                "style",
                column=line.name_column or 1,
            )

        if patterns.has_dangerous_call(value):
            self._add(
                line.number,
                "error",
                "Use of eval() or exec() is dangerous and should be avoided",
                "security",
                column=line.indent + patterns.dangerous_call_column(line.stripped),
            )

        if patterns.is_unparameterized_sql(value):
            self._add(
                line.number,
                "warning",
                "Potential SQL injection risk. Use parameterized queries",
                "security",
            )

    def _check_function_def(self, line: SourceLine) -> None:
        name = line.name
        if not name:
            return

        if not SNAKE_CASE_RE.match(name):
            self._add(
                line.number,
                "warning",
                f"Function '{name}' should use snake_case naming (PEP 8)",
                "style",
                column=line.name_column or 1,
            )

        next_line = self._line_after(line)
        if next_line is None or not next_line.stripped.startswith(DOCSTRING_OPENERS):
            self._add(
                line.number,
                "info",
                f"Function '{name}' should have a docstring (PEP 257)",
                "documentation",
            )

    def _check_class_def(self, line: SourceLine) -> None:
        name = line.name
        if name and not CAP_WORDS_RE.match(name):
            self._add(
                line.number,
                "warning",
                f"Class '{name}' should use CapWords naming (PEP 8)",
                "style",
                column=line.name_column or 1,
            )

    def _check_import(self, line: SourceLine) -> None:
        name = line.name
        if name and name not in self.imports:
            self.imports[name] = line.number

        wildcard = patterns.WILDCARD_IMPORT_RE.search(line.stripped)
        if wildcard:
            self._add(
                line.number,
                "warning",
                "Avoid wildcard imports (import *) as they pollute namespace",
                "best-practice",
                column=line.indent + line.stripped.find("*") + 1,
            )

    def _check_except(self, line: SourceLine) -> None:
        if patterns.BARE_EXCEPT_RE.match(line.stripped):
            self._add(
                line.number,
                "warning",
                "Bare except clause catches all exceptions. Specify exception types",
                "best-practice",
            )

    def _check_mutable_default(self, line: SourceLine) -> None:
        if "def " in line.stripped and patterns.MUTABLE_DEFAULT_RE.search(line.stripped):
            self._add(
                line.number,
                "error",
                "Mutable default arguments can cause unexpected behavior",
                "bug",
            )

    def _check_none_comparison(self, line: SourceLine) -> None:
        match = patterns.NONE_COMPARISON_RE.search(line.stripped)
        if match:
            self._add(
                line.number,
                "warning",
                "Use 'is None' or 'is not None' instead of '== None' or '!= None'",
                "best-practice",
                column=line.indent + match.start() + 1,
            )

    def _check_index_iteration(self, line: SourceLine) -> None:
        if "for " in line.stripped and patterns.is_index_iteration(line.stripped):
            self._add(
                line.number,
                "info",
                "Consider using enumerate() instead of range(len())",
                "performance",
            )

    def _check_string_concat_in_loop(self, line: SourceLine) -> None:
        if patterns.is_string_concat_in_loop(line.stripped):
            self._add(
                line.number,
                "warning",
                "String concatenation in loops is inefficient. Use join() or f-strings",
                "performance",
            )

    def _check_unused_imports(self) -> None:
        # Textual: a module only referenced as a bare name counts as unused.
        for name, line_number in self.imports.items():
            if f"{name}." in self.source or f"{name}(" in self.source:
                continue
            self._add(
                line_number,
                "info",
                f"Import '{name}' appears to be unused",
                "unused",
            )

    def _line_after(self, line: SourceLine) -> Optional[SourceLine]:
        if line.number < len(self.lines):
            return self.lines[line.number]
        return None


def check_style(lines: List[SourceLine], max_line_length: int = 79) -> List[Issue]:
    """
    Run the style checker over indexed lines.

    Args:
        lines: Output of index_lines()
        max_line_length: Column limit for the line-length check

    Returns:
        List of Issue objects, line-ascending
    """
    return StyleChecker(lines, max_line_length=max_line_length).check()
