"""Best-effort prediction of program output.

Nothing is executed. Print arguments and a trailing bare expression are
resolved symbolically: literals directly, ``number op number`` by
arithmetic, a handful of builtin calls to placeholders, and bare names by
looking back for their last assignment. Anything else becomes a
``<...>`` placeholder.
"""

from __future__ import annotations

import operator
import re
import time
from typing import Callable, Dict, List, Optional

import structlog

from pyscope.analysis.line_index import HEADER_KINDS, LineKind, SourceLine
from pyscope.models import ExecutionPrediction, Issue

logger = structlog.get_logger()

PRINT_RE = re.compile(r"print\s*\(\s*(.*)\s*\)")
ARITHMETIC_RE = re.compile(r"^(\d+(?:\.\d+)?)\s*([+\-*/])\s*(\d+(?:\.\d+)?)$")
RANGE_RE = re.compile(r"range\(([0-9]+)\)")
IDENTIFIER_RE = re.compile(r"^[A-Za-z_]\w*$")
NUMBER_RE = re.compile(r"^\d+(?:\.\d+)?$")
FSTRING_NAME_RE = re.compile(r"\{(\w+)\}")
FSTRING_EXPR_RE = re.compile(r"\{([^}]+)\}")

MAX_LITERAL_RANGE = 10

OPERATORS: Dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}

EXECUTION_WARNINGS = (
    ("input(", "Code contains input() calls - interactive input required"),
    ("time.sleep(", "Code contains sleep() calls - execution may be delayed"),
    ("random.", "Code uses random functions - output may vary between runs"),
    ("open(", "Code performs file operations - ensure files exist"),
)


def _placeholder(text: str) -> str:
    return f"<{text}>"


def _is_quoted(text: str) -> bool:
    return len(text) >= 2 and text[0] == text[-1] and text[0] in "\"'"


def _parse_number(text: str) -> float:
    return float(text) if "." in text else int(text)


def _within_literal_range(digits: str) -> bool:
    # int() only ever sees at most two digits here.
    significant = digits.lstrip("0") or "0"
    return len(significant) <= 2 and int(significant) <= MAX_LITERAL_RANGE


def evaluate_arithmetic(expression: str) -> Optional[str]:
    """
    Evaluate `number op number`.

    Returns:
        str() of the Python result, None if the expression has another shape
    """
    match = ARITHMETIC_RE.match(expression.strip())
    if not match:
        return None
    left, symbol, right = match.groups()
    try:
        return str(OPERATORS[symbol](_parse_number(left), _parse_number(right)))
    except (ZeroDivisionError, ValueError, OverflowError):
        return None


def simulate_fstring(literal: str) -> str:
    """Replace `{name}` and `{obj.attr}` fields with placeholders."""
    body = literal[2:-1]
    body = FSTRING_NAME_RE.sub(lambda match: _placeholder(match.group(1)), body)
    return FSTRING_EXPR_RE.sub(
        lambda match: _placeholder(match.group(1)) if "." in match.group(1) else match.group(0),
        body,
    )


def simulate_call(call: str) -> str:
    """Placeholder text for common builtin calls."""
    if "len(" in call:
        return "<length>"
    if "str(" in call:
        return "<string>"
    if "int(" in call:
        return "<integer>"
    if "range(" in call:
        match = RANGE_RE.search(call)
        if match and _within_literal_range(match.group(1)):
            return f"range(0, {match.group(1)})"
        return "<range object>"
    return _placeholder(call)


class ExecutionSimulator:
    """Predict output and execution warnings for indexed source."""

    def __init__(self, lines: List[SourceLine], issues: List[Issue]) -> None:
        self.lines = lines
        self.issues = issues
        self.source = "\n".join(line.text for line in lines)

    def simulate(self) -> ExecutionPrediction:
        started = time.perf_counter()
        warnings = self._collect_warnings()

        fatal = [issue for issue in self.issues if issue.severity == "error"]
        if fatal:
            logger.debug("execution_blocked", error_count=len(fatal))
            return ExecutionPrediction(
                can_execute=False,
                has_output=False,
                output="",
                errors=[f"Line {issue.line}: {issue.message}" for issue in fatal],
                warnings=warnings,
                elapsed_ms=0.0,
            )

        try:
            output = self._predict_output()
        except Exception as e:
            logger.warning("execution_simulation_failed", error=str(e))
            return ExecutionPrediction(
                can_execute=False,
                errors=[f"Execution error: {e}"],
                warnings=warnings,
                elapsed_ms=(time.perf_counter() - started) * 1000,
            )

        return ExecutionPrediction(
            can_execute=True,
            has_output=bool(output),
            output=output,
            errors=[],
            warnings=warnings,
            elapsed_ms=(time.perf_counter() - started) * 1000,
        )

    def _collect_warnings(self) -> List[str]:
        return [message for marker, message in EXECUTION_WARNINGS if marker in self.source]

    def _predict_output(self) -> str:
        output_lines = []

        for index, line in enumerate(self.lines):
            if line.kind is LineKind.COMMENT or "print(" not in line.stripped:
                continue
            match = PRINT_RE.search(line.stripped)
            if match and match.group(1).strip():
                output_lines.append(self.resolve(match.group(1).strip(), index))

        trailing = self._trailing_expression()
        if trailing is not None:
            output_lines.append(self.resolve(trailing.stripped, trailing.number - 1))

        return "\n".join(output_lines)

    def _trailing_expression(self) -> Optional[SourceLine]:
        """The last code line, if it is a bare expression."""
        code_lines = [line for line in self.lines if line.is_code]
        if not code_lines:
            return None
        last = code_lines[-1]
        text = last.stripped
        if "print(" in text or "=" in text:
            return None
        if last.kind in HEADER_KINDS or text.endswith(":"):
            return None
        return last

    def resolve(self, content: str, line_index: int) -> str:
        """
        Resolve an expression to its predicted printed text.

        Args:
            content: Expression text (a print argument or a bare expression)
            line_index: 0-based index of the line the expression is on

        Returns:
            Predicted text or a placeholder
        """
        if content[:2] in ('f"', "f'") and _is_quoted(content[1:]):
            return simulate_fstring(content)

        if _is_quoted(content):
            return content[1:-1]

        if any(symbol in content for symbol in "+*/") or ARITHMETIC_RE.match(content):
            return evaluate_arithmetic(content) or _placeholder(content)

        if "(" in content and ")" in content:
            return simulate_call(content)

        if IDENTIFIER_RE.match(content):
            value = self.lookup_variable(content, line_index)
            if value is not None:
                return value

        return _placeholder(content)

    def lookup_variable(self, name: str, line_index: int) -> Optional[str]:
        """
        Find the most recent assignment to a name before a line.

        Chains of bare-name assignments are followed backwards.

        Returns:
            Literal text for string/number/list/dict values, a placeholder for
            other values, None if no assignment is found
        """
        assignment = re.compile(rf"^{re.escape(name)}\s*=(?!=)\s*(.+)")
        for index in range(line_index - 1, -1, -1):
            match = assignment.match(self.lines[index].stripped)
            if not match:
                continue
            value = match.group(1).strip()
            if _is_quoted(value):
                return value[1:-1]
            if NUMBER_RE.match(value):
                return value
            if (value.startswith("[") and value.endswith("]")) or (
                value.startswith("{") and value.endswith("}")
            ):
                return value
            if IDENTIFIER_RE.match(value) and value != name:
                resolved = self.lookup_variable(value, index)
                if resolved is not None:
                    return resolved
            return _placeholder(value)
        return None


def simulate_execution(lines: List[SourceLine], issues: List[Issue]) -> ExecutionPrediction:
    """
    Predict the output of a program without running it.

    Args:
        lines: Output of index_lines()
        issues: Style checker output; any error-severity issue blocks execution

    Returns:
        ExecutionPrediction
    """
    return ExecutionSimulator(lines, issues).simulate()
