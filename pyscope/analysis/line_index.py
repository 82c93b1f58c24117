"""Line splitting and line-kind classification.

Every pass works on the same ordered list of ``SourceLine`` values. The
shape of each line is decided once here by an ordered rule table, so the
checkers dispatch on ``SourceLine.kind`` instead of re-testing prefixes.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Tuple

INDENT_WIDTH = 4

FUNCTION_DEF_RE = re.compile(r"^def\s+(\w+)\s*\(")
CLASS_DEF_RE = re.compile(r"^class\s+(\w+)")
IMPORT_RE = re.compile(r"^(?:import|from)\s+(\w+)")
ASSIGNMENT_RE = re.compile(r"^(\w+)\s*=(?!=)\s*(.+)")


class LineKind(str, Enum):
    """Shape of a stripped source line."""

    BLANK = "blank"
    COMMENT = "comment"
    FUNCTION_DEF = "function_def"
    CLASS_DEF = "class_def"
    IMPORT = "import"
    IF = "if"
    ELIF = "elif"
    ELSE = "else"
    WHILE = "while"
    FOR = "for"
    TRY = "try"
    EXCEPT = "except"
    RETURN = "return"
    ASSIGNMENT = "assignment"
    OTHER = "other"


BRANCH_KINDS = frozenset({LineKind.IF, LineKind.ELIF})
LOOP_KINDS = frozenset({LineKind.WHILE, LineKind.FOR})
EXCEPTION_KINDS = frozenset({LineKind.TRY, LineKind.EXCEPT})
HEADER_KINDS = frozenset({
    LineKind.FUNCTION_DEF,
    LineKind.CLASS_DEF,
    LineKind.IF,
    LineKind.ELIF,
    LineKind.ELSE,
    LineKind.WHILE,
    LineKind.FOR,
    LineKind.TRY,
    LineKind.EXCEPT,
})


def _regex(pattern: str) -> Callable[[str], bool]:
    compiled = re.compile(pattern)
    return lambda stripped: compiled.match(stripped) is not None


def _prefix(prefix: str) -> Callable[[str], bool]:
    return lambda stripped: stripped.startswith(prefix)


# First match wins.
LINE_RULES: Tuple[Tuple[Callable[[str], bool], LineKind], ...] = (
    (lambda stripped: not stripped, LineKind.BLANK),
    (_prefix("#"), LineKind.COMMENT),
    (FUNCTION_DEF_RE.match, LineKind.FUNCTION_DEF),
    (CLASS_DEF_RE.match, LineKind.CLASS_DEF),
    (IMPORT_RE.match, LineKind.IMPORT),
    (_prefix("if "), LineKind.IF),
    (_prefix("elif "), LineKind.ELIF),
    (_regex(r"else\s*:"), LineKind.ELSE),
    (_prefix("while "), LineKind.WHILE),
    (_prefix("for "), LineKind.FOR),
    (_prefix("try:"), LineKind.TRY),
    (_regex(r"except\b"), LineKind.EXCEPT),
    (_regex(r"return\b"), LineKind.RETURN),
    (ASSIGNMENT_RE.match, LineKind.ASSIGNMENT),
)


def classify_line(stripped: str) -> LineKind:
    """
    Classify a stripped line.

    Args:
        stripped: Line text without leading/trailing whitespace

    Returns:
        The kind of the first matching rule, OTHER if none matches
    """
    for predicate, kind in LINE_RULES:
        if predicate(stripped):
            return kind
    return LineKind.OTHER


@dataclass(frozen=True)
class SourceLine:
    """One physical line of source with its classification."""

    number: int
    text: str
    stripped: str
    indent: int
    kind: LineKind

    @property
    def indent_level(self) -> int:
        return self.indent // INDENT_WIDTH

    @property
    def is_code(self) -> bool:
        """Non-blank, non-comment."""
        return self.kind not in (LineKind.BLANK, LineKind.COMMENT)

    @property
    def name(self) -> Optional[str]:
        """Identifier introduced by a def, class, import or assignment line."""
        regex = _NAME_PATTERNS.get(self.kind)
        if regex is None:
            return None
        match = regex.match(self.stripped)
        return match.group(1) if match else None

    @property
    def name_column(self) -> Optional[int]:
        """1-based column where that identifier starts."""
        regex = _NAME_PATTERNS.get(self.kind)
        if regex is None:
            return None
        match = regex.match(self.stripped)
        return self.indent + match.start(1) + 1 if match else None

    @property
    def value(self) -> Optional[str]:
        """Right-hand side of an assignment line."""
        if self.kind is not LineKind.ASSIGNMENT:
            return None
        match = ASSIGNMENT_RE.match(self.stripped)
        return match.group(2) if match else None


_NAME_PATTERNS = {
    LineKind.FUNCTION_DEF: FUNCTION_DEF_RE,
    LineKind.CLASS_DEF: CLASS_DEF_RE,
    LineKind.IMPORT: IMPORT_RE,
    LineKind.ASSIGNMENT: ASSIGNMENT_RE,
}


def split_lines(source: str) -> List[str]:
    """Normalize line endings and split on newlines."""
    return source.replace("\r\n", "\n").replace("\r", "\n").split("\n")


def leading_width(text: str) -> int:
    """Count of leading whitespace characters (a tab counts as one)."""
    return len(text) - len(text.lstrip())


def index_lines(source: str) -> List[SourceLine]:
    """
    Split source into classified lines.

    Args:
        source: Raw source text

    Returns:
        SourceLine list, index = line number - 1
    """
    lines = []
    for number, text in enumerate(split_lines(source), start=1):
        stripped = text.strip()
        lines.append(
            SourceLine(
                number=number,
                text=text,
                stripped=stripped,
                indent=leading_width(text),
                kind=classify_line(stripped),
            )
        )
    return lines
