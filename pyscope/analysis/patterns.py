"""Substring and regex heuristics shared by several passes.

These are per-line textual tests. They do not look at tokens, so a
pattern inside a string literal or a comment still counts.
"""

import re
from typing import Optional

EVAL_RE = re.compile(r"\beval\(")
EXEC_RE = re.compile(r"\bexec\(")
NONE_COMPARISON_RE = re.compile(r"[!=]=\s*None\b")
MUTABLE_DEFAULT_RE = re.compile(r"=\s*(?:\[\s*\]|\{\s*\})")
BARE_EXCEPT_RE = re.compile(r"^except\s*:")
WILDCARD_IMPORT_RE = re.compile(r"\bimport\s+\*")
BOOLEAN_OPERATOR_RE = re.compile(r"\b(?:and|or)\b")
MEMBERSHIP_RE = re.compile(r"\bin\b")


def dangerous_call_column(text: str) -> Optional[int]:
    """1-based column of the first eval( or exec( call, None if absent."""
    positions = [
        match.start() for match in (EVAL_RE.search(text), EXEC_RE.search(text)) if match
    ]
    return min(positions) + 1 if positions else None


def has_dangerous_call(text: str) -> bool:
    return dangerous_call_column(text) is not None


def is_index_iteration(text: str) -> bool:
    """`range(len(...))` anywhere on the line."""
    return "range(len(" in text


def is_string_concat_in_loop(text: str) -> bool:
    """A for/while line that also does `+=` with a string literal."""
    in_loop = "for " in text or "while " in text
    has_literal = '"' in text or "'" in text
    return in_loop and "+=" in text and has_literal


def is_append_in_loop(text: str) -> bool:
    return ".append(" in text and "for " in text


def is_list_of_range(text: str) -> bool:
    return "list(" in text and "range(" in text


def is_unparameterized_sql(text: str) -> bool:
    """`execute(` with %-formatting and no `?` placeholder."""
    return "execute(" in text and "%" in text and "?" not in text


def is_unchecked_input(text: str) -> bool:
    return "input(" in text and "int(" not in text


def is_unsafe_deserialization(text: str) -> bool:
    return "pickle.load" in text


def is_shell_subprocess(text: str) -> bool:
    return "subprocess." in text and "shell=True" in text


def is_os_command(text: str) -> bool:
    return "os.system(" in text or "os.popen(" in text
