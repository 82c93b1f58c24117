"""Heuristic gate deciding whether source text is Python.

The acceptance policy is a table of rules, not a lexer. A source is
accepted as soon as any rule fires, so false positives are expected
(plain English containing "if" or "for" passes the gate).
"""

import re
from dataclasses import dataclass
from typing import Callable, List, Tuple

import structlog

logger = structlog.get_logger()

UNSUPPORTED_LANGUAGE_MESSAGE = "I can only analyze Python code."

# Supported languages for analysis
SUPPORTED_LANGUAGES = {"python"}


class NotSupportedLanguage(ValueError):
    """Raised when the source does not look like Python."""

    def __init__(self, message: str = UNSUPPORTED_LANGUAGE_MESSAGE) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class GateRule:
    """A named acceptance rule."""

    name: str
    matches: Callable[[str], bool]


def _keyword_rule(keyword: str) -> GateRule:
    pattern = re.compile(rf"\b{keyword}\b", re.IGNORECASE)
    return GateRule(f"keyword:{keyword}", lambda code: pattern.search(code) is not None)


def _pattern_rule(name: str, regex: str) -> GateRule:
    pattern = re.compile(regex, re.MULTILINE)
    return GateRule(f"pattern:{name}", lambda code: pattern.search(code) is not None)


def _marker_rule(marker: str) -> GateRule:
    return GateRule(f"marker:{marker}", lambda code: marker in code)


PYTHON_KEYWORDS: Tuple[str, ...] = (
    "def", "class", "import", "from", "if", "elif", "else", "for", "while",
    "try", "except", "with", "as", "lambda", "yield", "return",
)

STRUCTURAL_PATTERNS: Tuple[Tuple[str, str], ...] = (
    ("import", r"^import\s+\w+"),
    ("from_import", r"^from\s+\w+\s+import"),
    ("def_header", r"^def\s+\w+\s*\("),
    ("class_header", r"^class\s+\w+"),
    ("comment", r"^\s*#.*$"),
    ("print_call", r"print\s*\("),
    ("block_opener", r":\s*$"),
)

LANGUAGE_MARKERS: Tuple[str, ...] = ("python", "#!/usr/bin/env python")

GATE_RULES: Tuple[GateRule, ...] = (
    tuple(_keyword_rule(keyword) for keyword in PYTHON_KEYWORDS)
    + tuple(_pattern_rule(name, regex) for name, regex in STRUCTURAL_PATTERNS)
    + tuple(_marker_rule(marker) for marker in LANGUAGE_MARKERS)
)


class LanguageGate:
    """Rule-table acceptance test for Python source."""

    def __init__(self, rules: Tuple[GateRule, ...] = GATE_RULES) -> None:
        self.rules = rules

    def matching_rules(self, source: str) -> List[str]:
        """
        Names of every rule that fires on the source.

        Args:
            source: Raw source text

        Returns:
            Rule names in table order (empty when the source is rejected)
        """
        return [rule.name for rule in self.rules if rule.matches(source)]

    def accepts(self, source: str) -> bool:
        """Return True if the source is accepted for analysis."""
        return any(rule.matches(source) for rule in self.rules)

    def require(self, source: str) -> None:
        """
        Fail closed on unsupported input.

        Raises:
            NotSupportedLanguage: if no rule fires
        """
        if not self.accepts(source):
            logger.info("language_rejected", code_preview=source[:100])
            raise NotSupportedLanguage()

    @staticmethod
    def is_supported(language: str) -> bool:
        """Check if a language name is supported for analysis."""
        return language in SUPPORTED_LANGUAGES


def accepts(source: str) -> bool:
    """Convenience wrapper around the default gate."""
    return LanguageGate().accepts(source)
