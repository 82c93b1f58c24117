"""Tests for the language gate."""

import pytest

from pyscope.analysis.language_gate import (
    GATE_RULES,
    UNSUPPORTED_LANGUAGE_MESSAGE,
    LanguageGate,
    NotSupportedLanguage,
    accepts,
)


class TestLanguageGate:
    """Test suite for LanguageGate."""

    def test_accepts_function_definition(self):
        """Test that a def header is accepted."""
        assert LanguageGate().accepts("def hello_world():\n    return 42\n")

    def test_accepts_print_call(self):
        """Test that a bare print call is accepted."""
        assert accepts('print("hi")')

    def test_accepts_import_line(self):
        """Test that an import line is accepted."""
        assert accepts("import os")

    def test_accepts_shebang(self):
        """Test that an interpreter marker is accepted."""
        assert accepts("#!/usr/bin/env python\n")

    def test_accepts_block_opener(self):
        """Test that a trailing colon alone is enough."""
        assert accepts("something:")

    def test_keywords_are_case_insensitive(self):
        """Test keyword matching ignores case."""
        assert accepts("WHILE x")

    def test_rejects_plain_prose(self):
        """Test rejection of text with no Python signal."""
        assert not accepts("Hello world, nothing to see here.")

    def test_rejects_empty_string(self):
        """Test that empty input carries no signal."""
        assert not accepts("")

    def test_keyword_inside_word_does_not_count(self):
        """Test that keywords are matched as whole words."""
        assert not accepts("classy defaults")

    def test_require_raises(self):
        """Test that require() fails closed."""
        with pytest.raises(NotSupportedLanguage) as exc_info:
            LanguageGate().require("<p>Hello</p>")
        assert str(exc_info.value) == UNSUPPORTED_LANGUAGE_MESSAGE

    def test_require_passes_python(self):
        """Test that require() is silent on Python."""
        LanguageGate().require("x = 1\nif x:\n    pass\n")

    def test_matching_rules_names(self):
        """Test rule diagnostics."""
        rules = LanguageGate().matching_rules("import os\n")
        assert "keyword:import" in rules
        assert "pattern:import" in rules

    def test_matching_rules_empty_when_rejected(self):
        """Test that nothing matches on rejected input."""
        assert LanguageGate().matching_rules("just words") == []

    def test_custom_rule_table(self):
        """Test that the policy is data and can be replaced."""
        gate = LanguageGate(rules=tuple(r for r in GATE_RULES if r.name == "keyword:def"))
        assert gate.accepts("def f(): pass")
        assert not gate.accepts("import os")

    def test_not_supported_language_is_value_error(self):
        """Test the exception hierarchy."""
        assert issubclass(NotSupportedLanguage, ValueError)

    def test_is_supported(self):
        """Test the supported language set."""
        assert LanguageGate.is_supported("python") is True
        assert LanguageGate.is_supported("javascript") is False
