"""Suggestion and explanation synthesis."""

from pyscope.synthesis.explanation import compose_explanation
from pyscope.synthesis.suggestions import SuggestionGenerator, generate_suggestions

__all__ = [
    "SuggestionGenerator",
    "compose_explanation",
    "generate_suggestions",
]
