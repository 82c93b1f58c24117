"""pyscope: heuristic static analysis of Python source text."""

__version__ = "0.1.0"

from pyscope.analysis.language_gate import NotSupportedLanguage  # noqa: E402
from pyscope.pipeline import CodeAnalyzer, analyze  # noqa: E402

__all__ = [
    "CodeAnalyzer",
    "NotSupportedLanguage",
    "analyze",
    "__version__",
]
