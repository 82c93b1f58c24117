"""Pipeline modules for pyscope."""

from .analyzer import CodeAnalyzer, analyze

__all__ = [
    "CodeAnalyzer",
    "analyze",
]
