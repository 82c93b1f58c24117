"""Markdown summary of an analysis.

The text is built only from values computed upstream. Section order is
fixed: structure, PEP 8, performance, security, issues summary,
recommendations.
"""

from typing import List

from pyscope.models import ComplexityMetrics, Issue, QualityScores, Suggestion

MAX_LISTED_STYLE_ISSUES = 3
MAX_LISTED_SUGGESTIONS = 3


def _structure_section(complexity: ComplexityMetrics) -> str:
    cc = complexity.cyclomatic_complexity
    text = "### Code Structure and Organization\n"
    text += (
        f"This Python code consists of {complexity.lines_of_code} lines "
        f"with a cyclomatic complexity of {cc}. "
    )
    if cc <= 5:
        text += "The code has low complexity and follows good structural practices. "
    elif cc <= 10:
        text += "The code has moderate complexity. Consider refactoring for better maintainability. "
    else:
        text += "The code has high complexity and would benefit from being broken into smaller functions. "
    return text


def _style_section(issues: List[Issue]) -> str:
    style_issues = [issue for issue in issues if issue.category == "style"]
    text = "\n\n### PEP 8 Compliance\n"
    if not style_issues:
        return text + "Excellent! The code follows PEP 8 style guidelines.\n"
    text += f"Found {len(style_issues)} PEP 8 style issue(s). Key areas for improvement:\n"
    for issue in style_issues[:MAX_LISTED_STYLE_ISSUES]:
        text += f"- Line {issue.line}: {issue.message}\n"
    return text


def _performance_section(quality: QualityScores) -> str:
    text = "\n### Performance Analysis\n"
    text += f"**Performance Score**: {quality.performance}/100 - "
    if quality.performance >= 80:
        text += "Good performance characteristics with efficient algorithms.\n"
    elif quality.performance >= 60:
        text += "Some performance optimizations possible.\n"
    else:
        text += "Several performance issues identified that should be addressed.\n"
    return text


def _security_section(issues: List[Issue], quality: QualityScores) -> str:
    security_issues = [issue for issue in issues if issue.category == "security"]
    text = "\n### Security Assessment\n"
    text += f"**Security Score**: {quality.security}/100 - "
    if not security_issues:
        return text + "No obvious security vulnerabilities detected.\n"
    text += f"{len(security_issues)} potential security issue(s) found:\n"
    for issue in security_issues:
        text += f"- Line {issue.line}: {issue.message}\n"
    return text


def _issues_section(issues: List[Issue]) -> str:
    if not issues:
        return ""
    text = "\n### Issues Summary\n"
    text += f"Total issues found: {len(issues)}\n"
    for severity, label in (("error", "Errors"), ("warning", "Warnings"), ("info", "Info")):
        count = sum(1 for issue in issues if issue.severity == severity)
        if count > 0:
            text += f"- {label}: {count}\n"
    return text


def _recommendations_section(suggestions: List[Suggestion]) -> str:
    text = "\n### Recommendations\n"
    if not suggestions:
        return text + "Great job! The code follows Python best practices."
    for suggestion in suggestions[:MAX_LISTED_SUGGESTIONS]:
        text += f"- **{suggestion.title}**: {suggestion.description}\n"
    return text


def compose_explanation(
    complexity: ComplexityMetrics,
    issues: List[Issue],
    quality: QualityScores,
    suggestions: List[Suggestion],
) -> str:
    """
    Render the analysis summary.

    Args:
        complexity: Complexity metrics
        issues: Style checker issues
        quality: Quality scores
        suggestions: Generated suggestions

    Returns:
        Markdown text
    """
    return (
        "## Python Code Analysis Summary\n\n"
        + _structure_section(complexity)
        + _style_section(issues)
        + _performance_section(quality)
        + _security_section(issues, quality)
        + _issues_section(issues)
        + _recommendations_section(suggestions)
    )
