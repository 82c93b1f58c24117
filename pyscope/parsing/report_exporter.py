"""Report generation and export in multiple formats.

This module provides:
- Export envelope ({source, report, timestamp}) construction
- JSON report export
- SARIF format export
- Console report formatting
"""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, List, Optional

import structlog

from pyscope import __version__
from pyscope.models import AnalysisReport, ExportEnvelope, Issue

logger = structlog.get_logger()

SARIF_LEVELS = {
    "error": "error",
    "warning": "warning",
    "info": "note",
}


def build_envelope(
    source_code: str,
    report: AnalysisReport,
    timestamp: Optional[datetime] = None,
) -> ExportEnvelope:
    """
    Bundle an input and its report for export.

    Args:
        source_code: The analyzed source
        report: Its AnalysisReport
        timestamp: Export time (now, UTC, when omitted)

    Returns:
        ExportEnvelope
    """
    return ExportEnvelope(
        source_code=source_code,
        report=report,
        timestamp=timestamp or datetime.now(timezone.utc),
    )


def default_export_filename(timestamp: datetime) -> str:
    """File name of the form python-analysis-<epoch milliseconds>.json."""
    return f"python-analysis-{int(timestamp.timestamp() * 1000)}.json"


class ReportExporter:
    """Export analysis reports in various formats."""

    def __init__(self, envelope: ExportEnvelope, file_path: str = "input.py") -> None:
        self.envelope = envelope
        self.report = envelope.report
        self.file_path = file_path

    def to_json(self, indent: int = 2) -> str:
        """
        Export the envelope as JSON.

        Args:
            indent: JSON indentation level

        Returns:
            JSON string
        """
        return self.envelope.model_dump_json(indent=indent)

    def to_sarif(self) -> Dict[str, Any]:
        """
        Export issues in SARIF format (Static Analysis Results Interchange Format).

        Returns:
            SARIF dict
        """
        return {
            "version": "2.1.0",
            "$schema": "https://json.schemastore.org/sarif-2.1.0.json",
            "runs": [
                {
                    "tool": {
                        "driver": {
                            "name": "pyscope",
                            "version": __version__,
                            "rules": [],
                        }
                    },
                    "results": [self._sarif_result(issue) for issue in self.report.issues],
                    "invocations": [
                        {
                            "executionSuccessful": True,
                            "endTimeUtc": self.envelope.timestamp.isoformat(),
                        }
                    ],
                }
            ],
        }

    def _sarif_result(self, issue: Issue) -> Dict[str, Any]:
        return {
            "ruleId": issue.category,
            "level": SARIF_LEVELS.get(issue.severity, "note"),
            "message": {
                "text": issue.message,
            },
            "locations": [
                {
                    "physicalLocation": {
                        "artifactLocation": {
                            "uri": self.file_path,
                        },
                        "region": {
                            "startLine": issue.line,
                            "startColumn": issue.column,
                        },
                    },
                }
            ],
        }

    def to_console(self) -> str:
        """
        Format report for console output.

        Returns:
            Formatted string for console
        """
        report = self.report
        complexity = report.logic.complexity
        lines: List[str] = []
        lines.append("=" * 60)
        lines.append("pyscope Analysis Report")
        lines.append(f"File: {self.file_path}")
        lines.append(f"Timestamp: {self.envelope.timestamp.isoformat()}")
        lines.append("=" * 60)
        lines.append("")

        lines.append("METRICS")
        lines.append("-" * 40)
        lines.append(f"Lines of code: {complexity.lines_of_code}")
        lines.append(f"Cyclomatic complexity: {complexity.cyclomatic_complexity}")
        lines.append(f"Cognitive complexity: {complexity.cognitive_complexity}")
        lines.append(f"Max nesting depth: {complexity.max_nesting_depth}")
        lines.append("")

        lines.append("QUALITY")
        lines.append("-" * 40)
        for dimension, score in report.quality.model_dump().items():
            lines.append(f"  {dimension}: {score}/100")
        lines.append("")

        if report.issues:
            lines.append(f"ISSUES ({len(report.issues)})")
            lines.append("-" * 40)
            for issue in report.issues:
                lines.append(
                    f"  [{issue.severity.upper()}] Line {issue.line}:{issue.column} "
                    f"({issue.category}) {issue.message}"
                )
            lines.append("")

        if report.suggestions:
            lines.append("SUGGESTIONS")
            lines.append("-" * 40)
            for suggestion in report.suggestions:
                lines.append(
                    f"  [{suggestion.priority.upper()}] Line {suggestion.line}: {suggestion.title}"
                )
            lines.append("")

        lines.append("PREDICTED OUTPUT")
        lines.append("-" * 40)
        execution = report.execution
        if not execution.can_execute:
            lines.extend(f"  {error}" for error in execution.errors)
        elif execution.has_output:
            lines.extend(f"  {line}" for line in execution.output.split("\n"))
        else:
            lines.append("  (no output)")
        for warning in execution.warnings:
            lines.append(f"  warning: {warning}")

        return "\n".join(lines)


def export_report(
    envelope: ExportEnvelope,
    format: str = "json",
    output_path: Optional[str] = None,
    file_path: str = "input.py",
) -> str:
    """
    Export a report in the specified format.

    Args:
        envelope: Envelope to export
        format: Output format ("json", "sarif", "console")
        output_path: Optional file path to write the result to
        file_path: Name of the analyzed file, used in SARIF and console output

    Returns:
        Report content as string
    """
    exporter = ReportExporter(envelope, file_path=file_path)

    if format == "json":
        content = exporter.to_json()
    elif format == "sarif":
        content = json.dumps(exporter.to_sarif(), indent=2)
    elif format == "console":
        content = exporter.to_console()
    else:
        raise ValueError(f"Unknown format: {format}")

    if output_path:
        Path(output_path).write_text(content)
        logger.info("report_written", output_path=output_path, format=format)

    return content


def format_console_report(envelope: ExportEnvelope, file_path: str = "input.py") -> str:
    """Format an envelope for console output."""
    return ReportExporter(envelope, file_path=file_path).to_console()
