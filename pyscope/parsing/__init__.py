"""Report export modules."""

from pyscope.parsing.report_exporter import (
    ReportExporter,
    build_envelope,
    default_export_filename,
    export_report,
    format_console_report,
)

__all__ = [
    "ReportExporter",
    "build_envelope",
    "default_export_filename",
    "export_report",
    "format_console_report",
]
