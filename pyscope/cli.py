"""Command-line interface for pyscope."""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

import structlog

from pyscope import __version__
from pyscope.analysis.language_gate import NotSupportedLanguage
from pyscope.config import configure_logging
from pyscope.parsing import build_envelope, export_report
from pyscope.pipeline import analyze
from pyscope.samples import DIFFICULTIES, filter_samples, get_sample

logger = structlog.get_logger()


def main(argv: Optional[List[str]] = None) -> None:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    if args.version:
        print_version()
        return

    configure_logging(quiet=getattr(args, "quiet", False))

    if args.command == "analyze":
        analyze_command(args)
    elif args.command == "samples":
        samples_command(args)
    elif args.command == "sample":
        sample_command(args)
    else:
        parser.print_help()
        sys.exit(1)


def create_parser() -> argparse.ArgumentParser:
    """Create CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="pyscope",
        description="pyscope - heuristic Python code analysis",
    )
    parser.add_argument("--version", action="store_true", help="Show version and exit")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Analyze command
    analyze_parser = subparsers.add_parser("analyze", help="Analyze a Python file")
    analyze_parser.add_argument(
        "file",
        type=str,
        help="Python file to analyze",
    )
    _add_output_arguments(analyze_parser)

    # Samples command
    samples_parser = subparsers.add_parser("samples", help="List catalog samples")
    samples_parser.add_argument(
        "--difficulty",
        type=str,
        choices=["all", *DIFFICULTIES],
        default="all",
        help="Only show samples of this difficulty",
    )
    samples_parser.add_argument(
        "--search",
        type=str,
        default="",
        help="Filter by title, description or concept",
    )

    # Sample command
    sample_parser = subparsers.add_parser("sample", help="Analyze a catalog sample")
    sample_parser.add_argument(
        "sample_id",
        type=str,
        help="Sample identifier (see `pyscope samples`)",
    )
    _add_output_arguments(sample_parser)

    return parser


def _add_output_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-o", "--output",
        type=str,
        help="Output file path",
    )
    parser.add_argument(
        "-f", "--format",
        type=str,
        choices=["json", "sarif", "console"],
        default="console",
        help="Output format (default: console)",
    )
    parser.add_argument(
        "--quiet", "-q",
        action="store_true",
        help="Suppress log output",
    )


def print_version() -> None:
    """Print version information."""
    print(f"pyscope v{__version__}")
    print("Heuristic static analysis of Python source")


def analyze_command(args: argparse.Namespace) -> None:
    """Execute analyze command."""
    file_path = Path(args.file)
    if not file_path.exists():
        print(f"Error: File not found: {args.file}", file=sys.stderr)
        sys.exit(1)

    try:
        source_code = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error("cli_read_failed", file_path=args.file, error=str(e))
        print(f"Error: Cannot read {args.file}: {e}", file=sys.stderr)
        sys.exit(1)

    _run_analysis(source_code, str(file_path), args)


def sample_command(args: argparse.Namespace) -> None:
    """Execute sample command."""
    sample = get_sample(args.sample_id)
    if sample is None:
        print(f"Error: Unknown sample: {args.sample_id}", file=sys.stderr)
        sys.exit(1)

    _run_analysis(sample.code, f"{sample.id}.py", args)


def samples_command(args: argparse.Namespace) -> None:
    """Execute samples command."""
    samples = filter_samples(difficulty=args.difficulty, search=args.search)
    if not samples:
        print("No samples match.")
        return

    for sample in samples:
        print(f"{sample.id:<24} [{sample.difficulty}] {sample.title}")
        print(f"{'':<24} {', '.join(sample.concepts)}")


def _run_analysis(source_code: str, file_name: str, args: argparse.Namespace) -> None:
    try:
        report = analyze(source_code)
    except NotSupportedLanguage as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    envelope = build_envelope(source_code, report)
    output = export_report(
        envelope,
        format=args.format,
        output_path=args.output,
        file_path=file_name,
    )

    if args.output:
        print(f"Report saved to: {args.output}")
    else:
        print(output)


if __name__ == "__main__":
    main()
