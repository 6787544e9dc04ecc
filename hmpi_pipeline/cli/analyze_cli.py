"""
Command-line interface for groundwater sample analysis.

Usage:
    python -m hmpi_pipeline.cli.analyze_cli analyze --input <file_path> [options]
    python -m hmpi_pipeline.cli.analyze_cli report --input <file_path> [options]
"""

import argparse
import json
import sys
from pathlib import Path

from hmpi_pipeline.batch.pipeline import AnalysisPipeline
from hmpi_pipeline.batch.readers import UnsupportedFormatError
from hmpi_pipeline.config import PipelineSettings, load_settings
from hmpi_pipeline.observability import metrics
from hmpi_pipeline.observability.logger import configure_logging, get_logger

logger = get_logger(__name__)


def _load_settings(args) -> PipelineSettings:
    settings = load_settings(args.config)
    configure_logging(level=settings.log_level, format_type=settings.log_format)
    return settings


def _write_output(content: str, output: str | None) -> None:
    if output:
        Path(output).write_text(content, encoding="utf-8")
        logger.info(f"Wrote {output}")
    else:
        sys.stdout.write(content)
        if not content.endswith("\n"):
            sys.stdout.write("\n")


def analyze_command(args) -> int:
    """
    Execute the analyze command.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    settings = _load_settings(args)
    pipeline = AnalysisPipeline(settings)

    result = pipeline.analyze_file(args.input)

    logger.info("=" * 60)
    logger.info("ANALYSIS COMPLETE")
    logger.info("=" * 60)
    logger.info(f"Total samples: {result.summary.total_samples}")
    logger.info(f"Safe: {result.summary.safe_samples}")
    logger.info(f"Moderate risk: {result.summary.moderate_risk}")
    logger.info(f"High risk: {result.summary.high_risk}")
    logger.info(f"Average HMPI: {result.summary.average_hmpi:.2f}")
    logger.info("=" * 60)

    _write_output(json.dumps(result.to_payload(), indent=2, ensure_ascii=False, allow_nan=False), args.output)
    return 0


def report_command(args) -> int:
    """
    Execute the report command.

    Args:
        args: Command-line arguments

    Returns:
        Process exit code
    """
    settings = _load_settings(args)
    pipeline = AnalysisPipeline(settings)

    report = pipeline.report_for_file(args.input)

    output = args.output
    if output is not None and Path(output).is_dir():
        output = str(Path(output) / settings.report_filename)
    _write_output(report, output)
    return 0


COMMANDS = {
    "analyze": analyze_command,
    "report": report_command,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="hmpi-analyze",
        description="Groundwater heavy metal pollution index (HMPI) analysis",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Score every sample of a survey sheet and print the JSON payload
  hmpi-analyze analyze --input data/survey.xlsx

  # Write the CSV report next to the input
  hmpi-analyze report --input data/survey.csv --output data/

  # Use custom settings (delimiter, sheet, logging)
  hmpi-analyze report --input data/survey.csv --config config/pipeline.yaml
        """
    )
    parser.add_argument(
        "--config",
        default=None,
        help="Path to settings YAML file (default: built-in settings)"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser("analyze", help="Score samples and print the analysis payload")
    analyze_parser.add_argument("--input", required=True, help="Path to .csv, .xlsx or .xls file")
    analyze_parser.add_argument("--output", default=None, help="Write JSON payload to this path instead of stdout")

    report_parser = subparsers.add_parser("report", help="Render the CSV report")
    report_parser.add_argument("--input", required=True, help="Path to .csv, .xlsx or .xls file")
    report_parser.add_argument(
        "--output",
        default=None,
        help="Report path, or a directory to write the default report filename into (default: stdout)"
    )

    return parser


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        return COMMANDS[args.command](args)
    except FileNotFoundError as e:
        logger.error(str(e))
        metrics.record_error("file_not_found", "cli")
        return 1
    except UnsupportedFormatError as e:
        logger.error(str(e))
        metrics.record_error("unsupported_format", "cli")
        return 1
    except ValueError as e:
        logger.error(f"Invalid settings or input: {e}")
        metrics.record_error(type(e).__name__, "cli")
        return 1
    except Exception as e:
        logger.error(f"Error during analysis: {e}", exc_info=True)
        metrics.record_error(type(e).__name__, "cli")
        return 1


if __name__ == "__main__":
    sys.exit(main())
