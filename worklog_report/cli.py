"""Command line entry point for the worklog report."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from worklog_report.config import CONFIG_ENV_VAR, load_config
from worklog_report.errors import WorklogError
from worklog_report.pipeline import RENDERERS, build_report

logger = logging.getLogger("worklog-report")


def configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity > 1:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Summarize time spent per task and user from a worklog CSV export")
    parser.add_argument("filepath", help="Path to the worklog CSV export")
    parser.add_argument(
        "--config",
        default=None,
        help=f"Path to the JSON config (default: ${CONFIG_ENV_VAR} or ./config.json)",
    )
    parser.add_argument("--format", choices=sorted(RENDERERS), default="html", help="Output format")
    parser.add_argument("--output", default=None, help="Write the report to this file instead of stdout")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase log verbosity")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        config = load_config(args.config)
        report = build_report(args.filepath, config, output_format=args.format)
    except (WorklogError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output:
        out_path = Path(args.output)
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(report, encoding="utf-8")
        logger.info("Saved report to %s", out_path)
    else:
        print(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
