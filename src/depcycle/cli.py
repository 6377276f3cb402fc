"""Command-line interface for depcycle."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from depcycle.config import load_config
from depcycle.errors import DepCycleError
from depcycle.model import DetectOptions
from depcycle.pipeline import run
from depcycle.renderer.json_report import render_json
from depcycle.renderer.text import render_text

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="depcycle",
        description="Report circular dependencies in a bundler module graph (webpack --json stats).",
    )
    parser.add_argument(
        "stats_file",
        type=Path,
        help="Path to the stats JSON file",
    )
    parser.add_argument(
        "--include-vendored",
        action="store_const",
        const=True,
        default=None,
        dest="include_vendored",
        help="Also report cycles made up only of node_modules packages",
    )
    policy = parser.add_mutually_exclusive_group()
    policy.add_argument(
        "--fail",
        action="store_const",
        const=True,
        default=None,
        dest="fail_on_error",
        help="Treat cycles as errors and exit with status 1 (default)",
    )
    policy.add_argument(
        "--warn-only",
        action="store_const",
        const=False,
        dest="fail_on_error",
        help="Report cycles as warnings and exit with status 0",
    )
    parser.add_argument(
        "--vendor-dir",
        action="append",
        default=None,
        dest="vendor_dirs",
        metavar="DIR",
        help="Directory name marking third-party modules (repeatable; default: node_modules, bower_components)",
    )
    parser.add_argument(
        "--format",
        choices=("text", "json"),
        default="text",
        help="Output format (default: text)",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write the report to this file instead of stdout",
    )
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=Path.cwd(),
        help="Directory holding .depcycle.toml or pyproject.toml (default: current directory)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose (debug) output",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.WARNING, format="%(message)s")
    if args.verbose:
        logging.getLogger("depcycle").setLevel(logging.DEBUG)

    try:
        config = load_config(args.config_dir)
        options = DetectOptions(
            include_vendored_modules=(
                config.include_vendored_modules
                if args.include_vendored is None
                else args.include_vendored
            ),
            vendor_dirs=tuple(args.vendor_dirs) if args.vendor_dirs else config.vendor_dirs,
        )
        fail_on_error = config.fail_on_error if args.fail_on_error is None else args.fail_on_error
        results = run(args.stats_file, options=options, fail_on_error=fail_on_error)
    except DepCycleError as e:
        print(f"depcycle: {e}", file=sys.stderr)
        return 2

    report = render_json(results) if args.format == "json" else render_text(results)
    if args.output is not None:
        args.output.parent.mkdir(parents=True, exist_ok=True)
        args.output.write_text(report, encoding="utf-8")
        logger.info("Wrote %s", args.output)
    else:
        sys.stdout.write(report)

    return 1 if any(r.errors for r in results) else 0
