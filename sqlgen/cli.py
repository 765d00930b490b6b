"""Command-line entry point: ``sqlgen <in_dir>``.

Generates the record module for one directory of two-way SQL templates.
"""
from __future__ import annotations

import argparse
import logging
import sys
from enum import Enum

from sqlgen.codegen.generator import RecordGenerator
from sqlgen.config import load_config
from sqlgen.errors import ConfigError, SqlGenError

logger = logging.getLogger(__name__)


class ExitCode(int, Enum):
    OK = 0
    USAGE = 2
    CONFIG_INVALID = 10
    GENERATION_FAILED = 20
    INTERNAL_ERROR = 50


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sqlgen",
        description="Generate typed query records from two-way SQL templates.",
    )
    parser.add_argument("in_dir", help="directory containing .sql templates")
    parser.add_argument("--config", help="YAML/JSON generator config file")
    parser.add_argument("--output", dest="output_filename", help="generated module file name")
    parser.add_argument("--suffix", dest="record_suffix", help="record class name suffix")
    parser.add_argument("--style", dest="placeholder_style", help="default placeholder style")
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="print the generated module instead of writing it",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="increase log output (-v info, -vv debug)",
    )
    return parser


def _configure_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def run(args: argparse.Namespace) -> int:
    config = load_config(args.config).merged(
        output_filename=args.output_filename,
        record_suffix=args.record_suffix,
        placeholder_style=args.placeholder_style,
    )
    generator = RecordGenerator(args.in_dir, config)
    if args.dry_run:
        sys.stdout.write(generator.render())
        return int(ExitCode.OK)
    path = generator.generate()
    print(f"Wrote {path}")
    return int(ExitCode.OK)


def main(argv: list[str] | None = None) -> int:
    """Entry point used by the ``sqlgen`` console script."""
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    try:
        return run(args)
    except ConfigError as e:
        print(f"ERROR[{e.code}]: {e}", file=sys.stderr)
        return int(ExitCode.CONFIG_INVALID)
    except SqlGenError as e:
        print(f"ERROR[{e.code}]: {e}", file=sys.stderr)
        if e.details:
            print(f"DETAILS: {e.details}", file=sys.stderr)
        return int(ExitCode.GENERATION_FAILED)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"ERROR[INTERNAL]: {e!r}", file=sys.stderr)
        return int(ExitCode.INTERNAL_ERROR)


if __name__ == "__main__":
    raise SystemExit(main())
