"""Command line interface for the drafter wrapper."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from ..config.loader import DrafterConfig, load_config
from ..domain.models import OutputFormat
from ..drafter import Drafter
from ..utils.constants import STDIN_INPUT
from ..utils.errors import DrafterError
from ..utils.logging import configure_logger, get_logger

LOG = get_logger()

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drafter-wrapper",
        description="Parse API Blueprint documents into a JSON or YAML AST using drafter",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help=f"Path to the API Blueprint document ('{STDIN_INPUT}' reads standard input)",
    )
    parser.add_argument("--binary", "-b", help="Path to the drafter executable (default: $DRAFTER_BIN or 'drafter')")
    parser.add_argument("--config", "-c", type=Path, help="Path to a JSON configuration file")
    parser.add_argument(
        "--format",
        "-f",
        help=f"Output serialization ({', '.join(fmt.value for fmt in OutputFormat)}); passed through unchecked",
    )
    parser.add_argument("--output", "-o", type=Path, help="Let drafter write the AST to this file")
    parser.add_argument("--sourcemap", "-s", type=Path, help="Let drafter write a source map to this file")
    parser.add_argument(
        "--use-line-num",
        "-u",
        action="store_true",
        help="Use line and column numbers instead of byte offsets in source maps",
    )
    parser.add_argument("--validate", "-l", action="store_true", help="Validate only, suppress AST output")
    parser.add_argument("--version", "-v", action="store_true", help="Print the drafter version and exit")
    parser.add_argument(
        "--log-level",
        choices=_LOG_LEVELS,
        default="WARNING",
        help="Logging verbosity (default: WARNING)",
    )
    parser.add_argument("--log-file", type=Path, help="Also write log records to this file")
    parser.add_argument("--no-console-log", "-nl", action="store_true", help="Disable logging to stderr")
    return parser


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    return _build_parser().parse_args(argv)


def _build_drafter(args: argparse.Namespace) -> Drafter:
    config = load_config(args.config) if args.config is not None else DrafterConfig()
    drafter = Drafter.from_config(config)
    if args.binary:
        drafter.set_executable_path(args.binary)
    if args.input is not None:
        drafter.set_input(args.input)
    if args.output is not None:
        drafter.output(args.output)
    if args.version:
        drafter.version()
    if args.validate:
        drafter.validate()
    if args.format is not None:
        drafter.format(args.format)
    if args.sourcemap is not None:
        drafter.sourcemap(args.sourcemap)
    if args.use_line_num:
        drafter.use_line_num()
    return drafter


def _run_with_args(args: argparse.Namespace) -> int:
    configure_logger(
        getattr(logging, args.log_level),
        log_path=args.log_file,
        console=not args.no_console_log,
    )
    try:
        drafter = _build_drafter(args)
        if args.input == STDIN_INPUT:
            result = drafter.run(drafter.build(stdin=sys.stdin.read()))
        else:
            result = drafter.run()
    except DrafterError as exc:
        print(f"drafter-wrapper: {exc.diagnostic}", file=sys.stderr)
        return 1

    sys.stdout.write(result)
    return 0


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    return _run_with_args(args)


if __name__ == "__main__":
    raise SystemExit(main())
