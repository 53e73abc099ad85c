"""Command-line entry point: ``difftoml <file_a> <file_b> [options]``.

Exit status is 0 whenever the comparison completes, whether or not
differences were found; 1 when a document cannot be loaded or compared;
2 on invalid arguments.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from termcolor import colored

from difftoml import __version__
from difftoml.algorithm.config import (
    DEFAULT_MAX_DEPTH,
    DiffConfig,
    NumericPolicy,
    max_depth_limit,
)
from difftoml.api import diff_files
from difftoml.errors import DiffTomlError
from difftoml.loader import DocumentLoader
from difftoml.render import ReportRenderer

__all__ = ["build_parser", "main"]

logger = logging.getLogger(__name__)

_HANDLER_NAME = "difftoml-cli"


class _LevelFormatter(logging.Formatter):
    """Prefixes each message with a short, optionally colored, level tag."""

    _TAGS = {
        logging.DEBUG: ("DBG", "cyan"),
        logging.INFO: ("INF", "green"),
        logging.WARNING: ("WRN", "yellow"),
        logging.ERROR: ("ERR", "red"),
        logging.CRITICAL: ("ERR", "red"),
    }

    def __init__(self, color: bool) -> None:
        super().__init__("%(message)s")
        self._color = color

    def format(self, record: logging.LogRecord) -> str:
        tag, color = self._TAGS.get(record.levelno, ("LOG", "white"))
        if self._color:
            tag = colored(tag, color, force_color=True)
        return f"difftoml: {tag} {super().format(record)}"


def _configure_logging(verbose: bool, color: bool) -> None:
    package_logger = logging.getLogger("difftoml")
    for handler in list(package_logger.handlers):
        if handler.get_name() == _HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stderr)
    handler.set_name(_HANDLER_NAME)
    handler.setFormatter(_LevelFormatter(color))
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    package_logger.propagate = False


def _positive_int(text: str) -> int:
    try:
        number = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {text!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="difftoml",
        description="Display the difference between two toml files.",
    )
    parser.add_argument("file_a", type=Path, metavar="FILE_A", help="First toml file")
    parser.add_argument("file_b", type=Path, metavar="FILE_B", help="Second toml file")
    parser.add_argument(
        "-e",
        "--equal",
        action="store_true",
        help="Also display entries whose values are equal in the two files.",
    )
    parser.add_argument(
        "-c", "--color", action="store_true", help="Colorize the output."
    )
    parser.add_argument(
        "-x",
        "--exclude",
        action="append",
        default=[],
        metavar="KEYNAME",
        help="Ignore keys with exactly this name at any depth. Repeatable.",
    )
    parser.add_argument(
        "--numeric",
        action="store_true",
        help="Compare integers and floats by numeric value (1 == 1.0).",
    )
    parser.add_argument(
        "--any-suffix",
        action="store_true",
        help="Accept input files without a .toml suffix.",
    )
    parser.add_argument(
        "--max-depth",
        type=_positive_int,
        default=DEFAULT_MAX_DEPTH,
        metavar="N",
        help=f"Maximum table nesting depth (default: {DEFAULT_MAX_DEPTH}, "
        f"at most {max_depth_limit()}).",
    )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Log debug messages to stderr."
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    _configure_logging(args.verbose, args.color)

    try:
        config = DiffConfig.from_exclusions(
            args.exclude,
            include_equal=args.equal,
            numeric_policy=NumericPolicy.NUMERIC if args.numeric else NumericPolicy.STRICT,
            max_depth=args.max_depth,
        )
    except ValueError as exc:
        parser.error(str(exc))

    loader = DocumentLoader(
        require_suffix=None if args.any_suffix else ".toml",
        max_depth=config.max_depth,
    )
    try:
        report = diff_files(args.file_a, args.file_b, config=config, loader=loader)
    except DiffTomlError as exc:
        logger.error("%s", exc)
        return 1

    renderer = ReportRenderer(str(args.file_a), str(args.file_b), color=args.color)
    renderer.write(report, sys.stdout)
    return 0
