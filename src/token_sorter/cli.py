"""Command-line entry point for token-sorter.

Usage:
    # Sort words from standard input:
    echo "b a c a" | token-sorter

    # Count numbers in a file, appending the report to another file:
    token-sorter -dataType long -sortingType byCount \\
        -inputFile numbers.txt -outputFile report.txt

Exit status is 0 on success, 2 when a selector flag has no recognized
value and 1 when the input or output file cannot be used.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import TYPE_CHECKING

from token_sorter.config import load_config, resolve_config, validate_selectors
from token_sorter.exceptions import ConfigValidationError, TokenSorterError
from token_sorter.pipeline import run_pipeline

if TYPE_CHECKING:
    from collections.abc import Sequence
    from typing import TextIO

logger = logging.getLogger("token_sorter")

EXIT_OK = 0
EXIT_RESOURCE_ERROR = 1
EXIT_CONFIG_ERROR = 2

# Value recorded when a selector flag is given without an argument.
_MISSING = ""

_FLAGS = ("-dataType", "-sortingType", "-inputFile", "-outputFile")


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the four recognized flags."""
    parser = argparse.ArgumentParser(
        prog="token-sorter",
        description="Sort numbers, lines or words and report the result.",
        allow_abbrev=False,
        add_help=False,
    )
    parser.add_argument(
        "-dataType",
        dest="data_type",
        nargs="?",
        const=_MISSING,
        default=None,
        help="Token kind: long, line or word (default: word).",
    )
    parser.add_argument(
        "-sortingType",
        dest="sorting_type",
        nargs="?",
        const=_MISSING,
        default=None,
        help="Ordering: natural or byCount (default: natural).",
    )
    parser.add_argument(
        "-inputFile",
        dest="input_file",
        nargs="?",
        default=None,
        help="File to read (default: standard input).",
    )
    parser.add_argument(
        "-outputFile",
        dest="output_file",
        nargs="?",
        default=None,
        help="File to append the report to (default: standard output).",
    )
    return parser


def split_attached_values(argv: Sequence[str]) -> tuple[list[str], list[str]]:
    """Separate ``-flag=value`` forms of the recognized flags from the rest.

    Only the ``-flag value`` form selects anything; the attached form is
    treated as an unrecognized flag.

    Returns:
        The attached forms and the remaining arguments, each in order.
    """
    attached = [arg for arg in argv if "=" in arg and arg.split("=", 1)[0] in _FLAGS]
    remaining = [arg for arg in argv if arg not in attached]
    return attached, remaining


def report_skipped_flags(extras: Sequence[str]) -> list[str]:
    """Warn about every unrecognized flag and return them.

    Leftover arguments that do not look like flags are ignored silently.
    """
    skipped = [arg for arg in extras if arg.startswith("-")]
    for flag in skipped:
        logger.warning('"%s" is not a valid parameter. It will be skipped.', flag)
    return skipped


def configure_logging() -> None:
    """Send diagnostics to standard error as bare messages."""
    logging.basicConfig(stream=sys.stderr, format="%(message)s")


def main(
    argv: Sequence[str] | None = None,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> int:
    """Parse arguments, run the pipeline and return the exit status.

    Args:
        argv: Arguments without the program name (default: ``sys.argv[1:]``).
        stdin: Replacement for standard input.
        stdout: Replacement for standard output.

    Returns:
        Process exit status.
    """
    configure_logging()
    arguments = list(sys.argv[1:] if argv is None else argv)
    attached, remaining = split_attached_values(arguments)
    args, extras = build_parser().parse_known_args(remaining)

    try:
        overrides = validate_selectors(args.sorting_type, args.data_type)
        if args.input_file:
            overrides["input_file"] = args.input_file
        if args.output_file:
            overrides["output_file"] = args.output_file
        config = resolve_config(load_config(), overrides)
    except ConfigValidationError as exc:
        logger.error("%s", exc)
        return EXIT_CONFIG_ERROR

    logger.setLevel(config.log_level)
    unrecognized = set(attached) | set(extras)
    report_skipped_flags([arg for arg in arguments if arg in unrecognized])

    try:
        run_pipeline(config, stdin=stdin, stdout=stdout)
    except TokenSorterError as exc:
        logger.error("%s", exc)
        return EXIT_RESOURCE_ERROR
    return EXIT_OK
