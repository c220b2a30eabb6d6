"""Tokenize -> sort -> report pipeline for one run.

The input is read completely before anything is sorted, and the report
is rendered completely before the sink is opened.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from token_sorter.report.formatter import emit, format_report
from token_sorter.resources import open_output, read_input
from token_sorter.sorting import SortStrategyRegistry
from token_sorter.tokenizer import tokenize

if TYPE_CHECKING:
    from typing import TextIO

    from token_sorter.config import SorterConfig
    from token_sorter.types import DataType, Report, SortingType

logger = logging.getLogger("token_sorter")


def sort_text(text: str, data_type: DataType, sorting_type: SortingType) -> Report:
    """Run the pipeline on *text* in memory, without any I/O.

    Args:
        text: Complete input.
        data_type: Kind of token to read.
        sorting_type: Ordering strategy to apply.

    Returns:
        The rendered report.
    """
    stream = tokenize(text, data_type)
    strategy = SortStrategyRegistry.build(sorting_type)
    logger.debug(
        "sorting %d %s with strategy=%s",
        len(stream),
        data_type.noun,
        sorting_type.value,
    )
    return format_report(strategy.sort(stream))


def run_pipeline(
    config: SorterConfig,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> Report:
    """Run one complete sort according to *config*.

    Args:
        config: Resolved configuration.
        stdin: Replacement for standard input (used when no input file).
        stdout: Replacement for standard output (used when no output file).

    Returns:
        The report that was written.

    Raises:
        InputSourceError: If the input file cannot be read.
        OutputSinkError: If the output file cannot be written.
    """
    text = read_input(config.input_file, stdin=stdin)
    report = sort_text(text, config.data_type, config.sorting_type)
    with open_output(config.output_file, stdout=stdout) as writer:
        emit(report, writer)
    logger.debug("wrote %d report lines", len(report.lines))
    return report
