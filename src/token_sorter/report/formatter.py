"""Render sort results into the textual report.

Report shapes:

Natural order, numbers or words::

    Total words: 3.
    Sorted data: a a b

Natural order, lines (one sorted line per report line)::

    Total lines: 2.
    Sorted data:
    alpha
    beta

By count, ascending by count then by value::

    Total words: 3.
    b: 1 time(s), 33%
    a: 2 time(s), 66%
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from token_sorter.types import DataType, FrequencyGrouping, NaturalOrder, Report

if TYPE_CHECKING:
    from token_sorter.report.writer import ReportWriter
    from token_sorter.types import SortResult


def percentage(count: int, total: int) -> int:
    """Return ``count * 100 // total``, or 0 for an empty stream."""
    if total == 0:
        return 0
    return count * 100 // total


def header_line(data_type: DataType, total: int) -> str:
    return f"Total {data_type.noun}: {total}."


def format_natural(result: NaturalOrder) -> Report:
    """Render every sorted value under the total header."""
    lines = [header_line(result.data_type, result.total)]
    if result.data_type is DataType.LINE:
        lines.append("Sorted data:")
        lines.extend(str(value) for value in result.values)
    elif result.values:
        lines.append("Sorted data: " + " ".join(str(value) for value in result.values))
    else:
        lines.append("Sorted data:")
    return Report(lines=tuple(lines))


def format_by_count(result: FrequencyGrouping) -> Report:
    """Render one line per distinct value with its count and share."""
    lines = [header_line(result.data_type, result.total)]
    for group in result.groups:
        share = percentage(group.count, result.total)
        for value in group.values:
            lines.append(f"{value}: {group.count} time(s), {share}%")
    return Report(lines=tuple(lines))


def format_report(result: SortResult) -> Report:
    """Render *result* in the shape that matches its sorting strategy.

    Raises:
        TypeError: If *result* is not a known sort result.
    """
    if isinstance(result, NaturalOrder):
        return format_natural(result)
    if isinstance(result, FrequencyGrouping):
        return format_by_count(result)
    raise TypeError(f"Cannot format sort result of type {type(result).__name__}")


def emit(report: Report, writer: ReportWriter) -> None:
    """Write every report line through *writer*, in order."""
    for line in report.lines:
        writer.write_line(line)
