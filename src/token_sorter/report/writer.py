"""Sink capability the report is written through.

The formatter only ever sees a ReportWriter. Opening and closing the
underlying file belongs to token_sorter.resources.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from typing import TextIO


class ReportWriter(ABC):
    """Destination for report lines."""

    @abstractmethod
    def write_line(self, line: str) -> None:
        """Write *line* followed by a newline."""


class StreamReportWriter(ReportWriter):
    """Writes lines to an already opened text stream.

    The stream is not closed by the writer.
    """

    def __init__(self, stream: TextIO) -> None:
        self._stream = stream

    def write_line(self, line: str) -> None:
        self._stream.write(line)
        self._stream.write("\n")


class MemoryReportWriter(ReportWriter):
    """Collects lines in memory."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def write_line(self, line: str) -> None:
        self._lines.append(line)

    @property
    def lines(self) -> list[str]:
        """Lines written so far, in order."""
        return list(self._lines)
