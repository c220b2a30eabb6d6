"""Scoped access to the input source and the output sink.

Named files are opened on entry and closed on every exit path. Standard
input and standard output are used as-is and never closed.
"""

from __future__ import annotations

import logging
import sys
from contextlib import contextmanager
from typing import TYPE_CHECKING

from token_sorter.exceptions import InputSourceError, OutputSinkError
from token_sorter.report.writer import StreamReportWriter

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path
    from typing import TextIO

logger = logging.getLogger("token_sorter")


def read_input(path: Path | None, stdin: TextIO | None = None) -> str:
    """Read the whole input, from *path* or from standard input.

    Args:
        path: File to read, or ``None`` for standard input.
        stdin: Stream used instead of ``sys.stdin`` when *path* is None.

    Returns:
        The complete input text.

    Raises:
        InputSourceError: If the input cannot be opened, read or decoded.
    """
    if path is None:
        stream = stdin if stdin is not None else sys.stdin
        try:
            return stream.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise InputSourceError(f"Cannot read standard input: {exc}") from exc

    try:
        with open(path, encoding="utf-8") as handle:
            text = handle.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise InputSourceError(f"Cannot read input file '{path}': {exc}") from exc
    logger.debug("read %d characters from %s", len(text), path)
    return text


@contextmanager
def open_output(path: Path | None, stdout: TextIO | None = None) -> Iterator[StreamReportWriter]:
    """Yield a writer over *path* (append mode) or standard output.

    Args:
        path: File the report is appended to, created if missing, or
            ``None`` for standard output.
        stdout: Stream used instead of ``sys.stdout`` when *path* is None.

    Yields:
        A StreamReportWriter bound to the sink.

    Raises:
        OutputSinkError: If the sink cannot be opened, written or flushed.
    """
    if path is None:
        try:
            yield StreamReportWriter(stdout if stdout is not None else sys.stdout)
        except OSError as exc:
            raise OutputSinkError(f"Cannot write standard output: {exc}") from exc
        return

    try:
        handle = open(path, "a", encoding="utf-8")
    except OSError as exc:
        raise OutputSinkError(f"Cannot open output file '{path}': {exc}") from exc
    # Buffered data is only flushed on close, so close is inside the try.
    try:
        with handle:
            yield StreamReportWriter(handle)
    except OSError as exc:
        raise OutputSinkError(f"Cannot write output file '{path}': {exc}") from exc
