"""Report subsystem: formatting sort results and writing them to a sink."""

from token_sorter.report.formatter import emit, format_report, percentage
from token_sorter.report.writer import MemoryReportWriter, ReportWriter, StreamReportWriter

__all__ = [
    "MemoryReportWriter",
    "ReportWriter",
    "StreamReportWriter",
    "emit",
    "format_report",
    "percentage",
]
