"""Exception hierarchy for token-sorter.

All exceptions derive from TokenSorterError, so the command-line entry
point can turn any of them into a message and an exit status. Malformed
numbers and unknown flags are not exceptions: they are logged and skipped.
"""


class TokenSorterError(Exception):
    """Base exception for all token-sorter errors."""


class ConfigValidationError(TokenSorterError):
    """Configuration could not be resolved.

    Raised when a data-type or sorting-type selector is present without a
    value, carries an unrecognized value, or when a setting loaded from the
    environment fails validation. Aborts the run before any input is read.
    """


class InputSourceError(TokenSorterError):
    """The input file could not be opened or read."""


class OutputSinkError(TokenSorterError):
    """The output file could not be opened or written."""
