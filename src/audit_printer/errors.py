"""Exceptions raised while composing and delivering results."""


class PrinterError(Exception):
    """Base class for audit-printer errors."""


class InvalidModeError(PrinterError, ValueError):
    """Output mode name outside the supported set."""

    def __init__(self, mode):
        self.mode = mode
        super().__init__(f"Invalid output mode: {mode!r}")


class UnresolvedAuditError(PrinterError, KeyError):
    """A sub-item references an audit key missing from the results."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        return f"Sub-item references unknown audit {self.key!r}"


class UnknownFormatterError(PrinterError, LookupError):
    """No extended-info formatter (or formatter mode) with that name."""


class ResultsLoadError(PrinterError):
    """Results could not be read or parsed."""
