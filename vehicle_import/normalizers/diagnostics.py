import logging
from typing import List, Protocol
from .types import Diagnostic

_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
}


class DiagnosticSink(Protocol):
    def emit(self, diagnostic: Diagnostic) -> None:
        """Write-only: record one diagnostic. Must not raise."""
        ...


class LoggingSink(DiagnosticSink):
    """Forwards diagnostics to the process logger at the matching level."""
    def __init__(self, logger: logging.Logger | None = None):
        self.logger = logger or logging.getLogger("vehicle_import.normalizers")

    def emit(self, diagnostic: Diagnostic) -> None:
        level = _LEVELS.get(diagnostic.severity, logging.WARNING)
        if diagnostic.row_index is None:
            self.logger.log(level, "%s", diagnostic.message)
        else:
            self.logger.log(level, "%s (row=%s field=%s)",
                            diagnostic.message, diagnostic.row_index, diagnostic.field)


class CollectingSink(LoggingSink):
    """Logs like LoggingSink and also keeps every diagnostic so the caller can report them."""
    def __init__(self, logger: logging.Logger | None = None):
        super().__init__(logger)
        self.diagnostics: List[Diagnostic] = []

    def emit(self, diagnostic: Diagnostic) -> None:
        self.diagnostics.append(diagnostic)
        super().emit(diagnostic)
