# autolink/diagnostics.py

from __future__ import annotations

import logging
from typing import Optional, Protocol


class Diagnostics(Protocol):
    def report(self, message: str) -> None:
        ...


class NullDiagnostics:
    """Drops every report."""

    def report(self, message: str) -> None:
        pass


class LoggingDiagnostics:
    """Forward reports to a logger as warnings."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger("autolink")

    def report(self, message: str) -> None:
        self.logger.warning(message)
