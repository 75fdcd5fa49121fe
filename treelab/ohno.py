"""Numbered error and warning reports written to a stream."""

from __future__ import annotations

from enum import Enum
from typing import Optional, TextIO


class Severity(Enum):
    """How serious a reported problem is."""

    WARNING = "WARNING"
    SERIOUS = "SERIOUS"
    FATAL = "FATAL"


class Reporter:
    """Writes reports tagged with the application name and a running number."""

    def __init__(self, stream: Optional[TextIO], app_name: str) -> None:
        self.stream = stream
        self.app_name = app_name
        self.error_number = 0

    def report(self, message: str, severity: Severity) -> None:
        """Write one report line; nothing happens without a stream."""
        if self.stream is None:
            return
        self.error_number += 1
        self.stream.write(
            f"{self.app_name}: {severity.value} "
            f"(Error #{self.error_number}) - {message}\n"
        )
        self.stream.flush()