"""Diagnostic model: structured lint messages for selector trees."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity level for a diagnostic message."""

    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"


@dataclass(frozen=True)
class Diagnostic:
    """A single lint finding about a selector.

    Attributes:
        rule: Identifier for the lint rule that produced this diagnostic.
        severity: How serious the issue is.
        message: Human-readable description of the problem.
        fragment: The offending fragment text, if applicable.
        fix: Suggested remediation, if available.
    """

    rule: str
    severity: Severity
    message: str
    fragment: str | None = None
    fix: str | None = None

    @property
    def is_error(self) -> bool:
        return self.severity is Severity.ERROR

    @property
    def is_warning(self) -> bool:
        return self.severity is Severity.WARNING

    def __str__(self) -> str:
        location = f" [{self.fragment}]" if self.fragment else ""
        return f"{self.severity.value}{location}: {self.message}"
