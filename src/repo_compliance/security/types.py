"""Security warning types."""

from dataclasses import dataclass
from enum import Enum


class Severity(Enum):
    """Severity of a security warning."""

    INFO = "info"
    WARNING = "warning"
    CRITICAL = "critical"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Severity.INFO: "INFO",
    Severity.WARNING: "WARN",
    Severity.CRITICAL: "CRITICAL",
}


@dataclass(frozen=True)
class SecurityWarning:
    """A security finding about a path in the repository."""

    severity: Severity
    message: str
    related_path: str
    target: str | None = None

    @property
    def is_critical(self) -> bool:
        return self.severity == Severity.CRITICAL
