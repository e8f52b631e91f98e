"""Symlink containment scanning."""

from .symlinks import MAX_LINK_HOPS, resolve_link, scan
from .types import SecurityWarning, Severity

__all__ = [
    "MAX_LINK_HOPS",
    "resolve_link",
    "scan",
    "SecurityWarning",
    "Severity",
]
