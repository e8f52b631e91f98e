"""Compliance report aggregation."""

from collections.abc import Iterable
from datetime import datetime, timezone
from decimal import ROUND_HALF_UP, Decimal
from pathlib import Path
from typing import NamedTuple

from repo_compliance.checks import Category, CheckResult, ComplianceTier
from repo_compliance.errors import ReportSealedError
from repo_compliance.security import SecurityWarning


class Score(NamedTuple):
    passed_count: int
    total_count: int
    percentage: float


class ComplianceReport:
    """Checks and warnings for one repository at one instant.

    Append-only until sealed; sealed reports reject further additions.
    ``captured_at`` records when the filesystem snapshot was taken.
    """

    def __init__(self, repository_path: Path, captured_at: datetime | None = None):
        self.repository_path = Path(repository_path)
        self.captured_at = captured_at or datetime.now(timezone.utc)
        self._checks: list[CheckResult] = []
        self._warnings: list[SecurityWarning] = []
        self._sealed = False

    def add_check(self, result: CheckResult) -> None:
        self._ensure_open()
        self._checks.append(result)

    def add_checks(self, results: Iterable[CheckResult]) -> None:
        for result in results:
            self.add_check(result)

    def add_warning(self, warning: SecurityWarning) -> None:
        self._ensure_open()
        self._warnings.append(warning)

    def add_warnings(self, warnings: Iterable[SecurityWarning]) -> None:
        for warning in warnings:
            self.add_warning(warning)

    def seal(self) -> "ComplianceReport":
        self._sealed = True
        return self

    @property
    def sealed(self) -> bool:
        return self._sealed

    @property
    def checks(self) -> tuple[CheckResult, ...]:
        return tuple(self._checks)

    @property
    def warnings(self) -> tuple[SecurityWarning, ...]:
        return tuple(self._warnings)

    @property
    def timestamp(self) -> str:
        """Capture time as ISO 8601 UTC with second precision."""
        return self.captured_at.astimezone(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")

    def passed_count(self) -> int:
        return sum(1 for c in self._checks if c.passed)

    def total_count(self) -> int:
        return len(self._checks)

    def percentage(self) -> float:
        """Pass rate rounded half-up to one decimal place."""
        total = self.total_count()
        if total == 0:
            return 0.0
        value = Decimal(self.passed_count() * 100) / Decimal(total)
        return float(value.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP))

    def score(self) -> Score:
        return Score(self.passed_count(), self.total_count(), self.percentage())

    def has_critical_warnings(self) -> bool:
        return any(w.is_critical for w in self._warnings)

    def tier_checks_passed(self, tier: ComplianceTier) -> bool:
        tier_checks = [c for c in self._checks if c.required_tier == tier]
        return bool(tier_checks) and all(c.passed for c in tier_checks)

    def bronze_compliant(self) -> bool:
        """All Bronze checks pass and no critical security warning exists."""
        return (
            self.tier_checks_passed(ComplianceTier.BRONZE)
            and not self.has_critical_warnings()
        )

    def highest_tier(self) -> ComplianceTier | None:
        # Only Bronze has requirements so far
        return ComplianceTier.BRONZE if self.bronze_compliant() else None

    def checks_by_category(self) -> dict[Category, list[CheckResult]]:
        """Group checks by category, keeping first-seen category order."""
        grouped: dict[Category, list[CheckResult]] = {}
        for check in self._checks:
            grouped.setdefault(check.category, []).append(check)
        return grouped

    def _ensure_open(self) -> None:
        if self._sealed:
            raise ReportSealedError("Report is sealed; no further results accepted")
