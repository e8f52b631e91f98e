from datetime import datetime, timezone
from pathlib import Path

import pytest

from repo_compliance.checks import Category, CheckResult, ComplianceTier
from repo_compliance.errors import ReportSealedError
from repo_compliance.report import ComplianceReport, Score
from repo_compliance.security import SecurityWarning, Severity


def _check(passed: bool, item: str = "Item") -> CheckResult:
    return CheckResult(Category.DOCUMENTATION, item, passed, ComplianceTier.BRONZE)


def _report(passed: int, total: int) -> ComplianceReport:
    report = ComplianceReport(Path("/tmp/test"))
    report.add_checks(_check(i < passed, f"Item{i}") for i in range(total))
    return report


def test_report_creation():
    report = ComplianceReport(Path("/tmp/test"))
    assert report.repository_path == Path("/tmp/test")
    assert report.checks == ()
    assert report.warnings == ()
    assert report.captured_at.tzinfo is not None


def test_add_check():
    report = ComplianceReport(Path("/tmp/test"))
    report.add_check(_check(True))
    assert len(report.checks) == 1
    assert report.checks[0].passed is True


def test_check_result_is_immutable():
    with pytest.raises(AttributeError):
        _check(True).passed = False


@pytest.mark.parametrize(
    "passed, total, expected",
    [
        (0, 16, Score(0, 16, 0.0)),
        (1, 16, Score(1, 16, 6.3)),
        (3, 16, Score(3, 16, 18.8)),
        (15, 16, Score(15, 16, 93.8)),
        (16, 16, Score(16, 16, 100.0)),
        (0, 0, Score(0, 0, 0.0)),
    ],
)
def test_score_rounds_half_up(passed, total, expected):
    assert _report(passed, total).score() == expected


def test_bronze_compliance_all_passing():
    assert _report(2, 2).bronze_compliant()


def test_bronze_compliance_one_failing():
    assert not _report(1, 2).bronze_compliant()


def test_empty_report_is_not_compliant():
    assert not _report(0, 0).bronze_compliant()


def test_critical_warning_fails_compliance():
    report = _report(16, 16)
    report.add_warning(SecurityWarning(Severity.CRITICAL, "escape", "/tmp/test/x"))
    assert report.tier_checks_passed(ComplianceTier.BRONZE)
    assert report.has_critical_warnings()
    assert not report.bronze_compliant()
    assert report.highest_tier() is None


@pytest.mark.parametrize("severity", [Severity.INFO, Severity.WARNING])
def test_non_critical_warnings_do_not_fail_compliance(severity):
    report = _report(16, 16)
    report.add_warning(SecurityWarning(severity, "note", "/tmp/test/x"))
    assert report.bronze_compliant()
    assert report.highest_tier() == ComplianceTier.BRONZE


def test_sealed_report_rejects_appends():
    report = _report(1, 1).seal()
    assert report.sealed
    with pytest.raises(ReportSealedError):
        report.add_check(_check(True))
    with pytest.raises(ReportSealedError):
        report.add_warning(SecurityWarning(Severity.INFO, "x", "/tmp"))


def test_checks_by_category_keeps_order():
    report = ComplianceReport(Path("/tmp/test"))
    report.add_check(CheckResult(Category.WELL_KNOWN, "a", True))
    report.add_check(CheckResult(Category.DOCUMENTATION, "b", False))
    report.add_check(CheckResult(Category.WELL_KNOWN, "c", False))
    grouped = report.checks_by_category()
    assert list(grouped) == [Category.WELL_KNOWN, Category.DOCUMENTATION]
    assert [c.item for c in grouped[Category.WELL_KNOWN]] == ["a", "c"]


def test_timestamp_is_utc_iso8601():
    captured = datetime(2024, 2, 29, 13, 5, 9, 123456, tzinfo=timezone.utc)
    report = ComplianceReport(Path("/tmp/test"), captured_at=captured)
    assert report.timestamp == "2024-02-29T13:05:09Z"


def test_tier_badge_colors():
    assert ComplianceTier.BRONZE.badge_color == "cd7f32"
    assert ComplianceTier.GOLD.badge_color == "ffd700"
