"""Repository artifact checks."""

from repo_compliance.repository import ResolvedPath

from .bronze import BRONZE_CATEGORIES, BRONZE_CHECK_COUNT, CheckCategory
from .types import Category, CheckResult, ComplianceTier

__all__ = [
    "BRONZE_CATEGORIES",
    "BRONZE_CHECK_COUNT",
    "Category",
    "CheckCategory",
    "CheckResult",
    "ComplianceTier",
    "run_all_checks",
]


def run_all_checks(root: ResolvedPath) -> list[CheckResult]:
    """Run every Bronze check in category-then-item order."""
    results: list[CheckResult] = []
    for checker in BRONZE_CATEGORIES:
        results.extend(checker.evaluate(root))
    return results
