"""Machine-readable rendering of compliance reports."""

import json
from typing import Any

from repo_compliance import __version__
from repo_compliance.exit_codes import exit_code_for
from repo_compliance.report import ComplianceReport

TOOL_NAME = "repo-compliance"


def render_structured(report: ComplianceReport) -> dict[str, Any]:
    """Return the report as plain data, mirroring the verbose human form."""
    score = report.score()
    code = exit_code_for(report)
    categories = []
    for category, checks in report.checks_by_category().items():
        categories.append(
            {
                "name": category.value,
                "items": [
                    {
                        "name": c.item,
                        "passed": c.passed,
                        "tier": c.required_tier.value,
                        "detail": c.detail,
                    }
                    for c in checks
                ],
                "passed_count": sum(1 for c in checks if c.passed),
                "total_count": len(checks),
            }
        )

    return {
        "tool": TOOL_NAME,
        "version": __version__,
        "repository": str(report.repository_path),
        "timestamp": report.timestamp,
        "tier": "Bronze",
        "categories": categories,
        "overall": {
            "passed_count": score.passed_count,
            "total_count": score.total_count,
            "percentage": score.percentage,
            "compliant": report.bronze_compliant(),
            "has_critical_warnings": report.has_critical_warnings(),
            "exit_code": {"value": code.value, "name": code.name},
        },
        "warnings": [
            {
                "severity": w.severity.value,
                "message": w.message,
                "path": w.related_path,
                "target": w.target,
            }
            for w in report.warnings
        ],
    }


def render_json(report: ComplianceReport) -> str:
    return json.dumps(render_structured(report), indent=2)
