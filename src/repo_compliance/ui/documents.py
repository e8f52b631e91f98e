"""Badge and conformity statement generation."""

from repo_compliance.checks import ComplianceTier
from repo_compliance.report import ComplianceReport


def generate_badge(tier: ComplianceTier) -> str:
    """Return shields.io badge markdown for *tier*."""
    return (
        f"![{tier.value} compliance]"
        f"(https://img.shields.io/badge/compliance-{tier.value}-{tier.badge_color})"
    )


def generate_conformity_doc(report: ComplianceReport) -> str:
    """Return a Markdown conformity statement for *report*."""
    tier = report.highest_tier()
    score = report.score()
    project = report.repository_path.name or str(report.repository_path)

    lines = [
        "# Conformity Statement",
        "",
        f"**Project**: {project}",
        f"**Tier**: {tier.value if tier else 'Not Met'}",
        f"**Last Verified**: {report.captured_at.date().isoformat()}",
        "",
        "## Bronze Requirements",
        "",
        "| Category | Requirement | Status |",
        "|----------|-------------|--------|",
    ]
    for check in report.checks:
        if check.required_tier != ComplianceTier.BRONZE:
            continue
        status = "Yes" if check.passed else "No"
        lines.append(f"| {check.category.value} | {check.item} | {status} |")

    lines += ["", "## Security", ""]
    critical = [w for w in report.warnings if w.is_critical]
    if critical:
        for warning in critical:
            lines.append(f"- {warning.message}")
    else:
        lines.append("No symlinks escape the repository.")

    lines += [
        "",
        "## Verification",
        "",
        "```bash",
        "repo-compliance .",
        "```",
        "",
        f"Expected output: `{score.passed_count}/{score.total_count} checks passed "
        f"({score.percentage:.1f}%)`",
        "",
    ]
    return "\n".join(lines)
