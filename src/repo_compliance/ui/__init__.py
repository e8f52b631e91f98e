"""Report rendering."""

from repo_compliance.checks import ComplianceTier
from repo_compliance.config import ReportAction, RunConfig
from repo_compliance.report import ComplianceReport

from .dashboard import build_dashboard, render_dashboard, render_human
from .documents import generate_badge, generate_conformity_doc
from .structured import render_json, render_structured

__all__ = [
    "build_dashboard",
    "generate_badge",
    "generate_conformity_doc",
    "render_dashboard",
    "render_human",
    "render_json",
    "render_output",
    "render_structured",
]


def render_output(
    report: ComplianceReport, config: RunConfig, color: bool = False
) -> str:
    """Render what *config* asks for; the result ends with a newline."""
    if config.action == ReportAction.BADGE:
        return generate_badge(report.highest_tier() or ComplianceTier.BRONZE) + "\n"
    if config.action == ReportAction.CONFORMITY:
        return generate_conformity_doc(report)
    if config.is_structured:
        return render_json(report) + "\n"
    return render_human(report, config.verbosity, color=color)
