"""Rich rendering of compliance reports."""

import io
import shutil

from rich.console import Console, RenderableType
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from repo_compliance.checks import Category, CheckResult
from repo_compliance.config import Verbosity
from repo_compliance.exit_codes import exit_code_for
from repo_compliance.report import ComplianceReport
from repo_compliance.security import Severity

STATUS_ICONS = {
    True: "[green]OK[/green]",
    False: "[red]FAIL[/red]",
}

SEVERITY_ICONS = {
    Severity.INFO: "[dim]INFO[/dim]",
    Severity.WARNING: "[yellow]WARN[/yellow]",
    Severity.CRITICAL: "[red bold]CRITICAL[/red bold]",
}

DEFAULT_WIDTH = 120


def _build_repository_panel(report: ComplianceReport) -> Panel:
    info = (
        f"Repository: {escape(str(report.repository_path))}\n"
        f"Captured:   {report.timestamp}\n"
        f"Tier:       Bronze"
    )
    return Panel(info, title="Compliance Report")


def _build_category_table(
    category: Category, checks: list[CheckResult], verbose: bool
) -> Table:
    passed = sum(1 for c in checks if c.passed)
    table = Table(
        title=f"{category.value} ({passed}/{len(checks)})",
        title_justify="left",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Check", style="cyan", min_width=24)
    table.add_column("Status", justify="center", width=6)
    table.add_column("Tier", width=8)
    if verbose:
        table.add_column("Details", min_width=20)

    for check in checks:
        row = [escape(check.item), STATUS_ICONS[check.passed], check.required_tier.value]
        if verbose:
            row.append(escape(check.detail or ""))
        table.add_row(*row)
    return table


def _build_totals_table(report: ComplianceReport) -> Table:
    table = Table(show_header=True, header_style="bold", box=None)
    table.add_column("Category", style="cyan", min_width=18)
    table.add_column("Passed", justify="right")
    table.add_column("Status", justify="center", width=6)

    for category, checks in report.checks_by_category().items():
        passed = sum(1 for c in checks if c.passed)
        table.add_row(
            category.value,
            f"{passed}/{len(checks)}",
            STATUS_ICONS[passed == len(checks)],
        )
    return table


def _build_warnings_table(report: ComplianceReport, verbose: bool) -> Table:
    table = Table(
        title=f"Security Warnings ({len(report.warnings)})",
        title_justify="left",
        show_header=True,
        header_style="bold",
    )
    table.add_column("Severity", width=8)
    table.add_column("Message", min_width=30)
    if verbose:
        table.add_column("Path")
        table.add_column("Target")

    for warning in report.warnings:
        row = [SEVERITY_ICONS[warning.severity], escape(warning.message)]
        if verbose:
            row.append(escape(warning.related_path))
            row.append(escape(warning.target or "-"))
        table.add_row(*row)
    return table


def _severity_counts(report: ComplianceReport) -> str:
    counts = {s: 0 for s in Severity}
    for warning in report.warnings:
        counts[warning.severity] += 1
    return ", ".join(f"{counts[s]} {s.value}" for s in reversed(Severity))


def _build_summary_panel(report: ComplianceReport, verbose: bool) -> Panel:
    score = report.score()
    critical = report.has_critical_warnings()

    if report.bronze_compliant():
        banner = "[green bold]Bronze-level compliance: ACHIEVED[/green bold]"
        border_style = "green"
    elif critical:
        banner = "[red bold]Bronze-level compliance: NOT MET (security)[/red bold]"
        border_style = "red"
    else:
        banner = "[red bold]Bronze-level compliance: NOT MET[/red bold]"
        border_style = "red"

    lines = [
        banner,
        f"Score: {score.passed_count}/{score.total_count} checks passed "
        f"({score.percentage:.1f}%)",
        f"Warnings: {_severity_counts(report)}",
    ]
    if critical:
        lines.append(
            "[red]CRITICAL: symlinks escape the repository - review required[/red]"
        )
    if verbose:
        code = exit_code_for(report)
        lines.append(f"Exit code: {code.value} ({code.name})")

    return Panel("\n".join(lines), title="Summary", border_style=border_style)


def build_dashboard(
    report: ComplianceReport, verbosity: Verbosity = Verbosity.NORMAL
) -> list[RenderableType]:
    """Return the renderables making up the human report."""
    verbose = verbosity == Verbosity.VERBOSE
    parts: list[RenderableType] = [_build_repository_panel(report)]

    if verbosity == Verbosity.QUIET:
        parts.append(_build_totals_table(report))
    else:
        for category, checks in report.checks_by_category().items():
            parts.append(_build_category_table(category, checks, verbose))
        if report.warnings:
            parts.append(_build_warnings_table(report, verbose))

    parts.append(_build_summary_panel(report, verbose))
    return parts


def render_dashboard(
    report: ComplianceReport,
    verbosity: Verbosity = Verbosity.NORMAL,
    console: Console | None = None,
) -> None:
    console = console or Console()
    for part in build_dashboard(report, verbosity):
        console.print(part)
        console.print()


def render_human(
    report: ComplianceReport,
    verbosity: Verbosity = Verbosity.NORMAL,
    color: bool = False,
) -> str:
    """Render the human report to a string.

    Without *color* the text is plain and DEFAULT_WIDTH columns wide.
    """
    width = DEFAULT_WIDTH
    if color:
        width = shutil.get_terminal_size((DEFAULT_WIDTH, 24)).columns
    buffer = io.StringIO()
    console = Console(
        file=buffer,
        width=width,
        force_terminal=color,
        color_system="standard" if color else None,
        highlight=False,
        emoji=False,
    )
    render_dashboard(report, verbosity, console)
    return buffer.getvalue()
