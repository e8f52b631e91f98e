"""Repository compliance verification.

Checks a repository for the Bronze tier artifacts (documentation, metadata,
build system and source layout files) and for symlinks that escape the
repository, then reports a score and an exit code suitable for CI.
"""

__version__ = "0.3.0"

from repo_compliance.checks import CheckResult, ComplianceTier, run_all_checks
from repo_compliance.config import OutputFormat, ReportAction, RunConfig, Verbosity
from repo_compliance.exit_codes import ExitCode, exit_code_for
from repo_compliance.pipeline import Pipeline, verify_repository
from repo_compliance.report import ComplianceReport, Score
from repo_compliance.security import SecurityWarning, Severity

__all__ = [
    "CheckResult",
    "ComplianceReport",
    "ComplianceTier",
    "ExitCode",
    "OutputFormat",
    "Pipeline",
    "ReportAction",
    "RunConfig",
    "Score",
    "SecurityWarning",
    "Severity",
    "Verbosity",
    "exit_code_for",
    "run_all_checks",
    "verify_repository",
]
