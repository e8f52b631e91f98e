"""Process exit codes."""

from enum import IntEnum

from repo_compliance.errors import PathResolutionError
from repo_compliance.report import ComplianceReport


class ExitCode(IntEnum):
    SUCCESS = 0
    COMPLIANCE_FAILED = 1
    SECURITY_WARNING = 2
    INVALID_PATH = 3
    INVALID_ARGS = 4


def exit_code_for(report: ComplianceReport) -> ExitCode:
    """Map a finished report to an exit code.

    Critical warnings take precedence over the artifact score.
    """
    if report.has_critical_warnings():
        return ExitCode.SECURITY_WARNING
    if not report.bronze_compliant():
        return ExitCode.COMPLIANCE_FAILED
    return ExitCode.SUCCESS


def exit_code_for_error(exc: Exception) -> ExitCode:
    if isinstance(exc, PathResolutionError):
        return ExitCode.INVALID_PATH
    return ExitCode.INVALID_ARGS
