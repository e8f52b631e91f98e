"""Verification pipeline.

Stages run strictly in order, once each:
Idle -> PathValidated -> ChecksRun -> ScanRun -> Aggregated -> Rendered
-> Terminated.
"""

import logging
import os
from datetime import datetime, timezone
from enum import Enum

from repo_compliance import security
from repo_compliance.checks import CheckResult, run_all_checks
from repo_compliance.config import ReportAction, RunConfig
from repo_compliance.errors import PipelineStateError
from repo_compliance.exit_codes import ExitCode, exit_code_for
from repo_compliance.report import ComplianceReport
from repo_compliance.repository import ResolvedPath, resolve_path
from repo_compliance.security import SecurityWarning
from repo_compliance.ui import render_output

logger = logging.getLogger(__name__)


class Stage(Enum):
    IDLE = 0
    PATH_VALIDATED = 1
    CHECKS_RUN = 2
    SCAN_RUN = 3
    AGGREGATED = 4
    RENDERED = 5
    TERMINATED = 6


class Pipeline:
    """One verification run driven by an immutable RunConfig."""

    def __init__(self, config: RunConfig):
        self.config = config
        self.stage = Stage.IDLE
        self.root: ResolvedPath | None = None
        self.report: ComplianceReport | None = None
        self.captured_at: datetime | None = None
        self._checks: list[CheckResult] = []
        self._warnings: list[SecurityWarning] = []

    def validate_path(self) -> ResolvedPath:
        self._advance(Stage.PATH_VALIDATED)
        self.root = resolve_path(self.config.path)
        return self.root

    def run_checks(self) -> list[CheckResult]:
        self._advance(Stage.CHECKS_RUN)
        # The snapshot starts with the first artifact stat
        self.captured_at = datetime.now(timezone.utc)
        self._checks = run_all_checks(self.root)
        logger.debug(
            "%d/%d checks passed",
            sum(1 for c in self._checks if c.passed),
            len(self._checks),
        )
        return self._checks

    def run_scan(self) -> list[SecurityWarning]:
        self._advance(Stage.SCAN_RUN)
        self._warnings = security.scan(self.root)
        logger.debug("Symlink scan produced %d warnings", len(self._warnings))
        return self._warnings

    def aggregate(self) -> ComplianceReport:
        self._advance(Stage.AGGREGATED)
        report = ComplianceReport(self.root.root, captured_at=self.captured_at)
        report.add_checks(self._checks)
        report.add_warnings(self._warnings)
        self.report = report.seal()
        return self.report

    def render(self, color: bool = False) -> str:
        self._advance(Stage.RENDERED)
        return render_output(self.report, self.config, color=color)

    def terminate(self) -> ExitCode:
        self._advance(Stage.TERMINATED)
        if self.config.action != ReportAction.CHECK:
            return ExitCode.SUCCESS
        return exit_code_for(self.report)

    def run(self) -> ComplianceReport:
        """Run every stage up to aggregation."""
        self.validate_path()
        self.run_checks()
        self.run_scan()
        return self.aggregate()

    def _advance(self, target: Stage) -> None:
        if target.value != self.stage.value + 1:
            raise PipelineStateError(
                f"Cannot move from {self.stage.name} to {target.name}"
            )
        self.stage = target


def verify_repository(path: str | os.PathLike) -> ComplianceReport:
    """Verify *path* with default options and return the sealed report."""
    return Pipeline(RunConfig(path=path)).run()
