"""Metadata-only artifact probes."""

import logging
import os
import stat
from dataclasses import dataclass
from pathlib import Path

from repo_compliance.errors import MetadataReadError

from .types import Artifact, ArtifactKind, Category, CheckResult, Requirement

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Probe:
    """Outcome of stat-ing one artifact."""

    artifact: Artifact
    present: bool
    error: MetadataReadError | None = None


def probe(base: Path, artifact: Artifact) -> Probe:
    """Stat *artifact* under *base* without opening it.

    Symlinks are followed. A missing entry is absent; any other OSError is
    recorded on the probe and also counts as absent.
    """
    path = base / artifact.name
    try:
        st = os.stat(path)
    except (FileNotFoundError, NotADirectoryError):
        return Probe(artifact, False)
    except OSError as exc:
        error = MetadataReadError(path, exc)
        logger.debug("%s", error)
        return Probe(artifact, False, error)

    if artifact.kind == ArtifactKind.DIRECTORY:
        present = stat.S_ISDIR(st.st_mode)
    else:
        present = stat.S_ISREG(st.st_mode)
    return Probe(artifact, present)


def run_check(
    category: Category,
    requirement: Requirement,
    base: Path,
) -> CheckResult:
    """Evaluate a requirement against *base*.

    Artifacts are alternatives: the first present one satisfies the
    requirement and the rest are not probed.

    Args:
        category: Category the result is filed under
        requirement: Item name and accepted artifacts
        base: Directory the artifact names are relative to

    Returns:
        CheckResult with check outcome
    """
    probes: list[Probe] = []
    for artifact in requirement.artifacts:
        result = probe(base, artifact)
        if result.present:
            return CheckResult(
                category=category,
                item=requirement.item,
                passed=True,
                required_tier=requirement.tier,
                detail=f"found {artifact.display_name}",
            )
        probes.append(result)

    return CheckResult(
        category=category,
        item=requirement.item,
        passed=False,
        required_tier=requirement.tier,
        detail=_failure_detail(probes),
    )


def failed_check(
    category: Category, requirement: Requirement, detail: str
) -> CheckResult:
    """Record *requirement* as failed without probing."""
    return CheckResult(
        category=category,
        item=requirement.item,
        passed=False,
        required_tier=requirement.tier,
        detail=detail,
    )


def _failure_detail(probes: list[Probe]) -> str:
    errors = [p.error for p in probes if p.error is not None]
    if errors:
        return "; ".join(f"{e.path.name}: {e.reason}" for e in errors)
    if len(probes) == 1:
        return f"{probes[0].artifact.display_name} not found"
    names = ", ".join(p.artifact.display_name for p in probes)
    return f"none of {names} found"
