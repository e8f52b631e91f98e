"""Find symlinks that escape the repository root.

The walk never follows symlinked directories and keeps its own stack, so
cyclic link graphs and deep trees cannot exhaust the call stack. Link
targets are resolved hop by hop with a visited set and a hop limit; no file
contents are read.
"""

import logging
import os
from pathlib import Path

from repo_compliance.errors import SymlinkResolutionError
from repo_compliance.repository import ResolvedPath

from .types import SecurityWarning, Severity

logger = logging.getLogger(__name__)

# Linux MAXSYMLINKS
MAX_LINK_HOPS = 40

def resolve_link(link: Path, max_hops: int = MAX_LINK_HOPS) -> Path:
    """Return the canonical target of *link*.

    Raises SymlinkResolutionError if the chain revisits a link, exceeds
    *max_hops* or cannot be read. A dangling target resolves to where it
    would be.
    """
    visited: set[str] = set()
    current = str(link)
    for _ in range(max_hops):
        key = os.path.normpath(current)
        if key in visited:
            raise SymlinkResolutionError(link, SymlinkResolutionError.CYCLE, key)
        visited.add(key)
        try:
            target = os.readlink(current)
        except OSError as exc:
            raise SymlinkResolutionError(
                link, SymlinkResolutionError.UNREADABLE, exc.strerror or ""
            ) from exc
        current = os.path.join(os.path.dirname(current), target)
        if not os.path.islink(current):
            break
    else:
        raise SymlinkResolutionError(link, SymlinkResolutionError.TOO_MANY_HOPS)

    try:
        return Path(os.path.realpath(current, strict=False))
    except (OSError, RuntimeError) as exc:
        # Loops hidden in intermediate directory components
        raise SymlinkResolutionError(
            link, SymlinkResolutionError.CYCLE, str(exc)
        ) from exc


def scan(root: ResolvedPath) -> list[SecurityWarning]:
    """Walk *root* and report every symlink found.

    Links resolving outside the root are CRITICAL, links that cannot be
    resolved are WARNING, contained links are INFO. Entries are visited in
    name order so repeated scans return identical lists.
    """
    warnings: list[SecurityWarning] = []
    visited: set[tuple[int, int]] = set()
    stack: list[Path] = [root.root]

    while stack:
        directory = stack.pop()
        try:
            st = directory.stat(follow_symlinks=False)
            key = (st.st_dev, st.st_ino)
            if key in visited:
                continue
            visited.add(key)
            with os.scandir(directory) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as exc:
            logger.debug("Cannot list %s: %s", directory, exc)
            warnings.append(
                SecurityWarning(
                    severity=Severity.WARNING,
                    message=f"Directory '{_relative(root, directory)}' could not be read",
                    related_path=str(directory),
                )
            )
            continue

        subdirs: list[Path] = []
        for entry in entries:
            path = Path(entry.path)
            if entry.is_symlink():
                warnings.append(_check_link(root, path))
                continue
            try:
                is_dir = entry.is_dir(follow_symlinks=False)
            except OSError as exc:
                logger.debug("Cannot stat %s: %s", path, exc)
                continue
            if is_dir:
                subdirs.append(path)

        # Reversed so the stack pops in name order
        stack.extend(reversed(subdirs))

    return warnings


def _check_link(root: ResolvedPath, link: Path) -> SecurityWarning:
    name = _relative(root, link)
    try:
        target = resolve_link(link)
    except SymlinkResolutionError as exc:
        logger.debug("%s", exc)
        return SecurityWarning(
            severity=Severity.WARNING,
            message=f"Symlink '{name}' cannot be resolved ({exc.reason})",
            related_path=str(link),
        )

    if not root.contains(target):
        return SecurityWarning(
            severity=Severity.CRITICAL,
            message=f"Symlink '{name}' points outside repository",
            related_path=str(link),
            target=str(target),
        )
    if os.path.isdir(target):
        kind = "a directory"
    elif os.path.exists(target):
        kind = "a file"
    else:
        kind = "a missing target"
    return SecurityWarning(
        severity=Severity.INFO,
        message=f"'{name}' is a symlink to {kind} (within repository bounds)",
        related_path=str(link),
        target=str(target),
    )


def _relative(root: ResolvedPath, path: Path) -> str:
    try:
        rel = path.relative_to(root.root)
    except ValueError:
        return str(path)
    return str(rel) or "."
