"""Validate and canonicalize the repository path."""

import logging
import os
import stat
from pathlib import Path

from repo_compliance.errors import PathNotDirectory, PathNotFound

from .types import ResolvedPath

logger = logging.getLogger(__name__)


def resolve_path(raw_path: str | os.PathLike | None = None) -> ResolvedPath:
    """Resolve *raw_path* (default: current directory) to a scan root.

    Raises PathNotFound or PathNotDirectory. Only stats the path.
    """
    requested = Path(raw_path) if raw_path is not None else Path.cwd()
    try:
        st = requested.stat()
    except (FileNotFoundError, NotADirectoryError):
        raise PathNotFound(requested) from None
    except OSError as exc:
        # Dangling or looping root symlink
        logger.debug("stat failed for %s: %s", requested, exc)
        raise PathNotFound(requested) from exc

    if not stat.S_ISDIR(st.st_mode):
        raise PathNotDirectory(requested)

    root = requested.resolve(strict=True)
    logger.debug("Resolved %s to %s", requested, root)
    return ResolvedPath(root=root, requested=requested)
