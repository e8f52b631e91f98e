"""Resolved repository path type."""

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ResolvedPath:
    """A validated scan root.

    ``root`` is absolute and symlink-resolved; it is the containment boundary
    for the symlink scanner. ``requested`` keeps what the user typed.
    """

    root: Path
    requested: Path

    def join(self, *parts: str) -> Path:
        return self.root.joinpath(*parts)

    def contains(self, path: Path) -> bool:
        """Check whether a canonical path lies inside the root."""
        return path == self.root or path.is_relative_to(self.root)

    @property
    def name(self) -> str:
        return self.root.name or str(self.root)

    def __str__(self) -> str:
        return str(self.root)
