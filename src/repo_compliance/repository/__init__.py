"""Repository path resolution."""

from .resolve import resolve_path
from .types import ResolvedPath

__all__ = ["resolve_path", "ResolvedPath"]
