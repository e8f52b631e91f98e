"""Exception hierarchy for compliance verification."""

from pathlib import Path


class ComplianceError(Exception):
    """Base class for all verification errors."""


class PathResolutionError(ComplianceError):
    """The repository path cannot be used as a scan root."""

    def __init__(self, path: Path | str, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"{reason}: {path}")


class PathNotFound(PathResolutionError):
    def __init__(self, path: Path | str):
        super().__init__(path, "Path does not exist")


class PathNotDirectory(PathResolutionError):
    def __init__(self, path: Path | str):
        super().__init__(path, "Path is not a directory")


class MetadataReadError(ComplianceError):
    """Metadata for a single artifact could not be read."""

    def __init__(self, path: Path, cause: OSError):
        self.path = path
        self.cause = cause
        reason = cause.strerror or cause.__class__.__name__
        super().__init__(f"Cannot read metadata for {path}: {reason}")

    @property
    def reason(self) -> str:
        return (self.cause.strerror or self.cause.__class__.__name__).lower()


class SymlinkResolutionError(ComplianceError):
    """A symlink is cyclic, too deeply chained or unreadable."""

    CYCLE = "cyclic"
    TOO_MANY_HOPS = "too many levels of links"
    UNREADABLE = "unreadable"

    def __init__(self, path: Path, reason: str, detail: str = ""):
        self.path = path
        self.reason = reason
        self.detail = detail
        message = f"Cannot resolve symlink {path} ({reason})"
        if detail:
            message += f": {detail}"
        super().__init__(message)


class ReportSealedError(ComplianceError):
    """An append was attempted after the report was aggregated."""


class PipelineStateError(ComplianceError):
    """A pipeline stage was skipped or revisited."""
