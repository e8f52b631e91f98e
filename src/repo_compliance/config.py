"""Run configuration captured once from the command line."""

from dataclasses import dataclass
from enum import Enum, auto
from pathlib import Path


class OutputFormat(Enum):
    """Rendering format for the report."""

    HUMAN = "human"
    JSON = "json"


class Verbosity(Enum):
    """Amount of detail in human output."""

    QUIET = auto()
    NORMAL = auto()
    VERBOSE = auto()


class ReportAction(Enum):
    """What to emit once the repository has been verified."""

    CHECK = auto()
    BADGE = auto()
    CONFORMITY = auto()


@dataclass(frozen=True)
class RunConfig:
    """Immutable options for one verification run."""

    path: Path
    output_format: OutputFormat = OutputFormat.HUMAN
    verbosity: Verbosity = Verbosity.NORMAL
    action: ReportAction = ReportAction.CHECK
    output_file: Path | None = None
    debug: bool = False

    @property
    def is_quiet(self) -> bool:
        return self.verbosity == Verbosity.QUIET

    @property
    def is_verbose(self) -> bool:
        return self.verbosity == Verbosity.VERBOSE

    @property
    def is_structured(self) -> bool:
        return self.output_format == OutputFormat.JSON
