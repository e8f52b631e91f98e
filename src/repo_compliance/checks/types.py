"""Compliance check types."""

from dataclasses import dataclass
from enum import Enum


class Category(Enum):
    """Artifact category a check belongs to."""

    DOCUMENTATION = "Documentation"
    WELL_KNOWN = "Well-Known"
    BUILD_SYSTEM = "Build System"
    SOURCE_STRUCTURE = "Source Structure"


class ComplianceTier(Enum):
    """Compliance tier a check is required for."""

    BRONZE = "Bronze"
    SILVER = "Silver"
    GOLD = "Gold"
    PLATINUM = "Platinum"

    @property
    def badge_color(self) -> str:
        return _BADGE_COLORS[self]


_BADGE_COLORS = {
    ComplianceTier.BRONZE: "cd7f32",
    ComplianceTier.SILVER: "c0c0c0",
    ComplianceTier.GOLD: "ffd700",
    ComplianceTier.PLATINUM: "e5e4e2",
}


class ArtifactKind(Enum):
    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True)
class Artifact:
    """A filesystem entry that can satisfy a requirement."""

    name: str
    kind: ArtifactKind = ArtifactKind.FILE

    @classmethod
    def file(cls, name: str) -> "Artifact":
        return cls(name, ArtifactKind.FILE)

    @classmethod
    def directory(cls, name: str) -> "Artifact":
        return cls(name, ArtifactKind.DIRECTORY)

    @property
    def display_name(self) -> str:
        if self.kind == ArtifactKind.DIRECTORY:
            return f"{self.name}/"
        return self.name


@dataclass(frozen=True)
class Requirement:
    """One check: satisfied if any of its artifacts is present."""

    item: str
    artifacts: tuple[Artifact, ...]
    tier: ComplianceTier = ComplianceTier.BRONZE


@dataclass(frozen=True)
class CheckResult:
    """Result of a single compliance check."""

    category: Category
    item: str
    passed: bool
    required_tier: ComplianceTier = ComplianceTier.BRONZE
    detail: str | None = None
