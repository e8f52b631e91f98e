"""Bronze tier artifact checks.

Each category evaluates a fixed list of requirements and always returns one
result per requirement, so the tier total never depends on what exists.
"""

from repo_compliance.repository import ResolvedPath

from .runner import failed_check, run_check
from .types import Artifact, Category, CheckResult, Requirement

WELL_KNOWN_DIR = ".well-known"

CI_DESCRIPTORS = (
    Artifact.file(".gitlab-ci.yml"),
    Artifact.directory(".github/workflows"),
    Artifact.file(".circleci/config.yml"),
    Artifact.file(".travis.yml"),
    Artifact.file("Jenkinsfile"),
    Artifact.file("azure-pipelines.yml"),
    Artifact.file("bitbucket-pipelines.yml"),
)


class CheckCategory:
    """A category of required artifacts."""

    category: Category
    requirements: tuple[Requirement, ...]

    @property
    def expected_count(self) -> int:
        return len(self.requirements)

    def evaluate(self, root: ResolvedPath) -> tuple[CheckResult, ...]:
        return tuple(
            run_check(self.category, requirement, root.root)
            for requirement in self.requirements
        )


class DocumentationCheck(CheckCategory):
    category = Category.DOCUMENTATION
    requirements = (
        Requirement(
            "README.md", (Artifact.file("README.md"), Artifact.file("README.adoc"))
        ),
        Requirement("LICENSE.txt", (Artifact.file("LICENSE.txt"),)),
        Requirement("SECURITY.md", (Artifact.file("SECURITY.md"),)),
        Requirement("CONTRIBUTING.md", (Artifact.file("CONTRIBUTING.md"),)),
        Requirement("CODE_OF_CONDUCT.md", (Artifact.file("CODE_OF_CONDUCT.md"),)),
        Requirement("MAINTAINERS.md", (Artifact.file("MAINTAINERS.md"),)),
        Requirement("CHANGELOG.md", (Artifact.file("CHANGELOG.md"),)),
    )


class WellKnownCheck(CheckCategory):
    """The .well-known/ directory and the files it must hold.

    A missing directory fails every member file as well; nothing is dropped
    from the count.
    """

    category = Category.WELL_KNOWN
    directory = Requirement(
        f"{WELL_KNOWN_DIR}/ directory", (Artifact.directory(WELL_KNOWN_DIR),)
    )
    files = (
        Requirement("security.txt", (Artifact.file("security.txt"),)),
        Requirement("ai.txt", (Artifact.file("ai.txt"),)),
        Requirement("humans.txt", (Artifact.file("humans.txt"),)),
    )
    requirements = (directory, *files)

    def evaluate(self, root: ResolvedPath) -> tuple[CheckResult, ...]:
        dir_result = run_check(self.category, self.directory, root.root)
        results = [dir_result]

        if dir_result.passed:
            base = root.join(WELL_KNOWN_DIR)
            results.extend(
                run_check(self.category, requirement, base)
                for requirement in self.files
            )
        else:
            detail = f"parent directory unavailable ({dir_result.detail})"
            results.extend(
                failed_check(self.category, requirement, detail)
                for requirement in self.files
            )
        return tuple(results)


class BuildSystemCheck(CheckCategory):
    category = Category.BUILD_SYSTEM
    requirements = (
        Requirement(
            "justfile",
            (
                Artifact.file("justfile"),
                Artifact.file("Justfile"),
                Artifact.file(".justfile"),
            ),
        ),
        Requirement("flake.nix", (Artifact.file("flake.nix"),)),
        Requirement("CI pipeline", CI_DESCRIPTORS),
    )


class SourceStructureCheck(CheckCategory):
    category = Category.SOURCE_STRUCTURE
    requirements = (
        Requirement(
            "src/ directory", (Artifact.directory("src"), Artifact.directory("source"))
        ),
        Requirement(
            "tests/ directory",
            (
                Artifact.directory("tests"),
                Artifact.directory("test"),
                Artifact.directory("spec"),
            ),
        ),
    )


BRONZE_CATEGORIES: tuple[CheckCategory, ...] = (
    DocumentationCheck(),
    WellKnownCheck(),
    BuildSystemCheck(),
    SourceStructureCheck(),
)

BRONZE_CHECK_COUNT = sum(c.expected_count for c in BRONZE_CATEGORIES)
