"""Pytest configuration and fixtures for compliance tests."""

import os
from pathlib import Path

import pytest

from repo_compliance.repository import resolve_path

COMPLIANT_FILES = [
    "README.md",
    "LICENSE.txt",
    "SECURITY.md",
    "CONTRIBUTING.md",
    "CODE_OF_CONDUCT.md",
    "MAINTAINERS.md",
    "CHANGELOG.md",
    ".well-known/security.txt",
    ".well-known/ai.txt",
    ".well-known/humans.txt",
    "justfile",
    "flake.nix",
    ".gitlab-ci.yml",
    "src/main.py",
    "tests/test_main.py",
]


def create_file(base: Path, path: str, content: str = "") -> Path:
    file_path = base / path
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(content)
    return file_path


def _can_symlink(tmp: Path) -> bool:
    try:
        os.symlink(tmp, tmp / "canary-link")
    except (OSError, NotImplementedError):
        return False
    os.unlink(tmp / "canary-link")
    return True


@pytest.fixture
def empty_repo(tmp_path) -> Path:
    repo = tmp_path / "empty"
    repo.mkdir()
    return repo


@pytest.fixture
def readme_only_repo(tmp_path) -> Path:
    repo = tmp_path / "readme-only"
    repo.mkdir()
    create_file(repo, "README.md", "# Test Project")
    return repo


@pytest.fixture
def compliant_repo(tmp_path) -> Path:
    repo = tmp_path / "compliant"
    repo.mkdir()
    for name in COMPLIANT_FILES:
        create_file(repo, name, "x")
    return repo


@pytest.fixture
def outside_file(tmp_path) -> Path:
    return create_file(tmp_path, "outside/secret.txt", "secret")


@pytest.fixture
def resolved(compliant_repo):
    return resolve_path(compliant_repo)


@pytest.fixture
def requires_symlinks(tmp_path):
    if not _can_symlink(tmp_path):
        pytest.skip("symlinks not supported on this platform")
