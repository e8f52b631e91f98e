import os

import pytest

from repo_compliance.errors import SymlinkResolutionError
from repo_compliance.repository import resolve_path
from repo_compliance.security import Severity, resolve_link, scan

pytestmark = pytest.mark.usefixtures("requires_symlinks")


def _severities(warnings):
    return [w.severity for w in warnings]


def test_no_symlinks_no_warnings(compliant_repo):
    assert scan(resolve_path(compliant_repo)) == []


def test_link_outside_root_is_critical(compliant_repo, outside_file):
    (compliant_repo / "escape").symlink_to(outside_file)
    warnings = scan(resolve_path(compliant_repo))
    assert _severities(warnings) == [Severity.CRITICAL]
    warning = warnings[0]
    assert "escape" in warning.message
    assert warning.related_path == str(compliant_repo.resolve() / "escape")
    assert warning.target == str(outside_file.resolve())


def test_relative_link_escaping_via_parent_is_critical(compliant_repo, outside_file):
    (compliant_repo / "src" / "up").symlink_to("../../outside/secret.txt")
    warnings = scan(resolve_path(compliant_repo))
    assert _severities(warnings) == [Severity.CRITICAL]


def test_dangling_link_outside_root_is_critical(compliant_repo, tmp_path):
    (compliant_repo / "gone").symlink_to(tmp_path / "does-not-exist")
    warnings = scan(resolve_path(compliant_repo))
    assert _severities(warnings) == [Severity.CRITICAL]


def test_link_inside_root_is_info(compliant_repo):
    (compliant_repo / "docs").symlink_to("src", target_is_directory=True)
    warnings = scan(resolve_path(compliant_repo))
    assert _severities(warnings) == [Severity.INFO]
    assert "within repository bounds" in warnings[0].message


def test_link_to_root_itself_is_contained(compliant_repo):
    (compliant_repo / "src" / "root").symlink_to("..", target_is_directory=True)
    warnings = scan(resolve_path(compliant_repo))
    assert _severities(warnings) == [Severity.INFO]


def test_self_referencing_link_is_warning(compliant_repo):
    os.symlink("loop", compliant_repo / "loop")
    warnings = scan(resolve_path(compliant_repo))
    assert _severities(warnings) == [Severity.WARNING]
    assert "cannot be resolved" in warnings[0].message


def test_cycle_between_links_terminates(compliant_repo):
    os.symlink("b", compliant_repo / "a")
    os.symlink("a", compliant_repo / "b")
    warnings = scan(resolve_path(compliant_repo))
    assert _severities(warnings) == [Severity.WARNING, Severity.WARNING]


def test_resolve_link_raises_on_cycle(tmp_path):
    os.symlink("b", tmp_path / "a")
    os.symlink("a", tmp_path / "b")
    with pytest.raises(SymlinkResolutionError) as excinfo:
        resolve_link(tmp_path / "a")
    assert excinfo.value.reason == SymlinkResolutionError.CYCLE


def test_resolve_link_hop_limit(tmp_path):
    for i in range(5):
        os.symlink(f"l{i + 1}", tmp_path / f"l{i}")
    (tmp_path / "l5").write_text("end")
    assert resolve_link(tmp_path / "l0") == (tmp_path / "l5").resolve()
    with pytest.raises(SymlinkResolutionError) as excinfo:
        resolve_link(tmp_path / "l0", max_hops=3)
    assert excinfo.value.reason == SymlinkResolutionError.TOO_MANY_HOPS


def test_symlinked_directories_are_not_followed(compliant_repo, tmp_path):
    outside_dir = tmp_path / "outside-dir"
    outside_dir.mkdir()
    os.symlink(tmp_path, outside_dir / "back")
    (compliant_repo / "vendor").symlink_to(outside_dir, target_is_directory=True)
    warnings = scan(resolve_path(compliant_repo))
    # Only the link itself, nothing beneath it
    assert len(warnings) == 1
    assert warnings[0].severity == Severity.CRITICAL


def test_nested_links_are_found_in_name_order(compliant_repo, outside_file):
    (compliant_repo / "src" / "b").symlink_to(outside_file)
    (compliant_repo / "src" / "a").symlink_to("main.py")
    (compliant_repo / "tests" / "c").symlink_to(outside_file)
    warnings = scan(resolve_path(compliant_repo))
    names = [os.path.basename(w.related_path) for w in warnings]
    assert names == ["a", "b", "c"]


def test_scan_is_repeatable(compliant_repo, outside_file):
    (compliant_repo / "escape").symlink_to(outside_file)
    os.symlink("loop", compliant_repo / "loop")
    root = resolve_path(compliant_repo)
    assert scan(root) == scan(root)


@pytest.mark.skipif(
    hasattr(os, "geteuid") and os.geteuid() == 0, reason="root can read anything"
)
def test_unreadable_directory_is_warning(compliant_repo):
    locked = compliant_repo / "locked"
    locked.mkdir()
    locked.chmod(0)
    try:
        warnings = scan(resolve_path(compliant_repo))
    finally:
        locked.chmod(0o755)
    assert _severities(warnings) == [Severity.WARNING]
    assert "could not be read" in warnings[0].message


def test_deeply_nested_escaping_link_is_critical(compliant_repo, outside_file):
    deep = compliant_repo.joinpath("src", *(f"d{i}" for i in range(70)))
    deep.mkdir(parents=True)
    (deep / "leak").symlink_to(outside_file)
    warnings = scan(resolve_path(compliant_repo))
    assert _severities(warnings) == [Severity.CRITICAL]
    assert warnings[0].related_path == str(deep.resolve() / "leak")
