import pytest

from shtoolset.config.paths import RootCandidate, resolve_script_root
from shtoolset.errors import RootUnavailable


def test_existing_override_is_used(tmp_path):
    root = tmp_path / "scripts"
    root.mkdir()
    assert resolve_script_root([RootCandidate(root)]) == root.resolve()


def test_creatable_candidate_is_created(tmp_path):
    root = tmp_path / "home" / ".shtoolset" / "scripts"
    assert resolve_script_root([RootCandidate(root, create=True)]) == root.resolve()
    assert root.is_dir()


def test_missing_non_creatable_candidate_is_skipped(tmp_path):
    bundled = tmp_path / "bundled"
    user = tmp_path / "user"
    result = resolve_script_root([RootCandidate(bundled, create=False), RootCandidate(user)])
    assert result == user.resolve()
    assert not bundled.exists()


def test_existing_non_creatable_candidate_wins(tmp_path):
    bundled = tmp_path / "bundled"
    bundled.mkdir()
    result = resolve_script_root([RootCandidate(bundled, create=False), RootCandidate(tmp_path / "user")])
    assert result == bundled.resolve()


def test_prepare_failure_falls_through(tmp_path):
    first, second = tmp_path / "first", tmp_path / "second"

    def prepare(path):
        if path == first:
            raise PermissionError("denied")
        path.mkdir(parents=True, exist_ok=True)

    assert resolve_script_root([RootCandidate(first), RootCandidate(second)], prepare=prepare) == second.resolve()


def test_prepare_hook_can_seed_scripts(tmp_path):
    root = tmp_path / "seeded"

    def seed(path):
        path.mkdir()
        (path / "hello.sh").write_text("#!/bin/bash\n# Hello\n")

    assert (resolve_script_root([RootCandidate(root)], prepare=seed) / "hello.sh").exists()


def test_no_usable_candidate(tmp_path):
    blocker = tmp_path / "file"
    blocker.write_text("")
    candidates = [RootCandidate(tmp_path / "missing", create=False), RootCandidate(blocker / "sub")]

    with pytest.raises(RootUnavailable) as excinfo:
        resolve_script_root(candidates)
    assert excinfo.value.candidates == [tmp_path / "missing", blocker / "sub"]


def test_candidate_that_is_a_file(tmp_path):
    target = tmp_path / "scripts"
    target.write_text("")
    with pytest.raises(RootUnavailable):
        resolve_script_root([RootCandidate(target, create=False)])
