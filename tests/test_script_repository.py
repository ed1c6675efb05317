import os

import pytest

from shtoolset.db.script_repository import ScriptRepository
from tests.utils.script_files import write_script


def test_root_scripts_sorted_by_filename(script_tree):
    repo = ScriptRepository(script_tree)
    names = [p.name for p in repo.list_root_scripts()]
    assert names == ["a.sh", "b.sh", "c.sh"]


def test_root_scripts_are_absolute(script_tree, monkeypatch):
    monkeypatch.chdir(script_tree.parent)
    repo = ScriptRepository("scripts")
    assert all(p.is_absolute() for p in repo.list_root_scripts())


def test_sorting_ignores_case(tmp_path):
    for name in ("c.sh", "B.sh", "a.sh"):
        write_script(tmp_path / name)
    names = [p.name for p in ScriptRepository(tmp_path).list_root_scripts()]
    assert names == ["a.sh", "B.sh", "c.sh"]


def test_missing_root_degrades_to_empty(tmp_path):
    repo = ScriptRepository(tmp_path / "does-not-exist")
    assert repo.list_root_scripts() == []
    assert repo.collect_categories() == []


def test_every_level_with_direct_scripts_is_a_category(script_tree):
    categories = ScriptRepository(script_tree).collect_categories()
    assert [c.name for c in categories] == ["dev_tools/git", "system", "system/nested"]

    by_name = {c.name: c for c in categories}
    assert by_name["dev_tools/git"].display_name == "Dev Tools / Git"
    assert by_name["dev_tools/git"].depth == 2
    assert by_name["system"].depth == 1
    assert [p.name for p in by_name["system"].script_paths] == ["disk.sh", "update.sh"]
    assert by_name["system/nested"].display_name == "System / Nested"


def test_category_count_matches_paths(script_tree):
    for info in ScriptRepository(script_tree).collect_categories():
        assert info.script_count == len(info.script_paths)
        assert info.dir_path == script_tree / info.name


def test_root_and_categories_cover_every_script(script_tree):
    repo = ScriptRepository(script_tree)
    root_scripts = repo.list_root_scripts()
    categories = repo.collect_categories()

    expected = {
        p for p in script_tree.rglob("*.sh")
        if not any(part.startswith(".") for part in p.relative_to(script_tree).parts)
    }
    found = set(root_scripts)
    for info in categories:
        found.update(info.script_paths)

    assert len(root_scripts) + sum(c.script_count for c in categories) == len(expected)
    assert found == expected
    assert repo.total_scripts() == 7


def test_non_script_entries_are_ignored(tmp_path):
    write_script(tmp_path / "tool.sh")
    (tmp_path / "readme.md").write_text("# docs\n")
    (tmp_path / "folder.sh").mkdir()
    write_script(tmp_path / "folder.sh" / "inner.sh")

    repo = ScriptRepository(tmp_path)
    assert [p.name for p in repo.list_root_scripts()] == ["tool.sh"]
    assert [c.name for c in repo.collect_categories()] == ["folder.sh"]


def test_get_scripts_by_category(script_tree):
    repo = ScriptRepository(script_tree)
    assert [p.name for p in repo.get_scripts_by_category("system")] == ["disk.sh", "update.sh"]
    assert repo.get_scripts_by_category("missing") == []


def test_all_scripts_sorted_by_filename(script_tree):
    names = [p.name for p in ScriptRepository(script_tree).get_all_scripts()]
    assert names == ["a.sh", "b.sh", "c.sh", "deep.sh", "disk.sh", "prune.sh", "update.sh"]


def test_new_scripts_visible_on_next_scan(script_tree):
    repo = ScriptRepository(script_tree)
    assert len(repo.collect_categories()) == 3
    write_script(script_tree / "backup" / "db.sh")
    assert "backup" in [c.name for c in repo.collect_categories()]


@pytest.mark.skipif(hasattr(os, "geteuid") and os.geteuid() == 0, reason="root ignores permissions")
def test_unreadable_subdirectory_is_skipped(script_tree):
    locked = script_tree / "system" / "nested"
    locked.chmod(0)
    try:
        names = [c.name for c in ScriptRepository(script_tree).collect_categories()]
    finally:
        locked.chmod(0o755)
    assert names == ["dev_tools/git", "system"]


def test_unreadable_subdirectory_skipped_even_as_root(script_tree, monkeypatch):
    real_scandir = os.scandir

    def locked_scandir(path="."):
        if os.path.basename(os.fspath(path)) == "nested":
            raise PermissionError(13, "Permission denied", os.fspath(path))
        return real_scandir(path)

    monkeypatch.setattr(os, "scandir", locked_scandir)
    names = [c.name for c in ScriptRepository(script_tree).collect_categories()]
    assert names == ["dev_tools/git", "system"]


def test_symlinked_category_directory_is_followed(tmp_path):
    root = tmp_path / "scripts"
    root.mkdir()
    write_script(tmp_path / "shared" / "net.sh")
    os.symlink(tmp_path / "shared", root / "network")

    repo = ScriptRepository(root)
    [category] = repo.collect_categories()
    assert category.name == "network"
    assert category.script_paths == (root / "network" / "net.sh",)
    assert repo.total_scripts() == 1


def test_symlink_loop_is_visited_once(tmp_path):
    write_script(tmp_path / "tools" / "build.sh")
    os.symlink(tmp_path / "tools", tmp_path / "tools" / "again")
    os.symlink(tmp_path, tmp_path / "tools" / "up")

    repo = ScriptRepository(tmp_path)
    assert [c.name for c in repo.collect_categories()] == ["tools"]
    assert repo.total_scripts() == 1
