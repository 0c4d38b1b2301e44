"""Tests for recursive skill and category discovery."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

import pytest

from skill_manager.exceptions import InvalidRepositoryPathError
from skill_manager.scanner import find_descriptor, resolve_repository_root, scan_repository


def _by_name(skills):  # type: ignore[no-untyped-def]
    return {skill.name: skill for skill in skills}


def test_nested_category_path_is_slash_joined(sample_repo: Path) -> None:
    skills = _by_name(scan_repository(sample_repo))

    assert skills["skillX"].category == "A/B"
    assert skills["zeta-skill"].category == "Zeta"
    assert skills["root-skill"].category == ""


def test_scan_finds_every_skill_and_ignores_empty_dirs(sample_repo: Path) -> None:
    skills = scan_repository(sample_repo)

    assert sorted(skill.name for skill in skills) == ["alpha-skill", "root-skill", "skillX", "zeta-skill"]


def test_record_fields_come_from_descriptor(sample_repo: Path) -> None:
    skill = _by_name(scan_repository(sample_repo))["skillX"]

    assert skill.display_name == "Skillx"
    assert skill.description == "About skillX"
    assert skill.source_path == (sample_repo / "A" / "B" / "skillX").resolve()


def test_descriptor_takes_precedence_over_subdirectories(tmp_path: Path, make_skill: Callable[..., Path]) -> None:
    parent = make_skill(tmp_path, "bundle")
    make_skill(parent / "examples", "inner")

    skills = scan_repository(tmp_path)

    assert [skill.name for skill in skills] == ["bundle"]
    assert skills[0].category == ""


def test_missing_fields_use_defaults(tmp_path: Path, make_skill: Callable[..., Path]) -> None:
    make_skill(tmp_path / "Tools", "bare", descriptor="# just a heading\n")

    (skill,) = scan_repository(tmp_path)

    assert skill.display_name == "bare"
    assert skill.description == "No description"
    assert skill.category == "Tools"


def test_directory_without_lowercase_descriptor_is_category(
    tmp_path: Path,
    make_skill: Callable[..., Path],
) -> None:
    (tmp_path / "Case.md").write_text("x", encoding="utf-8")
    if (tmp_path / "case.md").exists():
        pytest.skip("case-insensitive filesystem")
    group = make_skill(tmp_path, "Group", filename="SKILL.md")
    make_skill(group, "inner")

    (skill,) = scan_repository(tmp_path)

    assert skill.name == "inner"
    assert skill.category == "Group"


def test_empty_repository_yields_no_skills(tmp_path: Path) -> None:
    (tmp_path / "a" / "b").mkdir(parents=True)
    (tmp_path / "a" / "README.md").write_text("not a skill", encoding="utf-8")
    (tmp_path / "notes.txt").write_text("loose file", encoding="utf-8")

    assert scan_repository(tmp_path) == []


def test_root_with_descriptor_is_single_uncategorized_skill(tmp_path: Path, make_skill: Callable[..., Path]) -> None:
    root = make_skill(tmp_path, "solo")
    make_skill(root, "nested")

    skills = scan_repository(root)

    assert len(skills) == 1
    assert skills[0].name == "solo"
    assert skills[0].category == ""


def test_unreadable_subtree_is_skipped_and_logged(
    tmp_path: Path,
    make_skill: Callable[..., Path],
    monkeypatch: pytest.MonkeyPatch,
    caplog: pytest.LogCaptureFixture,
) -> None:
    make_skill(tmp_path / "open", "visible")
    (tmp_path / "locked" / "deep").mkdir(parents=True)
    original_iterdir = Path.iterdir

    def _iterdir(self: Path):  # type: ignore[no-untyped-def]
        if self.name == "locked":
            raise PermissionError(13, "Permission denied", str(self))
        return original_iterdir(self)

    monkeypatch.setattr(Path, "iterdir", _iterdir)

    with caplog.at_level(logging.WARNING, logger="skill_manager.scanner.discovery"):
        skills = scan_repository(tmp_path)

    assert [skill.name for skill in skills] == ["visible"]
    assert any("locked" in record.getMessage() for record in caplog.records)


def test_symlink_only_category_yields_nothing(tmp_path: Path, make_skill: Callable[..., Path]) -> None:
    shared = tmp_path / "shared"
    make_skill(shared, "linked-skill")
    repo = tmp_path / "repo"
    (repo / "Cat").mkdir(parents=True)
    (repo / "Cat" / "link").symlink_to(shared, target_is_directory=True)
    (repo / "Linked").symlink_to(shared, target_is_directory=True)

    assert scan_repository(repo) == []


def test_symlink_loop_yields_single_record(tmp_path: Path, make_skill: Callable[..., Path]) -> None:
    repo = tmp_path / "repo"
    make_skill(repo / "Cat", "s1")
    (repo / "Cat" / "loop").symlink_to(repo / "Cat", target_is_directory=True)

    skills = scan_repository(repo)

    assert [(skill.name, skill.category) for skill in skills] == [("s1", "Cat")]


def test_resolve_repository_root_rejects_missing_path(tmp_path: Path) -> None:
    with pytest.raises(InvalidRepositoryPathError, match="does not exist"):
        resolve_repository_root(tmp_path / "missing")


def test_scan_rejects_file_root(tmp_path: Path) -> None:
    file_root = tmp_path / "file.txt"
    file_root.write_text("x", encoding="utf-8")

    with pytest.raises(InvalidRepositoryPathError):
        scan_repository(file_root)


def test_find_descriptor_prefers_lowercase(tmp_path: Path) -> None:
    (tmp_path / "skill.md").write_text("name: a\n", encoding="utf-8")

    assert find_descriptor(tmp_path) == tmp_path / "skill.md"
    assert find_descriptor(tmp_path / "nope") is None
