from __future__ import annotations

"""
Unit tests for the Structure Builder.

Verifies the recursive mapping of layout trees onto the filesystem: plain
directories and files, the reserved 'files' and 'crates'/'modules' keys,
silent skipping of non-string keys, fail-fast error propagation and dry run.
"""

import os
from pathlib import Path
from typing import List, Set
from unittest.mock import patch

import pytest

from mlcookie.core.builder import StructureBuilder, build_structure
from mlcookie.domain.errors import DirectoryCreateError, FileCreateError
from mlcookie.domain.nodes import Mapping, Scalar, Sequence, from_yaml


def _entries(root: Path) -> Set[str]:
    """Relative POSIX paths of everything below root ('/' suffix for dirs)."""
    out: Set[str] = set()
    for dirpath, dirs, files in os.walk(root):
        rel = Path(dirpath).relative_to(root)
        for d in dirs:
            out.add((rel / d).as_posix() + "/")
        for f in files:
            out.add((rel / f).as_posix())
    return out


# -----------------------------------------------------------------------------
# BASIC SHAPES
# -----------------------------------------------------------------------------

def test_reference_layout(tmp_path: Path) -> None:
    """TC-01: The documented two-directory example."""
    layout = from_yaml([
        {"src": ["lib.rs", "main.rs"]},
        {"data": [{"raw": None}, {"processed": None}]},
    ])

    build_structure(tmp_path, layout)

    assert (tmp_path / "src" / "lib.rs").is_file()
    assert (tmp_path / "src" / "main.rs").is_file()
    assert (tmp_path / "data" / "raw").is_dir()
    assert (tmp_path / "data" / "processed").is_dir()
    assert (tmp_path / "src" / "lib.rs").stat().st_size == 0
    assert (tmp_path / "src" / "main.rs").stat().st_size == 0


def test_one_entry_per_leaf_and_key(tmp_path: Path) -> None:
    """TC-02: Exactly one file per scalar and one directory per ordinary key."""
    layout = from_yaml({
        "a": {"b": ["x.txt", "y.txt"], "c": None},
        "d": "z.txt",
    })

    build_structure(tmp_path, layout)

    assert _entries(tmp_path) == {
        "a/", "a/b/", "a/b/x.txt", "a/b/y.txt", "a/c/", "d/", "d/z.txt",
    }


def test_scalar_with_subpath_creates_parents(tmp_path: Path) -> None:
    build_structure(tmp_path, Scalar("deep/nested/file.txt"))
    assert (tmp_path / "deep" / "nested" / "file.txt").is_file()


def test_none_and_unknown_nodes_are_noops(tmp_path: Path) -> None:
    builder = build_structure(tmp_path, None)
    assert builder.created_dirs == []
    assert builder.created_files == []
    assert _entries(tmp_path) == set()


def test_directory_build_is_idempotent(tmp_path: Path) -> None:
    """TC-03: Re-running a directory-only layout succeeds with the same result."""
    layout = from_yaml({"data": [{"raw": None}, {"processed": None}], "logs": None})

    build_structure(tmp_path, layout)
    first = _entries(tmp_path)
    build_structure(tmp_path, layout)

    assert _entries(tmp_path) == first


def test_rerun_truncates_existing_files(tmp_path: Path) -> None:
    (tmp_path / "notes.txt").write_text("keep me?", encoding="utf-8")

    build_structure(tmp_path, Sequence((Scalar("notes.txt"),)))

    assert (tmp_path / "notes.txt").read_text(encoding="utf-8") == ""


# -----------------------------------------------------------------------------
# RESERVED KEYS
# -----------------------------------------------------------------------------

def test_files_key_creates_files_in_place(tmp_path: Path) -> None:
    """TC-04: 'files' entries land in the current directory."""
    build_structure(tmp_path, from_yaml({"files": ["a.txt", "b.txt"]}))

    assert (tmp_path / "a.txt").is_file()
    assert (tmp_path / "b.txt").is_file()
    assert not (tmp_path / "files").exists()


def test_files_key_ignores_nested_structures(tmp_path: Path) -> None:
    build_structure(tmp_path, from_yaml({"files": ["a.txt", {"sub": None}, None]}))
    assert _entries(tmp_path) == {"a.txt"}


def test_files_key_with_wrong_shape_is_a_directory(tmp_path: Path) -> None:
    build_structure(tmp_path, from_yaml({"files": "only.txt"}))
    assert (tmp_path / "files" / "only.txt").is_file()


@pytest.mark.parametrize("key", ["crates", "modules"])
def test_units_key_generates_skeletons(tmp_path: Path, key: str) -> None:
    """TC-05: Each unit gets src/tests/benches/examples and a named manifest."""
    build_structure(tmp_path, from_yaml({key: {"core": None, "data": {"ignored": ["x"]}}}))

    for unit in ("core", "data"):
        unit_dir = tmp_path / unit
        for sub in ("src", "tests", "benches", "examples"):
            assert (unit_dir / sub).is_dir()
        manifest = (unit_dir / "Cargo.toml").read_text(encoding="utf-8")
        assert f'name = "{unit}"' in manifest
        assert (unit_dir / "src" / "lib.rs").is_file()
        assert (unit_dir / "tests" / "integration_test.rs").is_file()

    assert not (tmp_path / key).exists()
    assert not (tmp_path / "data" / "ignored").exists()


def test_units_key_with_wrong_shape_is_a_directory(tmp_path: Path) -> None:
    build_structure(tmp_path, from_yaml({"crates": ["notes.md"]}))
    assert (tmp_path / "crates" / "notes.md").is_file()


def test_units_nested_under_workspace_directory(tmp_path: Path) -> None:
    build_structure(tmp_path, from_yaml({"workspace": {"crates": {"engine": None}}}))
    assert (tmp_path / "workspace" / "engine" / "Cargo.toml").is_file()


# -----------------------------------------------------------------------------
# SKIPPING AND CONTENT
# -----------------------------------------------------------------------------

def test_non_string_keys_are_skipped(tmp_path: Path) -> None:
    """TC-06: Integer, boolean and null keys produce nothing and no error."""
    layout = Mapping(((1, Scalar("one.txt")), (True, None), (None, None), ("kept", None)))

    build_structure(tmp_path, layout)

    assert _entries(tmp_path) == {"kept/"}


def test_non_string_unit_names_are_skipped(tmp_path: Path) -> None:
    build_structure(tmp_path, from_yaml({"crates": {7: None, "app": None}}))
    assert not (tmp_path / "7").exists()
    assert (tmp_path / "app" / "Cargo.toml").is_file()


def test_recognized_top_level_names_get_boilerplate(tmp_path: Path) -> None:
    build_structure(tmp_path / "myproj", from_yaml({"files": ["README.md", "notes.txt"]}))

    readme = (tmp_path / "myproj" / "README.md").read_text(encoding="utf-8")
    assert readme.startswith("# myproj")
    assert "cargo test" in readme
    assert (tmp_path / "myproj" / "notes.txt").read_text(encoding="utf-8") == ""


@pytest.mark.parametrize("name", ["Cargo.toml", "lib.rs", "integration_test.rs", "README.md"])
def test_template_names_below_root_are_empty(tmp_path: Path, name: str) -> None:
    """Recognized names outside the build root do not pick up skeleton content."""
    build_structure(tmp_path, from_yaml({"pkg": [name], "files": [f"docs/{name}"]}))

    assert (tmp_path / "pkg" / name).stat().st_size == 0
    assert (tmp_path / "docs" / name).stat().st_size == 0


@pytest.mark.parametrize("name", ["Cargo.toml", "lib.rs", "integration_test.rs"])
def test_skeleton_names_at_root_are_empty(tmp_path: Path, name: str) -> None:
    build_structure(tmp_path, from_yaml({"files": [name]}))
    assert (tmp_path / name).stat().st_size == 0


# -----------------------------------------------------------------------------
# FAILURES
# -----------------------------------------------------------------------------

def test_directory_failure_aborts_walk(tmp_path: Path) -> None:
    """TC-07: A file blocking a directory stops the walk; earlier entries remain."""
    (tmp_path / "blocked").write_text("", encoding="utf-8")
    layout = from_yaml([{"first": None}, {"blocked": ["x.txt"]}, {"never": None}])

    builder = StructureBuilder()
    with pytest.raises(DirectoryCreateError) as exc:
        builder.build(tmp_path, layout)

    assert exc.value.path == str(tmp_path / "blocked")
    assert (tmp_path / "first").is_dir()
    assert not (tmp_path / "never").exists()
    assert builder.created_dirs == [str(tmp_path / "first")]


def test_file_failure_is_wrapped_with_path(tmp_path: Path) -> None:
    with patch("builtins.open", side_effect=PermissionError(13, "Permission denied")):
        with pytest.raises(FileCreateError) as exc:
            build_structure(tmp_path, Scalar("a.txt"))

    assert exc.value.path == str(tmp_path / "a.txt")
    assert isinstance(exc.value.__cause__, PermissionError)


# -----------------------------------------------------------------------------
# DRY RUN
# -----------------------------------------------------------------------------

def test_dry_run_records_without_writing(tmp_path: Path) -> None:
    layout = from_yaml([{"src": ["a.py"]}, {"crates": {"core": None}}])

    builder = build_structure(tmp_path, layout, dry_run=True)

    assert _entries(tmp_path) == set()
    assert str(tmp_path / "src") in builder.created_dirs
    assert str(tmp_path / "src" / "a.py") in builder.created_files
    assert str(tmp_path / "core" / "Cargo.toml") in builder.created_files


def test_created_entries_in_walk_order(tmp_path: Path) -> None:
    builder = build_structure(tmp_path, from_yaml([{"b": None}, {"a": ["z.txt"]}]))

    dirs: List[str] = builder.created_dirs
    assert dirs == [str(tmp_path / "b"), str(tmp_path / "a")]
    assert builder.created_files == [str(tmp_path / "a" / "z.txt")]


def test_repeated_paths_are_recorded_once(tmp_path: Path) -> None:
    layout = from_yaml([{"a": ["x.txt"]}, {"a": ["x.txt", "y.txt"]}, "x.txt"])

    builder = build_structure(tmp_path, layout, dry_run=True)

    assert builder.created_dirs == [str(tmp_path / "a")]
    assert builder.created_files == [
        str(tmp_path / "a" / "x.txt"),
        str(tmp_path / "a" / "y.txt"),
        str(tmp_path / "x.txt"),
    ]
