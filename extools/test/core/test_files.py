from __future__ import annotations

import os
import sys
from pathlib import Path

import pytest

from extools.core.files import can_execute, exists, is_directory, mkdirs, not_exists


def test_exists_for_files_and_dirs(tmp_path: Path) -> None:
    f = tmp_path / "a.txt"
    f.write_text("x", encoding="utf-8")

    assert exists(f)
    assert exists(str(f))
    assert exists(tmp_path)
    assert not exists(tmp_path / "missing")
    assert not_exists(tmp_path / "missing")


@pytest.mark.parametrize("path", [None, "", "   ", "bad\0path"])
def test_invalid_inputs_are_not_there(path: str | None) -> None:
    assert not exists(path)
    assert not_exists(path)
    assert not is_directory(path)
    assert not can_execute(path)
    assert not mkdirs(path)


def test_is_directory(tmp_path: Path) -> None:
    f = tmp_path / "a.txt"
    f.write_text("x", encoding="utf-8")

    assert is_directory(tmp_path)
    assert is_directory(str(tmp_path))
    assert not is_directory(f)


@pytest.mark.skipif(sys.platform == "win32", reason="POSIX permission bits")
def test_can_execute(tmp_path: Path) -> None:
    script = tmp_path / "run.sh"
    script.write_text("#!/bin/sh\n", encoding="utf-8")
    script.chmod(0o644)
    assert not can_execute(script)

    script.chmod(0o755)
    assert can_execute(script)
    assert can_execute(str(script))
    assert not can_execute(tmp_path)


def test_mkdirs_creates_parents(tmp_path: Path) -> None:
    target = tmp_path / "a" / "b" / "c"

    assert mkdirs(target)
    assert target.is_dir()
    # Existing directory is fine.
    assert mkdirs(str(target))


def test_mkdirs_refuses_existing_file(tmp_path: Path) -> None:
    f = tmp_path / "file"
    f.write_text("x", encoding="utf-8")

    assert not mkdirs(f)
    assert not mkdirs(f / "child")


def test_accepts_pathlike(tmp_path: Path) -> None:
    class Custom(os.PathLike[str]):
        def __fspath__(self) -> str:
            return str(tmp_path)

    assert exists(Custom())
    assert is_directory(Custom())
