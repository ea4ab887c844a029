# tests/test_entries.py
import os
import sys
from pathlib import Path

import pytest

from treegrid import (
    DirectoryReadError,
    SkipReason,
    TypeCategory,
    classify_entry,
    scan_directory,
)
from treegrid.entries import classify_entries, display_name_for


def _make_file(p: Path, content: str = "x", mode: int | None = None):
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(content, encoding="utf-8")
    if mode is not None:
        p.chmod(mode)


def _classify_all(d: Path):
    return {e.name: classify_entry(e, str(d)) for e in scan_directory(d)}


def test_scan_sorts_bytewise_uppercase_first(tmp_path: Path):
    _make_file(tmp_path / "apple")
    (tmp_path / "Zebra").mkdir()
    _make_file(tmp_path / "banana")
    (tmp_path / "Apple").mkdir()

    names = [e.name for e in scan_directory(tmp_path)]
    assert names == ["Apple", "Zebra", "apple", "banana"]


def test_scan_missing_directory_raises(tmp_path: Path):
    missing = tmp_path / "nope"
    with pytest.raises(DirectoryReadError) as info:
        scan_directory(missing)
    assert info.value.path == str(missing)
    assert isinstance(info.value, OSError)


def test_scan_on_file_raises(tmp_path: Path):
    f = tmp_path / "plain.txt"
    _make_file(f)
    with pytest.raises(DirectoryReadError):
        scan_directory(f)


@pytest.mark.skipif(os.name != "posix", reason="Permission bits test is POSIX-only")
def test_categories(tmp_path: Path):
    (tmp_path / "dir").mkdir()
    _make_file(tmp_path / "plain.txt", mode=0o644)
    _make_file(tmp_path / "run.sh", mode=0o755)
    _make_file(tmp_path / "other_exec", mode=0o601)

    results = _classify_all(tmp_path)
    assert all(r.ok for r in results.values())
    assert results["dir"].entry.type_category is TypeCategory.DIRECTORY
    assert results["plain.txt"].entry.type_category is TypeCategory.REGULAR_FILE
    assert results["run.sh"].entry.type_category is TypeCategory.EXECUTABLE_FILE
    assert results["other_exec"].entry.type_category is TypeCategory.EXECUTABLE_FILE


@pytest.mark.skipif(sys.platform.startswith("win"), reason="Symlink creation needs privileges on Windows")
def test_symlinks_are_not_followed(tmp_path: Path):
    real = tmp_path / "real"
    real.mkdir()
    (tmp_path / "linkdir").symlink_to(real, target_is_directory=True)
    (tmp_path / "dangling").symlink_to(tmp_path / "missing")

    results = _classify_all(tmp_path)
    assert results["linkdir"].entry.type_category is TypeCategory.SYMLINK
    assert results["dangling"].entry.type_category is TypeCategory.SYMLINK
    assert results["real"].entry.type_category is TypeCategory.DIRECTORY


@pytest.mark.skipif(not hasattr(os, "mkfifo"), reason="FIFOs are POSIX-only")
def test_fifo_is_other(tmp_path: Path):
    os.mkfifo(tmp_path / "pipe")
    results = _classify_all(tmp_path)
    assert results["pipe"].entry.type_category is TypeCategory.OTHER


def test_hidden_and_display_name(tmp_path: Path):
    _make_file(tmp_path / ".hidden")
    _make_file(tmp_path / "shown")

    results = _classify_all(tmp_path)
    assert results[".hidden"].entry.display_name == ".hidden"
    assert results[".hidden"].entry.is_hidden is True
    assert results["shown"].entry.is_hidden is False
    assert results["shown"].entry.path == os.path.join(str(tmp_path), "shown")


def test_display_name_relative_to_dot(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    _make_file(tmp_path / "a.txt")
    monkeypatch.chdir(tmp_path)

    [raw] = scan_directory(".")
    result = classify_entry(raw, ".")
    assert result.entry.display_name == "a.txt"


def test_prefix_mismatch_is_reported(tmp_path: Path):
    _make_file(tmp_path / "a.txt")
    [raw] = scan_directory(tmp_path)

    result = classify_entry(raw, str(tmp_path / "elsewhere"))
    assert not result.ok
    assert result.entry is None
    assert result.reason is SkipReason.PREFIX_MISMATCH


def test_undecodable_name_is_reported():
    assert display_name_for("base/bad\udcff", "base") is SkipReason.UNDECODABLE_NAME
    assert display_name_for("base/good", "base") == "good"


def test_metadata_failure_is_reported(tmp_path: Path):
    class BrokenEntry:
        path = str(tmp_path / "gone")
        name = "gone"

        def is_dir(self, follow_symlinks=True):
            raise FileNotFoundError(2, "No such file or directory", self.path)

    result = classify_entry(BrokenEntry(), str(tmp_path))
    assert result.reason is SkipReason.METADATA_UNREADABLE


def test_classify_entries_drops_skipped(tmp_path: Path):
    _make_file(tmp_path / "a")
    _make_file(tmp_path / "b")

    assert [e.display_name for e in classify_entries(scan_directory(tmp_path), tmp_path)] == ["a", "b"]
    assert classify_entries(scan_directory(tmp_path), tmp_path / "x") == []
