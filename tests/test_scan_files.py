import os
import sys

import pytest

from reindex_tool.core import scan_directory, check_name_representable, check_rename_op


def test_keeps_only_indexed_names(make_files):
    directory = make_files("1-a", "readme.md", "42", "2-3-b")
    scan = scan_directory(directory)

    assert sorted(e.name for e in scan.entries) == ["1-a", "2-3-b"]
    assert scan.unmatched == 2
    assert scan.errors == []


def test_is_not_recursive(tmp_path):
    (tmp_path / "1-sub").mkdir()
    (tmp_path / "1-sub" / "5-inner").write_text("")
    scan = scan_directory(tmp_path)
    assert [e.name for e in scan.entries] == ["1-sub"]


def test_iteration_error_skips_entry(tmp_path, flaky_scandir):
    flaky_scandir("2-b", OSError("boom"), "1-a", "readme")
    scan = scan_directory(tmp_path)

    assert [e.name for e in scan.entries] == ["2-b", "1-a"]
    assert scan.errors == ["An error occurred while iterating over directory contents: boom"]
    assert scan.unmatched == 1


def test_missing_directory_raises(tmp_path):
    with pytest.raises(OSError):
        scan_directory(tmp_path / "missing")


def test_progress_callback(make_files):
    directory = make_files("1-a", "b")
    seen = []
    scan_directory(directory, progress_callback=seen.append)
    assert sorted(seen) == ["1-a", "b"]


@pytest.mark.skipif(sys.platform != "linux", reason="needs a filesystem that accepts raw bytes")
def test_undecodable_name_is_skipped(tmp_path):
    raw = os.path.join(os.fsencode(tmp_path), b"3-\xff.txt")
    with open(raw, "wb"):
        pass
    (tmp_path / "4-ok.txt").write_text("")

    scan = scan_directory(tmp_path)

    assert [e.name for e in scan.entries] == ["4-ok.txt"]
    assert len(scan.errors) == 1
    assert "not valid text" in scan.errors[0]


def test_check_name_representable():
    assert check_name_representable("1-café") == (True, None)
    valid, error = check_name_representable("1-\udcff")
    assert not valid
    assert error


def test_check_rename_op(tmp_path):
    src = tmp_path / "1-a"
    src.write_text("")
    taken = tmp_path / "00-b"
    taken.write_text("")

    assert check_rename_op(src, tmp_path / "00-a") == (True, None)
    assert check_rename_op(src, taken) == (False, "Destination already exists: 00-b")
    assert check_rename_op(tmp_path / "gone", tmp_path / "x") == (False, "Source does not exist: gone")
