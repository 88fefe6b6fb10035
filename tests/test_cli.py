import os

import pytest

from reindex_tool.cli import main as cli_main, create_parser
from reindex_tool.main import main


@pytest.fixture
def workdir(make_files, monkeypatch):
    directory = make_files("2-b.txt", "1-a.txt", "10-c.txt", "notes.md")
    monkeypatch.chdir(directory)
    return directory


def test_defaults():
    args = create_parser().parse_args([])
    assert args.dry_run is False
    assert args.min_width == 2


def test_short_flags():
    args = create_parser().parse_args(["-n", "-m", "4"])
    assert args.dry_run is True
    assert args.min_width == 4


@pytest.mark.parametrize("value", ["-1", "two"])
def test_invalid_min_width(value):
    with pytest.raises(SystemExit):
        create_parser().parse_args(["--min-width", value])


def test_rejects_positional_arguments():
    with pytest.raises(SystemExit):
        create_parser().parse_args(["somedir"])


def test_renames_current_directory(workdir, capsys, listing):
    assert cli_main([]) == 0

    assert listing(workdir) == ["00-a.txt", "01-b.txt", "02-c.txt", "notes.md"]
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "1-a.txt: successfully renamed to 00-a.txt",
        "2-b.txt: successfully renamed to 01-b.txt",
        "10-c.txt: successfully renamed to 02-c.txt",
    ]


def test_second_run_reports_correct_names(workdir, capsys):
    cli_main([])
    capsys.readouterr()

    assert cli_main([]) == 0
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "00-a.txt: already has correct file name",
        "01-b.txt: already has correct file name",
        "02-c.txt: already has correct file name",
    ]


def test_dry_run(workdir, capsys, listing):
    assert main(["--dry-run", "--min-width", "3"]) == 0

    assert listing(workdir) == ["1-a.txt", "10-c.txt", "2-b.txt", "notes.md"]
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "mv 1-a.txt 000-a.txt",
        "mv 2-b.txt 001-b.txt",
        "mv 10-c.txt 002-c.txt",
    ]


def test_failed_rename_sets_exit_code(workdir, capsys, monkeypatch):
    real_rename = os.rename

    def flaky_rename(src, dst):
        if os.path.basename(str(src)) == "2-b.txt":
            raise PermissionError("Permission denied")
        return real_rename(src, dst)

    monkeypatch.setattr(os, "rename", flaky_rename)
    assert cli_main([]) == 1

    out = capsys.readouterr().out
    assert "2-b.txt: FAILED to rename to 01-b.txt: Permission denied" in out
    assert "10-c.txt: successfully renamed to 02-c.txt" in out


def test_unreadable_directory(workdir, monkeypatch, capsys, listing):
    def denied(path):
        raise PermissionError(13, "Permission denied", str(path))

    monkeypatch.setattr(os, "scandir", denied)

    assert cli_main([]) == 1
    assert "An error occurred while reading the directory" in capsys.readouterr().out
    assert listing(workdir) == ["1-a.txt", "10-c.txt", "2-b.txt", "notes.md"]


def test_empty_directory(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    assert cli_main([]) == 0
    assert capsys.readouterr().out == ""


def test_iteration_error_is_printed(tmp_path, monkeypatch, capsys, flaky_scandir):
    monkeypatch.chdir(tmp_path)
    flaky_scandir("2-b", OSError("boom"), "1-a")

    assert cli_main(["--dry-run"]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "An error occurred while iterating over directory contents: boom",
        "mv 1-a 01-a",
        "mv 2-b 02-b",
    ]
