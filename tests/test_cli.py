import io
import logging
import os
import stat
import sys

import pytest
from rich.logging import RichHandler

from grab import cli, ui

from .conftest import API, FakeResponse, asset_json, release_json


@pytest.fixture
def one_asset(repo_ok):
    repo_ok.add(f"{API}/repos/o/r/releases/latest", FakeResponse(200, release_json("v1", [asset_json("tool")])))
    repo_ok.add("https://github.com/o/r/releases/download/v1/tool",
                FakeResponse(200, body=b"#!/bin/sh\necho hi\n", headers={"Content-Length": "18"}))
    return repo_ok


def test_parse_args_flags():
    args = cli.parse_args(["-p", "~/bin/", "-r", "barg", "-d", "tobyjoe/grab"])
    assert (args.repo, args.path, args.rename, args.dry_run) == ("tobyjoe/grab", "~/bin/", "barg", True)


def test_long_flags():
    args = cli.parse_args(["--path", "/opt", "--rename", "x", "--dry-run", "a/b"])
    assert (args.repo, args.path, args.rename, args.dry_run) == ("a/b", "/opt", "x", True)


@pytest.mark.parametrize("argv", [[], ["nope"], ["a/b/c"], ["  "]])
def test_usage_errors(argv, capsys):
    assert cli.main(argv) == cli.EXIT_USAGE
    assert "grab [flags] repo" in capsys.readouterr().out


def test_dry_run_downloads_nothing(one_asset, tmp_path, capsys):
    assert cli.main(["-d", "-p", str(tmp_path), "o/r"]) == 0
    assert list(tmp_path.iterdir()) == []
    assert "Dry-run completed" in capsys.readouterr().out
    assert not any("download/v1" in u for u in one_asset.urls())


def test_download_and_chmod(one_asset, tmp_path):
    assert cli.main(["-p", str(tmp_path), "-r", "barg", "o/r"]) == 0
    out = tmp_path / "barg"
    assert out.read_bytes() == b"#!/bin/sh\necho hi\n"
    if not sys.platform.startswith("win"):
        assert stat.S_IMODE(os.stat(out).st_mode) == 0o755


def test_multiple_assets_prompt(repo_ok, tmp_path, monkeypatch):
    repo_ok.add(f"{API}/repos/o/r/releases/latest",
                FakeResponse(200, release_json("v1", [asset_json("a"), asset_json("b")])))
    repo_ok.add("https://github.com/o/r/releases/download/v1/b", FakeResponse(200, body=b"bbb"))
    monkeypatch.setattr(ui.Prompt, "ask", classmethod(lambda cls, q, **kw: "2"))
    assert cli.main(["-p", str(tmp_path), "o/r"]) == 0
    assert (tmp_path / "b").read_bytes() == b"bbb"
    assert not (tmp_path / "a").exists()


def test_missing_project_exits_nonzero(session, capsys):
    session.add(f"{API}/repos/o/r", FakeResponse(404))
    assert cli.main(["o/r"]) == cli.EXIT_ERROR
    assert "Project does not exist: github.com/o/r" in capsys.readouterr().out


def test_interrupt(monkeypatch, capsys):
    def boom(*a, **kw):
        raise KeyboardInterrupt

    monkeypatch.setattr(cli, "run_grab_flow", boom)
    assert cli.main(["o/r"]) == cli.EXIT_INTERRUPTED
    assert "Interrupted by user." in capsys.readouterr().out


def test_empty_stdin_at_asset_prompt(repo_ok, tmp_path, monkeypatch, capsys):
    repo_ok.add(f"{API}/repos/o/r/releases/latest",
                FakeResponse(200, release_json("v1", [asset_json("a"), asset_json("b")])))
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    assert cli.main(["-p", str(tmp_path), "o/r"]) == cli.EXIT_ERROR
    assert "You must select an asset to download" in capsys.readouterr().out
    assert list(tmp_path.iterdir()) == []


def test_logging_goes_through_the_ui_console(monkeypatch):
    monkeypatch.setattr(logging.root, "handlers", [])
    monkeypatch.setattr(cli, "run_grab_flow", lambda *a, **kw: None)
    assert cli.main(["o/r"]) == 0
    handlers = [h for h in logging.root.handlers if isinstance(h, RichHandler)]
    assert handlers and handlers[0].console is ui.console
    for h in handlers:
        logging.root.removeHandler(h)
