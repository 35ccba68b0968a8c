# tests/cli/test_cli_main.py

import json
from unittest.mock import patch

import pytest

from schemadrift.cli import main as cli_main


@pytest.fixture(autouse=True)
def no_log_reconfigure(monkeypatch):
    """Keep the CLI from pointing the root logger at pytest's capture stream."""
    monkeypatch.setattr(cli_main, "configure_logging", lambda stream=None: None)


@pytest.fixture
def spec_files(tmp_path):
    old = tmp_path / "old.json"
    new = tmp_path / "new.yaml"
    old.write_text(
        json.dumps({"openapi": "3.0.0", "paths": {"/pets": {"get": {}, "post": {}}}}),
        encoding="utf-8",
    )
    new.write_text("openapi: 3.0.0\npaths:\n  /pets:\n    get: {}\n", encoding="utf-8")
    return str(old), str(new)


def test_cli_serve_invokes_uvicorn_run():
    with patch("schemadrift.cli.main.uvicorn.run") as mock_run:
        code = cli_main.main(["serve", "--port", "9001"])

    assert code == 0
    mock_run.assert_called_once()
    assert mock_run.call_args.args[0] == "schemadrift.main:app"
    assert mock_run.call_args.kwargs["port"] == 9001


def test_cli_diff_prints_result(spec_files, capsys):
    old, new = spec_files
    code = cli_main.main(["diff", old, new])

    assert code == 0
    out = json.loads(capsys.readouterr().out)
    assert out["breaking"] == 1
    assert out["changes"][0]["path"] == "paths./pets.POST"


def test_cli_diff_fail_on_breaking(spec_files, capsys):
    old, new = spec_files
    assert cli_main.main(["diff", old, new, "--fail-on-breaking"]) == 1
    assert cli_main.main(["diff", old, old, "--fail-on-breaking"]) == 0


def test_cli_diff_missing_file(tmp_path, capsys):
    code = cli_main.main(["diff", str(tmp_path / "nope.json"), str(tmp_path / "nope.json")])
    assert code == 2
    assert "error:" in capsys.readouterr().err
