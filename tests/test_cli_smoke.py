"""
Launcher smoke tests.

These validate that the entrypoint is wired and that help output does not crash.
"""

from __future__ import annotations

import pytest

from orgroster.cli import main


def test_cli_root_help(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--help"])
    assert excinfo.value.code == 0

    out = capsys.readouterr().out.lower()
    assert "usage:" in out
    assert "orgroster" in out
    assert "--in-memory" in out


def test_cli_rejects_db_path_with_in_memory(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        main(["--in-memory", "--db-path", "x.sqlite"])
    assert excinfo.value.code == 2
    assert "not allowed with" in capsys.readouterr().err
