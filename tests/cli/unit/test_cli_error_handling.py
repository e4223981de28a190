"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from test_launch_resolver.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["resolve", "--request", "/tmp/request.yaml"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["resolve", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option: --bogus" in captured.err
    assert "Traceback" not in captured.err


def test_domain_error_returns_exit_code_one_with_message(tmp_path: Path, capsys) -> None:
    exit_code = main(
        [
            "resolve",
            "--config",
            str(tmp_path / "missing.yaml"),
            "--request",
            str(tmp_path / "request.yaml"),
        ]
    )
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert "Traceback" not in captured.err
