"""Tests for the CLI entry point and error boundary (cli/app.py)."""

from __future__ import annotations

import logging
import sys

import pytest

from lein_phonics.cli import exit_codes
from lein_phonics.cli.app import cli, main


# ---------------------------------------------------------------------------
# main() routing
# ---------------------------------------------------------------------------

class TestMain:
    def test_no_args_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main([])
        assert code == exit_codes.SUCCESS
        assert "usage: lein-phonics" in capsys.readouterr().out

    def test_version_flag(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0

    def test_encodes_name_to_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["Hilbert"])
        assert code == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "H343"

    def test_max_code_len_option(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["-n", "6", "Hilbert"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "H34310"

    def test_lenient_by_default(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["garçon"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "G320"

    def test_empty_code_prints_blank_line(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["12345"]) == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == ""

    def test_strict_propagates_error(self) -> None:
        from lein_phonics.exceptions import UnknownCharactersFoundError

        with pytest.raises(UnknownCharactersFoundError):
            main(["--strict", "garçon"])

    def test_verbose_logs_to_stderr(
        self,
        capsys: pytest.CaptureFixture[str],
        restore_package_logger: logging.Logger,
    ) -> None:
        assert main(["--verbose", "Hilbert"]) == exit_codes.SUCCESS
        captured = capsys.readouterr()
        assert captured.out.strip() == "H343"
        assert "Encoded 'Hilbert'" in captured.err

    def test_verbose_handler_attached_once(
        self,
        capsys: pytest.CaptureFixture[str],
        restore_package_logger: logging.Logger,
    ) -> None:
        main(["--verbose", "Hilbert"])
        main(["--verbose", "Hilbert"])
        assert capsys.readouterr().err.count("Encoded 'Hilbert'") == 2


# ---------------------------------------------------------------------------
# cli() error boundary
# ---------------------------------------------------------------------------

class TestErrorBoundary:
    def _run(self, monkeypatch: pytest.MonkeyPatch, *args: str) -> int:
        monkeypatch.setattr(sys, "argv", ["lein-phonics", *args])
        with pytest.raises(SystemExit) as exc_info:
            cli()
        return exc_info.value.code  # type: ignore[return-value]

    def test_success_exit_code(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert self._run(monkeypatch, "Euler") == exit_codes.SUCCESS
        assert capsys.readouterr().out.strip() == "E330"

    def test_unknown_characters_is_general_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert self._run(monkeypatch, "--strict", "Euler3.1415") == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Unknown characters found" in err
        assert "Disable strict mode" in err

    def test_markup_in_input_is_shown_literally(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert self._run(monkeypatch, "--strict", "a[/]") == exit_codes.GENERAL_ERROR
        err = capsys.readouterr().err
        assert "Unknown characters found" in err
        assert "[/]" in err

    def test_invalid_length_is_general_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        assert self._run(monkeypatch, "-n", "0", "Euler") == exit_codes.GENERAL_ERROR
        assert "max_code_len must be at least 1" in capsys.readouterr().err

    def test_keyboard_interrupt(self, monkeypatch: pytest.MonkeyPatch) -> None:
        from lein_phonics.cli import app as app_module

        def _interrupt(argv: list[str] | None = None) -> int:
            raise KeyboardInterrupt

        monkeypatch.setattr(app_module, "main", _interrupt)
        assert self._run(monkeypatch) == exit_codes.KEYBOARD_INTERRUPT

    def test_unexpected_error(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        from lein_phonics.cli import app as app_module

        def _boom(argv: list[str] | None = None) -> int:
            raise RuntimeError("kaput")

        monkeypatch.setattr(app_module, "main", _boom)
        assert self._run(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: kaput" in capsys.readouterr().err

    def test_unexpected_error_markup_is_shown_literally(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        from lein_phonics.cli import app as app_module

        def _boom(argv: list[str] | None = None) -> int:
            raise RuntimeError("bad [/] tag")

        monkeypatch.setattr(app_module, "main", _boom)
        assert self._run(monkeypatch) == exit_codes.UNEXPECTED_ERROR
        assert "RuntimeError: bad [/] tag" in capsys.readouterr().err
