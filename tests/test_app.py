"""Tests for the command-line entry point."""

import pytest

from chessrules import app


class TestParser:
    def test_defaults(self) -> None:
        args = app.build_parser().parse_args([])
        assert args.move_limit == 100
        assert args.log_level == "WARNING"

    def test_bad_log_level_exits(self) -> None:
        with pytest.raises(SystemExit):
            app.build_parser().parse_args(["--log-level", "LOUD"])


class TestMain:
    def test_invalid_move_limit(self, caplog: pytest.LogCaptureFixture) -> None:
        assert app.main(["--move-limit", "0"]) == 2
        assert "move_limit must be positive" in caplog.text

    def test_runs_until_input_ends(
        self, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        answers = iter(["WP5", "U", "2", "quit"])
        monkeypatch.setattr("builtins.input", lambda prompt="": next(answers))
        assert app.main(["--move-limit", "50"]) == 0
        out = capsys.readouterr().out
        assert "Welcome to Chess Game" in out
        assert "*** Game ended by user. ***" in out
