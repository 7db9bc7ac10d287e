"""Integration tests for the dualdispatch command line."""

from __future__ import annotations

from pathlib import Path

import pytest

from dualdispatch.cli import create_parser, main


class TestCollideCommand:
    """Tests for `dualdispatch collide`."""

    def test_outcome(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["collide", "asteroid", "spaceship"]) == 0
        assert capsys.readouterr().out == "Asteroid hits and destroys the spaceship\n"

    def test_harmless(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["collide", "planet", "planet"]) == 0
        assert capsys.readouterr().out == "objects pass each other harmlessly\n"

    def test_unknown_object(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["collide", "comet", "planet"]) == 2
        assert "comet" in capsys.readouterr().err

    def test_strict_config(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "strict.yaml"
        config.write_text("dualdispatch:\n  on_missing: raise\n")
        assert main(["--config", str(config), "collide", "planet", "planet"]) == 1
        assert "No handler registered" in capsys.readouterr().err


class TestExpressionCommands:
    """Tests for `dualdispatch print` and `dualdispatch eval`."""

    def test_print(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["print", "(13-4)-(12-1)"]) == 0
        assert capsys.readouterr().out == "13-4-(12-1)\n"

    def test_print_parens(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["print", "--parens", "1+(2+3)"]) == 0
        assert capsys.readouterr().out == "(1+(2+3))\n"

    def test_eval(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["eval", "(13-4)-(12+1)"]) == 0
        assert capsys.readouterr().out == "-4\n"

    def test_number_format(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "format.yaml"
        config.write_text("number_format: .2f\n")
        assert main(["--config", str(config), "eval", "1.5+1"]) == 0
        assert capsys.readouterr().out == "2.50\n"

    def test_malformed(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["eval", "2*3"]) == 1
        assert "Unsupported operator" in capsys.readouterr().err


    def test_long_expression(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["eval", "+".join(["1"] * 1500)]) == 1
        assert "too deeply nested" in capsys.readouterr().err


class TestGlobalOptions:
    """Tests for options shared by all commands."""

    def test_bad_config(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "bad.yaml"
        config.write_text("on_missing: sometimes\n")
        assert main(["--config", str(config), "eval", "1"]) == 1
        assert "on_missing" in capsys.readouterr().err

    def test_numeric_config_values(
        self, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        config = tmp_path / "numeric.yaml"
        config.write_text("log_level: 10\nnumber_format: 5\n")
        assert main(["--config", str(config), "eval", "1+2"]) == 1
        assert "must be a string" in capsys.readouterr().err

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args([])

    def test_verbose_count(self) -> None:
        args = create_parser().parse_args(["-vv", "eval", "1"])
        assert args.verbose == 2
