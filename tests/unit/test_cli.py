"""Tests for CLI commands."""

import logging
from collections.abc import Callable, Iterator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from arithexpr.cli import app


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Run every command where no stray arithexpr.toml can be picked up.

    Commands reconfigure the root logger onto the runner's stderr, so the
    original handlers are restored afterwards.
    """
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    monkeypatch.chdir(tmp_path)
    yield tmp_path
    root.handlers[:] = handlers
    root.setLevel(level)


def test_eval_prints_result(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["eval", "2 + 3 * 4"])
    assert result.exit_code == 0
    assert result.output.strip() == "14.0"


def test_eval_parentheses(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["eval", "(2 + 3) * 4"])
    assert result.exit_code == 0
    assert "20.0" in result.output


def test_eval_division_by_zero_is_inf(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["eval", "1 / 0"])
    assert result.exit_code == 0
    assert result.output.strip() == "inf"


def test_eval_lex_error(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["eval", "2 & 3"])
    assert result.exit_code == 1
    assert "LexError" in result.output
    assert "'&'" in result.output


def test_eval_parse_error(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["eval", "2 +"])
    assert result.exit_code == 1
    assert "UnexpectedEndOfInputError" in result.output


def test_eval_strict_division_flag(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["eval", "--strict-division", "1 / 0"])
    assert result.exit_code == 1
    assert "DivisionByZeroError" in result.output


def test_eval_strict_trailing_flag(cli_runner: CliRunner):
    lenient = cli_runner.invoke(app, ["eval", "1 + 2)"])
    assert lenient.exit_code == 0
    assert "3.0" in lenient.output

    strict = cli_runner.invoke(app, ["eval", "--strict-trailing", "1 + 2)"])
    assert strict.exit_code == 1
    assert "UnexpectedTokenError" in strict.output


def test_eval_show_tokens(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["eval", "--tokens", "1 + 2"])
    assert result.exit_code == 0
    assert "NUMBER" in result.output
    assert "PLUS" in result.output
    assert result.output.rstrip().endswith("3.0")


def test_eval_show_ast(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["eval", "--ast", "(2 + 3) * 4"])
    assert result.exit_code == 0
    assert "AST: ((2.0 + 3.0) * 4.0)" in result.output
    assert "MUL" in result.output


def test_eval_show_ast_long_chain(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["eval", "--ast", " + ".join(["1"] * 1500)])
    assert result.exit_code == 0, result.exception
    assert "AST: " + "(" * 1499 + "1.0 + 1.0)" in result.output
    assert result.output.rstrip().endswith("1500.0")


def test_eval_reads_config_from_cwd(
    cli_runner: CliRunner, write_manifest: Callable[[str], Path]
):
    write_manifest("[evaluator]\nstrict_division = true\n")
    result = cli_runner.invoke(app, ["eval", "1 / 0"])
    assert result.exit_code == 1
    assert "DivisionByZeroError" in result.output


def test_eval_explicit_config(cli_runner: CliRunner, tmp_path: Path):
    config = tmp_path / "custom.toml"
    config.write_text("[output]\nshow_ast = true\n")
    result = cli_runner.invoke(app, ["eval", "--config", str(config), "1 + 2"])
    assert result.exit_code == 0
    assert "AST: (1.0 + 2.0)" in result.output


def test_eval_missing_config(cli_runner: CliRunner, tmp_path: Path):
    result = cli_runner.invoke(app, ["eval", "--config", str(tmp_path / "nope.toml"), "1"])
    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_eval_invalid_config(cli_runner: CliRunner, write_manifest: Callable[[str], Path]):
    write_manifest("[parser]\nmax_depth = -1\n")
    result = cli_runner.invoke(app, ["eval", "1"])
    assert result.exit_code == 1
    assert "max_depth" in result.output


def test_tokens_command(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["tokens", "(1.5 * 2)"])
    assert result.exit_code == 0
    assert "LPAREN" in result.output
    assert "1.5" in result.output


def test_tokens_command_error(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["tokens", "1.2.3"])
    assert result.exit_code == 1
    assert "MalformedNumberError" in result.output


def test_tokens_command_empty(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["tokens", "   "])
    assert result.exit_code == 0
    assert "No tokens" in result.output


def test_ast_command(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["ast", "10 - 2 - 3"])
    assert result.exit_code == 0
    assert "AST: ((10.0 - 2.0) - 3.0)" in result.output


def test_ast_command_unmatched_paren(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["ast", "(1 + 2"])
    assert result.exit_code == 1
    assert "UnmatchedParenError" in result.output


def test_version(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "arithexpr" in result.output


def test_ast_command_long_chain(cli_runner: CliRunner):
    result = cli_runner.invoke(app, ["ast", " - ".join(["2"] * 1500)])
    assert result.exit_code == 0, result.exception
    assert result.output.rstrip().endswith(" - 2.0)")
