"""Tests for CLI commands."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

from infixcalc.cli import app


@pytest.fixture
def cli_runner():
    """Return a CLI test runner."""
    return CliRunner()


class TestEvalCommand:
    def test_single_expression(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["eval", "2 + 3 * 4"])
        assert result.exit_code == 0
        assert result.output.strip() == "14"

    def test_expressions_share_a_session(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["eval", "x = 5", "x + 1"])
        assert result.exit_code == 0
        assert result.output.split() == ["5", "6"]

    def test_show_tree(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["eval", "--show-tree", "1 - 2 - 3"])
        assert result.exit_code == 0
        assert "((1 - 2) - 3) = -4" in result.output

    def test_set_option(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["eval", "--set", "x=2.5", "x * 2"])
        assert result.exit_code == 0
        assert result.output.strip() == "5"

    def test_bad_set_option(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["eval", "--set", "x", "1"])
        assert result.exit_code != 0

    def test_division_by_zero(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["eval", "4 / 0"])
        assert result.exit_code == 1
        assert "Division by zero" in result.output

    def test_unknown_identifier(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["eval", "y + 1"])
        assert result.exit_code == 1
        assert "Unknown identifier 'y'" in result.output

    def test_syntax_error(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["eval", "(1 + 2"])
        assert result.exit_code == 1
        assert "Unexpected token 'END'" in result.output

    def test_long_chain(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["eval", " + ".join(["2"] * 1500)])
        assert result.exit_code == 0
        assert result.output.strip() == "3000"

    def test_deep_nesting_error(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["eval", "(" * 5000 + "1" + ")" * 5000])
        assert result.exit_code == 1
        assert "nested too deeply" in result.output
        assert "Traceback" not in result.output

    def test_config_variables_and_tree(
        self, cli_runner: CliRunner, config_file: Path
    ) -> None:
        result = cli_runner.invoke(app, ["eval", "pi * 2"])
        assert result.exit_code == 0
        assert "(pi * 2) = 7" in result.output

    def test_explicit_config(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        path = isolated_cwd / "other.toml"
        path.write_text("[variables]\nk = 4\n")
        result = cli_runner.invoke(app, ["--config", str(path), "eval", "k / 8"])
        assert result.exit_code == 0
        assert result.output.strip() == "0.5"

    def test_broken_config(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        (isolated_cwd / "infixcalc.toml").write_text('[variables]\nx = "one"\n')
        result = cli_runner.invoke(app, ["eval", "1"])
        assert result.exit_code == 1
        assert "must be a number" in result.output


class TestRenderCommand:
    def test_render(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["render", "a = b = 3"])
        assert result.exit_code == 0
        assert result.output.strip() == "(a = (b = 3))"

    def test_render_does_not_evaluate(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["render", "y / 0"])
        assert result.exit_code == 0
        assert result.output.strip() == "(y / 0)"

    def test_render_error(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["render", "1 +"])
        assert result.exit_code == 1
        assert "Error" in result.output


class TestReplCommand:
    def test_session_persists(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["repl"], input="x = 5\nx + 1\n:quit\n")
        assert result.exit_code == 0
        assert "5" in result.output
        assert "6" in result.output

    def test_errors_do_not_end_session(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(app, ["repl"], input="4 / 0\n\n2 * 21\n")
        assert result.exit_code == 0
        assert "Division by zero" in result.output
        assert "42" in result.output

    def test_vars_and_clear(self, cli_runner: CliRunner, isolated_cwd: Path) -> None:
        result = cli_runner.invoke(
            app, ["repl"], input="total = 12\n:vars\n:clear\n:vars\n:q\n"
        )
        assert result.exit_code == 0
        assert "total" in result.output
        assert "No variables defined" in result.output

    def test_prompt_from_config(self, cli_runner: CliRunner, config_file: Path) -> None:
        result = cli_runner.invoke(app, ["repl"], input="answer / 2\n")
        assert result.exit_code == 0
        assert ">> " in result.output
        assert "(answer / 2) = 21" in result.output


def test_version(cli_runner: CliRunner) -> None:
    result = cli_runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("infixcalc ")
