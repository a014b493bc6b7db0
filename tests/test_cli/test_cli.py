"""Tests for the css-specificity CLI commands."""
from __future__ import annotations

import json

from click.testing import CliRunner

from css_specificity import __version__
from css_specificity.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_cli_group_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "compute and compare CSS selector specificity" in result.output

    def test_cli_lists_commands(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert "score" in result.output
        assert "compare" in result.output
        assert "rules" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# score command
# ---------------------------------------------------------------------------


class TestScoreCommand:
    def test_single_selector(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["score", "div.foo#bar:hover"])
        assert result.exit_code == 0
        assert result.output.split() == ["div.foo#bar:hover", "1,2,1"]

    def test_selector_group_is_split(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["score", "h1, .title", "#main"])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert [line.split() for line in lines] == [
            ["h1", "0,0,1"],
            [".title", "0,1,0"],
            ["#main", "1,0,0"],
        ]

    def test_json_output(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["score", "--format", "json", "#a", "p"])
        assert result.exit_code == 0
        assert json.loads(result.output) == [
            {"selector": "#a", "specificity": [1, 0, 0]},
            {"selector": "p", "specificity": [0, 0, 1]},
        ]

    def test_requires_selector(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["score"])
        assert result.exit_code != 0


# ---------------------------------------------------------------------------
# compare command
# ---------------------------------------------------------------------------


class TestCompareCommand:
    def test_left_wins(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["compare", "#a", ".b.c.d"])
        assert result.exit_code == 0
        assert result.output.strip() == "#a (1,0,0) > .b.c.d (0,3,0)"

    def test_right_wins(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["compare", "div", ".x"])
        assert " < " in result.output

    def test_equal(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["compare", "DIV", "div"])
        assert result.output.strip() == "DIV (0,0,1) = div (0,0,1)"


# ---------------------------------------------------------------------------
# rules command
# ---------------------------------------------------------------------------


class TestRulesCommand:
    def test_lists_rules_in_cascade_order(self, tmp_path) -> None:
        css = tmp_path / "style.css"
        css.write_text("#main { color: red; }\ndiv, .x { color: blue; }\n", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["rules", str(css)])
        assert result.exit_code == 0
        lines = result.output.strip().splitlines()
        assert lines[0] == "Rules: 3"
        assert [line.split()[2] for line in lines[1:]] == ["div", ".x", "#main"]
        assert "order=1" in lines[1]

    def test_parse_error(self, tmp_path) -> None:
        css = tmp_path / "broken.css"
        css.write_text("a { color: red;", encoding="utf-8")
        runner = CliRunner()
        result = runner.invoke(cli, ["rules", str(css)])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_missing_file(self, tmp_path) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["rules", str(tmp_path / "nope.css")])
        assert result.exit_code != 0
