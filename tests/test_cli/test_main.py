"""Tests for the objkit CLI commands."""
from __future__ import annotations

from click.testing import CliRunner

from objkit import __version__
from objkit.cli.main import cli


# ---------------------------------------------------------------------------
# CLI group
# ---------------------------------------------------------------------------


class TestCLIGroup:
    def test_help(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--help"])
        assert result.exit_code == 0
        assert "area" in result.output
        assert "selector" in result.output
        assert "normalize" in result.output

    def test_version(self) -> None:
        runner = CliRunner()
        result = runner.invoke(cli, ["--version"])
        assert result.exit_code == 0
        assert __version__ in result.output


# ---------------------------------------------------------------------------
# area command
# ---------------------------------------------------------------------------


class TestAreaCommand:
    def test_integer_area(self) -> None:
        result = CliRunner().invoke(cli, ["area", "10", "20"])
        assert result.exit_code == 0
        assert result.output.strip() == "200"

    def test_fractional_area(self) -> None:
        result = CliRunner().invoke(cli, ["area", "1.5", "3"])
        assert result.exit_code == 0
        assert result.output.strip() == "4.5"

    def test_non_numeric(self) -> None:
        result = CliRunner().invoke(cli, ["area", "ten", "20"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# selector command
# ---------------------------------------------------------------------------


class TestSelectorCommand:
    def test_builds_selector(self) -> None:
        result = CliRunner().invoke(
            cli, ["selector", "element=a", 'attr=href$=".png"', "pseudo-class=focus"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == 'a[href$=".png"]:focus'

    def test_repeated_class(self) -> None:
        result = CliRunner().invoke(
            cli, ["selector", "id=main", "class=container", "class=editable"]
        )
        assert result.exit_code == 0
        assert result.output.strip() == "#main.container.editable"

    def test_order_error(self) -> None:
        result = CliRunner().invoke(cli, ["selector", "class=a", "id=main"])
        assert result.exit_code == 1
        assert "Selector error" in result.output
        assert "arranged in the following order" in result.output

    def test_duplicate_error(self) -> None:
        result = CliRunner().invoke(cli, ["selector", "id=a", "id=b"])
        assert result.exit_code == 1
        assert "more then one time" in result.output

    def test_unknown_kind(self) -> None:
        result = CliRunner().invoke(cli, ["selector", "tag=div"])
        assert result.exit_code == 2
        assert "unknown part kind" in result.output

    def test_missing_separator(self) -> None:
        result = CliRunner().invoke(cli, ["selector", "div"])
        assert result.exit_code == 2
        assert "KIND=VALUE" in result.output

    def test_requires_parts(self) -> None:
        result = CliRunner().invoke(cli, ["selector"])
        assert result.exit_code == 2


# ---------------------------------------------------------------------------
# normalize command
# ---------------------------------------------------------------------------


class TestNormalizeCommand:
    def test_compact(self, tmp_path) -> None:
        src = tmp_path / "data.json"
        src.write_text('{\n  "width": 10,\n  "height": 20\n}\n', encoding="utf-8")
        result = CliRunner().invoke(cli, ["normalize", str(src)])
        assert result.exit_code == 0
        assert result.output.strip() == '{"width":10,"height":20}'

    def test_pretty(self, tmp_path) -> None:
        src = tmp_path / "data.json"
        src.write_text("[1,2]", encoding="utf-8")
        result = CliRunner().invoke(cli, ["normalize", "--pretty", str(src)])
        assert result.exit_code == 0
        assert result.output.strip() == "[\n  1,\n  2\n]"

    def test_malformed(self, tmp_path) -> None:
        src = tmp_path / "bad.json"
        src.write_text("{oops}", encoding="utf-8")
        result = CliRunner().invoke(cli, ["normalize", str(src)])
        assert result.exit_code == 1
        assert "Parse error" in result.output

    def test_missing_file(self, tmp_path) -> None:
        result = CliRunner().invoke(cli, ["normalize", str(tmp_path / "nope.json")])
        assert result.exit_code == 2
