"""Tests for the Typer command line interface."""

import json
from io import StringIO

from rich.console import Console
from typer.testing import CliRunner

from docblock_tags import __version__
from docblock_tags.cli import DEFAULT_IGNORE_TAGS, app
from docblock_tags.cli.app import build_options
from docblock_tags.core import Multi, Scalar
from docblock_tags.reporters import RichReporter
from docblock_tags.scanner import DocBlock, ScanResult

runner = CliRunner()

WIDGET_COMMENT = """/**
 * Builds a widget.
 * @param string $name
 * @return Widget
 * @throws Error first
 * @throws Error second
 */"""


class TestBuildOptions:
    def test_caller_default_ignores_param_and_return(self):
        options = build_options(None, None, "description", False)
        assert options.ignore == DEFAULT_IGNORE_TAGS == frozenset({"param", "return"})

    def test_explicit_ignore_replaces_default(self):
        assert build_options(None, ["see"], "description", False).ignore == frozenset({"see"})

    def test_all_tags_is_neutral(self):
        options = build_options(None, None, "summary", True)
        assert options.ignore == frozenset()
        assert options.default == "summary"


class TestParseCommand:
    def test_json_output_from_stdin(self):
        result = runner.invoke(app, ["parse", "-", "--format", "json"], input=WIDGET_COMMENT)
        assert result.exit_code == 0
        data = json.loads(result.stdout)
        assert data["target"] == "<stdin>"
        assert data["docblocks"][0]["tags"] == {
            "description": "Builds a widget.",
            "throws": ["Error first", "Error second"],
        }

    def test_all_tags_from_file(self, tmp_path):
        comment_file = tmp_path / "comment.txt"
        comment_file.write_text(WIDGET_COMMENT, encoding="utf-8")
        result = runner.invoke(app, ["parse", str(comment_file), "-f", "json", "--all-tags"])
        assert result.exit_code == 0
        tags = json.loads(result.stdout)["docblocks"][0]["tags"]
        assert tags["param"] == "string $name"
        assert tags["return"] == "Widget"

    def test_missing_file_exits_2(self, tmp_path):
        result = runner.invoke(app, ["parse", str(tmp_path / "missing.txt")])
        assert result.exit_code == 2

    def test_invalid_default_is_a_usage_error(self):
        result = runner.invoke(app, ["parse", "-", "--default", "my-desc"], input=WIDGET_COMMENT)
        assert result.exit_code == 2

    def test_rich_output_lists_tags(self):
        result = runner.invoke(app, ["parse", "-"], input=WIDGET_COMMENT)
        assert result.exit_code == 0
        assert "@throws" in result.stdout
        assert "Error second" in result.stdout


class TestScanCommand:
    def test_required_tag_missing_exits_1(self, tmp_path):
        (tmp_path / "a.php").write_text("<?php\n/** Doc */\nfunction a() {}\n", encoding="utf-8")
        result = runner.invoke(app, ["scan", str(tmp_path), "-f", "json", "-r", "since"])
        assert result.exit_code == 1
        data = json.loads(result.stdout)
        assert [i["code"] for i in data["issues"]] == ["MISSING_TAG"]
        assert data["summary"]["passed"] is False

    def test_clean_scan_exits_0(self, tmp_path):
        (tmp_path / "a.php").write_text(
            "<?php\n/**\n * Doc\n * @since 1.0\n */\nfunction a() {}\n",
            encoding="utf-8",
        )
        result = runner.invoke(app, ["scan", str(tmp_path), "-f", "json", "-r", "since"])
        assert result.exit_code == 0
        assert json.loads(result.stdout)["summary"]["docblocks"] == 1

    def test_missing_directory_exits_1(self, tmp_path):
        result = runner.invoke(app, ["scan", str(tmp_path / "nope")])
        assert result.exit_code == 1


class TestVersionCommand:
    def test_prints_version(self):
        result = runner.invoke(app, ["version"])
        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestRichReporter:
    def test_multi_values_are_numbered(self):
        output = StringIO()
        reporter = RichReporter(Console(file=output, width=120, color_system=None))
        block = DocBlock(
            file_path="a.php",
            line_number=3,
            raw="",
            declaration="function f(array $x = [])",
            tags={"description": Scalar(""), "see": Multi(("A", "B"))},
        )
        reporter.report(ScanResult(docblocks=[block]), "a.php")

        text = output.getvalue()
        assert "function f(array $x = [])" in text
        assert "@see ×2" in text
        assert "1. A" in text
        assert "2. B" in text
        assert "(empty)" in text
