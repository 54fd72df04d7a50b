"""Tests for CommandResult helpers and console rendering."""

import io

from rich.console import Console

from xml_suite.results import ERROR, INFO, CommandResult, render


class TestCommandResult:
    def test_defaults_ok(self):
        result = CommandResult()
        assert result.ok
        assert result.messages == []

    def test_fail_sets_exit_code(self):
        result = CommandResult().info("starting").fail("Directory not found: x")
        assert result.exit_code == 1
        assert not result.ok
        assert result.texts(ERROR) == ["Directory not found: x"]
        assert result.texts(INFO) == ["starting"]


class TestRender:
    def test_prefixes_and_order(self):
        out = io.StringIO()
        result = CommandResult().heading("Title").info().success("done").error("oops").hint("try again")
        render(Console(file=out, width=100), result)
        lines = out.getvalue().splitlines()
        assert lines == ["Title", "", "✅ done", "❌ oops", "💡 try again"]

    def test_markup_in_paths_is_escaped(self):
        out = io.StringIO()
        render(Console(file=out, width=100), CommandResult().info("file [bold]x[/bold].xml"))
        assert out.getvalue().strip() == "file [bold]x[/bold].xml"

    def test_failures_and_hints_go_to_error_console(self):
        out, err = io.StringIO(), io.StringIO()
        result = (
            CommandResult().info("Schema file: s.xsd").failed("bad.xml")
            .fail("Schema file not found: s.xsd").hint("Run xml-suite schema")
        )
        render(Console(file=out, width=100), result, Console(file=err, width=100))
        assert out.getvalue().splitlines() == ["Schema file: s.xsd", "❌ bad.xml"]
        assert err.getvalue().splitlines() == [
            "❌ Schema file not found: s.xsd",
            "💡 Run xml-suite schema",
        ]
