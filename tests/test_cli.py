"""Tests for the `monkey` command line driver."""

import logging

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

from monkey.cli import main as cli_main
from monkey.cli.main import cli, load_program, report_result
from monkey.monkey_ast import Program
from monkey.object import EvaluationError, Integer


@pytest.fixture
def runner():
    return CliRunner()


# A module-level program so `module:attribute` targets can be resolved.
PROGRAM = Program()


def make_program():
    return Program()


NOT_A_PROGRAM = 42


class TestRun:
    def test_value(self, runner):
        result = runner.invoke(cli, ["run", "nested_return"])
        assert result.exit_code == 0
        assert "Result: 10" in result.output

    def test_module_attribute_target(self, runner):
        result = runner.invoke(cli, ["run", "monkey.samples:conditional"])
        assert result.exit_code == 0
        assert "Result: 14" in result.output

    def test_error_exits_nonzero(self, runner):
        result = runner.invoke(cli, ["run", "type_mismatch"])
        assert result.exit_code == 1
        assert "Error: Mismatched types: INTEGER + BOOLEAN" in result.output

    def test_depth_limit_is_fatal(self, runner):
        result = runner.invoke(cli, ["run", "arithmetic", "--max-depth", "2"])
        assert result.exit_code == 2
        assert "Maximum evaluation depth exceeded" in result.output

    def test_summary(self, runner):
        result = runner.invoke(cli, ["run", "arithmetic", "--summary"])
        assert result.exit_code == 0
        assert "evaluated_statements" in result.output

    def test_bad_flags(self, runner):
        result = runner.invoke(cli, ["run", "arithmetic", "--flags", "bogus=1"])
        assert result.exit_code == 2
        assert "bogus" in result.output

    def test_unknown_sample(self, runner):
        result = runner.invoke(cli, ["run", "no_such_sample"])
        assert result.exit_code == 2

    def test_empty_program_prints_nothing(self, runner):
        result = runner.invoke(cli, ["run", f"{__name__}:PROGRAM"])
        assert result.exit_code == 0
        assert "Result" not in result.output


    def test_recursion_error_is_fatal(self, runner, monkeypatch):
        def overflow(*args, **kwargs):
            raise RecursionError("maximum recursion depth exceeded")

        monkeypatch.setattr(cli_main, "evaluate", overflow)
        result = runner.invoke(cli, ["run", "arithmetic"])
        assert result.exit_code == 2
        assert "recursion limit" in result.output


@pytest.fixture
def monkey_logger():
    logger = logging.getLogger("monkey")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


class TestLogging:
    def test_no_handler_without_tracing(self, runner, monkey_logger):
        result = runner.invoke(cli, ["run", "arithmetic"])
        assert result.exit_code == 0
        assert not any(isinstance(h, RichHandler) for h in monkey_logger.handlers)

    def test_debug_installs_rich_handler(self, runner, monkey_logger):
        result = runner.invoke(cli, ["run", "arithmetic", "--debug"])
        assert result.exit_code == 0
        assert any(isinstance(h, RichHandler) for h in monkey_logger.handlers)
        assert monkey_logger.level == logging.DEBUG

    def test_flags_debug_level(self, runner, monkey_logger):
        result = runner.invoke(cli, ["run", "arithmetic", "--flags", "debug=info"])
        assert result.exit_code == 0
        assert monkey_logger.level == logging.INFO


class TestOtherCommands:
    def test_ast(self, runner):
        result = runner.invoke(cli, ["ast", "arithmetic"])
        assert result.exit_code == 0
        assert "let a = 5;" in result.output

    def test_samples(self, runner):
        result = runner.invoke(cli, ["samples"])
        assert result.exit_code == 0
        assert "nested_return" in result.output

    def test_version(self, runner):
        result = runner.invoke(cli, ["--version"])
        assert "0.1.0" in result.output


class TestHelpers:
    def test_load_program_from_callable(self):
        assert isinstance(load_program(f"{__name__}:make_program"), Program)

    def test_load_program_rejects_non_program(self):
        import click
        with pytest.raises(click.BadParameter):
            load_program(f"{__name__}:NOT_A_PROGRAM")

    def test_report_result_codes(self):
        from rich.console import Console
        out = Console(record=True, width=120)
        assert report_result(Integer(3), out) == 0
        assert report_result(EvaluationError("boom"), out) == 1
        assert report_result(None, out) == 0
        text = out.export_text()
        assert "Result: 3" in text
        assert "Error: boom" in text
