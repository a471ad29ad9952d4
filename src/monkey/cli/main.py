# src/monkey/cli/main.py
import importlib
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from .. import __version__
from ..config import EvaluatorConfig, get_config
from ..environment import Environment
from ..errors import MonkeyError
from ..evaluator import evaluate, EVAL_SUMMARY, reset_summary, is_error
from ..monkey_ast import Program
from ..samples import SAMPLES

console = Console()


def load_program(target):
    """Resolve ``module:attribute`` (or a bundled sample name) to a Program node."""
    if ":" not in target:
        if target in SAMPLES:
            return SAMPLES[target]()
        raise click.BadParameter(
            f"expected 'module:attribute' or one of: {', '.join(sorted(SAMPLES))}",
            param_hint="TARGET",
        )

    module_name, attr = target.split(":", 1)
    try:
        module = importlib.import_module(module_name)
    except ImportError as e:
        raise click.BadParameter(f"cannot import '{module_name}': {e}", param_hint="TARGET")
    try:
        obj = getattr(module, attr)
    except AttributeError:
        raise click.BadParameter(f"'{module_name}' has no attribute '{attr}'", param_hint="TARGET")

    if callable(obj) and not isinstance(obj, Program):
        obj = obj()
    if not isinstance(obj, Program):
        raise click.BadParameter(f"'{target}' is not a Program node", param_hint="TARGET")
    return obj


def report_result(result, out=None):
    """Print ``result`` the way a driver should; returns the process exit code."""
    out = out or console
    if is_error(result):
        out.print(f"[bold red]Error:[/bold red] {escape(result.message)}")
        return 1
    if result is not None:
        out.print(f"[bold green]Result:[/bold green] {escape(result.inspect())}")
    return 0


def _summary_table():
    table = Table(title="Evaluation summary")
    table.add_column("Counter", style="cyan")
    table.add_column("Value", style="green")
    for key, value in EVAL_SUMMARY.items():
        table.add_row(key, str(value))
    return table


_LOGGING_LEVELS = {
    "error": logging.ERROR,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
}


def _configure_logging(config):
    """Route the package's log records through rich when tracing is on."""
    if config.debug_level == "none":
        return
    logger = logging.getLogger("monkey")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.setLevel(_LOGGING_LEVELS[config.debug_level])


@click.group()
@click.version_option(version=__version__, prog_name="Monkey")
def cli():
    """Monkey evaluator - run prebuilt programs against a fresh environment"""
    pass


@cli.command()
@click.argument('target')
@click.option('--debug', is_flag=True, help="Trace evaluation to stderr.")
@click.option('--max-depth', type=click.IntRange(min=1), default=None, help="Nesting limit before aborting.")
@click.option('--scoped-blocks', is_flag=True, help="Give every block its own scope.")
@click.option('--strict', is_flag=True, help="Fail on unknown node kinds.")
@click.option('--flags', default="", help="Extra settings, e.g. 'max_depth=50; debug=info'.")
@click.option('--summary', is_flag=True, help="Print evaluation counters afterwards.")
def run(target, debug, max_depth, scoped_blocks, strict, flags, summary):
    """Run a Monkey program (TARGET is module:attribute or a sample name)"""
    program = load_program(target)

    try:
        config = EvaluatorConfig.from_flags(flags, base=get_config())
        config = config.with_overrides(
            debug_level="debug" if debug else None,
            max_depth=max_depth,
            scoped_blocks=scoped_blocks or None,
            strict_nodes=strict or None,
        )
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--flags")

    _configure_logging(config)
    reset_summary()

    try:
        result = evaluate(program, Environment(), config=config)
    except MonkeyError as e:
        console.print(f"[bold red]Fatal:[/bold red] {escape(str(e))}")
        sys.exit(2)
    except RecursionError:
        console.print("[bold red]Fatal:[/bold red] Python recursion limit exceeded; lower --max-depth")
        sys.exit(2)

    code = report_result(result)
    if summary:
        console.print(_summary_table())
    if code:
        sys.exit(code)


@cli.command()
@click.argument('target')
def ast(target):
    """Show the source form of a Monkey program"""
    program = load_program(target)
    console.print(Panel.fit(
        str(program) or "<empty program>",
        title="[bold blue]Abstract Syntax Tree[/bold blue]",
        border_style="blue",
    ))


@cli.command()
def samples():
    """List the bundled sample programs"""
    table = Table(title="Samples")
    table.add_column("Name", style="cyan")
    table.add_column("Program", style="green")
    for name, factory in sorted(SAMPLES.items()):
        table.add_row(name, str(factory()))
    console.print(table)


if __name__ == "__main__":
    cli()
