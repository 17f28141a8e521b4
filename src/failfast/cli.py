from __future__ import annotations

import os
from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape

from failfast.config.loader import load_suite
from failfast.config.resolve import add_import_paths, build_suite, suite_from_target
from failfast.runner.suite import Suite
from failfast.verbose import setup_logger

app = typer.Typer(add_completion=False, no_args_is_help=True)
console = Console()


def _load_target(target: str) -> tuple[Suite, bool]:
    path = Path(target)
    if path.exists():
        config = load_suite(path)
        return build_suite(config), config.verbose
    if ":" in target:
        add_import_paths([os.getcwd()])
        return suite_from_target(target), False
    raise FileNotFoundError(f"No suite file or module:attribute target: {target}")


@app.callback()
def main() -> None:
    """Run explicitly named test suites and report a fail-fast outcome."""


@app.command()
def run(
    target: str = typer.Argument(
        ...,
        help="Suite file, directory containing suite.yaml, or module:attribute",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log case progress to stdout"),
) -> None:
    """Run a suite and exit with 0 if every case passed, 1 otherwise."""
    try:
        suite, config_verbose = _load_target(target)
    except Exception as exc:
        console.print(f"[red]Failed to load suite:[/red] {escape(str(exc))}")
        raise typer.Exit(code=1)

    setup_logger(verbose or config_verbose)
    result = suite.run()
    raise typer.Exit(code=result.exit_code)
