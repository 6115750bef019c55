from pathlib import Path
import logging

import typer

from coursecheck.adapters.command.subprocess_runner import SubprocessCommandRunner
from coursecheck.adapters.console.typer_console import TyperConsole
from coursecheck.application.checks import CHECK_SETS, DEFAULT_CHECK_SET
from coursecheck.application.validate_submission import (
    render_report,
    validate_submission,
)
from coursecheck.domain.naming import LAB_NAMES

app = typer.Typer(add_completion=False)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def check(
    repo: Path = typer.Option(..., "--repo", "-r"),
    lab: str = typer.Option(..., "--lab", "-l"),
    checks: str = typer.Option(DEFAULT_CHECK_SET, "--checks"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
):
    """Validate a course repository submission for one lab."""
    if checks not in CHECK_SETS:
        raise typer.BadParameter(
            f"expected one of: {', '.join(CHECK_SETS)}", param_hint="--checks"
        )
    _configure_logging(verbose)
    console = TyperConsole()
    report = validate_submission(
        repo,
        lab,
        checks=CHECK_SETS[checks],
        verbose=verbose,
        runner=SubprocessCommandRunner(),
        console=console,
    )
    render_report(report, console)
    raise typer.Exit(report.exit_code)


@app.command()
def labs() -> None:
    """List the accepted lab names."""
    for name in LAB_NAMES:
        typer.echo(name)


def main() -> None:
    app()
