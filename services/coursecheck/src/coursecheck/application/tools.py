from __future__ import annotations

import logging
from pathlib import Path

from coursecheck.adapters.errors import CommandFailed, CommandSpawnError
from coursecheck.application.context import Context
from coursecheck.domain.outcome import CheckOutcome
from coursecheck.ports.command_runner import CommandResult

logger = logging.getLogger(__name__)


def describe_exit(exit_code: int) -> str:
    if exit_code < 0:
        return f"signal: {-exit_code}"
    return f"exit status: {exit_code}"


def _run_checked(
    ctx: Context,
    program: str,
    args: list[str],
    description: str,
    cwd: Path,
    echo_output: bool,
) -> CommandResult:
    result = ctx.runner.run([program, *args], cwd)
    if ctx.verbose and echo_output:
        ctx.console.echo(f"stdout:\n{result.stdout}stderr:\n{result.stderr}")
    if result.exit_code != 0:
        raise CommandFailed(
            f"{description}; command `{program}` failed: {describe_exit(result.exit_code)}",
            details={"exit_code": result.exit_code},
        )
    return result


def run_tool(
    ctx: Context,
    program: str,
    args: list[str],
    description: str,
    cwd: Path,
    announce: bool = True,
) -> CommandResult | CheckOutcome:
    """Run an external tool for a check.

    Returns the captured result when the tool exits with status 0. Any other
    ending records exactly one diagnostic and returns ``CheckOutcome.FAILURE``.
    """
    if announce:
        ctx.console.echo(f"running command: {program} {' '.join(args)}")
    try:
        return _run_checked(ctx, program, args, description, cwd, echo_output=announce)
    except CommandSpawnError as exc:
        logger.debug("%s could not be started: %s", program, exc)
        return ctx.diagnostics.add(
            f"{description}; because: {program} failed with `{exc}`",
            path=cwd,
            code="COMMAND_SPAWN_FAILED",
        )
    except CommandFailed as exc:
        return ctx.diagnostics.add(
            str(exc), path=ctx.repo_path, code="COMMAND_FAILED"
        )
