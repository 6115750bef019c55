from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
import logging
from pathlib import Path

from coursecheck.adapters.command.subprocess_runner import SubprocessCommandRunner
from coursecheck.adapters.console.typer_console import TyperConsole
from coursecheck.application.checks import FULL_CHECKS, Check
from coursecheck.application.context import Context
from coursecheck.domain.diagnostics import Diagnostics
from coursecheck.domain.naming import validate_lab_name
from coursecheck.domain.outcome import CheckOutcome
from coursecheck.ports.command_runner import CommandRunnerPort
from coursecheck.ports.console import ConsolePort

logger = logging.getLogger(__name__)


def _new_checks_run() -> list[str]:
    return []


@dataclass
class SubmissionReport:
    outcome: CheckOutcome
    diagnostics: Diagnostics
    checks_run: list[str] = field(default_factory=_new_checks_run)

    @property
    def exit_code(self) -> int:
        return 0 if self.outcome.ok else 1


def validate_submission(
    repo_path: Path,
    lab: str,
    checks: Sequence[Check] = FULL_CHECKS,
    verbose: bool = False,
    runner: CommandRunnerPort | None = None,
    console: ConsolePort | None = None,
    diagnostics: Diagnostics | None = None,
) -> SubmissionReport:
    diagnostics = diagnostics if diagnostics is not None else Diagnostics()
    if validate_lab_name(diagnostics, lab) is CheckOutcome.FAILURE:
        return SubmissionReport(outcome=CheckOutcome.FAILURE, diagnostics=diagnostics)

    ctx = Context.for_lab(
        repo_path,
        lab,
        diagnostics=diagnostics,
        runner=runner or SubprocessCommandRunner(),
        console=console or TyperConsole(),
        verbose=verbose,
    )

    outcome = CheckOutcome.SUCCESS
    checks_run: list[str] = []
    for check in checks:
        logger.debug("running check %s", check.name)
        result = check(ctx)
        logger.debug("check %s finished: %s", check.name, result.value)
        checks_run.append(check.name)
        outcome = outcome & result

    return SubmissionReport(
        outcome=outcome, diagnostics=diagnostics, checks_run=checks_run
    )


def render_report(report: SubmissionReport, console: ConsolePort) -> None:
    report.diagnostics.render(console)
    console.verdict(report.outcome.ok)
