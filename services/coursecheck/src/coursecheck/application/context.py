from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
import os

from coursecheck.domain.diagnostics import Diagnostics
from coursecheck.ports.command_runner import CommandRunnerPort
from coursecheck.ports.console import ConsolePort

GIT_ENV = "COURSECHECK_GIT"
CARGO_ENV = "COURSECHECK_CARGO"


def git_program() -> str:
    return os.environ.get(GIT_ENV) or "git"


def cargo_program() -> str:
    return os.environ.get(CARGO_ENV) or "cargo"


@dataclass
class Context:
    repo_path: Path
    lab_path: Path
    verbose: bool
    diagnostics: Diagnostics
    runner: CommandRunnerPort
    console: ConsolePort

    @classmethod
    def for_lab(
        cls,
        repo_path: Path,
        lab: str,
        diagnostics: Diagnostics,
        runner: CommandRunnerPort,
        console: ConsolePort,
        verbose: bool = False,
    ) -> Context:
        return cls(
            repo_path=repo_path,
            lab_path=repo_path / lab,
            verbose=verbose,
            diagnostics=diagnostics,
            runner=runner,
            console=console,
        )
