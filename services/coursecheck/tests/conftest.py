from __future__ import annotations

from pathlib import Path

import pytest

from coursecheck.adapters.errors import CommandSpawnError
from coursecheck.ports.command_runner import CommandResult


class RecordingConsole:
    def __init__(self) -> None:
        self.lines: list[str] = []
        self.verdicts: list[bool] = []

    def echo(self, text: str) -> None:
        self.lines.append(text)

    def labelled(self, label: str, text: str) -> None:
        self.lines.append(f"{label}: {text}")

    def verdict(self, ok: bool) -> None:
        self.verdicts.append(ok)


class FakeRunner:
    """Answers commands by their first argument, e.g. ``ls-files`` or ``clippy``."""

    def __init__(self) -> None:
        self.responses: dict[str, CommandResult | Exception] = {}
        self.calls: list[tuple[list[str], Path]] = []

    def respond(
        self, subcommand: str, exit_code: int = 0, stdout: str = "", stderr: str = ""
    ) -> None:
        self.responses[subcommand] = CommandResult(exit_code, stdout, stderr)

    def fail_to_spawn(self, subcommand: str, message: str) -> None:
        self.responses[subcommand] = CommandSpawnError(message)

    def subcommands(self) -> list[str]:
        return [args[1] for args, _ in self.calls]

    def run(self, args: list[str], cwd: Path) -> CommandResult:
        self.calls.append((list(args), cwd))
        response = self.responses.get(args[1], CommandResult(0, "", ""))
        if isinstance(response, Exception):
            raise response
        return response


@pytest.fixture
def console() -> RecordingConsole:
    return RecordingConsole()


@pytest.fixture
def runner() -> FakeRunner:
    return FakeRunner()


@pytest.fixture
def clean_repo(tmp_path: Path) -> Path:
    (tmp_path / ".gitignore").write_text("/target\nCargo.lock\n", encoding="utf-8")
    (tmp_path / "lab03").mkdir()
    return tmp_path
