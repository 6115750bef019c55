from __future__ import annotations

import logging
from pathlib import Path
import subprocess

from coursecheck.adapters.errors import CommandSpawnError
from coursecheck.ports.command_runner import CommandResult

logger = logging.getLogger(__name__)


class SubprocessCommandRunner:
    """Runs collaborator binaries to completion and captures their text output.

    Output is decoded strictly as UTF-8; undecodable output raises
    ``UnicodeDecodeError`` to the caller.
    """

    def run(self, args: list[str], cwd: Path) -> CommandResult:
        logger.debug("running %s in %s", args, cwd)
        try:
            completed = subprocess.run(
                args,
                cwd=cwd,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                check=False,
            )
        except OSError as exc:
            raise CommandSpawnError(
                str(exc),
                details={"args": list(args), "cwd": str(cwd)},
                cause=exc,
            ) from exc
        logger.debug("%s exited with %s", args[0], completed.returncode)
        return CommandResult(
            exit_code=completed.returncode,
            stdout=completed.stdout.decode("utf-8"),
            stderr=completed.stderr.decode("utf-8"),
        )
