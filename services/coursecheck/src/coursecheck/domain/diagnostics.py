from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from coursecheck.domain.outcome import CheckOutcome

if TYPE_CHECKING:
    from coursecheck.ports.console import ConsolePort

SUCCESS_LINE = "no problems found"
HEADER_LINE = "some problems were found:"


@dataclass(frozen=True)
class Diagnostic:
    code: str
    message: str
    path: Path | None = None
    help: str | None = None


class Diagnostics:
    """Ordered collector of problems found during a single run.

    Checks record into it through ``add`` and use the returned outcome as
    their own result. The collector is consumed by ``render``.
    """

    def __init__(self) -> None:
        self._items: list[Diagnostic] = []
        self._rendered = False

    def add(
        self,
        message: str,
        path: Path | None = None,
        help: str | None = None,
        code: str = "CHECK_FAILED",
    ) -> CheckOutcome:
        if self._rendered:
            raise RuntimeError("diagnostics were already rendered")
        self._items.append(Diagnostic(code=code, message=message, path=path, help=help))
        return CheckOutcome.FAILURE

    def __iter__(self) -> Iterator[Diagnostic]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def codes(self) -> list[str]:
        return [d.code for d in self._items]

    def render(self, console: ConsolePort) -> None:
        if self._rendered:
            raise RuntimeError("diagnostics were already rendered")
        self._rendered = True
        if not self._items:
            console.echo(SUCCESS_LINE)
            return
        console.echo(HEADER_LINE)
        for problem in self._items:
            console.labelled("error", problem.message)
            if problem.path is not None:
                console.labelled("path", str(problem.path))
            if problem.help is not None:
                console.labelled("help", problem.help)
