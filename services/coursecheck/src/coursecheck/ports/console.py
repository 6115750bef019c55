from typing import Protocol


class ConsolePort(Protocol):
    def echo(self, text: str) -> None: ...
    def labelled(self, label: str, text: str) -> None: ...
    def verdict(self, ok: bool) -> None: ...
