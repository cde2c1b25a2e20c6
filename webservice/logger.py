"""Error logger collaborators injected into web services."""

from __future__ import annotations

from typing import Protocol

from rich.console import Console


class ErrorLogger(Protocol):
    def log_error_message(self, message: str) -> None: ...


class ConsoleLogger:
    """Write ``ERROR <message>`` lines to stderr."""

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or Console(stderr=True)

    def log_error_message(self, message: str) -> None:
        self.console.print(f"ERROR {message}", style="red", markup=False, highlight=False)


class NullLogger:
    def log_error_message(self, message: str) -> None:
        pass
