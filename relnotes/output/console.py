"""Console output abstraction.

Progress and warnings go through ``ConsoleProtocol`` so commands can be
tested with ``MockConsole``. ``RichConsole`` writes to stderr, leaving stdout
for the Markdown a command produces.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "ConsoleProtocol",
    "MockConsole",
    "OutputRecord",
    "RichConsole",
    "Style",
]


class Style(Enum):
    """Kinds of console output."""

    WARNING = auto()
    INFO = auto()


class ConsoleProtocol(Protocol):
    """Styled status output for commands."""

    def warning(self, message: str) -> None: ...

    def info(self, message: str) -> None: ...


class RichConsole:
    """Production console backed by Rich, writing to stderr.

    Messages are escaped before printing: they carry git's error text and
    ref names, which must not be read as Rich markup.
    """

    def __init__(self) -> None:
        # Import Rich lazily to keep `import relnotes` cheap
        from rich.console import Console

        self._console = Console(stderr=True, highlight=False)

    def _print(self, prefix: str, message: str) -> None:
        from rich.markup import escape

        self._console.print(f"{prefix} {escape(message)}")

    def warning(self, message: str) -> None:
        self._print("[yellow]warning:[/yellow]", message)

    def info(self, message: str) -> None:
        self._print("[cyan]info:[/cyan]", message)


@dataclass(frozen=True, slots=True)
class OutputRecord:
    message: str
    style: Style


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console that records output instead of printing it."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def warning(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"warning: {message}", Style.WARNING))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"info: {message}", Style.INFO))

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    def has_warning(self) -> bool:
        return any(o.style == Style.WARNING for o in self.outputs)
