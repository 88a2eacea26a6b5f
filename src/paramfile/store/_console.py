"""Console protocol used by interactive prompts, plus implementations."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

import click


@runtime_checkable
class Console(Protocol):
    """Where prompts are printed and answers are read from."""

    def print(self, message: str) -> None:
        ...

    def read_line(self) -> str:
        """Return one line of input; raise ``EOFError`` when input is closed."""
        ...


class TerminalConsole:
    """Prompts on stdout and reads answers from stdin."""

    def print(self, message: str) -> None:
        click.echo(message)

    def read_line(self) -> str:
        line = click.get_text_stream("stdin").readline()
        if not line:
            raise EOFError("Input stream closed while waiting for an answer")
        return line.rstrip("\r\n")


class ScriptedConsole:
    """Console that answers from a fixed list, for tests.

    >>> console = ScriptedConsole(["yes"])
    >>> console.read_line()
    'yes'
    """

    def __init__(self, answers: list[str] | None = None) -> None:
        self._answers: list[str] = list(answers or [])
        self.printed: list[str] = []

    # -- Protocol methods ---------------------------------------------------

    def print(self, message: str) -> None:
        self.printed.append(message)

    def read_line(self) -> str:
        if not self._answers:
            raise EOFError("No scripted answers left")
        return self._answers.pop(0)

    # -- Helpers for test setup ---------------------------------------------

    def answer(self, *answers: str) -> None:
        self._answers.extend(answers)

    @property
    def remaining(self) -> int:
        return len(self._answers)
