"""Interactive fallback for parameters missing from the store.

When a parameter is undefined, the prompter prints its description to the
console and reads the answer. The typed variants keep asking until the answer
is acceptable; ``max_attempts`` bounds that loop for non-interactive use.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, TypeVar

from ._console import Console, TerminalConsole
from ._parser import parameter_name
from ._store import ParameterStore
from ._types import PromptAttemptsExceededError

logger = logging.getLogger(__name__)

T = TypeVar("T")

_YES = frozenset({"true", "yes"})
_NO = frozenset({"false", "no"})


class ParameterPrompter:
    """Asks the user for parameters the store does not define.

    Args:
        store: The loaded store to read from and add answers to.
        console: Where to print prompts and read answers. Defaults to the
            terminal.
        max_attempts: How many answers a typed prompt accepts before giving
            up with ``PromptAttemptsExceededError``. ``None`` asks forever.
    """

    def __init__(
        self,
        store: ParameterStore,
        console: Console | None = None,
        max_attempts: int | None = None,
    ) -> None:
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self.store = store
        self.console = console if console is not None else TerminalConsole()
        self.max_attempts = max_attempts

    def get_or_request(self, key: str, description: str) -> str:
        """Return the value of *key*, asking for it when undefined.

        The answer is not stored.
        """
        value = self.store.get(key, None)
        if value is None:
            self.console.print(description)
            value = self.console.read_line()
        return value

    def get_or_request_and_add(self, key: str, description: str) -> str:
        """Like :meth:`get_or_request`, and add the answer to the parameter file."""
        value = self.get_or_request(key, description)
        self.store.add(key, value)
        return value

    def get_or_request_boolean(self, key: str, description: str) -> bool:
        """Ask until the value is one of true/yes/false/no."""

        def parse(answer: str) -> bool:
            answer = answer.lower()
            if answer in _YES:
                return True
            if answer in _NO:
                return False
            raise ValueError(answer)

        return self._request_until_valid(key, description, parse)

    def get_or_request_and_add_boolean(self, key: str, description: str) -> bool:
        value = self.get_or_request_boolean(key, description)
        self.store.add(key, "yes" if value else "no")
        return value

    def get_or_request_integer(self, key: str, description: str) -> int:
        return self._request_until_valid(key, description, int)

    def get_or_request_file(self, key: str, description: str) -> Path:
        """Ask until the value names an existing file or folder."""

        def parse(answer: str) -> Path:
            path = Path(answer)
            if not path.exists():
                self.console.print(f"File not found {answer}")
                raise ValueError(answer)
            return path

        return self._request_until_valid(key, description, parse)

    def _request_until_valid(
        self,
        key: str,
        description: str,
        parse: Callable[[str], T],
    ) -> T:
        attempts = 0
        while True:
            answer = self.get_or_request(key, description)
            attempts += 1
            try:
                return parse(answer)
            except ValueError:
                logger.debug("Rejected value %r for %s", answer, parameter_name(key))
            # The rejected value may have come from the store; drop it so the
            # next round asks the user.
            self.store.remove(key)
            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise PromptAttemptsExceededError(parameter_name(key), attempts)
