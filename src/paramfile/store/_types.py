"""Foundation types for the parameter store.

Provides the missing-value sentinel, exception classes, and the Secret wrapper type.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import GetCoreSchemaHandler
from pydantic_core import CoreSchema, core_schema


# ---------------------------------------------------------------------------
# Sentinel
# ---------------------------------------------------------------------------


class _Undefined:
    """Sentinel for "no default given" (distinct from ``None``)."""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __bool__(self) -> bool:
        return False


UNDEFINED = _Undefined()


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------


class ConfigError(Exception):
    """Base exception for parameter-store errors."""


class NotLoadedError(ConfigError, RuntimeError):
    """Raised when the store is used before a parameter file was loaded."""

    def __init__(self, operation: str = "get") -> None:
        self.operation = operation
        super().__init__(f"Call load() before {operation}()!")


class ConfigFileNotFoundError(ConfigError, FileNotFoundError):
    """Raised when a parameter file or an included file does not exist."""

    def __init__(self, path: Path | str) -> None:
        self.path = Path(path)
        super().__init__(f"The parameter file {self.path} was not found.")

    def __str__(self) -> str:
        return self.args[0]


class UndefinedParameterError(ConfigError):
    """Raised when a parameter is looked up without default and is not set.

    ``root_file`` is always the file the store was opened with, even when the
    parameter was expected to come from an included file.
    """

    def __init__(self, key: str, root_file: Path | None) -> None:
        self.key = key
        self.root_file = root_file
        super().__init__(f"The parameter {key} is undefined in {root_file}")


class MalformedValueError(ConfigError, ValueError):
    """Raised when a typed accessor cannot parse the stored string."""

    def __init__(self, key: str, value: str, type_name: str) -> None:
        self.key = key
        self.value = value
        self.type_name = type_name
        super().__init__(f"The parameter {key} = {value!r} is not a valid {type_name}")


class DuplicateConfigFileError(ConfigError):
    """Raised when a parameter file name occurs in more than one candidate folder."""

    def __init__(self, filename: str, folders: list[Path]) -> None:
        self.filename = filename
        self.folders = folders
        joined = ", ".join(str(folder) for folder in folders)
        super().__init__(f"Parameter file {filename} occurs more than once in {joined}")


class IncludeCycleError(ConfigError):
    """Raised when a parameter file includes itself, directly or transitively."""

    def __init__(self, chain: list[Path]) -> None:
        self.chain = chain
        super().__init__("Include cycle: " + " -> ".join(str(path) for path in chain))


class PromptAttemptsExceededError(ConfigError):
    """Raised when an interactive prompt got no acceptable answer in time."""

    def __init__(self, key: str, attempts: int) -> None:
        self.key = key
        self.attempts = attempts
        super().__init__(f"No valid value for {key} after {attempts} attempts")


class UnsupportedDatabaseError(ConfigError):
    """Raised when ``databaseSystem`` names a system without a connector."""

    def __init__(self, system: str) -> None:
        self.system = system
        super().__init__(f"Unsupported database system {system}")


class FatalConfigError(SystemExit):
    """Ends the process with an announced message.

    Used where the caller is a command-line entry point with no sensible
    continuation: a missing root file and undefined required parameters.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


# ---------------------------------------------------------------------------
# Secret
# ---------------------------------------------------------------------------


class Secret:
    """A string parameter, such as a password, kept out of ``repr`` / ``str``.

    The stored text is available as ``.secret_value``. Used as a pydantic
    field type, it accepts plain strings and serializes as ``'***'``.
    """

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        self._value = value

    @property
    def secret_value(self) -> str:
        return self._value

    def __repr__(self) -> str:
        return "Secret('***')"

    def __str__(self) -> str:
        return "***"

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Secret):
            return self._value == other._value
        return NotImplemented

    @classmethod
    def __get_pydantic_core_schema__(
        cls,
        source_type: Any,
        handler: GetCoreSchemaHandler,
    ) -> CoreSchema:
        return core_schema.no_info_after_validator_function(
            cls,
            core_schema.str_schema(),
            serialization=core_schema.plain_serializer_function_ser_schema(lambda value: "***"),
        )
