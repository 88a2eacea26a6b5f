"""Flat ``key = value`` parameter store with includes and typed accessors.

Loads parameter files with recursive ``include`` resolution, answers typed
lookups, validates required parameters, and falls back to asking the user.
"""

from ._arguments import boolean_argument
from ._console import Console, ScriptedConsole, TerminalConsole
from ._parser import parameter_name, parse_line
from ._prompt import ParameterPrompter
from ._store import ParameterStore
from ._testing import temporary_parameters
from ._types import (
    UNDEFINED,
    ConfigError,
    ConfigFileNotFoundError,
    DuplicateConfigFileError,
    FatalConfigError,
    IncludeCycleError,
    MalformedValueError,
    NotLoadedError,
    PromptAttemptsExceededError,
    Secret,
    UndefinedParameterError,
    UnsupportedDatabaseError,
)

__all__ = [
    # Core
    "ParameterStore",
    "UNDEFINED",
    "parse_line",
    "parameter_name",
    # Errors
    "ConfigError",
    "NotLoadedError",
    "ConfigFileNotFoundError",
    "UndefinedParameterError",
    "MalformedValueError",
    "DuplicateConfigFileError",
    "IncludeCycleError",
    "PromptAttemptsExceededError",
    "UnsupportedDatabaseError",
    "FatalConfigError",
    # Interactive
    "ParameterPrompter",
    "Console",
    "TerminalConsole",
    "ScriptedConsole",
    # Helpers
    "Secret",
    "boolean_argument",
    # Testing
    "temporary_parameters",
]
