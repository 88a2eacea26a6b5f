from ._version import __version__
from .store import (
    ConfigError,
    FatalConfigError,
    ParameterPrompter,
    ParameterStore,
    UndefinedParameterError,
)

__all__ = [
    "__version__",
    "ParameterStore",
    "ParameterPrompter",
    "ConfigError",
    "UndefinedParameterError",
    "FatalConfigError",
]
