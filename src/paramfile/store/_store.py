"""The parameter store: loading, lookup, typed accessors and validation.

A parameter file holds lines of the form::

    parameterName = value

Anything else (comments, section headers, blank lines) is ignored. Names are
case-insensitive, names and values are trimmed, and a value may be wrapped in
one pair of double quotes. The reserved name ``include`` loads another file
inline at that point, so later assignments overlay earlier ones::

    store = ParameterStore("my.ini")
    store.ensure_required(
        "firstPar - some help text for the first parameter",
        "secondPar - some help text for the second parameter",
    )
    first = store.get("firstPar")
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import Any, Callable, TypeVar

from ._casters import cast_bool, cast_number, normalize_local_root, rewrite_path, split_list
from ._lines import ends_with_newline, read_lines
from ._parser import parameter_name, parse_line
from ._types import (
    UNDEFINED,
    ConfigFileNotFoundError,
    DuplicateConfigFileError,
    FatalConfigError,
    IncludeCycleError,
    NotLoadedError,
    UndefinedParameterError,
    _Undefined,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ParameterStore:
    """Flat, case-insensitive map of parameter names to string values.

    Args:
        file: Parameter file to load right away. Without it the store stays
            unattached until :meth:`load` is called.
        local_root: Folder that path values starting with ``./`` or ``../``
            are rewritten against by :meth:`get_path`.
        encoding: Encoding used to read and append to parameter files.
    """

    def __init__(
        self,
        file: Path | str | None = None,
        local_root: str | None = None,
        *,
        encoding: str = "utf-8",
    ) -> None:
        self.root_file: Path | None = None
        self.local_root = normalize_local_root(local_root)
        self.encoding = encoding
        self._values: dict[str, str] | None = None
        self._loading: list[Path] = []
        if file is not None:
            self.load(file)

    def __repr__(self) -> str:
        count = "unloaded" if self._values is None else f"{len(self._values)} parameters"
        return f"<ParameterStore {self.root_file} ({count})>"

    # -- Loading ------------------------------------------------------------

    def load(self, file: Path | str, is_root: bool = True) -> None:
        """Load parameters from *file*.

        A root load starts over with an empty store and makes *file* the file
        named in error messages. A nested load (``is_root=False``) overlays
        the parameters already present; this is what ``include`` lines do.
        """
        path = Path(file)
        if not is_root:
            if self._values is None:
                raise NotLoadedError("load")
            self._load_file(path)
            return

        if not path.is_file():
            message = f"The parameter file {path.absolute()} was not found."
            logger.error(message)
            raise FatalConfigError(message) from ConfigFileNotFoundError(path)

        # A failed root load leaves the store as it was before the call.
        previous = self._values, self.root_file
        self._values, self.root_file, self._loading = {}, path, []
        try:
            self._load_file(path)
        except BaseException:
            self._values, self.root_file = previous
            raise

    def _load_file(self, path: Path) -> None:
        if not path.is_file():
            raise ConfigFileNotFoundError(path)

        resolved = path.resolve()
        if resolved in self._loading:
            raise IncludeCycleError([*self._loading, resolved])

        logger.debug("Loading parameters from %s", path)
        self._loading.append(resolved)
        try:
            for line in read_lines(path, self.encoding):
                assignment = parse_line(line)
                if assignment is None:
                    continue
                if assignment.is_include:
                    included = self._resolve_include(path, assignment.value)
                    logger.debug("%s includes %s", path, included)
                    self._load_file(included)
                else:
                    self._values[assignment.key.lower()] = assignment.value
        finally:
            self._loading.pop()

    def load_from_folders(self, filename: str, folders: Iterable[Path | str]) -> Path | None:
        """Load *filename* from the one folder among *folders* that holds it.

        Returns the loaded path, or ``None`` when no folder has the file, in
        which case nothing is loaded.
        """
        matches = [Path(folder) / filename for folder in folders]
        matches = [candidate for candidate in matches if candidate.exists()]
        if len(matches) > 1:
            raise DuplicateConfigFileError(filename, [match.parent for match in matches])
        if not matches:
            logger.debug("%s not found in any candidate folder", filename)
            return None
        self.load(matches[0])
        return matches[0]

    @staticmethod
    def _resolve_include(current: Path, name: str) -> Path:
        if name.startswith("/"):
            return Path(name)
        return current.parent / name

    def reset(self) -> None:
        """Forget all parameters and the root file."""
        self.root_file = None
        self._values = None

    # -- Raw access ---------------------------------------------------------

    def _loaded(self, operation: str = "get") -> dict[str, str]:
        if self._values is None:
            raise NotLoadedError(operation)
        return self._values

    def get(self, key: str, default: Any = UNDEFINED) -> Any:
        """Return the value of *key*.

        *key* may carry a description after the first space. Without a
        *default*, an undefined key raises ``UndefinedParameterError`` naming
        the root file.
        """
        value = self._loaded().get(parameter_name(key))
        if value is not None:
            return value
        if not isinstance(default, _Undefined):
            return default
        raise UndefinedParameterError(key, self.root_file)

    def is_defined(self, key: str) -> bool:
        return parameter_name(key) in self._loaded("is_defined")

    def __contains__(self, key: object) -> bool:
        return isinstance(key, str) and self.is_defined(key)

    def set(self, key: str, value: str) -> None:
        """Set *key* in memory, replacing any previous value."""
        self._loaded("set")[parameter_name(key)] = value

    def add(self, key: str, value: str) -> None:
        """Define *key* in memory and append it to the root file.

        Does nothing when *key* is already defined.
        """
        values = self._loaded("add")
        if self.root_file is None:
            raise NotLoadedError("add")
        name = key.partition(" ")[0]
        if name.lower() in values:
            return
        values[name.lower()] = value
        line = f"{name} = {value}\n"
        if not ends_with_newline(self.root_file):
            line = "\n" + line
        with open(self.root_file, "a", encoding=self.encoding) as handle:
            handle.write(line)
        logger.debug("Appended %s to %s", name, self.root_file)

    def remove(self, key: str) -> str | None:
        """Remove *key* from memory (not from the file) and return its value."""
        return self._loaded("remove").pop(parameter_name(key), None)

    def parameters(self) -> set[str]:
        """Return the names of all defined parameters."""
        return set(self._loaded("parameters"))

    def as_dict(self) -> dict[str, str]:
        return dict(self._loaded("as_dict"))

    # -- Typed access -------------------------------------------------------

    def _typed(self, key: str, default: Any, cast: Callable[[str], T]) -> T:
        if not isinstance(default, _Undefined) and not self.is_defined(key):
            return default
        return cast(self.get(key))

    def get_int(self, key: str, default: Any = UNDEFINED) -> int:
        return self._typed(key, default, lambda value: cast_number(key, value, int))

    def get_float(self, key: str, default: Any = UNDEFINED) -> float:
        return self._typed(key, default, lambda value: cast_number(key, value, float))

    def get_double(self, key: str, default: Any = UNDEFINED) -> float:
        # Python has a single floating point type; kept for call sites that
        # distinguish the two.
        return self.get_float(key, default)

    def get_boolean(self, key: str, default: Any = UNDEFINED) -> bool:
        """Return ``False`` for inactive/off/false/no/none, ``True`` otherwise."""
        return self._typed(key, default, cast_bool)

    def get_list(self, key: str, default: list[str] | None = None) -> list[str] | None:
        """Return the comma-separated elements of *key*.

        An undefined key gives *default*, which is ``None`` rather than an
        empty list unless the caller asks otherwise.
        """
        if not self.is_defined(key):
            return default
        return split_list(self.get(key))

    def get_path(self, key: str, default: Any = UNDEFINED) -> str:
        """Return a file or folder value, rewritten against ``local_root``."""
        return self._typed(key, default, lambda value: rewrite_path(value, self.local_root))

    def get_file(self, key: str, default: Any = UNDEFINED) -> Path:
        """Same as :meth:`get_path` but returns a ``Path``; existence is not checked."""
        if not isinstance(default, _Undefined) and not self.is_defined(key):
            return default
        return Path(self.get_path(key))

    # -- Validation ---------------------------------------------------------

    def missing(self, *specs: str) -> list[str]:
        """Return the specs whose parameter is not defined."""
        self._loaded("missing")
        return [spec for spec in specs if not self.is_defined(spec)]

    def ensure_required(self, *specs: str) -> None:
        """Abort unless every spec names a defined parameter.

        Each spec is ``"name explanation"``. All undefined ones are reported
        together in a single message, then ``FatalConfigError`` ends the
        process.
        """
        self._loaded("ensure_required")
        undefined = self.missing(*specs)
        if not undefined:
            return
        message = f"The following parameters are undefined in {self.root_file}" + "".join(
            f"\n       {spec}" for spec in undefined
        )
        logger.error(message)
        raise FatalConfigError(message)
