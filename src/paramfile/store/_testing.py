"""Test utilities for the parameter store."""

from __future__ import annotations

import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Mapping

from ._store import ParameterStore


def write_parameter_file(path: Path, parameters: Mapping[str, str] | str) -> Path:
    """Write *parameters* to *path* as ``key = value`` lines.

    A string is written verbatim, which allows comments and includes.
    """
    if isinstance(parameters, str):
        text = parameters
    else:
        text = "".join(f"{key} = {value}\n" for key, value in parameters.items())
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@contextmanager
def temporary_parameters(
    parameters: Mapping[str, str] | str,
    *,
    includes: Mapping[str, Mapping[str, str] | str] | None = None,
    local_root: str | None = None,
) -> Iterator[ParameterStore]:
    """Load *parameters* from a throwaway file.

    *includes* maps file names, relative to the main file, to their content
    so the main file can ``include`` them.

    Usage::

        with temporary_parameters({"port": "8000"}) as store:
            assert store.get_int("port") == 8000
    """
    with tempfile.TemporaryDirectory() as tmp:
        root = Path(tmp)
        for name, content in (includes or {}).items():
            write_parameter_file(root / name, content)
        main = write_parameter_file(root / "parameters.ini", parameters)
        yield ParameterStore(main, local_root=local_root)
