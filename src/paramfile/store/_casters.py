"""Cast helpers for parameter values.

Every stored value is a string; these callables derive the typed views the
store's accessors return.
"""

from __future__ import annotations

import re
from typing import Callable, TypeVar

from ._types import MalformedValueError

N = TypeVar("N", int, float)


# ---------------------------------------------------------------------------
# Bool caster
# ---------------------------------------------------------------------------

# Only these words mean "no"; any other string counts as "yes".
NEGATIVE_WORDS = frozenset({"inactive", "off", "false", "no", "none"})


def cast_bool(value: str) -> bool:
    """Return ``False`` for a negative word, ``True`` for anything else.

    >>> cast_bool("Off"), cast_bool("maybe")
    (False, True)
    """
    return value.lower() not in NEGATIVE_WORDS


# ---------------------------------------------------------------------------
# Numbers
# ---------------------------------------------------------------------------


def cast_number(key: str, value: str, parse: Callable[[str], N]) -> N:
    """Parse *value* with *parse*, reporting failures as ``MalformedValueError``."""
    try:
        return parse(value)
    except ValueError as exc:
        raise MalformedValueError(key, value, parse.__name__) from exc


# ---------------------------------------------------------------------------
# List
# ---------------------------------------------------------------------------

_LIST_SEPARATOR = re.compile(r"\s*,\s*")


def split_list(value: str) -> list[str]:
    """Split a comma-separated value, ignoring whitespace around the commas.

    Trailing empty elements are dropped, so ``"a, b,"`` gives two elements
    while ``""`` gives one empty element.

    >>> split_list("a, b ,c")
    ['a', 'b', 'c']
    """
    parts = _LIST_SEPARATOR.split(value)
    if len(parts) > 1:
        while parts and not parts[-1]:
            parts.pop()
    return parts


# ---------------------------------------------------------------------------
# Paths
# ---------------------------------------------------------------------------


def normalize_local_root(local_root: str | None) -> str | None:
    """Ensure a configured local root ends with a slash."""
    if local_root is None:
        return None
    local_root = str(local_root)
    return local_root if local_root.endswith("/") else local_root + "/"


def rewrite_path(value: str, local_root: str | None) -> str:
    """Rewrite a relative path value against *local_root*.

    ``./`` values lose their first three characters and ``../`` values are
    prefixed as they are. Other values, and every value when no local root
    is configured, pass through unchanged.

    >>> rewrite_path("./data/x", "/srv/")
    '/srv/ata/x'
    >>> rewrite_path("../x", "/srv/")
    '/srv/../x'
    """
    if local_root is None:
        return value
    if value.startswith("./"):
        return local_root + value[3:]
    if value.startswith("../"):
        return local_root + value
    return value
