"""On/off switches on the command line."""

from __future__ import annotations

import re
from collections.abc import Sequence

_OFF_WORDS = frozenset({"off", "0", "false"})


def boolean_argument(args: Sequence[str], *names: str) -> bool:
    """Tell whether one of *names* is switched on in *args*.

    A name that does not occur is off. An occurring name is on unless the
    next word is ``off``, ``0`` or ``false``, or the previous word is ``no``.

    >>> boolean_argument(["-v"], "-v", "--verbose")
    True
    >>> boolean_argument(["no", "cache"], "cache")
    False
    >>> boolean_argument(["cache", "off"], "cache")
    False
    """
    if not names:
        return False
    line = " " + "".join(arg + " " for arg in args)
    pattern = re.compile(r"\W(" + "|".join(re.escape(name) for name in names) + r")\W")
    match = pattern.search(line)
    if match is None:
        return False

    following = line[match.end():].lower().split(" ", 1)[0]
    if following in _OFF_WORDS:
        return False

    preceding = line[: match.start()].lower().rsplit(" ", 1)[-1]
    return preceding != "no"
