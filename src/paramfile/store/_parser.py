"""Line parser for ``key = value`` parameter files.

Anything that does not match the assignment pattern (comments, section
headers, blank lines) is ignored by the loader.
"""

from __future__ import annotations

import re
from typing import NamedTuple

ASSIGNMENT_PATTERN = re.compile(r" *(\w+) *= *(.*) *", re.ASCII)

INCLUDE_KEY = "include"

_QUOTE = '"'


class Assignment(NamedTuple):
    key: str
    value: str

    @property
    def is_include(self) -> bool:
        return self.key.lower() == INCLUDE_KEY


def parse_line(line: str) -> Assignment | None:
    """Return the assignment on *line*, or ``None`` when the line is not one.

    >>> parse_line('  name = "Alice"  ')
    Assignment(key='name', value='Alice')
    >>> parse_line("[section]") is None
    True
    """
    match = ASSIGNMENT_PATTERN.fullmatch(line)
    if match is None:
        return None
    return Assignment(match.group(1), unquote(match.group(2).strip()))


def unquote(value: str) -> str:
    """Strip one pair of surrounding double quotes, if both are present."""
    if len(value) >= 2 and value.startswith(_QUOTE) and value.endswith(_QUOTE):
        return value[1:-1]
    return value


def parameter_name(spec: str) -> str:
    """Return the lookup key of *spec*, case-folded.

    A spec may carry a description after the first space
    (``"databaseUser the user name"``); only the leading word is the key.
    """
    name, _, _ = spec.partition(" ")
    return name.lower()
