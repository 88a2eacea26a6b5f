"""Line source for parameter files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path


def read_lines(path: Path | str, encoding: str = "utf-8") -> Iterator[str]:
    """Yield the lines of *path* in order, without line terminators.

    The file stays open only while the generator is being consumed and is
    closed on every exit path, including errors raised by the consumer.
    """
    with open(path, encoding=encoding, newline=None) as handle:
        for line in handle:
            yield line.rstrip("\r\n")


def ends_with_newline(path: Path | str) -> bool:
    """Tell whether *path* is empty or its last byte ends a line."""
    with open(path, "rb") as handle:
        handle.seek(0, os.SEEK_END)
        if handle.tell() == 0:
            return True
        handle.seek(-1, os.SEEK_END)
        return handle.read(1) in (b"\n", b"\r")
