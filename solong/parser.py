"""Reading so_long level maps from ``.ber`` files."""

from __future__ import annotations

import os
from collections.abc import Iterator
from typing import TextIO

from solong.checker import map_is_valid

MAP_EXTENSION = ".ber"


class MapError(Exception):
    """Raised when a map file cannot be read or does not hold a valid level."""


def read_lines(stream: TextIO) -> Iterator[str]:
    """Yield the lines of a stream without their line breaks."""
    for line in stream:
        yield line[:-1] if line.endswith("\n") else line


def parse_map(filename: str | os.PathLike[str]) -> list[str]:
    """Read and validate a map file, returning its rows."""
    name = os.fspath(filename)
    if len(name) - len(MAP_EXTENSION) < 1 or not name.endswith(MAP_EXTENSION):
        raise MapError("File format error")
    try:
        with open(name, encoding="utf-8", errors="replace", newline="") as stream:
            grid = list(read_lines(stream))
    except OSError as exc:
        raise MapError("File open error") from exc
    if not grid or not map_is_valid(grid):
        raise MapError("Map Error")
    return grid