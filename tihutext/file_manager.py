"""Reading of data files: plain text, or hzip when only the ``.hz`` file exists."""

from __future__ import annotations

import errno
import os
from collections.abc import Iterable, Iterator

from .helper import chomp, split_pieces
from .hunzip import HZIP_EXTENSION, Hunzip

_BOM = "\ufeff"


def _raw_lines(path: str, key: str | bytes | None) -> Iterator[str]:
    try:
        handle = open(path, encoding="utf-8", errors="replace", newline="")
    except OSError:
        pass
    else:
        with handle:
            yield from handle
        return

    hz_path = path + HZIP_EXTENSION
    if not os.path.isfile(hz_path):
        raise FileNotFoundError(errno.ENOENT, "cannot open", path)
    yield from Hunzip(hz_path, key)


def _meaningful(lines: Iterable[str]) -> Iterator[str]:
    for number, line in enumerate(lines):
        if number == 0 and line.startswith(_BOM):
            line = line[len(_BOM):]
        line = chomp(line)
        if not line or line.startswith("#"):
            continue
        yield line


def read_lines(
    filename: str | os.PathLike[str], key: str | bytes | None = None
) -> Iterator[str]:
    """Yield the non-blank, non-comment lines of a data file.

    The plain file is read if it can be opened; otherwise ``filename + ".hz"``
    is decoded with the given key.  A leading byte-order mark is dropped.
    """
    yield from _meaningful(_raw_lines(os.fspath(filename), key))


def read_records(
    filename: str | os.PathLike[str], key: str | bytes | None = None
) -> Iterator[list[str]]:
    """Yield each meaningful line split on spaces and tabs."""
    for line in read_lines(filename, key):
        yield split_pieces(line)