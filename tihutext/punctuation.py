"""Pronunciations of punctuation marks, loaded from a data file."""

from __future__ import annotations

import enum
import os
from dataclasses import dataclass

from .file_manager import read_records


class ReadStatus(enum.IntEnum):
    """Whether a punctuation mark is read aloud."""

    ALWAYS_READ = 0
    NEVER_READ = 1


@dataclass
class Punctuation:
    """A punctuation mark and how to say it."""

    text: str
    pronunciation: str
    read_status: ReadStatus = ReadStatus.ALWAYS_READ


class PunctuationTable:
    """Lookup of punctuation pronunciations by mark."""

    def __init__(self) -> None:
        self.punctuations: dict[str, Punctuation] = {}

    def __len__(self) -> int:
        return len(self.punctuations)

    def __contains__(self, text: object) -> bool:
        return text in self.punctuations

    def load(self, filename: str | os.PathLike[str]) -> None:
        """Read "mark status pronunciation" records; the first record of a mark wins.

        Raises FileNotFoundError when the file is missing and ValueError for a
        bad status.
        """
        for pieces in read_records(filename):
            text, status, pron = (pieces + ["", "", ""])[:3]
            try:
                read_status = ReadStatus(int(status))
            except ValueError as error:
                raise ValueError(f"bad read status {status!r} for {text!r}") from error
            self.punctuations.setdefault(text, Punctuation(text, pron, read_status))

    def convert(self, text: str) -> str:
        """The pronunciation of a mark, or "" when it is unknown."""
        punctuation = self.punctuations.get(text)
        return punctuation.pronunciation if punctuation else ""