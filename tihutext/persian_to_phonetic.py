"""Pronunciation of Persian words the dictionary does not know."""

from __future__ import annotations

import os
from collections import Counter
from functools import reduce
from typing import Any

from .g2p import G2PProcess
from .helper import concat_pronunciations

DEFAULT_LOG_FILE = "./log/unknown_word_freqeuncy.txt"
_DELIMITER = "_"


class PersianToPhoneme:
    """Guesses pronunciations with a g2p model and counts the words it was asked."""

    def __init__(
        self, g2p: Any = None, log_file: str | os.PathLike[str] = DEFAULT_LOG_FILE
    ) -> None:
        self.g2p = g2p if g2p is not None else G2PProcess()
        self.log_file = os.fspath(log_file)
        self.word_frequency: Counter[str] = Counter()
        self._load_word_frequency()

    def _load_word_frequency(self) -> None:
        try:
            with open(self.log_file, encoding="utf-8") as handle:
                lines = handle.readlines()
        except OSError:
            return
        for line in lines:
            fields = [field for field in line.rstrip("\r\n").split("\t") if field]
            if len(fields) < 2:
                continue
            try:
                self.word_frequency[fields[0]] = int(fields[1])
            except ValueError:
                continue

    def load_model(self, model: str | os.PathLike[str]) -> None:
        self.g2p.load_model(model)

    def convert(self, word: str) -> str:
        """Pronounce ``word``, joining the parts separated by "_"."""
        self.word_frequency[word] += 1
        return reduce(
            lambda pron, part: concat_pronunciations(pron, self.g2p.convert(part)),
            word.split(_DELIMITER),
            "",
        )

    def save_word_frequency(self) -> None:
        """Write "word<TAB>count" lines, most frequent first; skip if unwritable."""
        ordered = sorted(
            sorted(self.word_frequency.items()), key=lambda item: item[1], reverse=True
        )
        try:
            with open(self.log_file, "w", encoding="utf-8") as handle:
                handle.writelines(f"{word}\t{count}\n" for word, count in ordered)
        except OSError:
            return