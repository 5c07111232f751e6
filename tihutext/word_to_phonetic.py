"""Pipeline stage that fills in missing pronunciations of words."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from .corpus import Corpus
from .number_to_phonetic import number_to_phonetic
from .parser import Parser
from .persian_to_phonetic import PersianToPhoneme
from .punctuation import PunctuationTable

PERSIAN_MODEL = "g2p-seq2seq-tihudict"
PUNCTUATION_FILE = "punctuations.txt"
DUMP_FILE = "w2p.xml"


class WordToPhonetic(Parser):
    """Gives each word without a pronunciation one chosen by its token type."""

    def __init__(self, data_dir: str | os.PathLike[str] = "data", g2p: Any = None) -> None:
        super().__init__()
        self.data_dir = Path(data_dir)
        self.persian = PersianToPhoneme(g2p)
        self.punctuations = PunctuationTable()

    def load(self, param: str = "") -> None:
        """Start the Persian model and read the punctuation table."""
        self.persian.load_model(self.data_dir / PERSIAN_MODEL)
        self.punctuations.load(self.data_dir / PUNCTUATION_FILE)

    def _pronounce(self, word) -> str:
        if word.is_persian_word():
            word.auto_phonetics = True
            return self.persian.convert(word.text)
        if word.is_number():
            return number_to_phonetic(word.text)
        if word.is_punctuation():
            return self.punctuations.convert(word.text)
        # English words and other tokens get no pronunciation.
        return ""

    def parse(self, corpus: Corpus) -> None:
        for word in corpus:
            entry = word.best_entry()
            if not entry.pron:
                entry.pron = self._pronounce(word)
        corpus.dump(DUMP_FILE)