"""A dictionary entry: stem, lemma, pronunciation and part-of-speech tag."""

from __future__ import annotations

from dataclasses import dataclass

from .helper import concat_pronunciations


@dataclass
class Entry:
    """One reading of a word."""

    stem: str = ""
    lemma: str = ""
    pron: str = ""
    pos: str = ""

    def is_verb(self) -> bool:
        return self.pos.startswith("V")

    def is_noun(self) -> bool:
        return self.pos.startswith("N")

    def is_noun_common(self) -> bool:
        self._require_noun()
        return False

    def is_noun_proper(self) -> bool:
        self._require_noun()
        return False

    def is_pronoun(self) -> bool:
        return self.pos.startswith("P")

    def is_adjective(self) -> bool:
        return self.pos.startswith("AJ")

    def is_determiner(self) -> bool:
        return self.pos.startswith("DET")

    def is_adverb(self) -> bool:
        return self.pos.startswith("ADV")

    def is_adposition(self) -> bool:
        return self.pos.startswith("POS")

    def is_conjunction(self) -> bool:
        return False

    def is_numeral(self) -> bool:
        return self.pos.startswith("NUM")

    def is_interjection(self) -> bool:
        return False

    def set_genitive(self, is_genitive: bool) -> None:
        """Mark the tag as genitive (Ezafe) by appending "e"."""
        if is_genitive:
            self.pos += "e"

    def has_genitive(self) -> bool:
        return self.pos.endswith("e")

    def add_genitive(self) -> None:
        """Append the genitive vowel to the pronunciation."""
        self.pron = concat_pronunciations(self.pron, "e")

    def _require_noun(self) -> None:
        if not self.is_noun():
            raise ValueError(f"entry tagged {self.pos!r} is not a noun")