"""Phoneme symbols, their MBROLA and IPA names, and per-phoneme synthesis data."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field

from .helper import is_vowel_phoneme

DEFAULT_PITCH = 200

# Velar stops are softened to palatal ones unless a back vowel follows.
_BACK_VOWELS = frozenset("Aou")


class ConsonantType(enum.Enum):
    """Manner of articulation of a phoneme."""

    NOT_SET = enum.auto()
    VOWEL = enum.auto()
    STOP = enum.auto()
    FRICATIVE = enum.auto()
    AFFRICATIVE = enum.auto()
    NASAL = enum.auto()
    LIQUID = enum.auto()
    APPROXIMANT = enum.auto()


@dataclass(frozen=True)
class PhonemeInfo:
    """One row of the phoneme table."""

    symbol: str
    mbr_name: str
    ipa_name: str
    duration: int
    consonant: ConsonantType


PHONEME_TABLE: tuple[PhonemeInfo, ...] = (
    PhonemeInfo("!", "_", "_", 100, ConsonantType.NOT_SET),  # unknown, error
    PhonemeInfo("_", "_", "_", 100, ConsonantType.NOT_SET),
    PhonemeInfo("h", "h", "h", 83, ConsonantType.FRICATIVE),
    PhonemeInfo("C", "c:", "tS", 120, ConsonantType.AFFRICATIVE),
    PhonemeInfo("?", "?", "?", 50, ConsonantType.STOP),
    PhonemeInfo("p", "p", "p", 112, ConsonantType.STOP),
    PhonemeInfo("t", "t", "t", 81, ConsonantType.STOP),
    PhonemeInfo("c", "c", "k", 100, ConsonantType.STOP),
    PhonemeInfo("k", "k", "k", 100, ConsonantType.STOP),
    PhonemeInfo("s", "s", "s", 123, ConsonantType.FRICATIVE),
    PhonemeInfo("S", "s:", "S", 111, ConsonantType.FRICATIVE),
    PhonemeInfo("x", "x", "x", 109, ConsonantType.FRICATIVE),
    PhonemeInfo("f", "f", "f", 99, ConsonantType.FRICATIVE),
    PhonemeInfo("b", "b", "b", 70, ConsonantType.STOP),
    PhonemeInfo("d", "d", "d", 66, ConsonantType.STOP),
    PhonemeInfo("g", "g:", "g", 78, ConsonantType.STOP),
    PhonemeInfo("G", "g", "g", 78, ConsonantType.STOP),
    PhonemeInfo("q", "q", "q", 87, ConsonantType.STOP),
    PhonemeInfo("z", "z", "z", 86, ConsonantType.FRICATIVE),
    PhonemeInfo("Z", "z:", "Z", 96, ConsonantType.FRICATIVE),
    PhonemeInfo("v", "v", "v", 52, ConsonantType.FRICATIVE),
    PhonemeInfo("j", "j:", "dZ", 92, ConsonantType.AFFRICATIVE),
    PhonemeInfo("r", "r", "R", 38, ConsonantType.APPROXIMANT),
    PhonemeInfo("m", "m", "m", 73, ConsonantType.NASAL),
    PhonemeInfo("n", "n", "n", 61, ConsonantType.NASAL),
    PhonemeInfo("l", "l", "l", 58, ConsonantType.APPROXIMANT),
    PhonemeInfo("y", "y", "j", 71, ConsonantType.APPROXIMANT),
    PhonemeInfo("i", "i", "i", 101, ConsonantType.VOWEL),
    PhonemeInfo("u", "u", "u", 112, ConsonantType.VOWEL),
    PhonemeInfo("A", "a:", "A:", 138, ConsonantType.VOWEL),
    PhonemeInfo("e", "e", "e", 69, ConsonantType.VOWEL),
    PhonemeInfo("o", "o", "u", 83, ConsonantType.VOWEL),
    PhonemeInfo("a", "a", "a", 90, ConsonantType.VOWEL),
)

# Index 0 is the "unknown" row; symbols not in the table map to it.
_INDEX_BY_SYMBOL = {info.symbol: index for index, info in enumerate(PHONEME_TABLE)}


@dataclass
class PitchRange:
    """Pitch at the start (1%) and the end (100%) of a phoneme."""

    first: int = 0
    last: int = 0


@dataclass
class Phoneme:
    """A phoneme of a word, ready to be handed to a synthesizer."""

    index: int = 0
    pitch_range: PitchRange = field(default_factory=PitchRange)
    duration: int = 0
    prev_voweled: bool = False

    @property
    def info(self) -> PhonemeInfo:
        return PHONEME_TABLE[self.index]

    def set_phonetic(self, prev_phoneme: str, phoneme: str, next_phoneme: str) -> None:
        """Choose the table row for ``phoneme`` given its neighbours.

        An empty string stands for "no neighbour".  Raises ValueError for a
        symbol that has no row of its own in the table.
        """
        if phoneme == "g" and next_phoneme in _BACK_VOWELS and next_phoneme:
            phoneme = "G"
        elif phoneme == "k" and not (next_phoneme and next_phoneme in _BACK_VOWELS):
            phoneme = "c"

        if is_vowel_phoneme(phoneme) and (not prev_phoneme or is_vowel_phoneme(prev_phoneme)):
            self.prev_voweled = True

        index = _INDEX_BY_SYMBOL.get(phoneme, 0)
        if index == 0:
            raise ValueError(f"unknown phoneme {phoneme!r}")
        self.index = index

    def mbr_name(self) -> str:
        return self.info.mbr_name

    def ipa_name(self) -> str:
        return self.info.ipa_name

    def mbrola_string(self) -> str:
        """The MBROLA line for this phoneme, preceded by a glottal stop if needed."""
        glottal = "? 50 \n" if self.prev_voweled else ""
        return f"{glottal}{self.info.mbr_name} {self.info.duration} \n"