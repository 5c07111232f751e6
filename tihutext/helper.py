"""Shared text helpers: token and event kinds, Persian letters, pronunciation joins."""

from __future__ import annotations

import enum
import re

ZWNJ = "\u200c"
TANVIN_NASB = "\u064c"
TANVIN_ZAM = "\u064c"
TANVIN_JAR = "\u064d"
FATHE = "\u064e"
ZAME = "\u064f"
KASRE = "\u0650"
TASHDID = "\u0651"
SUKUN = "\u0652"
YE = "\u06cc"
ALEF = "\u0627"
HE = "\u0647"
WAW = "\u0648"
KAF = "\u06a9"
GAF = "\u06af"
HAMZE = "\u0654"
LAM = "\u0644"
DAL = "\u062f"
ZAL = "\u0630"
RE = "\u0631"
ZE = "\u0632"
ZHE = "\u0698"
MIM = "\u0645"
NON = "\u0646"

MI = MIM + YE
NEMI = NON + MIM + YE

VOWEL_PHONEMES = frozenset("aeouiA")

# Letters that never join the letter after them.
DETACHED_LETTERS = (ALEF, DAL, ZAL, RE, ZE, WAW, ZHE)

_PIECE_SEPARATOR = re.compile(r"[ \t]+")


class TokenType(enum.Enum):
    """Kind of a token found in the input text."""

    LINE_BREAK = "n"
    ENGLISH = "@"
    PERSIAN = "!"
    NUMBER = "#"
    PUNCTUATION = "$"
    DELIMITER = "-"
    UNKNOWN = "?"


class EventType(enum.IntEnum):
    """Kind of an event attached to a word."""

    UNKNOWN = 0
    BOOKMARK = 1
    SPEED_RATIO = 2
    PITCH_RATIO = 3
    VOLUME_RATIO = 4
    SILENCE = 5
    SPELL_OUT = 6


def split_pieces(line: str) -> list[str]:
    """Split a line into pieces separated by spaces and tabs only."""
    return [piece for piece in _PIECE_SEPARATOR.split(line) if piece]


def chomp(line: str) -> str:
    """Drop a trailing line ending ("\\n", "\\r" or "\\r\\n")."""
    size = len(line)
    new_size = size
    if size > 0 and line[-1] in "\r\n":
        new_size -= 1
    if size > 1 and line[-2] == "\r":
        new_size -= 1
    return line[:new_size]


def is_vowel_phoneme(phoneme: str) -> bool:
    """Whether a single phoneme symbol is a vowel."""
    return len(phoneme) == 1 and phoneme in VOWEL_PHONEMES


def ends_with_vowel(pronunciation: str) -> bool:
    """Whether a pronunciation ends with a vowel phoneme."""
    return is_vowel_phoneme(pronunciation[-1:])


def starts_with_vowel(pronunciation: str) -> bool:
    """Whether a pronunciation starts with a vowel phoneme."""
    return is_vowel_phoneme(pronunciation[:1])


def concat_pronunciations(first: str, second: str) -> str:
    """Join two pronunciations, smoothing the meeting of two vowels."""
    if starts_with_vowel(second) and ends_with_vowel(first):
        last = first[-1]
        head = second[0]
        if last == "u" and head == "a":
            # tanbAku + aS -> tanbAkuS
            return first + second[1:]
        if head in "owu":
            return first + "v" + second
    return first + second


def ends_with_detached(value: str) -> bool:
    """Whether the text ends with a letter that does not join the next one."""
    return value.endswith(DETACHED_LETTERS)


def remove_first(value: str) -> str:
    """Return the text without its first character."""
    if not value:
        raise ValueError("cannot remove a character from an empty string")
    return value[1:]


def remove_last(value: str) -> str:
    """Return the text without its last character."""
    if not value:
        raise ValueError("cannot remove a character from an empty string")
    return value[:-1]