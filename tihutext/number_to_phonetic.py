"""Pronunciation of numbers written with digits, read out in Persian."""

from __future__ import annotations

from .helper import concat_pronunciations

SEG_APPENDER = "o"

SEG_SUFFIX = (
    "hezAr",
    "melyon",
    "melyArd",
    "bilyon",
    "bilyArd",
    "trilyun",
    "trilyArd",
)

YEKAN_DIGITS = (
    "yek", "do", "se", "CAhAr", "panj", "SeS", "haft", "haSt", "noh", "dah",
    "yAzdah", "davAzdah", "sizdah", "CAhArdah", "pAnzdah", "SAnzdah",
    "hefdah", "heJdah", "nuzdah",
)

DAHGAN_DIGITS = (
    "_", "bist", "si", "Cehel", "panjAh", "Sast", "haftAd", "haStAd", "navad",
)

SADGAN_DIGITS = (
    "sad", "devist", "sisad", "CAhArsad", "pAnsad", "SeSsad", "haftsad",
    "haStsad", "nohsad",
)

_DIGIT_TABLES = (YEKAN_DIGITS, DAHGAN_DIGITS, SADGAN_DIGITS)


def _block_pronunciation(number: int, length: int) -> str:
    """Pronounce a block of at most three digits."""
    if not 0 <= number <= 999 or length > 3:
        raise ValueError(f"block {number} does not fit in three digits")
    if number == 0:
        return ""
    if number < 20:
        return YEKAN_DIGITS[number - 1]

    pronunciation = ""
    remainder = number
    place = length - 1
    while place >= 0:
        power = 10 ** place
        digit, remainder = divmod(remainder, power)
        if digit:
            if place == 1 and digit == 1:
                # ten to nineteen have names of their own
                index = 10 + remainder - 1
                place -= 1
            else:
                index = digit - 1
            if pronunciation:
                pronunciation = concat_pronunciations(pronunciation, SEG_APPENDER)
            pronunciation += _DIGIT_TABLES[place][index]
        place -= 1
    return pronunciation


def number_to_phonetic(text: str) -> str:
    """Pronounce a number given as digits, with an optional sign.

    Each leading zero is read as "sefr_".  Raises ValueError when a block of
    the number is not made of digits.
    """
    prefix = ""
    number = text
    if number.startswith("-"):
        prefix += "manfiye"
        number = number[1:]
    elif number.startswith("+"):
        prefix += "mosbate"
        number = number[1:]

    stripped = number.lstrip("0")
    prefix += "sefr_" * (len(number) - len(stripped))
    number = stripped

    length = len(number)
    segments = -(-length // 3)
    pronunciation = ""
    for segment in range(segments - 1, -1, -1):
        end = length - segment * 3
        start = max(0, end - 3)
        block_text = number[start:end]
        if not block_text.isdigit():
            raise ValueError(f"{text!r} is not a number")
        block = _block_pronunciation(int(block_text), len(block_text))
        pronunciation += block
        if segment > 0 and block:
            pronunciation += SEG_SUFFIX[(segment - 1) % len(SEG_SUFFIX)]

    return prefix + pronunciation