import pytest

from tihutext.number_to_phonetic import (
    DAHGAN_DIGITS,
    SADGAN_DIGITS,
    SEG_SUFFIX,
    YEKAN_DIGITS,
    number_to_phonetic,
)


@pytest.mark.parametrize("value", range(1, 20))
def test_below_twenty_uses_own_names(value):
    assert number_to_phonetic(str(value)) == YEKAN_DIGITS[value - 1]


@pytest.mark.parametrize("tens", range(2, 10))
def test_round_tens(tens):
    assert number_to_phonetic(str(tens * 10)) == DAHGAN_DIGITS[tens - 1]


@pytest.mark.parametrize("hundreds", range(1, 10))
def test_round_hundreds(hundreds):
    assert number_to_phonetic(str(hundreds * 100)) == SADGAN_DIGITS[hundreds - 1]


def test_compound_values():
    assert number_to_phonetic("25") == "bistopanj"
    assert number_to_phonetic("112") == "sadodavAzdah"
    assert number_to_phonetic("31") == "sivoyek"


@pytest.mark.parametrize("digits", ["7", "42", "318"])
def test_signs_prefix_the_number(digits):
    plain = number_to_phonetic(digits)
    assert number_to_phonetic("-" + digits) == "manfiye" + plain
    assert number_to_phonetic("+" + digits) == "mosbate" + plain


def test_leading_zeros_are_spoken():
    assert number_to_phonetic("007") == "sefr_sefr_" + number_to_phonetic("7")
    assert number_to_phonetic("0") == "sefr_"


def test_thousands_suffix():
    assert number_to_phonetic("1000") == YEKAN_DIGITS[0] + SEG_SUFFIX[0]
    assert number_to_phonetic("5000000") == YEKAN_DIGITS[4] + SEG_SUFFIX[1]


def test_segments_are_joined_without_appender():
    assert number_to_phonetic("2003") == (
        number_to_phonetic("2") + SEG_SUFFIX[0] + number_to_phonetic("3")
    )


def test_empty_zero_blocks_drop_their_suffix():
    assert number_to_phonetic("1000005") == (
        number_to_phonetic("1") + SEG_SUFFIX[1] + number_to_phonetic("5")
    )


def test_empty_text():
    assert number_to_phonetic("") == ""


@pytest.mark.parametrize("text", ["abc", "12a4"])
def test_not_a_number(text):
    with pytest.raises(ValueError):
        number_to_phonetic(text)