import pytest

from tihutext.entry import Entry
from tihutext.event import Event
from tihutext.helper import EventType, TokenType
from tihutext.word import Word


def test_parse_pron_skips_caret():
    word = Word(text="salam")
    word.parse_pron("sal^Am")
    assert [p.mbr_name() for p in word.phonemes] == ["s", "a", "l", "a:", "m"]


def test_parse_pron_uses_best_entry_when_empty():
    word = Word()
    word.add_entry(Entry(pron="ketAb"))
    word.add_entry(Entry(pron="dar"))
    word.parse_pron()
    assert [p.mbr_name() for p in word.phonemes] == ["c", "e", "t", "a:", "b"]


def test_parse_pron_uses_neighbour_across_caret():
    word = Word()
    word.parse_pron("ak^A")
    assert [p.mbr_name() for p in word.phonemes] == ["a", "c", "a:"]


def test_parse_pron_without_entries_adds_nothing():
    word = Word()
    word.parse_pron()
    assert word.phonemes == []


def test_parse_pron_rejects_unknown_symbol():
    word = Word()
    with pytest.raises(ValueError):
        word.parse_pron("a#")


def test_best_entry_is_first_entry():
    word = Word()
    first = Entry(pos="N")
    word.add_entry(first)
    word.add_entry(Entry(pos="V"))
    assert word.best_entry() is first


def test_best_entry_when_empty_is_blank_and_not_added():
    word = Word()
    entry = word.best_entry()
    assert entry == Entry()
    assert word.is_empty()
    assert word.entries == []


def test_is_empty_tracks_entries():
    word = Word()
    assert word.is_empty() is True
    word.add_entry(Entry())
    assert word.is_empty() is False


@pytest.mark.parametrize(
    "token_type, persian, english, punctuation, number",
    [
        (TokenType.PERSIAN, True, False, False, False),
        (TokenType.ENGLISH, False, True, False, False),
        (TokenType.PUNCTUATION, False, False, True, False),
        (TokenType.NUMBER, False, False, False, True),
        (TokenType.UNKNOWN, False, False, False, False),
    ],
)
def test_type_predicates(token_type, persian, english, punctuation, number):
    word = Word(type=token_type)
    assert word.is_persian_word() is persian
    assert word.is_english_word() is english
    assert word.is_punctuation() is punctuation
    assert word.is_number() is number


def test_add_event_keeps_order():
    word = Word()
    word.add_event(Event(EventType.BOOKMARK, "one"))
    word.add_event(Event(EventType.SILENCE, "two"))
    assert [e.value for e in word.events] == ["one", "two"]


def test_text_without_diacritics_returns_text():
    assert Word(text="abc").text_without_diacritics() == "abc"


def test_defaults():
    word = Word()
    assert word.type is TokenType.UNKNOWN
    assert (word.end_of_sentence, word.end_of_paragraph, word.auto_phonetics) == (False, False, False)