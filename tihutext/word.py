"""A word of the input text with its readings, phonemes and events."""

from __future__ import annotations

from dataclasses import dataclass, field

from .entry import Entry
from .event import Event
from .helper import TokenType
from .phoneme import Phoneme

_SKIPPED_SYMBOL = "^"


@dataclass
class Word:
    """A token found in the text, with everything the pipeline learns about it."""

    text: str = ""
    type: TokenType = TokenType.UNKNOWN
    length: int = 0
    offset: int = 0
    frequency: int = 0
    end_of_sentence: bool = False
    end_of_paragraph: bool = False
    has_diacritic: bool = False
    auto_phonetics: bool = False
    events: list[Event] = field(default_factory=list)
    phonemes: list[Phoneme] = field(default_factory=list)
    entries: list[Entry] = field(default_factory=list)

    def text_without_diacritics(self) -> str:
        return self.text

    def is_persian_word(self) -> bool:
        return self.type is TokenType.PERSIAN

    def is_english_word(self) -> bool:
        return self.type is TokenType.ENGLISH

    def is_punctuation(self) -> bool:
        return self.type is TokenType.PUNCTUATION

    def is_number(self) -> bool:
        return self.type is TokenType.NUMBER

    def is_empty(self) -> bool:
        """Whether the word has no entries."""
        return not self.entries

    def best_entry(self) -> Entry:
        """The first entry, or a blank detached entry when there is none."""
        return self.entries[0] if self.entries else Entry()

    def parse_pron(self, pron: str = "") -> None:
        """Append phonemes for ``pron``, or for the best entry's pronunciation."""
        if not pron:
            pron = self.best_entry().pron
        for index, current in enumerate(pron):
            if current == _SKIPPED_SYMBOL:
                continue
            previous = pron[index - 1] if index > 0 else ""
            following = pron[index + 1:index + 2]
            phoneme = Phoneme()
            phoneme.set_phonetic(previous, current, following)
            self.phonemes.append(phoneme)

    def add_entry(self, entry: Entry) -> None:
        self.entries.append(entry)

    def add_event(self, event: Event) -> None:
        self.events.append(event)