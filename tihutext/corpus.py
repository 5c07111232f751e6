"""A line of input text and the words found in it."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path

from .word import Word

_XML_HEADER = '<?xml version="1.0" encoding="utf-8" ?>'


@dataclass
class Corpus:
    """The text of one line, its offset in the whole input, and its words."""

    text: str = ""
    offset: int = 0
    words: list[Word] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.words)

    def __iter__(self):
        return iter(self.words)

    def add_word(self, word: Word) -> None:
        self.words.append(word)

    def first_word(self) -> Word | None:
        """The first word, or None when there are no words."""
        return self.words[0] if self.words else None

    def last_word(self) -> Word | None:
        """The last word, or None when there are no words."""
        return self.words[-1] if self.words else None

    def is_empty(self) -> bool:
        """Whether the corpus holds no words."""
        return not self.words

    def clear(self) -> None:
        """Forget the text and the words."""
        self.text = ""
        self.words.clear()

    def to_xml(self) -> str:
        """Describe every word and its entries as an XML document."""
        lines = [_XML_HEADER, "<corpus>"]
        for word in self.words:
            flags = "".join(
                attribute
                for attribute, is_set in (
                    (' g2p="1"', word.auto_phonetics),
                    (' eop="1"', word.end_of_paragraph),
                    (' eos="1"', word.end_of_sentence),
                )
                if is_set
            )
            lines.append(
                f'\t<word offset="{word.offset}" length="{word.length}" '
                f'frequency="{word.frequency}" text="{word.text}"{flags}>'
            )
            lines.extend(
                f'\t\t<entry pron="{entry.pron}" pos="{entry.pos}" '
                f'stem="{entry.stem}" lemma="{entry.lemma}" />'
                for entry in word.entries
            )
            lines.append("\t</word>")
        lines.append("</corpus>")
        return "\n".join(lines)

    def to_txt(self) -> str:
        """One line per word: text, tag, g2p mark and pronunciation."""
        rows = []
        for word in self.words:
            entry = word.best_entry()
            mark = "*" if word.auto_phonetics else " "
            rows.append(f"{word.text}\t{entry.pos}\t{mark}{entry.pron}\n")
        return "".join(rows)

    def dump(self, filename: str, directory: str | os.PathLike[str] = "log") -> Path | None:
        """Write the corpus into ``directory``, as XML for ``.xml`` names, text otherwise.

        Returns the path written, or None when the file could not be created.
        """
        _, dot, extension = filename.rpartition(".")
        content = self.to_xml() if dot and extension == "xml" else self.to_txt()
        path = Path(directory) / filename
        try:
            path.write_text(content, encoding="utf-8")
        except OSError:
            return None
        return path