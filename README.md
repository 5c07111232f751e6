# tihutext

Building blocks for the text side of a Persian text-to-speech engine. A
line of text is held as a `Corpus` of `Word`s. Each word carries
dictionary `Entry`s, `Event`s and `Phoneme`s. The package fills in
missing pronunciations: numbers are spelled out in Persian phonemes,
punctuation marks are looked up in a table, and unknown Persian words go
through an external grapheme-to-phoneme program. Pronunciations then
become MBROLA phoneme lines.

## Installation

From a checkout of the package:

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

The package has no runtime dependencies beyond the standard library.

## Modules

- `tihutext.helper`
  - `TokenType` and `EventType`, plus constants for common Persian letters.
  - `split_pieces(line)` splits a line on spaces and tabs. `chomp(line)`
    drops a trailing `\n`, `\r` or `\r\n`.
  - `is_vowel_phoneme`, `starts_with_vowel` and `ends_with_vowel` test for
    the vowel phonemes `a e o u i A`.
  - `concat_pronunciations(first, second)` joins two pronunciations. It
    drops the `a` after a final `u` (`tanbAku` + `aS` gives `tanbAkuS`). It
    inserts `v` between a final vowel and a leading `o`, `w` or `u`.
  - `ends_with_detached(value)` tells whether text ends with a letter that
    does not join the next one.
  - `remove_first` and `remove_last` drop one character. They raise
    `ValueError` on an empty string.
- `tihutext.entry.Entry` is a dataclass with `stem`, `lemma`, `pron` and
  `pos`.
  - Part-of-speech tests work on the tag prefix: `is_verb`, `is_noun`,
    `is_adjective`, `is_numeral` and the rest.
  - `is_noun_common` and `is_noun_proper` raise `ValueError` when the entry
    is not a noun.
  - `set_genitive(True)` appends `e` to the tag. `add_genitive()` appends
    the genitive vowel to the pronunciation.
- `tihutext.event.Event` is a dataclass holding an `EventType` and a string
  value.
- `tihutext.hunzip.Hunzip(path, key=None)` iterates over the lines of an
  `.hz` file, decoded as UTF-8. It handles both the plain `hz0` format and
  the keyed `hz1` format. It raises `HzipError` for bad data or a missing
  or wrong key.
- `tihutext.file_manager`
  - `read_lines(filename, key=None)` yields the lines of a data file. It
    skips blank lines and `#` comments and drops a leading byte-order mark.
  - When the plain file cannot be opened it reads `filename + ".hz"`
    instead. If neither exists it raises `FileNotFoundError`.
  - `read_records` yields each line split with `split_pieces`.
- `tihutext.phoneme`
  - `PHONEME_TABLE` is a table of `PhonemeInfo` rows: symbol, MBROLA name,
    IPA name, duration and `ConsonantType`. The module also defines
    `PitchRange`.
  - `Phoneme.set_phonetic(prev, phoneme, next)` picks the table row. `g`
    and `k` change with the next phoneme. An unknown symbol raises
    `ValueError`.
  - `Phoneme.mbrola_string()` gives the MBROLA line, such as `"a: 138 \n"`.
    It is preceded by `"? 50 \n"` when the vowel starts the word or follows
    another vowel.
- `tihutext.word.Word` is a dataclass for a token. It holds the text,
  `TokenType`, offset, length, sentence and paragraph flags, and lists of
  entries, events and phonemes.
  - `best_entry()` returns the first entry, or a blank `Entry` when there
    is none.
  - `parse_pron(pron="")` appends phonemes for `pron`, or for the best
    entry's pronunciation when `pron` is empty. It skips `^`.
- `tihutext.corpus.Corpus` holds the text of one line, its offset and its
  words.
  - `to_xml()` and `to_txt()` render the words.
  - `dump(filename, directory="log")` writes XML for names ending in `.xml`
    and text otherwise. It returns the path written, or `None` if the file
    could not be created.
- `tihutext.parser.Parser` is the abstract base of a pipeline stage, with
  `load(param)` and `parse(corpus)`. `message(text)` passes
  `("text_message", text)` to an optional callback.
- `tihutext.number_to_phonetic.number_to_phonetic(text)` spells out a
  string of digits.
  - It accepts an optional `+` or `-` sign.
  - Each leading zero is read as `sefr_`.
  - Anything that is not digits raises `ValueError`.
- `tihutext.punctuation`
  - `PunctuationTable.load(filename)` reads records of the form
    `mark status pronunciation`. The first record for a mark wins, and a
    bad status raises `ValueError`.
  - `convert(mark)` returns the pronunciation, or `""` when the mark is
    unknown.
  - The module also defines `Punctuation` and `ReadStatus`.
- `tihutext.g2p.G2PProcess(executable)` drives an external interactive
  grapheme-to-phoneme program.
  - The default executable is `./g2p_seq2seq_pyinstaller_linux_64`.
  - `load_model(model)` starts it with `--interactive --model <model>`.
  - `convert(word)` writes the word and parses the phonemes from the reply.
    It returns `""` when the program is not running or gives no answer.
  - `close()` stops the program. The class is also a context manager.
- `tihutext.persian_to_phonetic.PersianToPhoneme(g2p=None, log_file=...)`
  pronounces Persian words through a `G2PProcess`, or any object with
  `load_model` and `convert`.
  - `convert(word)` pronounces each `_`-separated part and joins them with
    `concat_pronunciations`.
  - It counts every word it is asked about. Counts are read from
    `log_file` (default `./log/unknown_word_freqeuncy.txt`) on creation.
  - Counts are written back, most frequent first, only when
    `save_word_frequency()` is called.
- `tihutext.word_to_phonetic.WordToPhonetic(data_dir="data", g2p=None)` is
  a `Parser`.
  - `load()` starts the model `<data_dir>/g2p-seq2seq-tihudict` and reads
    `<data_dir>/punctuations.txt`.
  - `parse(corpus)` gives a pronunciation to every word whose best entry
    has none. Persian words go through G2P and are marked
    `auto_phonetics`. Numbers go through `number_to_phonetic` and
    punctuation through the table.
  - After parsing it dumps the corpus to `log/w2p.xml`.

## Example

```python
from tihutext.helper import concat_pronunciations
from tihutext.number_to_phonetic import number_to_phonetic

print(number_to_phonetic("25"))                # bistopanj
print(concat_pronunciations("tanbAku", "aS"))  # tanbAkuS
```

Building a corpus by hand:

```python
from tihutext.corpus import Corpus
from tihutext.entry import Entry
from tihutext.helper import TokenType
from tihutext.word import Word

corpus = Corpus("کتاب", 0)
word = Word(text="کتاب", type=TokenType.PERSIAN)
word.add_entry(Entry(pron="ketAb", pos="N"))
corpus.add_word(word)
print(corpus.to_txt())          # "کتاب\tN\t ketAb\n"

word.parse_pron()
print("".join(p.mbrola_string() for p in word.phonemes))
```

## What this package does not do

- It does not split raw text into words. Words are added to a `Corpus` by
  the caller.
- It has no pronunciation dictionary lookup and no part-of-speech tagger.
  Entries and tags come from the caller.
- English words get no pronunciation.
- Unknown Persian words need the external g2p program and its model on
  disk.
- It produces MBROLA phoneme lines but synthesizes no audio and plays
  nothing.
- It has no command-line program.