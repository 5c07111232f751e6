import xml.etree.ElementTree as ET

from tihutext.corpus import Corpus
from tihutext.entry import Entry
from tihutext.word import Word


def _word(text, pos="N", pron="salAm", offset=0, auto=False):
    word = Word(text=text, offset=offset, length=len(text), auto_phonetics=auto)
    word.add_entry(Entry(pos=pos, pron=pron, stem=text, lemma=text))
    return word


def test_empty_corpus():
    corpus = Corpus("line", 4)
    assert corpus.is_empty()
    assert len(corpus) == 0
    assert corpus.first_word() is None
    assert corpus.last_word() is None


def test_first_and_last_word():
    corpus = Corpus()
    first, last = _word("a"), _word("b")
    corpus.add_word(first)
    corpus.add_word(last)
    assert corpus.first_word() is first
    assert corpus.last_word() is last
    assert len(corpus) == 2
    assert not corpus.is_empty()


def test_clear_keeps_offset():
    corpus = Corpus("text", 7)
    corpus.add_word(_word("text"))
    corpus.clear()
    assert corpus.text == ""
    assert corpus.is_empty()
    assert corpus.offset == 7


def test_to_txt_line_format():
    corpus = Corpus()
    corpus.add_word(_word("salam"))
    assert corpus.to_txt() == "salam\tN\t salAm\n"


def test_to_txt_marks_auto_phonetics():
    corpus = Corpus()
    corpus.add_word(_word("x", pos="AJ", pron="ab", auto=True))
    assert corpus.to_txt() == "x\tAJ\t*ab\n"


def test_to_txt_word_without_entries():
    corpus = Corpus()
    corpus.add_word(Word(text="w"))
    assert corpus.to_txt() == "w\t\t \n"


def test_to_xml_round_trip():
    corpus = Corpus()
    corpus.add_word(_word("salam", offset=3, auto=True))
    word = Word(text="dg", end_of_sentence=True, end_of_paragraph=True)
    corpus.add_word(word)
    xml = corpus.to_xml()
    assert xml.startswith('<?xml version="1.0" encoding="utf-8" ?>\n<corpus>\n')
    assert xml.endswith("</corpus>")

    root = ET.fromstring(xml.encode("utf-8"))
    words = root.findall("word")
    assert len(words) == 2
    assert words[0].attrib == {
        "offset": "3",
        "length": "5",
        "frequency": "0",
        "text": "salam",
        "g2p": "1",
    }
    entry = words[0].find("entry")
    assert entry.attrib == {"pron": "salAm", "pos": "N", "stem": "salam", "lemma": "salam"}
    assert words[1].attrib["eos"] == "1"
    assert words[1].attrib["eop"] == "1"
    assert "g2p" not in words[1].attrib
    assert words[1].findall("entry") == []


def test_dump_xml_and_txt(tmp_path):
    corpus = Corpus()
    corpus.add_word(_word("salam"))
    xml_path = corpus.dump("out.xml", tmp_path)
    txt_path = corpus.dump("out.log", tmp_path)
    assert xml_path.read_text(encoding="utf-8") == corpus.to_xml()
    assert txt_path.read_text(encoding="utf-8") == corpus.to_txt()


def test_dump_without_extension_writes_text(tmp_path):
    corpus = Corpus()
    corpus.add_word(_word("salam"))
    path = corpus.dump("plain", tmp_path)
    assert path.read_text(encoding="utf-8") == corpus.to_txt()


def test_dump_into_missing_directory_returns_none(tmp_path):
    corpus = Corpus()
    assert corpus.dump("out.xml", tmp_path / "missing") is None
    assert not (tmp_path / "missing").exists()