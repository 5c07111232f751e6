from tihutext.persian_to_phonetic import PersianToPhoneme


class FakeG2P:
    def __init__(self, table):
        self.table = table
        self.models = []
        self.asked = []

    def load_model(self, model):
        self.models.append(model)

    def convert(self, word):
        self.asked.append(word)
        return self.table.get(word, "")


def test_convert_single_word(tmp_path):
    converter = PersianToPhoneme(FakeG2P({"w": "ketAb"}), tmp_path / "freq.txt")
    assert converter.convert("w") == "ketAb"


def test_convert_joins_parts_on_underscore(tmp_path):
    g2p = FakeG2P({"x": "tanbAku", "y": "aS"})
    converter = PersianToPhoneme(g2p, tmp_path / "freq.txt")
    assert converter.convert("x_y") == "tanbAkuS"
    assert g2p.asked == ["x", "y"]


def test_convert_counts_words(tmp_path):
    converter = PersianToPhoneme(FakeG2P({}), tmp_path / "freq.txt")
    converter.convert("a")
    converter.convert("a")
    converter.convert("b")
    assert converter.word_frequency == {"a": 2, "b": 1}


def test_load_model_reaches_g2p(tmp_path):
    g2p = FakeG2P({})
    converter = PersianToPhoneme(g2p, tmp_path / "freq.txt")
    converter.load_model("model-dir")
    assert g2p.models == ["model-dir"]


def test_save_orders_by_frequency(tmp_path):
    log = tmp_path / "freq.txt"
    converter = PersianToPhoneme(FakeG2P({}), log)
    for word in ["b", "a", "a", "c", "a", "c"]:
        converter.convert(word)
    converter.save_word_frequency()
    assert log.read_text(encoding="utf-8").splitlines() == ["a\t3", "c\t2", "b\t1"]


def test_saved_frequencies_are_loaded_again(tmp_path):
    log = tmp_path / "freq.txt"
    first = PersianToPhoneme(FakeG2P({}), log)
    first.convert("سلام")
    first.convert("سلام")
    first.save_word_frequency()
    second = PersianToPhoneme(FakeG2P({}), log)
    assert second.word_frequency == first.word_frequency


def test_bad_log_lines_are_skipped(tmp_path):
    log = tmp_path / "freq.txt"
    log.write_text("good\t4\nbad\tx\nalone\n", encoding="utf-8")
    converter = PersianToPhoneme(FakeG2P({}), log)
    assert converter.word_frequency == {"good": 4}


def test_save_into_missing_directory_is_ignored(tmp_path):
    log = tmp_path / "missing" / "freq.txt"
    converter = PersianToPhoneme(FakeG2P({}), log)
    converter.convert("a")
    converter.save_word_frequency()
    assert log.exists() is False