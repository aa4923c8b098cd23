import pytest

from smoothed_ngrams import corpus
from smoothed_ngrams.corpus import lines_from_json, lines_from_xml, read_lines, write_lines
from smoothed_ngrams.errors import CorpusFormatError


class TestReadLines:
    def test_strips_line_terminators(self, tmp_path):
        path = tmp_path / "corpus.txt"
        path.write_bytes(b"chicago is\r\nis cold\n\ncold")
        assert read_lines(path) == ["chicago is", "is cold", "", "cold"]

    def test_skips_undecodable_lines(self, tmp_path, caplog):
        path = tmp_path / "corpus.txt"
        path.write_bytes(b"good line\n\xff\xfe broken\nalso good\n")
        with caplog.at_level("WARNING", logger="smoothed_ngrams"):
            assert read_lines(path) == ["good line", "also good"]
        assert "Skipped 1 undecodable line" in caplog.text

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            read_lines(tmp_path / "missing.txt")


class TestJson:
    def test_array_of_strings(self):
        assert lines_from_json('["chicago is", "is cold"]') == ["chicago is", "is cold"]

    def test_invalid_json(self):
        with pytest.raises(CorpusFormatError):
            lines_from_json('["chicago is"')

    @pytest.mark.parametrize("text", ['{"line": "is"}', '["is", 1]', '"is"'])
    def test_wrong_shape(self, text):
        with pytest.raises(CorpusFormatError):
            lines_from_json(text)


class TestXml:
    def test_collects_matching_elements_in_order(self):
        text = "<doc><w>one</w><s><w>two</w><x>no</x></s><w/><w>three</w></doc>"
        assert lines_from_xml(text, "w") == ["one", "two", "three"]

    def test_ignores_namespaces(self):
        text = '<doc xmlns="urn:corpus"><w>one</w></doc>'
        assert lines_from_xml(text, "w") == ["one"]

    def test_no_matches(self):
        assert lines_from_xml("<doc><x>no</x></doc>", "w") == []

    def test_malformed_xml(self):
        with pytest.raises(CorpusFormatError):
            lines_from_xml("<doc><w>one</doc>", "w")


def test_write_lines(tmp_path):
    path = tmp_path / "words.txt"
    assert write_lines(["chicago is", "is cold"], path) == 2
    assert path.read_text(encoding="utf-8") == "chicago is\nis cold\n"


def test_load_brown_corpus_joins_sentences(monkeypatch):
    class FakeBrown:
        def sents(self, categories=None):
            assert categories == ["news"]
            return [["The", "jury", "said"], ["It", "did"]]

    monkeypatch.setattr(corpus, "ensure_nltk_data", lambda: None)
    monkeypatch.setattr(corpus, "brown", FakeBrown())

    assert corpus.load_brown_corpus(categories=["news"]) == ["The jury said", "It did"]
