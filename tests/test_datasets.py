import random
from pathlib import Path

import pytest
from wordgame.datasets import (
    Dictionary, DictionaryLoadError, load_dictionary, pretty_summary, validate_dictionary,
)
from wordgame.engine import EmptyDictionary


def _write(p: Path, lines):
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")


def test_load_dictionary_normalizes(tmp_path: Path):
    p = tmp_path / "dict.txt"
    _write(p, ["СтОлИ", "СТУЛЬ", "окошК", "дверь", "ёлочк", "мёдик"])

    d = load_dictionary(p)
    for w in ["столи", "стуль", "окошк", "дверь", "елочк", "медик"]:
        assert w in d.words
    assert all(len(w) == 5 for w in d)


def test_load_dictionary_folds_yo(tmp_path: Path):
    p = tmp_path / "yo.txt"
    _write(p, ["берёз", "ёжник", "пёстр"])

    d = load_dictionary(p)
    assert "берез" in d and "ежник" in d and "пестр" in d
    assert "берёз" in d  # membership normalizes its argument too


def test_load_dictionary_skips_bad_lines(tmp_path: Path):
    p = tmp_path / "mixed.txt"
    _write(p, ["книга", "", "   ", "короткоеслово", "дл", "hello", "дверь"])
    assert load_dictionary(p).words == ("книга", "дверь")


def test_load_dictionary_handles_bom(tmp_path: Path):
    p = tmp_path / "bom.txt"
    p.write_bytes("\ufeffкнига\nдверь\n".encode("utf-8"))
    assert load_dictionary(p).words == ("книга", "дверь")


def test_load_dictionary_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "nonexistent_file.txt")


def test_load_dictionary_empty_file(tmp_path: Path):
    p = tmp_path / "empty.txt"
    p.touch()
    with pytest.raises(DictionaryLoadError):
        load_dictionary(p)
    _write(p, ["дл", "короткоеслово"])
    with pytest.raises(DictionaryLoadError):
        load_dictionary(p)


def test_dictionary_contains_and_dedupe():
    d = Dictionary(["столи", "СТОЛИ", "стуль", "дл"])
    assert d.words == ("столи", "стуль")
    assert len(d) == 2
    assert "СтОлИ" in d
    assert "несуществующееслово" not in d
    assert 12345 not in d


def test_random_word():
    d = Dictionary(["столи", "стуль", "книга"])
    rng = random.Random(7)
    for _ in range(10):
        w = d.random_word(rng)
        assert w in d and len(w) == 5
    with pytest.raises(EmptyDictionary):
        Dictionary([]).random_word(rng)


def test_random_word_follows_the_given_rng():
    d = Dictionary(["столи", "стуль", "книга", "кошка", "ложка"])
    a = [d.random_word(random.Random(3)) for _ in range(3)]
    assert len(set(a)) == 1
    r1, r2 = random.Random(11), random.Random(11)
    assert [d.random_word(r1) for _ in range(8)] == [d.random_word(r2) for _ in range(8)]
    with pytest.raises(TypeError):
        d.random_word()


def test_validate_dictionary_happy_path(tmp_path: Path):
    p = tmp_path / "nouns.txt"
    _write(p, ["книга", "дверь", "ручей"])

    rep = validate_dictionary(str(p))
    assert rep["passed"] is True
    assert rep["count"] == 3 and rep["unique_count"] == 3
    assert rep["issues"] == []
    s = pretty_summary(rep)
    assert "words=3" in s and s.endswith("OK")


def test_validate_dictionary_flags_problems(tmp_path: Path):
    p = tmp_path / "nouns.txt"
    _write(p, ["книга", "КНИГА", "ёршик", "короткоеслово", ""])

    rep = validate_dictionary(str(p))
    assert rep["passed"] is False
    assert rep["invalid_lines"] == 2
    assert rep["normalized_lines"] == 2
    assert any("duplicate" in msg for msg in rep["issues"])
    assert any("invalid" in msg for msg in rep["issues"])


def test_validate_dictionary_missing(tmp_path: Path):
    rep = validate_dictionary(str(tmp_path / "nope.txt"))
    assert rep["exists"] is False and rep["passed"] is False
    assert "missing" in pretty_summary(rep)
