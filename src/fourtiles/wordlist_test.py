import pytest
from sortedcontainers import SortedSet

from fourtiles.finder.config import FinderConfig
from fourtiles.wordlist import candidate_words, load_word_list


def test_load_word_list(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("apple\n\n  banana \napple\nCherry\n", encoding="utf-8")
    assert load_word_list(path) == {"apple", "banana", "Cherry"}


def test_load_word_list_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_word_list(tmp_path / "missing.txt")


def test_candidate_words():
    words = {"seven77", "eightish", "abcdefghijklmnop", "abcdefghijklmnopq", "a"}
    candidates = candidate_words(words)
    assert isinstance(candidates, SortedSet)
    assert list(candidates) == ["abcdefghijklmnop", "eightish"]
    assert len(words) == 5


def test_candidate_words_not_deterministic():
    candidates = candidate_words({"eightish", "nine9999x"}, FinderConfig(deterministic=False))
    assert candidates == {"eightish", "nine9999x"}
