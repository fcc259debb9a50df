"""
Tests for dictionary and answer loading.
"""

import pytest

from lexicon import load_answers, load_dictionary, parse_dictionary
from wordle_env import WORD_LENGTH


def test_parse_keeps_word_column():
    words = parse_dictionary("crane 120\nslate 99\n")
    assert words == frozenset({"crane", "slate"})


def test_parse_deduplicates():
    words = parse_dictionary("crane 1\ncrane 2\nslate 3\n")
    assert len(words) == 2


def test_parse_skips_blank_lines():
    assert parse_dictionary("crane 1\n\n  \nslate 2") == frozenset({"crane", "slate"})


def test_parse_rejects_line_without_separator():
    with pytest.raises(ValueError, match="words.txt:2"):
        parse_dictionary("crane 1\nslate\n", source="words.txt")


def test_load_dictionary_from_file(tmp_path):
    path = tmp_path / "dict.txt"
    path.write_text("crane 10\nmoved 5\n", encoding="utf-8")
    assert load_dictionary(path) == frozenset({"crane", "moved"})


def test_load_dictionary_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_dictionary(tmp_path / "nope.txt")


def test_bundled_dictionary():
    words = load_dictionary()
    assert isinstance(words, frozenset)
    assert len(words) > 100
    assert all(len(w) == WORD_LENGTH for w in words)


def test_load_answers_splits_on_whitespace(tmp_path):
    path = tmp_path / "answers.txt"
    path.write_text("crane  slate\nmoved\tcrane\n", encoding="utf-8")
    assert load_answers(path) == ["crane", "slate", "moved", "crane"]


def test_bundled_answers_are_dictionary_words():
    dictionary = load_dictionary()
    answers = load_answers()
    assert answers
    assert all(a in dictionary for a in answers)
