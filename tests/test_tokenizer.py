"""Tests for the default UrlTokenizer."""

import pytest

from page_interests.core.tokenizer import UrlTokenizer


@pytest.fixture
def tokenizer():
    return UrlTokenizer(url_stopwords=["www", "com", "html", "the"])


def test_url_and_title(tokenizer):
    tokens = tokenizer.tokenize("https://www.example.com/Cars/review.html?id=42", "The Best Cars")
    assert tokens == {"example", "cars", "review", "id", "best"}


def test_scheme_dropped(tokenizer):
    assert "https" not in tokenizer.tokenize("https://example.com", "")
    assert "ftp" not in tokenizer.tokenize("ftp://files.example.com", "")


def test_hyphenated_words_keep_parts(tokenizer):
    tokens = tokenizer.tokenize("http://example.com/car-repair", "")
    assert {"car-repair", "car", "repair"} <= tokens


def test_numbers_and_stopwords_dropped(tokenizer):
    tokens = tokenizer.tokenize("", "The 2024 season")
    assert tokens == {"season"}


def test_non_latin_letters(tokenizer):
    tokens = tokenizer.tokenize("", "Футбол Ελλάδα café")
    assert tokens == {"футбол", "ελλάδα", "café"}


def test_empty_inputs(tokenizer):
    assert tokenizer.tokenize("", "") == set()
    assert tokenizer.tokenize(None, None) == set()


def test_stopwords_case_insensitive():
    tokenizer = UrlTokenizer(url_stopwords=["News"])
    assert tokenizer.tokenize("", "news today") == {"today"}
