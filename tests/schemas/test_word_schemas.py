"""WordCreate validation tests."""

import pytest
from pydantic import ValidationError

from wordbank.schemas.word import WordCreate


def test_fields_are_stripped():
    body = WordCreate(word="  cat ", definition=" a small feline\n")
    assert body.word == "cat"
    assert body.definition == "a small feline"


@pytest.mark.parametrize("word,definition", [
    ("", "x"),
    ("x", ""),
    ("   ", "x"),
    ("x", "\t\n"),
])
def test_blank_fields_are_rejected(word, definition):
    with pytest.raises(ValidationError):
        WordCreate(word=word, definition=definition)


def test_overlong_word_rejected():
    with pytest.raises(ValidationError):
        WordCreate(word="w" * 501, definition="x")


def test_commas_and_quotes_allowed():
    body = WordCreate(word="a,b", definition='he said "hi"')
    assert body.word == "a,b"
