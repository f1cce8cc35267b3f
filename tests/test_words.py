"""Tests for word selection."""

import pytest

from xkpgen.config import CaseTransform, PassphraseConfig
from xkpgen.wordlist import DEFAULT_WORDS
from xkpgen.words import (
    WordSelectionExhausted,
    has_qualifying_word,
    select_word,
)


def make_config(words, **overrides):
    values = dict(
        word_length_min=4,
        word_length_max=5,
        case_transform=CaseTransform.NONE,
        word_dictionary=tuple(words),
    )
    values.update(overrides)
    return PassphraseConfig(**values)


def test_select_word_redraws_until_length_fits(scripted_random):
    config = make_config(["ox", "elephant", "wolf"])
    script = scripted_random([0, 1, 2])
    assert select_word(config) == "wolf"
    assert script.calls == [3, 3, 3]


def test_select_word_applies_case_transform(scripted_random):
    config = make_config(["tiger"], case_transform=CaseTransform.ALTERNATE)
    scripted_random([0])
    assert select_word(config) == "TiGeR"


def test_selected_words_always_within_bounds():
    config = make_config(["ox", "cat", "wolf", "tiger", "panther", "hippopotamus"])
    for _ in range(300):
        assert 4 <= len(select_word(config)) <= 5


def test_attempt_cap_raises_instead_of_hanging():
    config = make_config(["ox", "elephant"], max_word_attempts=25)
    with pytest.raises(WordSelectionExhausted, match="25 attempts"):
        select_word(config)


def test_empty_dictionary_is_reported():
    with pytest.raises(WordSelectionExhausted):
        select_word(make_config([]))


def test_has_qualifying_word():
    assert has_qualifying_word(make_config(["ox", "wolf"]))
    assert not has_qualifying_word(make_config(["ox", "elephant"]))
    assert not has_qualifying_word(make_config([]))


def test_builtin_word_list_is_usable():
    assert len(set(DEFAULT_WORDS)) == len(DEFAULT_WORDS)
    assert has_qualifying_word(PassphraseConfig())
    assert all(word == word.lower() and word.isalpha() for word in DEFAULT_WORDS)
