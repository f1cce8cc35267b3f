"""
Word selection: rejection sampling over the configured dictionary.
"""

from __future__ import annotations

from .casing import apply_case
from .config import PassphraseConfig
from . import entropy


class WordSelectionExhausted(RuntimeError):
    """No word within the length bounds was drawn before the attempt cap."""


def word_fits(word: str, config: PassphraseConfig) -> bool:
    return config.word_length_min <= len(word) <= config.word_length_max


def has_qualifying_word(config: PassphraseConfig) -> bool:
    """
    True when at least one dictionary word satisfies the length bounds.

    Without such a word an uncapped :func:`select_word` never returns.
    """
    return any(word_fits(word, config) for word in config.word_dictionary)


def select_word(config: PassphraseConfig) -> str:
    """
    Draw dictionary words until one fits the length bounds, then recase it.

    The loop is unbounded unless ``config.max_word_attempts`` is set, in
    which case :class:`WordSelectionExhausted` is raised once the cap is
    reached. Callers must make sure the dictionary is non-empty.
    """
    dictionary = config.word_dictionary
    if not dictionary:
        raise WordSelectionExhausted("the word dictionary is empty")

    attempts = 0
    while True:
        word = entropy.random_choice(dictionary)
        attempts += 1
        if word_fits(word, config):
            return apply_case(word, config.case_transform)
        if config.max_word_attempts is not None and attempts >= config.max_word_attempts:
            raise WordSelectionExhausted(
                f"no word of length {config.word_length_min}-{config.word_length_max} "
                f"found in {attempts} attempts"
            )
