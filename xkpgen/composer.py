"""
Password composer: assembles one passphrase from a configuration.
"""

from __future__ import annotations

from dataclasses import dataclass

from .config import (
    DEFAULT_CONFIG,
    PaddingCharacter,
    PaddingType,
    PassphraseConfig,
    SeparatorMode,
)
from .words import select_word
from . import entropy


@dataclass
class ComposedPassphrase:
    """
    Full result of one passphrase composition.
    """
    # Final password
    password: str

    # The separator used for every slot ("" when separators are off)
    separator: str

    # Padding symbol ("" when padding_type is NONE)
    padding: str

    # Words after case transform, in output order
    words: list[str]

    # Length of the assembled string before adaptive padding
    unpadded_length: int

    config: PassphraseConfig


def select_separator(config: PassphraseConfig) -> str:
    if config.separator_mode is SeparatorMode.NONE:
        return ""
    if config.separator_mode is SeparatorMode.CHARACTER:
        return config.separator_alphabet[0]
    return entropy.random_choice(config.separator_alphabet)


def select_padding(config: PassphraseConfig, separator: str) -> str:
    if config.padding_character is PaddingCharacter.RANDOM:
        return entropy.random_choice(config.symbol_alphabet)
    if config.padding_character is PaddingCharacter.SEPARATOR:
        return separator
    return config.symbol_alphabet[0]


def fit_to_length(text: str, length: int, padding: str) -> str:
    """
    Force ``text`` to exactly ``length`` characters.

    Too long: keep the last ``length`` characters.
    Too short: append ``padding`` until the length is reached.
    """
    if len(text) > length:
        return text[len(text) - length:]
    if len(text) < length:
        return text + padding * (length - len(text))
    return text


def compose_with_meta(
    config: PassphraseConfig | None = None,
) -> ComposedPassphrase:
    """
    Composition pipeline with metadata:

    - Draw one separator for the whole password.
    - Resolve the padding symbol.
    - Fixed padding, leading digits, words, trailing digits, fixed padding.
    - Adaptive padding to pad_to_length.
    """
    cfg = config or DEFAULT_CONFIG

    separator = select_separator(cfg)
    padding = select_padding(cfg, separator) if cfg.uses_padding_symbol else ""

    parts: list[str] = []

    if cfg.padding_type is PaddingType.FIXED:
        parts.append(padding * cfg.padding_characters_before)

    if cfg.padding_digits_before > 0:
        parts.append(entropy.random_digits(cfg.padding_digits_before))
        parts.append(separator)

    words = [select_word(cfg) for _ in range(cfg.num_words)]
    parts.append(separator.join(words))

    if cfg.padding_digits_after > 0:
        parts.append(separator)
        parts.append(entropy.random_digits(cfg.padding_digits_after))

    if cfg.padding_type is PaddingType.FIXED:
        parts.append(padding * cfg.padding_characters_after)

    result = "".join(parts)
    unpadded_length = len(result)

    if cfg.padding_type is PaddingType.ADAPTIVE:
        result = fit_to_length(result, cfg.pad_to_length, padding)

    return ComposedPassphrase(
        password=result,
        separator=separator,
        padding=padding,
        words=words,
        unpadded_length=unpadded_length,
        config=cfg,
    )


def compose(
    config: PassphraseConfig | None = None,
) -> str:
    """
    High-level function: return one passphrase for ``config``.
    """
    return compose_with_meta(config).password


def generate_passwords(config: PassphraseConfig, count: int) -> list[str]:
    """Compose ``count`` independent passphrases from the same configuration."""
    return [compose(config) for _ in range(count)]
