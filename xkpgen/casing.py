"""
Case transforms applied to each selected word.

All transforms work character by character, so a recased word always has
the same number of characters as the original (``"ß".upper()`` would
otherwise turn one character into two).
"""

from __future__ import annotations

from .config import CaseTransform
from . import entropy


def _upper(ch: str) -> str:
    mapped = ch.upper()
    return mapped if len(mapped) == 1 else ch


def _lower(ch: str) -> str:
    mapped = ch.lower()
    return mapped if len(mapped) == 1 else ch


def _alternate(word: str) -> str:
    # Position based: index 0, 2, 4... upper, the rest lower.
    return "".join(_upper(ch) if i % 2 == 0 else _lower(ch) for i, ch in enumerate(word))


def _invert(word: str) -> str:
    return "".join(_lower(ch) if i == 0 else _upper(ch) for i, ch in enumerate(word))


def _random(word: str) -> str:
    # One coin flip per character.
    return "".join(_upper(ch) if entropy.coin_flip() else _lower(ch) for ch in word)


def apply_case(word: str, case_transform: CaseTransform) -> str:
    """
    Return ``word`` recased according to ``case_transform``.

    Only RANDOM consumes randomness. CAPITALISE upper-cases the whole
    word, the same as UPPER.
    """
    if case_transform is CaseTransform.NONE:
        return "".join(_lower(ch) for ch in word)
    if case_transform is CaseTransform.ALTERNATE:
        return _alternate(word)
    if case_transform in (CaseTransform.CAPITALISE, CaseTransform.UPPER):
        return "".join(_upper(ch) for ch in word)
    if case_transform is CaseTransform.INVERT:
        return _invert(word)
    if case_transform is CaseTransform.RANDOM:
        return _random(word)
    raise ValueError(f"Unhandled case transform: {case_transform!r}")
