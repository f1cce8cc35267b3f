"""
Secure random source:
every random decision in a passphrase goes through the operating
system's CSPRNG via :mod:`secrets`. There is no fallback generator.
"""

from __future__ import annotations

import secrets
from typing import Sequence, TypeVar

T = TypeVar("T")


class EntropySourceFailure(RuntimeError):
    """The operating system could not supply secure random data."""


def uniform_random_index(bound: int) -> int:
    """
    Return an integer drawn uniformly from ``[0, bound)``.

    ``bound`` must be positive. Any failure of the underlying entropy
    source is raised as :class:`EntropySourceFailure`.
    """
    if bound <= 0:
        raise ValueError(f"bound must be positive, got {bound}")
    try:
        return secrets.randbelow(bound)
    except (OSError, NotImplementedError) as exc:
        raise EntropySourceFailure(f"secure random source unavailable: {exc}") from exc


def random_choice(items: Sequence[T]) -> T:
    """Pick one element of a non-empty sequence uniformly."""
    return items[uniform_random_index(len(items))]


def coin_flip() -> bool:
    """One fair bit."""
    return uniform_random_index(2) == 1


def random_digits(count: int) -> str:
    """
    Return ``count`` random decimal digits.

    Each digit is drawn on its own, so leading zeros are kept and the
    result is always exactly ``count`` characters wide.
    """
    return "".join(str(uniform_random_index(10)) for _ in range(count))
