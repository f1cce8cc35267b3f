"""Tests for the secure random source."""

import secrets

import pytest

from xkpgen import entropy
from xkpgen.entropy import EntropySourceFailure


def test_uniform_random_index_stays_in_range():
    for bound in (1, 2, 10, 37):
        for _ in range(200):
            assert 0 <= entropy.uniform_random_index(bound) < bound


def test_uniform_random_index_bound_one_is_always_zero():
    assert {entropy.uniform_random_index(1) for _ in range(20)} == {0}


@pytest.mark.parametrize("bound", [0, -3])
def test_uniform_random_index_rejects_non_positive_bound(bound):
    with pytest.raises(ValueError):
        entropy.uniform_random_index(bound)


def test_entropy_failure_is_not_swallowed(monkeypatch):
    def broken(_bound):
        raise OSError("getrandom failed")

    monkeypatch.setattr(secrets, "randbelow", broken)
    with pytest.raises(EntropySourceFailure, match="getrandom failed"):
        entropy.uniform_random_index(10)


def test_random_digits_keeps_leading_zeros(scripted_random):
    scripted_random([0, 0, 7])
    assert entropy.random_digits(3) == "007"


def test_random_digits_width():
    for count in (0, 1, 5, 12):
        digits = entropy.random_digits(count)
        assert len(digits) == count
        assert digits == "" or digits.isdigit()


def test_random_choice_and_coin_flip(scripted_random):
    script = scripted_random([2, 1, 0])
    assert entropy.random_choice("abc") == "c"
    assert entropy.coin_flip() is True
    assert entropy.coin_flip() is False
    assert script.calls == [3, 2, 2]
