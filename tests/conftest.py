"""Shared fixtures for the passphrase generator tests."""

import pytest

from xkpgen import entropy


class ScriptedRandom:
    """Replays a fixed list of draws instead of the OS random source."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def __call__(self, bound):
        assert self.values, f"no scripted value left for bound {bound}"
        value = self.values.pop(0)
        assert 0 <= value < bound, f"scripted value {value} outside [0, {bound})"
        self.calls.append(bound)
        return value


@pytest.fixture
def scripted_random(monkeypatch):
    def install(values):
        script = ScriptedRandom(values)
        monkeypatch.setattr(entropy, "uniform_random_index", script)
        return script

    return install
