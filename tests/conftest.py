# tests/conftest.py
import pytest


class ScriptedRandom:
    """RandomSource that replays fixed answers, so tests can steer every choice."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = []

    def _next(self, lo, hi):
        assert self.values, f"unexpected draw in [{lo}, {hi}]"
        v = self.values.pop(0)
        assert lo <= v <= hi, f"scripted {v} outside [{lo}, {hi}]"
        return v

    def inclusive_random(self, lo, hi):
        self.calls.append(("inclusive", lo, hi))
        return self._next(lo, hi)

    def exclusive_random(self, n):
        self.calls.append(("exclusive", 0, n))
        return self._next(0, n - 1)


@pytest.fixture
def scripted():
    return ScriptedRandom
