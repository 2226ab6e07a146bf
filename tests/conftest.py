"""Shared randomness doubles for simulator and session tests."""

import pytest


class MidpointRandom:
    """Returns the midpoint of every requested range."""

    def uniform(self, a, b):
        return (a + b) / 2

    def randint(self, a, b):
        return (a + b) // 2


class LowRandom:
    """Always returns the lower bound."""

    def uniform(self, a, b):
        return a

    def randint(self, a, b):
        return a


class HighRandom:
    """Always returns the upper bound."""

    def uniform(self, a, b):
        return b

    def randint(self, a, b):
        return b


@pytest.fixture
def midpoint_rng():
    return MidpointRandom()


@pytest.fixture
def low_rng():
    return LowRandom()


@pytest.fixture
def high_rng():
    return HighRandom()
