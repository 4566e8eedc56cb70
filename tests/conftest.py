import pytest

from roadgrid.citygen.road.generation_context import GenerationContext
from roadgrid.config import Config


@pytest.fixture
def config():
    """Default configuration, fresh for every test."""
    return Config()


@pytest.fixture
def context():
    """Generation context with a fixed seed."""
    return GenerationContext.seeded(1234)


class SequenceRandom:
    """Random source that replays fixed values from `random()`."""

    def __init__(self, values):
        self.values = list(values)
        self.calls = 0

    def random(self):
        self.calls += 1
        return self.values.pop(0)

    def uniform(self, a, b):
        return a + (b - a) * self.random()


@pytest.fixture
def sequence_random():
    return SequenceRandom
