import os
import random
import sys

import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from core.dataset import Dataset
from core.schemas import ConjugationEntry


class FakeClock:
    """Manually advanced monotonic clock."""

    def __init__(self, start=1000.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds
        return self.now


TEN_WORDS = [
    "cat", "dog", "bird", "fish", "horse",
    "mouse", "lion", "tiger", "bear", "wolf",
]

PARLARE = {
    "verb": "parlare",
    "answers": {
        "present": {"io": "parlo", "tu": "parli"},
        "past": {"io": "ho parlato", "tu": "hai parlato"},
    },
}


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def words():
    return list(TEN_WORDS)


@pytest.fixture
def parlare():
    return ConjugationEntry.model_validate(PARLARE)


@pytest.fixture
def dataset(words, parlare):
    return Dataset(words=tuple(words), conjugations=(parlare,))
