import random

import pytest


class NoShuffleRandom(random.Random):
    """Random source whose shuffle leaves sequences untouched."""

    def shuffle(self, x):
        return None


@pytest.fixture
def no_shuffle_rng():
    return NoShuffleRandom(0)


@pytest.fixture
def rng():
    return random.Random(20260117)
