import random

import pytest


@pytest.fixture
def sample_data():
    rng = random.Random(456)
    text = b"the quick brown fox jumps over the lazy dog " * 20
    noise = bytes(rng.getrandbits(8) for _ in range(512))
    return text + noise
