import random

import matplotlib
import pytest

matplotlib.use("Agg")


@pytest.fixture
def square_with_center():
    return [(0, 0), (4, 0), (4, 4), (0, 4), (2, 2)]


@pytest.fixture
def random_points():
    rng = random.Random(1234)

    def make(n):
        return [(rng.uniform(-1.0, 1.0), rng.uniform(-1.0, 1.0)) for _ in range(n)]

    return make
