import os
import random

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from sortviz.algorithms import (
    bubble_sort, cocktail_sort, insertion_sort, quick_sort, selection_sort,
)

SORTS = {
    "bubble":    bubble_sort,
    "shaker":    cocktail_sort,
    "selection": selection_sort,
    "insertion": insertion_sort,
    "quick":     quick_sort,
}

SIZES = [0, 1, 2, 10, 1000]


def _inputs(n):
    rng = random.Random(n)
    return {
        "sorted":    list(range(n)),
        "reverse":   list(range(n, 0, -1)),
        "equal":     [7] * n,
        "random":    [rng.randint(1, 100) for _ in range(n)],
    }


@pytest.fixture(params=sorted(SORTS))
def sort_fn(request):
    return SORTS[request.param]


@pytest.fixture(params=[(n, shape) for n in SIZES for shape in ("sorted", "reverse", "equal", "random")],
                ids=lambda p: f"{p[1]}-{p[0]}")
def sample(request):
    n, shape = request.param
    return _inputs(n)[shape]


class Counter:
    """Observer that only counts, for inputs too big to record."""
    stop_requested = False

    def __init__(self):
        self.steps = 0

    def notify(self, view, bounds):
        self.steps += 1


@pytest.fixture
def counter():
    return Counter()
