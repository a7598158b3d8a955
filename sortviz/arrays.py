import enum
import logging

import numpy as np

log = logging.getLogger(__name__)


class ArrayMode(enum.Enum):
    RANDOM   = "random"     # uniform ints in [1, bound]
    IDENTITY = "identity"   # 1..n in order


def _check_size(n):
    if n < 0:
        raise ValueError(f"array size must be non-negative, got {n}")


def random_array(n: int, bound: int, seed=None) -> list:
    """``n`` independent uniform integers in ``[1, bound]``, reproducible per seed."""
    _check_size(n)
    if bound < 1:
        raise ValueError(f"bound must be at least 1, got {bound}")
    rng = np.random.default_rng(seed)
    return rng.integers(1, bound, size=n, endpoint=True, dtype=np.int64).tolist()


def identity_array(n: int) -> list:
    _check_size(n)
    return list(range(1, n + 1))


def make_array(n: int, bound=None, seed=None, mode=ArrayMode.RANDOM) -> list:
    mode = ArrayMode(mode)
    if mode is ArrayMode.IDENTITY:
        return identity_array(n)
    return random_array(n, n if bound is None else bound, seed)


def shuffle(arr, seed=None):
    """Permute ``arr`` in place with a seeded generator."""
    rng = np.random.default_rng(seed)
    order = rng.permutation(len(arr))
    values = [arr[i] for i in order]
    for i, v in enumerate(values):
        arr[i] = v
    log.debug("shuffled %d elements (seed=%s)", len(arr), seed)
    return arr
