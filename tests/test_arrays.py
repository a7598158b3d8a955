import numpy as np
import pytest

from sortviz.arrays import ArrayMode, identity_array, make_array, random_array, shuffle


def test_random_array_is_reproducible():
    a = random_array(500, 50, seed=1234)
    b = random_array(500, 50, seed=1234)
    assert a == b
    assert np.asarray(a, dtype=np.int64).tobytes() == np.asarray(b, dtype=np.int64).tobytes()


def test_random_array_range_and_type():
    a = random_array(2000, 7, seed=3)
    assert len(a) == 2000
    assert min(a) == 1 and max(a) == 7
    assert all(type(x) is int for x in a)


def test_different_seeds_differ():
    assert random_array(100, 1000, seed=1) != random_array(100, 1000, seed=2)


def test_identity_array():
    assert identity_array(5) == [1, 2, 3, 4, 5]
    assert identity_array(0) == []


@pytest.mark.parametrize("mode", [ArrayMode.IDENTITY, "identity"])
def test_make_array_identity(mode):
    assert make_array(4, mode=mode) == [1, 2, 3, 4]


def test_make_array_bound_defaults_to_size():
    a = make_array(300, seed=9)
    assert max(a) <= 300
    assert a == make_array(300, 300, 9, ArrayMode.RANDOM)


@pytest.mark.parametrize("n,bound", [(-1, 10), (5, 0)])
def test_bad_arguments(n, bound):
    with pytest.raises(ValueError):
        random_array(n, bound, seed=0)


def test_shuffle_is_seeded_permutation():
    a = identity_array(50)
    b = identity_array(50)
    assert shuffle(a, seed=5) is a
    shuffle(b, seed=5)
    assert a == b
    assert a != identity_array(50)
    assert sorted(a) == identity_array(50)


def test_shuffle_numpy_in_place():
    a = np.arange(10)
    shuffle(a, seed=0)
    assert sorted(a.tolist()) == list(range(10))
