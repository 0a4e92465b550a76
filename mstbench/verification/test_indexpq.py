import random

import pytest

from mstbench.core.indexpq import IndexMinPQ


def drain(pq):
    out = []
    while pq:
        out.append(pq.extract_min())
    return out


def test_extracts_in_key_order():
    rng = random.Random(7)
    keys = [rng.randint(0, 20) for _ in range(50)]
    pq = IndexMinPQ(50)
    for i, k in enumerate(keys):
        pq.insert(i, k)
    assert len(pq) == 50

    order = drain(pq)
    # equal keys leave in insertion order, which here is index order
    assert order == sorted(range(50), key=lambda i: (keys[i], i))
    assert pq.is_empty()


def test_ties_follow_insertion_not_index():
    pq = IndexMinPQ(4)
    pq.insert(3, 1.0)
    pq.insert(0, 1.0)
    pq.insert(2, 1.0)
    assert drain(pq) == [3, 0, 2]


def test_decrease_key_moves_entry_up():
    pq = IndexMinPQ(4)
    pq.insert(0, 5.0)
    pq.insert(1, 3.0)
    pq.insert(2, 4.0)
    pq.decrease_key(0, 1.0)
    assert pq.key_of(0) == 1.0
    assert pq.min_index() == 0

    # decreased to an existing key: keeps its original insertion rank
    pq.decrease_key(2, 3.0)
    assert drain(pq) == [0, 1, 2]


def test_slot_states():
    pq = IndexMinPQ(3)
    assert not pq.contains(1)
    pq.insert(1, 2.0)
    assert pq.contains(1)
    assert pq.extract_min() == 1
    assert not pq.contains(1)
    assert pq.was_extracted(1)
    assert not pq.was_extracted(0)


def test_misuse_raises():
    pq = IndexMinPQ(2)
    with pytest.raises(IndexError):
        pq.extract_min()
    with pytest.raises(IndexError):
        pq.insert(2, 1.0)

    pq.insert(0, 1.0)
    with pytest.raises(ValueError):
        pq.insert(0, 0.5)
    with pytest.raises(ValueError):
        pq.decrease_key(0, 2.0)
    with pytest.raises(KeyError):
        pq.key_of(1)

    pq.extract_min()
    with pytest.raises(ValueError):
        pq.insert(0, 1.0)
