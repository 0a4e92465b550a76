# mstbench/core/indexpq.py
from __future__ import annotations

from typing import List, Optional

_ABSENT = -1
_EXTRACTED = -2


class IndexMinPQ:
    """
    Indexed binary min-heap over a fixed universe [0..n-1].

    Each index is in one of three states: absent, present (with a key), or
    extracted. An extracted index cannot be inserted again.

    Equal keys come out in order of first insertion; decrease_key keeps the
    original insertion rank.
    """

    def __init__(self, n: int):
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        self._n = n
        self._heap: List[int] = []
        # position of each index in _heap, or _ABSENT / _EXTRACTED
        self._pos: List[int] = [_ABSENT] * n
        self._keys: List[Optional[float]] = [None] * n
        self._rank: List[int] = [0] * n
        self._inserted = 0

    # --- queries ---

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def is_empty(self) -> bool:
        return not self._heap

    def contains(self, i: int) -> bool:
        self._check(i)
        return self._pos[i] >= 0

    def was_extracted(self, i: int) -> bool:
        self._check(i)
        return self._pos[i] == _EXTRACTED

    def key_of(self, i: int) -> float:
        if not self.contains(i):
            raise KeyError(f"index {i} is not in the queue")
        key = self._keys[i]
        assert key is not None
        return key

    def min_index(self) -> int:
        if not self._heap:
            raise IndexError("priority queue is empty")
        return self._heap[0]

    # --- updates ---

    def insert(self, i: int, key: float) -> None:
        self._check(i)
        if self._pos[i] >= 0:
            raise ValueError(f"index {i} is already in the queue")
        if self._pos[i] == _EXTRACTED:
            raise ValueError(f"index {i} was already extracted")
        self._keys[i] = float(key)
        self._rank[i] = self._inserted
        self._inserted += 1
        self._heap.append(i)
        self._pos[i] = len(self._heap) - 1
        self._swim(self._pos[i])

    def decrease_key(self, i: int, key: float) -> None:
        current = self.key_of(i)
        if key > current:
            raise ValueError(f"new key {key} is larger than current key {current} for index {i}")
        self._keys[i] = float(key)
        self._swim(self._pos[i])

    def extract_min(self) -> int:
        if not self._heap:
            raise IndexError("extract_min from an empty priority queue")
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._pos[last] = 0
            self._sink(0)
        self._pos[top] = _EXTRACTED
        self._keys[top] = None
        return top

    # --- heap internals ---

    def _check(self, i: int) -> None:
        if not 0 <= i < self._n:
            raise IndexError(f"index {i} outside [0, {self._n})")

    def _less(self, a: int, b: int) -> bool:
        ia, ib = self._heap[a], self._heap[b]
        return (self._keys[ia], self._rank[ia]) < (self._keys[ib], self._rank[ib])

    def _swap(self, a: int, b: int) -> None:
        h = self._heap
        h[a], h[b] = h[b], h[a]
        self._pos[h[a]] = a
        self._pos[h[b]] = b

    def _swim(self, k: int) -> None:
        while k > 0:
            parent = (k - 1) // 2
            if not self._less(k, parent):
                break
            self._swap(k, parent)
            k = parent

    def _sink(self, k: int) -> None:
        size = len(self._heap)
        while True:
            child = 2 * k + 1
            if child >= size:
                break
            if child + 1 < size and self._less(child + 1, child):
                child += 1
            if not self._less(child, k):
                break
            self._swap(k, child)
            k = child
