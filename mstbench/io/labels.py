# mstbench/io/labels.py
from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Sequence

from mstbench.core.errors import GraphFormatError

Label = Hashable


class LabelTable:
    """
    Bijection between external vertex labels and dense indices [0..n-1].

    The index of a label is its position in the node list, so any label
    alphabet of any size works.
    """

    def __init__(self, labels: Iterable[Label] = ()):
        self._labels: List[Label] = []
        self._index: Dict[Label, int] = {}
        for lab in labels:
            self.add(lab)

    def add(self, label: Label) -> int:
        if label in self._index:
            raise GraphFormatError(f"duplicate node label {label!r}")
        self._index[label] = len(self._labels)
        self._labels.append(label)
        return self._index[label]

    def index(self, label: Label) -> int:
        try:
            return self._index[label]
        except (KeyError, TypeError):
            raise GraphFormatError(f"unknown node label {label!r}") from None

    def label(self, index: int) -> Label:
        return self._labels[index]

    def labels(self) -> Sequence[Label]:
        return tuple(self._labels)

    def __len__(self) -> int:
        return len(self._labels)

    def __contains__(self, label: object) -> bool:
        return label in self._index

    @classmethod
    def alphabetic(cls, n: int) -> "LabelTable":
        """A, B, ..., Z, AA, AB, ... for n vertices."""
        return cls(alpha_label(i) for i in range(n))


def alpha_label(i: int) -> str:
    """Spreadsheet-style column name: 0 -> A, 25 -> Z, 26 -> AA."""
    if i < 0:
        raise ValueError(f"index must be >= 0, got {i}")
    out = ""
    i += 1
    while i:
        i, r = divmod(i - 1, 26)
        out = chr(ord("A") + r) + out
    return out
