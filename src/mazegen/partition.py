# src/mazegen/partition.py
# Disjoint-set partition of cells by label. Two cells are connected iff they
# carry the same label; a merge keeps the smaller label.

from typing import List

from .errors import IndexOutOfRange


class Partition:
    """
    Label-array union-find:
      - label[i] starts as i (every cell alone)
      - merge(a, b) relabels every cell carrying the larger label to the smaller
      - the grid is fully connected once every label is 0
    merge is an O(size) scan; merges are bounded by size-1 per maze.
    """

    def __init__(self, size: int):
        if size < 1:
            raise ValueError("size must be >= 1")
        self.labels: List[int] = list(range(size))

    def __len__(self) -> int:
        return len(self.labels)

    def _check(self, cell: int) -> None:
        if not (0 <= cell < len(self.labels)):
            raise IndexOutOfRange(f"cell {cell} not in [0, {len(self.labels)})")

    def label(self, cell: int) -> int:
        self._check(cell)
        return self.labels[cell]

    def same_group(self, a: int, b: int) -> bool:
        return self.label(a) == self.label(b)

    def merge(self, a: int, b: int) -> None:
        lo, hi = sorted((self.label(a), self.label(b)))
        if lo == hi:
            return
        labels = self.labels
        for i, v in enumerate(labels):
            if v == hi:
                labels[i] = lo

    def is_fully_connected(self) -> bool:
        # Minimum-label convention: the single surviving label is cell 0's.
        return all(v == 0 for v in self.labels)

    def group_count(self) -> int:
        return len(set(self.labels))
