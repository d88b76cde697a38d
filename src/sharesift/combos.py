from math import comb
from typing import Iterator

from .types import Combo


def count(n: int, k: int) -> int:
    return comb(n, k) if 1 <= k <= n else 0


def combinations(n: int, k: int) -> Iterator[Combo]:
    # Enumerate the k-subsets of {0, ..., n - 1} in lexicographic order. Position i of a combination
    # can hold at most n - (k - i), which leaves room for the k - i - 1 positions after it; after
    # emitting a combination, the rightmost position below its bound is advanced and every position
    # to its right is reset to the smallest values still available.
    if k < 1 or k > n:
        return
    idx = list(range(k))
    while True:
        yield tuple(idx)
        for i in reversed(range(k)):
            if idx[i] < n - (k - i):
                break
        else:
            return
        idx[i] += 1
        for j in range(i + 1, k):
            idx[j] = idx[j - 1] + 1
