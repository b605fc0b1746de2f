from __future__ import annotations

from typing import Sequence

from ..common.validators import require_positive_int
from .base import RankingStrategy


class RowNumberStrategy(RankingStrategy):
    """ROW_NUMBER(): 1..n, ties broken by input order."""

    def assign(self, order_keys: Sequence[tuple]) -> list[int]:
        return list(range(1, len(order_keys) + 1))


class RankStrategy(RankingStrategy):
    """RANK(): ties share a rank and leave a gap (1, 1, 3)."""

    def assign(self, order_keys: Sequence[tuple]) -> list[int]:
        out: list[int] = []
        for i, key in enumerate(order_keys):
            if i and key == order_keys[i - 1]:
                out.append(out[-1])
            else:
                out.append(i + 1)
        return out


class DenseRankStrategy(RankingStrategy):
    """DENSE_RANK(): ties share a rank, no gaps (1, 1, 2)."""

    def assign(self, order_keys: Sequence[tuple]) -> list[int]:
        out: list[int] = []
        for i, key in enumerate(order_keys):
            if i and key == order_keys[i - 1]:
                out.append(out[-1])
            else:
                out.append(out[-1] + 1 if out else 1)
        return out


class NtileStrategy(RankingStrategy):
    """NTILE(k): the first n % k buckets hold one extra row."""

    def __init__(self, buckets: int):
        self._buckets = require_positive_int(buckets, "NTILE buckets")

    def assign(self, order_keys: Sequence[tuple]) -> list[int]:
        n = len(order_keys)
        size, extra = divmod(n, self._buckets)
        out: list[int] = []
        for bucket in range(1, self._buckets + 1):
            count = size + (1 if bucket <= extra else 0)
            if count == 0:
                break
            out.extend([bucket] * count)
        return out
