from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, Optional, Sequence

from ..common.accessors import Accessor, make_accessor, row_to_dict
from ..core.enums import RankingFunction
from .factory import RankingStrategyFactory


@dataclass(frozen=True)
class OrderBy:
    key: Accessor
    descending: bool = False


@dataclass(frozen=True)
class Window:
    """OVER (PARTITION BY ... ORDER BY ...)."""

    partition_by: tuple[Accessor, ...] = ()
    order_by: tuple[OrderBy, ...] = field(default=())

    def partition_key(self, row: Any) -> tuple:
        return tuple(make_accessor(k)(row) for k in self.partition_by)

    def order_key(self, row: Any) -> tuple:
        return tuple(make_accessor(o.key)(row) for o in self.order_by)

    def sorted_indexes(self, rows: Sequence[Any], indexes: Sequence[int]) -> list[int]:
        # Stable multi-key sort, last key first; NULLs first ascending, last descending.
        out = list(indexes)
        for order in reversed(self.order_by):
            getter = make_accessor(order.key)
            out.sort(
                key=lambda i: (getter(rows[i]) is not None, getter(rows[i])),
                reverse=order.descending,
            )
        return out


def compute_ranks(
    rows: Sequence[Any],
    *,
    window: Window,
    function: RankingFunction,
    buckets: Optional[int] = None,
    factory: Optional[RankingStrategyFactory] = None,
) -> list[int]:
    """Rank numbers aligned with `rows` (input order is preserved)."""

    strategy = (factory or RankingStrategyFactory()).create(function, buckets=buckets)

    partitions: dict[tuple, list[int]] = {}
    for i, row in enumerate(rows):
        partitions.setdefault(window.partition_key(row), []).append(i)

    ranks = [0] * len(rows)
    for indexes in partitions.values():
        ordered = window.sorted_indexes(rows, indexes)
        assigned = strategy.assign([window.order_key(rows[i]) for i in ordered])
        for i, value in zip(ordered, assigned):
            ranks[i] = value
    return ranks


def apply_ranking(
    rows: Iterable[Any],
    *,
    window: Window,
    function: RankingFunction,
    alias: str,
    buckets: Optional[int] = None,
) -> list[dict]:
    """Rows as dicts with the rank under `alias`, in partition then window order."""

    rows = list(rows)
    ranks = compute_ranks(rows, window=window, function=function, buckets=buckets)

    partitions: dict[tuple, list[int]] = {}
    for i, row in enumerate(rows):
        partitions.setdefault(window.partition_key(row), []).append(i)

    out: list[dict] = []
    for indexes in partitions.values():
        for i in window.sorted_indexes(rows, indexes):
            d = row_to_dict(rows[i])
            d[alias] = ranks[i]
            out.append(d)
    return out
