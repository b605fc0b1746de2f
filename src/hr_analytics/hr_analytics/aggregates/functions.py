from __future__ import annotations

import statistics
from decimal import Decimal
from typing import Any, Sequence

from ..core.constants import DEFAULT_STRING_AGG_SEPARATOR
from .base import Aggregate


class CountAggregate(Aggregate):
    def compute(self, values: Sequence[Any]) -> int:
        return len(values)


class CountBigAggregate(CountAggregate):
    """COUNT_BIG: same count; Python ints have no 2^31 ceiling."""


class SumAggregate(Aggregate):
    def compute(self, values: Sequence[Any]) -> Any:
        if not values:
            return None
        return sum(values[1:], values[0])


class AvgAggregate(Aggregate):
    """AVG keeps the input type: integer input truncates toward zero."""

    def compute(self, values: Sequence[Any]) -> Any:
        if not values:
            return None
        total = sum(values[1:], values[0])
        n = len(values)
        if all(isinstance(v, int) and not isinstance(v, bool) for v in values):
            q = abs(total) // n
            return q if total >= 0 else -q
        if isinstance(total, Decimal):
            return total / Decimal(n)
        return total / n


class MinAggregate(Aggregate):
    def compute(self, values: Sequence[Any]) -> Any:
        return min(values) if values else None


class MaxAggregate(Aggregate):
    def compute(self, values: Sequence[Any]) -> Any:
        return max(values) if values else None


class StringAggAggregate(Aggregate):
    def __init__(self, separator: str = DEFAULT_STRING_AGG_SEPARATOR):
        self._separator = separator

    def compute(self, values: Sequence[Any]) -> Any:
        if not values:
            return None
        return self._separator.join(str(v) for v in values)


class VarAggregate(Aggregate):
    """Sample variance; NULL below two values."""

    def compute(self, values: Sequence[Any]) -> Any:
        if len(values) < 2:
            return None
        return statistics.variance([float(v) for v in values])


class VarPAggregate(Aggregate):
    def compute(self, values: Sequence[Any]) -> Any:
        if not values:
            return None
        return statistics.pvariance([float(v) for v in values])


class StdevAggregate(Aggregate):
    def compute(self, values: Sequence[Any]) -> Any:
        if len(values) < 2:
            return None
        return statistics.stdev([float(v) for v in values])


class StdevPAggregate(Aggregate):
    def compute(self, values: Sequence[Any]) -> Any:
        if not values:
            return None
        return statistics.pstdev([float(v) for v in values])


class ChecksumAggAggregate(Aggregate):
    """CHECKSUM_AGG: XOR over the integer values of the group."""

    def compute(self, values: Sequence[Any]) -> Any:
        if not values:
            return None
        acc = 0
        for v in values:
            acc ^= int(v)
        return acc
