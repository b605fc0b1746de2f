from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import RankingFunction
from ..core.exceptions import ValidationError
from .base import RankingStrategy
from .strategies import DenseRankStrategy, NtileStrategy, RankStrategy, RowNumberStrategy


@dataclass
class RankingStrategyFactory:
    """Factory Pattern: choose the ranking strategy for a window function."""

    def create(self, function: RankingFunction, *, buckets: Optional[int] = None) -> RankingStrategy:
        function = RankingFunction(function)
        if function == RankingFunction.NTILE:
            if buckets is None:
                raise ValidationError("NTILE requires a bucket count")
            return NtileStrategy(buckets)
        if buckets is not None:
            raise ValidationError(f"{function.value} does not take a bucket count")
        if function == RankingFunction.ROW_NUMBER:
            return RowNumberStrategy()
        if function == RankingFunction.RANK:
            return RankStrategy()
        return DenseRankStrategy()
