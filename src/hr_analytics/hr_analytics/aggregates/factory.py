from __future__ import annotations

from dataclasses import dataclass

from ..core.constants import DEFAULT_STRING_AGG_SEPARATOR
from ..core.enums import AggregateFunction
from ..core.exceptions import ValidationError
from .base import Aggregate
from .functions import (
    AvgAggregate,
    ChecksumAggAggregate,
    CountAggregate,
    CountBigAggregate,
    MaxAggregate,
    MinAggregate,
    StdevAggregate,
    StdevPAggregate,
    StringAggAggregate,
    SumAggregate,
    VarAggregate,
    VarPAggregate,
)


@dataclass
class AggregateFactory:
    """Factory Pattern: choose the aggregate implementation for a function name."""

    def create(self, function: AggregateFunction, *, separator: str = DEFAULT_STRING_AGG_SEPARATOR) -> Aggregate:
        try:
            function = AggregateFunction(function)
        except ValueError as e:
            raise ValidationError(f"unsupported aggregate function: {function!r}") from e

        if function == AggregateFunction.STRING_AGG:
            return StringAggAggregate(separator)

        simple = {
            AggregateFunction.COUNT: CountAggregate,
            AggregateFunction.COUNT_BIG: CountBigAggregate,
            AggregateFunction.SUM: SumAggregate,
            AggregateFunction.AVG: AvgAggregate,
            AggregateFunction.MIN: MinAggregate,
            AggregateFunction.MAX: MaxAggregate,
            AggregateFunction.VAR: VarAggregate,
            AggregateFunction.VARP: VarPAggregate,
            AggregateFunction.STDEV: StdevAggregate,
            AggregateFunction.STDEVP: StdevPAggregate,
            AggregateFunction.CHECKSUM_AGG: ChecksumAggAggregate,
        }
        return simple[function]()
