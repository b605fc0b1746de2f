from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from ..common.accessors import Accessor, make_accessor
from ..common.validators import require_non_empty
from ..core.constants import DEFAULT_STRING_AGG_SEPARATOR
from ..core.enums import AggregateFunction
from ..core.exceptions import ValidationError
from .base import Aggregate
from .factory import AggregateFactory

_ROW_COUNTERS = {AggregateFunction.COUNT, AggregateFunction.COUNT_BIG}


@dataclass(frozen=True)
class Measure:
    """An aggregate column: `SUM(e.Salary) AS TotalSalary`.

    `column=None` means `*` and is only valid for COUNT / COUNT_BIG.
    NULL inputs are ignored; `distinct=True` de-duplicates before aggregating.
    """

    alias: str
    function: AggregateFunction
    column: Optional[Accessor] = None
    distinct: bool = False
    separator: str = DEFAULT_STRING_AGG_SEPARATOR
    _aggregate: Aggregate = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        require_non_empty(self.alias, "measure alias")
        function = AggregateFunction(self.function)
        object.__setattr__(self, "function", function)

        if self.column is None and function not in _ROW_COUNTERS:
            raise ValidationError(f"{function.value}(*) is not valid; a column is required")
        if self.column is None and self.distinct:
            raise ValidationError("COUNT(DISTINCT *) is not valid")
        if self.distinct and function == AggregateFunction.STRING_AGG:
            raise ValidationError("STRING_AGG does not support DISTINCT")

        object.__setattr__(self, "_aggregate", AggregateFactory().create(function, separator=self.separator))

    def evaluate(self, rows: Sequence[Any]) -> Any:
        if self.column is None:
            return len(rows)

        getter = make_accessor(self.column)
        values = [v for v in (getter(r) for r in rows) if v is not None]
        if self.distinct:
            seen: set = set()
            unique: list = []
            for v in values:
                if v not in seen:
                    seen.add(v)
                    unique.append(v)
            values = unique
        return self._aggregate.compute(values)


def count_star(alias: str = "count") -> Measure:
    return Measure(alias=alias, function=AggregateFunction.COUNT)
