"""GROUPING() and GROUPING_ID() over a grouping set.

GROUPING_ID(c1, ..., cn) concatenates the GROUPING() bits of its arguments,
c1 being the most significant bit:

    ROLLUP(Dept, Year)        -> (Dept, Year)=0, (Dept)=1, ()=3
    ROLLUP(Dept, Year, Qtr)   -> 0, 1, 3, 7
"""

from __future__ import annotations

from typing import Iterable, Sequence

from ..core.constants import MAX_GROUPING_COLUMNS
from ..core.exceptions import ValidationError


def grouping(name: str, grouping_set: Iterable[str]) -> int:
    """1 when `name` is aggregated away in `grouping_set`, else 0."""
    return 0 if name in set(grouping_set) else 1


def grouping_id(names: Sequence[str], grouping_set: Iterable[str]) -> int:
    if len(names) > MAX_GROUPING_COLUMNS:
        raise ValidationError(f"GROUPING_ID accepts at most {MAX_GROUPING_COLUMNS} columns")
    present = set(grouping_set)
    mask = 0
    for name in names:
        mask = (mask << 1) | (0 if name in present else 1)
    return mask


def full_mask(n: int) -> int:
    """Mask of the grand-total row for n columns."""
    return (1 << n) - 1


def rolled_up_names(names: Sequence[str], mask: int) -> list[str]:
    n = len(names)
    return [name for i, name in enumerate(names) if mask & (1 << (n - 1 - i))]

