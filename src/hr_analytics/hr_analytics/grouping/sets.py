from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..common.validators import require_unique
from ..core.constants import MAX_GROUPING_COLUMNS
from ..core.enums import GroupingMode
from ..core.exceptions import ValidationError

GroupingSet = tuple[str, ...]


def _check_names(names: Sequence[str]) -> list[str]:
    names = require_unique(names, "dimension")
    if len(names) > MAX_GROUPING_COLUMNS:
        raise ValidationError(f"at most {MAX_GROUPING_COLUMNS} grouping columns are supported")
    return names


def rollup(names: Sequence[str]) -> list[GroupingSet]:
    """ROLLUP(a, b, c) -> (a, b, c), (a, b), (a), ()."""
    names = _check_names(names)
    return [tuple(names[:k]) for k in range(len(names), -1, -1)]


def cube(names: Sequence[str]) -> list[GroupingSet]:
    """CUBE(a, b) -> (a, b), (a), (b), (); ordered by GROUPING_ID."""
    names = _check_names(names)
    n = len(names)
    out: list[GroupingSet] = []
    for mask in range(1 << n):
        out.append(tuple(name for i, name in enumerate(names) if not mask & (1 << (n - 1 - i))))
    return out


def grouping_sets(names: Sequence[str], sets: Iterable[Iterable[str]]) -> list[GroupingSet]:
    """Validate an explicit GROUPING SETS list against the declared dimensions.

    Members are re-ordered to declaration order; duplicate sets are dropped.
    """
    names = _check_names(names)
    known = set(names)
    seen: set[GroupingSet] = set()
    out: list[GroupingSet] = []
    for raw in sets:
        members = set(raw)
        unknown = members - known
        if unknown:
            raise ValidationError(f"unknown dimension in grouping set: {sorted(unknown)}")
        gs = tuple(name for name in names if name in members)
        if gs in seen:
            continue
        seen.add(gs)
        out.append(gs)
    if not out:
        raise ValidationError("GROUPING SETS requires at least one set")
    return out


def expand(
    mode: GroupingMode,
    names: Sequence[str],
    sets: Optional[Iterable[Iterable[str]]] = None,
) -> list[GroupingSet]:
    """Expand a GROUP BY clause into its grouping sets."""
    mode = GroupingMode(mode)
    if mode == GroupingMode.GROUPING_SETS:
        if sets is None:
            raise ValidationError("GROUPING_SETS mode requires explicit sets")
        return grouping_sets(names, sets)
    if sets is not None:
        raise ValidationError(f"explicit sets are only valid with GROUPING_SETS, not {mode.value}")
    if mode == GroupingMode.ROLLUP:
        return rollup(names)
    if mode == GroupingMode.CUBE:
        return cube(names)
    return [tuple(_check_names(names))]

