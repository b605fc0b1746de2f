from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional, Sequence

from ..core.constants import DEFAULT_GRAND_TOTAL_LABEL, DEFAULT_SUBTOTAL_SUFFIX
from .bitmask import full_mask, rolled_up_names
from .dimension import Dimension


class Labeler(ABC):
    """Strategy Pattern: turn a grouping level into a display label."""

    @abstractmethod
    def label(self, *, dimensions: Sequence[Dimension], keys: Mapping[str, Any], grouping_id: int) -> Optional[str]:
        raise NotImplementedError


class HierarchicalLabeler(Labeler):
    """CASE GROUPING_ID(...) labels for ROLLUP reports.

    - every column rolled up           -> grand total label
    - a single column left grouped     -> "<value> Total"
    - otherwise                        -> grouped values joined, e.g. "IT - 2023 Q1"
    """

    def __init__(
        self,
        *,
        grand_total_label: str = DEFAULT_GRAND_TOTAL_LABEL,
        subtotal_suffix: str = DEFAULT_SUBTOTAL_SUFFIX,
    ):
        self._grand_total_label = grand_total_label
        self._subtotal_suffix = subtotal_suffix

    def label(self, *, dimensions: Sequence[Dimension], keys: Mapping[str, Any], grouping_id: int) -> Optional[str]:
        n = len(dimensions)
        if grouping_id == full_mask(n):
            return self._grand_total_label

        rolled = set(rolled_up_names([d.name for d in dimensions], grouping_id))
        grouped = [d for d in dimensions if d.name not in rolled]
        if len(grouped) == 1 and n > 1:
            only = grouped[0]
            return only.render(keys[only.name]) + self._subtotal_suffix

        parts: list[str] = []
        for d in grouped:
            if parts:
                parts.append(d.joiner)
            parts.append(d.render(keys[d.name]))
        return "".join(parts)


class ColumnwiseLabeler(Labeler):
    """ISNULL(col, 'All ...') per column, for CUBE and GROUPING SETS output."""

    def __init__(self, *, separator: str = " / "):
        self._separator = separator

    def display_values(
        self, *, dimensions: Sequence[Dimension], keys: Mapping[str, Any], grouping_id: int
    ) -> dict[str, str]:
        rolled = set(rolled_up_names([d.name for d in dimensions], grouping_id))
        return {d.name: d.rolled_up_label if d.name in rolled else d.render(keys[d.name]) for d in dimensions}

    def label(self, *, dimensions: Sequence[Dimension], keys: Mapping[str, Any], grouping_id: int) -> Optional[str]:
        values = self.display_values(dimensions=dimensions, keys=keys, grouping_id=grouping_id)
        return self._separator.join(values[d.name] for d in dimensions)
