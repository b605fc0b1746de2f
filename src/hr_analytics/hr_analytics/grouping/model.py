from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


@dataclass(frozen=True)
class GroupedRow:
    """One output row of a grouped query.

    `keys` holds every dimension; rolled-up dimensions map to None, so use
    `grouping()` to tell them apart from real NULL values.
    """

    grouping_set: tuple[str, ...]
    grouping_id: int
    keys: dict[str, Any]
    values: dict[str, Any]
    label: Optional[str] = None

    def grouping(self, name: str) -> int:
        if name not in self.keys:
            raise KeyError(name)
        return 0 if name in self.grouping_set else 1

    @property
    def is_grand_total(self) -> bool:
        return not self.grouping_set

    @property
    def is_detail(self) -> bool:
        return self.grouping_id == 0

    def __getitem__(self, item: str) -> Any:
        if item in self.values:
            return self.values[item]
        return self.keys[item]
