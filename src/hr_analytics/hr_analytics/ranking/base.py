from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Sequence


class RankingStrategy(ABC):
    """Strategy Pattern: number the rows of one ordered window partition.

    `order_keys` holds the ORDER BY values of each row, already sorted;
    equal tuples are ties.
    """

    @abstractmethod
    def assign(self, order_keys: Sequence[tuple]) -> list[int]:
        raise NotImplementedError
