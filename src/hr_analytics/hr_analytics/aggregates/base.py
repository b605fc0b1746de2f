from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Sequence


class Aggregate(ABC):
    """Aggregate function interface (Strategy Pattern).

    `compute` receives the non-NULL input values of one group.
    """

    @abstractmethod
    def compute(self, values: Sequence[Any]) -> Any:
        raise NotImplementedError
