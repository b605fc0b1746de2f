from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional

from ..common.accessors import Accessor, make_accessor
from ..core.constants import DEFAULT_LABEL_JOINER


@dataclass(frozen=True)
class Dimension:
    """A GROUP BY column (or expression such as YEAR(HireDate)).

    `key` is a field name or a callable applied to each input row; it defaults
    to `name`. `fmt` renders the value inside labels and `joiner` precedes it
    when it is not the first value of a hierarchical label, so a quarter
    dimension can be declared with `fmt="{}"`, `joiner=" Q"` to produce
    "IT - 2023 Q1".
    """

    name: str
    key: Optional[Accessor] = None
    fmt: str = "{}"
    joiner: str = DEFAULT_LABEL_JOINER
    all_label: Optional[str] = None
    null_label: str = "NULL"

    @property
    def getter(self) -> Callable[[Any], Any]:
        return make_accessor(self.key if self.key is not None else self.name)

    def value(self, row: Any) -> Any:
        return self.getter(row)

    def render(self, value: Any) -> str:
        if value is None:
            return self.null_label
        return self.fmt.format(value)

    @property
    def rolled_up_label(self) -> str:
        return self.all_label if self.all_label is not None else f"All {self.name}"
