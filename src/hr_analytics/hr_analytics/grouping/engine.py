from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional, Sequence

from ..aggregates.measure import Measure
from ..common.validators import require_unique
from ..core.enums import GroupingMode
from ..core.exceptions import ValidationError
from .bitmask import grouping_id
from .dimension import Dimension
from .labels import HierarchicalLabeler, Labeler
from .model import GroupedRow
from .sets import GroupingSet, expand

logger = logging.getLogger(__name__)

Having = Callable[[GroupedRow], bool]


def _value_sort_key(value: Any) -> tuple:
    # NULLs sort first, as the engine orders them ascending.
    return (value is not None, value)


@dataclass
class GroupingEngine:
    """In-process GROUP BY [ROLLUP | CUBE | GROUPING SETS].

    Output order is hierarchical: within each grouping column values keep their
    first-appearance order (or value order), and a rolled-up column sorts after
    every concrete value, so detail rows precede their subtotal and the grand
    total comes last.
    """

    default_labeler: Optional[Labeler] = None

    def aggregate(
        self,
        rows: Iterable[Any],
        *,
        dimensions: Sequence[Dimension],
        measures: Sequence[Measure],
        mode: GroupingMode = GroupingMode.ROLLUP,
        sets: Optional[Iterable[Iterable[str]]] = None,
        having: Optional[Having] = None,
        labeler: Optional[Labeler] = None,
        order_by_value: bool = False,
    ) -> list[GroupedRow]:
        rows = list(rows)
        names = [d.name for d in dimensions]
        require_unique([m.alias for m in measures], "measure alias")
        clash = set(names) & {m.alias for m in measures}
        if clash:
            raise ValidationError(f"measure alias clashes with dimension: {sorted(clash)}")

        grouping_sets = expand(mode, names, sets)
        labeler = labeler or self.default_labeler or HierarchicalLabeler()

        getters = {d.name: d.getter for d in dimensions}
        row_keys = [{name: getters[name](r) for name in names} for r in rows]
        ranks = self._value_ranks(names, row_keys, order_by_value=order_by_value)

        out: list[GroupedRow] = []
        for gs in grouping_sets:
            gid = grouping_id(names, gs)
            for key_values, members in self._partition(gs, rows, row_keys).items():
                keys = {name: None for name in names}
                keys.update(zip(gs, key_values))
                grouped = GroupedRow(
                    grouping_set=gs,
                    grouping_id=gid,
                    keys=keys,
                    values={m.alias: m.evaluate(members) for m in measures},
                    label=labeler.label(dimensions=dimensions, keys=keys, grouping_id=gid),
                )
                if having is not None and not having(grouped):
                    continue
                out.append(grouped)

        out.sort(key=lambda g: self._hierarchy_key(names, g, ranks))
        logger.debug(
            "Grouped %d rows by %s(%s) into %d output rows",
            len(rows),
            GroupingMode(mode).value,
            ", ".join(names),
            len(out),
        )
        return out

    @staticmethod
    def _partition(gs: GroupingSet, rows: list, row_keys: list[dict]) -> dict[tuple, list]:
        groups: dict[tuple, list] = {}
        for row, keys in zip(rows, row_keys):
            groups.setdefault(tuple(keys[name] for name in gs), []).append(row)
        if not gs and not groups:
            # GROUP BY () over no rows still yields one row.
            groups[()] = []
        return groups

    @staticmethod
    def _value_ranks(names: list[str], row_keys: list[dict], *, order_by_value: bool) -> dict[str, dict]:
        ranks: dict[str, dict] = {}
        for name in names:
            seen: dict = {}
            for keys in row_keys:
                seen.setdefault(keys[name], len(seen))
            if order_by_value:
                ordered = sorted(seen, key=_value_sort_key)
                seen = {v: i for i, v in enumerate(ordered)}
            ranks[name] = seen
        return ranks

    @staticmethod
    def _hierarchy_key(names: list[str], row: GroupedRow, ranks: dict[str, dict]) -> tuple:
        key = []
        for name in names:
            if row.grouping(name):
                key.append((1, 0))
            else:
                key.append((0, ranks[name][row.keys[name]]))
        return tuple(key)
