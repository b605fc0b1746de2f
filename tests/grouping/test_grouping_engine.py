from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

import pytest

from src.hr_analytics.hr_analytics.aggregates.measure import Measure, count_star
from src.hr_analytics.hr_analytics.core.enums import AggregateFunction, GroupingMode
from src.hr_analytics.hr_analytics.core.exceptions import ValidationError
from src.hr_analytics.hr_analytics.grouping.dimension import Dimension
from src.hr_analytics.hr_analytics.grouping.engine import GroupingEngine


@dataclass(frozen=True)
class Row:
    dept: Optional[str]
    year: int
    salary: Decimal


ROWS = [
    Row("IT", 2020, Decimal("75000")),
    Row("IT", 2020, Decimal("85000")),
    Row("HR", 2021, Decimal("65000")),
    Row("IT", 2021, Decimal("90000")),
]

DIMS = [Dimension("dept"), Dimension("year")]
MEASURES = [count_star("n"), Measure("total", AggregateFunction.SUM, "salary")]


def test_rollup_orders_details_before_subtotals_and_grand_total_last():
    out = GroupingEngine().aggregate(ROWS, dimensions=DIMS, measures=MEASURES)

    assert [g.label for g in out] == [
        "IT - 2020",
        "IT - 2021",
        "IT Total",
        "HR - 2021",
        "HR Total",
        "Grand Total",
    ]
    assert [g.grouping_id for g in out] == [0, 0, 1, 0, 1, 3]


def test_subtotals_equal_sum_of_their_details():
    out = GroupingEngine().aggregate(ROWS, dimensions=DIMS, measures=MEASURES)
    by_label = {g.label: g for g in out}

    assert by_label["IT Total"]["total"] == by_label["IT - 2020"]["total"] + by_label["IT - 2021"]["total"]
    assert by_label["IT Total"]["n"] == 3
    assert by_label["Grand Total"]["total"] == Decimal("315000")
    assert by_label["Grand Total"].is_grand_total


def test_rolled_up_keys_are_none_and_grouping_tells_them_apart():
    rows = [Row(None, 2020, Decimal("10")), Row("IT", 2020, Decimal("20"))]
    out = GroupingEngine().aggregate(rows, dimensions=[Dimension("dept")], measures=MEASURES)

    real_null = [g for g in out if g.keys["dept"] is None and g.grouping("dept") == 0]
    rolled_up = [g for g in out if g.grouping("dept") == 1]
    assert len(real_null) == 1 and real_null[0]["total"] == Decimal("10")
    assert len(rolled_up) == 1 and rolled_up[0]["total"] == Decimal("30")


def test_cube_adds_subtotals_for_each_column_alone():
    out = GroupingEngine().aggregate(ROWS, dimensions=DIMS, measures=MEASURES, mode=GroupingMode.CUBE)

    year_only = [g for g in out if g.grouping_id == 2]
    assert [(g.keys["year"], g["n"]) for g in year_only] == [(2020, 2), (2021, 2)]
    assert out[-1].grouping_id == 3


def test_grouping_sets_only_produce_requested_levels():
    out = GroupingEngine().aggregate(
        ROWS,
        dimensions=DIMS,
        measures=MEASURES,
        mode=GroupingMode.GROUPING_SETS,
        sets=[("year",), ()],
    )

    assert sorted({g.grouping_id for g in out}) == [2, 3]


def test_having_filters_after_aggregation():
    out = GroupingEngine().aggregate(
        ROWS,
        dimensions=[Dimension("dept")],
        measures=MEASURES,
        mode=GroupingMode.GROUP_BY,
        having=lambda g: g["n"] > 1,
    )

    assert [g.keys["dept"] for g in out] == ["IT"]


def test_empty_input_still_yields_grand_total_row():
    out = GroupingEngine().aggregate([], dimensions=DIMS, measures=MEASURES)

    assert len(out) == 1
    assert out[0].is_grand_total
    assert out[0]["n"] == 0
    assert out[0]["total"] is None


def test_order_by_value_sorts_keys_instead_of_first_appearance():
    out = GroupingEngine().aggregate(
        ROWS,
        dimensions=[Dimension("dept")],
        measures=MEASURES,
        mode=GroupingMode.GROUP_BY,
        order_by_value=True,
    )

    assert [g.keys["dept"] for g in out] == ["HR", "IT"]


def test_measure_alias_may_not_shadow_dimension():
    with pytest.raises(ValidationError):
        GroupingEngine().aggregate(ROWS, dimensions=DIMS, measures=[count_star("dept")])


def test_dict_rows_and_callable_keys_are_supported():
    rows = [{"hired": "2020-01-15", "pay": 1}, {"hired": "2020-06-01", "pay": 2}]
    out = GroupingEngine().aggregate(
        rows,
        dimensions=[Dimension("hire_year", key=lambda r: int(r["hired"][:4]))],
        measures=[Measure("pay", AggregateFunction.SUM, "pay")],
    )

    assert [(g.label, g["pay"]) for g in out] == [("2020", 3), ("Grand Total", 3)]


def test_grouped_row_accessors():
    out = GroupingEngine().aggregate(ROWS, dimensions=DIMS, measures=MEASURES)
    detail, grand = out[0], out[-1]

    assert detail.is_detail and not grand.is_detail
    assert grand.keys == {"dept": None, "year": None}
    assert grand.values == {"n": 4, "total": Decimal("315000")}
    assert grand["total"] == Decimal("315000")
    with pytest.raises(KeyError):
        detail.grouping("salary")
