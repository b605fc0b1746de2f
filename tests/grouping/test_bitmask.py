import pytest

from src.hr_analytics.hr_analytics.core.exceptions import ValidationError
from src.hr_analytics.hr_analytics.grouping.bitmask import (
    full_mask,
    grouping,
    grouping_id,
    rolled_up_names,
)
from src.hr_analytics.hr_analytics.grouping.sets import cube, rollup


def test_grouping_flags_rolled_up_column():
    assert grouping("dept", ("dept",)) == 0
    assert grouping("year", ("dept",)) == 1


def test_grouping_id_two_level_rollup():
    names = ["dept", "year"]
    assert [grouping_id(names, gs) for gs in rollup(names)] == [0, 1, 3]


def test_grouping_id_three_level_rollup():
    names = ["dept", "year", "quarter"]
    assert [grouping_id(names, gs) for gs in rollup(names)] == [0, 1, 3, 7]


def test_leftmost_column_is_most_significant_bit():
    assert grouping_id(["dept", "job"], ("job",)) == 2
    assert grouping_id(["job", "dept"], ("job",)) == 1


def test_rollup_masks_are_all_ones_suffixes():
    names = ["a", "b", "c", "d"]
    masks = [grouping_id(names, gs) for gs in rollup(names)]
    assert masks == [0, 1, 3, 7, 15]
    assert all(m & (m + 1) == 0 for m in masks)
    assert any(m & (m + 1) for m in (grouping_id(names, gs) for gs in cube(names)))


def test_full_mask_and_rolled_up_names():
    assert full_mask(3) == 7
    assert full_mask(0) == 0
    assert rolled_up_names(["dept", "year", "quarter"], 3) == ["year", "quarter"]


def test_grouping_id_rejects_more_than_32_columns():
    with pytest.raises(ValidationError):
        grouping_id([f"c{i}" for i in range(33)], ())
