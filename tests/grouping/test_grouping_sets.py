import pytest

from src.hr_analytics.hr_analytics.core.enums import GroupingMode
from src.hr_analytics.hr_analytics.core.exceptions import ValidationError
from src.hr_analytics.hr_analytics.grouping.sets import cube, expand, grouping_sets, rollup


def test_rollup_drops_trailing_columns_one_by_one():
    assert rollup(["dept", "year", "quarter"]) == [
        ("dept", "year", "quarter"),
        ("dept", "year"),
        ("dept",),
        (),
    ]


def test_rollup_without_columns_is_grand_total_only():
    assert rollup([]) == [()]


def test_cube_lists_every_subset_in_grouping_id_order():
    assert cube(["dept", "job"]) == [("dept", "job"), ("dept",), ("job",), ()]
    assert len(cube(["a", "b", "c"])) == 8


def test_grouping_sets_reorders_members_and_drops_duplicates():
    sets = grouping_sets(["dept", "job"], [("job", "dept"), ("dept",), ("dept",), ()])
    assert sets == [("dept", "job"), ("dept",), ()]


def test_grouping_sets_rejects_unknown_dimension():
    with pytest.raises(ValidationError):
        grouping_sets(["dept"], [("salary",)])


def test_duplicate_dimension_names_are_rejected():
    with pytest.raises(ValidationError):
        rollup(["dept", "dept"])


def test_expand_requires_sets_only_for_grouping_sets():
    with pytest.raises(ValidationError):
        expand(GroupingMode.GROUPING_SETS, ["dept"])
    with pytest.raises(ValidationError):
        expand(GroupingMode.ROLLUP, ["dept"], sets=[("dept",)])


def test_expand_plain_group_by_is_single_set():
    assert expand(GroupingMode.GROUP_BY, ["dept", "job"]) == [("dept", "job")]


def test_more_than_32_columns_rejected():
    with pytest.raises(ValidationError):
        cube([f"c{i}" for i in range(33)])
