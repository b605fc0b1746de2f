from src.hr_analytics.hr_analytics.grouping.dimension import Dimension
from src.hr_analytics.hr_analytics.grouping.labels import ColumnwiseLabeler, HierarchicalLabeler

DEPT = Dimension("dept", all_label="All Departments")
YEAR = Dimension("year")
QUARTER = Dimension("quarter", joiner=" Q")


def _label(labeler, dims, keys, gid):
    return labeler.label(dimensions=dims, keys=keys, grouping_id=gid)


def test_two_level_rollup_labels():
    labeler = HierarchicalLabeler()
    dims = [DEPT, YEAR]

    assert _label(labeler, dims, {"dept": "IT", "year": 2020}, 0) == "IT - 2020"
    assert _label(labeler, dims, {"dept": "IT", "year": None}, 1) == "IT Total"
    assert _label(labeler, dims, {"dept": None, "year": None}, 3) == "Grand Total"


def test_three_level_rollup_labels_with_quarter_joiner():
    labeler = HierarchicalLabeler(grand_total_label="All Projects")
    dims = [DEPT, YEAR, QUARTER]

    assert _label(labeler, dims, {"dept": "IT", "year": 2023, "quarter": 1}, 0) == "IT - 2023 Q1"
    assert _label(labeler, dims, {"dept": "IT", "year": 2023, "quarter": None}, 1) == "IT - 2023"
    assert _label(labeler, dims, {"dept": "IT", "year": None, "quarter": None}, 3) == "IT Total"
    assert _label(labeler, dims, {"dept": None, "year": None, "quarter": None}, 7) == "All Projects"


def test_single_column_rollup_has_no_total_suffix():
    labeler = HierarchicalLabeler(grand_total_label="All Departments")

    assert _label(labeler, [DEPT], {"dept": "HR"}, 0) == "HR"
    assert _label(labeler, [DEPT], {"dept": None}, 1) == "All Departments"


def test_real_null_value_uses_null_label():
    labeler = HierarchicalLabeler()
    dims = [Dimension("dept", null_label="(no department)"), YEAR]

    assert _label(labeler, dims, {"dept": None, "year": 2021}, 0) == "(no department) - 2021"


def test_columnwise_labels_replace_rolled_up_columns():
    labeler = ColumnwiseLabeler()
    dims = [DEPT, Dimension("job")]

    shown = labeler.display_values(dimensions=dims, keys={"dept": None, "job": "Analyst"}, grouping_id=2)
    assert shown == {"dept": "All Departments", "job": "Analyst"}
    assert _label(labeler, dims, {"dept": "IT", "job": None}, 1) == "IT / All job"


def test_null_department_keeps_null_label_in_subtotal():
    labeler = HierarchicalLabeler()
    dims = [DEPT, YEAR]

    assert _label(labeler, dims, {"dept": None, "year": 2020}, 0) == "NULL - 2020"
    assert _label(labeler, dims, {"dept": None, "year": None}, 1) == "NULL Total"
