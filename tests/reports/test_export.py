import io

import pandas as pd

from src.hr_analytics.hr_analytics.reports.export import to_csv_bytes, to_excel_bytes
from src.hr_analytics.hr_analytics.reports.model import ReportData

REPORT = ReportData(
    name="salary_by_department",
    title="Salary",
    columns=["department", "employee_count", "note"],
    rows=[
        {"department": "IT", "employee_count": 2, "note": None},
        {"department": "All Departments", "employee_count": 4, "note": "total"},
    ],
)


def test_csv_has_bom_header_and_blank_nulls():
    body = to_csv_bytes(REPORT)

    assert body.startswith(b"\xef\xbb\xbf")
    lines = body.decode("utf-8-sig").splitlines()
    assert lines == [
        "department,employee_count,note",
        "IT,2,",
        "All Departments,4,total",
    ]


def test_excel_workbook_reads_back():
    body = to_excel_bytes(REPORT)

    df = pd.read_excel(io.BytesIO(body), sheet_name="salary_by_department")
    assert list(df.columns) == ["department", "employee_count", "note"]
    assert df["department"].tolist() == ["IT", "All Departments"]
    assert df["employee_count"].tolist() == [2, 4]


def test_excel_sheet_name_is_truncated_to_31_chars():
    report = ReportData(name="x" * 40, title="", columns=["a"], rows=[{"a": 1}])

    xls = pd.ExcelFile(io.BytesIO(to_excel_bytes(report)))
    assert xls.sheet_names == ["x" * 31]
