from __future__ import annotations

import csv
import io

import pandas as pd

from .model import ReportData


def to_csv_bytes(report: ReportData) -> bytes:
    """Report rows as CSV (utf-8 with BOM so Excel opens it correctly)."""

    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=report.columns)
    writer.writeheader()
    for row in report.rows:
        writer.writerow({c: "" if row.get(c) is None else row.get(c) for c in report.columns})
    return out.getvalue().encode("utf-8-sig")


def to_excel_bytes(report: ReportData) -> bytes:
    """Report rows as an .xlsx workbook with a single sheet."""

    df = pd.DataFrame(report.rows, columns=report.columns)

    # Write the workbook in memory (nothing touches the disk).
    output = io.BytesIO()
    with pd.ExcelWriter(output, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=report.name[:31])
    return output.getvalue()
