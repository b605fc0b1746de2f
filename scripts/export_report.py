"""Write one report to a CSV or XLSX file.

Usage: python scripts/export_report.py <report_name> <output.csv|output.xlsx>
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from config import get_settings_module

from src.hr_analytics.hr_analytics.container import build_container
from src.hr_analytics.hr_analytics.reports.export import to_csv_bytes, to_excel_bytes


def main(argv: list[str]) -> None:
    if len(argv) != 2:
        raise SystemExit(__doc__)
    name, out = argv[0], Path(argv[1])

    settings = importlib.import_module(get_settings_module())
    container = build_container(
        db_config=dict(settings.DB_CONFIG),
        data_source=getattr(settings, "DATA_SOURCE", "memory"),
        grand_total_label=getattr(settings, "GRAND_TOTAL_LABEL", "Grand Total"),
    )
    data = container.report_service.build(name)

    if out.suffix.lower() == ".xlsx":
        out.write_bytes(to_excel_bytes(data))
    elif out.suffix.lower() == ".csv":
        out.write_bytes(to_csv_bytes(data))
    else:
        raise SystemExit("output must end with .csv or .xlsx")
    print(f"OK: {data.name} ({len(data.rows)} rows) -> {out}")


if __name__ == "__main__":
    main(sys.argv[1:])
