"""Example: use the service layer directly (no Flask).

Prints every report over the bundled HRSystem sample data.
"""

from src.hr_analytics.hr_analytics.container import build_container


def main():
    container = build_container(data_source="memory")
    service = container.report_service
    for entry in service.available_reports():
        data = service.build(entry["name"])
        print(f"== {data.title}")
        print("  ".join(data.columns))
        for row in data.rows:
            print("  ".join("" if row[c] is None else str(row[c]) for c in data.columns))
        print()


if __name__ == "__main__":
    main()
