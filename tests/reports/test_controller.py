import pytest

from src.hr_analytics.hr_analytics.main import create_app


@pytest.fixture()
def client():
    app = create_app("config.testing")
    return app.test_client()


def test_health_reports_data_source(client):
    res = client.get("/health")

    assert res.status_code == 200
    assert res.get_json() == {"success": True, "data_source": "memory"}


def test_reports_index(client):
    body = client.get("/reports").get_json()

    assert body["success"] is True
    assert {"name", "title"} <= set(body["reports"][0])


def test_report_json(client):
    body = client.get("/reports/headcount_by_department_year").get_json()

    assert body["success"] is True
    assert body["columns"][0] == "group_level"
    assert body["rows"][0]["group_level"] == "IT - 2020"
    assert body["rows"][-1]["group_level"] == "Grand Total"


def test_report_query_params_are_passed(client):
    body = client.get("/reports/salary_statistics?min_employees=1").get_json()

    assert len(body["rows"]) == 3


def test_unknown_report_is_404(client):
    res = client.get("/reports/nope")

    assert res.status_code == 404
    assert res.get_json()["success"] is False


@pytest.mark.parametrize(
    "url",
    [
        "/reports/sales_ranking?year=abc",
        "/reports/sales_ranking?year=--5",
        "/reports/sales_ranking?year=%C2%B2",
        "/reports/salary_statistics?min_employees=-",
        "/reports/sales_ranking?foo=1",
        "/reports/salary_by_department?year=2023",
    ],
)
def test_bad_params_are_400(client, url):
    assert client.get(url).status_code == 400


def test_csv_export_is_attachment(client):
    res = client.get("/reports/salary_by_department/export.csv")

    assert res.status_code == 200
    assert res.mimetype == "text/csv"
    assert "salary_by_department.csv" in res.headers["Content-Disposition"]
    assert res.data.decode("utf-8-sig").splitlines()[-1].startswith("All Departments,4,")


def test_xlsx_export_is_attachment(client):
    res = client.get("/reports/project_cost_rollup/export.xlsx")

    assert res.status_code == 200
    assert res.data[:2] == b"PK"
