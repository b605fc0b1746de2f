from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest

from src.hr_analytics.hr_analytics.database.mysql_base import to_decimal
from src.hr_analytics.hr_analytics.hr.memory_repository import InMemoryHRRepository, sample_employees
from src.hr_analytics.hr_analytics.hr.mysql_repository import MySQLHRRepository


class FakeCursor:
    def __init__(self, rows):
        self._rows = rows
        self.executed = []
        self.closed = False

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), params))

    def fetchall(self):
        return self._rows

    def close(self):
        self.closed = True


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False
        self.rolled_back = False
        self.closed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        self.rolled_back = True

    def close(self):
        self.closed = True


class FakeConnFactory:
    def __init__(self, rows):
        self.cursor = FakeCursor(rows)
        self.conn = FakeConnection(self.cursor)

    def connect(self):
        return self.conn


def test_memory_repository_joins_departments():
    repo = InMemoryHRRepository()

    rows = repo.list_employee_rows()
    assert [r.department_name for r in rows] == ["IT", "IT", "HR", "Finance"]
    assert rows[0].full_name == "John Doe"
    assert [r.employee_id for r in repo.list_employee_rows(department_id=1)] == [1000, 1001]
    assert len(repo.list_departments()) == 4


def test_memory_repository_drops_unmatched_department():
    employees = sample_employees()
    orphan = employees[0].__class__(
        9999, "No", "Dept", None, date(2022, 1, 1), 42, Decimal("1"), None
    )
    repo = InMemoryHRRepository(employees=employees + [orphan])

    assert 9999 not in {r.employee_id for r in repo.list_employee_rows()}


def test_memory_repository_filters():
    repo = InMemoryHRRepository()

    assert len(repo.list_performance_rows(year=2023)) == 8
    assert repo.list_performance_rows(year=2022) == []
    assert {s.skill_category for s in repo.list_skill_rows(skill_category="Management")} == {"Management"}
    assert [p.department_name for p in repo.list_project_rows()] == ["IT", "IT", "IT", "HR"]


def test_mysql_repository_maps_rows_and_passes_params():
    factory = FakeConnFactory(
        [
            {
                "employee_id": 1000,
                "department_id": 1,
                "department_name": "IT",
                "year": 2023,
                "quarter": 1,
                "sales_amount": "150000.00",
                "projects_completed": 5,
                "customer_satisfaction": b"4.80",
            }
        ]
    )

    rows = MySQLHRRepository(factory).list_performance_rows(year=2023)

    assert rows[0].sales_amount == Decimal("150000.00")
    assert rows[0].customer_satisfaction == Decimal("4.80")
    sql, params = factory.cursor.executed[0]
    assert "WHERE p.year=%s" in sql
    assert params == (2023,)
    assert factory.conn.committed and factory.conn.closed and factory.cursor.closed


def test_mysql_repository_rolls_back_on_error():
    factory = FakeConnFactory([{"department_id": None, "department_name": "IT"}])

    with pytest.raises(TypeError):
        MySQLHRRepository(factory).list_departments()

    assert factory.conn.rolled_back
    assert not factory.conn.committed
    assert factory.conn.closed


def test_to_decimal_normalizes_connector_values():
    assert to_decimal(None) is None
    assert to_decimal(1.5) == Decimal("1.5")
    assert to_decimal(3) == Decimal(3)
    with pytest.raises(TypeError):
        to_decimal(object())
