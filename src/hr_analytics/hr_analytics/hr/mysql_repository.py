from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, to_decimal
from .model import (
    Department,
    EmployeeReportRow,
    EmployeeSkill,
    PerformanceReportRow,
    ProjectReportRow,
)
from .repository import HRRepository


class MySQLHRRepository(HRRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_departments(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT department_id, department_name, location_id FROM departments ORDER BY department_id"
            )
            rows = fetchall(cur)
            return [
                Department(
                    department_id=int(r["department_id"]),
                    department_name=r["department_name"],
                    location_id=r.get("location_id"),
                )
                for r in rows
            ]

    def list_employee_rows(self, *, department_id: Optional[int] = None) -> Sequence[EmployeeReportRow]:
        sql = """
            SELECT e.employee_id, e.first_name, e.last_name, e.hire_date, e.department_id,
                   d.department_name, e.salary, e.job_title, e.phone
            FROM emp_details e
            JOIN departments d ON e.department_id = d.department_id
        """
        params: list = []
        if department_id is not None:
            sql += " WHERE e.department_id=%s"
            params.append(department_id)
        sql += " ORDER BY e.employee_id"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            rows = fetchall(cur)
            return [
                EmployeeReportRow(
                    employee_id=int(r["employee_id"]),
                    first_name=r["first_name"],
                    last_name=r["last_name"],
                    hire_date=r["hire_date"],
                    department_id=r.get("department_id"),
                    department_name=r.get("department_name"),
                    salary=to_decimal(r.get("salary")),
                    job_title=r.get("job_title"),
                    phone=r.get("phone"),
                )
                for r in rows
            ]

    def list_project_rows(self) -> Sequence[ProjectReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT p.project_id, p.project_name, p.project_cost, p.start_date,
                       p.employee_id, d.department_name
                FROM employee_projects p
                JOIN emp_details e ON p.employee_id = e.employee_id
                JOIN departments d ON e.department_id = d.department_id
                ORDER BY p.project_id
                """
            )
            rows = fetchall(cur)
            return [
                ProjectReportRow(
                    project_id=int(r["project_id"]),
                    project_name=r["project_name"],
                    project_cost=to_decimal(r["project_cost"]),
                    start_date=r["start_date"],
                    employee_id=int(r["employee_id"]),
                    department_name=r["department_name"],
                )
                for r in rows
            ]

    def list_performance_rows(self, *, year: Optional[int] = None) -> Sequence[PerformanceReportRow]:
        sql = """
            SELECT p.employee_id, p.department_id, d.department_name, p.year, p.quarter,
                   p.sales_amount, p.projects_completed, p.customer_satisfaction
            FROM employee_performance p
            JOIN departments d ON p.department_id = d.department_id
        """
        params: list = []
        if year is not None:
            sql += " WHERE p.year=%s"
            params.append(int(year))
        sql += " ORDER BY p.performance_id"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            rows = fetchall(cur)
            return [
                PerformanceReportRow(
                    employee_id=int(r["employee_id"]),
                    department_id=int(r["department_id"]),
                    department_name=r["department_name"],
                    year=int(r["year"]),
                    quarter=int(r["quarter"]),
                    sales_amount=to_decimal(r["sales_amount"]),
                    projects_completed=int(r["projects_completed"]),
                    customer_satisfaction=to_decimal(r["customer_satisfaction"]),
                )
                for r in rows
            ]

    def list_skill_rows(self, *, skill_category: Optional[str] = None) -> Sequence[EmployeeSkill]:
        sql = """
            SELECT ranking_id, employee_id, skill_category, skill_level,
                   certification_score, years_experience
            FROM employee_rankings
        """
        params: list = []
        if skill_category is not None:
            sql += " WHERE skill_category=%s"
            params.append(skill_category)
        sql += " ORDER BY ranking_id"

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, tuple(params))
            rows = fetchall(cur)
            return [
                EmployeeSkill(
                    ranking_id=int(r["ranking_id"]),
                    employee_id=int(r["employee_id"]),
                    skill_category=r["skill_category"],
                    skill_level=int(r["skill_level"]),
                    certification_score=to_decimal(r["certification_score"]),
                    years_experience=int(r["years_experience"]),
                )
                for r in rows
            ]
