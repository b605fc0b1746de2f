from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from typing import Optional, Sequence

from .model import (
    Department,
    Employee,
    EmployeePerformance,
    EmployeeProject,
    EmployeeReportRow,
    EmployeeSkill,
    PerformanceReportRow,
    ProjectReportRow,
)
from .repository import HRRepository


def sample_departments() -> list[Department]:
    return [
        Department(department_id=1, department_name="IT", location_id=1),
        Department(department_id=2, department_name="HR", location_id=1),
        Department(department_id=3, department_name="Finance", location_id=2),
        Department(department_id=4, department_name="Marketing", location_id=2),
    ]


def sample_employees() -> list[Employee]:
    return [
        Employee(1000, "John", "Doe", "john.doe@email.com", date(2020, 1, 15), 1, Decimal("75000.00"), "Developer", "555-0100"),
        Employee(1001, "Jane", "Smith", "jane.smith@email.com", date(2020, 2, 20), 1, Decimal("85000.00"), "Analyst"),
        Employee(1002, "Bob", "Johnson", "bob.johnson@email.com", date(2021, 3, 10), 2, Decimal("65000.00"), "Recruiter"),
        Employee(1003, "Alice", "Brown", "alice.brown@email.com", date(2021, 4, 5), 3, Decimal("95000.00"), "Analyst"),
    ]


def sample_projects() -> list[EmployeeProject]:
    return [
        EmployeeProject(1, 1000, "Project A", Decimal("50000.00"), date(2023, 1, 1)),
        EmployeeProject(2, 1001, "Project B", Decimal("75000.00"), date(2023, 2, 1)),
        EmployeeProject(3, 1000, "Project C", Decimal("60000.00"), date(2023, 3, 1)),
        EmployeeProject(4, 1002, "Project D", Decimal("45000.00"), date(2023, 4, 1)),
    ]


def sample_performance() -> list[EmployeePerformance]:
    data = [
        (1000, 2023, 1, "150000.00", 5, "4.8", 1),
        (1001, 2023, 1, "175000.00", 4, "4.9", 1),
        (1002, 2023, 1, "125000.00", 6, "4.7", 2),
        (1003, 2023, 1, "175000.00", 3, "4.9", 2),
        (1000, 2023, 2, "165000.00", 4, "4.7", 1),
        (1001, 2023, 2, "180000.00", 5, "4.8", 1),
        (1002, 2023, 2, "145000.00", 5, "4.8", 2),
        (1003, 2023, 2, "175000.00", 4, "4.9", 2),
    ]
    return [
        EmployeePerformance(
            performance_id=i,
            employee_id=emp,
            year=year,
            quarter=quarter,
            sales_amount=Decimal(sales),
            projects_completed=projects,
            customer_satisfaction=Decimal(csat),
            department_id=dept,
        )
        for i, (emp, year, quarter, sales, projects, csat, dept) in enumerate(data, start=1)
    ]


def sample_skills() -> list[EmployeeSkill]:
    data = [
        (1000, "Technical", 4, "85.5", 5),
        (1001, "Technical", 5, "92.0", 7),
        (1002, "Technical", 3, "78.5", 3),
        (1003, "Technical", 5, "92.0", 6),
        (1000, "Management", 3, "88.0", 2),
        (1001, "Management", 4, "90.5", 4),
        (1002, "Management", 2, "75.0", 1),
        (1003, "Management", 4, "90.5", 3),
    ]
    return [
        EmployeeSkill(
            ranking_id=i,
            employee_id=emp,
            skill_category=category,
            skill_level=level,
            certification_score=Decimal(score),
            years_experience=years,
        )
        for i, (emp, category, level, score, years) in enumerate(data, start=1)
    ]


@dataclass
class InMemoryHRRepository(HRRepository):
    """HRSystem sample data held in memory.

    Joins mirror the INNER JOINs of the report queries: rows whose foreign key
    has no match are dropped.
    """

    departments: list[Department] = field(default_factory=sample_departments)
    employees: list[Employee] = field(default_factory=sample_employees)
    projects: list[EmployeeProject] = field(default_factory=sample_projects)
    performance: list[EmployeePerformance] = field(default_factory=sample_performance)
    skills: list[EmployeeSkill] = field(default_factory=sample_skills)

    def _dept_names(self) -> dict[int, str]:
        return {d.department_id: d.department_name for d in self.departments}

    def list_departments(self) -> Sequence[Department]:
        return list(self.departments)

    def list_employee_rows(self, *, department_id: Optional[int] = None) -> Sequence[EmployeeReportRow]:
        names = self._dept_names()
        out: list[EmployeeReportRow] = []
        for e in self.employees:
            if e.department_id not in names:
                continue
            if department_id is not None and e.department_id != department_id:
                continue
            out.append(
                EmployeeReportRow(
                    employee_id=e.employee_id,
                    first_name=e.first_name,
                    last_name=e.last_name,
                    hire_date=e.hire_date,
                    department_id=e.department_id,
                    department_name=names[e.department_id],
                    salary=e.salary,
                    job_title=e.job_title,
                    phone=e.phone,
                )
            )
        return out

    def list_project_rows(self) -> Sequence[ProjectReportRow]:
        names = self._dept_names()
        employees = {e.employee_id: e for e in self.employees}
        out: list[ProjectReportRow] = []
        for p in self.projects:
            emp = employees.get(p.employee_id)
            if not emp or emp.department_id not in names:
                continue
            out.append(
                ProjectReportRow(
                    project_id=p.project_id,
                    project_name=p.project_name,
                    project_cost=p.project_cost,
                    start_date=p.start_date,
                    employee_id=p.employee_id,
                    department_name=names[emp.department_id],
                )
            )
        return out

    def list_performance_rows(self, *, year: Optional[int] = None) -> Sequence[PerformanceReportRow]:
        names = self._dept_names()
        out: list[PerformanceReportRow] = []
        for p in self.performance:
            if p.department_id not in names:
                continue
            if year is not None and p.year != year:
                continue
            out.append(
                PerformanceReportRow(
                    employee_id=p.employee_id,
                    department_id=p.department_id,
                    department_name=names[p.department_id],
                    year=p.year,
                    quarter=p.quarter,
                    sales_amount=p.sales_amount,
                    projects_completed=p.projects_completed,
                    customer_satisfaction=p.customer_satisfaction,
                )
            )
        return out

    def list_skill_rows(self, *, skill_category: Optional[str] = None) -> Sequence[EmployeeSkill]:
        if skill_category is None:
            return list(self.skills)
        return [s for s in self.skills if s.skill_category == skill_category]
