from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Department:
    """HR.Departments."""

    department_id: int
    department_name: str
    location_id: Optional[int] = None


@dataclass(frozen=True)
class Employee:
    """HR.EMP_Details."""

    employee_id: int
    first_name: str
    last_name: str
    email: Optional[str]
    hire_date: date
    department_id: Optional[int]
    salary: Optional[Decimal]
    job_title: Optional[str] = None
    phone: Optional[str] = None


@dataclass(frozen=True)
class EmployeeProject:
    """HR.EmployeeProjects."""

    project_id: int
    employee_id: int
    project_name: str
    project_cost: Decimal
    start_date: date


@dataclass(frozen=True)
class EmployeePerformance:
    """HR.EmployeePerformance: quarterly sales figures."""

    performance_id: int
    employee_id: int
    year: int
    quarter: int
    sales_amount: Decimal
    projects_completed: int
    customer_satisfaction: Decimal
    department_id: int


@dataclass(frozen=True)
class EmployeeSkill:
    """HR.EmployeeRankings: certification score per skill category."""

    ranking_id: int
    employee_id: int
    skill_category: str
    skill_level: int
    certification_score: Decimal
    years_experience: int


@dataclass(frozen=True)
class EmployeeReportRow:
    """Read-model: EMP_Details JOIN Departments."""

    employee_id: int
    first_name: str
    last_name: str
    hire_date: date
    department_id: Optional[int]
    department_name: Optional[str]
    salary: Optional[Decimal]
    job_title: Optional[str] = None
    phone: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


@dataclass(frozen=True)
class ProjectReportRow:
    """Read-model: EmployeeProjects JOIN EMP_Details JOIN Departments."""

    project_id: int
    project_name: str
    project_cost: Decimal
    start_date: date
    employee_id: int
    department_name: str


@dataclass(frozen=True)
class PerformanceReportRow:
    """Read-model: EmployeePerformance JOIN Departments."""

    employee_id: int
    department_id: int
    department_name: str
    year: int
    quarter: int
    sales_amount: Decimal
    projects_completed: int
    customer_satisfaction: Decimal
