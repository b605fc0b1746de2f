from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import (
    Department,
    EmployeeReportRow,
    EmployeeSkill,
    PerformanceReportRow,
    ProjectReportRow,
)


class HRRepository(Protocol):
    """Read-only access to the HRSystem sample tables.

    Note (DIP): the report service depends on this interface, not on a concrete DB.
    """

    def list_departments(self) -> Sequence[Department]:
        raise NotImplementedError

    def list_employee_rows(self, *, department_id: Optional[int] = None) -> Sequence[EmployeeReportRow]:
        raise NotImplementedError

    def list_project_rows(self) -> Sequence[ProjectReportRow]:
        raise NotImplementedError

    def list_performance_rows(self, *, year: Optional[int] = None) -> Sequence[PerformanceReportRow]:
        raise NotImplementedError

    def list_skill_rows(self, *, skill_category: Optional[str] = None) -> Sequence[EmployeeSkill]:
        raise NotImplementedError
