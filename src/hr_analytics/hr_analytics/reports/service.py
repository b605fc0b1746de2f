from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Optional

from ..aggregates.measure import Measure, count_star
from ..common.datetime_utils import quarter_of, year_of
from ..core.constants import (
    DEFAULT_GRAND_TOTAL_LABEL,
    DEFAULT_NTILE_BUCKETS,
    DEFAULT_SALES_YEAR,
)
from ..core.enums import AggregateFunction, GroupingMode, RankingFunction
from ..core.exceptions import ReportNotFoundError, ValidationError
from ..grouping.dimension import Dimension
from ..grouping.engine import GroupingEngine
from ..grouping.labels import ColumnwiseLabeler, HierarchicalLabeler
from ..hr.repository import HRRepository
from ..ranking.window import OrderBy, Window, compute_ranks
from .model import ReportData

logger = logging.getLogger(__name__)

DEPARTMENT = Dimension("department", key="department_name", all_label="All Departments")
JOB = Dimension("job", key="job_title", all_label="All Jobs")


class HRReportService:
    """Use case: build the HRSystem aggregation and ranking reports."""

    def __init__(
        self,
        repo: HRRepository,
        *,
        engine: Optional[GroupingEngine] = None,
        grand_total_label: str = DEFAULT_GRAND_TOTAL_LABEL,
    ):
        self._repo = repo
        self._engine = engine or GroupingEngine()
        self._grand_total_label = grand_total_label
        self._reports: dict[str, tuple[str, Callable[..., ReportData]]] = {
            "salary_by_department": ("Salary budget by department with grand total", self.salary_by_department),
            "headcount_by_department_year": ("Headcount by department and hire year", self.headcount_by_department_year),
            "project_cost_rollup": ("Project cost by department, year and quarter", self.project_cost_rollup),
            "department_job_cube": ("Headcount for every department/job combination", self.department_job_cube),
            "department_job_sets": ("Headcount by department/job and department", self.department_job_sets),
            "salary_statistics": ("Salary statistics for departments with several employees", self.salary_statistics),
            "sales_ranking": ("Sales performance ranking", self.sales_ranking),
            "skill_ranking": ("Certification score ranking per skill category", self.skill_ranking),
        }

    def available_reports(self) -> list[dict]:
        return [{"name": name, "title": title} for name, (title, _) in self._reports.items()]

    def build(self, name: str, **params: Any) -> ReportData:
        entry = self._reports.get(name)
        if not entry:
            raise ReportNotFoundError(f"unknown report: {name}")
        builder = entry[1]
        unknown = set(params) - set(inspect.signature(builder).parameters)
        if unknown:
            raise ValidationError(f"unsupported parameters for {name}: {sorted(unknown)}")
        logger.debug("Building report %s params=%s", name, params)
        return builder(**params)

    def _title(self, name: str) -> str:
        return self._reports[name][0]

    # ----- GROUPING / GROUPING_ID reports -----

    def salary_by_department(self) -> ReportData:
        """GROUP BY ROLLUP(DepartmentName) with GROUPING() = 1 as 'All Departments'."""

        grouped = self._engine.aggregate(
            self._repo.list_employee_rows(),
            dimensions=[DEPARTMENT],
            measures=[
                count_star("employee_count"),
                Measure("total_salary", AggregateFunction.SUM, "salary"),
            ],
            mode=GroupingMode.ROLLUP,
            labeler=HierarchicalLabeler(grand_total_label=DEPARTMENT.rolled_up_label),
        )
        rows = [
            {
                "department": g.label,
                "employee_count": g["employee_count"],
                "total_salary": g["total_salary"],
                "is_department_total": g.grouping("department"),
            }
            for g in grouped
        ]
        return ReportData(
            name="salary_by_department",
            title=self._title("salary_by_department"),
            columns=["department", "employee_count", "total_salary", "is_department_total"],
            rows=rows,
        )

    def headcount_by_department_year(self) -> ReportData:
        grouped = self._engine.aggregate(
            self._repo.list_employee_rows(),
            dimensions=[DEPARTMENT, Dimension("hire_year", key=lambda r: year_of(r.hire_date))],
            measures=[
                count_star("employee_count"),
                Measure("total_salary", AggregateFunction.SUM, "salary"),
            ],
            mode=GroupingMode.ROLLUP,
            labeler=HierarchicalLabeler(grand_total_label=self._grand_total_label),
        )
        rows = [
            {
                "group_level": g.label,
                "employee_count": g["employee_count"],
                "total_salary": g["total_salary"],
                "grouping_id": g.grouping_id,
            }
            for g in grouped
        ]
        return ReportData(
            name="headcount_by_department_year",
            title=self._title("headcount_by_department_year"),
            columns=["group_level", "employee_count", "total_salary", "grouping_id"],
            rows=rows,
        )

    def project_cost_rollup(self) -> ReportData:
        grouped = self._engine.aggregate(
            self._repo.list_project_rows(),
            dimensions=[
                DEPARTMENT,
                Dimension("start_year", key=lambda r: year_of(r.start_date)),
                Dimension("start_quarter", key=lambda r: quarter_of(r.start_date), joiner=" Q"),
            ],
            measures=[
                count_star("project_count"),
                Measure("total_cost", AggregateFunction.SUM, "project_cost"),
            ],
            mode=GroupingMode.ROLLUP,
            labeler=HierarchicalLabeler(grand_total_label="All Projects"),
        )
        rows = [
            {
                "group_level": g.label,
                "project_count": g["project_count"],
                "total_cost": g["total_cost"],
                "grouping_id": g.grouping_id,
            }
            for g in grouped
        ]
        return ReportData(
            name="project_cost_rollup",
            title=self._title("project_cost_rollup"),
            columns=["group_level", "project_count", "total_cost", "grouping_id"],
            rows=rows,
        )

    def department_job_cube(self) -> ReportData:
        labeler = ColumnwiseLabeler()
        dims = [DEPARTMENT, JOB]
        grouped = self._engine.aggregate(
            self._repo.list_employee_rows(),
            dimensions=dims,
            measures=[
                count_star("employee_count"),
                Measure("avg_salary", AggregateFunction.AVG, "salary"),
            ],
            mode=GroupingMode.CUBE,
            labeler=labeler,
        )
        rows = []
        for g in grouped:
            display = labeler.display_values(dimensions=dims, keys=g.keys, grouping_id=g.grouping_id)
            rows.append(
                {
                    "department": display["department"],
                    "job": display["job"],
                    "employee_count": g["employee_count"],
                    "avg_salary": g["avg_salary"],
                }
            )
        return ReportData(
            name="department_job_cube",
            title=self._title("department_job_cube"),
            columns=["department", "job", "employee_count", "avg_salary"],
            rows=rows,
        )

    def department_job_sets(self) -> ReportData:
        labeler = ColumnwiseLabeler()
        dims = [DEPARTMENT, JOB]
        grouped = self._engine.aggregate(
            self._repo.list_employee_rows(),
            dimensions=dims,
            measures=[count_star("employee_count")],
            mode=GroupingMode.GROUPING_SETS,
            sets=[("department", "job"), ("department",), ()],
            labeler=labeler,
        )
        rows = []
        for g in grouped:
            display = labeler.display_values(dimensions=dims, keys=g.keys, grouping_id=g.grouping_id)
            rows.append(
                {
                    "department": display["department"],
                    "job": display["job"],
                    "employee_count": g["employee_count"],
                    "is_department_total": g.grouping("department"),
                    "is_job_total": g.grouping("job"),
                }
            )
        return ReportData(
            name="department_job_sets",
            title=self._title("department_job_sets"),
            columns=["department", "job", "employee_count", "is_department_total", "is_job_total"],
            rows=rows,
        )

    def salary_statistics(self, *, min_employees: int = 2) -> ReportData:
        """Per-department statistics; HAVING COUNT(*) >= min_employees."""

        grouped = self._engine.aggregate(
            self._repo.list_employee_rows(),
            dimensions=[DEPARTMENT],
            measures=[
                count_star("employee_count"),
                Measure("employee_count_big", AggregateFunction.COUNT_BIG),
                Measure("total_salary", AggregateFunction.SUM, "salary"),
                Measure("average_salary", AggregateFunction.AVG, "salary"),
                Measure("min_salary", AggregateFunction.MIN, "salary"),
                Measure("max_salary", AggregateFunction.MAX, "salary"),
                Measure("salary_variance", AggregateFunction.VAR, "salary"),
                Measure("salary_pop_variance", AggregateFunction.VARP, "salary"),
                Measure("salary_std_dev", AggregateFunction.STDEV, "salary"),
                Measure("salary_pop_std_dev", AggregateFunction.STDEVP, "salary"),
                Measure(
                    "salary_checksum",
                    AggregateFunction.CHECKSUM_AGG,
                    lambda r: int(r.salary) if r.salary is not None else None,
                ),
                Measure("employee_first_names", AggregateFunction.STRING_AGG, "first_name"),
                Measure("employee_names", AggregateFunction.STRING_AGG, lambda r: r.full_name),
            ],
            mode=GroupingMode.GROUP_BY,
            having=lambda g: g["employee_count"] >= min_employees,
        )
        columns = [
            "department",
            "employee_count",
            "employee_count_big",
            "total_salary",
            "average_salary",
            "min_salary",
            "max_salary",
            "salary_range",
            "salary_variance",
            "salary_pop_variance",
            "salary_std_dev",
            "salary_pop_std_dev",
            "salary_checksum",
            "employee_first_names",
            "employee_names",
        ]
        rows = []
        for g in grouped:
            row = {"department": g.keys["department"], **g.values}
            row["salary_range"] = (
                g["max_salary"] - g["min_salary"] if g["max_salary"] is not None else None
            )
            rows.append({c: row[c] for c in columns})
        return ReportData(
            name="salary_statistics",
            title=self._title("salary_statistics"),
            columns=columns,
            rows=rows,
        )

    # ----- ranking reports -----

    def sales_ranking(self, *, year: int = DEFAULT_SALES_YEAR) -> ReportData:
        perf = list(self._repo.list_performance_rows(year=year))
        by_sales = Window(order_by=(OrderBy("sales_amount", descending=True),))

        row_number = compute_ranks(perf, window=by_sales, function=RankingFunction.ROW_NUMBER)
        quarterly = compute_ranks(
            perf,
            window=Window(partition_by=("quarter",), order_by=by_sales.order_by),
            function=RankingFunction.ROW_NUMBER,
        )
        rank = compute_ranks(perf, window=by_sales, function=RankingFunction.RANK)
        dense = compute_ranks(perf, window=by_sales, function=RankingFunction.DENSE_RANK)
        quartile = compute_ranks(
            perf, window=by_sales, function=RankingFunction.NTILE, buckets=DEFAULT_NTILE_BUCKETS
        )
        project_rank = compute_ranks(
            perf,
            window=Window(order_by=(OrderBy("projects_completed", descending=True),)),
            function=RankingFunction.DENSE_RANK,
        )
        satisfaction_quartile = compute_ranks(
            perf,
            window=Window(order_by=(OrderBy("customer_satisfaction", descending=True),)),
            function=RankingFunction.NTILE,
            buckets=DEFAULT_NTILE_BUCKETS,
        )

        rows = [
            {
                "employee_id": p.employee_id,
                "department": p.department_name,
                "year": p.year,
                "quarter": p.quarter,
                "sales_amount": p.sales_amount,
                "projects_completed": p.projects_completed,
                "customer_satisfaction": p.customer_satisfaction,
                "sales_row_number": row_number[i],
                "quarterly_sales_rank": quarterly[i],
                "sales_rank": rank[i],
                "sales_dense_rank": dense[i],
                "sales_quartile": quartile[i],
                "project_rank": project_rank[i],
                "satisfaction_quartile": satisfaction_quartile[i],
            }
            for i, p in enumerate(perf)
        ]
        rows.sort(key=lambda r: r["sales_row_number"])
        return ReportData(
            name="sales_ranking",
            title=self._title("sales_ranking"),
            columns=[
                "employee_id",
                "department",
                "year",
                "quarter",
                "sales_amount",
                "projects_completed",
                "customer_satisfaction",
                "sales_row_number",
                "quarterly_sales_rank",
                "sales_rank",
                "sales_dense_rank",
                "sales_quartile",
                "project_rank",
                "satisfaction_quartile",
            ],
            rows=rows,
        )

    def skill_ranking(self, *, skill_category: Optional[str] = None) -> ReportData:
        skills = list(self._repo.list_skill_rows(skill_category=skill_category))
        by_score = (OrderBy("certification_score", descending=True),)
        in_category = Window(partition_by=("skill_category",), order_by=by_score)

        category_rank = compute_ranks(skills, window=in_category, function=RankingFunction.ROW_NUMBER)
        with_gaps = compute_ranks(skills, window=in_category, function=RankingFunction.RANK)
        without_gaps = compute_ranks(skills, window=in_category, function=RankingFunction.DENSE_RANK)
        category_half = compute_ranks(skills, window=in_category, function=RankingFunction.NTILE, buckets=2)
        overall = compute_ranks(skills, window=Window(order_by=by_score), function=RankingFunction.ROW_NUMBER)
        overall_quartile = compute_ranks(
            skills, window=Window(order_by=by_score), function=RankingFunction.NTILE, buckets=DEFAULT_NTILE_BUCKETS
        )

        rows = [
            {
                "employee_id": s.employee_id,
                "skill_category": s.skill_category,
                "skill_level": s.skill_level,
                "certification_score": s.certification_score,
                "years_experience": s.years_experience,
                "category_rank": category_rank[i],
                "rank_with_gaps": with_gaps[i],
                "rank_without_gaps": without_gaps[i],
                "category_half": category_half[i],
                "overall_rank": overall[i],
                "overall_quartile": overall_quartile[i],
            }
            for i, s in enumerate(skills)
        ]
        rows.sort(key=lambda r: (r["skill_category"], r["category_rank"]))
        return ReportData(
            name="skill_ranking",
            title=self._title("skill_ranking"),
            columns=[
                "employee_id",
                "skill_category",
                "skill_level",
                "certification_score",
                "years_experience",
                "category_rank",
                "rank_with_gaps",
                "rank_without_gaps",
                "category_half",
                "overall_rank",
                "overall_quartile",
            ],
            rows=rows,
        )
