from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from .core.constants import DEFAULT_GRAND_TOTAL_LABEL
from .core.enums import DataSource
from .database.connection import DBConfig, DatabaseConnection
from .grouping.engine import GroupingEngine
from .grouping.labels import HierarchicalLabeler
from .hr.memory_repository import InMemoryHRRepository
from .hr.mysql_repository import MySQLHRRepository
from .hr.repository import HRRepository
from .reports.service import HRReportService

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Container:
    data_source: DataSource
    conn: Optional[DatabaseConnection]

    hr_repo: HRRepository
    grouping_engine: GroupingEngine
    report_service: HRReportService


def build_container(
    *,
    db_config: Optional[dict] = None,
    data_source: DataSource | str = DataSource.MEMORY,
    grand_total_label: str = DEFAULT_GRAND_TOTAL_LABEL,
    hr_repo: Optional[HRRepository] = None,
) -> Container:
    data_source = DataSource(data_source)

    conn: Optional[DatabaseConnection] = None
    if hr_repo is None:
        if data_source == DataSource.MYSQL:
            if not db_config:
                raise ValueError("DB_CONFIG is required when DATA_SOURCE=mysql")
            conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
            hr_repo = MySQLHRRepository(conn)
        else:
            hr_repo = InMemoryHRRepository()

    grouping_engine = GroupingEngine(default_labeler=HierarchicalLabeler(grand_total_label=grand_total_label))
    report_service = HRReportService(hr_repo, engine=grouping_engine, grand_total_label=grand_total_label)

    logger.info("Container ready (data_source=%s, repo=%s)", data_source.value, type(hr_repo).__name__)
    return Container(
        data_source=data_source,
        conn=conn,
        hr_repo=hr_repo,
        grouping_engine=grouping_engine,
        report_service=report_service,
    )
