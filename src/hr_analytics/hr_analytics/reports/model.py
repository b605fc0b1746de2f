from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ReportData:
    name: str
    title: str
    columns: list[str]
    rows: list[dict]
