from __future__ import annotations

from datetime import date


def year_of(value: date) -> int:
    """YEAR(value)."""
    return value.year


def quarter_of(value: date) -> int:
    """DATEPART(QUARTER, value): 1..4."""
    return (value.month - 1) // 3 + 1
