from __future__ import annotations

from enum import Enum


class GroupingMode(str, Enum):
    """How the GROUP BY clause expands into grouping sets."""

    GROUP_BY = "GROUP_BY"
    ROLLUP = "ROLLUP"
    CUBE = "CUBE"
    GROUPING_SETS = "GROUPING_SETS"


class AggregateFunction(str, Enum):
    """Aggregate functions supported per measure."""

    COUNT = "COUNT"
    COUNT_BIG = "COUNT_BIG"
    SUM = "SUM"
    AVG = "AVG"
    MIN = "MIN"
    MAX = "MAX"
    STRING_AGG = "STRING_AGG"
    VAR = "VAR"
    VARP = "VARP"
    STDEV = "STDEV"
    STDEVP = "STDEVP"
    CHECKSUM_AGG = "CHECKSUM_AGG"


class RankingFunction(str, Enum):
    """Window ranking functions."""

    ROW_NUMBER = "ROW_NUMBER"
    RANK = "RANK"
    DENSE_RANK = "DENSE_RANK"
    NTILE = "NTILE"


class DataSource(str, Enum):
    MEMORY = "memory"
    MYSQL = "mysql"
