from __future__ import annotations

from collections.abc import Mapping
from dataclasses import asdict, is_dataclass
from typing import Any, Callable, Union

Accessor = Union[str, Callable[[Any], Any]]


def make_accessor(key: Accessor) -> Callable[[Any], Any]:
    """Turn a field name into a getter that works on dicts and plain objects."""
    if callable(key):
        return key

    def get(row: Any) -> Any:
        if isinstance(row, Mapping):
            return row[key]
        return getattr(row, key)

    return get


def row_to_dict(row: Any) -> dict:
    if isinstance(row, Mapping):
        return dict(row)
    if is_dataclass(row) and not isinstance(row, type):
        return asdict(row)
    return dict(vars(row))
