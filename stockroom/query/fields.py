"""
Field access helpers shared by the executor and the aggregator.

A field is named either by an attribute path ("customer.name") or by a
callable taking the record. Enum members are read as their plain values.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Union

FieldRef = Union[str, Callable[[Any], Any]]


def read_path(record: Any, path: str) -> Any:
    """Follow a dotted attribute path, returning None when a step is missing."""
    value = record
    for part in path.split("."):
        if value is None:
            return None
        if isinstance(value, dict):
            value = value.get(part)
        else:
            value = getattr(value, part, None)
    return plain(value)


def plain(value: Any) -> Any:
    if isinstance(value, Enum):
        return value.value
    return value


def getter(field: FieldRef) -> Callable[[Any], Any]:
    """Turn a field reference into a one-argument accessor."""
    if callable(field):
        return lambda record: plain(field(record))
    return lambda record: read_path(record, field)


__all__ = ["FieldRef", "getter", "plain", "read_path"]
