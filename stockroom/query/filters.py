"""
Filter predicate sets and sort comparators.

A FilterSet is the session-local filter state of a list view: a free-text
query plus named criteria. A criterion whose value is empty or the sentinel
"all" is inactive. FilterDefinition objects describe, per collection, how an
active criterion tests a record; the builders below cover the exact-match
and date-range kinds the views use.
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Any, Callable, Dict, Optional, Sequence, Tuple

from pydantic import BaseModel, Field

from stockroom.query.fields import read_path

ALL = "all"

Predicate = Callable[[Any, str, datetime], bool]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortSpec(BaseModel):
    """Column and direction selecting the order of a derived view."""

    column: str = Field(..., min_length=1)
    direction: SortDirection = SortDirection.ASC

    model_config = {"frozen": True}

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    @classmethod
    def parse(cls, text: str) -> "SortSpec":
        """Parse "column" or "column:asc|desc"."""
        column, _, direction = text.partition(":")
        return cls(column=column.strip(), direction=direction.strip().lower() or SortDirection.ASC)


class FilterSet(BaseModel):
    """
    Active inclusion criteria for one view.

    Instances are immutable; `with_query` and `with_criterion` return
    updated copies so every change produces a new query input.
    """

    query: str = ""
    criteria: Dict[str, Optional[str]] = Field(default_factory=dict)

    model_config = {"frozen": True}

    def active_criteria(self) -> Dict[str, str]:
        return {
            name: value
            for name, value in self.criteria.items()
            if value is not None and value.strip() != "" and value.casefold() != ALL
        }

    def with_query(self, query: str) -> "FilterSet":
        return self.model_copy(update={"query": query})

    def with_criterion(self, name: str, value: Optional[str]) -> "FilterSet":
        criteria = dict(self.criteria)
        criteria[name] = value
        return self.model_copy(update={"criteria": criteria})


@dataclass(frozen=True)
class FilterDefinition:
    """How a named criterion narrows a collection."""

    name: str
    test: Predicate
    choices: Optional[Tuple[str, ...]] = None


class DateRange(str, Enum):
    ALL = "all"
    TODAY = "today"
    YESTERDAY = "yesterday"
    THIS_WEEK = "thisWeek"
    THIS_MONTH = "thisMonth"
    LAST_MONTH = "lastMonth"
    LAST_3_MONTHS = "last3Months"


def parse_date_range(range_name: DateRange | str) -> DateRange:
    """Resolve a date range name case-insensitively."""
    if isinstance(range_name, DateRange):
        return range_name
    for member in DateRange:
        if member.value.casefold() == range_name.casefold():
            return member
    raise ValueError(f"Unknown date range '{range_name}'")


def _shift_months(value: datetime, months: int) -> datetime:
    index = value.year * 12 + (value.month - 1) + months
    year, month = divmod(index, 12)
    month += 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def date_range_bounds(
    range_name: DateRange | str, now: datetime
) -> Tuple[Optional[datetime], Optional[datetime]]:
    """
    Half-open [start, end) bounds for a named date range.

    Either bound may be None (unbounded). Weeks start on Sunday.
    """
    name = parse_date_range(range_name)
    today = now.replace(hour=0, minute=0, second=0, microsecond=0)
    if name is DateRange.TODAY:
        return today, None
    if name is DateRange.YESTERDAY:
        return today - timedelta(days=1), today
    if name is DateRange.THIS_WEEK:
        days_since_sunday = (today.weekday() + 1) % 7
        return today - timedelta(days=days_since_sunday), None
    if name is DateRange.THIS_MONTH:
        return today.replace(day=1), None
    if name is DateRange.LAST_MONTH:
        month_start = today.replace(day=1)
        return _shift_months(month_start, -1), month_start
    if name is DateRange.LAST_3_MONTHS:
        return _shift_months(today, -3), None
    return None, None


def as_timezone(value: date | datetime, now: datetime) -> datetime:
    """Express a record date in `now`'s timezone; naive values are taken as local to it."""
    if not isinstance(value, datetime):
        return datetime.combine(value, time(), tzinfo=now.tzinfo)
    if value.tzinfo is None:
        return value.replace(tzinfo=now.tzinfo)
    return value.astimezone(now.tzinfo)


def in_date_range(value: date | datetime | None, range_name: DateRange | str, now: datetime) -> bool:
    start, end = date_range_bounds(range_name, now)
    if start is None and end is None:
        return True
    if value is None:
        return False
    moment = as_timezone(value, now)
    if start is not None and moment < start:
        return False
    if end is not None and moment >= end:
        return False
    return True


def equals(name: str, path: str, casefold: bool = False, choices: Sequence[str] | None = None) -> FilterDefinition:
    """Exact match of one field against the criterion value."""

    def test(record: Any, value: str, now: datetime) -> bool:
        actual = read_path(record, path)
        if actual is None:
            return False
        if casefold:
            return str(actual).casefold() == value.casefold()
        return str(actual) == value

    return FilterDefinition(name=name, test=test, choices=tuple(choices) if choices else None)


def equals_any(name: str, paths: Sequence[str]) -> FilterDefinition:
    """Match when any of several fields equals the criterion value."""

    def test(record: Any, value: str, now: datetime) -> bool:
        return any(read_path(record, path) == value for path in paths)

    return FilterDefinition(name=name, test=test)


def within_date_range(name: str, path: str) -> FilterDefinition:
    def test(record: Any, value: str, now: datetime) -> bool:
        return in_date_range(read_path(record, path), value, now)

    return FilterDefinition(
        name=name,
        test=test,
        choices=tuple(member.value for member in DateRange),
    )


__all__ = [
    "ALL",
    "DateRange",
    "FilterDefinition",
    "FilterSet",
    "SortDirection",
    "SortSpec",
    "as_timezone",
    "date_range_bounds",
    "equals",
    "equals_any",
    "in_date_range",
    "parse_date_range",
    "within_date_range",
]
