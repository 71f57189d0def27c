"""
Aggregators reducing a record collection into summary statistics.

Results are recomputed on demand and never stored. Sums use plain float
addition; rounding for display is left to the presentation layer.

Usage:
    from stockroom.query.aggregate import totals_by_category, time_series_by_month

    totals_by_category(movements, "movement_type", "quantity")
    # {"New Stock": 60, "Stock Out": 30}
"""

from __future__ import annotations

import calendar
from dataclasses import dataclass, field
from datetime import date, datetime, time, tzinfo
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

from stockroom.query.fields import FieldRef, getter


def totals_by_category(
    records: Iterable[Any],
    category_field: FieldRef,
    value_field: Optional[FieldRef] = None,
) -> Dict[Any, float]:
    """
    Sum `value_field` per distinct category value.

    Categories appear in first-seen order. Categories without records are
    omitted; use `backfill` when a view needs a fixed category list. With
    `value_field=None` each record counts as 1.
    """
    category_of = getter(category_field)
    value_of = getter(value_field) if value_field is not None else (lambda record: 1)
    totals: Dict[Any, float] = {}
    for record in records:
        category = category_of(record)
        amount = value_of(record) or 0
        totals[category] = totals.get(category, 0) + amount
    return totals


def backfill(totals: Mapping[Any, float], categories: Sequence[Any]) -> Dict[Any, float]:
    """Zero-fill `totals` over a fixed category list, keeping that list's order."""
    return {category: totals.get(category, 0) for category in categories}


@dataclass
class MonthlySeries:
    """
    Grouped time series, one bucket per calendar month.

    `keys` are "YYYY-M" bucket keys, `labels` the matching display labels
    ("Mar 2023"), and `series` maps each requested field to its per-bucket
    totals, aligned with `keys`.
    """

    keys: List[str] = field(default_factory=list)
    labels: List[str] = field(default_factory=list)
    series: Dict[str, List[float]] = field(default_factory=dict)

    def as_rows(self) -> List[Dict[str, Any]]:
        return [
            {"month": label, **{name: values[index] for name, values in self.series.items()}}
            for index, label in enumerate(self.labels)
        ]


def _month_of(value: date | datetime, tz: Optional[tzinfo]) -> Tuple[int, int]:
    if not isinstance(value, datetime):
        value = datetime.combine(value, time())
    if value.tzinfo is not None:
        value = value.astimezone(tz)
    return value.year, value.month


def month_label(year: int, month: int) -> str:
    return f"{calendar.month_abbr[month]} {year}"


def time_series_by_month(
    records: Iterable[Any],
    date_field: FieldRef,
    bucket_fields: Mapping[str, FieldRef],
    tz: Optional[tzinfo] = None,
) -> MonthlySeries:
    """
    Group records by calendar month and sum numeric fields per month.

    Parameters
    ----------
    records : iterable
        Records to group. Records without a date are skipped.
    date_field : str | callable
        Field holding the record's date.
    bucket_fields : mapping
        Output series name -> field (or callable) summed per month.
    tz : tzinfo | None
        Timezone the dates are bucketed in. None means the local timezone.

    Returns
    -------
    MonthlySeries
        Buckets sorted ascending by (year, month).
    """
    date_of = getter(date_field)
    accessors = {name: getter(ref) for name, ref in bucket_fields.items()}
    buckets: Dict[Tuple[int, int], Dict[str, float]] = {}

    for record in records:
        moment = date_of(record)
        if moment is None:
            continue
        bucket = buckets.setdefault(_month_of(moment, tz), {name: 0 for name in accessors})
        for name, read in accessors.items():
            bucket[name] += read(record) or 0

    ordered = sorted(buckets)
    return MonthlySeries(
        keys=[f"{year}-{month}" for year, month in ordered],
        labels=[month_label(year, month) for year, month in ordered],
        series={name: [buckets[month][name] for month in ordered] for name in accessors},
    )


__all__ = ["MonthlySeries", "backfill", "month_label", "time_series_by_month", "totals_by_category"]
