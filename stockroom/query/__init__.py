"""
Query package for stockroom.

Re-exports the filter/sort inputs, the executor that derives list views and
the aggregators behind dashboard widgets.
"""

from stockroom.query.aggregate import (
    MonthlySeries,
    backfill,
    time_series_by_month,
    totals_by_category,
)
from stockroom.query.executor import execute, matches_query
from stockroom.query.filters import (
    ALL,
    DateRange,
    FilterDefinition,
    FilterSet,
    SortDirection,
    SortSpec,
)

__all__ = [
    # Inputs
    "ALL",
    "DateRange",
    "FilterDefinition",
    "FilterSet",
    "SortDirection",
    "SortSpec",
    # Executor
    "execute",
    "matches_query",
    # Aggregators
    "MonthlySeries",
    "backfill",
    "time_series_by_month",
    "totals_by_category",
]
