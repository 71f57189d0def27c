from __future__ import annotations

from datetime import date, datetime, timedelta, timezone

import pytest
from pydantic import ValidationError

from stockroom.query.filters import (
    DateRange,
    FilterSet,
    SortDirection,
    SortSpec,
    date_range_bounds,
    in_date_range,
    parse_date_range,
)

UTC = timezone.utc
# Wednesday
NOW = datetime(2023, 8, 16, 12, 0, tzinfo=UTC)


def test_filter_set_ignores_unset_blank_and_all_criteria():
    filters = FilterSet(criteria={"status": "all", "type": None, "category": "  ", "stock": "low-stock"})
    assert filters.active_criteria() == {"stock": "low-stock"}


def test_filter_set_all_sentinel_is_case_insensitive():
    assert FilterSet(criteria={"status": "ALL"}).active_criteria() == {}


def test_filter_set_updates_return_new_instances():
    base = FilterSet()
    narrowed = base.with_query("usb").with_criterion("stock", "low-stock")

    assert base.query == ""
    assert base.criteria == {}
    assert narrowed.query == "usb"
    assert narrowed.criteria == {"stock": "low-stock"}


def test_filter_set_is_frozen():
    with pytest.raises(ValidationError):
        FilterSet().query = "x"


def test_sort_spec_parse():
    assert SortSpec.parse("price:desc") == SortSpec(column="price", direction=SortDirection.DESC)
    assert SortSpec.parse("name") == SortSpec(column="name")
    assert SortSpec.parse("date:ASC").descending is False


def test_sort_spec_rejects_blank_column():
    with pytest.raises(ValidationError):
        SortSpec(column="")


def test_parse_date_range_is_case_insensitive():
    assert parse_date_range("THISWEEK") is DateRange.THIS_WEEK
    with pytest.raises(ValueError):
        parse_date_range("fortnight")


@pytest.mark.parametrize(
    "range_name, expected",
    [
        ("today", (datetime(2023, 8, 16, tzinfo=UTC), None)),
        ("yesterday", (datetime(2023, 8, 15, tzinfo=UTC), datetime(2023, 8, 16, tzinfo=UTC))),
        # weeks start on Sunday
        ("thisWeek", (datetime(2023, 8, 13, tzinfo=UTC), None)),
        ("thisMonth", (datetime(2023, 8, 1, tzinfo=UTC), None)),
        ("lastMonth", (datetime(2023, 7, 1, tzinfo=UTC), datetime(2023, 8, 1, tzinfo=UTC))),
        ("last3Months", (datetime(2023, 5, 16, tzinfo=UTC), None)),
        ("all", (None, None)),
    ],
)
def test_date_range_bounds(range_name: str, expected):
    assert date_range_bounds(range_name, NOW) == expected


def test_this_week_on_sunday_starts_today():
    sunday = datetime(2023, 8, 13, 9, 0, tzinfo=UTC)
    assert date_range_bounds(DateRange.THIS_WEEK, sunday)[0] == datetime(2023, 8, 13, tzinfo=UTC)


def test_last_month_in_january_wraps_year():
    january = datetime(2024, 1, 10, tzinfo=UTC)
    assert date_range_bounds(DateRange.LAST_MONTH, january) == (
        datetime(2023, 12, 1, tzinfo=UTC),
        datetime(2024, 1, 1, tzinfo=UTC),
    )


def test_last_three_months_clamps_day_to_month_length():
    may_31 = datetime(2023, 5, 31, tzinfo=UTC)
    assert date_range_bounds(DateRange.LAST_3_MONTHS, may_31)[0] == datetime(2023, 2, 28, tzinfo=UTC)


def test_last_month_excludes_first_instant_of_this_month():
    assert in_date_range(datetime(2023, 7, 31, 23, 59, tzinfo=UTC), "lastMonth", NOW)
    assert not in_date_range(datetime(2023, 8, 1, 0, 0, tzinfo=UTC), "lastMonth", NOW)


def test_in_date_range_compares_in_reference_timezone():
    # 2023-08-15 23:30 UTC is already 2023-08-16 in UTC+2
    plus_two = timezone(timedelta(hours=2))
    now = datetime(2023, 8, 16, 12, 0, tzinfo=plus_two)
    assert in_date_range(datetime(2023, 8, 15, 23, 30, tzinfo=UTC), "today", now)
    assert not in_date_range(datetime(2023, 8, 15, 21, 30, tzinfo=UTC), "today", now)


def test_in_date_range_accepts_plain_dates_and_rejects_missing_values():
    assert in_date_range(date(2023, 8, 2), "thisMonth", NOW)
    assert not in_date_range(None, "thisMonth", NOW)
    assert in_date_range(None, "all", NOW)
