"""
Property-based tests for the query executor.

Verifies, for generated stores, filter sets and sort columns:
- the view is a subsequence of the store holding exactly the matching records
- sorting is stable in both directions
- executing over a previous result changes nothing
"""

from __future__ import annotations

from datetime import datetime, timezone

from hypothesis import given, settings
from hypothesis import strategies as st

from stockroom.domain.collections import INVENTORY
from stockroom.domain.models import InventoryItem
from stockroom.query import FilterSet, SortDirection, SortSpec, execute, matches_query

NOW = datetime(2023, 8, 16, 12, 0, tzinfo=timezone.utc)
CATEGORIES = ["cat-1", "cat-2", "cat-3"]
NAMES = ["USB-C Cable", "HDMI Cable", "Desk", "Chair", "usb hub", "Lamp"]
SORT_COLUMNS = ["name", "quantity", "price", "category", "location", "popularity"]


@st.composite
def items(draw):
    count = draw(st.integers(min_value=0, max_value=25))
    return [
        InventoryItem(
            id=f"item-{index}",
            name=draw(st.sampled_from(NAMES)),
            sku=f"SKU-{index}",
            category_id=draw(st.one_of(st.none(), st.sampled_from(CATEGORIES))),
            category_name=draw(st.sampled_from(["Electronics", "furniture", ""])),
            quantity=draw(st.integers(min_value=0, max_value=30)),
            reorder_level=draw(st.integers(min_value=0, max_value=15)),
            selling_price=draw(st.sampled_from([0.0, 9.5, 10.0, 99.0])),
            location=draw(st.sampled_from(["", "Shelf A", "Shelf B"])),
        )
        for index in range(count)
    ]


filter_sets = st.builds(
    FilterSet,
    query=st.sampled_from(["", "usb", "CABLE", "sku-1", "zzz"]),
    criteria=st.fixed_dictionaries(
        {
            "stock": st.sampled_from(["all", "in-stock", "low-stock", "out-of-stock"]),
            "category": st.sampled_from(["all", *CATEGORIES]),
        }
    ),
)

sort_specs = st.builds(
    SortSpec,
    column=st.sampled_from(SORT_COLUMNS),
    direction=st.sampled_from(list(SortDirection)),
)


def _expected_matches(store, filters: FilterSet):
    criteria = filters.active_criteria()
    matched = []
    for item in store:
        if not matches_query(item, INVENTORY, filters.query):
            continue
        if "category" in criteria and item.category_id != criteria["category"]:
            continue
        level = criteria.get("stock")
        if level == "in-stock" and not item.quantity > 0:
            continue
        if level == "low-stock" and not 0 < item.quantity <= item.reorder_level:
            continue
        if level == "out-of-stock" and item.quantity != 0:
            continue
        matched.append(item)
    return matched


def _is_subsequence(view, store) -> bool:
    remaining = iter(store)
    return all(any(candidate is record for candidate in remaining) for record in view)


@given(store=items(), filters=filter_sets, sort=sort_specs)
@settings(max_examples=200)
def test_view_is_the_matching_subsequence(store, filters, sort):
    unsorted = execute(store, INVENTORY, filters, SortSpec(column="popularity"), now=NOW)
    view = execute(store, INVENTORY, filters, sort, now=NOW)

    assert unsorted == _expected_matches(store, filters)
    assert _is_subsequence(unsorted, store)
    assert sorted(item.id for item in view) == sorted(item.id for item in unsorted)


@given(store=items(), sort=sort_specs)
@settings(max_examples=200)
def test_sort_is_stable(store, sort):
    view = execute(store, INVENTORY, sort=sort, now=NOW)
    position = {item.id: index for index, item in enumerate(store)}
    key = {
        "name": lambda item: item.name.casefold(),
        "quantity": lambda item: item.quantity,
        "price": lambda item: item.selling_price,
        "category": lambda item: item.category_name.casefold(),
        "location": lambda item: item.location,
        "popularity": lambda item: 0,
    }[sort.column]

    for earlier, later in zip(view, view[1:]):
        if key(earlier) == key(later):
            assert position[earlier.id] < position[later.id]
        elif sort.descending:
            assert key(earlier) > key(later)
        else:
            assert key(earlier) < key(later)


@given(store=items(), filters=filter_sets, sort=sort_specs)
@settings(max_examples=200)
def test_execute_is_idempotent(store, filters, sort):
    once = execute(store, INVENTORY, filters, sort, now=NOW)
    twice = execute(once, INVENTORY, filters, sort, now=NOW)

    assert twice == once
    assert execute(store, INVENTORY, filters, sort, now=NOW) == once
