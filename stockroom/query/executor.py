"""
Query executor: derives a filtered, sorted view from a record sequence.

`execute` is a pure function of (records, collection, filters, sort, now).
The output is a subsequence of the input holding exactly the records that
match the free-text query and every active criterion, ordered by a stable
sort on the requested column.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import TYPE_CHECKING, Any, Callable, List, Optional, Sequence, Tuple, TypeVar

from stockroom.exceptions import InvalidFilterError
from stockroom.query.fields import getter, plain
from stockroom.query.filters import FilterDefinition, FilterSet, SortSpec

if TYPE_CHECKING:
    from stockroom.domain.collections import CollectionSpec

R = TypeVar("R")

_ORDERED_TYPES = (int, float, date)


def _local_now() -> datetime:
    return datetime.now().astimezone()


def matches_query(record: Any, collection: CollectionSpec, query: str) -> bool:
    """Case-insensitive substring match against any searchable field."""
    needle = query.strip().casefold()
    if not needle:
        return True
    for field in collection.search_fields:
        value = getter(field)(record)
        if value is not None and needle in str(value).casefold():
            return True
    return False


def _resolve_criteria(
    collection: CollectionSpec, filters: FilterSet
) -> List[Tuple[FilterDefinition, str]]:
    resolved: List[Tuple[FilterDefinition, str]] = []
    for name, value in filters.active_criteria().items():
        definition = collection.filters.get(name)
        if definition is None:
            raise InvalidFilterError(
                f"Unknown filter '{name}' for {collection.name}. "
                f"Available: {', '.join(sorted(collection.filters)) or 'none'}"
            )
        if definition.choices is not None and value.casefold() not in {
            choice.casefold() for choice in definition.choices
        }:
            raise InvalidFilterError(
                f"Invalid value '{value}' for {collection.name} filter '{name}'. "
                f"Expected one of: {', '.join(definition.choices)}"
            )
        resolved.append((definition, value))
    return resolved


def _sort_key(collection: CollectionSpec, column: str) -> Callable[[Any], Tuple[int, Any]]:
    """
    Build a key placing absent values after present ones.

    Unknown columns that are model fields compare numbers and dates by value
    and anything else as text; columns the model lacks compare every record
    as equal.
    """
    accessor = collection.sort_keys.get(column)
    if accessor is None:
        if column in collection.model.model_fields or column in collection.model.model_computed_fields:
            read = getter(column)

            def accessor(record: Any) -> Any:
                value = plain(read(record))
                if value is None or isinstance(value, _ORDERED_TYPES):
                    return value
                return str(value)

        else:
            return lambda record: (0, 0)

    def key(record: Any) -> Tuple[int, Any]:
        value = plain(accessor(record))
        if value is None:
            return (1, 0)
        return (0, value)

    return key


def execute(
    records: Sequence[R],
    collection: CollectionSpec,
    filters: Optional[FilterSet] = None,
    sort: Optional[SortSpec] = None,
    now: Optional[datetime] = None,
) -> List[R]:
    """
    Filter then sort `records` for display.

    Parameters
    ----------
    records : Sequence
        Store snapshot, in store order.
    collection : CollectionSpec
        Searchable fields, filter definitions and sort keys of the domain.
    filters : FilterSet | None
        Active query and criteria. None matches everything.
    sort : SortSpec | None
        Column/direction. None falls back to the collection default.
    now : datetime | None
        Reference time for date-range criteria. Defaults to the local time.

    Returns
    -------
    List
        The derived view. Ties keep store order in both directions.

    Raises
    ------
    InvalidFilterError
        For an unknown criterion name or a value outside its choices.
    """
    filters = filters or FilterSet()
    criteria = _resolve_criteria(collection, filters)
    reference = now or _local_now()

    view = [
        record
        for record in records
        if matches_query(record, collection, filters.query)
        and all(definition.test(record, value, reference) for definition, value in criteria)
    ]

    order = sort or collection.default_sort
    if order is None:
        return view
    # sorted() is stable under reverse=True too, so ties keep store order.
    return sorted(view, key=_sort_key(collection, order.column), reverse=order.descending)


__all__ = ["execute", "matches_query"]
