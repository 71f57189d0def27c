"""
Fixed seed source: serves the bundled sample records.

Writes are accepted without persisting anything, so a store backed by this
source behaves as a purely in-memory collection.
"""

from __future__ import annotations

from typing import List, Optional, Sequence

from stockroom.domain.collections import ORDERS, CollectionSpec
from stockroom.domain.models import Record
from stockroom.reports import summarize_customers
from stockroom.sources.abstract import AbstractRecordSource
from stockroom.sources.seed_data import SEED_ROWS


def seed_records(collection: CollectionSpec) -> List[Record]:
    """
    Validate the bundled rows of a collection into records.

    Derived collections are computed from their parent's seed; collections
    without bundled rows seed empty.
    """
    if collection.name == "customers":
        return list(summarize_customers(seed_records(ORDERS)))
    rows = SEED_ROWS.get(collection.name, [])
    return [collection.model.model_validate(row) for row in rows]


class FixedSeedSource(AbstractRecordSource):
    """
    In-memory source over a fixed record sequence.

    Parameters
    ----------
    collection : CollectionSpec
        Collection served.
    records : Sequence[Record] | None
        Explicit records to serve. Defaults to the bundled seed.
    """

    kind: str = "seed"

    def __init__(self, collection: CollectionSpec, records: Optional[Sequence[Record]] = None) -> None:
        super().__init__(collection)
        self._records = list(records) if records is not None else None

    def fetch_all(self) -> List[Record]:
        if self._records is None:
            self._records = seed_records(self.collection)
        return list(self._records)

    def insert(self, record: Record) -> Record:
        return record

    def update(self, record: Record) -> Record:
        return record

    def delete(self, record_id: str) -> None:
        return None


__all__ = ["FixedSeedSource", "seed_records"]
