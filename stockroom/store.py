"""
Record stores: the single owner of each collection's records.

A RecordStore loads its collection once from the source picked for it,
keeps the records in memory in source order, and writes every mutation
through that source before applying it locally. If the remote write fails
the local state is left untouched and RemoteWriteError is raised.

Usage:
    from stockroom.store import open_store
    from stockroom.query import FilterSet

    inventory = open_store("inventory")
    low = inventory.query(FilterSet(criteria={"stock": "low-stock"}))
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple

from pydantic import ValidationError

from stockroom.config import Settings
from stockroom.domain.collections import CUSTOMERS, CollectionSpec, get_collection
from stockroom.domain.models import Record, derived_fields, utcnow
from stockroom.exceptions import (
    BackendError,
    DuplicateRecordError,
    RecordNotFoundError,
    RecordValidationError,
    RemoteWriteError,
)
from stockroom.query.executor import execute
from stockroom.query.filters import FilterSet, SortSpec
from stockroom.reports import summarize_customers
from stockroom.sources.abstract import RecordSource
from stockroom.sources.factory import select_source
from stockroom.sources.seed import FixedSeedSource, seed_records
from stockroom.utils.logging import get_logger

log = get_logger(__name__)


@dataclass(frozen=True)
class LoadResult:
    """
    Outcome of RecordStore.load().

    Attributes
    ----------
    source : str
        Kind of the source the records came from ("remote" or "seed").
    count : int
        Number of records held after loading.
    notice : str | None
        Non-fatal message describing a fallback, None when loading went as
        configured.
    """

    source: str
    count: int
    notice: Optional[str] = None

    @property
    def fell_back(self) -> bool:
        return self.notice is not None


def _validation_reasons(exc: ValidationError) -> List[str]:
    reasons = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "record"
        reasons.append(f"{location}: {error['msg']}")
    return reasons


class RecordStore:
    """
    In-memory collection of records backed by one data source.

    Parameters
    ----------
    collection : CollectionSpec
        Collection held by the store.
    source : RecordSource
        Where records are read from and written through.
    clock : callable
        Returns the current time for created/updated stamps.

    Notes
    -----
    Stores are single-writer and not thread-safe. Backend calls block and
    their result is applied when they return.
    """

    def __init__(
        self,
        collection: CollectionSpec,
        source: RecordSource,
        clock: Callable[[], datetime] = utcnow,
    ) -> None:
        self.collection = collection
        self.source = source
        self._clock = clock
        self._records: List[Record] = []
        self.notice: Optional[str] = None

    def __len__(self) -> int:
        return len(self._records)

    def __repr__(self) -> str:
        return f"RecordStore(collection={self.collection.name!r}, source={self.source.kind!r}, size={len(self)})"

    @property
    def records(self) -> Tuple[Record, ...]:
        """Immutable snapshot of the records, in store order."""
        return tuple(self._records)

    def load(self) -> LoadResult:
        """
        Populate the store from its source.

        A single read is attempted. When it raises BackendError the store
        switches to the collection's fixed seed for the rest of the session
        and the returned LoadResult carries a notice describing the failure.
        """
        name = self.collection.name
        try:
            records = self.source.fetch_all()
            notice = None
        except BackendError as exc:
            notice = f"Could not load {name} from the backend ({exc}); showing sample data instead."
            log.warning(
                f"[STORE] {name}: backend read failed, falling back to seed data",
                extra={"collection": name, "source": self.source.kind, "error": str(exc)},
            )
            self.source.close()
            self.source = FixedSeedSource(self.collection)
            records = seed_records(self.collection)

        self._records = self._drop_duplicates(records)
        self.notice = notice
        log.info(
            f"[STORE] {name}: loaded {len(self._records)} records from {self.source.kind}",
            extra={"collection": name, "source": self.source.kind, "count": len(self._records)},
        )
        return LoadResult(source=self.source.kind, count=len(self._records), notice=notice)

    def _drop_duplicates(self, records: List[Record]) -> List[Record]:
        seen: Dict[str, Record] = {}
        kept: List[Record] = []
        for record in records:
            if record.id in seen:
                log.warning(
                    f"[STORE] {self.collection.name}: duplicate id '{record.id}' dropped",
                    extra={"collection": self.collection.name, "record_id": record.id},
                )
                continue
            seen[record.id] = record
            kept.append(record)
        return kept

    def _position(self, record_id: str) -> int:
        for position, record in enumerate(self._records):
            if record.id == record_id:
                return position
        raise RecordNotFoundError(self.collection.name, record_id)

    def get(self, record_id: str) -> Optional[Record]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def require(self, record_id: str) -> Record:
        """Like get(), but raise RecordNotFoundError for an unknown id."""
        return self._records[self._position(record_id)]

    def resolve(self, reference: Optional[str]) -> Optional[Record]:
        """
        Follow an optional reference from another record.

        Absent references and references to records that no longer exist
        both resolve to None.
        """
        if not reference:
            return None
        return self.get(reference)

    def query(
        self,
        filters: Optional[FilterSet] = None,
        sort: Optional[SortSpec] = None,
        now: Optional[datetime] = None,
    ) -> List[Record]:
        """Filtered, sorted view of the current records."""
        return execute(self._records, self.collection, filters=filters, sort=sort, now=now)

    def _validate(self, payload: Mapping[str, Any]) -> Record:
        try:
            return self.collection.model.model_validate(payload)
        except ValidationError as exc:
            raise RecordValidationError(self.collection.name, _validation_reasons(exc)) from exc

    def _write(self, operation: str, write: Callable[[Any], Any], argument: Any) -> Any:
        try:
            return write(argument)
        except BackendError as exc:
            log.error(
                f"[STORE] {self.collection.name}: {operation} failed on backend, local state unchanged",
                extra={"collection": self.collection.name, "operation": operation, "error": str(exc)},
            )
            raise RemoteWriteError(self.collection.name, operation, exc) from exc

    def _new_id(self) -> str:
        while True:
            candidate = f"{self.collection.id_prefix}-{uuid.uuid4().hex[:12]}"
            if self.get(candidate) is None:
                return candidate

    def add(self, data: Mapping[str, Any] | Record) -> Record:
        """
        Validate and append a new record.

        Parameters
        ----------
        data : mapping | Record
            Field values. Derived fields are ignored; `id` is generated when
            missing; `created_at` and `updated_at` are set to now.

        Returns
        -------
        Record
            The stored record, as returned by the source.

        Raises
        ------
        RecordValidationError
            A required field is missing or a value is out of range.
        DuplicateRecordError
            The supplied id is already stored.
        RemoteWriteError
            The backend rejected the insert.
        """
        derived = derived_fields(self.collection.model)
        if isinstance(data, Record):
            payload = data.model_dump(exclude=set(derived))
        else:
            payload = {key: value for key, value in data.items() if key not in derived}

        if payload.get("id") is None:
            payload["id"] = self._new_id()
        now = self._clock()
        payload["created_at"] = now
        payload["updated_at"] = now

        record = self._validate(payload)
        if self.get(record.id) is not None:
            raise DuplicateRecordError(self.collection.name, record.id)

        stored = self._write("add", self.source.insert, record)
        self._records.append(stored)
        log.debug(
            f"[STORE] {self.collection.name}: added {stored.id}",
            extra={"collection": self.collection.name, "record_id": stored.id},
        )
        return stored

    def update(self, record_id: str, patch: Mapping[str, Any]) -> Record:
        """
        Merge `patch` into an existing record and replace it in place.

        Raises
        ------
        RecordNotFoundError
            No record has `record_id`.
        RecordValidationError
            The patch changes the id, sets a derived field, or produces an
            invalid record.
        RemoteWriteError
            The backend rejected the update.
        """
        position = self._position(record_id)
        current = self._records[position]
        derived = derived_fields(self.collection.model)

        reasons = [f"{key}: derived field cannot be set" for key in patch if key in derived]
        if "id" in patch and patch["id"] != record_id:
            reasons.append("id: identifier cannot be changed")
        if reasons:
            raise RecordValidationError(self.collection.name, reasons)

        merged = {
            **current.model_dump(exclude=set(derived)),
            **patch,
            "id": record_id,
            "created_at": current.created_at,
            "updated_at": self._clock(),
        }
        record = self._validate(merged)
        stored = self._write("update", self.source.update, record)
        self._records[position] = stored
        log.debug(
            f"[STORE] {self.collection.name}: updated {record_id}",
            extra={"collection": self.collection.name, "record_id": record_id, "fields": sorted(patch)},
        )
        return stored

    def remove(self, record_id: str) -> Record:
        """
        Delete a record and return it.

        Records referencing it elsewhere are left as they are; readers
        resolve such dangling references to None.
        """
        position = self._position(record_id)
        self._write("remove", self.source.delete, record_id)
        removed = self._records.pop(position)
        log.debug(
            f"[STORE] {self.collection.name}: removed {record_id}",
            extra={"collection": self.collection.name, "record_id": record_id},
        )
        return removed

    def adjust_quantity(self, record_id: str, delta: int) -> Record:
        """
        Change a record's `quantity` by `delta`.

        Raises RecordValidationError when the result would be negative or the
        collection's records carry no quantity.
        """
        current = self.require(record_id)
        quantity = getattr(current, "quantity", None)
        if quantity is None:
            raise RecordValidationError(self.collection.name, ["quantity: collection has no quantity field"])
        if quantity + delta < 0:
            raise RecordValidationError(
                self.collection.name,
                [f"quantity: adjustment of {delta} would leave {quantity + delta} in stock"],
            )
        return self.update(record_id, {"quantity": quantity + delta})

    def close(self) -> None:
        self.source.close()


def open_store(name: str, settings: Optional[Settings] = None) -> RecordStore:
    """
    Build and load the store of a registered collection.

    Derived collections are built from their parent store.

    Raises
    ------
    UnknownCollectionError
        If `name` is not registered.
    """
    collection = get_collection(name)
    if collection.derived:
        return customer_store(open_store("orders", settings))
    store = RecordStore(collection, select_source(collection, settings))
    store.load()
    return store


def customer_store(order_store: RecordStore) -> RecordStore:
    """
    Customers derived from the orders currently held by `order_store`.

    The result is a snapshot: later order changes are not reflected until a
    new customer store is built. The parent's load notice is carried over.
    """
    customers = summarize_customers(order_store.records)
    store = RecordStore(CUSTOMERS, FixedSeedSource(CUSTOMERS, customers))
    store.load()
    store.notice = order_store.notice
    return store


__all__ = ["LoadResult", "RecordStore", "customer_store", "open_store"]
