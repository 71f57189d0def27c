"""
Remote source: table-style access to a PostgreSQL backend.

Each collection maps to one table whose columns mirror the record fields.
Nested values (order lines, the embedded customer) live in JSONB columns and
computed fields are never written. Every driver or row-validation failure
is re-raised as BackendError so stores can fall back or report it.
"""

from __future__ import annotations

from contextlib import contextmanager
from enum import Enum
from typing import Any, Callable, Dict, Generator, List, Optional

import psycopg
from psycopg import Cursor, sql
from psycopg.rows import dict_row
from psycopg.types.json import Jsonb
from psycopg_pool import ConnectionPool
from pydantic import BaseModel, ValidationError
from pydantic_core import to_jsonable_python

from stockroom.config import Settings, get_settings
from stockroom.domain.collections import CATEGORIES, SUPPLIERS, CollectionSpec
from stockroom.domain.models import Record
from stockroom.exceptions import BackendError
from stockroom.infrastructure.db_factory import apply_statement_timeout, get_sync_pool, open_pool
from stockroom.sources.abstract import AbstractRecordSource
from stockroom.sources.seed_data import CATEGORIES as SEED_CATEGORIES
from stockroom.sources.seed_data import INVENTORY as SEED_INVENTORY
from stockroom.sources.seed_data import SUPPLIERS as SEED_SUPPLIERS
from stockroom.utils.logging import get_logger

log = get_logger(__name__)


def _stored_json(value: Any) -> Any:
    """JSON-ready form of a nested value, keeping declared fields only."""
    if isinstance(value, BaseModel):
        return {name: _stored_json(getattr(value, name)) for name in type(value).model_fields}
    if isinstance(value, (list, tuple)):
        return [_stored_json(item) for item in value]
    if isinstance(value, dict):
        return {key: _stored_json(item) for key, item in value.items()}
    return to_jsonable_python(value)


class RemoteSource(AbstractRecordSource):
    """
    Record source backed by one PostgreSQL table.

    Parameters
    ----------
    collection : CollectionSpec
        Collection served; its `table` (plus the configured prefix) is read.
    dsn_override : str | None
        Connect to this DSN with a private pool instead of the shared one.
    settings : Settings | None
        Settings to use. Defaults to the cached settings.
    pool : ConnectionPool | None
        Pre-built pool, mainly for tests.
    """

    kind: str = "remote"

    def __init__(
        self,
        collection: CollectionSpec,
        dsn_override: Optional[str] = None,
        settings: Optional[Settings] = None,
        pool: Optional[ConnectionPool] = None,
    ) -> None:
        super().__init__(collection)
        self.settings = settings or get_settings()
        self.table = self.settings.table_name(collection.table)
        self._dsn_override = dsn_override
        self._pool_instance = pool
        self._owns_pool = False

    def _get_pool(self) -> ConnectionPool:
        if self._pool_instance is not None:
            return self._pool_instance
        if self._dsn_override:
            self._pool_instance = open_pool(
                self._dsn_override,
                min_size=self.settings.db_pool_min_size,
                max_size=self.settings.db_pool_max_size,
                settings=self.settings,
            )
            self._owns_pool = True
        else:
            self._pool_instance = get_sync_pool()
        return self._pool_instance

    @contextmanager
    def _cursor(self) -> Generator[Cursor, None, None]:
        with self._get_pool().connection() as conn:
            with conn.cursor(row_factory=dict_row) as cur:
                apply_statement_timeout(cur, self.settings.db_statement_timeout_ms)
                yield cur

    @contextmanager
    def _translate(self, operation: str, table: Optional[str] = None) -> Generator[None, None, None]:
        table = table or self.table
        try:
            yield
        except psycopg.Error as exc:
            log.warning(
                f"[BACKEND] {operation} failed on {table}",
                extra={"table": table, "operation": operation, "error": str(exc)},
            )
            raise BackendError(f"{operation} on {table} failed: {exc}", table=table) from exc
        except ValidationError as exc:
            raise BackendError(f"{table} returned an invalid row: {exc}", table=table) from exc

    def _to_record(self, row: Dict[str, Any], collection: Optional[CollectionSpec] = None) -> Record:
        model = (collection or self.collection).model
        return model.model_validate(row)

    @staticmethod
    def _row_for(record: Record) -> Dict[str, Any]:
        """Column values for a record; nested values as JSONB, derived fields dropped at every level."""
        row: Dict[str, Any] = {}
        for column in type(record).model_fields:
            value = getattr(record, column)
            if isinstance(value, (BaseModel, dict, list)):
                row[column] = Jsonb(_stored_json(value))
            elif isinstance(value, Enum):
                row[column] = value.value
            else:
                row[column] = value
        return row

    def _select_all(self, cur: Cursor, table: str) -> List[Dict[str, Any]]:
        cur.execute(sql.SQL("SELECT * FROM {} ORDER BY created_at, id").format(sql.Identifier(table)))
        return cur.fetchall()

    def _insert_with(self, cur: Cursor, record: Record) -> Record:
        row = self._row_for(record)
        columns = list(row)
        query = sql.SQL("INSERT INTO {} ({}) VALUES ({}) RETURNING *").format(
            sql.Identifier(self.table),
            sql.SQL(", ").join(sql.Identifier(column) for column in columns),
            sql.SQL(", ").join([sql.Placeholder()] * len(columns)),
        )
        cur.execute(query, list(row.values()))
        return self._to_record(cur.fetchone())

    def fetch_all(self) -> List[Record]:
        with self._translate("read"):
            with self._cursor() as cur:
                rows = self._select_all(cur, self.table)
            records = [self._to_record(row) for row in rows]

        if not records and self.collection.name in _EMPTY_TABLE_SEEDERS:
            log.info(
                f"[BACKEND] {self.table} is empty, seeding sample records",
                extra={"collection": self.collection.name},
            )
            records = _EMPTY_TABLE_SEEDERS[self.collection.name](self)

        log.debug(
            f"[BACKEND] read {len(records)} rows from {self.table}",
            extra={"collection": self.collection.name, "count": len(records)},
        )
        return records

    def read_collection(self, collection: CollectionSpec) -> List[Record]:
        """Read another collection's table through this source's pool."""
        table = self.settings.table_name(collection.table)
        with self._translate("read", table=table):
            with self._cursor() as cur:
                rows = self._select_all(cur, table)
            return [self._to_record(row, collection) for row in rows]

    def insert_many(self, records: List[Record]) -> List[Record]:
        """Insert several records in one transaction."""
        with self._translate("insert"):
            with self._cursor() as cur:
                return [self._insert_with(cur, record) for record in records]

    def insert(self, record: Record) -> Record:
        with self._translate("insert"):
            with self._cursor() as cur:
                return self._insert_with(cur, record)

    def update(self, record: Record) -> Record:
        row = self._row_for(record)
        record_id = row.pop("id")
        query = sql.SQL("UPDATE {} SET {} WHERE id = %s RETURNING *").format(
            sql.Identifier(self.table),
            sql.SQL(", ").join(
                sql.SQL("{} = {}").format(sql.Identifier(column), sql.Placeholder()) for column in row
            ),
        )
        with self._translate("update"):
            with self._cursor() as cur:
                cur.execute(query, [*row.values(), record_id])
                stored = cur.fetchone()
            if stored is None:
                raise BackendError(f"{self.table} has no row with id '{record_id}'", table=self.table)
            return self._to_record(stored)

    def delete(self, record_id: str) -> None:
        query = sql.SQL("DELETE FROM {} WHERE id = %s").format(sql.Identifier(self.table))
        with self._translate("delete"):
            with self._cursor() as cur:
                cur.execute(query, (record_id,))
                deleted = cur.rowcount
        if deleted == 0:
            raise BackendError(f"{self.table} has no row with id '{record_id}'", table=self.table)

    def close(self) -> None:
        if self._owns_pool and self._pool_instance is not None:
            self._pool_instance.close()
            self._pool_instance = None
            self._owns_pool = False


def _seed_inventory_from_catalog(source: RemoteSource) -> List[Record]:
    """
    Populate an empty inventory table with the sample items.

    Categories are read first, then suppliers; the sample items are rebound
    to the backend's own category and supplier rows by position before
    insertion. Both tables must already hold rows.
    """
    categories = source.read_collection(CATEGORIES)
    suppliers = source.read_collection(SUPPLIERS)
    if not categories or not suppliers:
        raise BackendError(
            "inventory table is empty and categories/suppliers are missing, cannot seed",
            table=source.table,
        )

    category_slot = {row["id"]: index for index, row in enumerate(SEED_CATEGORIES)}
    supplier_slot = {row["id"]: index for index, row in enumerate(SEED_SUPPLIERS)}
    items: List[Record] = []
    for row in SEED_INVENTORY:
        category = categories[category_slot.get(row["category_id"], 0) % len(categories)]
        supplier = suppliers[supplier_slot.get(row["supplier_id"], 0) % len(suppliers)]
        items.append(
            source.collection.model.model_validate(
                {
                    **row,
                    "category_id": category.id,
                    "category_name": category.name,
                    "supplier_id": supplier.id,
                    "supplier_name": supplier.name,
                }
            )
        )
    return source.insert_many(items)


_EMPTY_TABLE_SEEDERS: Dict[str, Callable[[RemoteSource], List[Record]]] = {
    "inventory": _seed_inventory_from_catalog,
}


__all__ = ["RemoteSource"]
