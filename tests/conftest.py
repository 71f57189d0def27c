"""
Pytest configuration for stockroom.

Provides fixtures for:
- Settings overrides (seed-only and backend-enabled)
- Stores over fixed seed data and over hand-built records
- Database connection management for integration tests
"""

from __future__ import annotations

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable, Generator, List, Optional, Sequence

import psycopg
import pytest

from stockroom.config import Settings
from stockroom.domain.collections import INVENTORY, MOVEMENTS, ORDERS, CollectionSpec
from stockroom.domain.models import InventoryItem, Record
from stockroom.sources.seed import FixedSeedSource
from stockroom.store import RecordStore

BACKEND_TABLES = (
    "categories",
    "suppliers",
    "inventory_items",
    "stock_movements",
    "orders",
    "purchase_orders",
    "stock_outs",
    "users",
)

# Wednesday 2023-08-16 12:00 UTC
FIXED_NOW = datetime(2023, 8, 16, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def now() -> datetime:
    """A fixed reference time for date-range criteria and stamps."""
    return FIXED_NOW


@pytest.fixture
def seed_settings() -> Settings:
    """Settings with the backend disabled: every store reads the fixed seed."""
    return Settings(backend_enabled=False, log_level="DEBUG")


@pytest.fixture
def make_item() -> Callable[..., InventoryItem]:
    """Factory for inventory items with only the interesting fields set."""

    def build(item_id: str, **fields) -> InventoryItem:
        fields.setdefault("name", f"Item {item_id}")
        fields.setdefault("sku", f"SKU-{item_id}")
        return InventoryItem(id=item_id, **fields)

    return build


@pytest.fixture
def make_store(now: datetime) -> Callable[..., RecordStore]:
    """
    Factory for a loaded store over explicit records (or the collection seed).

    The store's clock is frozen at the `now` fixture.
    """

    def build(
        collection: CollectionSpec,
        records: Optional[Sequence[Record]] = None,
        source=None,
    ) -> RecordStore:
        store = RecordStore(
            collection,
            source or FixedSeedSource(collection, records),
            clock=lambda: now,
        )
        store.load()
        return store

    return build


@pytest.fixture
def inventory_store(make_store) -> RecordStore:
    return make_store(INVENTORY)


@pytest.fixture
def movement_store(make_store) -> RecordStore:
    return make_store(MOVEMENTS)


@pytest.fixture
def order_store(make_store) -> RecordStore:
    return make_store(ORDERS)


@pytest.fixture(scope="session")
def test_settings() -> Settings:
    """
    Backend-enabled settings for integration tests.

    Can be overridden via environment variables in CI or local testing.
    """
    return Settings(
        db_host=os.getenv("DB_HOST", "localhost"),
        db_port=int(os.getenv("DB_PORT", "5432")),
        db_user=os.getenv("DB_USER", "postgres"),
        db_password=os.getenv("DB_PASSWORD", "postgres"),
        db_name=os.getenv("DB_NAME", "stockroom"),
        backend_enabled=True,
        log_level="DEBUG",
    )


@pytest.fixture(scope="session")
def test_dsn(test_settings: Settings) -> str:
    """
    Database connection string for tests.
    """
    return (
        f"postgresql://{test_settings.db_user}:{test_settings.db_password}"
        f"@{test_settings.db_host}:{test_settings.db_port}/{test_settings.db_name}"
    )


@pytest.fixture(scope="session")
def db_connection_available(test_dsn: str) -> bool:
    """
    Check if database is reachable.

    Used to conditionally skip integration tests when DB is not available.
    """
    try:
        with psycopg.connect(test_dsn, connect_timeout=5) as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT 1;")
                cur.fetchone()
        return True
    except psycopg.Error:
        return False


@pytest.fixture(scope="session")
def db_connection(
    test_dsn: str, db_connection_available: bool
) -> Generator[psycopg.Connection, None, None]:
    """
    Provide a session-scoped database connection for integration tests.

    Skips tests if database is not available.
    """
    if not db_connection_available:
        pytest.skip("Database not available for integration tests")

    conn = psycopg.connect(test_dsn)
    try:
        yield conn
    finally:
        conn.close()


@pytest.fixture(scope="session")
def db_schema_initialized(db_connection: psycopg.Connection) -> bool:
    """
    Ensure the backend schema exists by running db/init.sql.

    Every statement in the script is idempotent.
    """
    init_sql_path = Path(__file__).parent.parent / "db" / "init.sql"
    with db_connection.cursor() as cur:
        cur.execute(init_sql_path.read_text(encoding="utf-8"))
    db_connection.commit()
    return True


def _truncate(conn: psycopg.Connection, tables: List[str]) -> None:
    with conn.cursor() as cur:
        cur.execute(f"TRUNCATE TABLE {', '.join('public.' + table for table in tables)};")
    conn.commit()


@pytest.fixture(scope="function")
def clean_tables(db_connection: psycopg.Connection, db_schema_initialized: bool):
    """
    Empty every backend table before and after each test function.
    """
    _truncate(db_connection, list(BACKEND_TABLES))
    yield
    _truncate(db_connection, list(BACKEND_TABLES))
