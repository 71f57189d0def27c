import csv
from pathlib import Path

import psycopg
import pytest

from scripts import generate_data
from stockroom import config
from stockroom.config import Settings
from stockroom.domain.collections import CUSTOMERS, INVENTORY, available_collections, get_collection
from stockroom.exceptions import UnknownCollectionError
from stockroom.infrastructure import db_factory
from stockroom.sources import FixedSeedSource, RemoteSource, select_source

EXPECTED_COLLECTIONS = [
    "categories",
    "customers",
    "inventory",
    "movements",
    "orders",
    "purchase_orders",
    "stock_outs",
    "suppliers",
    "users",
]
EXPECTED_ITEMS = 5
EXPECTED_MOVEMENTS = 12


def test_get_settings_defaults():
    config.get_settings.cache_clear()
    settings = config.get_settings()
    assert settings.db_port == 5432
    assert settings.db_connect_attempts >= 1
    assert settings.db_pool_max_size >= settings.db_pool_min_size
    assert settings.table_name("orders").endswith("orders")


def test_backend_disabled_is_not_configured():
    settings = Settings(backend_enabled=False)
    assert settings.backend_configured is False


def test_backend_enabled_with_credentials_is_configured():
    settings = Settings(
        backend_enabled=True,
        db_host="db.internal",
        db_user="stock",
        db_password="s3cret",
        db_name="stockroom",
    )
    assert settings.backend_configured is True


@pytest.mark.parametrize("field", ["db_host", "db_user", "db_password", "db_name"])
def test_placeholder_credentials_are_not_configured(field: str):
    values = {
        "db_host": "db.internal",
        "db_user": "stock",
        "db_password": "s3cret",
        "db_name": "stockroom",
    }
    values[field] = "your-PLACEHOLDER-value"
    settings = Settings(backend_enabled=True, **values)
    assert settings.backend_configured is False


def test_blank_host_is_not_configured():
    settings = Settings(backend_enabled=True, db_host="", db_password="s3cret")
    assert settings.backend_configured is False


def test_table_prefix_is_applied():
    settings = Settings(table_prefix="demo_")
    assert settings.table_name("inventory_items") == "demo_inventory_items"


def test_available_collections_is_sorted_and_complete():
    names = available_collections()
    assert names == EXPECTED_COLLECTIONS
    assert names == sorted(names)


def test_get_collection_unknown_name_lists_available():
    with pytest.raises(UnknownCollectionError) as exc_info:
        get_collection("widgets")
    assert "widgets" in str(exc_info.value)
    assert "inventory" in str(exc_info.value)
    assert isinstance(exc_info.value, KeyError)


def test_select_source_uses_seed_without_backend(seed_settings: Settings):
    source = select_source(INVENTORY, seed_settings)
    assert isinstance(source, FixedSeedSource)
    assert source.kind == "seed"


def test_select_source_uses_remote_when_configured():
    settings = Settings(backend_enabled=True, db_host="db.internal", db_password="s3cret")
    source = select_source(INVENTORY, settings)
    assert isinstance(source, RemoteSource)
    assert source.kind == "remote"
    assert source.table == "inventory_items"


def test_select_source_never_reads_derived_collections_remotely():
    settings = Settings(backend_enabled=True, db_host="db.internal", db_password="s3cret")
    assert isinstance(select_source(CUSTOMERS, settings), FixedSeedSource)


def test_generate_data_writes_csv(tmp_path: Path):
    items_path = tmp_path / "inventory_items.csv"
    movements_path = tmp_path / "stock_movements.csv"

    items = generate_data._generate_items_csv(items_path, rows=EXPECTED_ITEMS, seed=123)
    generate_data._generate_movements_csv(
        movements_path, items, rows=EXPECTED_MOVEMENTS, batch_size=5, seed=123
    )

    with items_path.open("r", newline="", encoding="utf-8") as f:
        item_rows = list(csv.reader(f))
    with movements_path.open("r", newline="", encoding="utf-8") as f:
        movement_rows = list(csv.reader(f))

    # header + data rows
    assert len(item_rows) == EXPECTED_ITEMS + 1
    assert len(movement_rows) == EXPECTED_MOVEMENTS + 1
    assert item_rows[0] == generate_data.ITEM_COLUMNS
    assert movement_rows[0] == generate_data.MOVEMENT_COLUMNS

    item_ids = {row[0] for row in item_rows[1:]}
    product_column = generate_data.MOVEMENT_COLUMNS.index("product_id")
    assert all(row[product_column] in item_ids for row in movement_rows[1:])


def test_generate_data_is_deterministic(tmp_path: Path):
    first = tmp_path / "a.csv"
    second = tmp_path / "b.csv"
    generate_data._generate_items_csv(first, rows=EXPECTED_ITEMS, seed=7)
    generate_data._generate_items_csv(second, rows=EXPECTED_ITEMS, seed=7)

    def data_rows(path: Path):
        with path.open("r", newline="", encoding="utf-8") as f:
            # drop the generation timestamps, which differ between runs
            return [row[:-2] for row in csv.reader(f)]

    assert data_rows(first) == data_rows(second)


def test_get_sync_connection_retries_up_to_configured_attempts(monkeypatch):
    calls = []

    def flaky_connect(dsn, connect_timeout):
        calls.append(dsn)
        if len(calls) < 2:
            raise psycopg.OperationalError("connection refused")
        return "connection"

    monkeypatch.setattr(db_factory.psycopg, "connect", flaky_connect)

    conn = db_factory.get_sync_connection("postgresql://db/stockroom", settings=Settings(db_connect_attempts=2))

    assert conn == "connection"
    assert calls == ["postgresql://db/stockroom"] * 2


def test_get_sync_connection_makes_a_single_attempt_by_default(monkeypatch):
    calls = []

    def refuse(dsn, connect_timeout):
        calls.append(dsn)
        raise psycopg.OperationalError("connection refused")

    monkeypatch.setattr(db_factory.psycopg, "connect", refuse)

    with pytest.raises(psycopg.OperationalError):
        db_factory.get_sync_connection("postgresql://db/stockroom", settings=Settings())
    assert len(calls) == 1
