"""
Synthetic data generation and loading script for stockroom.

Implements deterministic pseudo-random inventory items and stock movements,
CSV emission, and Postgres COPY loading into the backend tables.
"""

from __future__ import annotations

import csv
import random
import sys
import tempfile
import time
from datetime import datetime, timedelta, timezone
from pathlib import Path

import typer
from psycopg import sql

from stockroom.config import get_settings
from stockroom.domain.models import MovementType
from stockroom.infrastructure.db_factory import build_dsn, get_sync_connection

app = typer.Typer(help="Generate synthetic inventory data and load into Postgres (CSV + COPY).")

ITEM_COLUMNS = [
    "id",
    "name",
    "sku",
    "category_name",
    "supplier_name",
    "quantity",
    "unit_cost",
    "selling_price",
    "reorder_level",
    "reorder_quantity",
    "location",
    "created_at",
    "updated_at",
]

MOVEMENT_COLUMNS = [
    "id",
    "product_id",
    "product_name",
    "quantity",
    "from_warehouse",
    "to_warehouse",
    "movement_type",
    "date",
    "initiated_by",
    "created_at",
    "updated_at",
]

CATEGORIES = ["Electronics", "Office Supplies", "Furniture", "Packaging"]
SUPPLIERS = ["TechSupply Inc.", "Office Essentials", "Premier Products"]
WAREHOUSES = ["Main Warehouse", "East Depot", "West Depot"]
STAFF = ["John Smith", "Sarah Lee", "Michael Johnson"]
NOUNS = ["Cable", "Monitor", "Desk", "Chair", "Stapler", "Notebook", "Lamp", "Box"]


def _build_dsn(dsn_override: str | None) -> str:
    if dsn_override:
        return dsn_override
    return build_dsn()


def _generate_items_csv(csv_path: Path, rows: int, seed: int) -> list[tuple[str, str]]:
    """Write inventory items; return (id, name) of every generated item."""
    rng = random.Random(seed)
    now = datetime.now(timezone.utc).isoformat()
    generated: list[tuple[str, str]] = []

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(ITEM_COLUMNS)
        for i in range(rows):
            item_id = f"gen-item-{i + 1}"
            name = f"{rng.choice(NOUNS)} {i + 1}"
            unit_cost = round(rng.uniform(1, 500), 2)
            reorder_level = rng.randint(0, 25)
            writer.writerow(
                [
                    item_id,
                    name,
                    f"GEN-{i + 1:06d}",
                    rng.choice(CATEGORIES),
                    rng.choice(SUPPLIERS),
                    rng.randint(0, 200),
                    f"{unit_cost:.2f}",
                    f"{unit_cost * rng.uniform(1.1, 1.8):.2f}",
                    reorder_level,
                    reorder_level * 2 + 10,
                    f"Shelf {rng.choice('ABCDEF')}-{rng.randint(1, 20)}",
                    now,
                    now,
                ]
            )
            generated.append((item_id, name))
    return generated


def _generate_movements_csv(
    csv_path: Path,
    items: list[tuple[str, str]],
    rows: int,
    batch_size: int,
    seed: int,
    start: datetime | None = None,
) -> None:
    rng = random.Random(seed)
    origin = start or datetime(2023, 1, 1, tzinfo=timezone.utc)
    now = datetime.now(timezone.utc).isoformat()
    kinds = [member.value for member in MovementType]
    if not items:
        rows = 0

    with csv_path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(MOVEMENT_COLUMNS)

        buffer: list[list[str]] = []
        for i in range(rows):
            item_id, item_name = rng.choice(items)
            kind = rng.choice(kinds)
            source = rng.choice(WAREHOUSES) if kind != MovementType.NEW_STOCK.value else ""
            target = rng.choice(WAREHOUSES) if kind != MovementType.STOCK_OUT.value else ""
            moment = origin + timedelta(minutes=rng.randint(0, 365 * 24 * 60))
            buffer.append(
                [
                    f"gen-mov-{i + 1}",
                    item_id,
                    item_name,
                    str(rng.randint(1, 60)),
                    source,
                    target,
                    kind,
                    moment.isoformat(),
                    rng.choice(STAFF),
                    now,
                    now,
                ]
            )
            if len(buffer) >= batch_size:
                writer.writerows(buffer)
                buffer.clear()
        if buffer:
            writer.writerows(buffer)


def _copy_into_db(dsn: str, table: str, columns: list[str], csv_path: Path) -> int:
    query = sql.SQL("COPY {} ({}) FROM STDIN WITH (FORMAT csv, HEADER TRUE, NULL '\\N')").format(
        sql.Identifier(table),
        sql.SQL(", ").join(sql.Identifier(column) for column in columns),
    )
    with get_sync_connection(dsn) as conn:
        with conn.cursor() as cur:
            with cur.copy(query) as copy:
                with csv_path.open("r", encoding="utf-8") as f:
                    for line in f:
                        copy.write(line)
            copied = cur.rowcount
        conn.commit()
    return copied


@app.command()
def main(
    items: int = typer.Option(
        500,
        "--items",
        "-i",
        help="Number of inventory items to generate.",
    ),
    movements: int = typer.Option(
        5_000,
        "--movements",
        "-m",
        help="Number of stock movements to generate.",
    ),
    batch_size: int = typer.Option(
        1_000,
        "--batch-size",
        "-b",
        help="Batch size for CSV buffering during generation.",
    ),
    seed: int = typer.Option(
        42,
        "--seed",
        help="Deterministic RNG seed.",
    ),
    output: Path | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Optional output directory for the CSV files (if omitted, a temp dir will be used).",
    ),
    dsn: str | None = typer.Option(
        None,
        "--dsn",
        help="Optional DSN override for Postgres.",
    ),
    no_load: bool = typer.Option(
        False,
        "--no-load",
        help="Only generate CSV; skip loading into Postgres.",
    ),
) -> None:
    """
    Generate synthetic inventory data and optionally load it into Postgres using COPY.
    """
    start = time.perf_counter()
    if output:
        output.mkdir(parents=True, exist_ok=True)
        directory = output
    else:
        directory = Path(tempfile.mkdtemp(prefix="stockroom_csv_"))
    items_path = directory / "inventory_items.csv"
    movements_path = directory / "stock_movements.csv"

    typer.echo(f"Generating {items:,} items and {movements:,} movements -> {directory} (seed={seed})")
    generated = _generate_items_csv(items_path, rows=items, seed=seed)
    _generate_movements_csv(movements_path, generated, rows=movements, batch_size=batch_size, seed=seed)
    gen_duration = time.perf_counter() - start
    typer.echo(f"CSV generation completed in {gen_duration:.2f}s")

    if no_load:
        typer.echo("Skipping load (no-load flag set).")
        return

    settings = get_settings()
    conn_dsn = _build_dsn(dsn)
    typer.echo("Loading CSV into Postgres via COPY...")
    loaded_items = _copy_into_db(conn_dsn, settings.table_name("inventory_items"), ITEM_COLUMNS, items_path)
    loaded_movements = _copy_into_db(
        conn_dsn, settings.table_name("stock_movements"), MOVEMENT_COLUMNS, movements_path
    )

    total_duration = time.perf_counter() - start
    typer.echo(
        f"Loaded {loaded_items:,} items and {loaded_movements:,} movements. "
        f"Total time {total_duration:.2f}s."
    )


if __name__ == "__main__":
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)
