"""Command-line interface: browse collections, dashboard stats and per-record history."""

from __future__ import annotations

import sys
from typing import Dict, List, Optional

import typer
from pydantic import ValidationError

from stockroom.config import get_settings
from stockroom.domain.collections import available_collections, get_collection
from stockroom.exceptions import StockroomError
from stockroom.query.filters import FilterSet, SortDirection, SortSpec
from stockroom.reporter import print_dashboard, print_notice, print_records
from stockroom.reports import (
    inventory_summary,
    movement_over_time,
    movement_stats,
    movements_for_product,
    orders_for_customer,
    stock_alerts,
    stock_by_category,
    top_selling_products,
)
from stockroom.store import RecordStore, customer_store, open_store
from stockroom.utils.logging import configure_logging

app = typer.Typer(help="Stockroom inventory dashboard CLI.")


def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


def _parse_criteria(raw: List[str]) -> Dict[str, str]:
    criteria: Dict[str, str] = {}
    for item in raw:
        name, sep, value = item.partition("=")
        if not sep or not name.strip():
            raise typer.BadParameter(f"expected NAME=VALUE, got '{item}'", param_hint="--filter")
        criteria[name.strip()] = value.strip()
    return criteria


def _customer_names(orders: RecordStore):
    customers = customer_store(orders)

    def resolve(reference: Optional[str]) -> Optional[str]:
        customer = customers.resolve(reference)
        return customer.name if customer is not None else None

    return resolve


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    backend = "configured" if settings.backend_configured else "not configured (seed data)"
    typer.echo(
        f"DB={settings.db_user}@{settings.db_host}:{settings.db_port}/{settings.db_name} | "
        f"backend={backend} prefix='{settings.table_prefix}' "
        f"attempts={settings.db_connect_attempts} timeout={settings.db_connect_timeout_s}s"
    )


@app.command()
def collections() -> None:
    """
    List the registered collections with their filters and sort columns.
    """
    for name in available_collections():
        spec = get_collection(name)
        filters = ", ".join(sorted(spec.filters)) or "-"
        sorts = ", ".join(sorted(spec.sort_keys)) or "-"
        typer.echo(f"{name}: filters[{filters}] sort[{sorts}]")


@app.command("list")
def list_records(
    collection: str = typer.Argument(..., help="Collection to list (see `collections`)."),
    query: str = typer.Option("", "--query", "-q", help="Free-text search."),
    criteria: List[str] = typer.Option(
        [],
        "--filter",
        "-f",
        help="Named criterion as NAME=VALUE (e.g. stock=low-stock, date_range=thisMonth). Repeatable.",
    ),
    sort: Optional[str] = typer.Option(None, "--sort", "-s", help="Sort column (default per collection)."),
    desc: bool = typer.Option(False, "--desc", help="Sort descending."),
    limit: Optional[int] = typer.Option(None, "--limit", "-n", min=1, help="Show at most N records."),
) -> None:
    """
    Show a filtered, sorted view of one collection.
    """
    _setup()
    filters = FilterSet(query=query, criteria=_parse_criteria(criteria))
    try:
        order = (
            SortSpec(column=sort, direction=SortDirection.DESC if desc else SortDirection.ASC)
            if sort
            else None
        )
        store = open_store(collection)
        view = store.query(filters, order)
        resolvers = {}
        if store.collection.name == "stock_outs":
            resolvers["customer_id"] = _customer_names(open_store("orders"))
    except (StockroomError, ValidationError) as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    print_notice(store.notice)
    shown = view[:limit] if limit else view
    print_records(
        shown,
        store.collection,
        resolvers=resolvers,
        caption=f"{len(shown)} of {len(view)} matching ({len(store)} total)",
    )


@app.command()
def stats() -> None:
    """
    Show dashboard figures: inventory totals, movements and top sellers.
    """
    _setup()
    inventory = open_store("inventory")
    movements = open_store("movements")
    orders = open_store("orders")
    for store in (inventory, movements, orders):
        print_notice(store.notice)

    print_dashboard(
        inventory_summary(inventory.records),
        movement_stats(movements.records),
        stock_by_category(inventory.records),
        movement_over_time(movements.records),
        stock_alerts(inventory.records),
        top_selling_products(orders.records),
    )


@app.command()
def history(product_id: str = typer.Argument(..., help="Inventory item id.")) -> None:
    """
    Show the movement history of one product, newest first.
    """
    _setup()
    inventory = open_store("inventory")
    movements = open_store("movements")
    item = inventory.get(product_id)
    if item is None:
        typer.echo(f"Warning: no inventory item '{product_id}', showing recorded movements only.", err=True)
    title = f"Movements of {item.name}" if item is not None else f"Movements of {product_id}"
    print_records(movements_for_product(movements.records, product_id), movements.collection, title=title)


@app.command()
def customer(customer_id: str = typer.Argument(..., help="Customer id.")) -> None:
    """
    Show one customer's orders, newest first.
    """
    _setup()
    orders = open_store("orders")
    customers = customer_store(orders)
    try:
        summary = customers.require(customer_id)
    except StockroomError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)
    print_records(
        orders_for_customer(orders.records, customer_id),
        orders.collection,
        title=f"Orders of {summary.name}",
        caption=f"{summary.total_orders} orders, {summary.total_spent:,.2f} spent",
    )


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
