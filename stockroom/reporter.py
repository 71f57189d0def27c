"""Rich tables for collection views, notices and the dashboard."""

from __future__ import annotations

from datetime import date, datetime
from enum import Enum
from typing import Any, Callable, List, Mapping, Optional, Sequence

from rich import box
from rich.console import Console
from rich.table import Table

from stockroom.domain.collections import CollectionSpec
from stockroom.domain.models import InventoryItem
from stockroom.query.aggregate import MonthlySeries
from stockroom.query.fields import getter
from stockroom.reports import InventorySummary, MovementStats, ProductSales

UNKNOWN = "Unknown"

Resolver = Callable[[Optional[str]], Optional[str]]


def format_value(value: Any) -> str:
    """
    Render a field value as table text.

    Datetimes show their date, floats two decimals with separators, enums
    their value and absent values a dash.
    """
    if value is None or value == "":
        return "-"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, datetime):
        return value.strftime("%Y-%m-%d")
    if isinstance(value, date):
        return value.isoformat()
    if isinstance(value, bool):
        return "yes" if value else "no"
    if isinstance(value, float):
        return f"{value:,.2f}"
    if isinstance(value, int):
        return f"{value:,}"
    return str(value)


def print_notice(notice: Optional[str], console: Optional[Console] = None) -> None:
    if notice:
        (console or Console()).print(f"[yellow]{notice}[/yellow]")


def print_records(
    records: Sequence[Any],
    collection: CollectionSpec,
    resolvers: Optional[Mapping[str, Resolver]] = None,
    title: Optional[str] = None,
    caption: Optional[str] = None,
    console: Optional[Console] = None,
) -> None:
    """
    Render records as a rich table using the collection's display columns.

    `resolvers` maps a column's field name to a function turning the stored
    reference into display text; references that resolve to nothing are
    shown as "Unknown".
    """
    console = console or Console()

    if not records:
        console.print(f"[yellow]No {collection.name} to display.[/yellow]")
        return

    resolvers = resolvers or {}
    table = Table(title=title or collection.name.replace("_", " ").title(), box=box.ROUNDED, caption=caption)
    readers: List[Callable[[Any], str]] = []
    for header, field in collection.columns:
        numeric = False
        if isinstance(field, str):
            annotation = collection.model.model_fields.get(field)
            computed = collection.model.model_computed_fields.get(field)
            kind = annotation.annotation if annotation else (computed.return_type if computed else None)
            numeric = kind in (int, float)
        table.add_column(header, justify="right" if numeric else "left", no_wrap=header in ("Name", "Product"))

        read = getter(field)
        resolver = resolvers.get(field) if isinstance(field, str) else None
        if resolver is not None:
            readers.append(lambda record, read=read, resolver=resolver: resolver(read(record)) or UNKNOWN)
        else:
            readers.append(lambda record, read=read: format_value(read(record)))

    for record in records:
        table.add_row(*(reader(record) for reader in readers))

    console.print(table)


def print_dashboard(
    summary: InventorySummary,
    movements: MovementStats,
    by_category: Mapping[str, float],
    monthly: MonthlySeries,
    alerts: Sequence[InventoryItem],
    top_products: Sequence[ProductSales],
    console: Optional[Console] = None,
) -> None:
    """
    Render the dashboard aggregates as a series of rich tables.
    """
    console = console or Console()

    headline = Table(title="Inventory Overview", box=box.ROUNDED)
    headline.add_column("Total Items", justify="right", style="cyan")
    headline.add_column("Total Stock", justify="right", style="magenta")
    headline.add_column("Stock Value", justify="right", style="bold green")
    headline.add_column("Needs Reorder", justify="right", style="red")
    headline.add_row(
        format_value(summary.total_items),
        format_value(summary.total_stock),
        format_value(float(summary.total_value)),
        format_value(summary.reorder_count),
    )
    console.print(headline)

    flows = Table(title="Stock Movements", box=box.ROUNDED)
    flows.add_column("New Stock", justify="right", style="green")
    flows.add_column("Stock Out", justify="right", style="red")
    flows.add_column("Transfers", justify="right", style="blue")
    flows.add_column("Adjustments", justify="right", style="yellow")
    flows.add_row(
        format_value(movements.new_stock),
        format_value(movements.stock_out),
        format_value(movements.transfers),
        format_value(movements.adjustments),
    )
    console.print(flows)

    categories = Table(title="Stock by Category", box=box.ROUNDED)
    categories.add_column("Category", style="cyan")
    categories.add_column("Units", justify="right", style="magenta")
    for name, units in by_category.items():
        categories.add_row(name, format_value(int(units)))
    console.print(categories)

    if monthly.keys:
        series = Table(title="Movements over Time", box=box.ROUNDED)
        series.add_column("Month", style="cyan")
        for name in monthly.series:
            series.add_column(name.replace("_", " ").title(), justify="right")
        for row in monthly.as_rows():
            series.add_row(row["month"], *(format_value(int(row[name])) for name in monthly.series))
        console.print(series)

    if alerts:
        low = Table(title="Stock Alerts", box=box.ROUNDED, caption="At or below reorder level")
        low.add_column("Item", style="cyan", no_wrap=True)
        low.add_column("SKU")
        low.add_column("Qty", justify="right", style="red")
        low.add_column("Reorder at", justify="right")
        for item in alerts:
            low.add_row(item.name, item.sku, format_value(item.quantity), format_value(item.reorder_level))
        console.print(low)

    if top_products:
        top = Table(title="Top Selling Products", box=box.ROUNDED)
        top.add_column("Product", style="cyan", no_wrap=True)
        top.add_column("Units", justify="right", style="magenta")
        top.add_column("Revenue", justify="right", style="bold green")
        for sale in top_products:
            top.add_row(sale.product_name, format_value(sale.units), format_value(float(sale.revenue)))
        console.print(top)


__all__ = ["UNKNOWN", "format_value", "print_dashboard", "print_notice", "print_records"]
