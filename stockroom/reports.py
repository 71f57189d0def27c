"""
Dashboard and report aggregates built on the query aggregator.

Every function takes plain record sequences (usually a store snapshot) and
recomputes its result; nothing here is cached or stored.

Usage:
    from stockroom.reports import inventory_summary, movement_stats

    summary = inventory_summary(inventory_store.records)
    print(summary.total_stock, summary.reorder_count)
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import tzinfo
from typing import Dict, Iterable, List, Optional

from stockroom.domain.models import (
    CustomerSummary,
    InventoryItem,
    MovementType,
    Order,
    OrderStatus,
    StockMovement,
)
from stockroom.query.aggregate import MonthlySeries, time_series_by_month, totals_by_category

UNCATEGORISED = "Uncategorised"


@dataclass(frozen=True)
class InventorySummary:
    """Headline inventory figures."""

    total_items: int
    total_stock: int
    total_value: float
    reorder_count: int


@dataclass(frozen=True)
class MovementStats:
    """
    Totals over a set of stock movements.

    Attributes
    ----------
    new_stock : int
        Units received through "New Stock" movements.
    stock_out : int
        Units issued through "Stock Out" movements.
    transfers : int
        Number of transfer movements (not units).
    adjustments : int
        Units moved by adjustments.
    """

    new_stock: int
    stock_out: int
    transfers: int
    adjustments: int


@dataclass(frozen=True)
class ProductSales:
    product_id: str
    product_name: str
    units: int
    revenue: float


def inventory_summary(items: Iterable[InventoryItem]) -> InventorySummary:
    """
    Summarize inventory items.

    The reorder count includes out-of-stock items: an item needs reordering
    once its quantity is at or below its reorder level.
    """
    items = list(items)
    return InventorySummary(
        total_items=len(items),
        total_stock=sum(item.quantity for item in items),
        total_value=sum(item.quantity * item.unit_cost for item in items),
        reorder_count=sum(1 for item in items if item.quantity <= item.reorder_level),
    )


def stock_by_category(items: Iterable[InventoryItem]) -> Dict[str, float]:
    """Units in stock per category name, in first-seen order."""
    return totals_by_category(
        items,
        lambda item: item.category_name.strip() or UNCATEGORISED,
        "quantity",
    )


def movement_stats(movements: Iterable[StockMovement]) -> MovementStats:
    movements = list(movements)
    totals = totals_by_category(movements, "movement_type", "quantity")
    counts = totals_by_category(movements, "movement_type")
    return MovementStats(
        new_stock=int(totals.get(MovementType.NEW_STOCK.value, 0)),
        stock_out=int(totals.get(MovementType.STOCK_OUT.value, 0)),
        transfers=int(counts.get(MovementType.TRANSFER.value, 0)),
        adjustments=int(totals.get(MovementType.ADJUSTMENT.value, 0)),
    )


def _units_if(movement_type: MovementType):
    return lambda movement: movement.quantity if movement.movement_type == movement_type else 0


def movement_over_time(movements: Iterable[StockMovement], tz: Optional[tzinfo] = None) -> MonthlySeries:
    """Monthly stock-in and stock-out units, oldest month first."""
    return time_series_by_month(
        movements,
        "date",
        {
            "stock_in": _units_if(MovementType.NEW_STOCK),
            "stock_out": _units_if(MovementType.STOCK_OUT),
        },
        tz=tz,
    )


def summarize_customers(orders: Iterable[Order]) -> List[CustomerSummary]:
    """
    Derive one CustomerSummary per distinct customer of the given orders.

    Customers keep the order in which they first appear. Contact details
    come from the customer's first order; the last order is the one with
    the latest order date, whatever its position in the input.
    """
    grouped: Dict[str, List[Order]] = {}
    for order in orders:
        grouped.setdefault(order.customer.id, []).append(order)

    summaries: List[CustomerSummary] = []
    for customer_id, customer_orders in grouped.items():
        customer = customer_orders[0].customer
        latest = max(customer_orders, key=lambda order: order.order_date)
        earliest = min(customer_orders, key=lambda order: order.order_date)
        summaries.append(
            CustomerSummary(
                id=customer_id,
                name=customer.name,
                email=customer.email,
                phone=customer.phone,
                address=customer.address,
                total_orders=len(customer_orders),
                total_spent=sum(order.total_amount for order in customer_orders),
                last_order_date=latest.order_date,
                last_order_status=latest.status,
                created_at=earliest.order_date,
                updated_at=latest.order_date,
            )
        )
    return summaries


def orders_for_customer(orders: Iterable[Order], customer_id: str) -> List[Order]:
    """A customer's orders, newest first."""
    matching = [order for order in orders if order.customer.id == customer_id]
    return sorted(matching, key=lambda order: order.order_date, reverse=True)


def movements_for_product(movements: Iterable[StockMovement], product_id: str) -> List[StockMovement]:
    """A product's movement history, newest first."""
    matching = [movement for movement in movements if movement.product_id == product_id]
    return sorted(matching, key=lambda movement: movement.date, reverse=True)


def lowest_stock(items: Iterable[InventoryItem], limit: int = 5) -> List[InventoryItem]:
    return sorted(items, key=lambda item: item.quantity)[:limit]


def stock_alerts(items: Iterable[InventoryItem]) -> List[InventoryItem]:
    """Items at or below their reorder level, emptiest first."""
    return sorted(
        (item for item in items if item.quantity <= item.reorder_level),
        key=lambda item: item.quantity,
    )


def top_selling_products(orders: Iterable[Order], limit: int = 5) -> List[ProductSales]:
    """
    Best-selling products by units sold.

    Cancelled orders are ignored. Lines are grouped by product id, or by
    name when a line carries no product id. Ties on units are broken by
    revenue.
    """
    units: Dict[str, int] = {}
    revenue: Dict[str, float] = {}
    names: Dict[str, str] = {}
    for order in orders:
        if order.status == OrderStatus.CANCELLED:
            continue
        for line in order.items:
            key = line.product_id or line.product_name
            names.setdefault(key, line.product_name)
            units[key] = units.get(key, 0) + line.quantity
            revenue[key] = revenue.get(key, 0.0) + line.total_price

    ranked = sorted(units, key=lambda key: (units[key], revenue[key]), reverse=True)
    return [
        ProductSales(product_id=key, product_name=names[key], units=units[key], revenue=revenue[key])
        for key in ranked[:limit]
    ]


__all__ = [
    "InventorySummary",
    "MovementStats",
    "ProductSales",
    "UNCATEGORISED",
    "inventory_summary",
    "lowest_stock",
    "movement_over_time",
    "movement_stats",
    "movements_for_product",
    "orders_for_customer",
    "stock_alerts",
    "stock_by_category",
    "summarize_customers",
    "top_selling_products",
]
