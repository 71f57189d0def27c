"""
Per-collection query configuration.

Each CollectionSpec tells the executor which fields free-text search looks
at, which named criteria a view may set, and how sort columns map to record
values. The column aliases mirror the ones the dashboard's list views send.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Callable, Dict, List, Mapping, Optional, Tuple, Type

from stockroom.domain.models import (
    ActiveStatus,
    Category,
    CustomerSummary,
    InventoryItem,
    MovementType,
    Order,
    OrderStatus,
    PaymentStatus,
    PurchaseOrder,
    PurchaseOrderStatus,
    Record,
    StockLevel,
    StockMovement,
    StockOutRecord,
    Supplier,
    User,
    UserRole,
)
from stockroom.exceptions import UnknownCollectionError
from stockroom.query.fields import FieldRef, read_path
from stockroom.query.filters import (
    FilterDefinition,
    SortDirection,
    SortSpec,
    equals,
    equals_any,
    within_date_range,
)

SortKey = Callable[[Any], Any]


def text(path: str) -> SortKey:
    """Case-insensitive text sort key."""

    def key(record: Any) -> Optional[str]:
        value = read_path(record, path)
        return None if value is None else str(value).casefold()

    return key


def value(path: str) -> SortKey:
    """Raw sort key: numbers arithmetically, datetimes chronologically."""
    return lambda record: read_path(record, path)


@dataclass(frozen=True)
class CollectionSpec:
    """
    Query configuration of one record collection.

    Attributes
    ----------
    name : str
        Registry name, also used in log context and error messages.
    model : type[Record]
        Record type stored in the collection.
    table : str
        Backend table name (before the configured prefix).
    id_prefix : str
        Prefix of identifiers generated for new records.
    search_fields : tuple
        Fields the free-text query is matched against.
    filters : mapping
        Named criteria available to views.
    sort_keys : mapping
        Sort column aliases.
    default_sort : SortSpec | None
        Order used when a view sets none.
    columns : tuple
        (header, field) pairs for tabular display.
    derived : bool
        True when records are computed from another collection and never
        read from the backend.
    """

    name: str
    model: Type[Record]
    table: str
    id_prefix: str
    search_fields: Tuple[FieldRef, ...]
    filters: Mapping[str, FilterDefinition] = field(default_factory=dict)
    sort_keys: Mapping[str, SortKey] = field(default_factory=dict)
    default_sort: Optional[SortSpec] = None
    columns: Tuple[Tuple[str, FieldRef], ...] = ()
    derived: bool = False


def _by_name(*definitions: FilterDefinition) -> Dict[str, FilterDefinition]:
    return {definition.name: definition for definition in definitions}


def _choices(enum_type: Any) -> List[str]:
    return [member.value for member in enum_type]


def _stock_level_test(record: InventoryItem, level: str, now: datetime) -> bool:
    level = level.casefold()
    if level == StockLevel.IN_STOCK.value:
        return record.quantity > 0
    if level == StockLevel.LOW_STOCK.value:
        return 0 < record.quantity <= record.reorder_level
    return record.quantity == 0


INVENTORY = CollectionSpec(
    name="inventory",
    model=InventoryItem,
    table="inventory_items",
    id_prefix="item",
    search_fields=("name", "sku", "description", "barcode"),
    filters=_by_name(
        equals("category", "category_id"),
        equals("supplier", "supplier_id"),
        FilterDefinition(name="stock", test=_stock_level_test, choices=tuple(_choices(StockLevel))),
    ),
    sort_keys={
        "name": text("name"),
        "sku": text("sku"),
        "quantity": value("quantity"),
        "price": value("selling_price"),
        "cost": value("unit_cost"),
        "category": text("category_name"),
        "supplier": text("supplier_name"),
        "updated": value("updated_at"),
    },
    default_sort=SortSpec(column="name"),
    columns=(
        ("Name", "name"),
        ("SKU", "sku"),
        ("Category", "category_name"),
        ("Supplier", "supplier_name"),
        ("Qty", "quantity"),
        ("Reorder", "reorder_level"),
        ("Price", "selling_price"),
        ("Status", "stock_status"),
    ),
)

CATEGORIES = CollectionSpec(
    name="categories",
    model=Category,
    table="categories",
    id_prefix="cat",
    search_fields=("name", "description"),
    sort_keys={"name": text("name"), "created": value("created_at")},
    default_sort=SortSpec(column="name"),
    columns=(("Name", "name"), ("Description", "description")),
)

SUPPLIERS = CollectionSpec(
    name="suppliers",
    model=Supplier,
    table="suppliers",
    id_prefix="sup",
    search_fields=("name", "contact_person", "email", "phone"),
    filters=_by_name(equals("status", "status", casefold=True, choices=_choices(ActiveStatus))),
    sort_keys={
        "name": text("name"),
        "contact": text("contact_person"),
        "email": text("email"),
        "status": value("status"),
    },
    default_sort=SortSpec(column="name"),
    columns=(
        ("Name", "name"),
        ("Contact", "contact_person"),
        ("Email", "email"),
        ("Phone", "phone"),
        ("Status", "status"),
    ),
)

MOVEMENTS = CollectionSpec(
    name="movements",
    model=StockMovement,
    table="stock_movements",
    id_prefix="mov",
    search_fields=("product_name", "batch_number", "movement_reason", "initiated_by", "customer_name"),
    filters=_by_name(
        equals("product", "product_id"),
        equals("type", "movement_type", casefold=True, choices=_choices(MovementType)),
        equals_any("warehouse", ("from_warehouse", "to_warehouse")),
        within_date_range("date_range", "date"),
    ),
    sort_keys={
        "date": value("date"),
        "productName": text("product_name"),
        "product_name": text("product_name"),
        "quantity": value("quantity"),
        "movementType": value("movement_type"),
        "type": value("movement_type"),
        "initiatedBy": text("initiated_by"),
        "initiated_by": text("initiated_by"),
    },
    default_sort=SortSpec(column="date", direction=SortDirection.DESC),
    columns=(
        ("Date", "date"),
        ("Product", "product_name"),
        ("Batch", "batch_number"),
        ("Type", "movement_type"),
        ("Qty", "quantity"),
        ("From", "from_warehouse"),
        ("To", "to_warehouse"),
        ("By", "initiated_by"),
    ),
)

ORDERS = CollectionSpec(
    name="orders",
    model=Order,
    table="orders",
    id_prefix="order",
    search_fields=("order_number", "customer.name", "customer.email"),
    filters=_by_name(
        equals("status", "status", casefold=True, choices=_choices(OrderStatus)),
        equals("customer", "customer.id"),
        within_date_range("date_range", "order_date"),
    ),
    sort_keys={
        "id": text("order_number"),
        "orderNumber": text("order_number"),
        "order_number": text("order_number"),
        "date": value("order_date"),
        "customer": text("customer.name"),
        "status": value("status"),
        "amount": value("total_amount"),
    },
    default_sort=SortSpec(column="date", direction=SortDirection.DESC),
    columns=(
        ("Order #", "order_number"),
        ("Date", "order_date"),
        ("Customer", "customer.name"),
        ("Items", lambda order: len(order.items)),
        ("Status", "status"),
        ("Total", "total_amount"),
    ),
)

CUSTOMERS = CollectionSpec(
    name="customers",
    model=CustomerSummary,
    table="customers",
    id_prefix="cust",
    search_fields=("name", "email", "phone"),
    sort_keys={
        "name": text("name"),
        "email": text("email"),
        "totalOrders": value("total_orders"),
        "totalSpent": value("total_spent"),
        "lastOrderDate": value("last_order_date"),
    },
    default_sort=SortSpec(column="name"),
    columns=(
        ("Name", "name"),
        ("Email", "email"),
        ("Phone", "phone"),
        ("Orders", "total_orders"),
        ("Spent", "total_spent"),
        ("Last order", "last_order_date"),
    ),
    derived=True,
)

PURCHASE_ORDERS = CollectionSpec(
    name="purchase_orders",
    model=PurchaseOrder,
    table="purchase_orders",
    id_prefix="po",
    search_fields=("po_number", "supplier_name", "notes"),
    filters=_by_name(
        equals("status", "status", casefold=True, choices=_choices(PurchaseOrderStatus)),
        equals("payment_status", "payment_status", casefold=True, choices=_choices(PaymentStatus)),
        equals("supplier", "supplier_id"),
        within_date_range("date_range", "order_date"),
    ),
    sort_keys={
        "date": value("order_date"),
        "po_number": text("po_number"),
        "supplier": text("supplier_name"),
        "status": value("status"),
        "amount": value("total_amount"),
    },
    default_sort=SortSpec(column="date", direction=SortDirection.DESC),
    columns=(
        ("PO #", "po_number"),
        ("Supplier", "supplier_name"),
        ("Date", "order_date"),
        ("Status", "status"),
        ("Payment", "payment_status"),
        ("Total", "total_amount"),
    ),
)

STOCK_OUTS = CollectionSpec(
    name="stock_outs",
    model=StockOutRecord,
    table="stock_outs",
    id_prefix="so",
    search_fields=("product_name", "customer_name", "order_reference", "requested_by", "reason"),
    filters=_by_name(
        equals("reason", "reason", casefold=True),
        equals("customer", "customer_id"),
        within_date_range("date_range", "date"),
    ),
    sort_keys={
        "date": value("date"),
        "product": text("product_name"),
        "quantity": value("quantity"),
        "amount": value("total_price"),
        "reason": text("reason"),
    },
    default_sort=SortSpec(column="date", direction=SortDirection.DESC),
    columns=(
        ("Date", "date"),
        ("Product", "product_name"),
        ("Qty", "quantity"),
        ("Reason", "reason"),
        ("Customer", "customer_id"),
        ("Total", "total_price"),
    ),
)

USERS = CollectionSpec(
    name="users",
    model=User,
    table="users",
    id_prefix="user",
    search_fields=("name", "email"),
    filters=_by_name(
        equals("role", "role", casefold=True, choices=_choices(UserRole)),
        equals("status", "status", casefold=True, choices=_choices(ActiveStatus)),
    ),
    sort_keys={
        "name": text("name"),
        "email": text("email"),
        "role": value("role"),
        "status": value("status"),
        "lastActive": value("last_active"),
    },
    default_sort=SortSpec(column="name"),
    columns=(("Name", "name"), ("Email", "email"), ("Role", "role"), ("Status", "status")),
)

COLLECTIONS: Dict[str, CollectionSpec] = {
    spec.name: spec
    for spec in (
        INVENTORY,
        CATEGORIES,
        SUPPLIERS,
        MOVEMENTS,
        ORDERS,
        CUSTOMERS,
        PURCHASE_ORDERS,
        STOCK_OUTS,
        USERS,
    )
}


def available_collections() -> List[str]:
    """List registered collection names."""
    return sorted(COLLECTIONS)


def get_collection(name: str) -> CollectionSpec:
    if name not in COLLECTIONS:
        raise UnknownCollectionError(name, COLLECTIONS)
    return COLLECTIONS[name]


__all__ = [
    "CATEGORIES",
    "COLLECTIONS",
    "CUSTOMERS",
    "CollectionSpec",
    "INVENTORY",
    "MOVEMENTS",
    "ORDERS",
    "PURCHASE_ORDERS",
    "STOCK_OUTS",
    "SUPPLIERS",
    "USERS",
    "available_collections",
    "get_collection",
    "text",
    "value",
]
