"""
Domain package for stockroom.

Exports the record models and the per-collection query configuration.
Keep this package focused on data definitions and validation concerns.
"""

from stockroom.domain.collections import (
    COLLECTIONS,
    CollectionSpec,
    available_collections,
    get_collection,
)
from stockroom.domain.models import (
    Category,
    Customer,
    CustomerSummary,
    InventoryItem,
    MovementType,
    Order,
    OrderLine,
    OrderStatus,
    PurchaseOrder,
    PurchaseOrderLine,
    Record,
    StockLevel,
    StockMovement,
    StockOutRecord,
    Supplier,
    User,
)

__all__ = [
    "COLLECTIONS",
    "Category",
    "CollectionSpec",
    "Customer",
    "CustomerSummary",
    "InventoryItem",
    "MovementType",
    "Order",
    "OrderLine",
    "OrderStatus",
    "PurchaseOrder",
    "PurchaseOrderLine",
    "Record",
    "StockLevel",
    "StockMovement",
    "StockOutRecord",
    "Supplier",
    "User",
    "available_collections",
    "get_collection",
]
