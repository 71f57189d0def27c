"""
Domain models for stockroom.

Defines the record schemas held by record stores and mirrored by the backend
tables in `db/init.sql`. Records are frozen: an update produces a new record
that replaces the old one in its store. Derived totals are computed fields so
they always agree with the fields they are built from and can never be
edited on their own.
"""
from __future__ import annotations

from datetime import date as CalendarDate
from datetime import datetime, timezone
from enum import Enum
from typing import Annotated, List, Optional

from pydantic import AfterValidator, BaseModel, Field, StringConstraints, computed_field

NonBlank = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]
Quantity = Annotated[int, Field(ge=0)]
Amount = Annotated[float, Field(ge=0)]


def utcnow() -> datetime:
    """Timezone-aware current time in UTC."""
    return datetime.now(timezone.utc)


def _assume_local(value: datetime) -> datetime:
    # naive input (including date-only strings) is read as local time
    return value if value.tzinfo is not None else value.astimezone()


# Stored timestamps are always timezone-aware.
Timestamp = Annotated[datetime, AfterValidator(_assume_local)]


class StockLevel(str, Enum):
    IN_STOCK = "in-stock"
    LOW_STOCK = "low-stock"
    OUT_OF_STOCK = "out-of-stock"


class MovementType(str, Enum):
    NEW_STOCK = "New Stock"
    TRANSFER = "Transfer"
    STOCK_OUT = "Stock Out"
    ADJUSTMENT = "Adjustment"


class OrderStatus(str, Enum):
    PENDING = "pending"
    PROCESSING = "processing"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


class PurchaseOrderStatus(str, Enum):
    DRAFT = "draft"
    ORDERED = "ordered"
    PARTIALLY_RECEIVED = "partially_received"
    RECEIVED = "received"
    CANCELLED = "cancelled"


class PaymentStatus(str, Enum):
    PENDING = "pending"
    PARTIAL = "partial"
    PAID = "paid"


class ActiveStatus(str, Enum):
    ACTIVE = "Active"
    INACTIVE = "Inactive"


class UserRole(str, Enum):
    ADMIN = "Admin"
    MANAGER = "Manager"
    STAFF = "Staff"


class Record(BaseModel):
    """
    Common shape of every stored entity.
    """

    id: NonBlank = Field(..., description="Identifier, unique within a store.")
    created_at: Timestamp = Field(default_factory=utcnow, description="Creation timestamp.")
    updated_at: Timestamp = Field(default_factory=utcnow, description="Last update timestamp.")

    model_config = {
        "frozen": True,
        "populate_by_name": True,
        "extra": "ignore",
    }


class Category(Record):
    name: NonBlank
    description: str = ""


class Supplier(Record):
    name: NonBlank
    contact_person: str = ""
    email: str = ""
    phone: str = ""
    address: str = ""
    status: ActiveStatus = ActiveStatus.ACTIVE


class InventoryItem(Record):
    """
    A stocked product.

    `category_id` and `supplier_id` are plain references; the referenced
    category or supplier may have been deleted since.
    """

    name: NonBlank
    sku: NonBlank
    description: str = ""
    barcode: str = ""
    category_id: Optional[str] = None
    category_name: str = ""
    supplier_id: Optional[str] = None
    supplier_name: str = ""
    quantity: Quantity = 0
    unit: str = "piece"
    unit_cost: Amount = 0.0
    selling_price: Amount = 0.0
    reorder_level: Quantity = 0
    reorder_quantity: Quantity = 0
    location: str = ""
    image_url: str = ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def stock_status(self) -> StockLevel:
        if self.quantity == 0:
            return StockLevel.OUT_OF_STOCK
        if self.quantity <= self.reorder_level:
            return StockLevel.LOW_STOCK
        return StockLevel.IN_STOCK

    @computed_field  # type: ignore[prop-decorator]
    @property
    def stock_value(self) -> float:
        return self.quantity * self.unit_cost


class StockMovement(Record):
    product_id: NonBlank
    product_name: NonBlank
    batch_number: str = ""
    quantity: Quantity
    from_warehouse: str = ""
    from_location: str = ""
    to_warehouse: str = ""
    to_location: str = ""
    movement_type: MovementType
    movement_reason: Optional[str] = None
    date: Timestamp
    initiated_by: NonBlank
    order_number: Optional[str] = None
    customer_name: Optional[str] = None
    reference_id: Optional[str] = None


class Customer(BaseModel):
    """Customer details as embedded in an order."""

    id: NonBlank
    name: NonBlank
    email: str = ""
    phone: str = ""
    address: str = ""

    model_config = {"frozen": True, "extra": "ignore"}


class OrderLine(BaseModel):
    id: NonBlank
    product_id: str = ""
    product_name: NonBlank
    quantity: Quantity
    unit_price: Amount

    model_config = {"frozen": True, "extra": "ignore"}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_price(self) -> float:
        return self.quantity * self.unit_price


class Order(Record):
    order_number: NonBlank
    order_date: Timestamp
    customer: Customer
    items: List[OrderLine] = Field(default_factory=list)
    status: OrderStatus = OrderStatus.PENDING
    payment_method: str = ""
    shipping_method: str = ""
    shipping_address: str = ""
    billing_address: str = ""
    notes: str = ""
    tracking_number: Optional[str] = None
    estimated_delivery: Optional[CalendarDate] = None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_amount(self) -> float:
        return sum(line.total_price for line in self.items)


class CustomerSummary(Record):
    """A customer together with statistics derived from their orders."""

    name: NonBlank
    email: str = ""
    phone: str = ""
    address: str = ""
    total_orders: Quantity = 0
    total_spent: Amount = 0.0
    last_order_date: Optional[Timestamp] = None
    last_order_status: Optional[OrderStatus] = None


class PurchaseOrderLine(BaseModel):
    item_id: str = ""
    item_name: NonBlank
    quantity: Quantity
    unit_price: Amount
    received_quantity: Quantity = 0

    model_config = {"frozen": True, "extra": "ignore"}

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_price(self) -> float:
        return self.quantity * self.unit_price


class PurchaseOrder(Record):
    po_number: NonBlank
    supplier_id: Optional[str] = None
    supplier_name: NonBlank
    order_date: Timestamp
    expected_delivery_date: Optional[CalendarDate] = None
    status: PurchaseOrderStatus = PurchaseOrderStatus.DRAFT
    payment_status: PaymentStatus = PaymentStatus.PENDING
    items: List[PurchaseOrderLine] = Field(default_factory=list)
    notes: str = ""
    created_by: str = ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_amount(self) -> float:
        return sum(line.total_price for line in self.items)


class StockOutRecord(Record):
    """
    Goods leaving the warehouse.

    `customer_id` is optional and may dangle once the customer is gone;
    readers resolve it and show a placeholder when nothing is found.
    """

    date: Timestamp
    product_id: Optional[str] = None
    product_name: NonBlank
    quantity: Quantity
    unit_price: Amount = 0.0
    reason: NonBlank = "Sale"
    requested_by: str = ""
    customer_id: Optional[str] = None
    customer_name: Optional[str] = None
    order_reference: Optional[str] = None
    destination: Optional[str] = None
    notes: str = ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def total_price(self) -> float:
        return self.quantity * self.unit_price


class User(Record):
    name: NonBlank
    email: NonBlank
    role: UserRole = UserRole.STAFF
    status: ActiveStatus = ActiveStatus.ACTIVE
    last_active: Optional[Timestamp] = None


def derived_fields(model: type[BaseModel]) -> frozenset[str]:
    """Names of computed fields on a model, which callers may never set."""
    return frozenset(model.model_computed_fields)


__all__ = [
    "ActiveStatus",
    "Amount",
    "Category",
    "Customer",
    "CustomerSummary",
    "InventoryItem",
    "MovementType",
    "NonBlank",
    "Order",
    "OrderLine",
    "OrderStatus",
    "PaymentStatus",
    "PurchaseOrder",
    "PurchaseOrderLine",
    "PurchaseOrderStatus",
    "Quantity",
    "Record",
    "StockLevel",
    "StockMovement",
    "StockOutRecord",
    "Supplier",
    "User",
    "UserRole",
    "derived_fields",
    "utcnow",
]
