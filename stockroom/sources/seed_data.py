"""
Fixed seed rows for every stored collection.

Used when no backend is configured, when the backend cannot be read, and to
populate an empty backend inventory table. Rows are plain dictionaries in
backend column shape and are validated into records by FixedSeedSource.
"""

from __future__ import annotations

from typing import Any, Dict, List

Row = Dict[str, Any]

CATEGORIES: List[Row] = [
    {
        "id": "cat-1",
        "name": "Electronics",
        "description": "Electronic devices including computers, phones, and accessories",
        "created_at": "2023-06-01T09:00:00Z",
        "updated_at": "2023-06-01T09:00:00Z",
    },
    {
        "id": "cat-2",
        "name": "Office Supplies",
        "description": "Paper, pens, staplers, and other office necessities",
        "created_at": "2023-06-01T09:05:00Z",
        "updated_at": "2023-06-01T09:05:00Z",
    },
    {
        "id": "cat-3",
        "name": "Furniture",
        "description": "Desks, chairs, filing cabinets and other office furniture",
        "created_at": "2023-06-01T09:10:00Z",
        "updated_at": "2023-06-01T09:10:00Z",
    },
]

SUPPLIERS: List[Row] = [
    {
        "id": "sup-1",
        "name": "TechSupply Inc.",
        "contact_person": "John Smith",
        "email": "john@techsupply.com",
        "phone": "555-123-4567",
        "address": "12 Circuit Way, Portland, OR",
        "status": "Active",
        "created_at": "2023-06-01T10:00:00Z",
        "updated_at": "2023-06-01T10:00:00Z",
    },
    {
        "id": "sup-2",
        "name": "Office Essentials",
        "contact_person": "Sarah Lee",
        "email": "slee@officeessentials.com",
        "phone": "555-987-6543",
        "address": "400 Paper St, Scranton, PA",
        "status": "Active",
        "created_at": "2023-06-01T10:05:00Z",
        "updated_at": "2023-06-01T10:05:00Z",
    },
    {
        "id": "sup-3",
        "name": "Premier Products",
        "contact_person": "Michael Johnson",
        "email": "mjohnson@premierproducts.com",
        "phone": "555-456-7890",
        "address": "9 Commerce Blvd, Austin, TX",
        "status": "Inactive",
        "created_at": "2023-06-01T10:10:00Z",
        "updated_at": "2023-06-01T10:10:00Z",
    },
]

INVENTORY: List[Row] = [
    {
        "id": "item-1",
        "name": "Wireless Keyboard",
        "description": "Ergonomic wireless keyboard with long battery life",
        "sku": "KB-001",
        "barcode": "1234567890123",
        "category_id": "cat-1",
        "category_name": "Electronics",
        "supplier_id": "sup-1",
        "supplier_name": "TechSupply Inc.",
        "quantity": 120,
        "unit": "piece",
        "unit_cost": 39.99,
        "selling_price": 59.99,
        "reorder_level": 20,
        "reorder_quantity": 50,
        "location": "Shelf A-1",
        "created_at": "2023-06-15T10:00:00Z",
        "updated_at": "2023-07-20T14:30:00Z",
    },
    {
        "id": "item-2",
        "name": "Wireless Mouse",
        "description": "Precise wireless mouse with DPI adjustments",
        "sku": "MS-001",
        "barcode": "1234567890124",
        "category_id": "cat-1",
        "category_name": "Electronics",
        "supplier_id": "sup-1",
        "supplier_name": "TechSupply Inc.",
        "quantity": 85,
        "unit": "piece",
        "unit_cost": 24.99,
        "selling_price": 39.99,
        "reorder_level": 15,
        "reorder_quantity": 30,
        "location": "Shelf A-2",
        "created_at": "2023-06-15T10:05:00Z",
        "updated_at": "2023-07-20T14:35:00Z",
    },
    {
        "id": "item-3",
        "name": "USB-C Hub",
        "description": "7-in-1 USB-C hub with HDMI output",
        "sku": "HUB-001",
        "barcode": "1234567890125",
        "category_id": "cat-1",
        "category_name": "Electronics",
        "supplier_id": "sup-1",
        "supplier_name": "TechSupply Inc.",
        "quantity": 12,
        "unit": "piece",
        "unit_cost": 18.5,
        "selling_price": 29.99,
        "reorder_level": 15,
        "reorder_quantity": 40,
        "location": "Shelf A-3",
        "created_at": "2023-06-15T10:10:00Z",
        "updated_at": "2023-08-05T09:15:00Z",
    },
    {
        "id": "item-4",
        "name": "Printer Paper",
        "description": "A4 printer paper, 500 sheets per ream",
        "sku": "SUP-PAP-004",
        "barcode": "1234567890127",
        "category_id": "cat-2",
        "category_name": "Office Supplies",
        "supplier_id": "sup-2",
        "supplier_name": "Office Essentials",
        "quantity": 3,
        "unit": "ream",
        "unit_cost": 4.25,
        "selling_price": 6.99,
        "reorder_level": 20,
        "reorder_quantity": 100,
        "location": "Shelf C-1",
        "created_at": "2023-06-15T10:20:00Z",
        "updated_at": "2023-07-28T11:00:00Z",
    },
    {
        "id": "item-5",
        "name": "Office Chair",
        "description": "Adjustable mesh office chair with lumbar support",
        "sku": "FUR-CHA-003",
        "barcode": "1234567890128",
        "category_id": "cat-3",
        "category_name": "Furniture",
        "supplier_id": "sup-3",
        "supplier_name": "Premier Products",
        "quantity": 4,
        "unit": "piece",
        "unit_cost": 150.0,
        "selling_price": 249.99,
        "reorder_level": 5,
        "reorder_quantity": 10,
        "location": "Floor B",
        "created_at": "2023-06-15T10:25:00Z",
        "updated_at": "2023-08-10T16:20:00Z",
    },
    {
        "id": "item-7",
        "name": "Notebook Pack",
        "description": "Pack of 5 spiral notebooks",
        "sku": "NB-001",
        "barcode": "1234567890129",
        "category_id": "cat-2",
        "category_name": "Office Supplies",
        "supplier_id": "sup-2",
        "supplier_name": "Office Essentials",
        "quantity": 0,
        "unit": "pack",
        "unit_cost": 7.99,
        "selling_price": 12.99,
        "reorder_level": 10,
        "reorder_quantity": 20,
        "location": "Shelf C-2",
        "created_at": "2023-06-15T10:30:00Z",
        "updated_at": "2023-07-20T15:00:00Z",
    },
]

MOVEMENTS: List[Row] = [
    {
        "id": "mov-001",
        "product_id": "item-1",
        "product_name": "Wireless Keyboard",
        "batch_number": "KB-2023-001",
        "quantity": 50,
        "to_warehouse": "Main Warehouse",
        "to_location": "Section A, Shelf 3",
        "movement_type": "New Stock",
        "movement_reason": "Initial stock receipt from supplier",
        "date": "2023-03-15T09:30:00Z",
        "initiated_by": "John Smith",
        "reference_id": "PO-2023-001",
    },
    {
        "id": "mov-002",
        "product_id": "item-1",
        "product_name": "Wireless Keyboard",
        "batch_number": "KB-2023-001",
        "quantity": 30,
        "from_warehouse": "Main Warehouse",
        "from_location": "Section A, Shelf 3",
        "to_warehouse": "Secondary Warehouse",
        "to_location": "Section B, Shelf 5",
        "movement_type": "Transfer",
        "movement_reason": "Balance stock between warehouses",
        "date": "2023-04-20T14:15:00Z",
        "initiated_by": "Jane Doe",
    },
    {
        "id": "mov-003",
        "product_id": "item-3",
        "product_name": "USB-C Hub",
        "batch_number": "USB-2023-001",
        "quantity": 25,
        "from_warehouse": "Distribution Center",
        "from_location": "Section C, Shelf 2",
        "movement_type": "Stock Out",
        "movement_reason": "Customer order",
        "date": "2023-05-12T11:45:00Z",
        "initiated_by": "Michael Johnson",
        "order_number": "10003",
        "customer_name": "Bob Johnson",
    },
    {
        "id": "mov-004",
        "product_id": "item-5",
        "product_name": "Office Chair",
        "batch_number": "CH-2023-001",
        "quantity": 2,
        "from_warehouse": "Main Warehouse",
        "from_location": "Section D, Shelf 1",
        "to_warehouse": "Main Warehouse",
        "to_location": "Section D, Shelf 1",
        "movement_type": "Adjustment",
        "movement_reason": "Damaged during handling",
        "date": "2023-07-05T16:20:00Z",
        "initiated_by": "Susan Williams",
    },
    {
        "id": "mov-005",
        "product_id": "item-5",
        "product_name": "Office Chair",
        "batch_number": "CH-2023-002",
        "quantity": 12,
        "to_warehouse": "Secondary Warehouse",
        "to_location": "Section F, Floor Area",
        "movement_type": "New Stock",
        "date": "2023-04-12T10:00:00Z",
        "initiated_by": "Robert Brown",
        "reference_id": "PO-2023-002",
    },
    {
        "id": "mov-006",
        "product_id": "item-2",
        "product_name": "Wireless Mouse",
        "batch_number": "MS-2023-001",
        "quantity": 10,
        "from_warehouse": "Main Warehouse",
        "from_location": "Section A, Shelf 4",
        "movement_type": "Stock Out",
        "movement_reason": "Customer order",
        "date": "2023-06-18T13:25:00Z",
        "initiated_by": "Jane Doe",
        "order_number": "10001",
        "customer_name": "John Smith",
    },
    {
        "id": "mov-007",
        "product_id": "item-4",
        "product_name": "Printer Paper",
        "batch_number": "PP-2023-001",
        "quantity": 8,
        "from_warehouse": "Secondary Warehouse",
        "from_location": "Section C, Shelf 1",
        "movement_type": "Stock Out",
        "movement_reason": "Customer order",
        "date": "2023-08-15T11:10:00Z",
        "initiated_by": "Michael Johnson",
        "order_number": "10005",
        "customer_name": "Michael Brown",
    },
    {
        "id": "mov-008",
        "product_id": "item-5",
        "product_name": "Office Chair",
        "batch_number": "CH-2023-003",
        "quantity": 5,
        "to_warehouse": "Main Warehouse",
        "to_location": "Section E, Floor Area",
        "movement_type": "New Stock",
        "movement_reason": "Additional stock from supplier",
        "date": "2023-08-10T09:45:00Z",
        "initiated_by": "Robert Brown",
        "reference_id": "PO-2023-003",
    },
    {
        "id": "mov-009",
        "product_id": "item-7",
        "product_name": "Notebook Pack",
        "batch_number": "NB-2023-001",
        "quantity": 50,
        "to_warehouse": "Distribution Center",
        "to_location": "Section A, Shelf 2",
        "movement_type": "New Stock",
        "date": "2023-07-25T14:30:00Z",
        "initiated_by": "John Smith",
        "reference_id": "PO-2023-004",
    },
    {
        "id": "mov-010",
        "product_id": "item-1",
        "product_name": "Wireless Keyboard",
        "batch_number": "KB-2023-002",
        "quantity": 20,
        "from_warehouse": "Secondary Warehouse",
        "from_location": "Section B, Shelf 5",
        "to_warehouse": "Main Warehouse",
        "to_location": "Section A, Shelf 3",
        "movement_type": "Transfer",
        "movement_reason": "Consolidating inventory",
        "date": "2023-08-01T10:20:00Z",
        "initiated_by": "Susan Williams",
    },
]

_JOHN = {
    "id": "cust-1",
    "name": "John Smith",
    "email": "john.smith@example.com",
    "phone": "(555) 123-4567",
    "address": "123 Main St, Anytown, AN 12345",
}
_JANE = {
    "id": "cust-2",
    "name": "Jane Doe",
    "email": "jane.doe@example.com",
    "phone": "(555) 987-6543",
    "address": "456 Oak Ave, Somewhere, SM 67890",
}
_BOB = {
    "id": "cust-3",
    "name": "Bob Johnson",
    "email": "bob.johnson@example.com",
    "phone": "(555) 567-8901",
    "address": "789 Pine Blvd, Elsewhere, EL 13579",
}
_SARAH = {
    "id": "cust-4",
    "name": "Sarah Williams",
    "email": "sarah.williams@example.com",
    "phone": "(555) 234-5678",
    "address": "101 Cedar Ln, Nowhereville, NV 24680",
}
_MICHAEL = {
    "id": "cust-5",
    "name": "Michael Brown",
    "email": "michael.brown@example.com",
    "phone": "(555) 876-5432",
    "address": "202 Maple St, Anyplace, AP 97531",
}

ORDERS: List[Row] = [
    {
        "id": "order-1",
        "order_number": "10001",
        "order_date": "2023-07-15T10:30:00Z",
        "customer": _JOHN,
        "items": [
            {"id": "line-1", "product_id": "item-1", "product_name": "Wireless Keyboard", "quantity": 1, "unit_price": 59.99},
            {"id": "line-2", "product_id": "item-2", "product_name": "Wireless Mouse", "quantity": 1, "unit_price": 39.99},
        ],
        "status": "completed",
        "payment_method": "Credit Card",
        "shipping_method": "Standard Shipping",
        "shipping_address": _JOHN["address"],
        "billing_address": _JOHN["address"],
    },
    {
        "id": "order-2",
        "order_number": "10002",
        "order_date": "2023-07-20T14:45:00Z",
        "customer": _JANE,
        "items": [
            {"id": "line-3", "product_id": "item-5", "product_name": "Office Chair", "quantity": 1, "unit_price": 249.99},
        ],
        "status": "processing",
        "payment_method": "PayPal",
        "shipping_method": "Express Shipping",
        "shipping_address": _JANE["address"],
        "billing_address": _JANE["address"],
        "notes": "Please handle with care",
        "tracking_number": "TRK12345678",
        "estimated_delivery": "2023-07-24",
    },
    {
        "id": "order-3",
        "order_number": "10003",
        "order_date": "2023-08-05T09:15:00Z",
        "customer": _BOB,
        "items": [
            {"id": "line-4", "product_id": "item-3", "product_name": "USB-C Hub", "quantity": 2, "unit_price": 29.99},
            {"id": "line-5", "product_id": "item-4", "product_name": "Printer Paper", "quantity": 3, "unit_price": 6.99},
        ],
        "status": "pending",
        "payment_method": "Credit Card",
        "shipping_method": "Standard Shipping",
        "shipping_address": _BOB["address"],
        "billing_address": _BOB["address"],
    },
    {
        "id": "order-4",
        "order_number": "10004",
        "order_date": "2023-08-10T16:20:00Z",
        "customer": _SARAH,
        "items": [
            {"id": "line-6", "product_id": "item-5", "product_name": "Office Chair", "quantity": 1, "unit_price": 249.99},
        ],
        "status": "cancelled",
        "payment_method": "Debit Card",
        "shipping_method": "Premium Shipping",
        "shipping_address": _SARAH["address"],
        "billing_address": _SARAH["address"],
        "notes": "Cancelled due to out of stock",
    },
    {
        "id": "order-5",
        "order_number": "10005",
        "order_date": "2023-08-15T11:10:00Z",
        "customer": _MICHAEL,
        "items": [
            {"id": "line-7", "product_id": "item-2", "product_name": "Wireless Mouse", "quantity": 1, "unit_price": 39.99},
            {"id": "line-8", "product_id": "item-4", "product_name": "Printer Paper", "quantity": 2, "unit_price": 6.99},
        ],
        "status": "completed",
        "payment_method": "Credit Card",
        "shipping_method": "Standard Shipping",
        "shipping_address": _MICHAEL["address"],
        "billing_address": _MICHAEL["address"],
        "tracking_number": "TRK87654321",
        "estimated_delivery": "2023-08-20",
    },
    {
        "id": "order-6",
        "order_number": "10006",
        "order_date": "2023-08-20T08:05:00Z",
        "customer": _JOHN,
        "items": [
            {"id": "line-9", "product_id": "item-3", "product_name": "USB-C Hub", "quantity": 1, "unit_price": 29.99},
        ],
        "status": "processing",
        "payment_method": "Credit Card",
        "shipping_method": "Standard Shipping",
        "shipping_address": _JOHN["address"],
        "billing_address": _JOHN["address"],
    },
]

PURCHASE_ORDERS: List[Row] = [
    {
        "id": "po-1",
        "po_number": "PO-2023-001",
        "supplier_id": "sup-1",
        "supplier_name": "TechSupply Inc.",
        "order_date": "2023-06-15T09:00:00Z",
        "expected_delivery_date": "2023-06-22",
        "status": "received",
        "payment_status": "paid",
        "items": [
            {"item_id": "item-1", "item_name": "Wireless Keyboard", "quantity": 50, "unit_price": 39.99, "received_quantity": 50},
        ],
        "created_by": "John Smith",
    },
    {
        "id": "po-2",
        "po_number": "PO-2023-002",
        "supplier_id": "sup-3",
        "supplier_name": "Premier Products",
        "order_date": "2023-06-22T11:30:00Z",
        "expected_delivery_date": "2023-07-01",
        "status": "partially_received",
        "payment_status": "partial",
        "items": [
            {"item_id": "item-5", "item_name": "Office Chair", "quantity": 12, "unit_price": 150.0, "received_quantity": 8},
        ],
        "created_by": "Robert Brown",
    },
    {
        "id": "po-3",
        "po_number": "PO-2023-003",
        "supplier_id": "sup-2",
        "supplier_name": "Office Essentials",
        "order_date": "2023-07-10T15:00:00Z",
        "status": "cancelled",
        "payment_status": "pending",
        "items": [
            {"item_id": "item-4", "item_name": "Printer Paper", "quantity": 100, "unit_price": 4.25},
        ],
        "notes": "Supplier could not meet delivery date",
        "created_by": "Jane Doe",
    },
    {
        "id": "po-4",
        "po_number": "PO-2023-004",
        "supplier_id": "sup-2",
        "supplier_name": "Office Essentials",
        "order_date": "2023-07-18T10:00:00Z",
        "expected_delivery_date": "2023-07-25",
        "status": "ordered",
        "payment_status": "pending",
        "items": [
            {"item_id": "item-7", "item_name": "Notebook Pack", "quantity": 50, "unit_price": 7.99},
            {"item_id": "item-4", "item_name": "Printer Paper", "quantity": 40, "unit_price": 4.25},
        ],
        "created_by": "John Smith",
    },
]

STOCK_OUTS: List[Row] = [
    {
        "id": "SO-2023-001",
        "date": "2023-06-18T00:00:00Z",
        "product_id": "item-2",
        "product_name": "Wireless Mouse",
        "quantity": 10,
        "unit_price": 39.99,
        "reason": "Sale",
        "requested_by": "Jane Smith",
        "customer_id": "cust-1",
        "customer_name": "John Smith",
        "order_reference": "ORD-10001",
        "destination": "Retail Store",
        "notes": "Bulk order for retail promotion",
    },
    {
        "id": "SO-2023-002",
        "date": "2023-06-25T00:00:00Z",
        "product_id": "item-5",
        "product_name": "Office Chair",
        "quantity": 2,
        "unit_price": 0.0,
        "reason": "Damaged",
        "requested_by": "Susan Williams",
        "notes": "Damaged during handling",
    },
    {
        "id": "SO-2023-003",
        "date": "2023-07-01T00:00:00Z",
        "product_id": "item-3",
        "product_name": "USB-C Hub",
        "quantity": 25,
        "unit_price": 29.99,
        "reason": "Sale",
        "requested_by": "Michael Johnson",
        "customer_id": "cust-3",
        "customer_name": "Bob Johnson",
        "order_reference": "ORD-10003",
    },
    {
        "id": "SO-2023-004",
        "date": "2023-07-10T00:00:00Z",
        "product_id": "item-2",
        "product_name": "Wireless Mouse",
        "quantity": 3,
        "unit_price": 0.0,
        "reason": "Internal Use",
        "requested_by": "Daniel Lee",
        "destination": "IT Department",
    },
    {
        "id": "SO-2023-005",
        "date": "2023-08-15T00:00:00Z",
        "product_id": "item-4",
        "product_name": "Printer Paper",
        "quantity": 8,
        "unit_price": 6.99,
        "reason": "Sale",
        "requested_by": "Michael Johnson",
        "customer_id": "cust-9",
        "customer_name": "Former Customer",
        "order_reference": "ORD-10005",
    },
]

USERS: List[Row] = [
    {"id": "user-1", "name": "Alex Johnson", "email": "alex@example.com", "role": "Admin", "status": "Active"},
    {"id": "user-2", "name": "Sarah Wilson", "email": "sarah@example.com", "role": "Manager", "status": "Active"},
    {"id": "user-3", "name": "Michael Brown", "email": "michael@example.com", "role": "Staff", "status": "Inactive"},
    {"id": "user-4", "name": "Emily Davis", "email": "emily@example.com", "role": "Staff", "status": "Active"},
    {"id": "user-5", "name": "Daniel Lee", "email": "daniel@example.com", "role": "Manager", "status": "Active"},
]

SEED_ROWS: Dict[str, List[Row]] = {
    "categories": CATEGORIES,
    "suppliers": SUPPLIERS,
    "inventory": INVENTORY,
    "movements": MOVEMENTS,
    "orders": ORDERS,
    "purchase_orders": PURCHASE_ORDERS,
    "stock_outs": STOCK_OUTS,
    "users": USERS,
}

__all__ = ["SEED_ROWS", "Row"]
