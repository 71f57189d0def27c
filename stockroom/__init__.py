"""
Stockroom - record collection query layer for an inventory dashboard.

Holds the dashboard's collections (inventory, movements, orders, customers,
purchase orders, stock-outs, users, categories, suppliers) in record stores
fed either by a fixed seed or by an optional PostgreSQL backend, and derives
filtered, sorted views and aggregate statistics from them.
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from stockroom.config import Settings, get_settings
from stockroom.domain.collections import CollectionSpec, available_collections, get_collection
from stockroom.exceptions import StockroomError
from stockroom.query import FilterSet, SortDirection, SortSpec, execute
from stockroom.store import LoadResult, RecordStore, customer_store, open_store
from stockroom.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Collections
    "CollectionSpec",
    "available_collections",
    "get_collection",
    # Stores
    "LoadResult",
    "RecordStore",
    "customer_store",
    "open_store",
    # Queries
    "FilterSet",
    "SortDirection",
    "SortSpec",
    "execute",
    # Errors
    "StockroomError",
    # Logging
    "configure_logging",
    "get_logger",
]
