"""
Infrastructure package for stockroom.

Centralizes database connectivity concerns (connections, pooling).
Keep this layer focused on I/O and resource management, decoupled from
store and query logic.
"""

from stockroom.infrastructure.db_factory import (
    PoolManager,
    build_dsn,
    get_sync_connection,
    get_sync_pool,
    open_pool,
)

__all__ = [
    "PoolManager",
    "build_dsn",
    "get_sync_connection",
    "get_sync_pool",
    "open_pool",
]
