"""
Database connection factory utilities for stockroom.

Provides centralized management of PostgreSQL connections and the shared
connection pool used by remote record sources. The PoolManager singleton
ensures the pool is closed on application exit.

Dedicated connections are retried through tenacity; the attempt count comes
from settings and defaults to a single attempt. Pool checkouts are bounded by
the connect timeout, after which remote sources fail and stores fall back to
seed data.
"""

from __future__ import annotations

import atexit
import threading
from typing import Optional

import psycopg
from psycopg import Connection, Cursor
from psycopg_pool import ConnectionPool
from tenacity import Retrying, retry_if_exception_type, stop_after_attempt, wait_exponential

from stockroom.config import Settings, get_settings
from stockroom.utils.logging import get_logger

log = get_logger(__name__)


def build_dsn(settings: Optional[Settings] = None) -> str:
    """Compose a DSN string from settings."""
    settings = settings or get_settings()
    return (
        f"postgresql://{settings.db_user}:{settings.db_password}"
        f"@{settings.db_host}:{settings.db_port}/{settings.db_name}"
    )


def apply_statement_timeout(cur: Cursor, timeout_ms: int) -> None:
    """Bound every statement issued on the cursor's session."""
    if timeout_ms > 0:
        cur.execute(f"SET statement_timeout = {int(timeout_ms)}")


class PoolManager:
    """
    Thread-safe singleton for managing the database connection pool.

    Handles lifecycle management with automatic cleanup via atexit hook.
    """

    _instance: Optional["PoolManager"] = None
    _lock = threading.Lock()

    def __new__(cls) -> "PoolManager":
        """Create or return the singleton instance."""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super().__new__(cls)
                cls._instance._sync_pool = None
                atexit.register(cls._instance.close_all)
            return cls._instance

    def get_sync_pool(self, min_size: Optional[int] = None, max_size: Optional[int] = None) -> ConnectionPool:
        """
        Get or create the synchronous connection pool.

        Parameters
        ----------
        min_size : int | None
            Minimum number of idle connections to keep. Defaults to settings.
        max_size : int | None
            Maximum total connections in the pool. Defaults to settings.

        Returns
        -------
        ConnectionPool
            The managed pool instance.
        """
        with self._lock:
            if self._sync_pool is None:
                settings = get_settings()
                self._sync_pool = open_pool(
                    build_dsn(settings),
                    min_size=min_size or settings.db_pool_min_size,
                    max_size=max_size or settings.db_pool_max_size,
                    settings=settings,
                )
            return self._sync_pool

    def close_all(self) -> None:
        """
        Close the managed pool and release resources.

        This is called automatically on exit via atexit hook.
        """
        with self._lock:
            if self._sync_pool is not None:
                try:
                    self._sync_pool.close()
                except psycopg.Error as exc:
                    log.warning("Pool close failed", extra={"error": str(exc)})
                finally:
                    self._sync_pool = None


def open_pool(
    dsn: str,
    min_size: int = 1,
    max_size: int = 5,
    settings: Optional[Settings] = None,
) -> ConnectionPool:
    """
    Create an opened connection pool.

    `timeout` bounds how long a caller waits for a connection, so an
    unreachable backend surfaces as PoolTimeout instead of blocking.
    """
    settings = settings or get_settings()
    return ConnectionPool(
        conninfo=dsn,
        min_size=min_size,
        max_size=max_size,
        open=True,
        timeout=float(settings.db_connect_timeout_s),
        kwargs={"connect_timeout": settings.db_connect_timeout_s},
    )


def get_sync_connection(dsn: Optional[str] = None, settings: Optional[Settings] = None) -> Connection:
    """
    Acquire a dedicated synchronous connection.

    Retries transient connection errors with exponential backoff up to
    `settings.db_connect_attempts` attempts in total.

    Returns
    -------
    Connection
        A new psycopg connection instance.

    Raises
    ------
    psycopg.OperationalError
        If connection fails after all attempts.
    """
    settings = settings or get_settings()
    retrying = Retrying(
        stop=stop_after_attempt(settings.db_connect_attempts),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        retry=retry_if_exception_type((psycopg.OperationalError, psycopg.InterfaceError)),
        reraise=True,
    )
    return retrying(
        psycopg.connect,
        dsn or build_dsn(settings),
        connect_timeout=settings.db_connect_timeout_s,
    )


def get_sync_pool(min_size: Optional[int] = None, max_size: Optional[int] = None) -> ConnectionPool:
    """
    Get or create the shared connection pool via PoolManager.
    """
    manager = PoolManager()
    return manager.get_sync_pool(min_size=min_size, max_size=max_size)


__all__ = [
    "PoolManager",
    "apply_statement_timeout",
    "build_dsn",
    "get_sync_connection",
    "get_sync_pool",
    "open_pool",
]
