"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's SimpleConnectionPool for efficient connection reuse.

`ConnectionProvider` hands out one connection per operation and always
takes it back, on success and on failure. A process-wide provider is set
up with `init_pool()` and shared through `get_provider()`.
"""

from contextlib import contextmanager
from typing import Iterator, Optional

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_CONNECT_TIMEOUT, DB_POOL_MAX, DB_POOL_MIN
from utils.errors import StoreConnectionError, StoreError, UserStoreError
from utils.logger import get_logger

logger = get_logger(__name__)


class ConnectionProvider:
    """Acquires and releases connections to the users database."""

    def __init__(
        self,
        dsn: str = DATABASE_URL,
        min_conn: int = DB_POOL_MIN,
        max_conn: int = DB_POOL_MAX,
        connect_timeout: int = DB_CONNECT_TIMEOUT,
    ):
        self.dsn = dsn
        self.min_conn = min_conn
        self.max_conn = max_conn
        self.connect_timeout = connect_timeout
        self._pool: Optional[pool.SimpleConnectionPool] = None

    @property
    def is_open(self) -> bool:
        return self._pool is not None

    def open(self) -> None:
        """
        Initialize the connection pool. Does nothing if it is already open.

        Raises:
            StoreConnectionError: If the database is unreachable.
        """
        if self._pool is not None:
            return
        try:
            self._pool = pool.SimpleConnectionPool(
                self.min_conn,
                self.max_conn,
                self.dsn,
                connect_timeout=self.connect_timeout,
            )
            logger.info("Database connection pool initialized successfully.")
        except psycopg2.Error as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise StoreConnectionError(f"Cannot connect to database: {e}") from e

    def acquire(self):
        """
        Get a connection from the pool, opening the pool on first use.

        Returns:
            A psycopg2 connection object.

        Raises:
            StoreConnectionError: If no connection can be obtained.
        """
        if self._pool is None:
            self.open()
        try:
            return self._pool.getconn()
        except pool.PoolError as e:
            logger.error(f"No database connection available: {e}")
            raise StoreConnectionError(f"No database connection available: {e}") from e
        except psycopg2.Error as e:
            logger.error(f"Failed to open database connection: {e}")
            raise StoreConnectionError(f"Cannot connect to database: {e}") from e

    def release(self, conn) -> None:
        """
        Return a connection back to the pool.
        Broken connections are discarded instead of being reused.
        """
        if self._pool is None:
            if not conn.closed:
                conn.close()
            return
        self._pool.putconn(conn, close=bool(conn.closed))

    @contextmanager
    def connection(self) -> Iterator:
        """Borrow a connection for the duration of a `with` block."""
        conn = self.acquire()
        try:
            yield conn
        finally:
            self.release(conn)

    @contextmanager
    def cursor(self) -> Iterator:
        """
        Run one unit of work on a pooled connection.

        Commits when the block exits normally, rolls back otherwise, and
        always releases the connection. Driver errors are re-raised as
        StoreConnectionError or StoreError.
        """
        with self.connection() as conn:
            try:
                with conn.cursor() as cur:
                    yield cur
                conn.commit()
            except psycopg2.Error as e:
                self._rollback(conn)
                raise _translate_error(e, conn) from e
            except Exception:
                self._rollback(conn)
                raise

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")

    @staticmethod
    def _rollback(conn) -> None:
        if conn.closed:
            return
        try:
            conn.rollback()
        except psycopg2.Error as e:
            logger.warning(f"Rollback failed: {e}")


def _translate_error(error: psycopg2.Error, conn) -> UserStoreError:
    """Map a psycopg2 exception onto the user-store error taxonomy."""
    if isinstance(error, psycopg2.InterfaceError) or (
        isinstance(error, psycopg2.OperationalError) and conn.closed
    ):
        return StoreConnectionError(f"Database connection lost: {error}")
    return StoreError(f"Database operation failed: {error}")


# ── Process-wide provider ─────────────────────────────────

_provider: Optional[ConnectionProvider] = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> ConnectionProvider:
    """
    Initialize the shared connection pool.

    Args:
        min_conn: Minimum number of connections to keep open.
        max_conn: Maximum number of connections allowed.

    Returns:
        The shared ConnectionProvider.

    Raises:
        StoreConnectionError: If the database is unreachable.
    """
    global _provider
    if _provider is None:
        provider = ConnectionProvider(min_conn=min_conn, max_conn=max_conn)
        provider.open()
        _provider = provider
    return _provider


def get_provider() -> ConnectionProvider:
    """
    Get the shared connection provider.

    Raises:
        RuntimeError: If the pool has not been initialized.
    """
    if _provider is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _provider


def close_pool() -> None:
    """Close all connections of the shared pool."""
    global _provider
    if _provider is not None:
        _provider.close()
        _provider = None
