"""
db/connection.py
----------------
Owns the process-wide PostgreSQL connection pool.

StoreGateway borrows a connection through get_connection() for exactly
one statement and hands it back with release_connection(), so the pool
only needs to be as large as the number of statements running at the
same moment (DB_POOL_MAX, one per request thread is plenty).

Failures surface as psycopg2 errors (unreachable server, exhausted pool)
or RuntimeError (pool never initialized); the gateway turns them into
StoreError.
"""

import psycopg2
from psycopg2 import pool

from config import DATABASE_URL, DB_POOL_MAX, DB_POOL_MIN
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.SimpleConnectionPool | None = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX) -> None:
    """
    Open the pool. Calling it again while it is open is a no-op.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, DATABASE_URL)
        logger.info(f"Database connection pool initialized ({min_conn}-{max_conn} connections).")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def get_connection():
    """
    Borrow a connection for a single statement.

    Raises:
        RuntimeError: If init_pool() has not been called.
        psycopg2.pool.PoolError: If all DB_POOL_MAX connections are in use.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    return _pool.getconn()


def release_connection(conn) -> None:
    """Give a borrowed connection back. Ignored once the pool is closed."""
    if _pool is not None:
        _pool.putconn(conn)


def close_pool() -> None:
    """Close every pooled connection; init_pool() may be called again afterwards."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Database connection pool closed.")
