"""
db/connection.py
----------------
Manages the PostgreSQL connection pool and exposes `query()`, the single
entrypoint the repositories use to talk to the database.
"""

from contextlib import contextmanager
from typing import Any, Iterator, Sequence

import psycopg2
from psycopg2 import pool, extras

from config import DATABASE_URL, DB_POOL_MIN, DB_POOL_MAX
from utils.logger import get_logger

logger = get_logger(__name__)

_pool: pool.SimpleConnectionPool | None = None


def init_pool(min_conn: int = DB_POOL_MIN, max_conn: int = DB_POOL_MAX, dsn: str = DATABASE_URL) -> None:
    """
    Open the connection pool. Calling it again while a pool is open does nothing.

    Raises:
        psycopg2.OperationalError: If the database is unreachable.
    """
    global _pool
    if _pool is not None:
        return
    try:
        _pool = pool.SimpleConnectionPool(min_conn, max_conn, dsn)
        logger.info(f"Connection pool ready ({min_conn}-{max_conn} connections).")
    except psycopg2.OperationalError as e:
        logger.error(f"Failed to initialize database pool: {e}")
        raise


def close_pool() -> None:
    """Close all connections in the pool."""
    global _pool
    if _pool is not None:
        _pool.closeall()
        _pool = None
        logger.info("Connection pool closed.")


@contextmanager
def connection() -> Iterator[Any]:
    """
    Borrow a pooled connection for one unit of work.

    Commits when the block exits normally, rolls back and re-raises when it
    fails, and always hands the connection back to the pool.

    Raises:
        RuntimeError: If init_pool() has not been called.
    """
    if _pool is None:
        raise RuntimeError("Database pool not initialized. Call init_pool() first.")
    conn = _pool.getconn()
    try:
        yield conn
        conn.commit()
    except Exception:
        conn.rollback()
        raise
    finally:
        _pool.putconn(conn)


def query(sql: str, params: Sequence[Any] = ()) -> list[dict]:
    """
    Execute one parameterized statement and return its rows.

    Rows are dicts keyed by the (aliased) column names, e.g.
    ``{"id": 1, "firstName": "Jane", ...}``. A statement without a result
    set returns ``[]``. Errors are logged and propagate unchanged.

    Args:
        sql: SQL text with ``%s`` placeholders.
        params: Positional values for the placeholders.
    """
    try:
        with connection() as conn, conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
            cur.execute(sql, tuple(params))
            return [dict(r) for r in cur.fetchall()] if cur.description else []
    except psycopg2.Error as e:
        logger.error(f"Query failed: {e}")
        raise
