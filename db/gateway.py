"""
db/gateway.py
-------------
The store gateway: the only place that talks to a psycopg2 cursor.

Every call borrows one connection, executes a single parameterized
statement (``%s`` placeholders, values bound by the driver), commits and
gives the connection back, whatever happens. Driver errors are turned
into StoreError, or UniqueViolationError for SQLSTATE 23505, so callers
never inspect error codes themselves.
"""

from contextlib import contextmanager
from typing import Any, Callable, Iterator, Optional, Sequence

import psycopg2
from psycopg2 import errorcodes, errors, extras

from db.connection import get_connection, release_connection
from utils.errors import StoreError, UniqueViolationError
from utils.logger import get_logger

logger = get_logger(__name__)


def classify_error(error: psycopg2.Error) -> StoreError:
    """Map a psycopg2 error to the matching StoreError subclass."""
    if isinstance(error, errors.UniqueViolation) or (
        getattr(error, "pgcode", None) == errorcodes.UNIQUE_VIOLATION
    ):
        return UniqueViolationError(str(error).strip(), cause=error)
    return StoreError(str(error).strip() or type(error).__name__, cause=error)


class StoreGateway:
    """Executes parameterized SQL against PostgreSQL."""

    def __init__(
        self,
        acquire: Callable[[], Any] = get_connection,
        release: Callable[[Any], None] = release_connection,
    ):
        self._acquire = acquire
        self._release = release

    @contextmanager
    def _cursor(self) -> Iterator[Any]:
        """Yield a dict cursor inside a commit / rollback / release scope."""
        try:
            conn = self._acquire()
        except psycopg2.Error as e:
            logger.error(f"Could not get a connection ({type(e).__name__}): {str(e).strip()}")
            raise classify_error(e) from e
        except RuntimeError as e:
            # get_connection() before init_pool()
            logger.error(f"Could not get a connection: {e}")
            raise StoreError(str(e), cause=e) from e

        try:
            with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                yield cur
            conn.commit()
        except psycopg2.Error as e:
            conn.rollback()
            logger.error(f"Statement failed ({type(e).__name__}): {str(e).strip()}")
            raise classify_error(e) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            self._release(conn)

    # ── READ ──────────────────────────────────────────────

    def fetch_one(self, sql: str, params: Sequence = ()) -> Optional[dict]:
        """Return the first row as a dict, or None when nothing matched."""
        with self._cursor() as cur:
            cur.execute(sql, tuple(params))
            row = cur.fetchone()
        return dict(row) if row else None

    def fetch_all(self, sql: str, params: Sequence = ()) -> list[dict]:
        """Return every row as a list of dicts, in the order the query produced."""
        with self._cursor() as cur:
            cur.execute(sql, tuple(params))
            rows = cur.fetchall()
        return [dict(r) for r in rows]

    # ── WRITE ─────────────────────────────────────────────

    def insert_returning_id(
        self, sql: str, params: Sequence = (), id_column: str = "id"
    ) -> int:
        """
        Run an INSERT ... RETURNING statement.

        Returns:
            The value of ``id_column`` from the returned row.
        """
        with self._cursor() as cur:
            cur.execute(sql, tuple(params))
            row = cur.fetchone()
        if row is None:
            raise StoreError("INSERT returned no row; is RETURNING missing?")
        return row[id_column]

    def execute(self, sql: str, params: Sequence = ()) -> int:
        """Run a statement that returns no rows. Returns the affected row count."""
        with self._cursor() as cur:
            cur.execute(sql, tuple(params))
            return cur.rowcount
