"""
db/connection.py
----------------
Manages the PostgreSQL connection pool.
Uses psycopg2's ThreadedConnectionPool for connection reuse and a bounded
semaphore so that callers wait for a free connection instead of failing
when every connection is checked out.

Statements are written with ``$1, $2, ...`` positional placeholders and
rewritten to psycopg2's ``%s`` paramstyle right before execution.
"""

import re
import threading
from contextlib import contextmanager
from typing import Any, Iterator, Optional, Sequence

import psycopg2
from psycopg2 import pool, extras

import config
from db.exceptions import QueryError
from utils.logger import get_logger

logger = get_logger(__name__)

_PLACEHOLDER = re.compile(r"\$(\d+)")


def to_pyformat(sql: str, params: Sequence[Any]) -> tuple[str, Optional[list]]:
    """
    Rewrite a ``$n`` statement into psycopg2's ``%s`` form.

    Parameters are reordered to follow the placeholders as they appear in
    the text, so ``$n`` may be referenced in any order or more than once.
    Literal ``%`` characters in the statement are escaped.

    Args:
        sql: Statement using ``$1 .. $N`` placeholders.
        params: Positional values; ``params[n - 1]`` binds ``$n``.

    Returns:
        ``(statement, args)``. ``args`` is None when the statement has no
        placeholders.

    Raises:
        QueryError: If a placeholder has no matching parameter.
    """
    if not _PLACEHOLDER.search(sql):
        return sql, None

    ordered: list = []

    def _bind(match: re.Match) -> str:
        index = int(match.group(1))
        if index < 1 or index > len(params):
            raise QueryError(
                f"Placeholder ${index} has no parameter ({len(params)} bound)",
                statement=sql,
                params=params,
            )
        ordered.append(params[index - 1])
        return "%s"

    statement = _PLACEHOLDER.sub(_bind, sql.replace("%", "%%"))
    return statement, ordered


class ConnectionPool:
    """
    Bounded pool of PostgreSQL connections shared by all repositories.

    Every statement checks out one connection, runs, commits (or rolls
    back) and returns the connection, whatever the outcome.
    """

    def __init__(self, dsn: str, min_conn: int = 1, max_conn: int = 10):
        """
        Open the pool.

        Args:
            dsn: libpq connection string or URL.
            min_conn: Minimum number of connections to keep open.
            max_conn: Maximum number of connections allowed.

        Raises:
            QueryError: If the database is unreachable.
        """
        if min_conn < 0 or max_conn < 1 or min_conn > max_conn:
            raise ValueError(f"Invalid pool bounds: min={min_conn}, max={max_conn}")
        try:
            self._pool: Optional[pool.ThreadedConnectionPool] = pool.ThreadedConnectionPool(
                min_conn, max_conn, dsn
            )
        except psycopg2.OperationalError as e:
            logger.error(f"Failed to initialize database pool: {e}")
            raise QueryError(f"Could not connect to database: {e}") from e
        self._slots = threading.BoundedSemaphore(max_conn)
        self.max_conn = max_conn
        logger.info(f"Database connection pool initialized (max {max_conn} connections).")

    @classmethod
    def from_config(cls) -> "ConnectionPool":
        """Build the pool from the process-wide settings in `config`."""
        return cls(config.DATABASE_URL, config.DB_POOL_MIN, config.DB_POOL_MAX)

    @property
    def closed(self) -> bool:
        return self._pool is None

    @contextmanager
    def connection(self) -> Iterator[Any]:
        """
        Check out a connection for the duration of the block.

        Blocks while all ``max_conn`` connections are in use.

        Raises:
            RuntimeError: If the pool has been closed.
            QueryError: If a new connection cannot be opened.
        """
        if self._pool is None:
            raise RuntimeError("Database pool is closed.")
        self._slots.acquire()
        try:
            try:
                conn = self._pool.getconn()
            except psycopg2.Error as e:
                logger.error(f"Failed to check out a database connection: {e}")
                raise QueryError(f"Could not connect to database: {str(e).strip()}") from e
            try:
                yield conn
            finally:
                self._pool.putconn(conn, close=bool(conn.closed))
        finally:
            self._slots.release()

    def query(self, sql: str, params: Sequence[Any] = ()) -> list[dict]:
        """
        Execute one statement and return its rows as dicts.

        Args:
            sql: Statement with ``$n`` placeholders.
            params: Positional values for the placeholders.

        Returns:
            One dict per row (column name → value); empty for statements
            that return no rows.

        Raises:
            QueryError: If psycopg2 raises while executing or committing.
        """
        statement, args = to_pyformat(sql, params)
        logger.debug(f"Executing: {' '.join(sql.split())} | {len(params)} params")
        with self.connection() as conn:
            try:
                with conn.cursor(cursor_factory=extras.RealDictCursor) as cur:
                    cur.execute(statement, args)
                    rows = [dict(r) for r in cur.fetchall()] if cur.description else []
                conn.commit()
                return rows
            except psycopg2.Error as e:
                if not conn.closed:
                    conn.rollback()
                raise QueryError(str(e).strip(), statement=sql, params=params) from e

    def close(self) -> None:
        """Close all connections in the pool."""
        if self._pool is not None:
            self._pool.closeall()
            self._pool = None
            logger.info("Database connection pool closed.")
