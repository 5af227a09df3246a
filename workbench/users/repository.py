"""Storage of users and their messages in an SQLite database."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar

from workbench.users.model import User

logger = logging.getLogger(__name__)

_SCHEMA = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    email TEXT NOT NULL,
    age INTEGER NOT NULL
);
CREATE TABLE IF NOT EXISTS message (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    user_id INTEGER NOT NULL,
    body TEXT NOT NULL DEFAULT ''
);
"""

_current_tx: ContextVar[sqlite3.Connection | None] = ContextVar("tx", default=None)


class RepositoryError(Exception):
    """Raised when a query fails or touches an unexpected number of rows."""


def connect(dsn: str) -> sqlite3.Connection:
    """Open the database at ``dsn`` and make sure its tables exist."""
    conn = sqlite3.connect(dsn, isolation_level=None, check_same_thread=False)
    conn.executescript(_SCHEMA)
    return conn


def get_tx() -> sqlite3.Connection | None:
    """Return the connection of the transaction in progress, or ``None``."""
    return _current_tx.get()


@contextmanager
def bind_tx(conn: sqlite3.Connection) -> Iterator[sqlite3.Connection]:
    """Make ``conn`` the transaction seen by :func:`get_tx` inside the block."""
    token = _current_tx.set(conn)
    try:
        yield conn
    finally:
        _current_tx.reset(token)


def _require_tx() -> sqlite3.Connection:
    tx = get_tx()
    if tx is None:
        raise RepositoryError("transaction store doesn't exist")
    return tx


class UserRepository:
    """Create, read, update and delete users."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def create(self, user: User) -> str:
        """Insert ``user`` and return its new id."""
        try:
            cursor = self._conn.execute(
                "INSERT INTO users (name, email, age) VALUES (?, ?, ?)",
                (user.name, user.email, user.age),
            )
        except sqlite3.Error as exc:
            raise RepositoryError(f"query faild: {exc}") from exc
        return str(cursor.lastrowid)

    def read(self, user_id: str) -> User:
        """Return the user with ``user_id``."""
        try:
            row = self._conn.execute(
                "SELECT id, name, email, age FROM users WHERE id = ?", (user_id,)
            ).fetchone()
        except sqlite3.Error as exc:
            raise RepositoryError(str(exc)) from exc
        if row is None:
            raise RepositoryError("sql: no rows in result set")
        found_id, name, email, age = row
        return User(id=str(found_id), name=name, email=email, age=age)

    def update(self, user: User) -> None:
        """Change the name and age of the user with ``user.id``."""
        try:
            cursor = self._conn.execute(
                "UPDATE users SET name = ?, age = ? WHERE id = ?",
                (user.name, user.age, user.id),
            )
        except sqlite3.Error as exc:
            raise RepositoryError(str(exc)) from exc
        if cursor.rowcount != 1:
            raise RepositoryError(
                f"expected 1 row to be affected, got {cursor.rowcount}, id {user.id}"
            )

    def delete(self, user_id: str) -> None:
        """Delete the user within the current transaction."""
        tx = _require_tx()
        logger.debug("start delete user rep")
        query = "DELETE FROM users WHERE id = ?"
        try:
            cursor = tx.execute(query, (user_id,))
        except sqlite3.Error as exc:
            raise RepositoryError(f"query ExecContext faild: {exc}") from exc
        if cursor.rowcount != 1:
            logger.warning(
                "expected 1 row to be affected, got %d, id %s, query %s",
                cursor.rowcount,
                user_id,
                query,
            )
        logger.debug("user %s deleted: %d", user_id, cursor.rowcount)


class MessageRepository:
    """Delete the messages of a user."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def delete(self, user_id: str) -> None:
        """Delete the user's message within the current transaction; exactly one must go."""
        tx = _require_tx()
        logger.debug("start delete message rep")
        query = "DELETE FROM message WHERE user_id = ?"
        try:
            cursor = tx.execute(query, (user_id,))
        except sqlite3.Error as exc:
            raise RepositoryError(str(exc)) from exc
        if cursor.rowcount != 1:
            raise RepositoryError(
                f"expected 1 row to be affected, got {cursor.rowcount}, "
                f"id {user_id}, query {query}"
            )
        logger.debug("message %s deleted: %d", user_id, cursor.rowcount)