"""Run a unit of work inside a database transaction."""

from __future__ import annotations

import logging
import sqlite3
from collections.abc import Callable
from typing import TypeVar

from workbench.users.repository import bind_tx

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Transaction:
    """Begin, commit and roll back transactions on one connection."""

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    def do_in_tx(self, func: Callable[[], T]) -> T:
        """Call ``func`` inside a transaction and return its result.

        If ``func`` raises, the transaction is rolled back and the error
        propagates. A failed commit is rolled back and not reported.
        """
        try:
            self._conn.execute("BEGIN")
        except sqlite3.Error:
            logger.debug("begin error")
            raise

        with bind_tx(self._conn):
            try:
                value = func()
            except BaseException:
                logger.debug("f error")
                if self._conn.in_transaction:
                    self._conn.execute("ROLLBACK")
                raise

        logger.debug("commit.")
        try:
            self._conn.execute("COMMIT")
        except sqlite3.Error:
            if self._conn.in_transaction:
                self._conn.execute("ROLLBACK")
        return value