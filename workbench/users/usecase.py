"""User operations built on the repositories."""

from __future__ import annotations

import logging

from workbench.users.model import User
from workbench.users.repository import MessageRepository, UserRepository
from workbench.users.transaction import Transaction

logger = logging.getLogger(__name__)


class UserUsecase:
    """Read, create, update and delete users."""

    def __init__(
        self,
        users: UserRepository,
        messages: MessageRepository,
        transaction: Transaction,
    ) -> None:
        self._users = users
        self._messages = messages
        self._transaction = transaction

    def get_by_id(self, user_id: str) -> User:
        """Return the user with ``user_id``."""
        return self._users.read(user_id)

    def create(self, user: User) -> str:
        """Store ``user`` and return its id."""
        return self._users.create(user)

    def update(self, user: User) -> None:
        """Update the stored user with ``user.id``."""
        self._users.update(user)

    def delete(self, user_id: str) -> None:
        """Delete the user and their message in one transaction."""

        def work() -> None:
            logger.debug("start delete user")
            self._users.delete(user_id)
            logger.debug("start delete message")
            self._messages.delete(user_id)

        self._transaction.do_in_tx(work)