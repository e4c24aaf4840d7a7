"""
Credential store backed by bcrypt password hashes.

Only a hash is ever retained; verification goes through bcrypt.checkpw.
"""

import logging
import uuid
from typing import Dict, Optional

import bcrypt

from .interfaces import User

logger = logging.getLogger(__name__)

DEFAULT_ROUNDS = 10


def hash_password(password: str, rounds: int = DEFAULT_ROUNDS) -> str:
    """Hash a password using bcrypt"""
    salt = bcrypt.gensalt(rounds=rounds)
    return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")


def verify_password(password: str, password_hash: str) -> bool:
    """Verify a password against its hash"""
    try:
        return bcrypt.checkpw(password.encode("utf-8"), password_hash.encode("utf-8"))
    except ValueError:
        # Malformed stored hash, or a password over bcrypt's 72 byte limit
        logger.warning("Password could not be checked against stored hash")
        return False


class InMemoryCredentialStore:
    """
    Users keyed by login.

    Entries are only added while the store is being seeded; there is no
    registration flow.
    """

    def __init__(self):
        self._users: Dict[str, User] = {}

    def add(self, user: User) -> None:
        """
        Register a user.

        Raises:
            ValueError: If the login is already taken
        """
        if user.login in self._users:
            raise ValueError(f"Login already registered: {user.login}")
        self._users[user.login] = user

    def lookup(self, login: str) -> Optional[User]:
        return self._users.get(login)

    def __len__(self) -> int:
        return len(self._users)

    @classmethod
    def with_account(
        cls,
        login: str,
        password: str,
        name: str,
        avatar: str,
        rounds: int = DEFAULT_ROUNDS,
    ) -> "InMemoryCredentialStore":
        """Build a store seeded with a single account."""
        store = cls()
        store.add(
            User(
                id=str(uuid.uuid4()),
                login=login,
                name=name,
                password_hash=hash_password(password, rounds),
                avatar=avatar,
            )
        )
        return store
