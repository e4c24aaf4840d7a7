"""
Bearer token store.

Tokens never expire and are never evicted: the map grows by one entry per
successful login for the lifetime of the process. Re-authenticating issues a
fresh token and leaves the old ones valid.
"""

import secrets
import threading
from typing import Dict, Optional

from .interfaces import User

TOKEN_BYTES = 32


def generate_token() -> str:
    """Generate a cryptographically secure opaque token (32 bytes = 256 bits)."""
    return secrets.token_urlsafe(TOKEN_BYTES)


class InMemoryTokenStore:
    """Thread-safe token -> user map."""

    def __init__(self):
        self._tokens: Dict[str, User] = {}
        self._lock = threading.Lock()

    def put(self, token: str, user: User) -> None:
        with self._lock:
            self._tokens[token] = user

    def resolve(self, token: str) -> Optional[User]:
        if not token:
            return None
        with self._lock:
            return self._tokens.get(token)

    def __len__(self) -> int:
        with self._lock:
            return len(self._tokens)
