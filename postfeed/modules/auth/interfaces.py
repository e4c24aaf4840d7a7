"""Authentication interfaces following Black Box Design principles."""
from typing import Protocol, Optional, Dict, Any
from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """A registered account. Immutable once created."""
    id: str
    login: str
    name: str
    password_hash: str
    avatar: str

    def profile(self) -> Dict[str, Any]:
        """Public view of the user, without the password hash."""
        return {
            "id": self.id,
            "login": self.login,
            "name": self.name,
            "avatar": self.avatar,
        }


class CredentialStore(Protocol):
    """Protocol for credential lookup - allows swappable implementations."""

    def lookup(self, login: str) -> Optional[User]:
        """
        Find a user by login.

        Args:
            login: Case-sensitive login name

        Returns:
            User or None if no such login is registered
        """
        ...


class TokenStore(Protocol):
    """Protocol for bearer token storage."""

    def put(self, token: str, user: User) -> None:
        """Record that token identifies user."""
        ...

    def resolve(self, token: str) -> Optional[User]:
        """Return the user a token was issued to, or None."""
        ...

    def __len__(self) -> int:
        ...
