"""
Authentication Service Facade following Black Box Design principles.

This module provides:
- Login: credential verification and bearer token issuance
- Resolution of an Authorization header back to a user
- Protocol definition for swappable implementations
"""

import asyncio
import logging
from typing import Callable, Optional, Protocol

from .exceptions import InvalidCredentials, UserNotFound
from .credentials import verify_password
from .interfaces import CredentialStore, TokenStore, User
from .tokens import generate_token

logger = logging.getLogger(__name__)

BEARER_SCHEME = "bearer"


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """
    Pull the token out of an Authorization header value.

    Args:
        authorization: Raw header value, e.g. "Bearer abc123"

    Returns:
        The token, or None if the header is absent or not a bearer header
    """
    if not authorization:
        return None
    parts = authorization.split()
    if len(parts) != 2 or parts[0].lower() != BEARER_SCHEME:
        return None
    return parts[1]


class AuthenticationService(Protocol):
    """Protocol for authentication services."""

    async def authenticate(self, login: str, password: str) -> str:
        """
        Exchange credentials for a bearer token.

        Raises:
            UserNotFound: If login is not registered
            InvalidCredentials: If the password does not match
        """
        ...

    def resolve(self, authorization: Optional[str]) -> Optional[User]:
        """Resolve an Authorization header value to a user."""
        ...


class DefaultAuthenticationService:
    """
    Default implementation of AuthenticationService.

    Verifies passwords against the credential store and records every issued
    token in the token store.
    """

    def __init__(
        self,
        credentials: CredentialStore,
        tokens: TokenStore,
        token_factory: Callable[[], str] = generate_token,
    ):
        """
        Initialize with injected stores.

        Args:
            credentials: Store used to look up users by login
            tokens: Store receiving issued tokens
            token_factory: Callable producing a new opaque token
        """
        self._credentials = credentials
        self._tokens = tokens
        self._new_token = token_factory

    async def authenticate(self, login: str, password: str) -> str:
        """
        Authenticate a user and issue a new bearer token.

        Args:
            login: Login name
            password: Plaintext password

        Returns:
            Newly issued token

        Logic:
        1. Look up the login
        2. Verify the password hash off the event loop
        3. Mint a token and record token -> user
        """
        user = self._credentials.lookup(login)
        if user is None:
            logger.info(f"Login rejected: unknown user {login!r}")
            raise UserNotFound(login)

        matches = await asyncio.to_thread(verify_password, password, user.password_hash)
        if not matches:
            logger.info(f"Login rejected: bad password for {login!r}")
            raise InvalidCredentials(login)

        token = self._new_token()
        self._tokens.put(token, user)
        logger.info(f"Issued token {token[:6]}... for {login!r}")
        return token

    def resolve(self, authorization: Optional[str]) -> Optional[User]:
        """
        Resolve an Authorization header value to a user.

        Never mutates the token store.
        """
        token = extract_bearer_token(authorization)
        if token is None:
            return None
        return self._tokens.resolve(token)

    def issued_tokens(self) -> int:
        """Number of tokens issued since startup."""
        return len(self._tokens)
