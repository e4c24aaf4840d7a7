"""
Authentication Module - Black Box Interface

Purpose: Verify credentials, issue and resolve bearer tokens
Interface: AuthFactory.build(), authenticate(), resolve()
Hidden: Password hashing, token format, storage

This module can be replaced with any other auth implementation
(OAuth, JWT, external service) without affecting other modules.
"""

from .credentials import InMemoryCredentialStore, hash_password, verify_password
from .exceptions import AuthenticationError, InvalidCredentials, UserNotFound
from .factory import AuthFactory
from .interfaces import User
from .service import AuthenticationService, DefaultAuthenticationService, extract_bearer_token
from .tokens import InMemoryTokenStore, generate_token

__all__ = [
    "AuthFactory",
    "AuthenticationError",
    "AuthenticationService",
    "DefaultAuthenticationService",
    "InMemoryCredentialStore",
    "InMemoryTokenStore",
    "InvalidCredentials",
    "User",
    "UserNotFound",
    "extract_bearer_token",
    "generate_token",
    "hash_password",
    "verify_password",
]
