"""
Authentication Factory following Black Box Design principles.

This factory:
- Constructs the authentication stack based on configuration
- Wires dependencies together
- Returns only the service facade (hiding implementation)
"""

import logging
from typing import Optional

from .credentials import InMemoryCredentialStore
from .interfaces import CredentialStore, TokenStore
from .service import DefaultAuthenticationService
from .tokens import InMemoryTokenStore
from ...config.provider import AuthConfig, ConfigProvider

logger = logging.getLogger(__name__)


class AuthFactory:
    """
    Factory for building the authentication stack.

    This is the composition root that:
    - Seeds the credential store with the admin account
    - Creates an empty token store
    - Returns the service facade
    """

    @staticmethod
    def build(config_provider: ConfigProvider) -> DefaultAuthenticationService:
        """
        Build the complete authentication stack.

        Args:
            config_provider: Configuration provider

        Returns:
            Authentication service with a seeded credential store
        """
        auth_config = config_provider.get_auth_config()
        credentials = AuthFactory.seed_credentials(auth_config)
        logger.info(
            f"Authentication service initialized with seed account {auth_config.admin_login!r}"
        )
        return DefaultAuthenticationService(credentials, InMemoryTokenStore())

    @staticmethod
    def seed_credentials(auth_config: AuthConfig) -> InMemoryCredentialStore:
        """Create the credential store holding the configured admin account."""
        return InMemoryCredentialStore.with_account(
            login=auth_config.admin_login,
            password=auth_config.admin_password,
            name=auth_config.admin_name,
            avatar=auth_config.admin_avatar,
            rounds=auth_config.bcrypt_rounds,
        )

    @staticmethod
    def build_for_testing(
        credentials: Optional[CredentialStore] = None,
        tokens: Optional[TokenStore] = None,
    ) -> DefaultAuthenticationService:
        """
        Build auth stack for testing with explicit stores.

        Defaults to the seed admin account hashed at the minimum bcrypt cost.

        Args:
            credentials: Credential store to use
            tokens: Token store to use

        Returns:
            Authentication service for testing
        """
        if credentials is None:
            credentials = AuthFactory.seed_credentials(AuthConfig(bcrypt_rounds=4))
        if tokens is None:
            tokens = InMemoryTokenStore()
        return DefaultAuthenticationService(credentials, tokens)
