"""Configuration provider following Black Box Design principles."""
import os
from dataclasses import dataclass, field
from typing import List, Protocol


def _env_int(name: str, default: int) -> int:
    """Read an integer environment variable, failing loudly on garbage."""
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got {raw!r}") from None


def _env_bool(name: str, default: bool = False) -> bool:
    return os.getenv(name, "true" if default else "false").lower() == "true"


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


@dataclass
class APIConfig:
    """API configuration."""
    port: int
    host: str
    debug: bool
    cors_origins: List[str]
    log_level: str = "INFO"


@dataclass
class AuthConfig:
    """Authentication configuration."""
    admin_login: str = "admin"
    admin_password: str = "admin"
    admin_name: str = "Admin"
    admin_avatar: str = "https://i.pravatar.cc/300?img=12"
    bcrypt_rounds: int = 10
    detailed_errors: bool = False
    protected_prefixes: List[str] = field(default_factory=lambda: ["/private"])


class ConfigProvider(Protocol):
    """Protocol for configuration providers."""

    def get_api_config(self) -> APIConfig:
        """Get API configuration."""
        ...

    def get_auth_config(self) -> AuthConfig:
        """Get authentication configuration."""
        ...


class EnvConfigProvider:
    """Environment-based configuration provider."""

    def get_api_config(self) -> APIConfig:
        """Get API configuration from environment variables."""
        return APIConfig(
            port=_env_int("PORT", 7070),
            host=os.getenv("API_HOST", "0.0.0.0"),
            debug=_env_bool("API_DEBUG"),
            cors_origins=_env_list("CORS_ORIGINS", "*"),
            log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        )

    def get_auth_config(self) -> AuthConfig:
        """Get authentication configuration from environment variables."""
        defaults = AuthConfig()
        rounds = _env_int("BCRYPT_ROUNDS", defaults.bcrypt_rounds)
        # bcrypt rejects costs outside 4..31
        if not 4 <= rounds <= 31:
            raise ValueError(f"BCRYPT_ROUNDS must be between 4 and 31, got {rounds}")

        return AuthConfig(
            admin_login=os.getenv("ADMIN_LOGIN", defaults.admin_login),
            admin_password=os.getenv("ADMIN_PASSWORD", defaults.admin_password),
            admin_name=os.getenv("ADMIN_NAME", defaults.admin_name),
            admin_avatar=os.getenv("ADMIN_AVATAR", defaults.admin_avatar),
            bcrypt_rounds=rounds,
            detailed_errors=_env_bool("AUTH_DETAILED_ERRORS"),
            protected_prefixes=_env_list("PROTECTED_PREFIXES", "/private"),
        )


class StaticConfigProvider:
    """Provider returning fixed config objects, for tests and embedding."""

    def __init__(self, api_config: APIConfig = None, auth_config: AuthConfig = None):
        self._api = api_config or APIConfig(port=7070, host="127.0.0.1", debug=False, cors_origins=["*"])
        self._auth = auth_config or AuthConfig()

    def get_api_config(self) -> APIConfig:
        return self._api

    def get_auth_config(self) -> AuthConfig:
        return self._auth
