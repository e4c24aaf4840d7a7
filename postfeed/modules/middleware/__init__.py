"""
Authentication Middleware Module - Black Box Interface

Purpose: Gate protected routes behind a bearer token
Interface: AuthGuard, create_bearer_guard(), get_current_user()
Hidden: Header extraction, token resolution, error formatting

Can be used by any FastAPI app that holds an authentication service.
"""

import logging
from typing import Callable, Iterable, Optional

from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse

from ..auth.interfaces import User

logger = logging.getLogger(__name__)

UNAUTHORIZED_MESSAGE = "Unauthorized"
INTERNAL_ERROR_MESSAGE = "Server internal error"


class AuthGuard:
    """
    Bearer token middleware for FastAPI applications.

    Requests under a protected prefix must carry `Authorization: Bearer <token>`
    for a token the resolver knows. Rejected requests never reach a handler.
    Everything else passes through untouched.
    """

    def __init__(
        self,
        resolver: Callable[[Optional[str]], Optional[User]],
        protected_prefixes: Optional[Iterable[str]] = None,
        log_attempts: bool = True
    ):
        """
        Initialize the guard.

        Args:
            resolver: Function mapping an Authorization header value to a user or None
            protected_prefixes: Path prefixes requiring authentication (default: /private)
            log_attempts: Whether to log rejected requests
        """
        self.resolver = resolver
        self.protected_prefixes = [
            prefix.rstrip("/") for prefix in (protected_prefixes or ["/private"])
        ]
        self.log_attempts = log_attempts

    def is_protected(self, request: Request) -> bool:
        """Check if the request path falls under a protected prefix."""
        # CORS preflight carries no credentials
        if request.method.upper() == "OPTIONS":
            return False

        path = str(request.url.path)
        for prefix in self.protected_prefixes:
            if path == prefix or path.startswith(prefix + "/"):
                return True
        return False

    @staticmethod
    def format_error(message: str) -> dict:
        return {"message": message}

    def _reject(self, request: Request, reason: str) -> JSONResponse:
        if self.log_attempts:
            logger.warning(f"Rejected {request.method} {request.url.path}: {reason}")
        return JSONResponse(status_code=401, content=self.format_error(UNAUTHORIZED_MESSAGE))

    async def __call__(self, request: Request, call_next):
        """Process the request through the guard."""
        if not self.is_protected(request):
            return await call_next(request)

        authorization = request.headers.get("authorization")
        if not authorization:
            return self._reject(request, "no Authorization header")

        try:
            user = self.resolver(authorization)
        except Exception:
            logger.exception("Error during token resolution")
            return JSONResponse(
                status_code=500,
                content=self.format_error(INTERNAL_ERROR_MESSAGE)
            )

        if user is None:
            return self._reject(request, "unknown or malformed bearer token")

        # Store the user for downstream handlers
        request.state.user = user

        return await call_next(request)


def create_bearer_guard(
    auth_service,
    protected_prefixes: Optional[Iterable[str]] = None
) -> AuthGuard:
    """
    Factory function to create the bearer token guard.

    Args:
        auth_service: Service with a resolve(authorization) method
        protected_prefixes: Path prefixes requiring authentication

    Returns:
        Configured AuthGuard instance
    """
    return AuthGuard(
        resolver=auth_service.resolve,
        protected_prefixes=protected_prefixes
    )


def get_current_user(request: Request) -> User:
    """
    FastAPI dependency returning the user attached by the guard.

    Raises 401 if a handler using it was mounted outside the guarded prefixes.
    """
    user = getattr(request.state, "user", None)
    if user is None:
        raise HTTPException(401, UNAUTHORIZED_MESSAGE)
    return user


# Module interface - what this module provides
__all__ = [
    "AuthGuard",
    "create_bearer_guard",
    "get_current_user",
]
