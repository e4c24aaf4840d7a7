"""
API Module - Black Box Interface

Purpose: HTTP routing and module orchestration
Interface: REST API endpoints
Hidden: Request parsing, response shaping

The API module only orchestrates - it contains no business logic.
All logic is delegated to appropriate modules.
"""

from .models import (
    LoginRequest,
    MessageResponse,
    post_fields,
    TokenResponse,
    UserProfile,
)
from .routes import create_auth_router, create_posts_router, create_private_router

__all__ = [
    "LoginRequest",
    "MessageResponse",
    "post_fields",
    "TokenResponse",
    "UserProfile",
    "create_auth_router",
    "create_posts_router",
    "create_private_router",
]
