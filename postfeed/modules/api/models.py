"""
Postfeed API data models.

These models define the request and response bodies of the HTTP surface.
"""

from typing import Any, Dict

from pydantic import BaseModel, Field

from ..news import NewsItem

# Request Models (API Input)


class LoginRequest(BaseModel):
    """Credentials exchanged for a bearer token."""

    login: str = Field(..., description="Account login")
    password: str = Field(..., description="Plaintext password")


def post_fields(body: Any) -> Dict[str, Any]:
    """
    Client-supplied post fields.

    Post bodies are free-form: any JSON object is stored as sent, with no
    type checks on its values. A body that is not an object carries no fields.
    """
    if isinstance(body, dict):
        return dict(body)
    return {}


# Response Models (API Output)


class TokenResponse(BaseModel):
    """Issued bearer token."""

    token: str


class MessageResponse(BaseModel):
    """Error or status message."""

    message: str


class UserProfile(BaseModel):
    """Public view of the authenticated user."""

    id: str
    login: str
    name: str
    avatar: str


__all__ = [
    "LoginRequest",
    "MessageResponse",
    "NewsItem",
    "post_fields",
    "TokenResponse",
    "UserProfile",
]
