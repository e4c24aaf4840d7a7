"""
Routers for the Postfeed HTTP surface.

Each factory receives the component it exposes, so the application decides
which store instances back the routes.
"""

import logging
import math
from typing import Any, Dict, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, Response

from ..auth.interfaces import User
from ..auth.service import AuthenticationService
from ..middleware import get_current_user
from ..news import NewsCatalog, NewsItem
from ..posts import PostRepository
from .models import LoginRequest, MessageResponse, TokenResponse, UserProfile, post_fields

logger = logging.getLogger(__name__)


def parse_post_id(raw: str) -> Optional[int]:
    """
    Read a path id the way the frontend's numeric coercion does.

    Accepts decimal, exponent and 0x/0o/0b forms ("3", "3.0", "3e0", "0x3").
    Anything else, or a non-integral value, matches no post.
    """
    text = raw.strip()
    if not text or "_" in text:
        return None
    try:
        if text[:2].lower() in ("0x", "0o", "0b"):
            return int(text, 0)
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or not value.is_integer():
        return None
    return int(value)


def create_auth_router(auth_service: AuthenticationService) -> APIRouter:
    """
    Create the login router.

    Authentication failures propagate as AuthenticationError and are turned
    into 400 responses by the application's exception handler.
    """
    router = APIRouter(tags=["auth"])

    @router.post("/auth", response_model=TokenResponse, responses={400: {"model": MessageResponse}})
    async def login(credentials: LoginRequest) -> TokenResponse:
        """Exchange login and password for a new bearer token."""
        token = await auth_service.authenticate(credentials.login, credentials.password)
        return TokenResponse(token=token)

    return router


def create_private_router(news: NewsCatalog) -> APIRouter:
    """
    Create routes that require a bearer token.

    The router expects to be mounted under a prefix guarded by AuthGuard.
    """
    router = APIRouter(
        prefix="/private", tags=["private"], responses={401: {"model": MessageResponse}}
    )

    @router.get("/me", response_model=UserProfile)
    async def me(user: User = Depends(get_current_user)) -> Dict[str, Any]:
        return user.profile()

    @router.get("/news", response_model=List[NewsItem])
    async def list_news(user: User = Depends(get_current_user)) -> List[NewsItem]:
        return news.list()

    @router.get("/news/{news_id}", response_model=NewsItem, responses={404: {"model": MessageResponse}})
    async def get_news(news_id: str, user: User = Depends(get_current_user)) -> NewsItem:
        item = news.get(news_id)
        if item is None:
            raise HTTPException(404, "not found")
        return item

    return router


def create_posts_router(posts: PostRepository) -> APIRouter:
    """
    Create the public post CRUD routes.

    Create, replace and delete always answer 204, including when the target
    id does not exist.
    """
    router = APIRouter(prefix="/posts", tags=["posts"])

    @router.get("")
    async def list_posts() -> List[Dict[str, Any]]:
        return posts.list()

    @router.get("/{post_id}")
    async def get_post(post_id: str) -> Dict[str, Any]:
        """Return {"post": ...}, or an empty object when there is no such post."""
        parsed = parse_post_id(post_id)
        post = posts.get(parsed) if parsed is not None else None
        if post is None:
            return {}
        return {"post": post}

    @router.post("", status_code=204, response_class=Response)
    async def create_post(body: Any = Body(None)) -> Response:
        post = posts.create(post_fields(body))
        logger.debug(f"Created post {post['id']}")
        return Response(status_code=204)

    @router.put("/{post_id}", status_code=204, response_class=Response)
    async def replace_post(post_id: str, body: Any = Body(None)) -> Response:
        parsed = parse_post_id(post_id)
        if parsed is not None:
            if not posts.replace(parsed, post_fields(body)):
                logger.debug(f"Replace ignored: no post {parsed}")
        return Response(status_code=204)

    @router.delete("/{post_id}", status_code=204, response_class=Response)
    async def delete_post(post_id: str) -> Response:
        parsed = parse_post_id(post_id)
        if parsed is not None and not posts.delete(parsed):
            logger.debug(f"Delete ignored: no post {parsed}")
        return Response(status_code=204)

    return router
