#!/usr/bin/env python3
"""
Postfeed - Main Entry Point

This is the thin orchestration layer that:
1. Loads configuration
2. Builds the stores and the authentication service
3. Wires routers, middleware and error handlers
4. Runs the API server

All business logic is in the modules, following black box principles.
"""

import logging
import logging.config as log_config
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from postfeed import __version__
from postfeed.config.provider import ConfigProvider, EnvConfigProvider
from postfeed.logging_config import get_logging_config
from postfeed.modules.api import create_auth_router, create_posts_router, create_private_router
from postfeed.modules.auth import AuthenticationError, AuthFactory, DefaultAuthenticationService
from postfeed.modules.middleware import INTERNAL_ERROR_MESSAGE, create_bearer_guard
from postfeed.modules.news import NewsCatalog
from postfeed.modules.posts import PostRepository

logger = logging.getLogger(__name__)

GENERIC_AUTH_FAILURE = "authentication failed"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Log application lifecycle. Stores are built before startup and only
    live in process memory, so there is nothing to open or close.
    """
    logger.info("Starting Postfeed API...")
    logger.info(
        f"Serving {len(app.state.posts)} posts and {len(app.state.news.list())} news items"
    )

    yield

    logger.info(
        f"Shutting down Postfeed API ({app.state.auth_service.issued_tokens()} tokens issued)"
    )


def _validation_message(exc: RequestValidationError) -> str:
    errors = exc.errors()
    if not errors:
        return "invalid request"
    first = errors[0]
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def create_app(
    config_provider: Optional[ConfigProvider] = None,
    auth_service: Optional[DefaultAuthenticationService] = None,
    posts: Optional[PostRepository] = None,
    news: Optional[NewsCatalog] = None,
) -> FastAPI:
    """
    Build the FastAPI application.

    Any component not supplied is built from configuration with seed data,
    so each call yields an isolated set of stores.

    Args:
        config_provider: Configuration source (defaults to environment)
        auth_service: Authentication service backing /auth and the guard
        posts: Post repository
        news: News catalog

    Returns:
        Configured FastAPI application
    """
    config_provider = config_provider or EnvConfigProvider()
    api_config = config_provider.get_api_config()
    auth_config = config_provider.get_auth_config()

    auth_service = auth_service or AuthFactory.build(config_provider)
    posts = posts if posts is not None else PostRepository.with_seed_data()
    news = news if news is not None else NewsCatalog()

    app = FastAPI(
        title="Postfeed API",
        description="Posts, news and token authentication for a frontend course project",
        version=__version__,
        lifespan=lifespan,
    )
    app.state.auth_service = auth_service
    app.state.posts = posts
    app.state.news = news

    # Routes
    app.include_router(create_auth_router(auth_service))
    app.include_router(create_private_router(news))
    app.include_router(create_posts_router(posts))

    @app.get("/")
    async def root():
        """Health check."""
        return {"GET": "ok"}

    # Middleware: the last one added runs first, so CORS wraps the guard
    guard = create_bearer_guard(auth_service, auth_config.protected_prefixes)

    @app.middleware("http")
    async def require_bearer_token(request: Request, call_next):
        return await guard(request, call_next)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=api_config.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Error handlers

    @app.exception_handler(AuthenticationError)
    async def authentication_error_handler(request, exc: AuthenticationError):
        """Handle failed logins."""
        message = exc.detail if auth_config.detailed_errors else GENERIC_AUTH_FAILURE
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(RequestValidationError)
    async def validation_error_handler(request, exc: RequestValidationError):
        """Handle missing or malformed request bodies."""
        message = _validation_message(exc)
        logger.info(f"Invalid request to {request.url.path}: {message}")
        return JSONResponse(status_code=400, content={"message": message})

    @app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request, exc: StarletteHTTPException):
        """Reshape framework errors into {message} bodies."""
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": str(exc.detail)},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def internal_error_handler(request, exc: Exception):
        """Log unexpected failures without leaking details to the client."""
        logger.exception(f"Unhandled error on {request.method} {request.url.path}")
        return JSONResponse(status_code=500, content={"message": INTERNAL_ERROR_MESSAGE})

    return app


app = create_app()


def run() -> None:
    """Run the API server with configuration from the environment."""
    api_config = EnvConfigProvider().get_api_config()
    logging_config = get_logging_config(api_config.log_level)
    log_config.dictConfig(logging_config)
    logger.info(f"Server starting on port {api_config.port}")

    uvicorn.run(
        "postfeed.main:app",
        host=api_config.host,
        port=api_config.port,
        log_level=api_config.log_level.lower(),
        reload=api_config.debug,
        log_config=logging_config,
    )


if __name__ == "__main__":
    run()
