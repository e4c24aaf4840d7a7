"""
Shared pytest fixtures for Postfeed tests.

This module provides common fixtures including:
- Isolated credential/token stores hashed at the minimum bcrypt cost
- Post repository and news catalog with seed data
- FastAPI test client wired to those instances
"""

import os
import sys

import pytest
from fastapi.testclient import TestClient

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from postfeed.config.provider import AuthConfig, StaticConfigProvider
from postfeed.main import create_app
from postfeed.modules.auth import (
    DefaultAuthenticationService,
    InMemoryCredentialStore,
    InMemoryTokenStore,
)
from postfeed.modules.news import NewsCatalog
from postfeed.modules.posts import PostRepository

# bcrypt's minimum cost keeps hashing fast in tests
TEST_ROUNDS = 4


@pytest.fixture
def credentials():
    """Credential store holding the seed admin account."""
    return InMemoryCredentialStore.with_account(
        login="admin",
        password="admin",
        name="Admin",
        avatar="https://i.pravatar.cc/300?img=12",
        rounds=TEST_ROUNDS,
    )


@pytest.fixture
def tokens():
    return InMemoryTokenStore()


@pytest.fixture
def auth_service(credentials, tokens):
    return DefaultAuthenticationService(credentials, tokens)


@pytest.fixture
def posts():
    return PostRepository.with_seed_data()


@pytest.fixture
def news():
    return NewsCatalog()


@pytest.fixture
def auth_config():
    return AuthConfig(bcrypt_rounds=TEST_ROUNDS)


@pytest.fixture
def app(auth_service, posts, news, auth_config):
    """Application backed by the isolated fixture stores."""
    return create_app(
        config_provider=StaticConfigProvider(auth_config=auth_config),
        auth_service=auth_service,
        posts=posts,
        news=news,
    )


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def admin_token(client):
    """Token obtained through the real login route."""
    response = client.post("/auth", json={"login": "admin", "password": "admin"})
    assert response.status_code == 200
    return response.json()["token"]


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers", "slow: Tests that take a long time to run"
    )
