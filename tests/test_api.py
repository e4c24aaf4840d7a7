"""
API endpoint tests using FastAPI TestClient.

Tests cover:
- POST /auth - login and error policy
- GET /private/* - guarded profile and news routes
- /posts CRUD with soft success on missing ids
- GET / health check and error body shapes
"""

from datetime import datetime

import pytest
from fastapi import APIRouter
from fastapi.testclient import TestClient

from postfeed.config.provider import AuthConfig, StaticConfigProvider
from postfeed.main import create_app
from postfeed.modules.api.routes import parse_post_id


def bearer(token):
    return {"Authorization": f"Bearer {token}"}


# Root


def test_root(client):
    response = client.get("/")

    assert response.status_code == 200
    assert response.json() == {"GET": "ok"}


# Auth


def test_login_returns_token(client, tokens):
    response = client.post("/auth", json={"login": "admin", "password": "admin"})

    assert response.status_code == 200
    token = response.json()["token"]
    assert tokens.resolve(token).login == "admin"


def test_login_then_me(client, admin_token):
    response = client.get("/private/me", headers=bearer(admin_token))

    assert response.status_code == 200
    body = response.json()
    assert body["login"] == "admin"
    assert body["name"] == "Admin"
    assert body["avatar"] == "https://i.pravatar.cc/300?img=12"
    assert set(body) == {"id", "login", "name", "avatar"}


@pytest.mark.parametrize(
    "body",
    [
        {"login": "ghost", "password": "admin"},
        {"login": "admin", "password": "wrong"},
    ],
)
def test_login_failures_are_generic_by_default(client, tokens, body):
    response = client.post("/auth", json=body)

    assert response.status_code == 400
    assert response.json() == {"message": "authentication failed"}
    assert len(tokens) == 0


def test_login_failures_detailed_when_enabled(auth_service, posts, news):
    provider = StaticConfigProvider(auth_config=AuthConfig(bcrypt_rounds=4, detailed_errors=True))
    client = TestClient(create_app(provider, auth_service, posts, news))

    unknown = client.post("/auth", json={"login": "ghost", "password": "admin"})
    wrong = client.post("/auth", json={"login": "admin", "password": "wrong"})

    assert unknown.json() == {"message": "user not found"}
    assert wrong.json() == {"message": "invalid password"}


@pytest.mark.parametrize(
    "body",
    [
        {},
        {"login": "admin"},
        {"password": "admin"},
    ],
)
def test_login_missing_fields(client, body):
    response = client.post("/auth", json=body)

    assert response.status_code == 400
    assert "message" in response.json()


def test_login_invalid_json(client):
    response = client.post(
        "/auth", content="not json", headers={"Content-Type": "application/json"}
    )

    assert response.status_code == 400


def test_old_tokens_stay_valid(client):
    first = client.post("/auth", json={"login": "admin", "password": "admin"}).json()["token"]
    second = client.post("/auth", json={"login": "admin", "password": "admin"}).json()["token"]

    assert first != second
    assert client.get("/private/me", headers=bearer(first)).status_code == 200
    assert client.get("/private/me", headers=bearer(second)).status_code == 200


# News


def test_news_list(client, admin_token):
    response = client.get("/private/news", headers=bearer(admin_token))

    assert response.status_code == 200
    items = response.json()
    assert [item["id"] for item in items] == ["1", "2", "3", "4"]
    assert set(items[0]) == {"id", "title", "image", "content"}


def test_news_item(client, admin_token):
    response = client.get("/private/news/2", headers=bearer(admin_token))

    assert response.status_code == 200
    assert response.json()["title"] == "Опыт сплава по реке"


def test_news_item_not_found(client, admin_token):
    response = client.get("/private/news/99", headers=bearer(admin_token))

    assert response.status_code == 404
    assert response.json() == {"message": "not found"}


def test_news_requires_token(client):
    assert client.get("/private/news").status_code == 401
    assert client.get("/private/news", headers=bearer("forged")).status_code == 401


# Posts


def test_list_posts(client):
    response = client.get("/posts")

    assert response.status_code == 200
    assert [post["id"] for post in response.json()] == [1, 2]


def test_create_then_get(client):
    response = client.post("/posts", json={"content": "x"})

    assert response.status_code == 204
    assert response.content == b""

    created_id = client.get("/posts").json()[-1]["id"]
    post = client.get(f"/posts/{created_id}").json()["post"]
    assert post["content"] == "x"
    assert post["id"] == 3
    datetime.fromisoformat(post["created"])


def test_create_without_body(client, posts):
    response = client.post("/posts")

    assert response.status_code == 204
    assert posts.get(3) is not None


def test_create_keeps_extra_fields(client, posts):
    client.post("/posts", json={"content": "x", "author": "me"})

    assert posts.get(3)["author"] == "me"


def test_get_missing_post_is_empty_object(client):
    response = client.get("/posts/999")

    assert response.status_code == 200
    assert response.json() == {}


def test_get_non_numeric_post_id(client):
    response = client.get("/posts/abc")

    assert response.status_code == 200
    assert response.json() == {}


def test_update_post(client, posts):
    response = client.put("/posts/1", json={"content": "edited", "id": 77})

    assert response.status_code == 204
    assert posts.get(1)["content"] == "edited"
    assert posts.get(77) is None


@pytest.mark.parametrize(
    "body,expected",
    [
        ({"content": 5}, 5),
        ({"content": ["a", "b"]}, ["a", "b"]),
        ({"content": None}, None),
    ],
)
def test_create_accepts_any_field_types(client, posts, body, expected):
    response = client.post("/posts", json=body)

    assert response.status_code == 204
    assert posts.get(3)["content"] == expected


def test_create_with_non_object_body(client, posts):
    response = client.post("/posts", json=["a"])

    assert response.status_code == 204
    assert set(posts.get(3)) == {"id", "created"}


def test_update_accepts_any_field_types(client, posts):
    response = client.put("/posts/1", json={"content": 42})

    assert response.status_code == 204
    assert posts.get(1)["content"] == 42


def test_update_with_non_object_body_changes_nothing(client, posts):
    before = posts.get(1)

    response = client.put("/posts/1", json=["a"])

    assert response.status_code == 204
    assert posts.get(1) == before


@pytest.mark.parametrize(
    "raw,expected",
    [
        ("3", 3),
        (" 3 ", 3),
        ("+3", 3),
        ("3.0", 3),
        ("3e0", 3),
        ("0x3", 3),
        ("0b11", 3),
        ("-1", -1),
        ("1_0", None),
        ("3.5", None),
        ("abc", None),
        ("0x", None),
        ("-0x3", None),
        ("Infinity", None),
        ("nan", None),
        ("", None),
    ],
)
def test_parse_post_id(raw, expected):
    assert parse_post_id(raw) == expected


def test_post_id_forms_reach_same_post(client):
    assert client.get("/posts/2.0").json()["post"]["id"] == 2
    assert client.get("/posts/0x2").json()["post"]["id"] == 2
    assert client.get("/posts/1_0").json() == {}


def test_update_missing_post_is_soft_success(client, posts):
    before = posts.list()

    response = client.put("/posts/999", json={"content": "x"})

    assert response.status_code == 204
    assert posts.list() == before


def test_delete_post(client, posts):
    response = client.delete("/posts/1")

    assert response.status_code == 204
    assert posts.get(1) is None


def test_delete_missing_post_is_soft_success(client, posts):
    before = posts.list()

    response = client.delete("/posts/999")

    assert response.status_code == 204
    assert posts.list() == before


def test_ids_not_reused_over_http(client):
    client.post("/posts", json={"content": "a"})
    client.delete("/posts/3")
    client.post("/posts", json={"content": "b"})

    assert [post["id"] for post in client.get("/posts").json()] == [1, 2, 4]


def test_posts_are_public(client):
    assert client.get("/posts").status_code == 200
    assert client.post("/posts", json={"content": "x"}).status_code == 204


# Error shapes


def test_unknown_route(client):
    response = client.get("/nope")

    assert response.status_code == 404
    assert "message" in response.json()


def test_wrong_method(client):
    response = client.patch("/posts/1")

    assert response.status_code == 405
    assert "message" in response.json()


def test_unexpected_error_hides_details(app):
    router = APIRouter()

    @router.get("/boom")
    async def boom():
        raise RuntimeError("secret internals")

    app.include_router(router)
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/boom")

    assert response.status_code == 500
    assert response.json() == {"message": "Server internal error"}
    assert "secret" not in response.text


def test_cors_headers(client):
    response = client.get("/posts", headers={"Origin": "http://localhost:3000"})

    assert response.headers["access-control-allow-origin"] == "*"


def test_cors_preflight_on_private_route(client):
    response = client.options(
        "/private/me",
        headers={
            "Origin": "http://localhost:3000",
            "Access-Control-Request-Method": "GET",
            "Access-Control-Request-Headers": "authorization",
        },
    )

    assert response.status_code == 200


def test_each_app_has_isolated_stores():
    provider = StaticConfigProvider(auth_config=AuthConfig(bcrypt_rounds=4))
    first = TestClient(create_app(provider))
    second = TestClient(create_app(provider))

    first.post("/posts", json={"content": "only in first"})
    token = first.post("/auth", json={"login": "admin", "password": "admin"}).json()["token"]

    assert len(first.get("/posts").json()) == 3
    assert len(second.get("/posts").json()) == 2
    assert second.get("/private/me", headers=bearer(token)).status_code == 401
