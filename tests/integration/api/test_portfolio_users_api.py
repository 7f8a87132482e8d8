# tests/integration/api/test_portfolio_users_api.py
from __future__ import annotations

from fastapi.testclient import TestClient


def test_create_and_read_portfolio_user(client: TestClient) -> None:
    r = client.post("/api/portfolio-users", json={"name": "Grace Hopper", "bio": "COBOL"})
    assert r.status_code == 201, r.text
    uid = r.json()["data"]["id"]
    assert r.headers["Location"] == f"/api/portfolio-users/{uid}"

    user = client.get(f"/api/portfolio-users/{uid}").json()["data"]
    assert user["name"] == "Grace Hopper"
    assert user["projects"] == []
    assert user["skills"] == []

    names = [u["name"] for u in client.get("/api/portfolio-users").json()["data"]]
    assert names == ["Grace Hopper"]


def test_user_embeds_children(
    client: TestClient, auth_headers: dict[str, str], portfolio_user_id: int
) -> None:
    client.post(
        "/api/projects",
        json={"title": "Compiler", "portfolio_user_id": portfolio_user_id},
        headers=auth_headers,
    )
    client.post(
        "/api/skills",
        json={"name": "Python", "portfolio_user_id": portfolio_user_id},
        headers=auth_headers,
    )

    user = client.get(f"/api/portfolio-users/{portfolio_user_id}").json()["data"]

    assert [p["title"] for p in user["projects"]] == ["Compiler"]
    assert [s["name"] for s in user["skills"]] == ["Python"]


def test_rename_owner_refreshes_cached_listings(
    client: TestClient, auth_headers: dict[str, str], portfolio_user_id: int
) -> None:
    client.post(
        "/api/projects",
        json={"title": "Compiler", "portfolio_user_id": portfolio_user_id},
        headers=auth_headers,
    )
    assert client.get("/api/projects").json()["data"][0]["portfolio_user"]["name"] == "Ada Lovelace"

    r = client.put(
        f"/api/portfolio-users/{portfolio_user_id}",
        json={"name": "Augusta Ada King"},
    )
    assert r.status_code == 204

    owner = client.get("/api/projects").json()["data"][0]["portfolio_user"]
    assert owner["name"] == "Augusta Ada King"


def test_delete_owner_cascades(
    client: TestClient, auth_headers: dict[str, str], portfolio_user_id: int
) -> None:
    client.post(
        "/api/projects",
        json={"title": "Compiler", "portfolio_user_id": portfolio_user_id},
        headers=auth_headers,
    )
    client.post(
        "/api/skills",
        json={"name": "Python", "portfolio_user_id": portfolio_user_id},
        headers=auth_headers,
    )
    assert len(client.get("/api/projects").json()["data"]) == 1
    assert len(client.get("/api/skills").json()["data"]) == 1

    r = client.delete(f"/api/portfolio-users/{portfolio_user_id}")
    assert r.status_code == 204

    assert client.get("/api/projects").json()["data"] == []
    assert client.get("/api/skills").json()["data"] == []
    r = client.get(f"/api/portfolio-users/{portfolio_user_id}")
    assert r.status_code == 404
    assert r.json()["error"]["code"] == "PORTFOLIO_USER_NOT_FOUND"


def test_portfolio_user_errors(client: TestClient, portfolio_user_id: int) -> None:
    r = client.put(
        f"/api/portfolio-users/{portfolio_user_id}",
        json={"id": portfolio_user_id + 1, "name": "X"},
    )
    assert r.status_code == 400
    assert r.json()["error"]["code"] == "ID_MISMATCH"

    r = client.put("/api/portfolio-users/999", json={"name": "X"})
    assert r.status_code == 404

    r = client.delete("/api/portfolio-users/999")
    assert r.status_code == 404

    r = client.post("/api/portfolio-users", json={"name": ""})
    assert r.status_code == 422
