# tests/integration/api/test_projects_api.py
from __future__ import annotations

from fastapi.testclient import TestClient


def _project(owner: int, **overrides: object) -> dict[str, object]:
    body: dict[str, object] = {
        "title": "X",
        "description": "Notes on the Analytical Engine",
        "image_url": "",
        "portfolio_user_id": owner,
    }
    body.update(overrides)
    return body


def test_write_is_visible_in_next_listing(
    client: TestClient, auth_headers: dict[str, str], portfolio_user_id: int
) -> None:
    r = client.get("/api/projects")
    assert r.status_code == 200
    assert r.json() == {"data": []}

    r = client.post("/api/projects", json=_project(portfolio_user_id), headers=auth_headers)
    assert r.status_code == 201, r.text
    created = r.json()["data"]
    assert r.headers["Location"] == f"/api/projects/{created['id']}"

    r = client.get("/api/projects")
    items = r.json()["data"]
    assert [p["title"] for p in items] == ["X"]
    assert items[0]["portfolio_user"]["id"] == portfolio_user_id
    assert items[0]["portfolio_user"]["name"] == "Ada Lovelace"


def test_get_update_delete_round(
    client: TestClient, auth_headers: dict[str, str], portfolio_user_id: int
) -> None:
    pid = client.post(
        "/api/projects", json=_project(portfolio_user_id), headers=auth_headers
    ).json()["data"]["id"]

    r = client.get(f"/api/projects/{pid}")
    assert r.status_code == 200
    assert r.headers["ETag"].startswith('"')

    r = client.put(
        f"/api/projects/{pid}",
        json=_project(portfolio_user_id, id=pid, title="Y"),
        headers=auth_headers,
    )
    assert r.status_code == 204
    assert r.content == b""
    assert client.get("/api/projects").json()["data"][0]["title"] == "Y"

    r = client.delete(f"/api/projects/{pid}", headers=auth_headers)
    assert r.status_code == 204
    assert client.get("/api/projects").json()["data"] == []
    assert client.get(f"/api/projects/{pid}").status_code == 404


def test_update_without_body_id_uses_path_id(
    client: TestClient, auth_headers: dict[str, str], portfolio_user_id: int
) -> None:
    pid = client.post(
        "/api/projects", json=_project(portfolio_user_id), headers=auth_headers
    ).json()["data"]["id"]

    r = client.put(
        f"/api/projects/{pid}", json=_project(portfolio_user_id, title="Z"), headers=auth_headers
    )

    assert r.status_code == 204
    assert client.get(f"/api/projects/{pid}").json()["data"]["title"] == "Z"


def test_missing_project_is_404_envelope(client: TestClient) -> None:
    r = client.get("/api/projects/999", headers={"X-Request-ID": "trace-404"})

    assert r.status_code == 404
    err = r.json()["error"]
    assert err["code"] == "PROJECT_NOT_FOUND"
    assert err["http_status"] == 404
    assert err["trace_id"] == "trace-404"
    assert r.headers["X-Request-ID"] == "trace-404"


def test_id_mismatch_is_rejected(
    client: TestClient, auth_headers: dict[str, str], portfolio_user_id: int
) -> None:
    pid = client.post(
        "/api/projects", json=_project(portfolio_user_id), headers=auth_headers
    ).json()["data"]["id"]

    r = client.put(
        f"/api/projects/{pid}",
        json=_project(portfolio_user_id, id=pid + 1),
        headers=auth_headers,
    )

    assert r.status_code == 400
    assert r.json()["error"]["code"] == "ID_MISMATCH"


def test_unknown_owner_is_rejected(client: TestClient, auth_headers: dict[str, str]) -> None:
    r = client.post("/api/projects", json=_project(424242), headers=auth_headers)

    assert r.status_code == 400
    assert r.json()["error"]["code"] == "INVALID_PORTFOLIO_USER"
    assert client.get("/api/projects").json()["data"] == []


def test_writes_require_bearer_token(client: TestClient, portfolio_user_id: int) -> None:
    r = client.post("/api/projects", json=_project(portfolio_user_id))
    assert r.status_code == 401
    assert r.json()["error"]["message"] == "Missing bearer token"

    r = client.delete("/api/projects/1", headers={"Authorization": "Bearer not-a-jwt"})
    assert r.status_code == 401
    assert r.json()["error"]["message"] == "Invalid token"


def test_validation_errors_use_envelope(client: TestClient, auth_headers: dict[str, str]) -> None:
    r = client.post("/api/projects", json={"title": ""}, headers=auth_headers)

    assert r.status_code == 422
    assert r.json()["error"]["code"] == "VALIDATION_ERROR"

    r = client.get("/api/projects/0")
    assert r.status_code == 422
