# tests/unit/client/test_skillsnap_http_client.py
from __future__ import annotations

import json

import httpx
import pytest
import respx
from httpx import Response

from skillsnap_api.client import SkillSnapHTTPClient, SkillSnapHTTPError, UserSession

BASE = "http://api.test"


def _client(session: UserSession | None = None) -> SkillSnapHTTPClient:
    return SkillSnapHTTPClient(client=httpx.AsyncClient(base_url=BASE), session=session)


@pytest.mark.asyncio
@respx.mock
async def test_list_projects_unwraps_data_envelope() -> None:
    route = respx.get(f"{BASE}/api/projects").mock(
        return_value=Response(200, json={"data": [{"id": 1, "title": "X"}]})
    )

    async with _client() as api:
        projects = await api.list_projects()

    assert route.called
    assert projects == [{"id": 1, "title": "X"}]
    assert "authorization" not in route.calls.last.request.headers


@pytest.mark.asyncio
@respx.mock
async def test_login_stores_token_and_authorizes_later_calls() -> None:
    respx.post(f"{BASE}/api/auth/login").mock(
        return_value=Response(
            200,
            json={
                "data": {
                    "token": "tok-1",
                    "email": "ada@example.com",
                    "full_name": "Ada",
                    "user_id": "u-1",
                }
            },
        )
    )
    create = respx.post(f"{BASE}/api/projects").mock(
        return_value=Response(201, json={"data": {"id": 7, "title": "X"}})
    )
    session = UserSession()

    async with _client(session) as api:
        await api.login("ada@example.com", "Passw0rd")
        created = await api.create_project({"title": "X", "portfolio_user_id": 1})

    assert session.is_authenticated
    assert session.user_id == "u-1"
    assert session.email == "ada@example.com"
    assert session.token == "tok-1"
    assert created["id"] == 7
    sent = create.calls.last.request
    assert sent.headers["authorization"] == "Bearer tok-1"
    assert json.loads(sent.content) == {"title": "X", "portfolio_user_id": 1}


@pytest.mark.asyncio
@respx.mock
async def test_logout_drops_authorization_header() -> None:
    route = respx.get(f"{BASE}/api/skills").mock(return_value=Response(200, json={"data": []}))
    session = UserSession()
    session.set_user("u-1", "Ada", "ada@example.com", token="tok-1")

    async with _client(session) as api:
        api.logout()
        assert await api.list_skills() == []

    assert not session.is_authenticated
    assert "authorization" not in route.calls.last.request.headers


@pytest.mark.asyncio
@respx.mock
async def test_error_envelope_is_mapped() -> None:
    respx.get(f"{BASE}/api/projects/99").mock(
        return_value=Response(
            404,
            json={
                "error": {
                    "code": "PROJECT_NOT_FOUND",
                    "http_status": 404,
                    "message": "Project not found",
                    "details": {"project_id": 99},
                    "trace_id": "req-1",
                }
            },
        )
    )

    async with _client() as api:
        with pytest.raises(SkillSnapHTTPError) as excinfo:
            await api.get_project(99)

    err = excinfo.value
    assert err.status_code == 404
    assert err.error_code == "PROJECT_NOT_FOUND"
    assert err.trace_id == "req-1"
    assert str(err) == "404 [PROJECT_NOT_FOUND] Project not found"


@pytest.mark.asyncio
@respx.mock
async def test_non_json_error_falls_back_to_reason_and_header() -> None:
    respx.get(f"{BASE}/api/skills").mock(
        return_value=Response(502, content=b"bad gateway", headers={"X-Request-ID": "req-2"})
    )

    async with _client() as api:
        with pytest.raises(SkillSnapHTTPError) as excinfo:
            await api.list_skills()

    assert excinfo.value.status_code == 502
    assert excinfo.value.error_code is None
    assert excinfo.value.trace_id == "req-2"
    assert excinfo.value.message == "Bad Gateway"


@pytest.mark.asyncio
@respx.mock
async def test_success_with_non_json_body_is_wrapped() -> None:
    respx.get(f"{BASE}/api/skills").mock(
        return_value=Response(200, content=b"<html>oops</html>", headers={"X-Request-ID": "req-3"})
    )

    async with _client() as api:
        with pytest.raises(SkillSnapHTTPError) as excinfo:
            await api.list_skills()

    assert excinfo.value.status_code == 200
    assert excinfo.value.trace_id == "req-3"
    assert excinfo.value.message == "Malformed response from SkillSnap API"


@pytest.mark.asyncio
@respx.mock
async def test_success_with_json_array_is_wrapped() -> None:
    respx.get(f"{BASE}/api/projects").mock(return_value=Response(200, json=[{"id": 1}]))

    async with _client() as api:
        with pytest.raises(SkillSnapHTTPError) as excinfo:
            await api.list_projects()

    assert excinfo.value.status_code == 200
    assert excinfo.value.error_code is None


@pytest.mark.asyncio
@respx.mock
async def test_error_with_json_array_body_falls_back_to_reason() -> None:
    respx.get(f"{BASE}/api/skills").mock(return_value=Response(500, json=["boom"]))

    async with _client() as api:
        with pytest.raises(SkillSnapHTTPError) as excinfo:
            await api.list_skills()

    assert excinfo.value.status_code == 500
    assert excinfo.value.error_code is None
    assert excinfo.value.message == "Internal Server Error"


@pytest.mark.asyncio
@respx.mock
async def test_transport_error_is_wrapped() -> None:
    respx.get(f"{BASE}/api/portfolio-users").mock(side_effect=httpx.ConnectError("refused"))

    async with _client() as api:
        with pytest.raises(SkillSnapHTTPError) as excinfo:
            await api.list_portfolio_users()

    assert excinfo.value.status_code is None
    assert excinfo.value.message.startswith("Cannot reach SkillSnap API")
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
@respx.mock
async def test_no_content_returns_none() -> None:
    route = respx.delete(f"{BASE}/api/skills/3").mock(return_value=Response(204))

    async with _client() as api:
        assert await api.delete_skill(3) is None

    assert route.called


@pytest.mark.asyncio
@respx.mock
async def test_first_portfolio_user() -> None:
    respx.get(f"{BASE}/api/portfolio-users").mock(
        side_effect=[
            Response(200, json={"data": []}),
            Response(200, json={"data": [{"id": 2, "name": "B"}, {"id": 3, "name": "C"}]}),
        ]
    )

    async with _client() as api:
        assert await api.get_first_portfolio_user() is None
        first = await api.get_first_portfolio_user()

    assert first == {"id": 2, "name": "B"}


@pytest.mark.asyncio
async def test_supplied_transport_is_not_closed() -> None:
    transport = httpx.AsyncClient(base_url=BASE)
    async with SkillSnapHTTPClient(client=transport):
        pass
    assert not transport.is_closed
    await transport.aclose()


@pytest.mark.asyncio
async def test_base_url_defaults_to_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    from skillsnap_api.config.settings import get_settings

    monkeypatch.setenv("API_BASE_URL", "http://skillsnap.example")
    get_settings.cache_clear()

    api = SkillSnapHTTPClient()
    try:
        assert api._client.base_url.host == "skillsnap.example"
    finally:
        await api.aclose()
