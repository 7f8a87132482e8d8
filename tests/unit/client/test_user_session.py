# tests/unit/client/test_user_session.py
from __future__ import annotations

from skillsnap_api.client.session import UserSession


def _counting(session: UserSession) -> list[int]:
    calls: list[int] = []
    session.subscribe(lambda: calls.append(1))
    return calls


def test_new_session_is_anonymous() -> None:
    s = UserSession()
    assert s.user_id is None
    assert s.token is None
    assert not s.is_authenticated


def test_set_user_notifies_once() -> None:
    s = UserSession()
    calls = _counting(s)

    s.set_user("u-1", "Ada", "ada@example.com", token="tok")

    assert len(calls) == 1
    assert s.is_authenticated
    assert (s.user_id, s.user_name, s.email, s.token) == ("u-1", "Ada", "ada@example.com", "tok")


def test_property_setters_notify_only_on_change() -> None:
    s = UserSession()
    calls = _counting(s)

    s.user_name = "Ada"
    s.user_name = "Ada"
    s.email = "ada@example.com"

    assert len(calls) == 2


def test_empty_user_id_is_not_authenticated() -> None:
    s = UserSession()
    s.user_id = ""
    assert not s.is_authenticated


def test_clear_user_drops_identity_and_data() -> None:
    s = UserSession()
    s.set_user("u-1", "Ada", "ada@example.com", token="tok")
    s.set_data("theme", "dark")
    calls = _counting(s)

    s.clear_user()

    assert len(calls) == 1
    assert not s.is_authenticated
    assert s.token is None
    assert not s.has_data("theme")


def test_typed_session_data() -> None:
    s = UserSession()
    s.set_data("page", 3)

    assert s.get_data("page", int) == 3
    assert s.get_data("page", str) is None
    assert s.get_data("page", str, "n/a") == "n/a"
    assert s.get_data("missing", int, 0) == 0


def test_remove_data_notifies_only_when_present() -> None:
    s = UserSession()
    s.set_data("k", "v")
    calls = _counting(s)

    s.remove_data("missing")
    assert calls == []

    s.remove_data("k")
    assert len(calls) == 1
    assert not s.has_data("k")


def test_unsubscribe_stops_notifications() -> None:
    s = UserSession()
    calls: list[int] = []
    unsubscribe = s.subscribe(lambda: calls.append(1))

    s.set_data("a", 1)
    unsubscribe()
    unsubscribe()
    s.set_data("b", 2)

    assert len(calls) == 1
