import asyncio

import pytest

from odoosearch.rpc.session import Credentials, SessionManager
from odoosearch.rpc.transport import RpcTransport
from odoosearch.services.notify import NotificationCenter
from odoosearch.utils.exceptions import EmptyAuthError, RemoteError, TransportError


def _sessions(http_client, notifier=None) -> SessionManager:
    transport = RpcTransport("https://example.odoo.com", http_client=http_client)
    return SessionManager(transport, Credentials("acme", "api", "k"), notifier=notifier)


@pytest.mark.asyncio
async def test_login_is_cached(fake_odoo, http_client):
    sessions = _sessions(http_client)

    assert await sessions.get_session() == 7
    assert await sessions.get_session() == 7
    assert sessions.session == 7
    assert len(fake_odoo.login_calls) == 1
    assert fake_odoo.login_calls[0]["params"] == {
        "service": "common",
        "method": "login",
        "args": ["acme", "api", "k"],
    }


@pytest.mark.asyncio
async def test_invalidate_forces_fresh_login(fake_odoo, http_client):
    sessions = _sessions(http_client)
    await sessions.get_session()
    sessions.invalidate()
    assert sessions.session is None

    fake_odoo.login_response = {"result": 9}
    assert await sessions.get_session() == 9
    assert len(fake_odoo.login_calls) == 2


@pytest.mark.asyncio
async def test_concurrent_first_calls_share_one_login(fake_odoo, http_client):
    sessions = _sessions(http_client)
    results = await asyncio.gather(*(sessions.get_session() for _ in range(5)))
    assert results == [7] * 5
    assert len(fake_odoo.login_calls) == 1


@pytest.mark.asyncio
async def test_invalid_credentials_yield_no_session_and_notify(fake_odoo, http_client):
    fake_odoo.login_response = {"error": {"message": "Invalid credentials"}}
    notifier = NotificationCenter()
    sessions = _sessions(http_client, notifier)

    assert await sessions.get_session() is None
    assert sessions.session is None
    assert [(n.title, n.message) for n in notifier.failures] == [("Authentication Error", "Invalid credentials")]

    with pytest.raises(RemoteError):
        await sessions.authenticate()


@pytest.mark.asyncio
@pytest.mark.parametrize("value", [None, False, 0, "7"])
async def test_login_without_usable_uid_is_empty_auth(fake_odoo, http_client, value):
    fake_odoo.login_response = {"result": value}
    sessions = _sessions(http_client)

    with pytest.raises(EmptyAuthError):
        await sessions.authenticate()
    assert await sessions.get_session() is None


@pytest.mark.asyncio
async def test_transport_failure_during_login_is_not_cached(fake_odoo, http_client):
    fake_odoo.status_code = 502
    sessions = _sessions(http_client)

    with pytest.raises(TransportError):
        await sessions.authenticate()
    assert sessions.session is None

    fake_odoo.status_code = 200
    assert await sessions.get_session() == 7


def test_credentials_repr_hides_secret():
    assert "k'" not in repr(Credentials("acme", "api", "k"))
    assert "***" in repr(Credentials("acme", "api", "k"))
