# test/test_auth_store.py
import json

import pytest
from sqlalchemy import select

from workshop_sdk.auth_store import USER_ROLES_KEY, AuthEntry, AuthState
from workshop_sdk.client import create_client
from workshop_sdk.settings import Settings

SETTINGS = Settings(api_base="http://test/api", auth_db_url="unused")


async def _store_raw(store, key, value):
    async with store.async_session() as session:
        session.add(AuthEntry(key=key, value=value))
        await session.commit()


@pytest.mark.asyncio
async def test_empty_store(auth_store):
    assert await auth_store.load_auth() == AuthState(user_id="", user_roles=[])


@pytest.mark.asyncio
async def test_set_and_load(auth_store):
    await auth_store.set_auth("u1", ["USER", "POST_MODERATOR"])
    assert await auth_store.load_auth() == AuthState("u1", ["USER", "POST_MODERATOR"])

    # Overwrites rather than duplicating rows
    await auth_store.set_auth("u2", ["USER"])
    assert await auth_store.load_auth() == AuthState("u2", ["USER"])

    async with auth_store.async_session() as session:
        rows = (await session.execute(select(AuthEntry))).scalars().all()
    assert len(rows) == 2
    assert json.loads(next(r.value for r in rows if r.key == USER_ROLES_KEY)) == ["USER"]


@pytest.mark.asyncio
async def test_logout(auth_store):
    await auth_store.set_auth("u1", ["USER"])
    await auth_store.logout()
    assert await auth_store.load_auth() == AuthState("", [])


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", ["not json", '{"role": "USER"}', "[1, 2]", '"USER"'])
async def test_malformed_roles_reset_to_empty(auth_store, raw):
    await _store_raw(auth_store, "userId", "u1")
    await _store_raw(auth_store, USER_ROLES_KEY, raw)

    assert await auth_store.load_auth() == AuthState("u1", [])


# --- startup ---


@pytest.mark.asyncio
async def test_create_client_applies_stored_identity(auth_store, transport, stub):
    await auth_store.set_auth("u1", ["a", "b"])
    client = await create_client(SETTINGS, store=auth_store, transport=transport)

    assert client.config.base_url == "http://test/api"
    assert client.config.debug_user_id == "u1"
    assert client.config.debug_user_roles == ["a", "b"]

    stub.respond(200, "[]")
    await client.posts.get_posts()
    assert stub.last.headers["x-debug-user-id"] == "u1"
    assert stub.last.headers["x-debug-user-roles"] == "a,b"


@pytest.mark.asyncio
async def test_create_client_without_identity(auth_store, transport, stub):
    client = await create_client(SETTINGS, store=auth_store, transport=transport)

    assert client.config.debug_user_id == ""
    stub.respond(200, "[]")
    await client.posts.get_posts()
    assert "x-debug-user-id" not in stub.last.headers


@pytest.mark.asyncio
async def test_create_client_with_malformed_roles(auth_store):
    await _store_raw(auth_store, "userId", "u1")
    await _store_raw(auth_store, USER_ROLES_KEY, "[broken")

    client = await create_client(SETTINGS, store=auth_store)
    assert client.config.debug_user_id == "u1"
    assert client.config.debug_user_roles == []


@pytest.mark.asyncio
async def test_create_client_opens_its_own_store(tmp_path):
    settings = Settings(
        api_base="http://test/api",
        auth_db_url=f"sqlite+aiosqlite:///{tmp_path / 'auth.db'}",
    )
    client = await create_client(settings)
    assert client.config.debug_user_id == ""
    assert (tmp_path / "auth.db").exists()
