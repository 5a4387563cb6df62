import pytest
from unittest.mock import AsyncMock
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from app.accounts.models import Account, Role
from app.accounts.repository import AccountRepository
from app.auth.passwords import verify_password
from app.bootstrap import bootstrap, seed_admin
from app.db import database


async def count_admins(session_factory) -> int:
    async with session_factory() as session:
        result = await session.execute(
            select(func.count()).select_from(Account).where(Account.role == Role.ADMIN.value)
        )
        return result.scalar()


@pytest.mark.asyncio
async def test_seed_admin_creates_account(session_factory, settings):
    assert await seed_admin(session_factory, settings) is True

    async with session_factory() as session:
        result = await session.execute(select(Account).where(Account.email == settings.admin_email))
        admin = result.scalar_one()

    assert admin.role == "admin"
    assert admin.password_hash != settings.admin_password
    assert verify_password(settings.admin_password, admin.password_hash)


@pytest.mark.asyncio
async def test_seed_admin_is_idempotent(session_factory, settings):
    assert await seed_admin(session_factory, settings) is True
    assert await seed_admin(session_factory, settings) is False
    assert await count_admins(session_factory) == 1


@pytest.mark.asyncio
async def test_restarting_twice_keeps_one_admin(engine, session_factory, settings):
    await bootstrap(engine, session_factory, settings)
    await bootstrap(engine, session_factory, settings)
    assert await count_admins(session_factory) == 1


class FlakyConnection:
    def __init__(self, failures: int):
        self.failures = failures
        self.attempts = 0

    def connect(self):
        self.attempts += 1
        if self.attempts <= self.failures:
            raise OperationalError("SELECT 1", {}, Exception("connection refused"))
        conn = AsyncMock()
        ctx = AsyncMock()
        ctx.__aenter__.return_value = conn
        return ctx


@pytest.mark.asyncio
async def test_connect_retries_once(monkeypatch):
    sleep = AsyncMock()
    monkeypatch.setattr(database.asyncio, "sleep", sleep)
    engine = FlakyConnection(failures=1)

    await database.connect_with_retry(engine, retry_delay=3)

    assert engine.attempts == 2
    sleep.assert_awaited_once_with(3)


@pytest.mark.asyncio
async def test_connect_gives_up_after_second_failure(monkeypatch):
    monkeypatch.setattr(database.asyncio, "sleep", AsyncMock())
    engine = FlakyConnection(failures=2)

    with pytest.raises(OperationalError):
        await database.connect_with_retry(engine, retry_delay=0)
    assert engine.attempts == 2


class RefusedConnection:
    """Raises the raw OSError asyncpg produces when nothing listens on the port."""

    def __init__(self, failures: int):
        self.failures = failures
        self.attempts = 0

    def connect(self):
        self.attempts += 1
        if self.attempts <= self.failures:
            raise ConnectionRefusedError(111, "Connect call failed ('127.0.0.1', 5432)")
        conn = AsyncMock()
        ctx = AsyncMock()
        ctx.__aenter__.return_value = conn
        return ctx


@pytest.mark.asyncio
async def test_connect_retries_after_refused_connection(monkeypatch):
    sleep = AsyncMock()
    monkeypatch.setattr(database.asyncio, "sleep", sleep)
    engine = RefusedConnection(failures=1)

    await database.connect_with_retry(engine, retry_delay=2)

    assert engine.attempts == 2
    sleep.assert_awaited_once_with(2)


@pytest.mark.asyncio
async def test_connect_refused_twice_propagates(monkeypatch):
    monkeypatch.setattr(database.asyncio, "sleep", AsyncMock())
    engine = RefusedConnection(failures=2)

    with pytest.raises(ConnectionRefusedError):
        await database.connect_with_retry(engine, retry_delay=0)
    assert engine.attempts == 2


@pytest.mark.asyncio
async def test_seed_admin_tolerates_concurrent_seed(session_factory, settings, monkeypatch):
    """A second process passing the lookup before the first insert lands does not fail."""
    assert await seed_admin(session_factory, settings) is True

    # the lookup misses as if the other process had not committed yet
    monkeypatch.setattr(AccountRepository, "get_by_email", AsyncMock(return_value=None))

    assert await seed_admin(session_factory, settings) is False

    monkeypatch.undo()
    assert await count_admins(session_factory) == 1
