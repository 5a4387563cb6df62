import os

# Settings are read once per process, so the environment is fixed before the app is imported
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET"] = "test-secret"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ADMIN_EMAIL"] = "admin@example.com"
os.environ["ADMIN_PASSWORD"] = "admin-pass"
os.environ["ADMIN_NAME"] = "Admin"
os.environ["DB_CONNECT_RETRY_DELAY"] = "0"

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.pool import StaticPool
from app.bootstrap import seed_admin
from app.config import get_settings
from app.main import app
from app.db.models import Base
from app.db.database import get_db

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

FEEDBACK_PAYLOAD = {
    "whatDoYouThink": "Kind and funny",
    "kindOfPerson": "Loyal",
    "positiveThings": "Always listens",
    "negativeThings": "Late to everything",
    "nature": "Calm",
    "adviceForMe": "Keep going",
    "memoryWithMe": "The road trip",
    "rateOurFriendship": 9,
    "additionalMessage": "",
}


@pytest.fixture
def settings():
    return get_settings()


@pytest.fixture(scope="function")
async def engine():
    """Fresh in-memory database for each test."""
    test_engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with test_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield test_engine

    await test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture(scope="function")
async def client(session_factory):
    """Create a test client with overridden dependencies."""

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac

    app.dependency_overrides.clear()


async def register(client: AsyncClient, name: str, email: str, password: str = "secret1") -> dict:
    """Register an account and return the response body."""
    response = await client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()


def bearer(token: str) -> dict:
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
async def user_headers(client):
    body = await register(client, "Alice", "alice@example.com")
    return bearer(body["token"])


@pytest.fixture
async def other_user_headers(client):
    body = await register(client, "Bob", "bob@example.com")
    return bearer(body["token"])


@pytest.fixture
async def admin_headers(client, session_factory, settings):
    await seed_admin(session_factory, settings)
    response = await client.post(
        "/api/auth/login",
        json={"email": settings.admin_email, "password": settings.admin_password},
    )
    assert response.status_code == 200, response.text
    return bearer(response.json()["token"])
