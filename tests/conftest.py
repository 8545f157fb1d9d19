"""Pytest configuration and fixtures."""

import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("SECRET_KEY", "test-secret-key-for-signing-caller-tokens")
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import uuid
from collections.abc import AsyncGenerator, Callable, Generator
from datetime import UTC, datetime

import jwt
import pytest
from dependency_injector import providers
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from lifehacking import models
from lifehacking.config import get_settings
from lifehacking.core import container
from lifehacking.database import Base, create_engine_for, get_db
from lifehacking.main import app

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Create a fresh in-memory database for each test."""
    engine = create_engine_for(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
def test_session_factory(test_engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(test_engine, expire_on_commit=False, autoflush=False)


@pytest.fixture
async def db_session(
    test_session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncSession, None]:
    async with test_session_factory() as session:
        yield session


@pytest.fixture
async def client(
    test_session_factory: async_sessionmaker[AsyncSession],
) -> AsyncGenerator[AsyncClient, None]:
    """HTTP client against the app with the database dependency overridden."""

    async def override_get_db() -> AsyncGenerator[AsyncSession, None]:
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as test_client:
        yield test_client

    app.dependency_overrides.clear()


class RecordingSecurityEventNotifier:
    """Keeps every security event in memory."""

    def __init__(self) -> None:
        self.events: list[dict[str, object]] = []

    def notify(self, event, subject_id, outcome, correlation_id=None, **properties) -> None:
        self.events.append(
            {
                "event": event,
                "subject_id": subject_id,
                "outcome": outcome,
                "correlation_id": correlation_id,
                **properties,
            }
        )

    def names(self) -> list[str]:
        return [str(event["event"]) for event in self.events]


@pytest.fixture
def security_events() -> Generator[RecordingSecurityEventNotifier, None, None]:
    """Replace the audit notifier for the duration of a test."""
    recorder = RecordingSecurityEventNotifier()
    with container.security_event_notifier.override(providers.Object(recorder)):
        yield recorder


@pytest.fixture
def make_token() -> Callable[..., str]:
    """Mint a bearer token the way the identity provider would."""

    def _make_token(external_auth_id: str, role: str | None = None) -> str:
        settings = get_settings()
        claims: dict[str, object] = {"sub": external_auth_id, "iat": datetime.now(UTC)}
        if role is not None:
            claims["role"] = role
        return jwt.encode(claims, settings.SECRET_KEY, algorithm=settings.TOKEN_ALGORITHM)

    return _make_token


@pytest.fixture
def auth_headers(make_token: Callable[..., str]) -> Callable[..., dict[str, str]]:
    def _auth_headers(external_auth_id: str, role: str | None = None) -> dict[str, str]:
        return {"Authorization": f"Bearer {make_token(external_auth_id, role)}"}

    return _auth_headers


async def _create_user(
    db_session: AsyncSession, external_auth_id: str, email: str, role: str = "User"
) -> models.User:
    user = models.User(
        id=uuid.uuid4(),
        external_auth_id=external_auth_id,
        email=email,
        name=external_auth_id.title(),
        role=role,
    )
    db_session.add(user)
    await db_session.commit()
    await db_session.refresh(user)
    return user


@pytest.fixture
async def test_user(db_session: AsyncSession) -> models.User:
    return await _create_user(db_session, "alice", "alice@example.com")


@pytest.fixture
async def other_user(db_session: AsyncSession) -> models.User:
    return await _create_user(db_session, "bob", "bob@example.com")


@pytest.fixture
async def admin_user(db_session: AsyncSession) -> models.User:
    return await _create_user(db_session, "root", "root@example.com", role="Admin")


@pytest.fixture
async def test_category(db_session: AsyncSession) -> models.Category:
    category = models.Category(id=uuid.uuid4(), name="Kitchen")
    db_session.add(category)
    await db_session.commit()
    return category


@pytest.fixture
async def test_tips(db_session: AsyncSession, test_category: models.Category) -> list[models.Tip]:
    """Three tips in the same category, created one minute apart."""
    tips = [
        models.Tip(
            id=uuid.uuid4(),
            title=title,
            description=description,
            category_id=test_category.id,
            created_at=datetime(2025, 1, 1, 12, minute, tzinfo=UTC),
        )
        for minute, (title, description) in enumerate(
            [
                ("Peel garlic fast", "Shake the cloves in a closed jar."),
                ("Ripen avocados", "Store them in a paper bag with a banana."),
                ("Keep herbs fresh", "Wrap them in a damp paper towel."),
            ]
        )
    ]
    db_session.add_all(tips)
    await db_session.commit()
    return tips
