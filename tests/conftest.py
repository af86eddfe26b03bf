"""
Shared test fixtures and configuration for pytest.
"""

import os
import pytest
from datetime import date
from typing import AsyncGenerator

# Set test environment before importing app modules
os.environ["ENVIRONMENT"] = "test"
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["JWT_SECRET_KEY"] = "test-secret-key-for-testing-only-0123456789"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from jobtracker.main import app
from jobtracker.config import settings
from jobtracker.core.auth import TokenService, get_token_service, hash_password
from jobtracker.core.identity import AuthenticatedUser, to_authenticated_user
from jobtracker.db.database import Base, get_db_session
from jobtracker.db.models import ApplicationModel, ApplicationStatus, UserModel
from jobtracker.services.file_storage import FileStorageService, get_file_storage


# Test database URL (in-memory SQLite for unit tests)
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"

ALLOWED_TYPES = [
    "application/pdf",
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "image/png",
    "text/plain",
]


@pytest.fixture
async def async_engine():
    """Create async test database engine."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)

    await engine.dispose()


@pytest.fixture
async def db_session(async_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session."""
    async_session_maker = async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_maker() as session:
        yield session
        await session.rollback()


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret=settings.jwt_secret_key, expiration_ms=86_400_000)


@pytest.fixture
def file_storage(tmp_path) -> FileStorageService:
    """File storage rooted in a per-test temporary directory."""
    return FileStorageService(
        upload_dir=str(tmp_path / "uploads"),
        max_file_size=1024,
        allowed_types=ALLOWED_TYPES,
    )


@pytest.fixture
async def test_client(db_session, token_service, file_storage) -> AsyncGenerator[AsyncClient, None]:
    """Create an async test client with database and storage overrides."""

    async def override_get_db_session():
        yield db_session

    app.dependency_overrides[get_db_session] = override_get_db_session
    app.dependency_overrides[get_token_service] = lambda: token_service
    app.dependency_overrides[get_file_storage] = lambda: file_storage

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test"
    ) as client:
        yield client

    app.dependency_overrides.clear()


# ============ User Fixtures ============

async def create_user(session: AsyncSession, email: str, full_name: str, password: str) -> UserModel:
    user = UserModel(
        email=email,
        full_name=full_name,
        password_hash=hash_password(password),
        role="USER",
    )
    session.add(user)
    await session.flush()
    return user


@pytest.fixture
async def alice(db_session) -> UserModel:
    """First test user."""
    return await create_user(db_session, "alice@example.com", "Alice Adams", "alicepass")


@pytest.fixture
async def bob(db_session) -> UserModel:
    """Second test user, used to probe cross-user access."""
    return await create_user(db_session, "bob@example.com", "Bob Brown", "bobpass")


@pytest.fixture
def alice_identity(alice) -> AuthenticatedUser:
    return to_authenticated_user(alice)


@pytest.fixture
def bob_identity(bob) -> AuthenticatedUser:
    return to_authenticated_user(bob)


@pytest.fixture
def alice_headers(alice, token_service) -> dict:
    """Authorization headers with a token for alice."""
    return {"Authorization": f"Bearer {token_service.issue(alice.email)}"}


@pytest.fixture
def bob_headers(bob, token_service) -> dict:
    """Authorization headers with a token for bob."""
    return {"Authorization": f"Bearer {token_service.issue(bob.email)}"}


# ============ Application Fixtures ============

@pytest.fixture
async def alice_application(db_session, alice) -> ApplicationModel:
    """An application owned by alice."""
    application = ApplicationModel(
        user_id=alice.id,
        company_name="Acme Corp",
        position_title="Backend Engineer",
        application_date=date(2024, 3, 1),
        status=ApplicationStatus.APPLIED.value,
        notes="Referred by a friend",
    )
    db_session.add(application)
    await db_session.flush()
    return application
