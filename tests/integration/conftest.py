from datetime import datetime
from typing import Optional

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.password_vault import SharePasswordVault
from src.depends import get_unit_of_work
from src.domain.entities import File, Project, SharePassword

ADMIN_PASSWORD = "correct horse battery staple"
BYPASS_TOKEN = "break-glass-token"


class IntegrationConfig(ApplicationConfig):
    ADMIN_PASSWORD = ADMIN_PASSWORD
    EMERGENCY_BYPASS_TOKEN = BYPASS_TOKEN
    ALLOWED_IPS = []
    RATE_LIMIT_MAX_ATTEMPTS = 5
    RATE_LIMIT_WINDOW_MINUTES = 15
    SESSION_COOKIE_SECURE = False
    CORS_ORIGINS = []
    # The test transport connects from 127.0.0.1, standing in for a reverse proxy
    TRUSTED_PROXIES = ["127.0.0.1"]


@pytest.fixture
def config():
    return IntegrationConfig


@pytest_asyncio.fixture
async def engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session, config):
    from httpx import ASGITransport
    from src.api.app import create_app

    app = create_app(config)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_headers(client, config):
    """Cookie header of a freshly logged-in admin"""
    response = await client.post("/auth/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    token = response.cookies.get(config.SESSION_COOKIE_NAME)
    return {"Cookie": f"{config.SESSION_COOKIE_NAME}={token}"}


@pytest_asyncio.fixture
async def seed(session_factory):
    """Insert projects and files directly, bypassing the API"""
    vault = SharePasswordVault()

    class Seeder:
        async def project(self, name: str = "Launch") -> Project:
            async with session_factory() as session:
                project = Project(name=name, slug=name.lower())
                session.add(project)
                await session.commit()
                return project

        async def file(
            self,
            project_id=None,
            expires_at: Optional[datetime] = None,
            password: Optional[str] = None,
            blob_url: str = "https://blob.example.com/builds/app.zip",
        ) -> File:
            async with session_factory() as session:
                file = File(
                    title="App build",
                    original_filename="app.zip",
                    blob_url=blob_url,
                    project_id=project_id,
                    expires_at=expires_at,
                )
                session.add(file)
                await session.flush()
                if password is not None:
                    hashed = vault.hash(password)
                    session.add(
                        SharePassword(file_id=file.id, hash=hashed.hash, salt=hashed.salt)
                    )
                await session.commit()
                return file

    return Seeder()
