from contextlib import asynccontextmanager

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from tests.fixtures.json_loader import TestDataLoader
from src.depends import get_unit_of_work, get_unit_of_work_factory
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork

TEST_DB_URI = "sqlite+aiosqlite:///./test.db"


class DevConfig(ApplicationConfig):
    DB_URI = TEST_DB_URI
    JWT_SECRET = "test-signing-secret"
    ENVIRONMENT = "development"
    RESET_TOKEN_DEV_MODE = True
    CORS_ORIGINS = ["http://localhost:5173"]
    ENABLE_LOGGING_MIDDLEWARE = True
    CREATE_TABLES_ON_STARTUP = False
    BCRYPT_ROUNDS = 10


class ProductionConfig(DevConfig):
    ENVIRONMENT = "production"
    RESET_TOKEN_DEV_MODE = False


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine(TEST_DB_URI)
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


def _build_app(config, db_session):
    from src.api.app import create_app

    app = create_app(config)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    def override_get_unit_of_work_factory():
        @asynccontextmanager
        async def unit_of_work():
            async with SqlAlchemyUnitOfWork(db_session) as uow:
                yield uow

        return unit_of_work

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_unit_of_work_factory] = override_get_unit_of_work_factory
    return app


def _build_client(app, base_url: str, **transport_kwargs) -> AsyncClient:
    transport = ASGITransport(app=app, **transport_kwargs)
    return AsyncClient(transport=transport, base_url=base_url)


@pytest_asyncio.fixture
async def client(db_session):
    async with _build_client(_build_app(DevConfig, db_session), "http://test") as ac:
        yield ac


@pytest_asyncio.fixture
def prod_app(db_session):
    return _build_app(ProductionConfig, db_session)


@pytest_asyncio.fixture
async def prod_client(prod_app):
    # Secure cookies are only sent back over https
    async with _build_client(prod_app, "https://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def lenient_client(db_session):
    """Client that returns 500 responses instead of re-raising app errors"""
    async with _build_client(
        _build_app(DevConfig, db_session), "http://test", raise_app_exceptions=False
    ) as ac:
        yield ac
