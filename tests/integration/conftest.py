import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from config import ApplicationConfig
from src.adapter.services.bcrypt_password_hasher import BcryptPasswordHasher
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.app import create_app
from src.depends import get_password_hasher, get_token_signer, get_unit_of_work
from tests.fixtures.json_loader import TestDataLoader


@pytest.fixture
def test_data():
    return TestDataLoader()


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
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def client(db_session):
    """App backed by a real SQLite database"""
    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_password_hasher] = lambda: BcryptPasswordHasher(rounds=4)

    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def mocked_app(mock_uow, mock_password_hasher, mock_token_signer):
    """App whose collaborators are all mocks; tests may pass their own error reporter"""

    def build(error_reporter=None):
        app = create_app(ApplicationConfig, error_reporter=error_reporter)

        async def override_get_unit_of_work():
            yield mock_uow

        app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
        app.dependency_overrides[get_password_hasher] = lambda: mock_password_hasher
        app.dependency_overrides[get_token_signer] = lambda: mock_token_signer
        return app

    return build


@pytest_asyncio.fixture
async def mocked_client(mocked_app):
    transport = ASGITransport(app=mocked_app(), raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
