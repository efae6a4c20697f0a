"""Configuração do pytest para o cadastro de clientes."""

import os

# Precisa vir antes de qualquer import de app.*: as settings e o engine
# são criados no import dos módulos.
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("ENVIRONMENT", "testing")

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from app.adapters.outbound.persistence.database import register_sqlite_functions
from app.adapters.outbound.persistence.models import Base
from app.application.use_cases.cliente_use_cases import ClienteService
from tests.fakes.in_memory_cliente_repository import InMemoryClienteRepository


@pytest.fixture()
def repository() -> InMemoryClienteRepository:
    return InMemoryClienteRepository()


@pytest.fixture()
def service(repository: InMemoryClienteRepository) -> ClienteService:
    return ClienteService(repository)


@pytest_asyncio.fixture()
async def session_factory(tmp_path):
    """SQLite temporário com o schema criado; descartado ao fim do teste."""
    db_file = tmp_path / "test.db"
    engine = create_async_engine(f"sqlite+aiosqlite:///{db_file}")
    register_sqlite_functions(engine)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)

    await engine.dispose()


@pytest_asyncio.fixture()
async def db_session(session_factory) -> AsyncSession:
    async with session_factory() as session:
        yield session
