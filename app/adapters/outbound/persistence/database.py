# app/adapters/outbound/persistence/database.py (async version)

import logging
from typing import AsyncGenerator
from contextlib import asynccontextmanager
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.exc import SQLAlchemyError

from app.adapters.configuration.config import settings
# Importar o pacote de modelos registra todas as tabelas no metadata
from app.adapters.outbound.persistence.models import Base

# Configure logger
logger = logging.getLogger(__name__)


def _unicode_lower(value):
    return value.lower() if value is not None else None


def register_sqlite_functions(async_engine: AsyncEngine) -> None:
    """
    Replace SQLite's ASCII-only lower() with str.lower on every new connection,
    so accented names ("ÂNGELA", "JOSÉ") fold like in Postgres.
    """

    @event.listens_for(async_engine.sync_engine, "connect")
    def _on_connect(dbapi_conn, connection_record):
        dbapi_conn.create_function("lower", 1, _unicode_lower)


database_url = str(settings.DATABASE_URL)
logger.info(f"Connecting to database: {database_url.split('@')[-1]}")

# SQLite não usa pool de conexões configurável
engine_options = {"echo": False, "future": True}
if not database_url.startswith("sqlite"):
    engine_options.update(
        pool_size=20,
        max_overflow=10,
        pool_timeout=30,
        pool_recycle=1800,
        pool_pre_ping=True,
    )

try:
    # Create async engine
    engine = create_async_engine(database_url, **engine_options)
    if database_url.startswith("sqlite"):
        register_sqlite_functions(engine)

    # Create async session factory
    AsyncSessionLocal = async_sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
        expire_on_commit=False,
    )

    logger.info("Async database connection configured successfully")

except SQLAlchemyError as e:
    logger.error(f"Error connecting to database: {str(e)}")
    raise


@asynccontextmanager
async def get_db_context() -> AsyncGenerator[AsyncSession, None]:
    """
    Provides an async context for database operations,
    ensuring the session is closed at the end.

    Yields:
        AsyncSession: SQLAlchemy async session

    Example:
        ```python
        async with get_db_context() as db:
            clientes = await AsyncClienteCRUD(db).find_all()
        ```
    """
    session = AsyncSessionLocal()
    try:
        yield session
        await session.commit()
    except Exception:
        await session.rollback()
        raise
    finally:
        await session.close()


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency injection for use with FastAPI.

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    async with get_db_context() as session:
        yield session


async def create_tables() -> None:
    """Create database tables if they don't exist."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
