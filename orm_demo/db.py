import logging
from contextlib import asynccontextmanager

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncEngine, async_sessionmaker, create_async_engine
from sqlalchemy.orm import declarative_base

from .config import normalize_database_url, settings
from .exceptions import OperationFailedError

logger = logging.getLogger(__name__)

Base = declarative_base()


def make_engine(database_url: str = None) -> AsyncEngine:
    """Build an engine; no connection is opened until first use."""
    url = normalize_database_url(database_url) if database_url else settings.database_url
    return create_async_engine(url, echo=settings.debug, pool_pre_ping=True)


def make_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)


async def init_db(engine: AsyncEngine):
    """Create any missing tables."""
    # Register the models on Base.metadata
    from . import models  # noqa: F401

    try:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except SQLAlchemyError as e:
        raise OperationFailedError("create schema", str(e)) from e


@asynccontextmanager
async def connect(database_url: str = None):
    """Yield an engine for the duration of the block and dispose it exactly once."""
    engine = make_engine(database_url)
    try:
        if settings.create_schema:
            await init_db(engine)
        yield engine
    finally:
        await engine.dispose()
        logger.debug("Database engine disposed")

