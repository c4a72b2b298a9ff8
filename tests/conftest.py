import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession

from orm_demo.db import init_db, make_engine, make_session_factory

@pytest.fixture
def database_url(tmp_path) -> str:
    # One SQLite file per test
    return f"sqlite+aiosqlite:///{tmp_path / 'demo.db'}"

@pytest_asyncio.fixture
async def engine(database_url) -> AsyncEngine:
    engine = make_engine(database_url)
    await init_db(engine)
    yield engine
    await engine.dispose()

@pytest_asyncio.fixture
async def db_session(engine) -> AsyncSession:
    async with make_session_factory(engine)() as session:
        yield session

@pytest.fixture
def dispose_calls(monkeypatch):
    """Record every AsyncEngine.dispose() call."""
    calls = []
    original = AsyncEngine.dispose

    async def counting_dispose(self, *args, **kwargs):
        calls.append(self)
        return await original(self, *args, **kwargs)

    monkeypatch.setattr(AsyncEngine, "dispose", counting_dispose)
    return calls
