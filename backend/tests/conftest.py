import pytest
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from catalog.database import init_db
from catalog.schemas.product import ProductCreate
from catalog.services.products import create_product


@pytest.fixture
async def engine(tmp_path):
    """Async SQLite database with the catalog tables created."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'catalog.db'}")
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
def statements(engine):
    """SQL statements sent to the database while the test runs."""
    captured = []

    def capture(conn, cursor, statement, parameters, context, executemany):
        captured.append(statement)

    event.listen(engine.sync_engine, "before_cursor_execute", capture)
    yield captured
    event.remove(engine.sync_engine, "before_cursor_execute", capture)


@pytest.fixture
def insert_product(session_factory):
    """Insert a product in its own session and return the stored record."""

    async def _insert(name, description=None, price=10.00, stock=10):
        async with session_factory() as session:
            return await create_product(
                session,
                ProductCreate(name=name, description=description, price=price, stock_quantity=stock),
            )

    return _insert
