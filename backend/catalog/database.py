import logging
from typing import AsyncIterator

from sqlmodel import SQLModel
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine
from sqlalchemy.orm import sessionmaker

from catalog.core.config import settings

logger = logging.getLogger(__name__)

# Create async engine
engine = create_async_engine(settings.DATABASE_URL, echo=settings.DATABASE_ECHO)

# Create async session
async_session = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)

async def init_db(bind=None):
    """Create all tables known to SQLModel metadata."""
    import catalog.models  # noqa: F401  регистрируем модели в metadata
    async with (bind if bind is not None else engine).begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Таблицы базы данных созданы")

async def get_session() -> AsyncIterator[AsyncSession]:
    """Get database session."""
    async with async_session() as session:
        yield session
