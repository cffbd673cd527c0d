import logging

from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from src.config import STORAGE_POSTGRES, Settings, settings
from src.database.base import Base

logger = logging.getLogger(__name__)


def build_engine(config: Settings) -> AsyncEngine:
    """Create the async engine for the configured storage backend."""
    if config.resolved_storage_backend == STORAGE_POSTGRES:
        return create_async_engine(
            config.sqlalchemy_url,
            pool_size=20,
            pool_pre_ping=True,
            pool_recycle=3600,
            max_overflow=5,
            echo=config.environment == "development",
        )
    return create_async_engine(config.sqlalchemy_url, echo=False)


engine = build_engine(settings)

async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


async def init_schema(target: AsyncEngine = engine) -> None:
    """Create missing tables (CREATE TABLE IF NOT EXISTS semantics)."""
    import src.models  # noqa: F401  (register mappers)

    async with target.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Schema ready on %s", target.url.render_as_string(hide_password=True))
