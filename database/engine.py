import logging

from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import text

from core.config import settings

logger = logging.getLogger(__name__)


def _engine_options(url: str) -> dict:
    """Pool sizing only applies to server databases."""
    if url.startswith("sqlite"):
        return {}
    return {
        "pool_size": settings.database_pool_size,
        "max_overflow": settings.database_max_overflow,
        "pool_pre_ping": True,
    }


db_engine = create_async_engine(
    settings.database_url, echo=False, **_engine_options(settings.database_url)
)

# Create async session maker to be used throughout the application
AsyncSessionLocal = async_sessionmaker(
    db_engine, class_=AsyncSession, expire_on_commit=False
)


# Base class for declarative models
class Base(DeclarativeBase):
    pass


# Dependency to get DB session
async def get_db():
    async with AsyncSessionLocal() as session:
        yield session


async def init_db():
    """Create all tables that do not exist yet."""
    # Register every model on the metadata before create_all
    import database.models  # noqa: F401

    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready")


async def ping_db() -> bool:
    """Return True when the database answers a trivial query."""
    async with db_engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    return True


async def close_db():
    """Close database engine and connections."""
    await db_engine.dispose()


def enum_values(enum_cls) -> list[str]:
    """Persist enum values (not member names) so rows read like the API."""
    return [member.value for member in enum_cls]
