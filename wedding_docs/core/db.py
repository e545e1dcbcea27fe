from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from wedding_docs.core.config import settings

engine = create_async_engine(
    settings.async_database_url,
    echo=settings.app_env == "development",
    pool_size=settings.db_pool_size,
    max_overflow=settings.db_max_overflow,
    connect_args={"statement_cache_size": 0},
)

# Document export only reads, so every fetch gets its own short-lived session.
# An AsyncSession must not be shared between concurrently running queries.
async_session = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
