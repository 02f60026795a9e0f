"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from muse.config import Settings
from muse.persistence.seed import THEME_CATALOG
from muse.persistence.tables import metadata, themes_table


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,  # Log SQL queries in debug mode
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create async session factory.

    Args:
        engine: Database engine

    Returns:
        Session factory for creating database sessions
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
        autocommit=False,
    )


async def create_schema(engine: AsyncEngine) -> None:
    """Create missing tables and seed the theme catalog.

    Safe to run repeatedly: existing tables and themes are left untouched.

    Args:
        engine: Database engine
    """
    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)

        result = await conn.execute(select(themes_table.c.id))
        existing = set(result.scalars().all())
        missing = [theme for theme in THEME_CATALOG if theme.id not in existing]
        if missing:
            await conn.execute(
                themes_table.insert(),
                [{"id": theme.id, "name": theme.name} for theme in missing],
            )
