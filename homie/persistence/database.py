"""Database engine and sessions.

Only curated lists are persisted, so the engine is created lazily by the
persistence provider and nothing else touches the database.
"""

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from homie.config import Settings


def display_url(settings: Settings) -> str:
    """Database URL with the password masked, safe to log."""
    return make_url(settings.database.url).render_as_string(hide_password=True)


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the asyncpg engine.

    SQL is echoed in debug mode. Connections are pinged before use because
    hosted Postgres closes idle connections.
    """
    return create_async_engine(
        settings.database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory.

    Sessions never autoflush; repositories flush after each write so
    constraint violations surface at the statement that caused them.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
