"""Database connection and session management.

Provides async database engine and session factory for PostgreSQL.
"""

from sqlalchemy.engine import URL, make_url
from sqlalchemy.exc import ArgumentError, NoSuchModuleError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from customer.config import Settings
from customer.util.error import ConfigurationError


def parse_database_url(raw_url: str) -> URL:
    """Parse a database URL and check that it names an async driver.

    Args:
        raw_url: SQLAlchemy URL string

    Returns:
        Parsed URL

    Raises:
        ConfigurationError: If the URL does not resolve to an async
            SQLAlchemy dialect
    """
    try:
        url = make_url(raw_url)
        dialect = url.get_dialect()
    except (ArgumentError, NoSuchModuleError) as e:
        raise ConfigurationError(f"Invalid database URL: {e}") from e

    if not dialect.is_async:
        raise ConfigurationError(
            f"Database URL must use an async driver, got {url.drivername!r}"
        )
    return url


def create_engine(settings: Settings) -> AsyncEngine:
    """Create async database engine.

    Args:
        settings: Application settings with database URL

    Returns:
        Configured async engine

    Raises:
        ConfigurationError: If the database URL cannot drive an async engine
    """
    return create_async_engine(
        parse_database_url(settings.database_url),
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
