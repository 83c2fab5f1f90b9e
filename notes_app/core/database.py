"""
Database Configuration.

SQLAlchemy async engine and session management for the local SQLite file.
Uses lazy initialization to prevent import-time failures when config is not
available. The aiosqlite driver runs every statement on its own worker
thread, so awaiting a store call never blocks the event loop.
"""

from pathlib import Path

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from notes_app.core.logging import get_logger
from notes_app.models.base import Base

logger = get_logger(__name__)

# Module-level state for lazy initialization
_engine: AsyncEngine | None = None


def create_engine(url: str, echo: bool = False, busy_timeout: float = 5.0) -> AsyncEngine:
    """
    Create an async SQLAlchemy engine.

    For file databases the parent directory is created on demand.

    Args:
        url: SQLAlchemy URL, e.g. sqlite+aiosqlite:///data/notes.db
        echo: Log every SQL statement
        busy_timeout: Seconds SQLite waits on a locked database

    Returns:
        Configured async engine
    """
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database not in (None, "", ":memory:"):
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)

    engine = create_async_engine(
        url,
        echo=echo,
        connect_args={"timeout": busy_timeout},
    )
    logger.debug("Database engine created", extra={"url": parsed.render_as_string()})
    return engine


def _create_engine_from_config() -> AsyncEngine:
    """Create the engine described by database.yaml and overrides."""
    from notes_app.core.config import get_app_config, get_database_url

    db_config = get_app_config().database
    return create_engine(
        get_database_url(),
        echo=db_config.echo,
        busy_timeout=db_config.busy_timeout_seconds,
    )


def get_engine() -> AsyncEngine:
    """
    Get the database engine, creating it on first use.

    Returns:
        SQLAlchemy async engine instance
    """
    global _engine
    if _engine is None:
        _engine = _create_engine_from_config()
    return _engine


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Build a session factory whose objects stay readable after commit."""
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def init_database(engine: AsyncEngine) -> None:
    """Create the notes table if it does not exist yet."""
    # Registers NoteEntity on Base.metadata
    from notes_app.models import note  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database schema ready", extra={"tables": sorted(Base.metadata.tables)})


async def dispose_engine() -> None:
    """Dispose the shared engine so the next get_engine() builds a new one."""
    global _engine
    if _engine is not None:
        await _engine.dispose()
        logger.info("Database engine disposed")
    _engine = None

