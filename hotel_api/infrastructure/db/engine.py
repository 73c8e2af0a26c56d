import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from hotel_api.config import Settings

logger = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite+aiosqlite:///./hotel.db"


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enforce_foreign_keys(engine: AsyncEngine) -> AsyncEngine:
    """SQLite ships with foreign keys off; every pooled connection must switch them on."""
    if engine.dialect.name == "sqlite":
        event.listen(engine.sync_engine, "connect", _enable_sqlite_foreign_keys)
    return engine


def build_engine(settings: Settings, **kwargs) -> AsyncEngine:
    url = settings.database_url or DEFAULT_DATABASE_URL
    options = {"echo": settings.sql_echo, "pool_pre_ping": True}
    if not url.startswith("sqlite"):
        options["pool_recycle"] = 3600
    options.update(kwargs)
    logger.info("Creating database engine", extra={"dialect": url.split(":", 1)[0]})
    return enforce_foreign_keys(create_async_engine(url, **options))


def build_sessionmaker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
