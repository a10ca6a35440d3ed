"""
Database setup and connection
"""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.orm import DeclarativeBase
from sqlalchemy import MetaData, types
from fastapi import Request
from datetime import datetime, timezone
from typing import AsyncGenerator, Optional
import json
import logging
import os
import secrets
import time

from portfolio_api.core.config import Settings
from portfolio_api.core.errors import NotInitializedError

logger = logging.getLogger(__name__)


class JSONText(types.TypeDecorator):
    """JSON value stored as TEXT; corrupt or missing text decodes to None"""
    impl = types.Text
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        return json.dumps(value)

    def process_result_value(self, value, dialect):
        if value is None or value == "":
            return None
        try:
            return json.loads(value)
        except (TypeError, ValueError):
            return None


class Base(DeclarativeBase):
    """SQLAlchemy declarative base"""
    metadata = MetaData(
        naming_convention={
            "ix": "ix_%(column_0_label)s",
            "uq": "uq_%(table_name)s_%(column_0_name)s",
            "ck": "ck_%(table_name)s_%(constraint_name)s",
            "pk": "pk_%(table_name)s"
        }
    )


def utcnow() -> datetime:
    """Naive UTC timestamp, the form SQLite DATETIME columns round-trip."""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def naive_utc(value: Optional[datetime]) -> Optional[datetime]:
    """Normalize an aware datetime to naive UTC; naive values pass through."""
    if value is None or value.tzinfo is None:
        return value
    return value.astimezone(timezone.utc).replace(tzinfo=None)


def generate_id() -> str:
    """Opaque row id: epoch milliseconds plus a random suffix."""
    return f"{int(time.time() * 1000)}-{secrets.token_hex(6)}"


class Store:
    """Owns the engine for the single SQLite file.

    Built once by the application factory and kept on ``app.state.store``.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self._engine: Optional[AsyncEngine] = None
        self._sessionmaker: Optional[async_sessionmaker] = None

    @property
    def is_initialized(self) -> bool:
        return self._engine is not None

    async def initialize(self) -> "Store":
        """Create tables and seed the admin user and settings row. Idempotent."""
        if self._engine is not None:
            return self

        # models register their tables on Base.metadata
        import portfolio_api.models  # noqa: F401
        from portfolio_api.services.bootstrap import seed_database

        db_dir = os.path.dirname(os.path.abspath(self.settings.DB_PATH))
        os.makedirs(db_dir, exist_ok=True)

        engine = create_async_engine(
            self.settings.database_url,
            echo=self.settings.DEBUG,
            future=True,
        )
        try:
            async with engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)
            self._engine = engine
            self._sessionmaker = async_sessionmaker(
                engine,
                class_=AsyncSession,
                expire_on_commit=False,
                autoflush=False,
            )
            async with self.session() as session:
                await seed_database(session, self.settings)
        except Exception:
            self._engine = None
            self._sessionmaker = None
            await engine.dispose()
            raise

        logger.info("Database ready at %s", self.settings.DB_PATH)
        return self

    def get(self) -> AsyncEngine:
        if self._engine is None:
            raise NotInitializedError("Database not initialized. Call initialize() first.")
        return self._engine

    def session(self) -> AsyncSession:
        self.get()
        return self._sessionmaker()

    async def close(self) -> None:
        if self._engine is not None:
            engine = self._engine
            self._engine = None
            self._sessionmaker = None
            await engine.dispose()
            logger.info("Database connection closed")


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Database session dependency"""
    store: Store = request.app.state.store
    async with store.session() as session:
        try:
            yield session
        except Exception:
            await session.rollback()
            raise
