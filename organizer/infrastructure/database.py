"""Database Session Manager — async engine ownership with automatic rollback and error mapping.

Invariants:
    - Every session auto-rolls-back on a store failure (no partial commits leak)
    - Integrity failures map to ConstraintViolationError, all other SQLAlchemy
      failures to StoreError; the driver exception is kept as `original`
    - asyncio cancellation is never caught here: it propagates to the caller
    - No retries: one attempt per call

Design Decisions:
    - expire_on_commit=False: rows decoded after commit need no refresh
    - from_engine(): tests and embedding applications can supply their own engine
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import (
    IntegrityError, OperationalError, DBAPIError, SQLAlchemyError,
)
from sqlalchemy.ext.asyncio import (
    AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker,
)

from organizer.core.errors import ConstraintViolationError, StoreError

logger = logging.getLogger(__name__)


class DatabaseSessionManager:
    """Manages async database sessions with pooling, rollback, and health checks."""

    def __init__(
        self,
        database_url: str,
        pool_size: int = 20,
        max_overflow: int = 10,
        echo: bool = False,
    ):
        engine_kwargs = {"echo": echo, "pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self._bind(create_async_engine(database_url, **engine_kwargs))

    @classmethod
    def from_engine(cls, engine: AsyncEngine) -> "DatabaseSessionManager":
        manager = cls.__new__(cls)
        manager._bind(engine)
        return manager

    def _bind(self, engine: AsyncEngine) -> None:
        self.engine = engine
        self._session_factory = async_sessionmaker(
            engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(
        self, operation: str = "execute",
    ) -> AsyncGenerator[AsyncSession, None]:
        """Provide session with auto-rollback and StoreError mapping."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            await session.rollback()
            logger.error(
                f"DB integrity error: {e}",
                extra={"operation": operation, "error_code": "CONSTRAINT_VIOLATION"},
            )
            raise ConstraintViolationError(
                "Integrity constraint violated", operation, e,
            ) from e
        except OperationalError as e:
            await session.rollback()
            logger.error(
                f"DB operational error: {e}",
                extra={"operation": operation, "error_code": "STORE_ERROR"},
            )
            raise StoreError("Connection or operational error", operation, e) from e
        except DBAPIError as e:
            await session.rollback()
            logger.error(
                f"DB driver error: {e}",
                extra={"operation": operation, "error_code": "STORE_ERROR"},
            )
            raise StoreError("Database driver error", operation, e) from e
        except SQLAlchemyError as e:
            await session.rollback()
            logger.error(
                f"SQLAlchemy error: {e}",
                extra={"operation": operation, "error_code": "STORE_ERROR"},
            )
            raise StoreError("Database operation failed", operation, e) from e
        except StoreError:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def health_check(self) -> bool:
        """Check database connectivity."""
        try:
            async with self.session("health_check") as db:
                await db.execute(text("SELECT 1"))
            return True
        except StoreError as e:
            logger.error(f"DB health check failed: {e}")
            return False

    async def dispose(self) -> None:
        await self.engine.dispose()
