"""Bootstrap — one-call wiring of settings, logging, engine and façades.

Invariants:
    - Engine disposed on exit, also when the body raises
    - Logging configured from settings before the engine is created

Design Decisions:
    - Async context manager mirrors an application lifespan: callers embed it
      in their own startup/shutdown hooks
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from organizer.config import Settings, get_settings
from organizer.core.validation import RegexUidValidator
from organizer.infrastructure.database import DatabaseSessionManager
from organizer.infrastructure.observability import setup_logging
from organizer.services.store import Store, build_store

logger = logging.getLogger(__name__)


@asynccontextmanager
async def open_store(
    settings: Settings | None = None,
) -> AsyncGenerator[Store, None]:
    """Startup/shutdown lifecycle for a Store."""
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_format)
    db = DatabaseSessionManager(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
        echo=settings.database_echo,
    )
    logger.info("Organizer store opened")
    try:
        yield build_store(db, RegexUidValidator(settings.uid_pattern))
    finally:
        await db.dispose()
        logger.info("Organizer store closed")
