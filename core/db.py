"""
Async MySQL database engine and session management.

Purpose:
- Create SQLAlchemy async engine for MySQL with aiomysql driver
- Provide the async session factory handed to the job repository
- Provide Base declarative class for ORM models

Schema creation and migrations belong to the main application, not this service.
"""
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base
from config.settings import settings
import logging
from typing import Optional

logger = logging.getLogger(__name__)

Base = declarative_base()

DISABLED = "disabled"


def is_db_enabled(url: str | None) -> bool:
    return bool(url) and url != DISABLED


def build_engine(url: str, echo: bool = False) -> AsyncEngine:
    """Create an async engine; pool_pre_ping keeps long-idle MySQL connections usable."""
    return create_async_engine(url, echo=echo, future=True, pool_pre_ping=True)


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(engine, expire_on_commit=False, class_=AsyncSession)


# When MYSQL_ASYNC_URL is "disabled", do not create an engine at all.
engine: Optional[AsyncEngine] = None
async_session_maker: Optional[async_sessionmaker[AsyncSession]] = None

if is_db_enabled(settings.MYSQL_ASYNC_URL):
    engine = build_engine(settings.MYSQL_ASYNC_URL, echo=settings.DEBUG)
    async_session_maker = build_session_maker(engine)
    logger.info("Async DB engine created for %s", engine.url.render_as_string(hide_password=True))
else:
    logger.warning("MYSQL_ASYNC_URL is 'disabled'; DB engine will not be created, DB probes will fail.")


async def dispose_engine() -> None:
    """Close pooled connections on shutdown."""
    if engine is not None:
        await engine.dispose()
