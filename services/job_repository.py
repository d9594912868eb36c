"""
Read-only access to the `job` table.

Purpose:
- count_jobs(): number of visible (not hidden) jobs, used by the connectivity probe
- fetch_rows(limit): raw `SELECT * FROM job LIMIT n`, used by the direct query probe

Each call opens and closes its own AsyncSession from the shared session factory.
"""
import json
import logging
from typing import Any, Optional, Protocol

from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from core.exceptions import DatabaseUnavailable
from models.db_models import Job

logger = logging.getLogger(__name__)

# Columns stored as JSON text; some drivers hand them back undecoded on raw queries.
JSON_COLUMNS = ("locations", "tags")


class JobRepository(Protocol):
    async def count_jobs(self) -> int:
        ...

    async def fetch_rows(self, limit: int = 5) -> list[dict[str, Any]]:
        ...


def _decode_json_columns(row: dict[str, Any]) -> dict[str, Any]:
    for column in JSON_COLUMNS:
        value = row.get(column)
        if isinstance(value, (str, bytes)):
            try:
                row[column] = json.loads(value)
            except ValueError:
                logger.debug("Column %s of job %s is not JSON; leaving as-is", column, row.get("id"))
    return row


class SQLJobRepository:
    """Job repository backed by async SQLAlchemy."""

    def __init__(self, session_maker: Optional[async_sessionmaker[AsyncSession]]):
        """
        Args:
            session_maker: async session factory, or None when the DB is disabled
        """
        self.session_maker = session_maker

    def _require_session_maker(self) -> async_sessionmaker[AsyncSession]:
        if self.session_maker is None:
            raise DatabaseUnavailable("Database is not configured")
        return self.session_maker

    async def count_jobs(self) -> int:
        session_maker = self._require_session_maker()
        async with session_maker() as session:
            result = await session.execute(
                select(func.count()).select_from(Job).where(Job.hidden == False)  # noqa: E712
            )
            return int(result.scalar_one() or 0)

    async def fetch_rows(self, limit: int = 5) -> list[dict[str, Any]]:
        session_maker = self._require_session_maker()
        async with session_maker() as session:
            result = await session.execute(text("SELECT * FROM job LIMIT :limit"), {"limit": limit})
            return [_decode_json_columns(dict(row)) for row in result.mappings().all()]
