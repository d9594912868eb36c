import pytest
import pytest_asyncio

from core.db import Base, build_engine, build_session_maker
from core.exceptions import DatabaseUnavailable
from models.db_models import Job
from services.job_repository import SQLJobRepository


@pytest_asyncio.fixture()
async def session_maker(tmp_path):
    """File-backed SQLite database with the job table and three rows (one hidden)."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'jobs.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    maker = build_session_maker(engine)
    async with maker() as session:
        session.add_all([
            Job(id="j1", source="remotive", title="Python Developer", company="TechCorp",
                locations=["Paris", "Remote"], tags=["python"], url="https://example.com/1", score=80),
            Job(id="j2", source="adzuna", title="Data Engineer", company="StartupXYZ",
                locations=["Lyon"], tags=["sql", "spark"], url="https://example.com/2", score=65),
            Job(id="j3", source="adzuna", title="Old posting", company="Gone Inc",
                locations=[], tags=[], url="https://example.com/3", score=10, hidden=True),
        ])
        await session.commit()
    yield maker
    await engine.dispose()


@pytest.mark.asyncio
async def test_count_excludes_hidden_jobs(session_maker):
    repo = SQLJobRepository(session_maker)
    assert await repo.count_jobs() == 2


@pytest.mark.asyncio
async def test_fetch_rows_limits_and_decodes_json(session_maker):
    repo = SQLJobRepository(session_maker)
    rows = await repo.fetch_rows(limit=2)
    assert len(rows) == 2
    by_id = {row["id"]: row for row in rows}
    assert by_id["j1"]["locations"] == ["Paris", "Remote"]
    assert by_id["j1"]["tags"] == ["python"]
    # raw rows keep every column, using the table's column names
    assert "sourceId" in by_id["j1"]
    assert "url" in by_id["j1"]


@pytest.mark.asyncio
async def test_disabled_database_raises():
    repo = SQLJobRepository(None)
    with pytest.raises(DatabaseUnavailable, match="not configured"):
        await repo.count_jobs()
    with pytest.raises(DatabaseUnavailable):
        await repo.fetch_rows()
