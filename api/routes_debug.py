# api/routes_debug.py
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from config.settings import settings
from core.dependencies import get_job_repository
from core.response import ok, error, error_message, utc_timestamp
from services.job_repository import JobRepository

logger = logging.getLogger(__name__)

router = APIRouter()

# Fields exposed by the direct query probe; everything else on the row is dropped.
DEBUG_JOB_FIELDS = ("id", "title", "company", "score", "locations", "tags")


def project_job(row) -> dict:
    return {name: row.get(name) for name in DEBUG_JOB_FIELDS}


@router.get("/db-test")
async def db_test(repo: JobRepository = Depends(get_job_repository)):
    """Database connectivity probe: counts visible jobs."""
    try:
        job_count = await repo.count_jobs()
    except Exception as e:
        logger.exception("Database test error")
        return JSONResponse(
            status_code=500,
            content=error(error=error_message(e), message="Database connection failed", timestamp=utc_timestamp()),
        )
    return ok({"jobCount": int(job_count)}, message="Database connection successful", timestamp=utc_timestamp())


@router.get("/jobs/debug-query")
async def debug_query(repo: JobRepository = Depends(get_job_repository)):
    """Direct query probe: first few rows of the job table, trimmed to the display fields."""
    try:
        rows = await repo.fetch_rows(settings.DEBUG_QUERY_LIMIT)
        jobs = [project_job(row) for row in rows]
    except Exception as e:
        logger.exception("Direct query error")
        return JSONResponse(
            status_code=500,
            content=error(error=error_message(e), message="Direct query failed", timestamp=utc_timestamp()),
        )
    return ok({"jobs": jobs}, message="Direct query successful", timestamp=utc_timestamp())
