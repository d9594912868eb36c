import asyncio
import os
import sys
from pathlib import Path

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient


# Ensure project root is on sys.path so `core.*`, `api.*` imports work
ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

# No database, no simulated delays, no log files for the module-level app
os.environ["MYSQL_ASYNC_URL"] = "disabled"
os.environ["AUTOMATION_TEST_DELAY_SCALE"] = "0"
os.environ.pop("AUTOMATION_RUNNER", None)


# Explicitly enable pytest-asyncio plugin for async tests/fixtures
pytest_plugins = ("pytest_asyncio",)


from core.dependencies import Collaborators
from main import create_app
from models.automation import AutomationResult
from services.session_provider import MockSessionProvider


class FakeAutomationRunner:
    """Records calls; returns `result` or raises `exc`."""

    def __init__(self, result=None, exc=None):
        self.result = result if result is not None else AutomationResult(applications_submitted=2, total_jobs_found=5)
        self.exc = exc
        self.calls = []

    async def run(self, config_id, use_real_automation=False):
        self.calls.append((config_id, use_real_automation))
        if self.exc is not None:
            raise self.exc
        return self.result


class FakeAutomationTester:
    """Blocks until `release` is set, then optionally fails."""

    def __init__(self, exc=None, block=False):
        self.exc = exc
        self.release = asyncio.Event()
        if not block:
            self.release.set()
        self.started = 0
        self.finished = 0

    async def run(self):
        self.started += 1
        await self.release.wait()
        if self.exc is not None:
            raise self.exc
        self.finished += 1


class FakeJobRepository:
    def __init__(self, count=0, rows=None, exc=None):
        self.count = count
        self.rows = rows or []
        self.exc = exc
        self.limits = []

    async def count_jobs(self):
        if self.exc is not None:
            raise self.exc
        return self.count

    async def fetch_rows(self, limit=5):
        self.limits.append(limit)
        if self.exc is not None:
            raise self.exc
        return self.rows[:limit]


@pytest.fixture()
def runner():
    return FakeAutomationRunner()


@pytest.fixture()
def tester():
    return FakeAutomationTester()


@pytest.fixture()
def job_repo():
    return FakeJobRepository(count=42)


@pytest.fixture()
def collaborators(runner, tester, job_repo):
    return Collaborators(
        session_provider=MockSessionProvider(),
        automation_runner=runner,
        automation_tester=tester,
        job_repository=job_repo,
    )


@pytest_asyncio.fixture()
async def client(collaborators):
    """Async test client over the API with fake collaborators."""
    app = create_app(collaborators)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac
