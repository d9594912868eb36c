"""
Simulated automation session for /api/test-automation.

Walks through the same phases a real job-board run goes through (login, search,
three applications, session report) without touching any job board, so the
logging pipeline and background execution can be checked end to end.
"""
import asyncio
import logging
from typing import Protocol, runtime_checkable

from config.settings import settings
from services.automation_logger import AutomationLogger

logger = logging.getLogger(__name__)

TEST_CONFIG_ID = "test-automation"
APPLICATION_COUNT = 3
FAILING_APPLICATION = 2


@runtime_checkable
class AutomationTesterProtocol(Protocol):
    """A test session that runs to completion or raises."""

    async def run(self) -> None:
        ...


class AutomationTester:
    def __init__(self, delay_scale: float | None = None, log_dir: str | None = None):
        self.delay_scale = settings.AUTOMATION_TEST_DELAY_SCALE if delay_scale is None else delay_scale
        self.log_dir = log_dir
        self.last_session: AutomationLogger | None = None

    async def _pause(self, ms: int) -> None:
        if self.delay_scale > 0:
            await asyncio.sleep(ms / 1000.0 * self.delay_scale)

    async def run(self) -> None:
        session = AutomationLogger(TEST_CONFIG_ID, log_dir=self.log_dir)
        self.last_session = session
        try:
            session.info("Starting automation test session")

            session.info("Navigating to HelloWork login page")
            await self._pause(1000)
            session.info("Entering credentials with human-like typing")
            await self._pause(2000)
            session.success("Successfully logged into HelloWork")

            session.info("Searching for JavaScript developer positions")
            await self._pause(1500)
            session.info("Found 15 matching job positions")

            for i in range(1, APPLICATION_COUNT + 1):
                session.info(f"Processing job application {i}/{APPLICATION_COUNT}")
                await self._pause(3000)
                session.info(f"Filling out application form for position {i}")
                await self._pause(2000)
                session.info(f"Generating personalized cover letter for position {i}")
                await self._pause(1500)

                if i == FAILING_APPLICATION:
                    session.error(f"Failed to submit application {i}: Form validation error")
                    session.info(f"Retrying application {i} with corrected data")
                    await self._pause(2000)

                session.success(f"Successfully submitted application {i}")

            session.save_session_report()
            session.success("Test automation session completed successfully")
        except Exception as e:
            session.error(f"Test failed: {e}")
            raise
