"""
Session provider used by the development session endpoint.

The real application resolves sessions through its auth provider; this service
only needs the shape, so the default provider hands back a fixed development user.
"""
import logging
from typing import Protocol

from models.session import Session, UserPreferences, UserProfile

logger = logging.getLogger(__name__)


class SessionProvider(Protocol):
    """Anything that can resolve the current session."""

    async def get_session(self) -> Session:
        ...


class MockSessionProvider:
    """Always returns the same development user and mock tokens."""

    def __init__(self, access_token: str = "mock-access-token", refresh_token: str = "mock-refresh-token"):
        self.access_token = access_token
        self.refresh_token = refresh_token

    async def get_session(self) -> Session:
        user = UserProfile(
            id="dev-user-1",
            name="Dev User",
            email="dev@example.com",
            image=None,
            skills=["JavaScript", "React", "Node.js", "TypeScript"],
            locations=["San Francisco, CA", "Remote"],
            preferences=UserPreferences(
                remote_only=True,
                min_salary=100000,
                preferred_companies=["TechCorp", "StartupXYZ"],
            ),
        )
        logger.debug("Issuing mock session for %s", user.id)
        return Session(user=user, access_token=self.access_token, refresh_token=self.refresh_token)
