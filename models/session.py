# models/session.py
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

class SessionUser(CamelModel):
    id: str
    name: str | None = None
    email: str | None = None
    image: str | None = None

class UserPreferences(CamelModel):
    remote_only: bool = False
    min_salary: int | None = None
    preferred_companies: list[str] = Field(default_factory=list)

class UserProfile(SessionUser):
    skills: list[str] = Field(default_factory=list)
    locations: list[str] = Field(default_factory=list)
    preferences: UserPreferences = Field(default_factory=UserPreferences)

class Session(CamelModel):
    user: UserProfile
    access_token: str | None = None
    refresh_token: str | None = None

    def tokens(self) -> dict:
        return {"accessToken": self.access_token, "refreshToken": self.refresh_token}

class SessionToken(CamelModel):
    """Claims carried by the session JWT."""
    id: str | None = None
    access_token: str | None = None
    refresh_token: str | None = None

    @classmethod
    def from_session(cls, session: Session) -> "SessionToken":
        return cls(id=session.user.id, access_token=session.access_token, refresh_token=session.refresh_token)
