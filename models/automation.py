from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

LogLevel = Literal["info", "success", "warning", "error", "debug"]

class ApplicationOutcome(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    job_id: str
    job_title: str | None = None
    company: str | None = None
    success: bool
    message: str | None = None

class AutomationResult(BaseModel):
    """What an automation run reports back; only applications_submitted is required."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="allow")

    applications_submitted: int = Field(ge=0)
    total_jobs_found: int = 0
    results: list[ApplicationOutcome] = Field(default_factory=list)

class AutomationLogEntry(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    level: LogLevel
    action: str
    details: Any = None
    job_id: str | None = None
    config_id: str | None = None
