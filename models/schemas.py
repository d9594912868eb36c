from pydantic import BaseModel, ConfigDict, Field, model_validator
from typing import Optional, Any

class AutoApplyRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    config_id: Optional[str] = Field(default=None, alias="configId")
    use_real_automation: bool = Field(default=False, alias="useRealAutomation")

class Envelope(BaseModel):
    """Uniform response body shared by every endpoint."""
    success: bool
    message: Optional[str] = None
    data: Optional[Any] = None
    error: Optional[str] = None
    timestamp: Optional[str] = None

    @model_validator(mode="after")
    def _one_payload(self):
        has_data = "data" in self.model_fields_set
        has_error = "error" in self.model_fields_set
        if has_data == has_error:
            raise ValueError("envelope must carry exactly one of data or error")
        if self.success != has_data:
            raise ValueError("success flag disagrees with payload")
        return self
