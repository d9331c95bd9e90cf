"""Feature flag schemas."""
from datetime import datetime
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class FeatureFlagToggle(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    flag_id: str = Field(..., min_length=1, alias="flagId")
    is_enabled: bool = Field(..., alias="isEnabled")


class FeatureFlagResponse(BaseModel):
    id: str
    flag_id: str
    is_enabled: bool
    description: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True
