"""Onboarding screen and component schemas."""
from datetime import datetime
from typing import Any, List, Optional
from pydantic import BaseModel, Field


class QuizScreenCreate(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    options: Optional[Any] = None
    order_position: Optional[int] = Field(None, ge=0)
    event_name: Optional[str] = None
    should_show: bool = True
    component_id: Optional[str] = None


class ConversionScreenCreate(QuizScreenCreate):
    title: str = Field(..., min_length=1)
    description: str = Field(..., min_length=1)


class ScreenUpdate(BaseModel):
    """Partial update; only fields present in the body are written."""
    id: str = Field(..., min_length=1)
    title: Optional[str] = None
    description: Optional[str] = None
    options: Optional[Any] = None
    order_position: Optional[int] = Field(None, ge=0)
    event_name: Optional[str] = None
    should_show: Optional[bool] = None
    component_id: Optional[str] = None


class ScreenResponse(BaseModel):
    id: str
    title: Optional[str] = None
    description: Optional[str] = None
    options: Optional[Any] = None
    order_position: Optional[int] = None
    event_name: Optional[str] = None
    should_show: Optional[bool] = None
    component_id: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ScreenEnvelope(BaseModel):
    screen: ScreenResponse


class ScreenList(BaseModel):
    screens: List[ScreenResponse]


class ComponentResponse(BaseModel):
    id: str
    component_key: str
    component_name: str
    categories: List[str] = []
    description: Optional[str] = None
    props_schema: Optional[Any] = None
    default_options: Optional[Any] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ComponentList(BaseModel):
    components: List[ComponentResponse]
