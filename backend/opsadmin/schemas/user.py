"""User, profile and current user schemas."""
from datetime import datetime
from typing import List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field


class MeResponse(BaseModel):
    user_id: str
    role: Optional[str] = None
    allowed_routes: List[str]


class RouteAccess(BaseModel):
    path: str
    allowed: bool


class UserSummary(BaseModel):
    id: str
    role: str
    name: Optional[str] = None
    profile_picture_url: Optional[str] = None


class UserList(BaseModel):
    users: List[UserSummary]


class ProfileFields(BaseModel):
    """Editable profile columns; fields left out of the body are not touched."""
    name: Optional[str] = None
    username: Optional[str] = None
    profile_picture_url: Optional[str] = None
    age: Optional[int] = Field(None, ge=0, le=150)
    country_code: Optional[str] = Field(None, max_length=2)
    gender: Optional[str] = None
    instagram_handle: Optional[str] = None
    snapchat_handle: Optional[str] = None


class UserUpdate(ProfileFields):
    model_config = ConfigDict(populate_by_name=True)

    user_id: str = Field(..., min_length=1, alias="userId")
    role: Optional[Literal["admin", "dev", "developer", "promoter", "tester", "user"]] = None


class ProfileUpdate(BaseModel):
    name: Optional[str] = None
    profile_picture_url: Optional[str] = None


class ProfileResponse(BaseModel):
    user_id: str
    name: Optional[str] = None
    username: Optional[str] = None
    profile_picture_url: Optional[str] = None
    age: Optional[int] = None
    country_code: Optional[str] = None
    gender: Optional[str] = None
    instagram_handle: Optional[str] = None
    snapchat_handle: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    class Config:
        from_attributes = True
