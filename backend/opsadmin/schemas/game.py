"""Game and category schemas."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, ConfigDict, Field


class CategoryResponse(BaseModel):
    id: str
    game_id: str
    name: str
    description: str
    emoji: str
    is_active: bool
    sort_order: Optional[int] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class GameResponse(BaseModel):
    id: str
    title: str
    description: Optional[str] = None
    is_active: bool
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class GameWithCategories(GameResponse):
    categories: List[CategoryResponse] = []


class CategoryCreate(BaseModel):
    """Schema for creating a category; sort order is allocated server-side."""
    model_config = ConfigDict(populate_by_name=True)

    game_id: str = Field(..., min_length=1, alias="gameId")
    name: str = Field(..., min_length=1, max_length=100)
    description: str = Field(..., min_length=1)
    emoji: str = Field(..., min_length=1)


class CategoryToggle(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category_id: str = Field(..., min_length=1, alias="categoryId")
    is_active: bool = Field(..., alias="isActive")


class CategoryChanges(BaseModel):
    """Editable category fields; omitted fields are left alone."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = Field(None, min_length=1)
    emoji: Optional[str] = Field(None, min_length=1)
    sort_order: Optional[int] = Field(None, ge=0)
    is_active: Optional[bool] = None


class CategoryUpdate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category_id: str = Field(..., min_length=1, alias="categoryId")
    updates: CategoryChanges


class CategoryDelete(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    category_id: str = Field(..., min_length=1, alias="categoryId")
