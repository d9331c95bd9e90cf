"""AI character schemas."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel, Field


class CharacterCreate(BaseModel):
    name: str = Field(..., min_length=1, pattern=r"\S")


class CharacterUpdate(BaseModel):
    id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1, pattern=r"\S")


class CharacterDelete(BaseModel):
    id: str = Field(..., min_length=1)


class ReferenceImageToggle(BaseModel):
    id: str = Field(..., min_length=1)
    is_default: bool


class ReferenceImageDelete(BaseModel):
    id: str = Field(..., min_length=1)


class CharacterResponse(BaseModel):
    id: str
    name: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ReferenceImageResponse(BaseModel):
    id: str
    character_id: str
    image_url: str
    is_default: bool
    created_at: datetime

    class Config:
        from_attributes = True


class GeneratedImageResponse(BaseModel):
    id: str
    character_id: str
    image_url: str
    prompt: str
    replicate_prediction_id: Optional[str] = None
    generation_number: int
    is_archived: bool
    created_at: datetime

    class Config:
        from_attributes = True


class CharacterWithImages(CharacterResponse):
    reference_images: List[ReferenceImageResponse] = []
    generated_images: List[GeneratedImageResponse] = []
