"""Game content schemas."""
from typing import Literal, Optional
from pydantic import BaseModel, Field

Difficulty = Literal["easy", "medium", "hard"]


class WouldYouRatherCreate(BaseModel):
    question: str = Field(..., min_length=1)
    option_a: str = Field(..., min_length=1)
    option_b: str = Field(..., min_length=1)
    category_id: Optional[str] = None
    difficulty_level: Difficulty = "medium"


class NeverHaveIEverCreate(BaseModel):
    statement: str = Field(..., min_length=1)
    category_id: Optional[str] = None
    difficulty_level: Difficulty = "medium"


class MostLikelyToCreate(BaseModel):
    question: str = Field(..., min_length=1)
    category_id: Optional[str] = None
    difficulty_level: Difficulty = "medium"


class RoleplayScenarioCreate(BaseModel):
    title: str = Field(..., min_length=1)
    media: Optional[str] = None
    category_id: Optional[str] = None
    difficulty_level: Difficulty = "medium"
    shared_description: Optional[str] = None
    player1_role_title: Optional[str] = None
    player1_twist: Optional[str] = None
    player2_role_title: Optional[str] = None
    player2_twist: Optional[str] = None
    player3_role_title: Optional[str] = None
    player3_twist: Optional[str] = None
    player4_role_title: Optional[str] = None
    player4_twist: Optional[str] = None


class PositionCreate(BaseModel):
    name: str = Field(..., min_length=1)
    image_url: str = Field(..., min_length=1)
    category_id: Optional[str] = None

