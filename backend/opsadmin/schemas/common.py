"""Shared response shapes."""
from typing import Generic, List, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class SuccessResponse(BaseModel):
    success: bool = True


class Page(BaseModel, Generic[T]):
    """One page of a filtered list."""
    items: List[T]
    total: int
    page: int
    page_size: int
    total_pages: int
