"""Category API endpoints."""
import logging
import re

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_staff
from ..database import get_db
from ..models import Category, Game
from ..schemas.common import SuccessResponse
from ..schemas.game import (
    CategoryCreate,
    CategoryDelete,
    CategoryResponse,
    CategoryToggle,
    CategoryUpdate,
)
from ..services.ordering import next_category_sort_order
from ..utils.db_utils import get_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/categories", tags=["categories"])


def category_slug(name: str, game_id: str) -> str:
    """Category ids are the lowercased, dash-joined name suffixed with the game id."""
    slug = re.sub(r"\s+", "-", name.strip().lower())
    return f"{slug}-{game_id}"


@router.post("/create", response_model=CategoryResponse, status_code=201)
async def create_category(
    data: CategoryCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Create an inactive category in the first free sort slot of its game."""
    await get_or_404(db, Game, data.game_id, "Game")

    category_id = category_slug(data.name, data.game_id)
    if await db.get(Category, category_id) is not None:
        raise HTTPException(status_code=400, detail=f"Category {category_id} already exists")

    sort_order = await next_category_sort_order(db, data.game_id)

    category = Category(
        id=category_id,
        game_id=data.game_id,
        name=data.name,
        description=data.description,
        emoji=data.emoji,
        is_active=False,
        sort_order=sort_order,
    )
    db.add(category)
    await db.commit()
    await db.refresh(category)

    logger.info(f"Category {category.id} created at position {sort_order} by {user.id}")
    return category


@router.post("/toggle", response_model=CategoryResponse)
async def toggle_category(
    data: CategoryToggle,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """Activate or deactivate a category."""
    category = await get_or_404(db, Category, data.category_id, "Category")
    category.is_active = data.is_active
    await db.commit()
    await db.refresh(category)
    return category


@router.post("/update", response_model=CategoryResponse)
async def update_category(
    data: CategoryUpdate,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """Apply a partial update to a category."""
    category = await get_or_404(db, Category, data.category_id, "Category")

    for field, value in data.updates.model_dump(exclude_unset=True, exclude_none=True).items():
        setattr(category, field, value)

    await db.commit()
    await db.refresh(category)
    return category


@router.post("/delete", response_model=SuccessResponse)
async def delete_category(
    data: CategoryDelete,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Delete a category. Its sort slot is reused by the next create."""
    category = await get_or_404(db, Category, data.category_id, "Category")
    await db.delete(category)
    await db.commit()

    logger.info(f"Category {data.category_id} deleted by {user.id}")
    return SuccessResponse()
