"""Game API endpoints."""
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_staff
from ..database import get_db
from ..models import Category, Game
from ..schemas.game import CategoryResponse, GameResponse, GameWithCategories
from ..utils.db_utils import get_or_404

router = APIRouter(prefix="/api/games", tags=["games"])


async def _categories_by_game(db: AsyncSession, game_ids: List[str]) -> dict:
    result = await db.execute(
        select(Category)
        .where(Category.game_id.in_(game_ids))
        .order_by(Category.sort_order.asc().nulls_last(), Category.created_at.asc())
    )
    grouped = {game_id: [] for game_id in game_ids}
    for category in result.scalars().all():
        grouped[category.game_id].append(category)
    return grouped


def _game_with_categories(game: Game, categories) -> GameWithCategories:
    return GameWithCategories(
        **GameResponse.model_validate(game).model_dump(),
        categories=[CategoryResponse.model_validate(c) for c in categories],
    )


@router.get("", response_model=List[GameWithCategories])
async def list_games(
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """List games with their categories in display order."""
    result = await db.execute(select(Game).order_by(Game.title.asc()))
    games = result.scalars().all()
    categories = await _categories_by_game(db, [g.id for g in games])
    return [_game_with_categories(g, categories[g.id]) for g in games]


@router.get("/{game_id}", response_model=GameWithCategories)
async def get_game(
    game_id: str,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """Get a single game with its categories."""
    game = await get_or_404(db, Game, game_id, "Game")
    categories = await _categories_by_game(db, [game.id])
    return _game_with_categories(game, categories[game.id])
