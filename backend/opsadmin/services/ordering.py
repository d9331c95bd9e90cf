"""Position allocation for ordered collections (categories, onboarding screens)."""
from typing import Iterable, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..models import Category


def next_position(existing_positions: Iterable[Optional[int]]) -> int:
    """Lowest free position starting at 1, filling gaps before appending.

    None and values below 1 (including 0) do not occupy a slot.
    """
    taken = {p for p in existing_positions if p is not None and p >= 1}
    if not taken:
        return 1

    highest = max(taken)
    for candidate in range(1, highest + 1):
        if candidate not in taken:
            return candidate
    return highest + 1


async def next_category_sort_order(db: AsyncSession, game_id: str) -> int:
    """Next sort_order for a new category in a game."""
    result = await db.execute(select(Category.sort_order).where(Category.game_id == game_id))
    return next_position(result.scalars().all())


async def next_order_position(db: AsyncSession, screen_model) -> int:
    """Next order_position within a screen type's table."""
    result = await db.execute(select(screen_model.order_position))
    return next_position(result.scalars().all())
