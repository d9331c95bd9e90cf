"""Database utility functions."""
import math
from typing import Any, Type, TypeVar

from sqlalchemy import Select, func, inspect, select
from sqlalchemy.ext.asyncio import AsyncSession

from .errors import NotFoundError

T = TypeVar('T')


async def get_or_404(db: AsyncSession, model: Type[T], pk: Any, label: str) -> T:
    """Load a row by primary key or raise a 404 naming the entity."""
    obj = await db.get(model, pk)
    if obj is None:
        raise NotFoundError(f"{label} not found")
    return obj


async def paginate(db: AsyncSession, query: Select, page: int, page_size: int) -> dict:
    """Run a filtered select with offset pagination and an exact count.

    Returns a dict with items, total, page, page_size and total_pages.
    """
    count_query = select(func.count()).select_from(query.order_by(None).subquery())
    total = (await db.execute(count_query)).scalar() or 0

    result = await db.execute(query.offset((page - 1) * page_size).limit(page_size))
    items = list(result.scalars().all())

    return {
        "items": items,
        "total": total,
        "page": page,
        "page_size": page_size,
        "total_pages": math.ceil(total / page_size) if page_size else 0,
    }


def row_to_dict(obj) -> dict:
    """Column values of an ORM row, keyed by attribute name."""
    return {attr.key: getattr(obj, attr.key) for attr in inspect(obj).mapper.column_attrs}
