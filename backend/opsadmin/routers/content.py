"""Game content API endpoints.

One set of routes serves every content kind; ``{kind}`` selects the table
and the create schema.
"""
import logging
from typing import Dict, NamedTuple, Optional, Type

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from pydantic import BaseModel, ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_staff
from ..database import Base, get_db
from ..models import (
    Category,
    MostLikelyToQuestion,
    NeverHaveIEverStatement,
    Position,
    RoleplayScenario,
    WouldYouRatherQuestion,
)
from ..schemas.common import SuccessResponse
from ..schemas.content import (
    MostLikelyToCreate,
    NeverHaveIEverCreate,
    PositionCreate,
    RoleplayScenarioCreate,
    WouldYouRatherCreate,
)
from ..utils.db_utils import get_or_404, row_to_dict
from ..utils.errors import BadRequestError, format_validation_errors

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/content", tags=["content"])


class ContentKind(NamedTuple):
    label: str
    model: Type[Base]
    create_schema: Type[BaseModel]


CONTENT_KINDS: Dict[str, ContentKind] = {
    "would-you-rather": ContentKind("Would you rather question", WouldYouRatherQuestion, WouldYouRatherCreate),
    "never-have-i-ever": ContentKind("Never have I ever statement", NeverHaveIEverStatement, NeverHaveIEverCreate),
    "most-likely-to": ContentKind("Most likely to question", MostLikelyToQuestion, MostLikelyToCreate),
    "roleplay-scenarios": ContentKind("Roleplay scenario", RoleplayScenario, RoleplayScenarioCreate),
    "positions": ContentKind("Position", Position, PositionCreate),
}


def get_kind(kind: str) -> ContentKind:
    if kind not in CONTENT_KINDS:
        raise HTTPException(status_code=404, detail=f"Unknown content type: {kind}")
    return CONTENT_KINDS[kind]


@router.get("/{kind}")
async def list_content(
    kind: str,
    category_id: Optional[str] = Query(None),
    game_id: Optional[str] = Query(None),
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """List content of one kind, optionally narrowed to a category or game."""
    content = get_kind(kind)
    model = content.model

    query = select(model).order_by(model.created_at.desc())
    if category_id:
        query = query.where(model.category_id == category_id)
    if game_id:
        query = query.where(
            model.category_id.in_(select(Category.id).where(Category.game_id == game_id))
        )

    result = await db.execute(query)
    return [row_to_dict(row) for row in result.scalars().all()]


@router.post("/{kind}/create", status_code=201)
async def create_content(
    kind: str,
    payload: dict = Body(...),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Create one content item."""
    content = get_kind(kind)
    try:
        data = content.create_schema.model_validate(payload)
    except ValidationError as e:
        raise BadRequestError("Invalid request", details=format_validation_errors(e.errors()))

    item = content.model(**data.model_dump())
    db.add(item)
    await db.commit()
    await db.refresh(item)

    logger.info(f"{content.label} {item.id} created by {user.id}")
    return row_to_dict(item)


@router.delete("/{kind}/delete", response_model=SuccessResponse)
async def delete_content(
    kind: str,
    id: str = Query(..., min_length=1),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Delete one content item by id."""
    content = get_kind(kind)
    item = await get_or_404(db, content.model, id, content.label)
    await db.delete(item)
    await db.commit()

    logger.info(f"{content.label} {id} deleted by {user.id}")
    return SuccessResponse()
