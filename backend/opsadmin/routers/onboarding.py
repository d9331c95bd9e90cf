"""Onboarding flow API endpoints - quiz screens, conversion screens and components."""
import logging
from typing import Literal, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_staff
from ..database import get_db
from ..models import ConversionScreen, OnboardingComponent, QuizScreen
from ..schemas.common import SuccessResponse
from ..schemas.onboarding import (
    ComponentList,
    ConversionScreenCreate,
    QuizScreenCreate,
    ScreenEnvelope,
    ScreenList,
    ScreenUpdate,
)
from ..services.onboarding import validate_screen_options
from ..services.ordering import next_order_position
from ..utils.db_utils import get_or_404
from ..utils.errors import BadRequestError

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/onboarding", tags=["onboarding"])

SCREEN_MODELS = {"quiz": QuizScreen, "conversion": ConversionScreen}
REQUIRED_FIELDS = {"quiz": (), "conversion": ("title", "description")}


async def _list_screens(db: AsyncSession, screen_type: str) -> ScreenList:
    model = SCREEN_MODELS[screen_type]
    result = await db.execute(
        select(model).order_by(model.order_position.asc().nulls_last(), model.created_at.asc())
    )
    return ScreenList(screens=result.scalars().all())


async def _create_screen(db: AsyncSession, screen_type: str, data, user: CurrentUser) -> ScreenEnvelope:
    model = SCREEN_MODELS[screen_type]
    await validate_screen_options(db, data.component_id, data.options, screen_type)

    values = data.model_dump()
    # 0 counts as unset, like a missing position
    if not values["order_position"]:
        values["order_position"] = await next_order_position(db, model)
    if values["options"] is None and screen_type == "conversion":
        values["options"] = []

    screen = model(**values)
    db.add(screen)
    await db.commit()
    await db.refresh(screen)

    logger.info(f"{screen_type.capitalize()} screen {screen.id} created at position {screen.order_position} by {user.id}")
    return ScreenEnvelope(screen=screen)


async def _update_screen(db: AsyncSession, screen_type: str, data: ScreenUpdate) -> ScreenEnvelope:
    model = SCREEN_MODELS[screen_type]
    screen = await get_or_404(db, model, data.id, f"{screen_type.capitalize()} screen")

    changes = data.model_dump(exclude_unset=True, exclude={"id"})
    for field in REQUIRED_FIELDS[screen_type]:
        if field in changes and not changes[field]:
            raise BadRequestError(f"{field} cannot be empty")
    if screen_type == "conversion" and "options" in changes and changes["options"] is None:
        changes["options"] = []

    if "options" in changes or "component_id" in changes:
        await validate_screen_options(
            db,
            changes.get("component_id", screen.component_id),
            changes.get("options", screen.options),
            screen_type,
        )

    for field, value in changes.items():
        setattr(screen, field, value)

    await db.commit()
    await db.refresh(screen)
    return ScreenEnvelope(screen=screen)


async def _delete_screen(db: AsyncSession, screen_type: str, screen_id: str, user: CurrentUser) -> SuccessResponse:
    model = SCREEN_MODELS[screen_type]
    screen = await get_or_404(db, model, screen_id, f"{screen_type.capitalize()} screen")
    await db.delete(screen)
    await db.commit()

    logger.info(f"{screen_type.capitalize()} screen {screen_id} deleted by {user.id}")
    return SuccessResponse()


# Quiz screens

@router.get("/quiz-screens", response_model=ScreenList)
async def list_quiz_screens(
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    return await _list_screens(db, "quiz")


@router.post("/quiz-screens", response_model=ScreenEnvelope, status_code=201)
async def create_quiz_screen(
    data: QuizScreenCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Create a quiz screen; without an order_position it takes the first free slot."""
    return await _create_screen(db, "quiz", data, user)


@router.put("/quiz-screens", response_model=ScreenEnvelope)
async def update_quiz_screen(
    data: ScreenUpdate,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    return await _update_screen(db, "quiz", data)


@router.delete("/quiz-screens", response_model=SuccessResponse)
async def delete_quiz_screen(
    id: str = Query(..., min_length=1),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    return await _delete_screen(db, "quiz", id, user)


# Conversion screens

@router.get("/conversion-screens", response_model=ScreenList)
async def list_conversion_screens(
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    return await _list_screens(db, "conversion")


@router.post("/conversion-screens", response_model=ScreenEnvelope, status_code=201)
async def create_conversion_screen(
    data: ConversionScreenCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Create a conversion screen; title and description are required."""
    return await _create_screen(db, "conversion", data, user)


@router.put("/conversion-screens", response_model=ScreenEnvelope)
async def update_conversion_screen(
    data: ScreenUpdate,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    return await _update_screen(db, "conversion", data)


@router.delete("/conversion-screens", response_model=SuccessResponse)
async def delete_conversion_screen(
    id: str = Query(..., min_length=1),
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    return await _delete_screen(db, "conversion", id, user)


# Components

@router.get("/components", response_model=ComponentList)
async def list_components(
    category: Optional[Literal["quiz", "conversion"]] = Query(None),
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """List onboarding components, optionally only those offered for one screen type."""
    result = await db.execute(
        select(OnboardingComponent).order_by(OnboardingComponent.component_name.asc())
    )
    components = result.scalars().all()
    if category:
        # categories is a JSON list, filtered here to stay portable across SQLite and Postgres
        components = [c for c in components if category in (c.categories or [])]
    return ComponentList(components=components)
