"""Feature flag API endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_staff
from ..database import get_db
from ..models import FeatureFlag
from ..schemas.feature_flag import FeatureFlagResponse, FeatureFlagToggle

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/feature-flags", tags=["feature-flags"])


@router.get("", response_model=List[FeatureFlagResponse])
async def list_feature_flags(
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    result = await db.execute(select(FeatureFlag).order_by(FeatureFlag.flag_id.asc()))
    return result.scalars().all()


@router.post("/toggle", response_model=FeatureFlagResponse)
async def toggle_feature_flag(
    data: FeatureFlagToggle,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Enable or disable a flag by its flag_id."""
    result = await db.execute(select(FeatureFlag).where(FeatureFlag.flag_id == data.flag_id))
    flag = result.scalar_one_or_none()
    if not flag:
        raise HTTPException(status_code=404, detail="Feature flag not found")

    flag.is_enabled = data.is_enabled
    await db.commit()
    await db.refresh(flag)

    logger.info(f"Feature flag {flag.flag_id} {'enabled' if flag.is_enabled else 'disabled'} by {user.id}")
    return flag
