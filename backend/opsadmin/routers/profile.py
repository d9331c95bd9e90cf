"""Own profile endpoint."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, get_current_user
from ..database import get_db
from ..schemas.user import ProfileResponse, ProfileUpdate
from .users import upsert_profile

router = APIRouter(prefix="/api/profile", tags=["profile"])


@router.post("/update", response_model=ProfileResponse)
async def update_own_profile(
    data: ProfileUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(get_current_user),
):
    """Update the caller's name or picture; any signed-in user may do this."""
    profile = await upsert_profile(db, user.id, data.model_dump(exclude_unset=True))
    await db.commit()
    await db.refresh(profile)
    return profile
