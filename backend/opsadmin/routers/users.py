"""Console user management endpoints."""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_staff
from ..database import get_db
from ..models import Profile, UserRole
from ..schemas.common import SuccessResponse
from ..schemas.user import UserList, UserSummary, UserUpdate

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])

# Roles shown on the team page
LISTED_ROLES = ("admin", "dev", "developer", "promoter", "tester")


async def upsert_profile(db: AsyncSession, user_id: str, changes: dict) -> Profile:
    """Apply profile changes, creating the row on first write."""
    profile = await db.get(Profile, user_id)
    if profile is None:
        profile = Profile(user_id=user_id)
        db.add(profile)
    for field, value in changes.items():
        setattr(profile, field, value)
    return profile


@router.get("/list", response_model=UserList)
async def list_users(
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """Console users with their role and display details."""
    result = await db.execute(
        select(UserRole, Profile)
        .outerjoin(Profile, Profile.user_id == UserRole.user_id)
        .where(UserRole.role.in_(LISTED_ROLES))
        .order_by(UserRole.created_at.asc())
    )
    users = [
        UserSummary(
            id=role.user_id,
            role=role.role,
            name=profile.name if profile else None,
            profile_picture_url=profile.profile_picture_url if profile else None,
        )
        for role, profile in result.all()
    ]
    return UserList(users=users)


@router.post("/update", response_model=SuccessResponse)
async def update_user(
    data: UserUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Edit another user's profile and, optionally, their console role."""
    changes = data.model_dump(exclude_unset=True, exclude={"user_id", "role"})
    if changes:
        await upsert_profile(db, data.user_id, changes)

    if data.role is not None:
        assignment = await db.get(UserRole, data.user_id)
        if assignment is None:
            db.add(UserRole(user_id=data.user_id, role=data.role))
        else:
            assignment.role = data.role

    await db.commit()

    logger.info(f"User {data.user_id} updated by {user.id} (fields={sorted(changes)}, role={data.role})")
    return SuccessResponse()
