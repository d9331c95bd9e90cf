"""iCloud profile API endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_console_user
from ..database import get_db
from ..models import Device, ICloudProfile
from ..schemas.device import (
    ICloudProfileArchive,
    ICloudProfileCreate,
    ICloudProfileResponse,
    ICloudProfileUpdate,
)
from ..services.batches import resolve_batch_id, stamp_batch_id
from ..utils.db_utils import get_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/icloud-profiles", tags=["icloud-profiles"])

PROFILE_FIELDS = ("email", "credentials", "alias", "birth_date", "country", "street", "city", "zip_code")


@router.post("/create", response_model=ICloudProfileResponse, status_code=201)
async def create_icloud_profile(
    data: ICloudProfileCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_console_user),
):
    """Attach a new active iCloud profile to a device.

    A device may only have one active profile; the old one must be archived
    first. The new profile joins the device's current batch.
    """
    await get_or_404(db, Device, data.device_id, "Device")

    existing = await db.execute(
        select(ICloudProfile.id).where(
            ICloudProfile.device_id == data.device_id,
            ICloudProfile.status == "active",
        )
    )
    if existing.scalars().first():
        raise HTTPException(
            status_code=400,
            detail="Device already has an active iCloud profile. Please archive the existing one first.",
        )

    batch_id = await resolve_batch_id(db, data.device_id)

    profile = ICloudProfile(
        device_id=data.device_id,
        status="active",
        batch_id=batch_id,
        **{field: getattr(data, field) for field in PROFILE_FIELDS},
    )
    db.add(profile)
    await db.commit()
    await db.refresh(profile)

    logger.info(f"iCloud profile {profile.id} created on device {data.device_id} (batch {batch_id}) by {user.id}")
    return profile


@router.post("/update", response_model=ICloudProfileResponse)
async def update_icloud_profile(
    data: ICloudProfileUpdate,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_console_user),
):
    """Replace the editable fields of an iCloud profile."""
    profile = await get_or_404(db, ICloudProfile, data.profile_id, "iCloud profile")

    for field in PROFILE_FIELDS:
        setattr(profile, field, getattr(data, field))

    await db.commit()
    await db.refresh(profile)
    return profile


@router.post("/archive", response_model=ICloudProfileResponse)
async def archive_icloud_profile(
    data: ICloudProfileArchive,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_console_user),
):
    """Archive an iCloud profile, keeping its batch id for the burn history."""
    profile = await get_or_404(db, ICloudProfile, data.profile_id, "iCloud profile")

    await stamp_batch_id(db, profile)
    profile.status = "archived"

    await db.commit()
    await db.refresh(profile)

    logger.info(f"iCloud profile {profile.id} archived (batch {profile.batch_id}) by {user.id}")
    return profile
