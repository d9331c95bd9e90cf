"""Device fleet API endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_console_user
from ..database import get_db
from ..models import Device, ICloudProfile, Proxy, SocialAccount
from ..schemas.device import (
    BatchGroupResponse,
    DeviceBatches,
    DeviceCreate,
    DeviceResponse,
    DeviceUpdate,
    DeviceWithRelations,
)
from ..services.batches import NO_BATCH_KEY, group_by_batch
from ..utils.db_utils import get_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/devices", tags=["devices"])


def _with_relations(device: Device, profiles, accounts, proxies) -> DeviceWithRelations:
    """Split a device's assets into live and archived sets."""
    return DeviceWithRelations(
        device=device,
        icloud_profile=next((p for p in profiles if p.status == "active"), None),
        archived_icloud_profiles=[p for p in profiles if p.status == "archived"],
        social_accounts=[a for a in accounts if a.status in ("active", "draft")],
        archived_social_accounts=[a for a in accounts if a.status == "archived"],
        proxy=next((p for p in proxies if p.status == "active"), None),
        archived_proxies=[p for p in proxies if p.status == "archived"],
    )


async def _assets_for(db: AsyncSession, device_ids: List[int]):
    """Fetch every credential asset for the given devices."""
    profiles = (await db.execute(
        select(ICloudProfile)
        .where(ICloudProfile.device_id.in_(device_ids))
        .order_by(ICloudProfile.created_at.desc())
    )).scalars().all()
    accounts = (await db.execute(
        select(SocialAccount)
        .where(SocialAccount.device_id.in_(device_ids))
        .order_by(SocialAccount.created_at.asc())
    )).scalars().all()
    proxies = (await db.execute(
        select(Proxy)
        .where(Proxy.device_id.in_(device_ids))
        .order_by(Proxy.created_at.desc())
    )).scalars().all()
    return profiles, accounts, proxies


@router.get("", response_model=List[DeviceWithRelations])
async def list_devices(
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_console_user),
):
    """List all devices with their iCloud profiles, social accounts and proxies."""
    result = await db.execute(select(Device).order_by(Device.id.asc()))
    devices = result.scalars().all()
    if not devices:
        return []

    profiles, accounts, proxies = await _assets_for(db, [d.id for d in devices])

    return [
        _with_relations(
            device,
            [p for p in profiles if p.device_id == device.id],
            [a for a in accounts if a.device_id == device.id],
            [p for p in proxies if p.device_id == device.id],
        )
        for device in devices
    ]


@router.post("/create", response_model=DeviceResponse, status_code=201)
async def create_device(
    data: DeviceCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_console_user),
):
    """Register a new device."""
    device = Device(
        device_model=data.device_model.strip(),
        manager_id=data.manager_id or None,
        owner=data.owner or None,
    )
    db.add(device)
    await db.commit()
    await db.refresh(device)

    logger.info(f"Device {device.id} ({device.device_model}) created by {user.id}")
    return device


@router.post("/update", response_model=DeviceResponse)
async def update_device(
    data: DeviceUpdate,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_console_user),
):
    """Update a device's model, manager or owner label."""
    device = await get_or_404(db, Device, data.device_id, "Device")

    changes = data.model_dump(exclude_unset=True, exclude={"device_id"})
    if "device_model" in changes and changes["device_model"] is not None:
        device.device_model = changes["device_model"].strip()
    if "manager_id" in changes:
        device.manager_id = changes["manager_id"] or None
    if "owner" in changes:
        device.owner = changes["owner"] or None

    await db.commit()
    await db.refresh(device)
    return device


@router.get("/{device_id}", response_model=DeviceWithRelations)
async def get_device(
    device_id: int,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_console_user),
):
    """Get one device with its credential assets."""
    device = await get_or_404(db, Device, device_id, "Device")
    profiles, accounts, proxies = await _assets_for(db, [device.id])
    return _with_relations(device, profiles, accounts, proxies)


@router.get("/{device_id}/batches", response_model=DeviceBatches)
async def get_device_batches(
    device_id: int,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_console_user),
):
    """Archived assets of a device grouped by the batch they were burned in."""
    device = await get_or_404(db, Device, device_id, "Device")
    profiles, accounts, proxies = await _assets_for(db, [device.id])

    groups = group_by_batch(
        [p for p in profiles if p.status == "archived"],
        [a for a in accounts if a.status == "archived"],
        [p for p in proxies if p.status == "archived"],
    )

    return DeviceBatches(
        device_id=device.id,
        batches=[
            BatchGroupResponse(
                batch_id=batch_id if batch_id is not None else NO_BATCH_KEY,
                profile=group.profile,
                social_accounts=group.social_accounts,
                proxy=group.proxy,
                extra_profiles=group.extra_profiles,
                extra_proxies=group.extra_proxies,
            )
            for batch_id, group in groups.items()
        ],
    )
