"""Social account API endpoints."""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_console_user
from ..database import get_db
from ..models import Device, SocialAccount
from ..schemas.device import (
    SocialAccountArchive,
    SocialAccountCreate,
    SocialAccountResponse,
    SocialAccountUpdate,
)
from ..services.batches import resolve_batch_id, stamp_batch_id
from ..utils.db_utils import get_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/social-accounts", tags=["social-accounts"])


@router.post("/create", response_model=SocialAccountResponse, status_code=201)
async def create_social_account(
    data: SocialAccountCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_console_user),
):
    """Add a social account to a device as a draft in the device's current batch."""
    await get_or_404(db, Device, data.device_id, "Device")

    batch_id = await resolve_batch_id(db, data.device_id)

    account = SocialAccount(
        device_id=data.device_id,
        platform=data.platform,
        username=data.username,
        name=data.name or None,
        credentials=data.credentials,
        status="draft",
        batch_id=batch_id,
    )
    db.add(account)
    await db.commit()
    await db.refresh(account)

    logger.info(f"{account.platform} account @{account.username} added to device {data.device_id} by {user.id}")
    return account


@router.post("/update", response_model=SocialAccountResponse)
async def update_social_account(
    data: SocialAccountUpdate,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_console_user),
):
    """Update a social account's login details, or promote a draft to active."""
    account = await get_or_404(db, SocialAccount, data.account_id, "Social account")

    account.platform = data.platform
    account.username = data.username
    account.name = data.name or None
    account.credentials = data.credentials
    if data.status is not None:
        account.status = data.status

    await db.commit()
    await db.refresh(account)
    return account


@router.post("/archive", response_model=SocialAccountResponse)
async def archive_social_account(
    data: SocialAccountArchive,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_console_user),
):
    """Archive a social account, keeping its batch id for the burn history."""
    account = await get_or_404(db, SocialAccount, data.account_id, "Social account")

    await stamp_batch_id(db, account)
    account.status = "archived"

    await db.commit()
    await db.refresh(account)

    logger.info(f"Social account {account.id} archived (batch {account.batch_id}) by {user.id}")
    return account
