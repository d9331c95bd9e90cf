"""Proxy API endpoints."""
import logging

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_console_user
from ..database import get_db
from ..models import Device, Proxy
from ..schemas.device import ProxyArchive, ProxyCreate, ProxyResponse, ProxyUpdate
from ..services.batches import resolve_batch_id, stamp_batch_id
from ..utils.db_utils import get_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/proxies", tags=["proxies"])

PROXY_FIELDS = ("type", "host", "port", "username", "password", "api_address", "country", "city", "fraud_score", "asn")


def _proxy_values(data) -> dict:
    values = {field: getattr(data, field) for field in PROXY_FIELDS}
    # Empty optional form fields are stored as NULL
    for field in ("username", "password", "api_address", "country", "city", "asn"):
        values[field] = values[field] or None
    return values


@router.post("/create", response_model=ProxyResponse, status_code=201)
async def create_proxy(
    data: ProxyCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_console_user),
):
    """Attach a new active proxy to a device (one active proxy per device)."""
    await get_or_404(db, Device, data.device_id, "Device")

    existing = await db.execute(
        select(Proxy.id).where(Proxy.device_id == data.device_id, Proxy.status == "active")
    )
    if existing.scalars().first():
        raise HTTPException(
            status_code=400,
            detail="Device already has an active proxy. Please archive the existing one first.",
        )

    batch_id = await resolve_batch_id(db, data.device_id)

    proxy = Proxy(device_id=data.device_id, status="active", batch_id=batch_id, **_proxy_values(data))
    db.add(proxy)
    await db.commit()
    await db.refresh(proxy)

    logger.info(f"Proxy {proxy.id} ({proxy.type} {proxy.host}:{proxy.port}) created on device {data.device_id} by {user.id}")
    return proxy


@router.post("/update", response_model=ProxyResponse)
async def update_proxy(
    data: ProxyUpdate,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_console_user),
):
    """Replace a proxy's connection details."""
    proxy = await get_or_404(db, Proxy, data.proxy_id, "Proxy")

    for field, value in _proxy_values(data).items():
        setattr(proxy, field, value)

    await db.commit()
    await db.refresh(proxy)
    return proxy


@router.post("/archive", response_model=ProxyResponse)
async def archive_proxy(
    data: ProxyArchive,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_console_user),
):
    """Archive a proxy, keeping its batch id for the burn history."""
    proxy = await get_or_404(db, Proxy, data.proxy_id, "Proxy")

    await stamp_batch_id(db, proxy)
    proxy.status = "archived"

    await db.commit()
    await db.refresh(proxy)

    logger.info(f"Proxy {proxy.id} archived (batch {proxy.batch_id}) by {user.id}")
    return proxy
