"""Refund request API endpoints."""
from typing import Optional, Union

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_staff
from ..database import get_db
from ..models import RefundRequest
from ..schemas.common import Page
from ..schemas.moderation import RefundRequestResponse, RefundRequestStats, TicketUpdate
from ..services.lifecycle import REFUND_REQUEST_LIFECYCLE
from ..services.moderation import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    apply_ticket_update,
    status_counts,
    ticket_query,
)
from ..utils.db_utils import get_or_404, paginate

router = APIRouter(prefix="/api/refund-requests", tags=["refund-requests"])


@router.get("", response_model=Union[RefundRequestStats, Page[RefundRequestResponse]])
async def list_refund_requests(
    status: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    stats: bool = Query(False),
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """List refund requests newest first, or per-status counts with ``stats=true``."""
    if stats:
        counts = await status_counts(db, REFUND_REQUEST_LIFECYCLE)
        return RefundRequestStats(total=sum(counts.values()), **counts)

    query = ticket_query(
        REFUND_REQUEST_LIFECYCLE,
        status=status,
        search=search,
        search_columns=(RefundRequest.reason, RefundRequest.transaction_id, RefundRequest.user_id),
    )
    return Page[RefundRequestResponse](**await paginate(db, query, page, page_size))


@router.get("/{request_id}", response_model=RefundRequestResponse)
async def get_refund_request(
    request_id: str,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    return await get_or_404(db, RefundRequest, request_id, "Refund request")


@router.patch("/{request_id}", response_model=RefundRequestResponse)
async def update_refund_request(
    request_id: str,
    data: TicketUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Approve, reject or process a refund request, or answer it."""
    refund = await get_or_404(db, RefundRequest, request_id, "Refund request")
    await apply_ticket_update(db, REFUND_REQUEST_LIFECYCLE, refund, data, user.id)
    return refund
