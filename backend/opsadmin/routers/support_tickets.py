"""Support ticket API endpoints."""
from typing import Optional, Union

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_staff
from ..database import get_db
from ..models import SupportTicket
from ..schemas.common import Page
from ..schemas.moderation import SupportTicketResponse, SupportTicketStats, TicketUpdate
from ..services.lifecycle import SUPPORT_TICKET_LIFECYCLE
from ..services.moderation import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    apply_ticket_update,
    status_counts,
    ticket_query,
)
from ..utils.db_utils import get_or_404, paginate

router = APIRouter(prefix="/api/support-tickets", tags=["support-tickets"])


@router.get("", response_model=Union[SupportTicketStats, Page[SupportTicketResponse]])
async def list_support_tickets(
    status: Optional[str] = Query(None),
    search: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    stats: bool = Query(False),
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """List support tickets newest first, or per-status counts with ``stats=true``."""
    if stats:
        counts = await status_counts(db, SUPPORT_TICKET_LIFECYCLE)
        return SupportTicketStats(total=sum(counts.values()), **counts)

    query = ticket_query(
        SUPPORT_TICKET_LIFECYCLE,
        status=status,
        search=search,
        search_columns=(SupportTicket.subject, SupportTicket.message, SupportTicket.user_id),
    )
    return Page[SupportTicketResponse](**await paginate(db, query, page, page_size))


@router.get("/{ticket_id}", response_model=SupportTicketResponse)
async def get_support_ticket(
    ticket_id: str,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    return await get_or_404(db, SupportTicket, ticket_id, "Support ticket")


@router.patch("/{ticket_id}", response_model=SupportTicketResponse)
async def update_support_ticket(
    ticket_id: str,
    data: TicketUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Move a support ticket along and/or reply to it.

    The first move out of ``open`` records who picked the ticket up in
    resolved_at/resolved_by.
    """
    ticket = await get_or_404(db, SupportTicket, ticket_id, "Support ticket")
    await apply_ticket_update(db, SUPPORT_TICKET_LIFECYCLE, ticket, data, user.id)
    return ticket
