"""Query and update helpers shared by the moderation queues."""
from datetime import datetime, timedelta
from typing import Dict, Optional

from sqlalchemy import Select, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..schemas.moderation import TicketUpdate
from ..utils.errors import BadRequestError
from .lifecycle import TicketLifecycle

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100
RECENT_DAYS = 7


def ticket_query(
    lifecycle: TicketLifecycle,
    status: Optional[str] = None,
    search: Optional[str] = None,
    search_columns: tuple = (),
    start_date: Optional[datetime] = None,
    end_date: Optional[datetime] = None,
) -> Select:
    """Newest-first select over one ticket kind with the common list filters."""
    model = lifecycle.model
    query = select(model).order_by(model.created_at.desc())

    if status:
        query = query.where(model.status.in_(lifecycle.statuses_for_filter(status)))
    if start_date:
        query = query.where(model.created_at >= start_date)
    if end_date:
        query = query.where(model.created_at <= end_date)
    if search and search_columns:
        pattern = f"%{search}%"
        query = query.where(or_(*(column.ilike(pattern) for column in search_columns)))
    return query


async def status_counts(db: AsyncSession, lifecycle: TicketLifecycle) -> Dict[str, int]:
    """Ticket count per status; statuses with no tickets are reported as 0."""
    model = lifecycle.model
    result = await db.execute(select(model.status, func.count()).group_by(model.status))
    counts = {status: 0 for status in lifecycle.statuses}
    for status, count in result.all():
        counts[status] = count
    return counts


async def recent_count(db: AsyncSession, lifecycle: TicketLifecycle, days: int = RECENT_DAYS) -> int:
    model = lifecycle.model
    since = datetime.utcnow() - timedelta(days=days)
    result = await db.execute(select(func.count()).select_from(model).where(model.created_at >= since))
    return result.scalar() or 0


async def apply_ticket_update(
    db: AsyncSession,
    lifecycle: TicketLifecycle,
    ticket,
    data: TicketUpdate,
    reviewer_id: str,
) -> bool:
    """Apply a status change and/or admin response and commit when anything changed.

    Both fields may be applied in one call. An unknown status is rejected
    before anything is written.
    """
    if data.status is None and data.admin_response is None:
        raise BadRequestError("Either status or admin_response must be provided")

    changed = False
    if data.status is not None:
        try:
            changed = lifecycle.set_status(ticket, data.status, reviewer_id)
        except ValueError as e:
            raise BadRequestError(str(e))

    if data.admin_response is not None:
        lifecycle.set_admin_response(ticket, data.admin_response)
        changed = True

    if changed:
        await db.commit()
        await db.refresh(ticket)
    return changed
