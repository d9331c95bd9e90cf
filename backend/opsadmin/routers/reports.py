"""Report moderation API endpoints."""
from datetime import datetime
from typing import Optional, Union

from fastapi import APIRouter, Depends, Query
from sqlalchemy import and_, case, or_, select
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_staff
from ..database import get_db
from ..models import Connection, FriendRequest, Report
from ..schemas.common import Page
from ..schemas.moderation import (
    ConnectionResponse,
    FriendRequestResponse,
    ReportDetail,
    ReportResponse,
    ReportStats,
    TicketUpdate,
)
from ..services.lifecycle import REPORT_LIFECYCLE
from ..services.moderation import (
    DEFAULT_PAGE_SIZE,
    MAX_PAGE_SIZE,
    apply_ticket_update,
    recent_count,
    status_counts,
    ticket_query,
)
from ..utils.db_utils import get_or_404, paginate

router = APIRouter(prefix="/api/reports", tags=["reports"])

REPORT_TYPES = ("user", "message", "image")


async def _report_stats(db: AsyncSession) -> ReportStats:
    counts = await status_counts(db, REPORT_LIFECYCLE)
    return ReportStats(
        total=sum(counts.values()),
        open=sum(counts[s] for s in REPORT_LIFECYCLE.open_statuses),
        closed=sum(counts[s] for s in REPORT_LIFECYCLE.closed_statuses),
        recentCount=await recent_count(db, REPORT_LIFECYCLE),
    )


@router.get("", response_model=Union[ReportStats, Page[ReportResponse]])
async def list_reports(
    status: Optional[str] = Query(None),
    type: Optional[str] = Query(None),
    start_date: Optional[datetime] = Query(None, alias="startDate"),
    end_date: Optional[datetime] = Query(None, alias="endDate"),
    search: Optional[str] = Query(None),
    page: int = Query(1, ge=1),
    page_size: int = Query(DEFAULT_PAGE_SIZE, ge=1, le=MAX_PAGE_SIZE, alias="pageSize"),
    stats: bool = Query(False),
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """List reports newest first.

    ``status`` also accepts ``open`` (pending and reviewed) and ``closed``
    (resolved and dismissed). With ``stats=true`` the queue statistics are
    returned instead of a page.
    """
    if stats:
        return await _report_stats(db)

    query = ticket_query(
        REPORT_LIFECYCLE,
        status=status,
        search=search,
        search_columns=(Report.reason, Report.description, Report.reporter_user_id, Report.reported_user_id),
        start_date=start_date,
        end_date=end_date,
    )
    if type:
        query = query.where(Report.type == type)

    return Page[ReportResponse](**await paginate(db, query, page, page_size))


@router.get("/stats", response_model=ReportStats)
async def get_report_stats(
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """Totals for the report queue; recentCount covers the last 7 days."""
    return await _report_stats(db)


@router.get("/{report_id}", response_model=ReportDetail)
async def get_report(
    report_id: str,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """Get a report with the connection and friend requests between the two users."""
    report = await get_or_404(db, Report, report_id, "Report")
    a, b = report.reporter_user_id, report.reported_user_id

    connection = (await db.execute(
        select(Connection)
        .where(or_(
            and_(Connection.user_id_1 == a, Connection.user_id_2 == b),
            and_(Connection.user_id_1 == b, Connection.user_id_2 == a),
        ))
        .order_by(case((Connection.status == "active", 0), else_=1), Connection.created_at.desc())
        .limit(1)
    )).scalars().first()

    friend_requests = (await db.execute(
        select(FriendRequest)
        .where(or_(
            and_(FriendRequest.from_user_id == a, FriendRequest.to_user_id == b),
            and_(FriendRequest.from_user_id == b, FriendRequest.to_user_id == a),
        ))
        .order_by(FriendRequest.created_at.desc())
    )).scalars().all()

    return ReportDetail(
        **ReportResponse.model_validate(report).model_dump(),
        connection=ConnectionResponse.model_validate(connection) if connection else None,
        friend_requests=[FriendRequestResponse.model_validate(fr) for fr in friend_requests],
    )


@router.patch("/{report_id}", response_model=ReportResponse)
async def update_report(
    report_id: str,
    data: TicketUpdate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Change a report's status and/or admin response.

    The first move out of ``pending`` records the reviewer; later changes
    keep that record.
    """
    report = await get_or_404(db, Report, report_id, "Report")
    await apply_ticket_update(db, REPORT_LIFECYCLE, report, data, user.id)
    return report
