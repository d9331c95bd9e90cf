"""Status lifecycle for moderation tickets.

All three ticket kinds share one shape: any status may be set from any
other, and the first move away from the initial status records who made it
and when. Later changes never overwrite that record.
"""
import logging
from dataclasses import dataclass
from datetime import datetime
from typing import Tuple

from ..models import Report, RefundRequest, SupportTicket

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class TicketLifecycle:
    """Status rules for one kind of moderation ticket."""
    label: str
    model: type
    statuses: Tuple[str, ...]
    initial_status: str
    open_statuses: Tuple[str, ...]
    closed_statuses: Tuple[str, ...]
    reviewed_at_field: str = "reviewed_at"
    reviewed_by_field: str = "reviewed_by"

    def is_valid(self, status: str) -> bool:
        return status in self.statuses

    def statuses_for_filter(self, status_filter: str) -> Tuple[str, ...]:
        """Expand the ``open``/``closed`` aliases used by list filters."""
        if status_filter == "open" and status_filter not in self.statuses:
            return self.open_statuses
        if status_filter == "closed" and status_filter not in self.statuses:
            return self.closed_statuses
        return (status_filter,)

    def set_status(self, ticket, new_status: str, reviewer_id: str) -> bool:
        """Move a ticket to ``new_status``. Returns False when nothing changed.

        Raises ValueError for a status this kind does not have.
        """
        if not self.is_valid(new_status):
            raise ValueError(
                f"Invalid status. Must be one of: {', '.join(self.statuses)}"
            )
        if ticket.status == new_status:
            return False

        now = datetime.utcnow()
        old_status = ticket.status
        ticket.status = new_status
        ticket.updated_at = now

        if getattr(ticket, self.reviewed_at_field) is None and new_status != self.initial_status:
            setattr(ticket, self.reviewed_at_field, now)
            setattr(ticket, self.reviewed_by_field, reviewer_id)

        logger.info(f"{self.label} {ticket.id}: {old_status} -> {new_status} by {reviewer_id}")
        return True

    def set_admin_response(self, ticket, text: str) -> None:
        ticket.admin_response = text
        ticket.updated_at = datetime.utcnow()


REPORT_LIFECYCLE = TicketLifecycle(
    label="Report",
    model=Report,
    statuses=("pending", "reviewed", "resolved", "dismissed"),
    initial_status="pending",
    open_statuses=("pending", "reviewed"),
    closed_statuses=("resolved", "dismissed"),
)

REFUND_REQUEST_LIFECYCLE = TicketLifecycle(
    label="Refund request",
    model=RefundRequest,
    statuses=("pending", "approved", "rejected", "processed"),
    initial_status="pending",
    open_statuses=("pending",),
    closed_statuses=("approved", "rejected", "processed"),
)

SUPPORT_TICKET_LIFECYCLE = TicketLifecycle(
    label="Support ticket",
    model=SupportTicket,
    statuses=("open", "in_progress", "resolved", "closed"),
    initial_status="open",
    open_statuses=("open", "in_progress"),
    closed_statuses=("resolved", "closed"),
    reviewed_at_field="resolved_at",
    reviewed_by_field="resolved_by",
)
