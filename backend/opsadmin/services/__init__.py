"""Domain services: batch correlation, ordering, ticket lifecycle, onboarding."""
from .batches import resolve_batch_id, group_by_batch, BatchGroup
from .ordering import next_position
from .lifecycle import (
    TicketLifecycle,
    REPORT_LIFECYCLE,
    REFUND_REQUEST_LIFECYCLE,
    SUPPORT_TICKET_LIFECYCLE,
)

__all__ = [
    "resolve_batch_id",
    "group_by_batch",
    "BatchGroup",
    "next_position",
    "TicketLifecycle",
    "REPORT_LIFECYCLE",
    "REFUND_REQUEST_LIFECYCLE",
    "SUPPORT_TICKET_LIFECYCLE",
]
