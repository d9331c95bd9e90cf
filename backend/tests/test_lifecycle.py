"""Test moderation ticket status lifecycle."""
from datetime import datetime

import pytest

from opsadmin.models import Report, SupportTicket
from opsadmin.services.lifecycle import (
    REFUND_REQUEST_LIFECYCLE,
    REPORT_LIFECYCLE,
    SUPPORT_TICKET_LIFECYCLE,
)

CREATED = datetime(2024, 5, 1, 9, 30)


def _report(**kwargs) -> Report:
    values = dict(
        id="r-1",
        reporter_user_id="u-1",
        reported_user_id="u-2",
        type="user",
        reason="spam",
        status="pending",
        reviewed_at=None,
        reviewed_by=None,
        created_at=CREATED,
        updated_at=CREATED,
    )
    values.update(kwargs)
    return Report(**values)


def test_first_reviewer_is_kept():
    report = _report()

    assert REPORT_LIFECYCLE.set_status(report, "resolved", "moderator-a") is True
    first_review = report.reviewed_at
    assert report.reviewed_by == "moderator-a"
    assert first_review is not None

    assert REPORT_LIFECYCLE.set_status(report, "dismissed", "moderator-b") is True
    assert report.status == "dismissed"
    assert report.reviewed_by == "moderator-a"
    assert report.reviewed_at == first_review


def test_same_status_is_a_no_op():
    stamped = datetime(2024, 5, 2, 10, 0)
    report = _report(status="reviewed", reviewed_at=stamped, reviewed_by="moderator-a")

    assert REPORT_LIFECYCLE.set_status(report, "reviewed", "moderator-b") is False
    assert report.updated_at == CREATED
    assert report.reviewed_by == "moderator-a"
    assert report.reviewed_at == stamped


def test_reopening_does_not_stamp():
    report = _report(status="resolved")

    REPORT_LIFECYCLE.set_status(report, "pending", "moderator-a")

    assert report.status == "pending"
    assert report.reviewed_at is None
    assert report.reviewed_by is None
    assert report.updated_at > CREATED


def test_unknown_status_is_rejected_before_any_change():
    report = _report()

    with pytest.raises(ValueError, match="Invalid status. Must be one of: pending, reviewed, resolved, dismissed"):
        REPORT_LIFECYCLE.set_status(report, "escalated", "moderator-a")

    assert report.status == "pending"
    assert report.updated_at == CREATED


def test_support_tickets_stamp_resolved_fields():
    ticket = SupportTicket(id="t-1", user_id="u-1", subject="Billing", message="Help", status="open",
                           resolved_at=None, resolved_by=None, created_at=CREATED, updated_at=CREATED)

    SUPPORT_TICKET_LIFECYCLE.set_status(ticket, "in_progress", "agent-1")
    SUPPORT_TICKET_LIFECYCLE.set_status(ticket, "closed", "agent-2")

    assert ticket.resolved_by == "agent-1"
    assert ticket.resolved_at is not None


def test_admin_response_always_overwrites():
    report = _report(admin_response="first")

    REPORT_LIFECYCLE.set_admin_response(report, "second")

    assert report.admin_response == "second"
    assert report.updated_at > CREATED


@pytest.mark.parametrize(
    "lifecycle, alias, expected",
    [
        (REPORT_LIFECYCLE, "open", ("pending", "reviewed")),
        (REPORT_LIFECYCLE, "closed", ("resolved", "dismissed")),
        (REPORT_LIFECYCLE, "resolved", ("resolved",)),
        (REFUND_REQUEST_LIFECYCLE, "closed", ("approved", "rejected", "processed")),
        # "open" and "closed" are real support ticket statuses
        (SUPPORT_TICKET_LIFECYCLE, "open", ("open",)),
        (SUPPORT_TICKET_LIFECYCLE, "closed", ("closed",)),
    ],
)
def test_status_filter_aliases(lifecycle, alias, expected):
    assert lifecycle.statuses_for_filter(alias) == expected
