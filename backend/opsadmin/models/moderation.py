"""Moderation models - reports, refund requests, support tickets and the
user relationships shown alongside a report."""
from datetime import datetime
from sqlalchemy import Column, Float, String, DateTime

from ..database import Base, new_uuid


class Report(Base):
    """A user-submitted report about another user, message or image."""

    __tablename__ = "reports"

    id = Column(String(36), primary_key=True, default=new_uuid)
    reporter_user_id = Column(String(36), nullable=False, index=True)
    reported_user_id = Column(String(36), nullable=False, index=True)
    type = Column(String, nullable=False, default="user")  # user, message, image
    reason = Column(String, nullable=False)
    description = Column(String, nullable=True)
    evidence_image_url = Column(String, nullable=True)
    status = Column(String, nullable=False, default="pending")  # pending, reviewed, resolved, dismissed
    admin_response = Column(String, nullable=True)
    reviewed_at = Column(DateTime, nullable=True)  # first review only
    reviewed_by = Column(String(36), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow)


class RefundRequest(Base):
    __tablename__ = "refund_requests"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    transaction_id = Column(String, nullable=True)
    reason = Column(String, nullable=False)
    amount = Column(Float, nullable=True)
    status = Column(String, nullable=False, default="pending")  # pending, approved, rejected, processed
    admin_response = Column(String, nullable=True)
    reviewed_at = Column(DateTime, nullable=True)
    reviewed_by = Column(String(36), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow)


class SupportTicket(Base):
    __tablename__ = "support_tickets"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id = Column(String(36), nullable=False, index=True)
    subject = Column(String, nullable=False)
    message = Column(String, nullable=False)
    status = Column(String, nullable=False, default="open")  # open, in_progress, resolved, closed
    admin_response = Column(String, nullable=True)
    resolved_at = Column(DateTime, nullable=True)
    resolved_by = Column(String(36), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow, index=True)
    updated_at = Column(DateTime, default=datetime.utcnow)


class Connection(Base):
    """A match/connection between two users."""

    __tablename__ = "connections"

    id = Column(String(36), primary_key=True, default=new_uuid)
    user_id_1 = Column(String(36), nullable=False, index=True)
    user_id_2 = Column(String(36), nullable=False, index=True)
    status = Column(String, nullable=True)  # active or NULL when live
    created_at = Column(DateTime, default=datetime.utcnow)


class FriendRequest(Base):
    __tablename__ = "friend_requests"

    id = Column(String(36), primary_key=True, default=new_uuid)
    from_user_id = Column(String(36), nullable=False, index=True)
    to_user_id = Column(String(36), nullable=False, index=True)
    status = Column(String, nullable=True)  # pending, accepted, declined
    created_at = Column(DateTime, default=datetime.utcnow)
