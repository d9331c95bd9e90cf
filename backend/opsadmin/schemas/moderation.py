"""Report, refund request and support ticket schemas."""
from datetime import datetime
from typing import List, Optional
from pydantic import BaseModel


class TicketUpdate(BaseModel):
    """PATCH body shared by all ticket kinds; at least one field is required."""
    status: Optional[str] = None
    admin_response: Optional[str] = None


class ReportResponse(BaseModel):
    id: str
    reporter_user_id: str
    reported_user_id: str
    type: str
    reason: str
    description: Optional[str] = None
    evidence_image_url: Optional[str] = None
    status: str
    admin_response: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class ConnectionResponse(BaseModel):
    id: str
    user_id_1: str
    user_id_2: str
    status: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class FriendRequestResponse(BaseModel):
    id: str
    from_user_id: str
    to_user_id: str
    status: Optional[str] = None
    created_at: Optional[datetime] = None

    class Config:
        from_attributes = True


class ReportDetail(ReportResponse):
    """A report with the relationship between the two users involved."""
    connection: Optional[ConnectionResponse] = None
    friend_requests: List[FriendRequestResponse] = []


class ReportStats(BaseModel):
    total: int
    open: int
    closed: int
    recentCount: int  # reports created in the last 7 days


class RefundRequestResponse(BaseModel):
    id: str
    user_id: str
    transaction_id: Optional[str] = None
    reason: str
    amount: Optional[float] = None
    status: str
    admin_response: Optional[str] = None
    reviewed_at: Optional[datetime] = None
    reviewed_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class RefundRequestStats(BaseModel):
    total: int
    pending: int
    approved: int
    rejected: int
    processed: int


class SupportTicketResponse(BaseModel):
    id: str
    user_id: str
    subject: str
    message: str
    status: str
    admin_response: Optional[str] = None
    resolved_at: Optional[datetime] = None
    resolved_by: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class SupportTicketStats(BaseModel):
    total: int
    open: int
    in_progress: int
    resolved: int
    closed: int
