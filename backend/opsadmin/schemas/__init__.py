"""Pydantic schemas for API request/response models."""
from .common import Page, SuccessResponse
from .device import (
    DeviceCreate,
    DeviceUpdate,
    DeviceResponse,
    DeviceWithRelations,
    DeviceBatches,
    ICloudProfileResponse,
    SocialAccountResponse,
    ProxyResponse,
)
from .game import (
    GameWithCategories,
    CategoryCreate,
    CategoryResponse,
)
from .moderation import (
    TicketUpdate,
    ReportResponse,
    RefundRequestResponse,
    SupportTicketResponse,
)

__all__ = [
    "Page",
    "SuccessResponse",
    "DeviceCreate",
    "DeviceUpdate",
    "DeviceResponse",
    "DeviceWithRelations",
    "DeviceBatches",
    "ICloudProfileResponse",
    "SocialAccountResponse",
    "ProxyResponse",
    "GameWithCategories",
    "CategoryCreate",
    "CategoryResponse",
    "TicketUpdate",
    "ReportResponse",
    "RefundRequestResponse",
    "SupportTicketResponse",
]
