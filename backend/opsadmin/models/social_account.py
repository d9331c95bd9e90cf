"""Social account model - TikTok/Instagram/Snapchat logins on a device."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey

from ..database import Base, new_uuid

SOCIAL_PLATFORMS = ("TikTok", "Instagram", "Snapchat")


class SocialAccount(Base):
    """A social media account; several may be live on one device."""

    __tablename__ = "social_accounts"

    id = Column(String(36), primary_key=True, default=new_uuid)
    device_id = Column(Integer, ForeignKey("devices.id"), nullable=False, index=True)
    platform = Column(String, nullable=False)  # TikTok, Instagram, Snapchat
    username = Column(String, nullable=False)
    name = Column(String, nullable=True)  # display name on the platform
    credentials = Column(String, nullable=False)
    status = Column(String, nullable=False, default="draft")  # draft, active, archived
    batch_id = Column(String(36), nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
