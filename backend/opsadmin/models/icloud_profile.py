"""iCloud profile model - Apple ID bound to a device."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime, ForeignKey

from ..database import Base, new_uuid


class ICloudProfile(Base):
    """iCloud credentials; at most one active profile per device."""

    __tablename__ = "icloud_profiles"

    id = Column(String(36), primary_key=True, default=new_uuid)
    device_id = Column(Integer, ForeignKey("devices.id"), nullable=False, index=True)
    email = Column(String, nullable=False)
    credentials = Column(String, nullable=False)
    alias = Column(String, nullable=False)
    birth_date = Column(String, nullable=False)
    country = Column(String, nullable=False)
    street = Column(String, nullable=False)
    city = Column(String, nullable=False)
    zip_code = Column(String, nullable=False)
    status = Column(String, nullable=False, default="active")  # active, archived
    batch_id = Column(String(36), nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
