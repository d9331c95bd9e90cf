"""Feature flag model - remote switches read by the mobile app."""
from datetime import datetime
from sqlalchemy import Boolean, Column, String, DateTime

from ..database import Base, new_uuid


class FeatureFlag(Base):
    __tablename__ = "feature_flags"

    id = Column(String(36), primary_key=True, default=new_uuid)
    flag_id = Column(String, nullable=False, unique=True)
    is_enabled = Column(Boolean, default=False)
    description = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
