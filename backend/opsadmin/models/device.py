"""Device model - phones used to run farmed accounts."""
from datetime import datetime
from sqlalchemy import Column, Integer, String, DateTime

from ..database import Base


class Device(Base):
    """A physical device; root of its credential bundle."""

    __tablename__ = "devices"

    id = Column(Integer, primary_key=True, autoincrement=True)
    device_model = Column(String, nullable=False)
    manager_id = Column(String, nullable=True)  # user id of the managing admin
    owner = Column(String, nullable=True)  # free-text owner label
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
