"""Profile model - display details for an auth user."""
from datetime import datetime
from sqlalchemy import Column, String, Integer, DateTime

from ..database import Base


class Profile(Base):
    """Public profile row keyed by the auth provider's user id."""

    __tablename__ = "profiles"

    user_id = Column(String(36), primary_key=True)
    name = Column(String, nullable=True)
    username = Column(String, nullable=True)
    profile_picture_url = Column(String, nullable=True)
    age = Column(Integer, nullable=True)
    country_code = Column(String(2), nullable=True)
    gender = Column(String, nullable=True)
    instagram_handle = Column(String, nullable=True)
    snapchat_handle = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
