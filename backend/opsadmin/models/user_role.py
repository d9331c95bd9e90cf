"""UserRole model - console role per auth user."""
from datetime import datetime
from sqlalchemy import Column, String, DateTime

from ..database import Base


class UserRole(Base):
    """Role assignment for a user of the auth provider."""

    __tablename__ = "user_roles"

    user_id = Column(String(36), primary_key=True)
    role = Column(String, nullable=False, default="user")  # admin, dev, developer, promoter, user
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
