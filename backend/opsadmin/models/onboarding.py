"""Onboarding flow models - screens and the components that render them."""
from datetime import datetime
from sqlalchemy import Boolean, Column, Integer, String, DateTime, JSON

from ..database import Base, new_uuid


class QuizScreen(Base):
    """A quiz screen in the onboarding flow (staging table)."""

    __tablename__ = "quiz_screens_staging"

    id = Column(String(36), primary_key=True, default=new_uuid)
    title = Column(String, nullable=True)
    description = Column(String, nullable=True)
    options = Column(JSON, nullable=True)  # shape depends on component_id
    order_position = Column(Integer, nullable=True)
    event_name = Column(String, nullable=True)  # analytics event fired on view
    should_show = Column(Boolean, default=True)
    component_id = Column(String(36), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class ConversionScreen(Base):
    """A paywall/conversion screen in the onboarding flow (staging table)."""

    __tablename__ = "conversion_screens_staging"

    id = Column(String(36), primary_key=True, default=new_uuid)
    title = Column(String, nullable=False)
    description = Column(String, nullable=False)
    options = Column(JSON, nullable=False, default=list)
    order_position = Column(Integer, nullable=True)
    event_name = Column(String, nullable=True)
    should_show = Column(Boolean, default=True)
    component_id = Column(String(36), nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class OnboardingComponent(Base):
    """Catalogue entry for a client-side screen component."""

    __tablename__ = "onboarding_components"

    id = Column(String(36), primary_key=True, default=new_uuid)
    component_key = Column(String, nullable=False, unique=True)
    component_name = Column(String, nullable=False)
    categories = Column(JSON, nullable=False, default=list)  # ["quiz", "conversion"]
    description = Column(String, nullable=True)
    props_schema = Column(JSON, nullable=True)  # JSON Schema for screen options
    default_options = Column(JSON, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)
