"""Game content models - questions, statements, scenarios and positions."""
from datetime import datetime
from sqlalchemy import Boolean, Column, String, DateTime

from ..database import Base, new_uuid


class WouldYouRatherQuestion(Base):
    __tablename__ = "would_you_rather_questions"

    id = Column(String(36), primary_key=True, default=new_uuid)
    question = Column(String, nullable=False)
    option_a = Column(String, nullable=False)
    option_b = Column(String, nullable=False)
    category_id = Column(String, nullable=True, index=True)
    difficulty_level = Column(String, default="medium")  # easy, medium, hard
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class NeverHaveIEverStatement(Base):
    __tablename__ = "never_have_i_ever_statements"

    id = Column(String(36), primary_key=True, default=new_uuid)
    statement = Column(String, nullable=False)
    category_id = Column(String, nullable=True, index=True)
    difficulty_level = Column(String, default="medium")
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class MostLikelyToQuestion(Base):
    __tablename__ = "most_likely_to_questions"

    id = Column(String(36), primary_key=True, default=new_uuid)
    question = Column(String, nullable=False)
    category_id = Column(String, nullable=True, index=True)
    difficulty_level = Column(String, default="medium")
    is_active = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class RoleplayScenario(Base):
    """Roleplay scenario with up to four player roles."""

    __tablename__ = "roleplay_scenarios"

    id = Column(String(36), primary_key=True, default=new_uuid)
    title = Column(String, nullable=False)
    media = Column(String, nullable=True)
    category_id = Column(String, nullable=True, index=True)
    difficulty_level = Column(String, default="medium")
    is_active = Column(Boolean, default=True)
    shared_description = Column(String, nullable=True)
    player1_role_title = Column(String, nullable=True)
    player1_twist = Column(String, nullable=True)
    player2_role_title = Column(String, nullable=True)
    player2_twist = Column(String, nullable=True)
    player3_role_title = Column(String, nullable=True)
    player3_twist = Column(String, nullable=True)
    player4_role_title = Column(String, nullable=True)
    player4_twist = Column(String, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)


class Position(Base):
    __tablename__ = "positions"

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String, nullable=False)
    image_url = Column(String, nullable=False)
    category_id = Column(String, nullable=True, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
