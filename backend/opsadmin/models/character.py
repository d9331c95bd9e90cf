"""AI character models - characters and their image sets."""
from datetime import datetime
from sqlalchemy import Boolean, Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship

from ..database import Base, new_uuid


class AICharacter(Base):
    """A generated persona used for image generation."""

    __tablename__ = "ai_characters"

    id = Column(String(36), primary_key=True, default=new_uuid)
    name = Column(String, nullable=False)
    created_at = Column(DateTime, default=datetime.utcnow)
    updated_at = Column(DateTime, default=datetime.utcnow, onupdate=datetime.utcnow)

    reference_images = relationship(
        "CharacterReferenceImage", back_populates="character", cascade="all, delete-orphan", passive_deletes=True
    )
    generated_images = relationship(
        "CharacterGeneratedImage", back_populates="character", cascade="all, delete-orphan", passive_deletes=True
    )


class CharacterReferenceImage(Base):
    __tablename__ = "character_reference_images"

    id = Column(String(36), primary_key=True, default=new_uuid)
    character_id = Column(String(36), ForeignKey("ai_characters.id", ondelete="CASCADE"), nullable=False)
    image_url = Column(String, nullable=False)
    is_default = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    character = relationship("AICharacter", back_populates="reference_images")


class CharacterGeneratedImage(Base):
    __tablename__ = "character_generated_images"

    id = Column(String(36), primary_key=True, default=new_uuid)
    character_id = Column(String(36), ForeignKey("ai_characters.id", ondelete="CASCADE"), nullable=False)
    image_url = Column(String, nullable=False)
    prompt = Column(String, nullable=False)
    replicate_prediction_id = Column(String, nullable=True)
    generation_number = Column(Integer, nullable=False, default=1)
    is_archived = Column(Boolean, default=False)
    created_at = Column(DateTime, default=datetime.utcnow)

    character = relationship("AICharacter", back_populates="generated_images")
