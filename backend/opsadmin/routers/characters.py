"""AI character API endpoints."""
import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_staff
from ..database import get_db
from ..models import AICharacter, CharacterGeneratedImage, CharacterReferenceImage
from ..schemas.character import (
    CharacterCreate,
    CharacterDelete,
    CharacterResponse,
    CharacterUpdate,
    CharacterWithImages,
    GeneratedImageResponse,
    ReferenceImageDelete,
    ReferenceImageResponse,
    ReferenceImageToggle,
)
from ..schemas.common import SuccessResponse
from ..utils.db_utils import get_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/characters", tags=["characters"])


@router.get("/list", response_model=List[CharacterResponse])
async def list_characters(
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    result = await db.execute(select(AICharacter).order_by(AICharacter.created_at.desc()))
    return result.scalars().all()


@router.post("/create", response_model=CharacterResponse, status_code=201)
async def create_character(
    data: CharacterCreate,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    character = AICharacter(name=data.name.strip())
    db.add(character)
    await db.commit()
    await db.refresh(character)

    logger.info(f"Character {character.id} ({character.name}) created by {user.id}")
    return character


@router.post("/update", response_model=CharacterResponse)
async def update_character(
    data: CharacterUpdate,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """Rename a character."""
    character = await get_or_404(db, AICharacter, data.id, "Character")
    character.name = data.name.strip()
    await db.commit()
    await db.refresh(character)
    return character


@router.post("/delete", response_model=SuccessResponse)
async def delete_character(
    data: CharacterDelete,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Delete a character together with all of its images."""
    character = await get_or_404(db, AICharacter, data.id, "Character")
    await db.delete(character)
    await db.commit()

    logger.info(f"Character {data.id} deleted by {user.id}")
    return SuccessResponse()


@router.get("/{character_id}", response_model=CharacterWithImages)
async def get_character(
    character_id: str,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """Get a character with its reference images and live generated images."""
    character = await get_or_404(db, AICharacter, character_id, "Character")

    references = (await db.execute(
        select(CharacterReferenceImage)
        .where(CharacterReferenceImage.character_id == character_id)
        .order_by(CharacterReferenceImage.created_at.asc())
    )).scalars().all()

    generated = (await db.execute(
        select(CharacterGeneratedImage)
        .where(
            CharacterGeneratedImage.character_id == character_id,
            CharacterGeneratedImage.is_archived.is_(False),
        )
        .order_by(CharacterGeneratedImage.generation_number.desc(), CharacterGeneratedImage.created_at.desc())
    )).scalars().all()

    return CharacterWithImages(
        **CharacterResponse.model_validate(character).model_dump(),
        reference_images=[ReferenceImageResponse.model_validate(r) for r in references],
        generated_images=[GeneratedImageResponse.model_validate(g) for g in generated],
    )


@router.post("/{character_id}/reference-images/toggle-default", response_model=ReferenceImageResponse)
async def toggle_reference_default(
    character_id: str,
    data: ReferenceImageToggle,
    db: AsyncSession = Depends(get_db),
    _user: CurrentUser = Depends(require_staff),
):
    """Mark a reference image as (not) default for generation."""
    image = await get_or_404(db, CharacterReferenceImage, data.id, "Reference image")
    if image.character_id != character_id:
        raise HTTPException(status_code=404, detail="Reference image not found")

    image.is_default = data.is_default
    await db.commit()
    await db.refresh(image)
    return image


@router.post("/{character_id}/reference-images/delete", response_model=SuccessResponse)
async def delete_reference_image(
    character_id: str,
    data: ReferenceImageDelete,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    image = await get_or_404(db, CharacterReferenceImage, data.id, "Reference image")
    if image.character_id != character_id:
        raise HTTPException(status_code=404, detail="Reference image not found")

    await db.delete(image)
    await db.commit()

    logger.info(f"Reference image {data.id} of character {character_id} deleted by {user.id}")
    return SuccessResponse()


@router.post("/{character_id}/generated-images/{image_id}/archive", response_model=GeneratedImageResponse)
async def archive_generated_image(
    character_id: str,
    image_id: str,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Hide a generated image from the character's gallery."""
    image = await get_or_404(db, CharacterGeneratedImage, image_id, "Generated image")
    if image.character_id != character_id:
        raise HTTPException(status_code=404, detail="Generated image not found")

    image.is_archived = True
    await db.commit()
    await db.refresh(image)

    logger.info(f"Generated image {image_id} of character {character_id} archived by {user.id}")
    return image
