"""Connection and friend request removal, used from the report detail view."""
import logging

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..auth import CurrentUser, require_staff
from ..database import get_db
from ..models import Connection, FriendRequest
from ..schemas.common import SuccessResponse
from ..utils.db_utils import get_or_404

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["relationships"])


@router.delete("/connections/{connection_id}/delete", response_model=SuccessResponse)
async def delete_connection(
    connection_id: str,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Remove a connection between two users."""
    connection = await get_or_404(db, Connection, connection_id, "Connection")
    await db.delete(connection)
    await db.commit()

    logger.info(f"Connection {connection_id} ({connection.user_id_1} <-> {connection.user_id_2}) deleted by {user.id}")
    return SuccessResponse()


@router.delete("/friend-requests/{request_id}/delete", response_model=SuccessResponse)
async def delete_friend_request(
    request_id: str,
    db: AsyncSession = Depends(get_db),
    user: CurrentUser = Depends(require_staff),
):
    """Remove a friend request."""
    friend_request = await get_or_404(db, FriendRequest, request_id, "Friend request")
    await db.delete(friend_request)
    await db.commit()

    logger.info(f"Friend request {request_id} deleted by {user.id}")
    return SuccessResponse()
