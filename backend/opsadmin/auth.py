"""Authentication and role checks.

Access tokens are JWTs issued by the external auth provider; the ``sub``
claim carries the user id. Console roles live in the ``user_roles`` table.
"""
import logging
from dataclasses import dataclass
from typing import Optional

import jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from .config import settings
from .database import get_db
from .models import UserRole

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)

STAFF_ROLES = ("admin", "dev", "developer")
CONSOLE_ROLES = STAFF_ROLES + ("promoter",)

# Promoters only see the home page and the device fleet
PROMOTER_ROUTES = ("/home", "/devices")
STAFF_ROUTES = ("/home", "/games", "/devices", "/feature-flags")


@dataclass
class CurrentUser:
    """The authenticated caller."""
    id: str
    role: Optional[str] = None


def decode_access_token(token: str) -> dict:
    """Verify a bearer token and return its claims."""
    options = {}
    kwargs = {}
    if settings.jwt_audience:
        kwargs["audience"] = settings.jwt_audience
    else:
        options["verify_aud"] = False
    return jwt.decode(
        token,
        settings.jwt_secret,
        algorithms=[settings.jwt_algorithm],
        options=options,
        **kwargs,
    )


async def get_user_role(db: AsyncSession, user_id: str) -> Optional[str]:
    """Get the console role for a user, or None if unassigned."""
    result = await db.execute(select(UserRole.role).where(UserRole.user_id == user_id))
    return result.scalar_one_or_none()


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: AsyncSession = Depends(get_db),
) -> CurrentUser:
    """Resolve the caller from the Bearer token and attach their role."""
    if not credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Unauthorized",
            headers={"WWW-Authenticate": "Bearer"},
        )

    try:
        payload = decode_access_token(credentials.credentials)
    except jwt.ExpiredSignatureError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token expired")
    except jwt.InvalidTokenError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token")

    user_id = payload.get("sub")
    if not user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid token: missing subject")

    return CurrentUser(id=str(user_id), role=await get_user_role(db, str(user_id)))


def require_console_user(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """Require any role that may use the console (devices area)."""
    if user.role not in CONSOLE_ROLES:
        logger.warning(f"Forbidden console access for user {user.id} (role={user.role})")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return user


def require_staff(user: CurrentUser = Depends(get_current_user)) -> CurrentUser:
    """Require admin, dev or developer role."""
    if user.role not in STAFF_ROLES:
        logger.warning(f"Forbidden staff access for user {user.id} (role={user.role})")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Forbidden")
    return user


def allowed_routes(role: Optional[str]) -> list[str]:
    """Console pages a role may open."""
    if role in STAFF_ROLES:
        return list(STAFF_ROUTES)
    if role == "promoter":
        return list(PROMOTER_ROUTES)
    return []


def can_access_route(role: Optional[str], route: str) -> bool:
    """Check a console path (including sub-paths) against the role's pages."""
    if role in STAFF_ROLES:
        return True
    return any(route == page or route.startswith(f"{page}/") for page in allowed_routes(role))
