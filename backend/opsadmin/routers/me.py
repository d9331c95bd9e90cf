"""Current user endpoints."""
from fastapi import APIRouter, Depends, Query

from ..auth import CurrentUser, allowed_routes, can_access_route, get_current_user
from ..schemas.user import MeResponse, RouteAccess

router = APIRouter(prefix="/api", tags=["me"])


@router.get("/me", response_model=MeResponse)
async def get_me(user: CurrentUser = Depends(get_current_user)):
    """The caller's role and the console pages it may open."""
    return MeResponse(user_id=user.id, role=user.role, allowed_routes=allowed_routes(user.role))


@router.get("/me/can-access", response_model=RouteAccess)
async def check_route_access(
    path: str = Query(..., min_length=1),
    user: CurrentUser = Depends(get_current_user),
):
    """Whether the caller's role may open a console page or one of its sub-pages."""
    return RouteAccess(path=path, allowed=can_access_route(user.role, path))
