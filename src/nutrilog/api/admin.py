"""Admin API endpoints for the user roster."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, HTTPException, Request, status

from nutrilog.api.deps import current_user
from nutrilog.api.models import RoleUpdateRequest
from nutrilog.api.serializers import serialize_user
from nutrilog.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from nutrilog.containers import AppContainer

router = APIRouter(prefix="/admin", tags=["admin"])


async def require_admin(user: UserRecord = Depends(current_user)) -> UserRecord:
    """Ensure the caller has the admin role."""
    if not user.is_admin:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return user


@router.get("/users")
async def list_users(
    request: Request, admin: UserRecord = Depends(require_admin)
) -> dict[str, object]:
    """Return every user."""
    container: AppContainer = request.app.state.container
    users = container.admin_service.list_users(admin)
    return {"users": [serialize_user(user) for user in users]}


@router.patch("/users/{user_id}")
async def update_role(
    user_id: UUID,
    body: RoleUpdateRequest,
    request: Request,
    admin: UserRecord = Depends(require_admin),
) -> dict[str, object]:
    """Change another user's role."""
    container: AppContainer = request.app.state.container
    user = container.admin_service.change_role(admin, user_id, body.role)
    return {"user": serialize_user(user), "message": "User role updated successfully"}


@router.delete("/users/{user_id}")
async def delete_user(
    user_id: UUID, request: Request, admin: UserRecord = Depends(require_admin)
) -> dict[str, str]:
    """Delete another user's account."""
    container: AppContainer = request.app.state.container
    container.admin_service.delete_user(admin, user_id)
    return {"message": "User deleted successfully"}
