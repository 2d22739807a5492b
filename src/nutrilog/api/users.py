"""User registration endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, Request, status

from nutrilog.api.deps import current_user
from nutrilog.api.models import RegisterRequest
from nutrilog.api.serializers import serialize_user
from nutrilog.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from nutrilog.containers import AppContainer

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", status_code=status.HTTP_201_CREATED)
async def register(body: RegisterRequest, request: Request) -> dict[str, object]:
    """Register a new user."""
    container: AppContainer = request.app.state.container
    user = container.user_service.register(body.email, body.name)
    return {"user": serialize_user(user), "message": "User registered successfully"}


@router.get("/me")
async def me(user: UserRecord = Depends(current_user)) -> dict[str, object]:
    """Return the calling user."""
    return {"user": serialize_user(user)}
