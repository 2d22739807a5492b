"""Shared FastAPI dependencies."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID

from fastapi import Header, HTTPException, Request, status

from nutrilog.domain.models import UserRecord  # noqa: TC001

if TYPE_CHECKING:
    from nutrilog.containers import AppContainer


def get_container(request: Request) -> AppContainer:
    """Return the container attached to the running app."""
    return request.app.state.container


def current_user(
    request: Request, x_user_id: str | None = Header(default=None)
) -> UserRecord:
    """Resolve the calling user from the ``X-User-Id`` header.

    Authentication happens upstream; this only maps the forwarded id to a user.
    """
    if not x_user_id:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    try:
        user_id = UUID(x_user_id)
    except ValueError:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED) from None
    user = get_container(request).user_service.get_user(user_id)
    if user is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED)
    return user
