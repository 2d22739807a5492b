"""Admin service for managing the user roster."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutrilog.domain.models import Role, UserRecord
from nutrilog.errors import InvalidInputError, NotFoundError, PermissionDeniedError

_logger = logging.getLogger(__name__)


class AdminRepository(Protocol):
    """Persistence interface for admin data."""

    def list_users(self) -> list[UserRecord]:
        """Return all users."""

    def set_role(self, user_id: UUID, role: Role) -> UserRecord | None:
        """Change a user's role and return the updated user, if present."""

    def delete_user(self, user_id: UUID) -> bool:
        """Delete a user; return False when no such user exists."""


@dataclass
class AdminService:
    """Service for admin-only roster operations."""

    admin_repository: AdminRepository

    def list_users(self, actor: UserRecord) -> list[UserRecord]:
        """Return every user."""
        _require_admin(actor)
        return self.admin_repository.list_users()

    def change_role(self, actor: UserRecord, user_id: UUID, role: Role) -> UserRecord:
        """Promote or demote another user."""
        _require_admin(actor)
        if user_id == actor.id:
            raise InvalidInputError(
                {"id": "must not be your own account"},
                message="You cannot change your own role",
            )
        updated = self.admin_repository.set_role(user_id, role)
        if updated is None:
            raise NotFoundError("User not found")
        _logger.info("Role changed: user=%s role=%s by=%s", user_id, role, actor.id)
        return updated

    def delete_user(self, actor: UserRecord, user_id: UUID) -> None:
        """Delete another user's account."""
        _require_admin(actor)
        if user_id == actor.id:
            raise InvalidInputError(
                {"id": "must not be your own account"},
                message="You cannot delete your own account",
            )
        if not self.admin_repository.delete_user(user_id):
            raise NotFoundError("User not found")
        _logger.info("User deleted: user=%s by=%s", user_id, actor.id)


def _require_admin(actor: UserRecord) -> None:
    if not actor.is_admin:
        raise PermissionDeniedError("Admin access required")
