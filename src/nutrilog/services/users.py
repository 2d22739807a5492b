"""User-related business logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from nutrilog.domain.models import UserRecord
from nutrilog.errors import ConflictError

_logger = logging.getLogger(__name__)


class UserRepository(Protocol):
    """Persistence interface for user data."""

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with this id, if present."""

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with this email, if present."""

    def create_user(self, email: str, name: str | None) -> UserRecord:
        """Create and return a new user record."""


@dataclass
class UserService:
    """Application service for user lifecycle actions."""

    repository: UserRepository

    def register(self, email: str, name: str | None = None) -> UserRecord:
        """Create a user for a new email address."""
        normalized = email.strip().lower()
        if self.repository.get_by_email(normalized):
            raise ConflictError("User with this email already exists")
        user = self.repository.create_user(normalized, name)
        _logger.info("User registered: id=%s", user.id)
        return user

    def get_user(self, user_id: UUID) -> UserRecord | None:
        """Return a user by id."""
        return self.repository.get_by_id(user_id)
