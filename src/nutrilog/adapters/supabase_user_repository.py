"""Supabase-backed user repository."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrilog.domain.models import Role, UserRecord
from nutrilog.services.users import UserRepository

USER_COLUMNS = "id, email, name, role"


@dataclass
class SupabaseUserRepository(UserRepository):
    """Supabase implementation for user persistence."""

    client: Client

    def get_by_id(self, user_id: UUID) -> UserRecord | None:
        """Return the user with this id, if present."""
        response = (
            self.client.table("users")
            .select(USER_COLUMNS)
            .eq("id", str(user_id))
            .limit(1)
            .execute()
        )
        if response.data:
            return parse_user_row(response.data[0])
        return None

    def get_by_email(self, email: str) -> UserRecord | None:
        """Return the user with this email, if present."""
        response = (
            self.client.table("users")
            .select(USER_COLUMNS)
            .eq("email", email)
            .limit(1)
            .execute()
        )
        if response.data:
            return parse_user_row(response.data[0])
        return None

    def create_user(self, email: str, name: str | None) -> UserRecord:
        """Create a new user row with its settings row and return it."""
        response = (
            self.client.table("users")
            .insert({"email": email, "name": name, "role": Role.USER.value})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user in Supabase")
        user = parse_user_row(response.data[0])
        self.client.table("user_settings").insert(
            {"user_id": str(user.id), "timezone": None}
        ).execute()
        return user


def parse_user_row(row: dict[str, object]) -> UserRecord:
    """Build a user record from a ``users`` row."""
    return UserRecord(
        id=UUID(str(row["id"])),
        email=str(row["email"]),
        name=row.get("name"),
        role=Role(row.get("role") or Role.USER.value),
    )
