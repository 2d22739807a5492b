"""Supabase admin data access."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from nutrilog.adapters.supabase_user_repository import USER_COLUMNS, parse_user_row
from nutrilog.domain.models import Role, UserRecord
from nutrilog.services.admin import AdminRepository


@dataclass
class SupabaseAdminRepository(AdminRepository):
    """Supabase implementation for admin queries."""

    client: Client

    def list_users(self) -> list[UserRecord]:
        """Return all users ordered by email."""
        response = (
            self.client.table("users").select(USER_COLUMNS).order("email").execute()
        )
        return [parse_user_row(row) for row in response.data or []]

    def set_role(self, user_id: UUID, role: Role) -> UserRecord | None:
        """Update a user's role."""
        response = (
            self.client.table("users")
            .update({"role": role.value})
            .eq("id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return parse_user_row(response.data[0])

    def delete_user(self, user_id: UUID) -> bool:
        """Delete a user row; settings and logs cascade in the database."""
        response = self.client.table("users").delete().eq("id", str(user_id)).execute()
        return bool(response.data)
