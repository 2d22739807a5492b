"""Application error types."""


class NutrilogError(Exception):
    """Base class for expected service failures."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(NutrilogError):
    status_code = 404


class PermissionDeniedError(NutrilogError):
    status_code = 403


class ConflictError(NutrilogError):
    status_code = 409


class FoodInUseError(NutrilogError):
    """A catalog food cannot be removed while logs reference it."""

    status_code = 400

    def __init__(self, message: str, count: int) -> None:
        super().__init__(message)
        self.count = count


class InvalidInputError(NutrilogError, ValueError):
    """Input failed validation; ``fields`` maps field names to reasons."""

    status_code = 400

    def __init__(self, fields: dict[str, str], message: str | None = None) -> None:
        if message is None:
            summary = ", ".join(f"{name}: {reason}" for name, reason in fields.items())
            message = f"Invalid input ({summary})"
        super().__init__(message)
        self.fields = fields
