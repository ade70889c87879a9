"""Domain layer errors.

Client-caused failures (not found, forbidden, validation) are kept apart
from server-caused ones (``DependencyError``) so the interface layer can
answer with the right status instead of a blanket server error.
"""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Missing, oversized or malformed input."""

    pass


class NotFoundError(DomainError):
    """Raised when a resource is missing or soft-deleted.

    Both cases are reported identically so deleted content is
    indistinguishable from content that never existed.
    """

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when an authenticated user may not perform a mutation."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not authorized to {action} {resource} {resource_id}"
        )


class DependencyError(DomainError):
    """Raised when the content store is unavailable."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"Store unavailable during {operation}")
