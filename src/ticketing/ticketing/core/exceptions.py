class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when an active record looked up by key does not exist."""


class BusinessRuleViolation(DomainError):
    """Raised when a governed operation is refused (e.g. user can not be deleted)."""


class ConcurrentModificationError(DomainError):
    """Raised when a versioned write lost a race against another writer."""


class IdentitySyncError(Exception):
    """Raised when the identity provider call fails.

    Not a DomainError: local state has already been written when this is raised.
    """

    def __init__(self, message: str, *, operation: str = "", username: str = ""):
        super().__init__(message)
        self.operation = operation
        self.username = username


class DuplicateUsernameError(ValidationError):
    """Raised by the store when a write collides with an existing username."""
