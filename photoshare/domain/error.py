"""Domain layer errors."""

from photoshare.domain.model.validation import ValidationResult


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class PermissionDeniedError(DomainError):
    """Raised when a user fails a capability check on a photo."""

    def __init__(self, action: str, resource_id: str, user_id: str):
        self.action = action
        super().__init__(f"User {user_id} may not {action} photo {resource_id}")


class ValidationFailedError(DomainError):
    """Raised when a candidate entity fails validation.

    Carries the field-level result so it can be returned to the client.
    """

    def __init__(self, result: ValidationResult):
        self.result = result
        super().__init__(f"Validation failed: {', '.join(sorted(result.errors))}")


class AuthenticationError(DomainError):
    """Raised when login credentials do not match a user."""

    pass


class InvalidRecoveryCodeError(DomainError):
    """Raised when a password recovery code is invalid, expired or used."""

    def __init__(self) -> None:
        super().__init__("Invalid or expired recovery code")
