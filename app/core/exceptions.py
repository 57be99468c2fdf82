"""Custom exceptions for the EverFlown back-office."""


class EverFlownException(Exception):
    """Base exception for the EverFlown application."""

    pass


class ValidationError(EverFlownException):
    """Raised when validation fails."""

    pass


class NotFoundError(EverFlownException):
    """Raised when a resource is not found."""

    pass


class ConflictError(EverFlownException):
    """Raised when a write collides with an existing unique value."""

    pass


class ConfigurationError(EverFlownException):
    """Raised when configuration is invalid."""

    pass


class AuthenticationError(EverFlownException):
    """Raised when authentication fails."""

    pass


class AuthorizationError(EverFlownException):
    """Raised when an authenticated caller lacks a permission."""

    pass


class LifecycleError(ValidationError):
    """Base class for status lifecycle violations."""

    pass


class UnknownStateError(LifecycleError):
    """Raised when a status is not a member of the entity's state set."""

    pass


class IllegalTransitionError(LifecycleError):
    """Raised when both statuses are known but the move is not allowed."""

    pass
