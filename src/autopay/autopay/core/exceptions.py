class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class AuthorizationError(DomainError):
    """Raised when a user lacks permission for an action."""


class NotFoundError(DomainError):
    """Raised when an employee id does not exist."""


class AlreadyRecordedError(DomainError):
    """Raised on a clock event for a day that already has check-in and check-out."""


class PayrollComputationError(DomainError):
    """Raised when a month has no standard working hours to derive a rate from."""
