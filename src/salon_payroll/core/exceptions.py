class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(ValidationError):
    """Raised when a requested entity does not exist."""


class PayslipSourceError(DomainError):
    """Raised when a payslip source cannot produce a payslip (e.g. remote API down)."""
