"""Domain exceptions for the task manager.

This module contains domain-specific exceptions that can be raised
by aggregate roots and value objects when invariants are violated.
"""


class DomainError(Exception):
    """Base exception for domain rule violations.

    Raised when a domain invariant is violated or a business rule
    cannot be satisfied. This is distinct from application-level
    errors or infrastructure failures.

    Attributes:
        message: Human-readable description of the violation.
        code: Optional error code for programmatic handling.
    """

    def __init__(self, message: str, code: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.code = code

    def __str__(self) -> str:
        if self.code:
            return f"[{self.code}] {self.message}"
        return self.message


class DomainValidationError(DomainError):
    """Raised when an argument supplied to the domain is invalid."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field
