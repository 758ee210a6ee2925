"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class InsufficientFundsError(DomainError):
    """Withdrawal not covered by the available balance."""


def amount_not_positive() -> str:
    """Return message for a zero or negative amount."""
    return "Invalid. Amount should be positive"


def insufficient_balance() -> str:
    """Return message for a withdrawal the balance cannot cover."""
    return "Insufficient Balance"


def wrong_dimension_count(shape_name: str, expected: int, got: int) -> str:
    """Return message for a shape built with the wrong number of dimensions."""
    return (
        f"{shape_name} needs {expected} dimension{'s' if expected != 1 else ''}, "
        f"got {got}"
    )
