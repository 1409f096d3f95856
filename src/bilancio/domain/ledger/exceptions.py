"""Ledger domain exceptions."""

from datetime import date
from typing import Any

from bilancio.domain.shared.exceptions import (
    BusinessRuleViolation,
    ErrorCode,
    ValidationError,
)


class InvalidAmountError(ValidationError):
    """Raised when an invalid amount is provided."""

    def __init__(self, amount: Any, reason: str = "invalid format") -> None:
        super().__init__(
            message=f"Invalid amount '{amount}': {reason}",
            code=ErrorCode.INVALID_AMOUNT,
            details={"amount": str(amount), "reason": reason},
        )


class NegativeAmountError(ValidationError):
    """Raised when a transaction carries a negative amount."""

    def __init__(self, amount: Any) -> None:
        super().__init__(
            message=f"Amount must not be negative, got {amount}",
            code=ErrorCode.INVALID_AMOUNT,
            details={"amount": str(amount)},
        )


class InvalidTransactionDateError(ValidationError):
    """Raised when a transaction date is outside the accepted range."""

    def __init__(self, value: date, earliest: date) -> None:
        super().__init__(
            message=f"Transaction date {value.isoformat()} is before {earliest.isoformat()}",
            code=ErrorCode.INVALID_DATE,
            details={"date": value.isoformat(), "earliest": earliest.isoformat()},
        )


class MissingTransactionDateError(ValidationError):
    """Raised when a transaction has no date or the value is not a calendar date."""

    def __init__(self, value: Any = None) -> None:
        reason = "is required" if value is None else f"must be a date, got {value!r}"
        super().__init__(
            message=f"Transaction date {reason}",
            code=ErrorCode.INVALID_DATE,
            details={"date": None if value is None else str(value)},
        )


class InvalidDescriptionError(ValidationError):
    """Raised when a description (category) is empty, too long or mistyped."""

    def __init__(self, reason: str, description: str | None = None) -> None:
        super().__init__(
            message=f"Invalid description: {reason}",
            code=ErrorCode.INVALID_DESCRIPTION,
            details={"description": description, "reason": reason},
        )


class MissingSourceAccountError(BusinessRuleViolation):
    """Raised when a withdrawal has no account to withdraw from."""

    def __init__(self) -> None:
        super().__init__(
            message="A withdrawal needs the account the money is taken from",
            code=ErrorCode.MISSING_SOURCE_ACCOUNT,
        )


class UnexpectedSourceAccountError(BusinessRuleViolation):
    """Raised when income or expense carries a withdrawal source account."""

    def __init__(self, operation: str) -> None:
        super().__init__(
            message=f"Only withdrawals have a source account, got one for {operation}",
            code=ErrorCode.UNEXPECTED_SOURCE_ACCOUNT,
            details={"operation": operation},
        )


class PayloadValidationError(ValidationError):
    """Raised when data received from the backend has an unexpected shape."""

    def __init__(
        self,
        entity: str,
        errors: list[dict[str, Any]] | None = None,
        reason: str | None = None,
    ) -> None:
        message = f"Malformed {entity} payload"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message=message,
            code=ErrorCode.INVALID_PAYLOAD,
            details={"entity": entity, "errors": errors or []},
        )
