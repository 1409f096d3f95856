"""Shared domain building blocks."""

from bilancio.domain.shared.exceptions import (
    BusinessRuleViolation,
    DomainException,
    ErrorCode,
    ValidationError,
)

__all__ = [
    "BusinessRuleViolation",
    "DomainException",
    "ErrorCode",
    "ValidationError",
]
