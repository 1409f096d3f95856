"""Reporting domain exceptions."""

from typing import Any

from bilancio.domain.shared.exceptions import ErrorCode, ValidationError


class MalformedDateError(ValidationError):
    """Raised when a transaction date cannot be split into year and month.

    Dates are validated when payloads are parsed, so reaching the
    aggregator with one of these is a programming error upstream.
    """

    def __init__(self, transaction_id: Any, value: Any) -> None:
        super().__init__(
            message=(
                f"Transaction '{transaction_id}' has a malformed date: {value!r}"
            ),
            code=ErrorCode.INVALID_DATE,
            details={"transaction_id": transaction_id, "date": repr(value)},
        )
