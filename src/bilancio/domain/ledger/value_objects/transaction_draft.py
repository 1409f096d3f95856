"""Validated input for creating or editing a transaction."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Any

from bilancio.domain.ledger.exceptions import (
    InvalidTransactionDateError,
    MissingSourceAccountError,
    MissingTransactionDateError,
    UnexpectedSourceAccountError,
)
from bilancio.domain.ledger.value_objects.amount import parse_amount
from bilancio.domain.ledger.value_objects.operation_type import OperationType

EARLIEST_DATE = date(1900, 1, 1)


@dataclass(frozen=True)
class TransactionDraft:
    """A transaction as entered by the user, before the backend assigns an id.

    Use ``create`` rather than the constructor, it normalizes and validates
    the raw form values.
    """

    type: OperationType
    amount: Decimal
    date: date
    account_id: int
    description: str | None = None
    additional_notes: str | None = None
    source_account_id: int | None = None

    @classmethod
    def create(
        cls,
        *,
        type: OperationType | str,  # NOQA: A002
        amount: Any,
        date: date | datetime,  # NOQA: A002
        account_id: int,
        description: str | None = None,
        additional_notes: str | None = None,
        source_account_id: int | None = None,
    ) -> TransactionDraft:
        operation = (
            type if isinstance(type, OperationType) else OperationType.from_label(type)
        )
        day = _as_day(date)
        if day < EARLIEST_DATE:
            raise InvalidTransactionDateError(day, EARLIEST_DATE)

        if operation is OperationType.WITHDRAWAL:
            if not source_account_id:
                raise MissingSourceAccountError
            # withdrawals are never categorized
            description = None
        elif source_account_id:
            raise UnexpectedSourceAccountError(operation.label)

        return cls(
            type=operation,
            amount=parse_amount(amount),
            date=day,
            account_id=account_id,
            description=_blank_to_none(description),
            additional_notes=_blank_to_none(additional_notes),
            source_account_id=source_account_id
            if operation is OperationType.WITHDRAWAL
            else None,
        )


def _as_day(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if not isinstance(value, date):
        raise MissingTransactionDateError(value)
    return value


def _blank_to_none(value: str | None) -> str | None:
    if value is None:
        return None
    stripped = value.strip()
    return stripped or None
