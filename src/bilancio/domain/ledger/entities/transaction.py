"""Transaction entity as owned by the backend."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, InvalidOperation

from bilancio.domain.ledger.exceptions import InvalidAmountError, NegativeAmountError
from bilancio.domain.ledger.value_objects import AccountRef, OperationType


@dataclass(frozen=True)
class Transaction:
    """A single income, expense or withdrawal.

    Read-only on the client side: create/update/delete go through the
    backend and the local copy is re-fetched afterwards.
    """

    id: int
    type: OperationType
    amount: Decimal
    date: date
    account: AccountRef
    description: str | None = None
    additional_notes: str | None = None
    source_account: AccountRef | None = None

    def __post_init__(self) -> None:
        amount = self.amount
        if not isinstance(amount, Decimal):
            try:
                amount = Decimal(str(amount))
            except InvalidOperation as e:
                raise InvalidAmountError(amount, "not a number") from e
            object.__setattr__(self, "amount", amount)
        if not amount.is_finite():
            raise InvalidAmountError(amount, "not a number")
        if amount < 0:
            raise NegativeAmountError(amount)

    @property
    def is_income(self) -> bool:
        return self.type is OperationType.INCOME

    @property
    def is_expense(self) -> bool:
        return self.type is OperationType.EXPENSE

    @property
    def is_withdrawal(self) -> bool:
        return self.type is OperationType.WITHDRAWAL

    @property
    def signed_amount(self) -> Decimal:
        """Effect on the user's net worth: withdrawals only move money."""
        if self.is_income:
            return self.amount
        if self.is_expense:
            return -self.amount
        return Decimal("0")

    @property
    def category(self) -> str:
        """Grouping key: the description, empty when there is none."""
        return self.description or ""
