"""Operation type of a ledger transaction."""

from enum import Enum


class OperationType(str, Enum):
    """Kind of a transaction.

    The values are the identifiers the backend uses on the wire.
    Direction of money is implied by the type alone, amounts are
    always positive.
    """

    INCOME = "ENTRATA"
    EXPENSE = "USCITA"
    WITHDRAWAL = "PRELIEVO"

    @property
    def is_categorized(self) -> bool:
        """Income and expense carry a description, withdrawals do not."""
        return self is not OperationType.WITHDRAWAL

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_label(cls, value: str) -> "OperationType":
        """Resolve a wire value or a human label (case-insensitive)."""
        normalized = value.strip()
        for member in cls:
            if normalized.upper() == member.value:
                return member
            if normalized.lower() == member.label.lower():
                return member
        msg = f"Unknown operation type: {value!r}"
        raise ValueError(msg)


_LABELS = {
    OperationType.INCOME: "Income",
    OperationType.EXPENSE: "Expense",
    OperationType.WITHDRAWAL: "Withdrawal",
}
