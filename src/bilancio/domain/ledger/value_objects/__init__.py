"""Value objects for the ledger domain."""

from bilancio.domain.ledger.value_objects.account_ref import AccountRef
from bilancio.domain.ledger.value_objects.amount import parse_amount
from bilancio.domain.ledger.value_objects.operation_type import OperationType
from bilancio.domain.ledger.value_objects.transaction_draft import TransactionDraft

__all__ = [
    "AccountRef",
    "OperationType",
    "TransactionDraft",
    "parse_amount",
]
