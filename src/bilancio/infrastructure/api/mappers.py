"""Conversion of backend payloads into domain entities.

Parsing is the only way untyped JSON enters the domain. Every function
validates the payload against its contract first and raises
PayloadValidationError on any mismatch instead of guessing.
"""

from __future__ import annotations

from typing import Any, Sequence, TypeVar

from bilancio_auth import UserInfo, UserRole
from bilancio_contracts import (
    AddTransactionRequest,
    BillId,
    BillRef,
    DeleteTransactionItem,
    DescriptionPayload,
    DescriptionsResponse,
    TotalPayload,
    TransactionPayload,
    UpdateDescriptionRequest,
    UpdateTransactionRequest,
    UserInfoResponse,
)
from pydantic import BaseModel
from pydantic import ValidationError as PydanticValidationError

from bilancio.domain.ledger.entities import (
    Description,
    DescriptionCatalog,
    Total,
    Transaction,
)
from bilancio.domain.ledger.exceptions import PayloadValidationError
from bilancio.domain.ledger.value_objects import (
    AccountRef,
    OperationType,
    TransactionDraft,
)
from bilancio.domain.shared import DomainException

M = TypeVar("M", bound=BaseModel)


def parse_model(model: type[M], data: Any, entity: str) -> M:
    """Validate ``data`` against a contract model."""
    try:
        return model.model_validate(data)
    except PydanticValidationError as e:
        raise PayloadValidationError(
            entity,
            errors=e.errors(include_url=False, include_context=False),
        ) from e


def parse_list(model: type[M], data: Any, entity: str) -> list[M]:
    if not isinstance(data, list):
        raise PayloadValidationError(entity, reason="expected a list")
    return [parse_model(model, item, entity) for item in data]


# -------------------------------------------------------------------------
# Transactions
# -------------------------------------------------------------------------


def _account_ref(bill: BillRef | None, field: str) -> AccountRef | None:
    if bill is None:
        return None
    if bill.id is None:
        raise PayloadValidationError("transaction", reason=f"{field} has no id")
    return AccountRef(id=bill.id, name=bill.description)


def transaction_from_payload(payload: TransactionPayload) -> Transaction:
    operation = OperationType(payload.type)
    account = _account_ref(payload.bill, "bill")
    source = _account_ref(payload.bill_from_which_withdraw, "billFromWhichWithdraw")

    if operation is OperationType.WITHDRAWAL and source is None:
        raise PayloadValidationError(
            "transaction",
            reason=f"withdrawal {payload.id} has no source account",
        )
    if operation is not OperationType.WITHDRAWAL and source is not None:
        raise PayloadValidationError(
            "transaction",
            reason=f"{operation.label.lower()} {payload.id} has a source account",
        )

    try:
        return Transaction(
            id=payload.id,
            type=operation,
            amount=payload.amount,
            date=payload.date,
            account=account,
            description=None if operation is OperationType.WITHDRAWAL else payload.description,
            additional_notes=payload.additional_notes,
            source_account=source,
        )
    except DomainException as e:
        raise PayloadValidationError("transaction", reason=e.message) from e


def parse_transaction(data: Any) -> Transaction:
    return transaction_from_payload(parse_model(TransactionPayload, data, "transaction"))


def parse_transactions(data: Any) -> list[Transaction]:
    return [
        transaction_from_payload(p)
        for p in parse_list(TransactionPayload, data, "transaction")
    ]


def draft_to_add_request(draft: TransactionDraft) -> AddTransactionRequest:
    return AddTransactionRequest(
        type=draft.type.value,
        amount=draft.amount,
        description=draft.description,
        additional_notes=draft.additional_notes,
        date=draft.date,
        bill=BillId(id=draft.account_id),
        bill_from_which_withdraw=(
            BillId(id=draft.source_account_id) if draft.source_account_id else None
        ),
    )


def draft_to_update_request(
    transaction_id: int,
    draft: TransactionDraft,
) -> UpdateTransactionRequest:
    return UpdateTransactionRequest(
        id=transaction_id,
        **draft_to_add_request(draft).model_dump(),
    )


def transaction_to_delete_item(txn: Transaction) -> DeleteTransactionItem:
    return DeleteTransactionItem(
        id=txn.id,
        type=txn.type.value,
        amount=txn.amount,
        bill=BillId(id=txn.account.id),
        bill_from_which_withdraw=(
            BillId(id=txn.source_account.id) if txn.source_account else None
        ),
    )


def draft_from_transaction(txn: Transaction, **changes: Any) -> TransactionDraft:
    """Draft for editing ``txn``; keyword arguments override its values."""
    values: dict[str, Any] = {
        "type": txn.type,
        "amount": txn.amount,
        "date": txn.date,
        "account_id": txn.account.id,
        "description": txn.description,
        "additional_notes": txn.additional_notes,
        "source_account_id": txn.source_account.id if txn.source_account else None,
    }
    values.update(changes)
    return TransactionDraft.create(**values)


# -------------------------------------------------------------------------
# Totals and descriptions
# -------------------------------------------------------------------------


def total_from_payload(payload: TotalPayload) -> Total:
    return Total(
        id=payload.id,
        amount=payload.amount,
        description=payload.description,
        can_delete=payload.can_delete,
    )


def parse_totals(data: Any) -> list[Total]:
    return [total_from_payload(p) for p in parse_list(TotalPayload, data, "total")]


def description_from_payload(payload: DescriptionPayload) -> Description:
    try:
        return Description(
            id=payload.id,
            type=OperationType(payload.type),
            description=payload.description,
            occurrences=payload.occurrences,
        )
    except DomainException as e:
        raise PayloadValidationError("description", reason=e.message) from e


def parse_description(data: Any) -> Description:
    return description_from_payload(parse_model(DescriptionPayload, data, "description"))


def parse_description_catalog(data: Any) -> DescriptionCatalog:
    response = parse_model(DescriptionsResponse, data, "description list")
    return DescriptionCatalog(
        earning=tuple(description_from_payload(d) for d in response.earning_description),
        expense=tuple(description_from_payload(d) for d in response.expense_description),
    )


def description_to_update_request(description: Description) -> UpdateDescriptionRequest:
    return UpdateDescriptionRequest(
        id=description.id,
        type=description.type.value,
        description=description.description,
    )


# -------------------------------------------------------------------------
# Users
# -------------------------------------------------------------------------


def parse_user_info(data: Any) -> UserInfo:
    payload = parse_model(UserInfoResponse, data, "user info")
    try:
        role = UserRole(payload.role)
    except ValueError as e:
        raise PayloadValidationError("user info", reason=f"unknown role {payload.role!r}") from e
    return UserInfo(
        person_id=payload.person_id,
        email=payload.email,
        username=payload.username,
        role=role,
        provider=payload.provider,
        firstname=payload.firstname,
        lastname=payload.lastname,
    )


def dump_list(models: Sequence[BaseModel]) -> list[dict[str, Any]]:
    return [m.model_dump(mode="json", by_alias=True) for m in models]
