"""Transaction request/response models."""

from datetime import date
from decimal import Decimal
from typing import Any

from pydantic import Field, field_serializer, field_validator

from .common import (
    BillId,
    BillRef,
    CamelModel,
    OperationTypeValue,
    coerce_date,
    coerce_decimal,
    serialize_amount,
)


class TransactionPayload(CamelModel):
    """Transaction as returned by the backend."""

    id: int
    type: OperationTypeValue
    amount: Decimal = Field(..., ge=0)
    description: str | None = None
    additional_notes: str | None = None
    date: date
    bill: BillRef
    bill_from_which_withdraw: BillRef | None = None

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, v: Any) -> Any:
        return coerce_decimal(v)

    @field_validator("date", mode="before")
    @classmethod
    def parse_date(cls, v: Any) -> Any:
        return coerce_date(v)


class PaginatedTransactionsResponse(CamelModel):
    transactions: list[TransactionPayload]
    total_count: int = Field(..., ge=0)
    page_index: int = Field(..., ge=0)
    page_size: int = Field(..., ge=1)


class AddTransactionRequest(CamelModel):
    type: OperationTypeValue
    amount: Decimal = Field(..., gt=0)
    description: str | None = None
    additional_notes: str | None = None
    date: date
    bill: BillId
    bill_from_which_withdraw: BillId | None = None

    @field_serializer("amount", when_used="json")
    def dump_amount(self, value: Decimal) -> float | int:
        return serialize_amount(value)


class UpdateTransactionRequest(AddTransactionRequest):
    id: int


class DeleteTransactionItem(CamelModel):
    """Entry of a batch delete.

    The backend needs amount and accounts to roll the balances back.
    """

    id: int
    type: OperationTypeValue
    amount: Decimal
    bill: BillId
    bill_from_which_withdraw: BillId | None = None

    @field_serializer("amount", when_used="json")
    def dump_amount(self, value: Decimal) -> float | int:
        return serialize_amount(value)
