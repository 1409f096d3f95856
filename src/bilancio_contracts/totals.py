"""Account balance ("total") models."""

from decimal import Decimal
from typing import Any

from pydantic import Field, field_serializer, field_validator

from .common import CamelModel, coerce_decimal, serialize_amount


class TotalPayload(CamelModel):
    id: int
    amount: Decimal
    description: str
    can_delete: bool = True

    @field_validator("amount", mode="before")
    @classmethod
    def parse_amount(cls, v: Any) -> Any:
        return coerce_decimal(v)


class TotalUpdateRequest(CamelModel):
    """New or changed account; ``id`` is None for accounts to create."""

    id: int | None = None
    amount: Decimal
    description: str = Field(..., min_length=1)
    can_delete: bool = True

    @field_serializer("amount", when_used="json")
    def dump_amount(self, value: Decimal) -> float | int:
        return serialize_amount(value)
