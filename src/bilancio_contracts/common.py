"""Shared models for the backend API contracts."""

from datetime import datetime
from decimal import Decimal
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

OperationTypeValue = Literal["ENTRATA", "USCITA", "PRELIEVO"]
CategorizedTypeValue = Literal["ENTRATA", "USCITA"]


class CamelModel(BaseModel):
    """Base for payloads whose JSON keys are camelCase.

    Python attributes stay snake_case; both spellings are accepted on input.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_wire(self) -> dict[str, Any]:
        """JSON-compatible dict using the backend's key names."""
        return self.model_dump(mode="json", by_alias=True)


class BillRef(CamelModel):
    """Account ("bill") as embedded in transaction payloads.

    The backend embeds a partial account: only ``id`` is guaranteed.
    """

    id: int | None = None
    description: str | None = None
    amount: Decimal | None = None
    can_delete: bool | None = None


class BillId(CamelModel):
    """Account reference sent with requests."""

    id: int = Field(..., gt=0)


def coerce_decimal(value: Any) -> Any:
    """Turn JSON floats into Decimals without binary rounding noise."""
    if isinstance(value, float):
        return Decimal(str(value))
    return value


def coerce_date(value: Any) -> Any:
    """Accept full ISO timestamps where a calendar date is expected."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, str) and len(value) > 10 and value[10] in "T ":
        return value[:10]
    return value


def serialize_amount(value: Decimal) -> float | int:
    """Amounts travel as JSON numbers, not strings."""
    if value == value.to_integral_value():
        return int(value)
    return float(value)


__all__ = [
    "BillId",
    "BillRef",
    "CamelModel",
    "CategorizedTypeValue",
    "OperationTypeValue",
    "coerce_date",
    "coerce_decimal",
    "serialize_amount",
]
