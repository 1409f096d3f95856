"""Parsing of monetary amounts entered by users."""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any

from bilancio.domain.ledger.exceptions import InvalidAmountError

# Amounts are euros with at most cents as fraction
DECIMAL_PLACES_LIMIT = -2
CENT = Decimal("0.01")


def parse_amount(value: Any) -> Decimal:
    """Parse a user supplied amount into a strictly positive Decimal.

    Strings may use ``,`` as decimal separator ("12,50"). Floats are
    converted through ``str`` so 0.1 stays 0.1.
    """
    if isinstance(value, bool) or value is None:
        raise InvalidAmountError(value, "amount is required")

    if isinstance(value, Decimal):
        amount = value
    else:
        raw = str(value).strip().replace(",", ".")
        if not raw:
            raise InvalidAmountError(value, "amount is required")
        try:
            amount = Decimal(raw)
        except InvalidOperation as e:
            raise InvalidAmountError(value, "not a number") from e

    if not amount.is_finite():
        raise InvalidAmountError(value, "not a number")

    exponent = amount.as_tuple().exponent
    if isinstance(exponent, int) and exponent < DECIMAL_PLACES_LIMIT:
        if amount != amount.quantize(CENT):
            raise InvalidAmountError(value, "more than 2 decimal places")
        amount = amount.quantize(CENT)

    if amount <= 0:
        raise InvalidAmountError(value, "amount must be a positive number")

    return amount
